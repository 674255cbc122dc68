"""Live OpenAPI documents for FastAPI applications.

The document is derived from the application's registered routes on demand
and filtered through an exclusion policy that can change at runtime.

Usage:
    from fastapi import FastAPI
    from openapi_live import openapi

    app = FastAPI()
    docs = openapi(exclude={"tags": ["internal"]})
    docs.install(app)

    # later, without a restart
    docs.openapi.add_excluded_paths("/debug")
"""

from openapi_live.application.services import (
    ExclusionStore,
    OpenAPIDocumentService,
    to_openapi_path,
    to_openapi_schema,
    with_headers,
)
from openapi_live.domain.entities import (
    BodySpec,
    HTTPMethod,
    ParameterLocation,
    ParameterSpec,
    ResponseSpec,
    RouteDefinition,
    RouteDetail,
)
from openapi_live.domain.value_objects import ExclusionPolicy
from openapi_live.infrastructure.routing import FastAPIRouteSource, StaticRouteSource
from openapi_live.infrastructure.schema import PydanticSchemaConverter
from openapi_live.presentation import OpenAPIConfig, OpenAPIPlugin, openapi

__version__ = "0.1.0"

__all__ = [
    "BodySpec",
    "ExclusionPolicy",
    "ExclusionStore",
    "FastAPIRouteSource",
    "HTTPMethod",
    "OpenAPIConfig",
    "OpenAPIDocumentService",
    "OpenAPIPlugin",
    "ParameterLocation",
    "ParameterSpec",
    "PydanticSchemaConverter",
    "ResponseSpec",
    "RouteDefinition",
    "RouteDetail",
    "StaticRouteSource",
    "openapi",
    "to_openapi_path",
    "to_openapi_schema",
    "with_headers",
]
