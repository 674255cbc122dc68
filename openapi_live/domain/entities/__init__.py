"""Domain entities.

Usage:
    from openapi_live.domain.entities import RouteDefinition, RouteDetail
"""

from openapi_live.domain.entities.route_definition import (
    WILDCARD_EXPANSION,
    BodySpec,
    HTTPMethod,
    ParameterLocation,
    ParameterSpec,
    ResponseSpec,
    RouteDefinition,
    RouteDetail,
)

__all__ = [
    "WILDCARD_EXPANSION",
    "BodySpec",
    "HTTPMethod",
    "ParameterLocation",
    "ParameterSpec",
    "ResponseSpec",
    "RouteDefinition",
    "RouteDetail",
]
