"""OpenAPI plugin for FastAPI applications.

Builds an APIRouter serving the live OpenAPI document and a documentation
page, plus the exclusion store controlling what the document shows.

Endpoints:
    GET {spec_path}  OpenAPI document (JSON), rebuilt only when routes or
                     exclusions changed
    GET {path}       Scalar or Swagger UI page

Both routes are hidden from FastAPI's own schema and never appear in the
generated document.

Usage:
    from fastapi import FastAPI
    from openapi_live import openapi

    app = FastAPI()
    docs = openapi(documentation={"info": {"title": "Shop API"}})
    docs.install(app)

    docs.openapi.add_excluded_paths("/internal").add_excluded_tags("admin")
"""

import threading
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from openapi_live.application.services.document_assembler import build_info
from openapi_live.application.services.document_service import (
    OpenAPIDocumentService,
)
from openapi_live.application.services.exclusion_store import ExclusionStore
from openapi_live.application.services.schema_cache import SchemaCache
from openapi_live.core.container import get_logger, get_schema_converter
from openapi_live.core.result import Failure, Success
from openapi_live.infrastructure.routing.fastapi_source import FastAPIRouteSource
from openapi_live.presentation.config import OpenAPIConfig
from openapi_live.presentation.renderers import render_scalar, render_swagger_ui

BUILD_FAILED_DETAIL = "Failed to build OpenAPI document"


@dataclass
class OpenAPIPlugin:
    """A configured plugin instance.

    Attributes:
        config: Resolved configuration.
        router: Router holding the page and spec routes (empty when disabled).
        openapi: Exclusion store; the runtime control surface.
        service: Document service shared by the routes and the export CLI.
    """

    config: OpenAPIConfig
    router: APIRouter
    openapi: ExclusionStore
    service: OpenAPIDocumentService

    def install(self, app: FastAPI) -> FastAPI:
        """Register the plugin routes on app."""
        app.include_router(self.router)
        return app


def _page_options(config: OpenAPIConfig) -> dict[str, Any]:
    if config.provider == "swagger-ui":
        return {"url": config.spec_path, **config.swagger}
    return {"url": config.spec_path, "_integration": "fastapi", **config.scalar}


def _render_page(
    config: OpenAPIConfig, embedded_spec: dict[str, Any] | None = None
) -> str:
    info = build_info(config.documentation)
    if embedded_spec is not None:
        info = embedded_spec.get("info", info)
    renderer = render_swagger_ui if config.provider == "swagger-ui" else render_scalar
    return renderer(info, _page_options(config), embedded_spec)


def openapi(config: OpenAPIConfig | None = None, **overrides: Any) -> OpenAPIPlugin:
    """Build an OpenAPI plugin.

    Args:
        config: Full configuration; built from overrides when omitted.
        **overrides: OpenAPIConfig fields, used when config is None.

    Returns:
        OpenAPIPlugin ready to install on an application.

    Raises:
        TypeError: If both config and overrides are given.
    """
    if config is not None and overrides:
        raise TypeError("Pass either an OpenAPIConfig or keyword overrides, not both")
    config = config or OpenAPIConfig(**overrides)

    logger = get_logger().bind(plugin="openapi", spec_path=config.spec_path)
    lock = threading.RLock()
    cache = SchemaCache(lock=lock)
    store = ExclusionStore(config.exclude, lock=lock, logger=logger)
    service = OpenAPIDocumentService(
        store=store,
        cache=cache,
        converter=config.converter or get_schema_converter(),
        documentation=config.documentation,
        reserved_paths=config.reserved_paths,
        references=config.references,
        map_json_schema=config.map_json_schema,
        logger=logger,
    )

    router = APIRouter()
    plugin = OpenAPIPlugin(config=config, router=router, openapi=store, service=service)
    if not config.enabled:
        return plugin

    def current_document(request: Request) -> dict[str, Any]:
        # Both readers only serialize the document, so the cached one is served.
        match service.get_document(FastAPIRouteSource(request.app), shared=True):
            case Success(value=document):
                return document
            case Failure():
                # Already logged by the service; keep internals out of the body.
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=BUILD_FAILED_DETAIL,
                )

    @router.get(config.spec_path, include_in_schema=False)
    def openapi_document(request: Request) -> JSONResponse:
        """Serve the current OpenAPI document."""
        return JSONResponse(content=current_document(request))

    if config.provider is None:
        return plugin

    if config.embed_spec:

        @router.get(config.path, include_in_schema=False)
        def openapi_page(request: Request) -> HTMLResponse:
            """Serve the documentation page with the document inlined."""
            return HTMLResponse(_render_page(config, current_document(request)))

    else:
        page = _render_page(config)

        @router.get(config.path, include_in_schema=False)
        def openapi_page() -> HTMLResponse:
            """Serve the documentation page."""
            return HTMLResponse(page)

    return plugin
