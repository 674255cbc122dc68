"""Presentation layer: FastAPI plugin, HTML pages and the export CLI."""

from openapi_live.presentation.config import OpenAPIConfig
from openapi_live.presentation.plugin import OpenAPIPlugin, openapi

__all__ = ["OpenAPIConfig", "OpenAPIPlugin", "openapi"]
