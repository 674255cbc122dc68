"""HTML pages for browsing the document."""

from openapi_live.presentation.renderers.scalar import render_scalar
from openapi_live.presentation.renderers.swagger_ui import render_swagger_ui

__all__ = ["render_scalar", "render_swagger_ui"]
