"""Route sources."""

from openapi_live.infrastructure.routing.fastapi_source import FastAPIRouteSource
from openapi_live.infrastructure.routing.static_source import StaticRouteSource

__all__ = ["FastAPIRouteSource", "StaticRouteSource"]
