"""RouteSourceProtocol - route introspection contract.

The serving framework owns route registration; the document generator only
needs to read the current routes and their count. The count is the cache
staleness signal, so it must be cheap.

Implementations:
    FastAPIRouteSource: reads ``app.routes`` of a FastAPI application
    StaticRouteSource: fixed list of RouteDefinition (scripts, tests)
"""

from collections.abc import Sequence
from typing import Protocol

from openapi_live.domain.entities.route_definition import RouteDefinition


class RouteSourceProtocol(Protocol):
    """Read-only view of the framework's route collection."""

    def count(self) -> int:
        """Number of registered routes (framework-level, not per method).

        Returns:
            Current route count.
        """
        ...

    def routes(self) -> Sequence[RouteDefinition]:
        """Current routes in registration order, one entry per method.

        Returns:
            Route definitions.
        """
        ...
