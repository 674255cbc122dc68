"""Route source over a fixed list of route definitions.

Used by scripts that document routes not served by FastAPI, and in tests.
"""

from collections.abc import Iterable, Sequence

from openapi_live.domain.entities.route_definition import RouteDefinition


class StaticRouteSource:
    """In-memory route collection.

    Args:
        routes: Initial routes, in registration order.
    """

    def __init__(self, routes: Iterable[RouteDefinition] = ()) -> None:
        self._routes: list[RouteDefinition] = list(routes)

    def add(self, *routes: RouteDefinition) -> "StaticRouteSource":
        """Register routes; returns self for chaining."""
        self._routes.extend(routes)
        return self

    def count(self) -> int:
        """Number of registered routes."""
        return len(self._routes)

    def routes(self) -> Sequence[RouteDefinition]:
        """Copy of the registered routes."""
        return list(self._routes)
