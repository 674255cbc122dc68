"""Framework-neutral route definitions.

A RouteDefinition is a registered (method, path pattern, metadata) triple read
from the serving framework. The schema converter and route filter only ever
see these types, never framework objects.

Core types:
    RouteDefinition: Method + path pattern + RouteDetail
    RouteDetail: OpenAPI metadata (operation id, tags, hide flag, shapes)
    HTTPMethod: HTTP method enum, including the ALL wildcard
    ParameterSpec / BodySpec / ResponseSpec: value-shape descriptors

A "shape" is whatever the type-to-schema converter understands: a Python type
annotation (``int``, ``list[User]``, a pydantic model), a ready-made JSON
Schema mapping, or None for "no schema".

Usage:
    from openapi_live.domain.entities import HTTPMethod, RouteDefinition, RouteDetail

    route = RouteDefinition(
        method=HTTPMethod.GET,
        path="/users/:id",
        detail=RouteDetail(tags=("users",), summary="Get user"),
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for routes.

    Attributes:
        ALL: Wildcard route answering every method.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    ALL = "ALL"


# Methods a wildcard route is documented under.
WILDCARD_EXPANSION: tuple[HTTPMethod, ...] = (
    HTTPMethod.GET,
    HTTPMethod.POST,
    HTTPMethod.PUT,
    HTTPMethod.PATCH,
    HTTPMethod.DELETE,
)


# =============================================================================
# Parameter Location
# =============================================================================


class ParameterLocation(str, Enum):
    """OpenAPI parameter locations (``in`` field)."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


# =============================================================================
# Shape descriptors
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ParameterSpec:
    """Single operation parameter.

    Attributes:
        name: Parameter name as sent on the wire (alias, not attribute name).
        location: Where the parameter lives.
        shape: Value-shape descriptor for the parameter schema.
        required: Whether the parameter is required (path params always are).
        description: Optional human-readable description.
        deprecated: Whether the parameter is deprecated.
    """

    name: str
    location: ParameterLocation
    shape: Any = None
    required: bool = False
    description: str | None = None
    deprecated: bool = False


@dataclass(frozen=True, kw_only=True)
class BodySpec:
    """Request body descriptor."""

    shape: Any
    required: bool = True
    media_type: str = "application/json"
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class ResponseSpec:
    """Response descriptor for one status code.

    Attributes:
        status: HTTP status code or OpenAPI key ("default", "2XX").
        description: Response description (required by OpenAPI).
        shape: Value-shape descriptor for the body; None means no content.
        media_type: Content type of the body.
    """

    status: int | str
    description: str = "Successful Response"
    shape: Any = None
    media_type: str = "application/json"


# =============================================================================
# Route Detail
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteDetail:
    """OpenAPI-facing metadata attached to a route.

    OpenAPI documentation:
        operation_id: Stable operation ID (generated when None)
        summary: Short description
        description: Long description (markdown)
        tags: Ordered tags; used for grouping and tag exclusion
        deprecated: Marks the operation deprecated
        security: Security requirement objects, verbatim
        security_schemes: Scheme definitions named by security, by name

    Shapes:
        parameters: Path/query/header/cookie parameters
        body: Request body, if any
        responses: Responses by status; empty means a bare 200

    Behavior:
        hide: Never document this route
        extra: Partial operation object merged last (see with_headers)
    """

    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()
    deprecated: bool = False
    security: list[dict[str, list[str]]] | None = None
    security_schemes: Mapping[str, Mapping[str, Any]] | None = None
    parameters: tuple[ParameterSpec, ...] = ()
    body: BodySpec | None = None
    responses: tuple[ResponseSpec, ...] = ()
    hide: bool = False
    extra: Mapping[str, Any] | None = None


# =============================================================================
# Route Definition
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteDefinition:
    """A registered route as seen by the document generator.

    Attributes:
        method: HTTP method, or HTTPMethod.ALL for wildcard routes.
        path: Path pattern; ``:name``, ``:name?``, ``{name}`` and
            ``{name:converter}`` parameter syntaxes are accepted.
        detail: OpenAPI metadata.
    """

    method: HTTPMethod | str
    path: str
    detail: RouteDetail = field(default_factory=RouteDetail)

    @property
    def method_name(self) -> str:
        """Upper-cased method string."""
        if isinstance(self.method, HTTPMethod):
            return self.method.value
        return str(self.method).upper()

    @property
    def is_wildcard(self) -> bool:
        """True for routes registered for every method."""
        return self.method_name in {HTTPMethod.ALL.value, "*"}
