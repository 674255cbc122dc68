"""Route source reading a FastAPI application's live route table.

Each ``APIRoute`` becomes one RouteDefinition per HTTP method:

    path / query / header / cookie params  ->  ParameterSpec (whole Depends tree)
    security scheme dependencies            ->  detail.security + security_schemes
    body_field                              ->  BodySpec
    status_code + response_model            ->  primary ResponseSpec
    responses={...}                         ->  extra ResponseSpecs
    include_in_schema=False                 ->  detail.hide
    openapi_extra                           ->  detail.extra

Plain Starlette routes are documented with method and path only; mounts and
websocket routes are skipped. The route count is ``len(app.routes)``, which
grows with every registration.

Usage:
    source = FastAPIRouteSource(request.app)
    source.count()
    source.routes()
"""

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from typing import Any

from fastapi import FastAPI
from fastapi.datastructures import DefaultPlaceholder
from fastapi.dependencies.models import Dependant
from fastapi.encoders import jsonable_encoder
from fastapi.routing import APIRoute, APIRouter
from fastapi.security import OAuth2, OpenIdConnect
from fastapi.security.base import SecurityBase
from starlette.routing import Route

from openapi_live.domain.entities.route_definition import (
    BodySpec,
    ParameterLocation,
    ParameterSpec,
    ResponseSpec,
    RouteDefinition,
    RouteDetail,
)

_PARAMETER_SOURCES: tuple[tuple[str, ParameterLocation], ...] = (
    ("path_params", ParameterLocation.PATH),
    ("query_params", ParameterLocation.QUERY),
    ("header_params", ParameterLocation.HEADER),
    ("cookie_params", ParameterLocation.COOKIE),
)


def _tag_name(tag: str | Enum) -> str:
    return tag.value if isinstance(tag, Enum) else str(tag)


def _parameter_specs(
    fields: Iterable[Any], location: ParameterLocation
) -> list[ParameterSpec]:
    specs: list[ParameterSpec] = []
    for field in fields:
        info = field.field_info
        if not getattr(info, "include_in_schema", True):
            continue
        name = field.alias
        if (
            location is ParameterLocation.HEADER
            and field.name == field.alias
            and getattr(info, "convert_underscores", False)
        ):
            name = field.name.replace("_", "-")
        specs.append(
            ParameterSpec(
                name=name,
                location=location,
                shape=info.annotation,
                required=field.required,
                description=info.description,
                deprecated=bool(getattr(info, "deprecated", False)),
            )
        )
    return specs


def _response_media_type(route: APIRoute) -> str:
    response_class = route.response_class
    if isinstance(response_class, DefaultPlaceholder):
        response_class = response_class.value
    return getattr(response_class, "media_type", None) or "application/json"


def _response_specs(route: APIRoute) -> tuple[ResponseSpec, ...]:
    media_type = _response_media_type(route)
    status = str(route.status_code or 200)
    specs: dict[str, ResponseSpec] = {
        status: ResponseSpec(
            status=status,
            description=route.response_description,
            shape=route.response_model,
            media_type=media_type,
        )
    }
    for code, extra in (route.responses or {}).items():
        key = str(code)
        primary = specs.get(key)
        specs[key] = ResponseSpec(
            status=key,
            description=extra.get(
                "description", primary.description if primary else "Additional Response"
            ),
            shape=extra.get("model", primary.shape if primary else None),
            media_type=media_type,
        )
    return tuple(specs.values())


def iter_dependants(dependant: Dependant) -> Iterator[Dependant]:
    """Walk a dependant and its sub-dependencies, depth first."""
    yield dependant
    for sub in dependant.dependencies:
        yield from iter_dependants(sub)


def flat_parameters(dependant: Dependant) -> list[ParameterSpec]:
    """Parameters of the whole dependency tree, grouped by location.

    A (name, location) pair declared by several dependencies is kept once,
    first declaration wins.
    """
    nodes = list(iter_dependants(dependant))
    specs: list[ParameterSpec] = []
    seen: set[tuple[str, ParameterLocation]] = set()
    for attribute, location in _PARAMETER_SOURCES:
        for node in nodes:
            for spec in _parameter_specs(getattr(node, attribute), location):
                key = (spec.name, spec.location)
                if key not in seen:
                    seen.add(key)
                    specs.append(spec)
    return specs


def _oauth_scopes(node: Dependant) -> list[str]:
    # Newer FastAPI releases renamed security_scopes to oauth_scopes.
    scopes = getattr(node, "oauth_scopes", None)
    if scopes is None:
        scopes = getattr(node, "security_scopes", None)
    return list(scopes or ())


def security_requirements(
    dependant: Dependant,
) -> tuple[list[dict[str, list[str]]] | None, dict[str, dict[str, Any]]]:
    """Security requirements and scheme definitions of a dependency tree.

    Every dependency whose callable is a FastAPI security scheme
    (``OAuth2PasswordBearer``, ``HTTPBearer``, ``APIKeyHeader`` ...) adds one
    requirement. Scopes are only kept for OAuth2 and OpenID Connect.

    Returns:
        (requirements or None, scheme definitions by scheme name)
    """
    requirements: list[dict[str, list[str]]] = []
    schemes: dict[str, dict[str, Any]] = {}
    for node in iter_dependants(dependant):
        scheme = node.call
        if not isinstance(scheme, SecurityBase):
            continue
        scopes = _oauth_scopes(node) if isinstance(scheme, (OAuth2, OpenIdConnect)) else []
        requirement = {scheme.scheme_name: scopes}
        if requirement not in requirements:
            requirements.append(requirement)
        schemes.setdefault(
            scheme.scheme_name,
            jsonable_encoder(scheme.model, by_alias=True, exclude_none=True),
        )
    return requirements or None, schemes


def api_route_to_definitions(route: APIRoute) -> list[RouteDefinition]:
    """Convert one APIRoute into route definitions (one per method).

    Args:
        route: FastAPI route.

    Returns:
        Definitions in sorted method order.
    """
    parameters = flat_parameters(route.dependant)
    security, security_schemes = security_requirements(route.dependant)

    body = None
    if route.body_field is not None:
        info = route.body_field.field_info
        body = BodySpec(
            shape=info.annotation,
            required=route.body_field.required,
            media_type=getattr(info, "media_type", None) or "application/json",
        )

    detail = RouteDetail(
        operation_id=route.operation_id or route.unique_id,
        summary=route.summary or route.name.replace("_", " ").title(),
        description=route.description or None,
        tags=tuple(_tag_name(tag) for tag in route.tags or ()),
        deprecated=bool(route.deprecated),
        security=security,
        security_schemes=security_schemes or None,
        parameters=tuple(parameters),
        body=body,
        responses=_response_specs(route),
        hide=not route.include_in_schema,
        extra=route.openapi_extra,
    )
    return [
        RouteDefinition(method=method, path=route.path_format, detail=detail)
        for method in sorted(route.methods or ())
    ]


def starlette_route_to_definitions(route: Route) -> list[RouteDefinition]:
    """Minimal definitions for a plain Starlette route."""
    methods = set(route.methods or ())
    if "GET" in methods:
        # Starlette adds HEAD to every GET route.
        methods.discard("HEAD")
    detail = RouteDetail(hide=not route.include_in_schema)
    return [
        RouteDefinition(method=method, path=route.path_format, detail=detail)
        for method in sorted(methods)
    ]


class FastAPIRouteSource:
    """Route source backed by a FastAPI app (or router).

    Args:
        app: Application or router whose ``routes`` list is read on demand.
    """

    def __init__(self, app: FastAPI | APIRouter) -> None:
        self._app = app

    def count(self) -> int:
        """Number of entries in the framework route table."""
        return len(self._app.routes)

    def routes(self) -> Sequence[RouteDefinition]:
        """Route definitions in registration order."""
        definitions: list[RouteDefinition] = []
        for route in self._app.routes:
            if isinstance(route, APIRoute):
                definitions.extend(api_route_to_definitions(route))
            elif isinstance(route, Route):
                definitions.extend(starlette_route_to_definitions(route))
        return definitions
