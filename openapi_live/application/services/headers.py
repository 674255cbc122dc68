"""Header-parameter helper for route details.

``with_headers`` returns a partial operation object adding header parameters.
Attach it to every route of a group through ``RouteDetail.extra`` (or
FastAPI's ``openapi_extra``); the schema converter merges it into each
operation and converts the header shapes.

Usage:
    tenant_headers = with_headers({
        "X-Tenant-Id": str,
        "X-Request-Id": {"schema": str, "required": False, "description": "Trace id"},
    })

    @router.get("/items", openapi_extra=tenant_headers)
    def list_items(): ...
"""

from collections.abc import Mapping
from typing import Any


def with_headers(
    headers: Mapping[str, Any],
    detail: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a copy of detail with header parameters added.

    Args:
        headers: Header name -> shape, or -> parameter fields when the value
            is a mapping holding a ``schema`` key. Headers are required
            unless stated otherwise.
        detail: Existing partial operation to extend (not modified).

    Returns:
        New partial operation; a header already declared under the same name
        is replaced.
    """
    result: dict[str, Any] = dict(detail or {})
    parameters = [dict(param) for param in result.get("parameters", ())]

    for name, spec in headers.items():
        if isinstance(spec, Mapping) and "schema" in spec:
            parameter = {"name": name, "in": "header", "required": True, **spec}
        else:
            parameter = {"name": name, "in": "header", "required": True, "schema": spec}

        parameters = [
            param
            for param in parameters
            if not (param.get("name") == name and param.get("in") == "header")
        ]
        parameters.append(parameter)

    result["parameters"] = parameters
    return result
