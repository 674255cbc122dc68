"""Route filter: decides whether a route appears in the document.

Checks run in a fixed order and the first hit excludes the route:

    1. reserved paths (the documentation page and spec endpoint themselves)
    2. the route's own hide flag
    3. path entries (literal equality or ``pattern.search``)
    4. tags (any-of)
    5. methods (case-insensitive)

An absent policy excludes nothing beyond steps 1 and 2.
"""

import re
from collections.abc import Iterable

from openapi_live.domain.entities.route_definition import HTTPMethod, RouteDefinition
from openapi_live.domain.value_objects.exclusion_policy import ExclusionPolicy


def is_reserved(path: str, reserved_paths: Iterable[str]) -> bool:
    """True if path is a reserved path or lives under one.

    A root reserved path ("/") only reserves itself.
    """
    for reserved in reserved_paths:
        if path == reserved:
            return True
        stem = reserved.rstrip("/")
        if stem and path.startswith(stem + "/"):
            return True
    return False


def matches_path(path: str, policy: ExclusionPolicy) -> bool:
    """True if any path entry matches the route path."""
    for entry in policy.path_entries:
        if isinstance(entry, re.Pattern):
            if entry.search(path):
                return True
        elif entry == path:
            return True
    return False


def matches_tags(tags: Iterable[str], policy: ExclusionPolicy) -> bool:
    """True if any route tag is excluded."""
    if not policy.tags:
        return False
    excluded = set(policy.tags)
    return any(tag in excluded for tag in tags)


def matches_method(route: RouteDefinition, policy: ExclusionPolicy) -> bool:
    """True if the route method is excluded.

    Wildcard routes only match an explicit ALL (or ``*``) entry.
    """
    if not policy.methods:
        return False
    excluded = {method.upper() for method in policy.methods}
    if route.is_wildcard:
        return bool(excluded & {HTTPMethod.ALL.value, "*"})
    return route.method_name in excluded


def should_include(
    route: RouteDefinition,
    policy: ExclusionPolicy | None,
    reserved_paths: Iterable[str] = (),
) -> bool:
    """Decide whether a route belongs in the generated document.

    Args:
        route: Route to check.
        policy: Current exclusion policy, or None.
        reserved_paths: Paths owned by the generator itself.

    Returns:
        True if the route should be documented.
    """
    if is_reserved(route.path, reserved_paths):
        return False
    if route.detail.hide:
        return False
    if policy is None:
        return True
    if matches_path(route.path, policy):
        return False
    if matches_tags(route.detail.tags, policy):
        return False
    if matches_method(route, policy):
        return False
    return True
