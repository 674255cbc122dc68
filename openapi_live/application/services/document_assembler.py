"""Document assembler.

Merges converter output with the static documentation fragment supplied at
configuration time:

    openapi      default version, overridable by the fragment
    info         fragment fields override the generated defaults
    tags         fragment tags minus excluded tag names
    paths        fragment paths override generated paths by key
    components   fragment sections kept; fragment schemas and security
                 schemes override generated ones by name

Any other fragment key (servers, security, externalDocs, ...) passes through.
"""

import copy
from collections.abc import Mapping
from typing import Any

from openapi_live.application.services.schema_converter import OpenAPISchema
from openapi_live.domain.value_objects.exclusion_policy import ExclusionPolicy

OPENAPI_VERSION = "3.1.0"

# Component sections merged entry by entry instead of replaced.
MERGED_COMPONENT_SECTIONS = ("schemas", "securitySchemes")

DEFAULT_INFO: dict[str, str] = {
    "title": "API Documentation",
    "description": "Development documentation",
    "version": "0.0.0",
}


def build_info(documentation: Mapping[str, Any]) -> dict[str, Any]:
    """Generated info defaults overlaid with the static info fields."""
    return {**DEFAULT_INFO, **copy.deepcopy(dict(documentation.get("info") or {}))}


def filter_tags(
    tags: list[Mapping[str, Any]] | None, policy: ExclusionPolicy | None
) -> list[dict[str, Any]] | None:
    """Drop tag objects whose name is excluded.

    Without a tag exclusion the list passes through unchanged.
    """
    if tags is None:
        return None
    if policy is None or policy.tags is None:
        return [dict(tag) for tag in tags]
    excluded = set(policy.tags)
    return [dict(tag) for tag in tags if tag.get("name") not in excluded]


def assemble_document(
    schema: OpenAPISchema,
    documentation: Mapping[str, Any],
    policy: ExclusionPolicy | None,
) -> dict[str, Any]:
    """Build the final OpenAPI document.

    Args:
        schema: Converter output.
        documentation: Static documentation fragment (not modified).
        policy: Current exclusion policy, used for tag filtering.

    Returns:
        A new document dict. Callers must treat it as read-only: it is
        cached and shared between requests.
    """
    static = copy.deepcopy(dict(documentation))

    document: dict[str, Any] = {"openapi": OPENAPI_VERSION}
    document.update(static)
    document["info"] = build_info(documentation)

    tags = filter_tags(static.get("tags"), policy)
    if tags is None:
        document.pop("tags", None)
    else:
        document["tags"] = tags

    document["paths"] = {**schema.paths, **(static.get("paths") or {})}

    static_components = dict(static.get("components") or {})
    components = {**schema.components, **static_components}
    for section in MERGED_COMPONENT_SECTIONS:
        if section in schema.components or section in static_components:
            components[section] = {
                **schema.components.get(section, {}),
                **(static_components.get(section) or {}),
            }
    components.setdefault("schemas", {})
    document["components"] = components
    return document
