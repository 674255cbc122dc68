"""Route-to-schema conversion.

Turns a route collection into OpenAPI path items and component schemas.
Routes rejected by the route filter never reach the converter. Individual
value shapes are delegated to a SchemaConverterProtocol implementation;
every named schema it returns lands in ``components.schemas`` once, and the
security schemes of documented routes land in ``components.securitySchemes``.

Merge rules:
    - routes sharing a path share one path item, keyed by lower-case method
    - same path and method: the last registered route wins
    - wildcard (ALL) routes are documented under every WILDCARD_EXPANSION method
    - the references hook, then ``detail.extra``, are merged onto the
      generated operation (parameters by (name, in), other keys replace)

Functions:
    to_openapi_schema: Full conversion pass
    to_openapi_path: Path pattern -> OpenAPI path template
    generate_operation_id: Fallback operation id ("getUsersById")
"""

import copy
import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from openapi_live.application.services.route_filter import should_include
from openapi_live.domain.entities.route_definition import (
    WILDCARD_EXPANSION,
    ParameterLocation,
    ParameterSpec,
    RouteDefinition,
)
from openapi_live.domain.protocols.schema_converter_protocol import (
    SchemaConverterProtocol,
    SchemaMode,
)
from openapi_live.domain.value_objects.exclusion_policy import ExclusionPolicy

MapJsonSchema = Callable[[dict[str, Any]], dict[str, Any]]
ReferencesHook = Callable[[RouteDefinition], Mapping[str, Any] | None]

_COLON_PARAM = re.compile(r"(?<=/):([A-Za-z_][A-Za-z0-9_]*)\??")
_BRACE_CONVERTER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*):[^}]*\}")
_TEMPLATE_PARAM = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")
_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+")

DEFAULT_RESPONSES: dict[str, dict[str, Any]] = {
    "200": {"description": "Successful Response"},
}


@dataclass(frozen=True, kw_only=True)
class OpenAPISchema:
    """Converter output.

    Attributes:
        paths: Path template -> path item.
        components: Components object; always holds a ``schemas`` mapping.
    """

    paths: dict[str, dict[str, Any]] = field(default_factory=dict)
    components: dict[str, Any] = field(default_factory=lambda: {"schemas": {}})


def to_openapi_path(path: str) -> str:
    """Translate a path pattern into an OpenAPI path template.

    ``/users/:id`` and ``/users/:id?`` become ``/users/{id}``,
    ``/files/{name:path}`` becomes ``/files/{name}`` and a trailing ``*``
    becomes ``{wildcard}``.
    """
    path = _BRACE_CONVERTER.sub(r"{\1}", path)
    path = _COLON_PARAM.sub(r"{\1}", path)
    if path.endswith("*"):
        path = path[:-1] + "{wildcard}"
    return path


def generate_operation_id(method: str, path_template: str) -> str:
    """Build a camel-case operation id from method and path template.

    Examples:
        >>> generate_operation_id("GET", "/users/{id}")
        'getUsersById'
        >>> generate_operation_id("POST", "/")
        'postIndex'
    """
    parts: list[str] = []
    for segment in path_template.strip("/").split("/"):
        if not segment:
            continue
        param = _TEMPLATE_PARAM.fullmatch(segment)
        if param:
            name = param.group(1)
            parts.append("By" + name[:1].upper() + name[1:])
            continue
        parts.extend(
            word[:1].upper() + word[1:] for word in _WORD_SPLIT.split(segment) if word
        )
    return method.lower() + ("".join(parts) or "Index")


class _SchemaCollector:
    """Runs shapes through the converter and gathers component schemas."""

    def __init__(
        self, converter: SchemaConverterProtocol, map_json_schema: MapJsonSchema | None
    ) -> None:
        self._converter = converter
        self._map = map_json_schema
        self.components: dict[str, dict[str, Any]] = {}

    def schema_for(self, shape: Any, mode: SchemaMode) -> dict[str, Any] | None:
        if shape is None:
            return None
        fragment = self._converter.to_schema(shape, mode=mode)
        for name, schema in fragment.components.items():
            if name not in self.components:
                self.components[name] = self._apply(schema)
        return self._apply(fragment.schema)

    def _apply(self, schema: dict[str, Any]) -> dict[str, Any]:
        return self._map(schema) if self._map is not None else schema


def _build_parameter(spec: ParameterSpec, collector: _SchemaCollector) -> dict[str, Any]:
    parameter: dict[str, Any] = {
        "name": spec.name,
        "in": spec.location.value,
        "required": spec.required or spec.location is ParameterLocation.PATH,
    }
    schema = collector.schema_for(spec.shape, "validation")
    if schema is not None:
        parameter["schema"] = schema
    if spec.description:
        parameter["description"] = spec.description
    if spec.deprecated:
        parameter["deprecated"] = True
    return parameter


def _merge_parameters(
    existing: Iterable[Mapping[str, Any]],
    additions: Iterable[Mapping[str, Any]],
    collector: _SchemaCollector,
) -> list[dict[str, Any]]:
    merged = [dict(param) for param in existing]
    for addition in additions:
        parameter = copy.deepcopy(dict(addition))
        shape = parameter.get("schema")
        if shape is not None and not isinstance(shape, Mapping):
            parameter["schema"] = collector.schema_for(shape, "validation")
        key = (parameter.get("name"), parameter.get("in"))
        merged = [param for param in merged if (param.get("name"), param.get("in")) != key]
        merged.append(parameter)
    return merged


def _merge_operation(
    operation: dict[str, Any],
    partial: Mapping[str, Any],
    collector: _SchemaCollector,
) -> None:
    for key, value in partial.items():
        if key == "parameters":
            operation["parameters"] = _merge_parameters(
                operation.get("parameters", ()), value, collector
            )
        elif key == "responses" and isinstance(value, Mapping):
            responses = dict(operation.get("responses", {}))
            for status, entry in value.items():
                responses[str(status)] = copy.deepcopy(entry)
            operation["responses"] = responses
        else:
            operation[key] = copy.deepcopy(value)


def _build_operation(
    route: RouteDefinition,
    method: str,
    path_template: str,
    collector: _SchemaCollector,
    references: ReferencesHook | None,
) -> dict[str, Any]:
    detail = route.detail

    operation_id = detail.operation_id
    if operation_id is None:
        operation_id = generate_operation_id(method, path_template)
    elif route.is_wildcard:
        operation_id = f"{operation_id}_{method.lower()}"

    operation: dict[str, Any] = {"operationId": operation_id}
    if detail.summary:
        operation["summary"] = detail.summary
    if detail.description:
        operation["description"] = detail.description
    if detail.tags:
        operation["tags"] = list(detail.tags)
    if detail.deprecated:
        operation["deprecated"] = True
    if detail.security is not None:
        operation["security"] = copy.deepcopy(detail.security)

    parameters = [_build_parameter(spec, collector) for spec in detail.parameters]
    declared = {(param["name"], param["in"]) for param in parameters}
    # Path template params nobody declared still have to be documented.
    for name in _TEMPLATE_PARAM.findall(path_template):
        if (name, ParameterLocation.PATH.value) not in declared:
            parameters.append(
                {"name": name, "in": "path", "required": True, "schema": {"type": "string"}}
            )
    if parameters:
        operation["parameters"] = parameters

    if detail.body is not None:
        request_body: dict[str, Any] = {"required": detail.body.required, "content": {}}
        schema = collector.schema_for(detail.body.shape, "validation")
        request_body["content"][detail.body.media_type] = (
            {"schema": schema} if schema is not None else {}
        )
        if detail.body.description:
            request_body["description"] = detail.body.description
        operation["requestBody"] = request_body

    responses: dict[str, Any] = {}
    for spec in detail.responses:
        entry: dict[str, Any] = {"description": spec.description}
        schema = collector.schema_for(spec.shape, "serialization")
        if schema is not None:
            entry["content"] = {spec.media_type: {"schema": schema}}
        responses[str(spec.status)] = entry
    operation["responses"] = responses or copy.deepcopy(DEFAULT_RESPONSES)

    if references is not None:
        referenced = references(route)
        if referenced:
            _merge_operation(operation, referenced, collector)
    if detail.extra:
        _merge_operation(operation, detail.extra, collector)

    return operation


def to_openapi_schema(
    routes: Sequence[RouteDefinition],
    policy: ExclusionPolicy | None,
    *,
    converter: SchemaConverterProtocol,
    reserved_paths: Iterable[str] = (),
    references: ReferencesHook | None = None,
    map_json_schema: MapJsonSchema | None = None,
) -> OpenAPISchema:
    """Convert routes into OpenAPI paths and components.

    Args:
        routes: Full route collection in registration order.
        policy: Current exclusion policy.
        converter: Type-to-schema converter.
        reserved_paths: Generator-owned paths, always excluded.
        references: Optional hook returning a partial operation per route.
        map_json_schema: Optional rewrite applied to every generated schema
            fragment before insertion.

    Returns:
        OpenAPISchema with paths and ``components.schemas``.
    """
    reserved = tuple(reserved_paths)
    collector = _SchemaCollector(converter, map_json_schema)
    paths: dict[str, dict[str, Any]] = {}
    security_schemes: dict[str, Any] = {}

    for route in routes:
        if not should_include(route, policy, reserved):
            continue

        for name, scheme in (route.detail.security_schemes or {}).items():
            security_schemes.setdefault(name, copy.deepcopy(dict(scheme)))

        path_template = to_openapi_path(route.path)
        methods = (
            [method.value for method in WILDCARD_EXPANSION]
            if route.is_wildcard
            else [route.method_name]
        )
        for method in methods:
            operation = _build_operation(route, method, path_template, collector, references)
            paths.setdefault(path_template, {})[method.lower()] = operation

    components: dict[str, Any] = {"schemas": collector.components}
    if security_schemes:
        components["securitySchemes"] = security_schemes
    return OpenAPISchema(paths=paths, components=components)
