"""Plugin configuration.

OpenAPIConfig is consumed once, when the plugin is built. Fields left unset
fall back to the OPENAPI_* settings (see openapi_live.core.config).

Usage:
    config = OpenAPIConfig(
        documentation={"info": {"title": "Shop API", "version": "1.4.0"}},
        exclude={"paths": ["/internal", re.compile(r"^/debug")], "tags": ["admin"]},
        provider="swagger-ui",
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, get_args

from openapi_live.application.services.schema_converter import (
    MapJsonSchema,
    ReferencesHook,
)
from openapi_live.core.config import get_settings
from openapi_live.domain.protocols.schema_converter_protocol import (
    SchemaConverterProtocol,
)
from openapi_live.domain.value_objects.exclusion_policy import ExclusionPolicy

Provider = Literal["scalar", "swagger-ui"]


def _from_settings(name: str) -> Any:
    return field(default_factory=lambda: getattr(get_settings(), name))


def _default_exclusion() -> dict[str, list[str]] | None:
    settings = get_settings()
    exclusion = {
        "paths": settings.exclude_path_list,
        "tags": settings.exclude_tag_list,
        "methods": settings.exclude_method_list,
    }
    exclusion = {key: values for key, values in exclusion.items() if values}
    return exclusion or None


def _leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def _default_spec_path(path: str) -> str:
    return f"{path.rstrip('/')}/json"


@dataclass(kw_only=True)
class OpenAPIConfig:
    """Configuration surface of the OpenAPI plugin.

    Attributes:
        enabled: Register the page and spec routes at all.
        path: Documentation page path.
        spec_path: Spec endpoint path; defaults to ``{path}/json``.
        provider: Viewer for the page; None registers no page.
        documentation: Static fragment merged into every document
            (info, tags, servers, security, extra paths/components).
        exclude: Initial exclusion policy.
        scalar: Scalar options (``version``, ``cdn``, any viewer option).
        swagger: Swagger UI options (``version``, ``autoDarkMode``, ...).
        references: References-transform hook, route -> partial operation.
        map_json_schema: Transform applied to every generated schema.
        embed_spec: Inline the current document into the page per request.
        converter: Type-to-schema converter; pydantic-backed by default.
    """

    enabled: bool = _from_settings("enabled")
    path: str = _from_settings("path")
    spec_path: str | None = _from_settings("spec_path")
    provider: Provider | None = _from_settings("provider")
    documentation: Mapping[str, Any] = field(default_factory=dict)
    exclude: ExclusionPolicy | Mapping[str, Any] | None = field(
        default_factory=_default_exclusion
    )
    scalar: Mapping[str, Any] = field(default_factory=dict)
    swagger: Mapping[str, Any] = field(default_factory=dict)
    references: ReferencesHook | None = None
    map_json_schema: MapJsonSchema | None = None
    embed_spec: bool = _from_settings("embed_spec")
    converter: SchemaConverterProtocol | None = None

    def __post_init__(self) -> None:
        if self.provider not in (None, *get_args(Provider)):
            raise ValueError(
                f"provider must be 'scalar', 'swagger-ui' or None, got {self.provider!r}"
            )
        self.path = _leading_slash(self.path)
        self.spec_path = _leading_slash(self.spec_path or _default_spec_path(self.path))

    @property
    def reserved_paths(self) -> tuple[str, ...]:
        """Paths served by the plugin itself, never documented."""
        return (self.path, self.spec_path or _default_spec_path(self.path))
