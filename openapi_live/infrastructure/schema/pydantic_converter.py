"""Pydantic-backed type-to-schema converter.

Uses ``pydantic.TypeAdapter.json_schema`` for any annotation pydantic
understands (models, dataclasses, TypedDicts, generics, Annotated
constraints). Nested definitions move from ``$defs`` into the component map;
a top-level model or dataclass is itself stored as a component and replaced
by a ``$ref`` so operations share one definition.

Mapping shapes are treated as ready-made JSON Schema and passed through.

Unsupported annotations raise pydantic's PydanticSchemaGenerationError,
which the document service reports as a SchemaBuildError.
"""

import copy
import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter

from openapi_live.domain.protocols.schema_converter_protocol import (
    SchemaFragment,
    SchemaMode,
)

REF_TEMPLATE = "#/components/schemas/{model}"


def _is_named_model(shape: Any) -> bool:
    return isinstance(shape, type) and (
        issubclass(shape, BaseModel) or dataclasses.is_dataclass(shape)
    )


class PydanticSchemaConverter:
    """Converts annotations with pydantic.

    Args:
        ref_template: Template for component references.
    """

    def __init__(self, ref_template: str = REF_TEMPLATE) -> None:
        self._ref_template = ref_template

    def to_schema(self, shape: Any, *, mode: SchemaMode = "validation") -> SchemaFragment:
        """Convert one shape into a schema fragment.

        Args:
            shape: Annotation or JSON-Schema mapping.
            mode: Pydantic JSON-schema mode.

        Returns:
            SchemaFragment with inline schema and component schemas.
        """
        if isinstance(shape, Mapping):
            return SchemaFragment(schema=copy.deepcopy(dict(shape)))

        schema = TypeAdapter(shape).json_schema(mode=mode, ref_template=self._ref_template)
        components: dict[str, dict[str, Any]] = schema.pop("$defs", {})

        if _is_named_model(shape) and "$ref" not in schema:
            name = schema.get("title") or shape.__name__
            components[name] = schema
            schema = {"$ref": self._ref_template.format(model=name)}

        return SchemaFragment(schema=schema, components=components)
