"""SchemaConverterProtocol - type-to-schema conversion contract.

Turns one value-shape descriptor into a JSON-Schema fragment plus the named
component schemas it introduces. Component references inside the fragment
must point at ``#/components/schemas/{name}``.

Implementations:
    PydanticSchemaConverter: pydantic TypeAdapter based
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol

SchemaMode = Literal["validation", "serialization"]


@dataclass(frozen=True, kw_only=True)
class SchemaFragment:
    """Converter output.

    Attributes:
        schema: Inline JSON-Schema (may be a single ``$ref``).
        components: Named schemas referenced from ``schema``.
    """

    schema: dict[str, Any]
    components: dict[str, dict[str, Any]] = field(default_factory=dict)


class SchemaConverterProtocol(Protocol):
    """Converts value-shape descriptors to JSON-Schema fragments."""

    def to_schema(self, shape: Any, *, mode: SchemaMode = "validation") -> SchemaFragment:
        """Convert a shape.

        Args:
            shape: Type annotation or JSON-Schema mapping.
            mode: "validation" for inputs (parameters, request bodies),
                "serialization" for responses.

        Returns:
            SchemaFragment with the inline schema and its components.

        Raises:
            Exception: Implementation-specific, for unsupported shapes. The
                document service turns it into a SchemaBuildError.
        """
        ...
