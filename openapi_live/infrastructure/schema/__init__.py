"""Type-to-schema converters."""

from openapi_live.infrastructure.schema.pydantic_converter import PydanticSchemaConverter

__all__ = ["PydanticSchemaConverter"]
