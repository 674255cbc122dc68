"""Composition root for application-scoped singletons.

Adapter selection lives here so the rest of the package depends only on
protocols:
- Logging: ConsoleAdapter (JSON in testing/ci, human-readable otherwise)
- Schema conversion: PydanticSchemaConverter
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from openapi_live.core.config import get_settings

if TYPE_CHECKING:
    from openapi_live.domain.protocols.logger_protocol import LoggerProtocol
    from openapi_live.domain.protocols.schema_converter_protocol import (
        SchemaConverterProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from openapi_live.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment.value in {"testing", "ci"}
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_schema_converter() -> "SchemaConverterProtocol":
    """Return the default type-to-schema converter singleton.

    Returns:
        SchemaConverterProtocol: Pydantic-backed converter.
    """
    from openapi_live.infrastructure.schema.pydantic_converter import (
        PydanticSchemaConverter,
    )

    return PydanticSchemaConverter()
