"""Protocols the application layer depends on.

Usage:
    from openapi_live.domain.protocols import LoggerProtocol, RouteSourceProtocol
"""

from openapi_live.domain.protocols.logger_protocol import LoggerProtocol
from openapi_live.domain.protocols.route_source_protocol import RouteSourceProtocol
from openapi_live.domain.protocols.schema_converter_protocol import (
    SchemaConverterProtocol,
    SchemaFragment,
    SchemaMode,
)

__all__ = [
    "LoggerProtocol",
    "RouteSourceProtocol",
    "SchemaConverterProtocol",
    "SchemaFragment",
    "SchemaMode",
]
