"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes
- Settings and the composition root

The core module has NO dependencies on other layers (container imports
adapters lazily).
"""

from openapi_live.core.enums import ErrorCode
from openapi_live.core.errors import DomainError, SchemaBuildError
from openapi_live.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "SchemaBuildError",
    "Success",
]
