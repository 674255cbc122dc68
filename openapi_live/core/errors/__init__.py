"""Core errors package.

Usage:
    from openapi_live.core.errors import DomainError, SchemaBuildError
"""

from openapi_live.core.errors.domain_error import DomainError
from openapi_live.core.errors.schema_errors import AppLoadError, SchemaBuildError

__all__ = [
    "AppLoadError",
    "DomainError",
    "SchemaBuildError",
]
