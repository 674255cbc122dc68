"""Errors produced while building the OpenAPI document."""

from dataclasses import dataclass

from openapi_live.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SchemaBuildError(DomainError):
    """Document build failed (malformed route metadata, converter failure).

    Attributes:
        code: ErrorCode.SCHEMA_BUILD_FAILED in practice.
        message: Human-readable message.
        details: Build context (route_count, error_type).
        cause: Original exception, kept for logging.
    """

    cause: Exception | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AppLoadError(DomainError):
    """Application object could not be imported (export CLI)."""

    pass
