"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Schema generation
    SCHEMA_BUILD_FAILED = "schema_build_failed"

    # Application loading (export CLI)
    APP_IMPORT_FAILED = "app_import_failed"
