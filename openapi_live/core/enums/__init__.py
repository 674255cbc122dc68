"""Core enums package.

Usage:
    from openapi_live.core.enums import ErrorCode, Environment
"""

from openapi_live.core.enums.environment import Environment
from openapi_live.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
