"""Pytest configuration shared by unit and API tests.

This configuration ensures:
1. Settings resolve in the testing environment (JSON logs, no colors)
2. Cached settings and singletons are reset between tests
3. Route definitions are cheap to build in tests
"""

import os

os.environ.setdefault("OPENAPI_ENVIRONMENT", "testing")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from openapi_live.core.config import get_settings  # noqa: E402
from openapi_live.core.container import get_logger, get_schema_converter  # noqa: E402
from openapi_live.domain.entities.route_definition import (  # noqa: E402
    HTTPMethod,
    RouteDefinition,
    RouteDetail,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "api: endpoint tests through TestClient")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear lru_cache'd settings and container singletons around each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_schema_converter.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_schema_converter.cache_clear()


@pytest.fixture
def mock_logger():
    """LoggerProtocol double whose bind() returns itself."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


def make_route(
    method: HTTPMethod | str = HTTPMethod.GET,
    path: str = "/",
    **detail,
) -> RouteDefinition:
    """Helper to create a RouteDefinition for testing.

    Usage:
        make_route("GET", "/users", tags=("users",))
        make_route(HTTPMethod.POST, "/admin", hide=True)
    """
    if "tags" in detail:
        detail["tags"] = tuple(detail["tags"])
    return RouteDefinition(method=method, path=path, detail=RouteDetail(**detail))
