"""Unit tests for OpenAPIDocumentService.

Tests cover:
- Success path and cache hits (object identity, per-caller copies)
- Rebuild after route growth and after exclusion changes
- Failure path: SchemaBuildError result, error log, STALE cache
"""

from unittest.mock import MagicMock

import pytest

from openapi_live.application.services.document_service import OpenAPIDocumentService
from openapi_live.application.services.exclusion_store import ExclusionStore
from openapi_live.application.services.schema_cache import CacheState, SchemaCache
from openapi_live.core.enums import ErrorCode
from openapi_live.core.errors import SchemaBuildError
from openapi_live.core.result import Failure, Success
from openapi_live.domain.entities.route_definition import BodySpec
from openapi_live.infrastructure.routing.static_source import StaticRouteSource
from openapi_live.infrastructure.schema.pydantic_converter import (
    PydanticSchemaConverter,
)
from tests.conftest import make_route


def create_service(mock_logger, converter=None, initial=None):
    """Helper wiring a service the way the plugin does."""
    cache = SchemaCache()
    store = ExclusionStore(initial, lock=cache.lock)
    return OpenAPIDocumentService(
        store=store,
        cache=cache,
        converter=converter or PydanticSchemaConverter(),
        documentation={"info": {"title": "Test API"}},
        reserved_paths=("/openapi", "/openapi/json"),
        logger=mock_logger,
    )


@pytest.fixture
def source():
    """Route source with two public routes."""
    return StaticRouteSource([make_route("GET", "/public"), make_route("GET", "/private")])


@pytest.mark.unit
class TestGetDocument:
    """Test get_document() success and caching."""

    def test_returns_assembled_document(self, mock_logger, source):
        """Success wraps the full document."""
        service = create_service(mock_logger)

        result = service.get_document(source)

        assert isinstance(result, Success)
        assert result.value["info"]["title"] == "Test API"
        assert list(result.value["paths"]) == ["/public", "/private"]
        mock_logger.info.assert_called_once_with(
            "openapi_schema_built", route_count=2, path_count=2, policy_version=0
        )

    def test_second_read_is_cache_hit(self, mock_logger, source):
        """No change in between: the same object, built once."""
        service = create_service(mock_logger)

        first = service.get_document(source, shared=True).value
        second = service.get_document(source, shared=True).value

        assert second is first
        assert service.cache.builds == 1
        mock_logger.debug.assert_called_once_with("openapi_schema_cache_hit", route_count=2)

    def test_caller_mutation_does_not_reach_cache(self, mock_logger, source):
        """Each caller gets its own copy of the cached document."""
        service = create_service(mock_logger)

        document = service.get_document(source).value
        document["paths"].clear()
        document["info"]["title"] = "changed"
        again = service.get_document(source).value

        assert list(again["paths"]) == ["/public", "/private"]
        assert again["info"]["title"] == "Test API"
        assert service.cache.builds == 1

    def test_new_route_triggers_rebuild(self, mock_logger, source):
        """Route registration changes the count and the document."""
        service = create_service(mock_logger)
        service.get_document(source)

        source.add(make_route("GET", "/late"))
        document = service.get_document(source).value

        assert "/late" in document["paths"]
        assert service.cache.builds == 2

    def test_exclusion_change_is_visible_on_next_read(self, mock_logger, source):
        """A mutation invalidates the cache before the next read."""
        service = create_service(mock_logger)
        service.get_document(source)

        service.store.add_excluded_paths("/private")
        assert list(service.get_document(source).value["paths"]) == ["/public"]

        service.store.remove_excluded_paths("/private")
        assert list(service.get_document(source).value["paths"]) == ["/public", "/private"]


@pytest.mark.unit
class TestGetDocumentFailure:
    """Test get_document() failure path."""

    def test_converter_error_becomes_failure(self, mock_logger):
        """Conversion errors are returned, logged and leave the cache STALE."""
        converter = MagicMock()
        error = TypeError("unsupported shape")
        converter.to_schema.side_effect = error
        service = create_service(mock_logger, converter=converter)
        source = StaticRouteSource([make_route("POST", "/x", body=BodySpec(shape=object))])

        result = service.get_document(source)

        assert isinstance(result, Failure)
        assert isinstance(result.error, SchemaBuildError)
        assert result.error.code == ErrorCode.SCHEMA_BUILD_FAILED
        assert result.error.cause is error
        assert result.error.details == {"route_count": 1, "error_type": "TypeError"}
        assert service.cache.state is CacheState.STALE
        mock_logger.error.assert_called_once_with(
            "openapi_schema_build_failed",
            error=error,
            route_count=1,
            exclusion=None,
        )

    def test_recovers_after_failure(self, mock_logger):
        """The next read retries the build."""
        fragment = PydanticSchemaConverter().to_schema(int)
        converter = MagicMock()
        converter.to_schema.side_effect = [TypeError("boom"), fragment]
        service = create_service(mock_logger, converter=converter)
        source = StaticRouteSource([make_route("POST", "/x", body=BodySpec(shape=int))])

        assert isinstance(service.get_document(source), Failure)

        assert isinstance(service.get_document(source), Success)
        assert service.cache.state is CacheState.FRESH
