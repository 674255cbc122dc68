"""OpenAPI document service.

Wires the exclusion store, schema converter, document assembler and schema
cache into one read operation used by the spec endpoint, the embedded
documentation page and the export CLI.

A failed build is returned as Failure(SchemaBuildError), logged with the
build context, and leaves the cache STALE for the next attempt.
"""

import copy
from collections.abc import Mapping
from typing import Any

from openapi_live.application.services.document_assembler import assemble_document
from openapi_live.application.services.exclusion_store import ExclusionStore
from openapi_live.application.services.schema_cache import SchemaCache
from openapi_live.application.services.schema_converter import (
    MapJsonSchema,
    ReferencesHook,
    to_openapi_schema,
)
from openapi_live.core.enums import ErrorCode
from openapi_live.core.errors import SchemaBuildError
from openapi_live.core.result import Failure, Result, Success
from openapi_live.domain.protocols.logger_protocol import LoggerProtocol
from openapi_live.domain.protocols.route_source_protocol import RouteSourceProtocol
from openapi_live.domain.protocols.schema_converter_protocol import (
    SchemaConverterProtocol,
)


class OpenAPIDocumentService:
    """Builds and caches the OpenAPI document for one plugin instance.

    Args:
        store: Exclusion store (shares its lock with cache).
        cache: Schema cache.
        converter: Type-to-schema converter.
        documentation: Static documentation fragment.
        reserved_paths: Generator-owned paths.
        references: Optional references-transform hook.
        map_json_schema: Optional per-schema transform hook.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        store: ExclusionStore,
        cache: SchemaCache,
        converter: SchemaConverterProtocol,
        documentation: Mapping[str, Any] | None = None,
        reserved_paths: tuple[str, ...] = (),
        references: ReferencesHook | None = None,
        map_json_schema: MapJsonSchema | None = None,
        logger: LoggerProtocol,
    ) -> None:
        self.store = store
        self.cache = cache
        self._converter = converter
        self._documentation = dict(documentation or {})
        self._reserved_paths = reserved_paths
        self._references = references
        self._map_json_schema = map_json_schema
        self._logger = logger

        store.add_listener(cache.invalidate)

    def build(self, source: RouteSourceProtocol) -> dict[str, Any]:
        """Uncached converter + assembler pass.

        Raises:
            Exception: Anything raised by route introspection or conversion.
        """
        policy = self.store.policy
        schema = to_openapi_schema(
            source.routes(),
            policy,
            converter=self._converter,
            reserved_paths=self._reserved_paths,
            references=self._references,
            map_json_schema=self._map_json_schema,
        )
        return assemble_document(schema, self._documentation, policy)

    def get_document(
        self, source: RouteSourceProtocol, *, shared: bool = False
    ) -> Result[dict[str, Any], SchemaBuildError]:
        """Current document, rebuilt only when routes or policy changed.

        Args:
            source: Live route collection.
            shared: Return the cached document itself instead of a copy.
                Only for read-only callers such as the spec endpoint, which
                serializes it straight away.

        Returns:
            Success(document) or Failure(SchemaBuildError).
        """
        route_count = 0
        try:
            route_count = source.count()
            with self.cache.lock:
                _, version = self.store.snapshot()
                document, hit = self.cache.get_or_build(
                    route_count, version, lambda: self.build(source)
                )
        except Exception as e:
            policy = self.store.policy
            self._logger.error(
                "openapi_schema_build_failed",
                error=e,
                route_count=route_count,
                exclusion=policy.to_dict() if policy is not None else None,
            )
            return Failure(
                error=SchemaBuildError(
                    code=ErrorCode.SCHEMA_BUILD_FAILED,
                    message=f"Failed to build OpenAPI document: {e}",
                    details={"route_count": route_count, "error_type": type(e).__name__},
                    cause=e,
                )
            )

        if hit:
            self._logger.debug("openapi_schema_cache_hit", route_count=route_count)
        else:
            self._logger.info(
                "openapi_schema_built",
                route_count=route_count,
                path_count=len(document.get("paths", {})),
                policy_version=version,
            )
        return Success(value=document if shared else copy.deepcopy(document))
