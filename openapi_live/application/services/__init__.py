"""Application services: exclusion store, route filter, schema converter,
document assembler, schema cache and the document service wiring them."""

from openapi_live.application.services.document_assembler import assemble_document
from openapi_live.application.services.document_service import OpenAPIDocumentService
from openapi_live.application.services.exclusion_store import ExclusionStore
from openapi_live.application.services.headers import with_headers
from openapi_live.application.services.route_filter import should_include
from openapi_live.application.services.schema_cache import CacheState, SchemaCache
from openapi_live.application.services.schema_converter import (
    OpenAPISchema,
    to_openapi_path,
    to_openapi_schema,
)

__all__ = [
    "CacheState",
    "ExclusionStore",
    "OpenAPIDocumentService",
    "OpenAPISchema",
    "SchemaCache",
    "assemble_document",
    "should_include",
    "to_openapi_path",
    "to_openapi_schema",
    "with_headers",
]
