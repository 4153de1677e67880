"""Top-level keys that identify the API description format of a document."""

from __future__ import annotations

__all__ = ["ASYNCAPI", "DOCUMENT_TYPE_KEYS", "OPENAPI2", "OPENAPI3"]

# Used by all OpenAPI 3+ documents.
OPENAPI3 = "openapi"

# Used by OpenAPI 2 documents, formerly known as Swagger.
OPENAPI2 = "swagger"

# Used by AsyncAPI documents, all versions.
ASYNCAPI = "asyncapi"

DOCUMENT_TYPE_KEYS: tuple[str, ...] = (OPENAPI3, OPENAPI2, ASYNCAPI)
