"""typesense-client: synchronous client for the Typesense REST API.

This package covers:
- Collection management (create, list, retrieve, delete)
- Search-result overrides (upsert, list, delete)
- API keys (create, retrieve, list, delete)
- Scoped search key generation
"""

__version__ = "0.1.0"

from typesense_client.clients import (  # noqa: E402
    FakeTransport,
    TransportProtocol,
    TypesenseClient,
    generate_scoped_search_key,
)
from typesense_client.core.exceptions import (  # noqa: E402
    APIError,
    CollectionFieldsRequiredError,
    CollectionNameRequiredError,
    CollectionNotFoundError,
    ConfigurationError,
    DuplicateCollectionError,
    NotFoundError,
    ResponseDecodeError,
    SchemaValidationError,
    ScopedKeyError,
    TypesenseClientError,
    UnauthorizedError,
)
from typesense_client.models import (  # noqa: E402
    APIKey,
    Collection,
    CollectionField,
    CollectionSchema,
    NodeDescriptor,
    Override,
    OverrideDocID,
    OverrideRule,
)

__all__ = [
    "__version__",
    # Client
    "TypesenseClient",
    "TransportProtocol",
    "FakeTransport",
    "generate_scoped_search_key",
    # Models
    "NodeDescriptor",
    "Collection",
    "CollectionField",
    "CollectionSchema",
    "Override",
    "OverrideDocID",
    "OverrideRule",
    "APIKey",
    # Exceptions
    "TypesenseClientError",
    "ConfigurationError",
    "SchemaValidationError",
    "CollectionNameRequiredError",
    "CollectionFieldsRequiredError",
    "UnauthorizedError",
    "NotFoundError",
    "CollectionNotFoundError",
    "DuplicateCollectionError",
    "APIError",
    "ResponseDecodeError",
    "ScopedKeyError",
]
