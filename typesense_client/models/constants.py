"""
Constants for the Typesense wire contract.

Usage:
    from typesense_client.models.constants import (
        ACTION_DOCUMENTS_SEARCH,
        COLLECTIONS_ENDPOINT,
    )
"""

from typing import Final

# =============================================================================
# Wire Protocol
# =============================================================================

API_KEY_HEADER: Final[str] = "X-TYPESENSE-API-KEY"
CONTENT_TYPE_JSON: Final[str] = "application/json"

COLLECTIONS_ENDPOINT: Final[str] = "collections"
OVERRIDES_ENDPOINT: Final[str] = "overrides"
KEYS_ENDPOINT: Final[str] = "keys"

# Key of the list in GET /collections/{name}/overrides responses
OVERRIDES_RESPONSE_KEY: Final[str] = "overrides"


# =============================================================================
# API Key Actions (wildcards allowed by the service)
# =============================================================================

ACTION_DOCUMENTS_SEARCH: Final[str] = "documents:search"
ACTION_DOCUMENTS_GET: Final[str] = "documents:get"
ACTION_DOCUMENTS_DELETE: Final[str] = "documents:delete"
ACTION_DOCUMENTS_CREATE: Final[str] = "documents:create"
ACTION_DOCUMENTS_ALL: Final[str] = "documents:*"
ACTION_COLLECTIONS_GET: Final[str] = "collections:get"
ACTION_COLLECTIONS_DELETE: Final[str] = "collections:delete"
ACTION_COLLECTIONS_CREATE: Final[str] = "collections:create"
ACTION_COLLECTIONS_ALL: Final[str] = "collections:*"
ACTION_ALL: Final[str] = "*"

ALL_COLLECTIONS: Final[str] = "*"


# =============================================================================
# Override Rule Match Modes
# =============================================================================

MATCH_EXACT: Final[str] = "exact"
MATCH_CONTAINS: Final[str] = "contains"


# =============================================================================
# Scoped Search Keys
# =============================================================================

SCOPED_KEY_PREFIX_LENGTH: Final[int] = 4


# =============================================================================
# Error Messages
# =============================================================================

ERROR_BAD_REQUEST: Final[str] = "bad request"
ERROR_OVERRIDES_MISSING: Final[str] = "response did not return a list of overrides"


# =============================================================================
# Export All
# =============================================================================

__all__ = [
    # Wire protocol
    "API_KEY_HEADER",
    "CONTENT_TYPE_JSON",
    "COLLECTIONS_ENDPOINT",
    "OVERRIDES_ENDPOINT",
    "KEYS_ENDPOINT",
    "OVERRIDES_RESPONSE_KEY",
    # Actions
    "ACTION_DOCUMENTS_SEARCH",
    "ACTION_DOCUMENTS_GET",
    "ACTION_DOCUMENTS_DELETE",
    "ACTION_DOCUMENTS_CREATE",
    "ACTION_DOCUMENTS_ALL",
    "ACTION_COLLECTIONS_GET",
    "ACTION_COLLECTIONS_DELETE",
    "ACTION_COLLECTIONS_CREATE",
    "ACTION_COLLECTIONS_ALL",
    "ACTION_ALL",
    "ALL_COLLECTIONS",
    # Overrides
    "MATCH_EXACT",
    "MATCH_CONTAINS",
    # Scoped keys
    "SCOPED_KEY_PREFIX_LENGTH",
    # Errors
    "ERROR_BAD_REQUEST",
    "ERROR_OVERRIDES_MISSING",
]
