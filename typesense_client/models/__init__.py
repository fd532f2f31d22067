"""Pydantic models for the Typesense wire contract.

Entities:
- NodeDescriptor: protocol, host, port and API key of a node
- CollectionSchema / Collection / CollectionField: collection management
- Override / OverrideRule / OverrideDocID: search-result overrides
- APIKey: issued API keys
"""

from typesense_client.models.collections import (
    Collection,
    CollectionField,
    CollectionSchema,
    Override,
    OverrideDocID,
    OverrideList,
    OverrideRule,
)
from typesense_client.models.keys import APIErrorResponse, APIKey, APIKeyCreateRequest
from typesense_client.models.node import NodeDescriptor

__all__ = [
    # Node
    "NodeDescriptor",
    # Collections
    "Collection",
    "CollectionField",
    "CollectionSchema",
    # Overrides
    "Override",
    "OverrideDocID",
    "OverrideList",
    "OverrideRule",
    # Keys
    "APIKey",
    "APIKeyCreateRequest",
    "APIErrorResponse",
]
