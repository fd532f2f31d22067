"""
Typesense HTTP client.

- TypesenseClient: collection, override and API-key operations
- TransportProtocol / FakeTransport: injectable HTTP seam and its test double
- generate_scoped_search_key: HMAC-derived scoped search keys
"""

from typesense_client.clients.client import TypesenseClient
from typesense_client.clients.request_builder import RequestBuilder
from typesense_client.clients.response_mapper import error_for_status
from typesense_client.clients.scoped_keys import generate_scoped_search_key
from typesense_client.clients.transport import FakeTransport, TransportProtocol

__all__ = [
    "TypesenseClient",
    "RequestBuilder",
    "error_for_status",
    "generate_scoped_search_key",
    "FakeTransport",
    "TransportProtocol",
]
