"""
Typesense Client

Synchronous client for collection management, search-result overrides and API
keys. Each operation is one HTTP round trip:

    build request -> transport.send() -> status table -> decode

Patterns Applied:
- Transport injected through TransportProtocol (httpx.Client by default)
- Custom namespaced exceptions (typesense_client.core.exceptions)
- Immutable NodeDescriptor, no module-level client state

No retries, timeouts or cancellation happen here; configure them on the
httpx.Client passed as transport. Transport exceptions propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel

from typesense_client.clients.request_builder import (
    RequestBuilder,
    collections_path,
    keys_path,
    overrides_path,
)
from typesense_client.clients.response_mapper import (
    COLLECTION_LIST_STATUS,
    COLLECTION_STATUS,
    CREATE_COLLECTION_STATUS,
    CREATE_KEY_STATUS,
    KEY_STATUS,
    StatusTable,
    decode_model,
    decode_model_list,
    decode_overrides,
    raise_for_status,
)
from typesense_client.clients.scoped_keys import generate_scoped_search_key
from typesense_client.clients.transport import TransportProtocol
from typesense_client.core.exceptions import (
    CollectionFieldsRequiredError,
    CollectionNameRequiredError,
)
from typesense_client.core.logging import get_logger
from typesense_client.core.tracing import get_tracer
from typesense_client.models.collections import Collection, CollectionSchema, Override
from typesense_client.models.keys import APIKey, APIKeyCreateRequest
from typesense_client.models.node import NodeDescriptor

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class TypesenseClient:
    """HTTP client for a Typesense node.

    Safe to share between threads as long as the transport is (httpx.Client
    is). A transport created by the client is closed by close() or on leaving
    a ``with`` block; an injected transport is left to its owner.

    Usage:
        node = NodeDescriptor(host="localhost", port=8108, api_key="xyz")
        with TypesenseClient(node) as client:
            collection = client.retrieve_collection("companies")

    Attributes:
        node: Immutable node descriptor
    """

    def __init__(
        self,
        node: NodeDescriptor,
        transport: TransportProtocol | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            node: Node descriptor (protocol, host, port, API key)
            transport: Object with ``send(httpx.Request)``; defaults to a new httpx.Client
        """
        self.node = node
        self._builder = RequestBuilder(node)
        self._owns_transport = transport is None
        self._transport: TransportProtocol = (
            transport if transport is not None else httpx.Client()
        )

    def __enter__(self) -> TypesenseClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, httpx.Client):
            self._transport.close()

    # =========================================================================
    # Request plumbing
    # =========================================================================

    def _call(
        self,
        method: str,
        path: str,
        table: StatusTable,
        payload: BaseModel | None = None,
    ) -> httpx.Response:
        """Send one request and apply the status table.

        Raises:
            TypesenseClientError: Mapped status error
            httpx.HTTPError: Transport failure, unchanged
        """
        request = self._builder.build(method, path, payload)
        with tracer.start_as_current_span(f"typesense.{method}") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.route", path)
            response = self._transport.send(request)
            span.set_attribute("http.status_code", response.status_code)

        logger.debug(
            "typesense_request",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        raise_for_status(response, table)
        return response

    # =========================================================================
    # Collections
    # =========================================================================

    def create_collection(self, schema: CollectionSchema) -> Collection:
        """Create a collection from a schema.

        Args:
            schema: Collection schema; name and fields must be non-empty

        Returns:
            The created Collection as reported by the service

        Raises:
            CollectionNameRequiredError: Empty name (no request sent)
            CollectionFieldsRequiredError: Empty fields (no request sent)
            DuplicateCollectionError: 409
            UnauthorizedError: 401
            APIError: 400, with the service's message
        """
        if not schema.name:
            raise CollectionNameRequiredError()
        if not schema.fields:
            raise CollectionFieldsRequiredError()

        response = self._call("POST", collections_path(), CREATE_COLLECTION_STATUS, schema)
        return decode_model(response.content, Collection)

    def retrieve_collections(self) -> list[Collection]:
        """List all collections, in the order returned by the service."""
        response = self._call("GET", collections_path(), COLLECTION_LIST_STATUS)
        return decode_model_list(response.content, Collection)

    def retrieve_collection(self, name: str) -> Collection:
        """Retrieve a single collection by name.

        Raises:
            CollectionNotFoundError: 404
            UnauthorizedError: 401
        """
        response = self._call("GET", collections_path(name), COLLECTION_STATUS)
        return decode_model(response.content, Collection)

    def delete_collection(self, name: str) -> Collection:
        """Delete a collection by name.

        Returns:
            The collection representation returned by the service

        Raises:
            CollectionNotFoundError: 404
            UnauthorizedError: 401
        """
        response = self._call("DELETE", collections_path(name), COLLECTION_STATUS)
        return decode_model(response.content, Collection)

    # =========================================================================
    # Overrides
    # =========================================================================

    def override_collection(self, name: str, override: Override) -> None:
        """Create or replace an override rule on a collection.

        Raises:
            CollectionNotFoundError: 404
            UnauthorizedError: 401
        """
        self._call("PUT", overrides_path(name, override.id), COLLECTION_STATUS, override)

    def retrieve_overrides(self, name: str) -> list[Override]:
        """List the overrides of a collection.

        Raises:
            CollectionNotFoundError: 404
            UnauthorizedError: 401
            ResponseDecodeError: Body lacks the "overrides" list
        """
        response = self._call("GET", overrides_path(name), COLLECTION_STATUS)
        return decode_overrides(response.content)

    def delete_override(self, name: str, override_id: str) -> None:
        """Delete an override rule from a collection.

        Raises:
            CollectionNotFoundError: 404
            UnauthorizedError: 401
        """
        self._call("DELETE", overrides_path(name, override_id), COLLECTION_STATUS)

    # =========================================================================
    # API keys
    # =========================================================================

    def create_api_key(
        self,
        description: str,
        actions: Sequence[str],
        collections: Sequence[str],
    ) -> APIKey:
        """Create an API key limited to actions and collections.

        Returns:
            The new key; ``value`` holds the secret, shown only this once

        Raises:
            APIError: 400, with the service's message
            UnauthorizedError: 401
        """
        payload = APIKeyCreateRequest(
            description=description,
            actions=list(actions),
            collections=list(collections),
        )
        response = self._call("POST", keys_path(), CREATE_KEY_STATUS, payload)
        return decode_model(response.content, APIKey)

    def api_key(self, key_id: int) -> APIKey:
        """Retrieve an API key's metadata by id."""
        response = self._call("GET", keys_path(key_id), KEY_STATUS)
        return decode_model(response.content, APIKey)

    def api_keys(self) -> list[APIKey]:
        """List metadata of all API keys."""
        response = self._call("GET", keys_path(), KEY_STATUS)
        return decode_model_list(response.content, APIKey)

    def delete_api_key(self, key_id: int) -> None:
        """Delete an API key by id."""
        self._call("DELETE", keys_path(key_id), KEY_STATUS)

    # =========================================================================
    # Scoped search keys
    # =========================================================================

    def generate_scoped_search_key(
        self, search_key: str, parameters: Mapping[str, Any]
    ) -> str:
        """Derive a scoped search key; see scoped_keys.generate_scoped_search_key."""
        return generate_scoped_search_key(search_key, parameters)
