"""
Request builder.

Turns (method, resource path, payload) into an ``httpx.Request`` aimed at the
configured node, with the API-key header attached and the payload serialized
to compact JSON.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
from pydantic import BaseModel

from typesense_client.models.constants import (
    API_KEY_HEADER,
    COLLECTIONS_ENDPOINT,
    CONTENT_TYPE_JSON,
    KEYS_ENDPOINT,
    OVERRIDES_ENDPOINT,
)
from typesense_client.models.node import NodeDescriptor


def resource_path(*segments: str | int) -> str:
    """Join path segments, percent-encoding each one.

    Example:
        resource_path("collections", "companies") -> "collections/companies"
    """
    return "/".join(quote(str(segment), safe="") for segment in segments)


def collections_path(name: str | None = None) -> str:
    """Path of the collections resource or of one collection."""
    if name is None:
        return resource_path(COLLECTIONS_ENDPOINT)
    return resource_path(COLLECTIONS_ENDPOINT, name)


def overrides_path(collection_name: str, override_id: str | None = None) -> str:
    """Path of a collection's overrides or of one override."""
    if override_id is None:
        return resource_path(COLLECTIONS_ENDPOINT, collection_name, OVERRIDES_ENDPOINT)
    return resource_path(
        COLLECTIONS_ENDPOINT, collection_name, OVERRIDES_ENDPOINT, override_id
    )


def keys_path(key_id: int | None = None) -> str:
    """Path of the keys resource or of one key."""
    if key_id is None:
        return resource_path(KEYS_ENDPOINT)
    return resource_path(KEYS_ENDPOINT, key_id)


class RequestBuilder:
    """Builds authenticated requests for one node.

    Attributes:
        node: Immutable node descriptor supplying base URL and API key
    """

    def __init__(self, node: NodeDescriptor) -> None:
        self.node = node

    def url(self, path: str) -> str:
        """Render ``{protocol}://{host}:{port}/{path}``."""
        return f"{self.node.base_url}/{path}"

    def build(
        self,
        method: str,
        path: str,
        payload: BaseModel | None = None,
    ) -> httpx.Request:
        """Build a request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Resource path relative to the node root
            payload: Optional body; unset optional fields are omitted

        Returns:
            Request ready to hand to a transport
        """
        headers = {API_KEY_HEADER: self.node.api_key}
        content: bytes | None = None
        if payload is not None:
            content = payload.model_dump_json(exclude_none=True).encode("utf-8")
            headers["Content-Type"] = CONTENT_TYPE_JSON
        return httpx.Request(method, self.url(path), headers=headers, content=content)
