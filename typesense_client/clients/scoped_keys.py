"""
Scoped search key generation.

A scoped search key embeds fixed search parameters in a credential derived
from a parent search key. The service recovers the parent key from the 4-byte
prefix, recomputes the HMAC over the embedded parameters, and applies them to
every search made with the scoped key.

Token layout (before the final base64 pass):

    base64(HMAC-SHA256(parent_key, params_json)) + parent_key[:4] + params_json

``params_json`` is compact JSON with sorted keys, UTF-8 encoded. The prefix
bytes are copied verbatim, not re-encoded.
"""

from __future__ import annotations

import base64
import hmac
import json
from collections.abc import Mapping
from hashlib import sha256
from typing import Any

from typesense_client.core.exceptions import ScopedKeyError
from typesense_client.models.constants import SCOPED_KEY_PREFIX_LENGTH


def serialize_parameters(parameters: Mapping[str, Any]) -> bytes:
    """Serialize embedded search parameters deterministically.

    Equal mappings always produce identical bytes regardless of insertion
    order.
    """
    return json.dumps(
        dict(parameters),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")


def generate_scoped_search_key(search_key: str, parameters: Mapping[str, Any]) -> str:
    """Derive a scoped search key embedding ``parameters``.

    Args:
        search_key: Parent search-only API key (the HMAC secret)
        parameters: Search parameters to enforce, e.g. {"filter_by": "company_id:124"}

    Returns:
        Opaque base64 token usable in place of the parent key

    Raises:
        ScopedKeyError: If the parent key is shorter than the 4-byte prefix
    """
    key_bytes = search_key.encode("utf-8")
    if len(key_bytes) < SCOPED_KEY_PREFIX_LENGTH:
        raise ScopedKeyError(
            f"search key must be at least {SCOPED_KEY_PREFIX_LENGTH} bytes long"
        )

    params_json = serialize_parameters(parameters)
    digest = hmac.new(key_bytes, params_json, sha256).digest()
    digest_b64 = base64.b64encode(digest)
    key_prefix = key_bytes[:SCOPED_KEY_PREFIX_LENGTH]

    return base64.b64encode(digest_b64 + key_prefix + params_json).decode("ascii")
