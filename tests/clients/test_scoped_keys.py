"""
Tests for scoped search key generation.

- TestTokenLayout: decoded token is digest_b64 + key prefix + params JSON
- TestDeterminism: same inputs give the same token, different ones differ
- TestShortKey: parent keys under 4 bytes are rejected
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json

import pytest

from typesense_client.clients.client import TypesenseClient
from typesense_client.clients.scoped_keys import (
    generate_scoped_search_key,
    serialize_parameters,
)
from typesense_client.clients.transport import FakeTransport
from typesense_client.core.exceptions import ScopedKeyError, TypesenseClientError
from typesense_client.models.node import NodeDescriptor

SEARCH_KEY = "RN23GFr1s6jQ9kgSNg2O7fYcAUXU7127"

# Length of base64(32-byte SHA-256 digest)
DIGEST_B64_LENGTH = 44


def _split_token(token: str) -> tuple[bytes, bytes, bytes]:
    raw = base64.b64decode(token)
    return raw[:DIGEST_B64_LENGTH], raw[DIGEST_B64_LENGTH : DIGEST_B64_LENGTH + 4], raw[DIGEST_B64_LENGTH + 4 :]


class TestTokenLayout:
    """The decoded token has the layout the service expects."""

    def test_token_is_base64_text(self) -> None:
        token = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "company_id:124"})

        assert isinstance(token, str)
        assert base64.b64encode(base64.b64decode(token)).decode("ascii") == token

    def test_prefix_is_first_four_key_bytes(self) -> None:
        token = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "company_id:124"})

        _, prefix, _ = _split_token(token)

        assert prefix == b"RN23"

    def test_embedded_parameters_are_compact_json(self) -> None:
        token = generate_scoped_search_key(
            SEARCH_KEY, {"filter_by": "company_id:124", "exclude_fields": "salary"}
        )

        _, _, params = _split_token(token)

        assert params == b'{"exclude_fields":"salary","filter_by":"company_id:124"}'
        assert json.loads(params) == {
            "filter_by": "company_id:124",
            "exclude_fields": "salary",
        }

    def test_digest_is_hmac_sha256_of_parameters(self) -> None:
        parameters = {"filter_by": "company_id:124"}
        token = generate_scoped_search_key(SEARCH_KEY, parameters)

        digest_b64, _, params = _split_token(token)
        expected = hmac.new(SEARCH_KEY.encode(), params, hashlib.sha256).digest()

        assert base64.b64decode(digest_b64) == expected

    def test_non_ascii_parameters_are_utf8(self) -> None:
        token = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "city:Zürich"})

        _, _, params = _split_token(token)

        assert params == '{"filter_by":"city:Zürich"}'.encode("utf-8")

    def test_empty_parameters(self) -> None:
        token = generate_scoped_search_key(SEARCH_KEY, {})

        _, prefix, params = _split_token(token)

        assert prefix == b"RN23"
        assert params == b"{}"


class TestDeterminism:
    """Scoped keys are a pure function of their inputs."""

    def test_same_inputs_same_token(self) -> None:
        first = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "company_id:124"})
        second = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "company_id:124"})

        assert first == second

    def test_insertion_order_does_not_matter(self) -> None:
        a = {"filter_by": "company_id:124", "exclude_fields": "salary"}
        b = {"exclude_fields": "salary", "filter_by": "company_id:124"}

        assert serialize_parameters(a) == serialize_parameters(b)
        assert generate_scoped_search_key(SEARCH_KEY, a) == generate_scoped_search_key(SEARCH_KEY, b)

    def test_different_parameters_different_token(self) -> None:
        first = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "company_id:124"})
        second = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "company_id:125"})

        assert first != second

    def test_different_parent_key_different_digest(self) -> None:
        first = generate_scoped_search_key(SEARCH_KEY, {"filter_by": "company_id:124"})
        second = generate_scoped_search_key(SEARCH_KEY + "x", {"filter_by": "company_id:124"})

        assert _split_token(first)[0] != _split_token(second)[0]

    def test_client_method_delegates(self) -> None:
        node = NodeDescriptor(host="localhost", port=8108, api_key="admin")
        client = TypesenseClient(node, transport=FakeTransport())
        parameters = {"filter_by": "company_id:124"}

        assert client.generate_scoped_search_key(SEARCH_KEY, parameters) == (
            generate_scoped_search_key(SEARCH_KEY, parameters)
        )


class TestShortKey:
    """Parent keys shorter than the 4-byte prefix are rejected."""

    @pytest.mark.parametrize("search_key", ["", "a", "abc"])
    def test_short_key_raises(self, search_key: str) -> None:
        with pytest.raises(ScopedKeyError):
            generate_scoped_search_key(search_key, {"filter_by": "x:1"})

    def test_four_byte_key_is_accepted(self) -> None:
        token = generate_scoped_search_key("abcd", {"filter_by": "x:1"})

        assert _split_token(token)[1] == b"abcd"

    def test_scoped_key_error_is_client_error(self) -> None:
        assert issubclass(ScopedKeyError, TypesenseClientError)
