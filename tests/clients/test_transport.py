"""
Tests for the transport seam and client lifecycle.

- TestTransportProtocol: httpx.Client and FakeTransport both satisfy it
- TestFakeTransport: scripted responses, handler, error
- TestClientLifecycle: owned vs injected transports
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest
from pydantic import ValidationError

from typesense_client.clients.client import TypesenseClient
from typesense_client.clients.transport import FakeTransport, TransportProtocol
from typesense_client.models.node import NodeDescriptor


@pytest.fixture
def node() -> NodeDescriptor:
    return NodeDescriptor(host="localhost", port=8108, api_key="test-key")


class TestTransportProtocol:
    """Protocol compliance."""

    def test_httpx_client_satisfies_protocol(self) -> None:
        with httpx.Client() as http:
            assert isinstance(http, TransportProtocol)

    def test_fake_transport_satisfies_protocol(self) -> None:
        assert isinstance(FakeTransport(), TransportProtocol)

    def test_mock_transport_backed_client_works(self, node: NodeDescriptor) -> None:
        """An httpx.Client on httpx.MockTransport is a valid injected transport."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["X-TYPESENSE-API-KEY"] == "test-key"
            return httpx.Response(200, json=[])

        with httpx.Client(transport=httpx.MockTransport(handler)) as http:
            client = TypesenseClient(node, transport=http)
            assert client.retrieve_collections() == []


class TestFakeTransport:
    """FakeTransport behaviour."""

    def test_default_response_is_empty_200(self) -> None:
        fake = FakeTransport()

        response = fake.send(httpx.Request("GET", "http://localhost:8108/keys"))

        assert response.status_code == 200
        assert len(fake.requests) == 1

    def test_responses_are_returned_in_order(self) -> None:
        fake = FakeTransport(responses=[httpx.Response(201), httpx.Response(404)])
        request = httpx.Request("GET", "http://localhost:8108/keys")

        assert fake.send(request).status_code == 201
        assert fake.send(request).status_code == 404

    def test_handler_builds_response(self) -> None:
        fake = FakeTransport(handler=lambda req: httpx.Response(202, json={"path": req.url.path}))

        response = fake.send(httpx.Request("DELETE", "http://localhost:8108/keys/9"))

        assert response.json() == {"path": "/keys/9"}

    def test_error_is_raised(self) -> None:
        fake = FakeTransport(error=httpx.ReadTimeout("slow"))

        with pytest.raises(httpx.ReadTimeout):
            fake.send(httpx.Request("GET", "http://localhost:8108/keys"))


class TestClientLifecycle:
    """The client closes only the transport it created."""

    def test_owned_transport_is_closed(self, node: NodeDescriptor) -> None:
        with TypesenseClient(node) as client:
            http = client._transport
            assert isinstance(http, httpx.Client)

        assert http.is_closed

    def test_injected_transport_is_left_open(self, node: NodeDescriptor) -> None:
        injected = MagicMock(spec=httpx.Client)

        with TypesenseClient(node, transport=injected):
            pass

        injected.close.assert_not_called()

    def test_node_descriptor_is_immutable(self, node: NodeDescriptor) -> None:
        with pytest.raises(ValidationError):
            node.host = "elsewhere"  # type: ignore[misc]
