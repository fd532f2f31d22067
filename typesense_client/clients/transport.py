"""
HTTP transport seam.

TypesenseClient issues every request through an object satisfying
TransportProtocol: ``send(httpx.Request) -> httpx.Response``. ``httpx.Client``
satisfies it as-is, so timeouts, pooling, retries and TLS are configured on
the httpx client the application passes in.

Patterns Applied:
- Repository Pattern: Protocol for duck typing
- FakeTransport for testing without real HTTP
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

import httpx

# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class TransportProtocol(Protocol):
    """Anything that can send an httpx.Request and return its response."""

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return the (fully read) response.

        Args:
            request: Prepared request

        Returns:
            Response with status code and body
        """
        ...


# =============================================================================
# Test Double
# =============================================================================


class FakeTransport:
    """Fake transport for unit testing without real HTTP.

    Implements TransportProtocol. Every request is recorded in ``requests``.
    Responses come from, in order of precedence: the configured ``error``
    (raised), the ``handler`` callable, then the queued ``responses``. With
    nothing configured an empty 200 response is returned.

    Usage:
        fake = FakeTransport(responses=[httpx.Response(404)])
        client = TypesenseClient(node, transport=fake)
    """

    def __init__(
        self,
        responses: Iterable[httpx.Response] | None = None,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize with scripted behaviour.

        Args:
            responses: Responses returned one per request, in order
            handler: Callable building a response from the request
            error: Exception raised on every send
        """
        self._responses: list[httpx.Response] = list(responses) if responses else []
        self._handler = handler
        self._error = error
        self.requests: list[httpx.Request] = []

    def send(self, request: httpx.Request) -> httpx.Response:
        """Record the request and return the scripted response.

        Raises:
            Exception: The configured error, if any
        """
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._handler is not None:
            return self._handler(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200)

    def add_response(self, response: httpx.Response) -> None:
        """Queue a response for a later request."""
        self._responses.append(response)

    @property
    def last_request(self) -> httpx.Request:
        """The most recently sent request."""
        return self.requests[-1]
