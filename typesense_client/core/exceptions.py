"""
typesense-client - Custom Exceptions

Every failure the client reports is a subclass of TypesenseClientError so
callers can branch on the exception class instead of matching message text.

Transport failures are NOT wrapped: httpx exceptions (or whatever the injected
transport raises) reach the caller unchanged.

Naming:
- All names end with "Error"
- No builtin is shadowed (no ConnectionError, TimeoutError, ValidationError)
"""

from __future__ import annotations


class TypesenseClientError(Exception):
    """Base exception for typesense-client.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status that produced the error, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class ConfigurationError(TypesenseClientError):
    """Raised when configuration is invalid or missing."""

    pass


# =============================================================================
# Client-side validation (raised before any request is sent)
# =============================================================================


class SchemaValidationError(TypesenseClientError):
    """Raised when a collection schema fails pre-flight validation."""

    pass


class CollectionNameRequiredError(SchemaValidationError):
    """Raised when a collection schema has an empty name."""

    def __init__(self, message: str = "collection name is required") -> None:
        super().__init__(message)


class CollectionFieldsRequiredError(SchemaValidationError):
    """Raised when a collection schema declares no fields."""

    def __init__(self, message: str = "collection fields are required") -> None:
        super().__init__(message)


# =============================================================================
# Status-code errors
# =============================================================================


class UnauthorizedError(TypesenseClientError):
    """Raised on HTTP 401, regardless of the response body."""

    def __init__(self, message: str = "unauthorized", status_code: int = 401) -> None:
        super().__init__(message, status_code=status_code)


class NotFoundError(TypesenseClientError):
    """Base class for HTTP 404 errors."""

    def __init__(self, message: str = "not found", status_code: int = 404) -> None:
        super().__init__(message, status_code=status_code)


class CollectionNotFoundError(NotFoundError):
    """Raised on HTTP 404 from collection and override endpoints."""

    def __init__(self, message: str = "collection not found", status_code: int = 404) -> None:
        super().__init__(message, status_code=status_code)


class DuplicateCollectionError(TypesenseClientError):
    """Raised on HTTP 409 when creating a collection that already exists."""

    def __init__(
        self, message: str = "collection already exists", status_code: int = 409
    ) -> None:
        super().__init__(message, status_code=status_code)


class APIError(TypesenseClientError):
    """Validation failure reported by the service (HTTP 400).

    Carries the service's ``message`` verbatim, or ``"bad request"`` when the
    error body could not be decoded.
    """

    def __init__(self, message: str = "bad request", status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class ResponseDecodeError(TypesenseClientError):
    """Raised when a response body is malformed or has an unexpected shape.

    The underlying json/pydantic exception is chained as ``__cause__``.
    """

    pass


# =============================================================================
# Scoped search keys
# =============================================================================


class ScopedKeyError(TypesenseClientError):
    """Raised when a scoped search key cannot be derived from the parent key."""

    pass
