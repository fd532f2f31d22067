"""
Response mapper.

Status handling is table-driven: each operation family has a table mapping
HTTP status codes to exception classes. error_for_status() is a pure lookup,
so the tables can be checked without any networking. Statuses missing from a
table fall through to success-path decoding.

Decoders turn response bodies into models and raise ResponseDecodeError
(chaining the pydantic cause) when the body does not fit.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Final, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from typesense_client.core.exceptions import (
    APIError,
    CollectionNotFoundError,
    DuplicateCollectionError,
    ResponseDecodeError,
    TypesenseClientError,
    UnauthorizedError,
)
from typesense_client.models.collections import Override, OverrideList
from typesense_client.models.constants import (
    ERROR_BAD_REQUEST,
    ERROR_OVERRIDES_MISSING,
    OVERRIDES_RESPONSE_KEY,
)
from typesense_client.models.keys import APIErrorResponse

ModelT = TypeVar("ModelT", bound=BaseModel)

StatusTable = Mapping[int, type[TypesenseClientError]]

# =============================================================================
# Status Tables
# =============================================================================

CREATE_COLLECTION_STATUS: Final[StatusTable] = MappingProxyType(
    {
        400: APIError,
        401: UnauthorizedError,
        409: DuplicateCollectionError,
    }
)

COLLECTION_LIST_STATUS: Final[StatusTable] = MappingProxyType(
    {
        401: UnauthorizedError,
    }
)

# retrieve/delete collection and every override operation
COLLECTION_STATUS: Final[StatusTable] = MappingProxyType(
    {
        401: UnauthorizedError,
        404: CollectionNotFoundError,
    }
)

CREATE_KEY_STATUS: Final[StatusTable] = MappingProxyType(
    {
        400: APIError,
        401: UnauthorizedError,
    }
)

KEY_STATUS: Final[StatusTable] = MappingProxyType(
    {
        401: UnauthorizedError,
    }
)


def error_for_status(
    status_code: int, table: StatusTable
) -> type[TypesenseClientError] | None:
    """Look up the error class for a status code.

    Args:
        status_code: HTTP status code of the response
        table: Status table of the operation family

    Returns:
        Exception class to raise, or None for success-path handling
    """
    return table.get(status_code)


def raise_for_status(response: httpx.Response, table: StatusTable) -> None:
    """Raise the mapped error for a response, if its status is in the table.

    APIError is built from the response body; every other error ignores it.

    Raises:
        TypesenseClientError: The mapped error subclass
    """
    error_cls = error_for_status(response.status_code, table)
    if error_cls is None:
        return
    if error_cls is APIError:
        raise decode_api_error(response.content, response.status_code)
    raise error_cls()


# =============================================================================
# Decoders
# =============================================================================


def decode_api_error(content: bytes, status_code: int = 400) -> APIError:
    """Build an APIError from a service error body.

    Falls back to "bad request" when the body is not ``{"message": ...}``.
    """
    try:
        payload = APIErrorResponse.model_validate_json(content)
    except ValidationError:
        return APIError(ERROR_BAD_REQUEST, status_code=status_code)
    return APIError(payload.message, status_code=status_code)


def decode_model(content: bytes, model_type: type[ModelT]) -> ModelT:
    """Decode a JSON body into a single model.

    Raises:
        ResponseDecodeError: If the body is not valid JSON for the model
    """
    try:
        return model_type.model_validate_json(content)
    except ValidationError as e:
        msg = f"could not decode {model_type.__name__} response: {e.error_count()} error(s)"
        raise ResponseDecodeError(msg) from e


@lru_cache(maxsize=None)
def _list_adapter(model_type: type[BaseModel]) -> TypeAdapter[list[Any]]:
    """One list adapter per model type, built on first use."""
    return TypeAdapter(list[model_type])  # type: ignore[valid-type]


def decode_model_list(content: bytes, model_type: type[ModelT]) -> list[ModelT]:
    """Decode a JSON array body into a list of models, preserving order.

    Raises:
        ResponseDecodeError: If the body is not a valid JSON array of the model
    """
    try:
        return _list_adapter(model_type).validate_json(content)
    except ValidationError as e:
        msg = f"could not decode {model_type.__name__} list response: {e.error_count()} error(s)"
        raise ResponseDecodeError(msg) from e


def _lacks_overrides_list(error: ValidationError) -> bool:
    """True when the body is JSON but has no "overrides" member to read."""
    details = error.errors()
    if len(details) != 1:
        return False
    detail = details[0]
    if detail["type"] == "missing":
        return detail["loc"] == (OVERRIDES_RESPONSE_KEY,)
    # top-level value that is not an object
    return detail["loc"] == () and detail["type"] != "json_invalid"


def decode_overrides(content: bytes) -> list[Override]:
    """Decode ``{"overrides": [...]}`` into a list of overrides.

    A null list decodes as empty.

    Raises:
        ResponseDecodeError: If the body is malformed or the key is missing
    """
    try:
        return OverrideList.model_validate_json(content).overrides
    except ValidationError as e:
        if _lacks_overrides_list(e):
            raise ResponseDecodeError(ERROR_OVERRIDES_MISSING) from e
        msg = f"could not decode overrides response: {e.error_count()} error(s)"
        raise ResponseDecodeError(msg) from e
