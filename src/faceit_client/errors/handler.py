"""Mapping of raw HTTP responses to records or typed errors."""

from typing import TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from faceit_client.errors.exceptions import (
    ApiError,
    DeserializationError,
    InvalidCredentialError,
    ServerError,
    TransportError,
)
from faceit_client.errors.models import ErrorPayload

RecordT = TypeVar("RecordT", bound=BaseModel)

DEFAULT_MESSAGES: dict[int, str] = {
    400: "Bad request",
    403: "Forbidden",
    404: "Not found",
    429: "Too many requests",
    503: "Service temporarily unavailable",
}


def error_message(status_code: int, content: bytes) -> str:
    """Extract the error message for a failed response.

    Falls back to a placeholder derived from the status code when the body
    carries no usable message.
    """
    payload = ErrorPayload.from_content(content)
    if payload and payload.message:
        return payload.message
    return DEFAULT_MESSAGES.get(status_code, f"HTTP {status_code}")


def raise_for_status(status_code: int, content: bytes) -> None:
    """Raise the typed error for a non-2xx status.

    Args:
        status_code: HTTP status code
        content: Raw response body

    Raises:
        InvalidCredentialError: for 401, whatever the body says
        ServerError: for 500, without reading the body
        ApiError: for every other non-2xx status
    """
    if 200 <= status_code < 300:
        return

    if status_code == 401:
        raise InvalidCredentialError()

    if status_code == 500:
        raise ServerError()

    raise ApiError(status_code, error_message(status_code, content))


def map_response(status_code: int, content: bytes, model: type[RecordT]) -> RecordT:
    """Turn a raw response into the expected record.

    Args:
        status_code: HTTP status code
        content: Raw response body
        model: Record type the operation returns

    Returns:
        The validated record

    Raises:
        DeserializationError: 2xx body is malformed or has the wrong shape
        InvalidCredentialError, ServerError, ApiError: see ``raise_for_status``
    """
    raise_for_status(status_code, content)

    try:
        return model.model_validate_json(content)
    except PydanticValidationError as e:
        raise DeserializationError(
            f"Failed to parse {model.__name__} from HTTP {status_code} response: {e}",
            status_code=status_code,
            body=content,
        ) from e


def transport_error(exc: httpx.RequestError) -> TransportError:
    """Wrap an httpx request failure."""
    try:
        request = exc.request
    except RuntimeError:
        # Raised by httpx when the exception was created without a request
        return TransportError(f"Request failed: {exc!r}", cause=exc)
    return TransportError(f"{request.method} {request.url} failed: {exc!r}", cause=exc)
