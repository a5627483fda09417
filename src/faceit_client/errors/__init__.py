"""Error taxonomy and response mapping for the FACEIT client."""

from faceit_client.errors.exceptions import (
    ApiError,
    DeserializationError,
    FaceitError,
    InvalidCredentialError,
    MissingParameterError,
    ServerError,
    TransportError,
)
from faceit_client.errors.handler import error_message, map_response, raise_for_status, transport_error
from faceit_client.errors.models import ErrorPayload

__all__ = [
    "ApiError",
    "DeserializationError",
    "ErrorPayload",
    "FaceitError",
    "InvalidCredentialError",
    "MissingParameterError",
    "ServerError",
    "TransportError",
    "error_message",
    "map_response",
    "raise_for_status",
    "transport_error",
]
