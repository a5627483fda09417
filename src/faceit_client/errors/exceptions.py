"""Structured exceptions for FACEIT API calls.

Every failure surfaced by the client is exactly one of these, all rooted at
``FaceitError`` so callers can catch the whole family at once.
"""


class FaceitError(Exception):
    """Base exception for all client errors."""


class MissingParameterError(FaceitError):
    """A required path or query parameter was not supplied.

    Raised while building the request, before anything is sent.
    """

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"Missing required parameter: {field}")
        self.field = field


class InvalidCredentialError(FaceitError):
    """401 Unauthorized: the credential was invalid or missing."""

    status_code = 401

    def __init__(self, message: str = "Invalid or missing API key"):
        super().__init__(message)


class TransportError(FaceitError):
    """The request never produced an HTTP response (connect error, timeout, DNS)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ApiError(FaceitError):
    """Non-2xx response other than 401 and 500."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ServerError(FaceitError):
    """500 Internal Server Error."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


class DeserializationError(FaceitError):
    """A 2xx response body did not match the expected record shape."""

    def __init__(self, message: str, status_code: int, body: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
