"""Error payload models."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorPayload:
    """Structured error body returned by the FACEIT API.

    The API reports errors either as a flat object with a ``message`` key or as
    an ``errors`` array, e.g.::

        {"errors": [{"message": "...", "code": "err_nf0", "http_status": 404}]}
    """

    message: str | None = None  # Human-readable explanation
    code: str | None = None  # FACEIT error code, e.g. "err_nf0"
    http_status: int | None = None

    # Remaining top-level members
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_content(cls, content: bytes) -> "ErrorPayload | None":
        """Parse an error payload from a response body.

        Args:
            content: Raw response body

        Returns:
            ErrorPayload or None if the body is not a JSON object
        """
        if not content:
            return None
        try:
            data = json.loads(content)
        except (ValueError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None

        entry: dict[str, Any] = data
        errors = data.get("errors")
        if "message" not in data and isinstance(errors, list) and errors and isinstance(errors[0], dict):
            entry = errors[0]

        message = entry.get("message")
        code = entry.get("code")
        http_status = entry.get("http_status")

        known_fields = {"message", "code", "http_status"}
        extensions = {k: v for k, v in data.items() if k not in known_fields}

        return cls(
            message=message if isinstance(message, str) and message else None,
            code=code if isinstance(code, str) else None,
            http_status=http_status if isinstance(http_status, int) else None,
            extensions=extensions if extensions else None,
        )
