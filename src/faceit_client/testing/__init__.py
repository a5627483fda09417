"""Testing utilities for code built on the FACEIT client.

Helpers to run a real ``FaceitClient`` against an in-process
``httpx.MockTransport`` instead of the network.

Example:
    ```python
    from faceit_client.testing import json_response, mock_client


    async def test_player_not_found():
        def handler(request):
            return json_response({"message": "Player not found"}, status_code=404)

        async with mock_client(handler) as client:
            with pytest.raises(ApiError):
                await client.get_player("missing")
    ```
"""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from faceit_client.client import FaceitClient
from faceit_client.config import ClientConfig

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://open.faceit.test"


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    """A response with a JSON body and content type."""
    return httpx.Response(status_code, json=payload)


def error_response(status_code: int, message: str | None = None) -> httpx.Response:
    """A FACEIT-style error response, or an empty body when no message is given."""
    if message is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, json={"message": message})


def mock_config(handler: Handler, **overrides: Any) -> ClientConfig:
    """Client settings routed through ``httpx.MockTransport(handler)``."""
    settings: dict[str, Any] = {"base_url": TEST_BASE_URL, "api_key": TEST_API_KEY}
    settings.update(overrides)
    return ClientConfig(transport=httpx.MockTransport(handler), **settings)


def mock_client(handler: Handler, **overrides: Any) -> FaceitClient:
    """A client whose every request is answered by ``handler``."""
    return FaceitClient(mock_config(handler, **overrides))


__all__ = [
    "TEST_API_KEY",
    "TEST_BASE_URL",
    "Handler",
    "error_response",
    "json_response",
    "mock_client",
    "mock_config",
]
