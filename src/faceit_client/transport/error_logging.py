"""Error-logging transport.

Wraps another httpx transport and logs every failed exchange: non-2xx
responses and transport failures. It never alters, retries or swallows
anything; the response or exception is passed through untouched.

```python
import httpx
from faceit_client.transport.error_logging import ErrorLoggingTransport

transport = ErrorLoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("https://open.faceit.com/data/v4/games")
```

Request headers are never logged, so the bearer credential stays out of logs.
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class ErrorLoggingTransport(httpx.AsyncBaseTransport):
    """Log failed requests, then hand the result back unchanged.

    Args:
        wrapped_transport: The underlying transport to wrap
    """

    def __init__(self, *, wrapped_transport: httpx.AsyncBaseTransport) -> None:
        self._wrapped_transport = wrapped_transport

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request through the wrapped transport and log failures.

        Args:
            request: The HTTP request to send

        Returns:
            The wrapped transport's response
        """
        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except Exception as e:
            logger.warning(f"Request {request.method} {request.url} failed with {e!r}")
            raise

        if response.status_code >= 400:
            logger.warning(f"Request {request.method} {request.url} failed with {response.status_code}")

        return response
