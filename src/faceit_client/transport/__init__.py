"""Transport layer for the FACEIT client.

Modules:
    error_logging: Transport wrapper that logs failed exchanges
    factory: Builds the ``httpx.AsyncClient`` for a ``ClientConfig``

Example:
    ```python
    from faceit_client.config import ClientConfig
    from faceit_client.transport import create_http_client

    http_client = create_http_client(ClientConfig(api_key="..."))
    ```
"""

from faceit_client.transport.error_logging import ErrorLoggingTransport
from faceit_client.transport.factory import create_http_client, create_transport

__all__ = [
    "ErrorLoggingTransport",
    "create_http_client",
    "create_transport",
]
