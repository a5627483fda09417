"""Factory for the httpx client the FACEIT client sends through."""

import httpx

from faceit_client.config import ClientConfig
from faceit_client.transport.error_logging import ErrorLoggingTransport


def create_transport(config: ClientConfig) -> httpx.AsyncBaseTransport:
    """Wrap the configured (or default TLS) transport in error logging."""
    base = config.transport or httpx.AsyncHTTPTransport(verify=config.verify)
    return ErrorLoggingTransport(wrapped_transport=base)


def create_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` for a configuration.

    TLS verification is applied to the default transport; a custom transport
    brings its own. The timeout here only covers requests not built by
    ``build_request``, which carries its own per-request timeout.
    """
    return httpx.AsyncClient(
        transport=create_transport(config),
        timeout=httpx.Timeout(config.timeout),
    )
