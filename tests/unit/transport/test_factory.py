"""Tests for the httpx client factory."""

import httpx
import pytest

from faceit_client.config import ClientConfig
from faceit_client.transport.error_logging import ErrorLoggingTransport
from faceit_client.transport.factory import create_http_client, create_transport


@pytest.mark.unit
def test_custom_transport_is_wrapped():
    mock = httpx.MockTransport(lambda request: httpx.Response(200))

    transport = create_transport(ClientConfig(transport=mock))

    assert isinstance(transport, ErrorLoggingTransport)
    assert transport._wrapped_transport is mock


@pytest.mark.unit
def test_default_transport_is_http():
    transport = create_transport(ClientConfig(verify=False))

    assert isinstance(transport._wrapped_transport, httpx.AsyncHTTPTransport)


@pytest.mark.unit
async def test_http_client_uses_config_timeout():
    mock = httpx.MockTransport(lambda request: httpx.Response(200))

    async with create_http_client(ClientConfig(timeout=7.5, transport=mock)) as client:
        assert client.timeout == httpx.Timeout(7.5)
        response = await client.get("https://open.faceit.com/data/v4/games")

    assert response.status_code == 200
