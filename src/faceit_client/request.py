"""Request construction from endpoint descriptors.

``build_request`` is a pure function: it turns a descriptor plus caller values
into an ``httpx.Request`` and never touches the network.

Example:
    ```python
    from faceit_client.config import ClientConfig
    from faceit_client.endpoints import LOOKUP_PLAYER
    from faceit_client.request import build_request

    request = build_request(LOOKUP_PLAYER, query_params={"nickname": "s1mple"}, config=ClientConfig())
    str(request.url)  # 'https://open.faceit.com/data/v4/players?nickname=s1mple'
    ```
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from faceit_client import __version__
from faceit_client.config import ClientConfig
from faceit_client.endpoints import EndpointDescriptor, ParamKind, QueryParam
from faceit_client.errors.exceptions import MissingParameterError

USER_AGENT = f"faceit-client/{__version__}"


def _token(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def format_query_value(param: QueryParam, value: Any) -> str | None:
    """Render one query value, or None if it should be omitted.

    Raises:
        TypeError: a non-integer was given for an integer parameter
    """
    if param.kind is ParamKind.INTEGER:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Query parameter '{param.name}' expects an integer, got {type(value).__name__}")
        # int.__str__ is locale independent; int() strips IntEnum formatting
        return str(int(value))

    if param.kind is ParamKind.LIST and not isinstance(value, str):
        tokens = [_token(item) for item in value]
        return ",".join(tokens) if tokens else None

    return _token(value)


def render_path(endpoint: EndpointDescriptor, path_params: Mapping[str, Any]) -> str:
    """Fill the path template, percent-encoding each value as one segment.

    Raises:
        MissingParameterError: a placeholder has no (or an empty) value
    """
    values = {}
    for name in endpoint.path_params:
        value = path_params.get(name)
        if value is None or value == "":
            raise MissingParameterError(name)
        values[name] = quote(_token(value), safe="")
    return endpoint.path.format(**values)


def build_query(endpoint: EndpointDescriptor, query_params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Build the query string pairs in descriptor order, skipping absent values.

    None, ``""`` and empty lists are all absent; no ``name=`` pair is ever emitted.

    Raises:
        MissingParameterError: a required parameter has no (or an empty) value
        ValueError: a key the endpoint does not declare
    """
    unknown = [name for name in query_params if endpoint.query_param(name) is None]
    if unknown:
        raise ValueError(f"Unknown query parameter(s) for {endpoint.name}: {', '.join(unknown)}")

    pairs = []
    for param in endpoint.query:
        value = query_params.get(param.name)
        rendered = format_query_value(param, value) if value is not None else None
        # Empty strings count as absent, as they do for path placeholders
        if not rendered:
            if param.required:
                raise MissingParameterError(param.name)
            continue
        pairs.append((param.name, rendered))
    return pairs


def build_headers(config: ClientConfig) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }
    # Same header for API keys and OAuth2 access tokens
    if config.api_key is not None:
        headers["Authorization"] = f"Bearer {config.api_key}"
    return headers


def build_request(
    endpoint: EndpointDescriptor,
    path_params: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    body: BaseModel | Mapping[str, Any] | None = None,
    *,
    config: ClientConfig,
) -> httpx.Request:
    """Build the outbound request for one operation.

    Args:
        endpoint: Operation descriptor
        path_params: Placeholder name to value
        query_params: Query parameter name to optional value
        body: Optional JSON body
        config: Client configuration (base URL, credential, timeout)

    Returns:
        A request ready to hand to ``httpx.AsyncClient.send``

    Raises:
        MissingParameterError: a required path or query value is missing
    """
    path = render_path(endpoint, path_params or {})
    params = build_query(endpoint, query_params or {})

    json_body: Any = None
    if isinstance(body, BaseModel):
        json_body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif body is not None:
        json_body = dict(body)

    return httpx.Request(
        endpoint.method,
        config.base_url + path,
        params=params or None,
        headers=build_headers(config),
        json=json_body,
        extensions={"timeout": httpx.Timeout(config.timeout).as_dict()},
    )
