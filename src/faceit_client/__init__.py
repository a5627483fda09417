"""FACEIT Client - typed async client for the FACEIT Data API v4.

This library turns typed method calls into authenticated HTTP requests and
JSON responses into typed records:
- Endpoint descriptors and a pure request builder
- Response mapping to pydantic records or a small error taxonomy
- Multi-source credential resolution (explicit, env, .env, file)
- Error-logging transport over any httpx transport

Example:
    ```python
    from faceit_client import FaceitClient, PlayerLookup

    async with FaceitClient.builder().api_key("...").build() as client:
        player = await client.lookup_player(PlayerLookup(nickname="s1mple"))
        print(player.player_id, player.country)
    ```
"""

__version__ = "0.1.0"

from faceit_client.client import ClientBuilder, FaceitClient  # noqa: E402
from faceit_client.config import ClientConfig  # noqa: E402
from faceit_client.errors import (  # noqa: E402
    ApiError,
    DeserializationError,
    FaceitError,
    InvalidCredentialError,
    MissingParameterError,
    ServerError,
    TransportError,
)
from faceit_client.options import (  # noqa: E402
    Expansion,
    HistoryWindow,
    HubSearchQuery,
    ListingType,
    MatchListing,
    MatchmakingQuery,
    Page,
    PlayerLookup,
    PlayerRankingQuery,
    PlayerSearchQuery,
    RankingQuery,
    TeamSearchQuery,
)

__all__ = [
    "ApiError",
    "ClientBuilder",
    "ClientConfig",
    "DeserializationError",
    "Expansion",
    "FaceitClient",
    "FaceitError",
    "HistoryWindow",
    "HubSearchQuery",
    "InvalidCredentialError",
    "ListingType",
    "MatchListing",
    "MatchmakingQuery",
    "MissingParameterError",
    "Page",
    "PlayerLookup",
    "PlayerRankingQuery",
    "PlayerSearchQuery",
    "RankingQuery",
    "ServerError",
    "TeamSearchQuery",
    "TransportError",
    "__version__",
]
