"""Async client for the FACEIT Data API v4.

Every public method is one GET against ``/data/v4``: the request is built from
an endpoint descriptor, sent exactly once, and the response is mapped to a
typed record or raised as a ``FaceitError``.

Example:
    ```python
    from faceit_client import FaceitClient
    from faceit_client.options import PlayerLookup

    async with FaceitClient.builder().api_key("...").build() as client:
        player = await client.lookup_player(PlayerLookup(nickname="s1mple"))
        stats = await client.get_player_stats(player.player_id, "cs2")
    ```
"""

import logging
import ssl
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from faceit_client import endpoints, resources
from faceit_client.config import ClientConfig
from faceit_client.endpoints import EndpointDescriptor
from faceit_client.errors.exceptions import MissingParameterError
from faceit_client.errors.handler import map_response, transport_error
from faceit_client.models import (
    Championship,
    ChampionshipList,
    CompetitionSearchList,
    Game,
    GameList,
    GlobalRankingList,
    Hub,
    HubList,
    HubMemberList,
    HubStats,
    Match,
    MatchHistoryList,
    MatchList,
    MatchmakingList,
    MatchStats,
    Player,
    PlayerBanList,
    PlayerGlobalRanking,
    PlayerStats,
    TeamList,
    TeamSearchList,
    TournamentList,
    UserSearchList,
)
from faceit_client.options import (
    Expansion,
    HistoryWindow,
    HubSearchQuery,
    MatchListing,
    MatchmakingQuery,
    Page,
    PlayerLookup,
    PlayerRankingQuery,
    PlayerSearchQuery,
    QueryOptions,
    RankingQuery,
    TeamSearchQuery,
)
from faceit_client.request import build_request
from faceit_client.transport.factory import create_http_client

logger = logging.getLogger(__name__)


def _query(options: QueryOptions | None, **extra: Any) -> dict[str, Any]:
    query = dict(extra)
    if options is not None:
        query.update(options.to_query())
    return query


class FaceitClient:
    """Typed async client for the FACEIT Data API.

    One instance owns one ``httpx.AsyncClient`` and may be shared by
    concurrent tasks. Use it as an async context manager or call
    ``aclose()`` when done.

    Args:
        config: Client settings; defaults to ``ClientConfig()`` (unauthenticated).
        http_client: Pre-built httpx client. When given, the caller owns it and
            ``aclose()`` leaves it open.
    """

    def __init__(self, config: ClientConfig | None = None, *, http_client: httpx.AsyncClient | None = None):
        self._config = config or ClientConfig()
        self._owns_http = http_client is None
        self._http = http_client or create_http_client(self._config)

    @classmethod
    def builder(cls) -> "ClientBuilder":
        return ClientBuilder()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "FaceitClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _execute(
        self,
        endpoint: EndpointDescriptor,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> Any:
        """Build, send and map one request.

        Raises:
            MissingParameterError: before anything is sent
            TransportError: the request never produced a response
            InvalidCredentialError, ServerError, ApiError: non-2xx responses
            DeserializationError: 2xx body does not match the record shape
        """
        request = build_request(endpoint, path_params, query, config=self._config)
        logger.debug(f"{endpoint.name}: {request.method} {request.url}")

        try:
            response = await self._http.send(request)
        except httpx.RequestError as e:
            raise transport_error(e) from e

        return map_response(response.status_code, response.content, endpoint.response)

    # Players

    async def get_player(self, player_id: str) -> Player:
        return await self._execute(endpoints.GET_PLAYER, {"player_id": player_id})

    async def lookup_player(self, lookup: PlayerLookup) -> Player:
        """Find a player by nickname or by in-game id.

        Raises:
            MissingParameterError: neither nickname nor game_player_id is set
        """
        if not lookup.nickname and not lookup.game_player_id:
            raise MissingParameterError(
                "nickname", "Player lookup needs at least one of nickname or game_player_id"
            )
        return await self._execute(endpoints.LOOKUP_PLAYER, query=lookup.to_query())

    async def get_player_stats(self, player_id: str, game_id: str) -> PlayerStats:
        return await self._execute(endpoints.GET_PLAYER_STATS, {"player_id": player_id, "game_id": game_id})

    async def get_player_history(
        self, player_id: str, game: str, window: HistoryWindow | None = None
    ) -> MatchHistoryList:
        """Matches a player played in ``game``, newest first, optionally time-bounded."""
        return await self._execute(
            endpoints.GET_PLAYER_HISTORY, {"player_id": player_id}, _query(window, game=game)
        )

    async def get_player_bans(self, player_id: str, page: Page | None = None) -> PlayerBanList:
        return await self._execute(endpoints.GET_PLAYER_BANS, {"player_id": player_id}, _query(page))

    async def get_player_hubs(self, player_id: str, page: Page | None = None) -> HubList:
        return await self._execute(endpoints.GET_PLAYER_HUBS, {"player_id": player_id}, _query(page))

    async def get_player_teams(self, player_id: str, page: Page | None = None) -> TeamList:
        return await self._execute(endpoints.GET_PLAYER_TEAMS, {"player_id": player_id}, _query(page))

    async def get_player_tournaments(self, player_id: str, page: Page | None = None) -> TournamentList:
        return await self._execute(endpoints.GET_PLAYER_TOURNAMENTS, {"player_id": player_id}, _query(page))

    # Matches

    async def get_match(self, match_id: str) -> Match:
        return await self._execute(endpoints.GET_MATCH, {"match_id": match_id})

    async def get_match_stats(self, match_id: str) -> MatchStats:
        return await self._execute(endpoints.GET_MATCH_STATS, {"match_id": match_id})

    # Games

    async def get_games(self, page: Page | None = None) -> GameList:
        return await self._execute(endpoints.GET_GAMES, query=_query(page))

    async def get_game(self, game_id: str) -> Game:
        return await self._execute(endpoints.GET_GAME, {"game_id": game_id})

    async def get_parent_game(self, game_id: str) -> Game:
        return await self._execute(endpoints.GET_PARENT_GAME, {"game_id": game_id})

    async def get_game_matchmakings(self, game_id: str, query: MatchmakingQuery | None = None) -> MatchmakingList:
        return await self._execute(endpoints.GET_GAME_MATCHMAKINGS, {"game_id": game_id}, _query(query))

    # Hubs

    async def get_hub(self, hub_id: str, expanded: Iterable[Expansion | str] | None = None) -> Hub:
        """Hub details, optionally embedding the organizer and/or game."""
        return await self._execute(endpoints.GET_HUB, {"hub_id": hub_id}, {"expanded": expanded})

    async def get_hub_matches(self, hub_id: str, listing: MatchListing | None = None) -> MatchList:
        return await self._execute(endpoints.GET_HUB_MATCHES, {"hub_id": hub_id}, _query(listing))

    async def get_hub_members(self, hub_id: str, page: Page | None = None) -> HubMemberList:
        return await self._execute(endpoints.GET_HUB_MEMBERS, {"hub_id": hub_id}, _query(page))

    async def get_hub_stats(self, hub_id: str, page: Page | None = None) -> HubStats:
        return await self._execute(endpoints.GET_HUB_STATS, {"hub_id": hub_id}, _query(page))

    # Championships

    async def get_championships(self, game: str, listing: MatchListing | None = None) -> ChampionshipList:
        return await self._execute(endpoints.GET_CHAMPIONSHIPS, query=_query(listing, game=game))

    async def get_championship(
        self, championship_id: str, expanded: Iterable[Expansion | str] | None = None
    ) -> Championship:
        return await self._execute(
            endpoints.GET_CHAMPIONSHIP, {"championship_id": championship_id}, {"expanded": expanded}
        )

    async def get_championship_matches(self, championship_id: str, listing: MatchListing | None = None) -> MatchList:
        return await self._execute(
            endpoints.GET_CHAMPIONSHIP_MATCHES, {"championship_id": championship_id}, _query(listing)
        )

    # Search

    async def search_players(self, nickname: str, query: PlayerSearchQuery | None = None) -> UserSearchList:
        return await self._execute(endpoints.SEARCH_PLAYERS, query=_query(query, nickname=nickname))

    async def search_teams(self, nickname: str, query: TeamSearchQuery | None = None) -> TeamSearchList:
        return await self._execute(endpoints.SEARCH_TEAMS, query=_query(query, nickname=nickname))

    async def search_hubs(self, name: str, query: HubSearchQuery | None = None) -> CompetitionSearchList:
        return await self._execute(endpoints.SEARCH_HUBS, query=_query(query, name=name))

    # Rankings

    async def get_global_ranking(
        self, game_id: str, region: str, query: RankingQuery | None = None
    ) -> GlobalRankingList:
        return await self._execute(
            endpoints.GET_GLOBAL_RANKING, {"game_id": game_id, "region": region}, _query(query)
        )

    async def get_player_ranking(
        self, game_id: str, region: str, player_id: str, query: PlayerRankingQuery | None = None
    ) -> PlayerGlobalRanking:
        """The ranking page centered on one player, with their ``position``."""
        return await self._execute(
            endpoints.GET_PLAYER_RANKING,
            {"game_id": game_id, "region": region, "player_id": player_id},
            _query(query),
        )

    # Id-bound wrappers

    def player(self, player_id: str) -> resources.Player:
        return resources.Player(self, player_id)

    def match(self, match_id: str) -> resources.Match:
        return resources.Match(self, match_id)

    def game(self, game_id: str) -> resources.Game:
        return resources.Game(self, game_id)

    def hub(self, hub_id: str) -> resources.Hub:
        return resources.Hub(self, hub_id)

    def championship(self, championship_id: str) -> resources.Championship:
        return resources.Championship(self, championship_id)


class ClientBuilder:
    """Fluent construction of a ``FaceitClient``.

    Only values set on the builder are used; everything else takes the
    ``ClientConfig`` default. Without ``api_key()`` the client is
    unauthenticated. Use ``ClientConfig.from_env`` to read the environment.

    Example:
        ```python
        client = FaceitClient.builder().api_key("...").timeout(10).build()
        ```
    """

    def __init__(self) -> None:
        self._base_url: str | None = None
        self._api_key: str | None = None
        self._timeout: float | None = None
        self._verify: ssl.SSLContext | bool = True
        self._transport: httpx.AsyncBaseTransport | None = None

    def base_url(self, base_url: str) -> "ClientBuilder":
        self._base_url = base_url
        return self

    def api_key(self, api_key: str) -> "ClientBuilder":
        self._api_key = api_key
        return self

    def timeout(self, seconds: float) -> "ClientBuilder":
        self._timeout = seconds
        return self

    def verify(self, verify: ssl.SSLContext | bool) -> "ClientBuilder":
        self._verify = verify
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "ClientBuilder":
        self._transport = transport
        return self

    def build_config(self) -> ClientConfig:
        settings: dict[str, Any] = {"verify": self._verify, "transport": self._transport}
        if self._base_url is not None:
            settings["base_url"] = self._base_url
        if self._api_key is not None:
            settings["api_key"] = self._api_key
        if self._timeout is not None:
            settings["timeout"] = self._timeout
        return ClientConfig(**settings)

    def build(self) -> FaceitClient:
        return FaceitClient(self.build_config())
