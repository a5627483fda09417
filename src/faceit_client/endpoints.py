"""Static descriptions of every FACEIT Data API operation.

Each operation is one immutable ``EndpointDescriptor`` defined at import time
and shared by all calls. The request builder reads them; nothing writes them.
"""

import string
from dataclasses import dataclass
from enum import Enum

from faceit_client.models import (
    Championship,
    ChampionshipList,
    CompetitionSearchList,
    FaceitModel,
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

API_ROOT = "/data/v4"


class ParamKind(Enum):
    """How a query value is rendered."""

    STRING = "string"
    INTEGER = "integer"  # plain decimal, no locale formatting
    TOKEN = "token"  # enum-like string such as "upcoming"
    LIST = "list"  # tokens joined with ","


@dataclass(frozen=True)
class QueryParam:
    name: str
    kind: ParamKind = ParamKind.STRING
    required: bool = False


@dataclass(frozen=True)
class EndpointDescriptor:
    """One remote operation: method, path template, query parameters, shapes."""

    name: str
    path: str
    response: type[FaceitModel]
    query: tuple[QueryParam, ...] = ()
    method: str = "GET"
    body: type[FaceitModel] | None = None

    @property
    def path_params(self) -> tuple[str, ...]:
        """Placeholder names in the path template, in order."""
        return tuple(name for _, name, _, _ in string.Formatter().parse(self.path) if name)

    def query_param(self, name: str) -> QueryParam | None:
        for param in self.query:
            if param.name == name:
                return param
        return None


OFFSET = QueryParam("offset", ParamKind.INTEGER)
LIMIT = QueryParam("limit", ParamKind.INTEGER)
PAGE = (OFFSET, LIMIT)

LISTING_TYPE = QueryParam("type", ParamKind.TOKEN)
EXPANDED = QueryParam("expanded", ParamKind.LIST)
GAME = QueryParam("game")
REQUIRED_GAME = QueryParam("game", required=True)
COUNTRY = QueryParam("country")
REGION = QueryParam("region")


# Players
GET_PLAYER = EndpointDescriptor("get_player", f"{API_ROOT}/players/{{player_id}}", Player)
LOOKUP_PLAYER = EndpointDescriptor(
    "lookup_player",
    f"{API_ROOT}/players",
    Player,
    query=(QueryParam("nickname"), GAME, QueryParam("game_player_id")),
)
GET_PLAYER_STATS = EndpointDescriptor(
    "get_player_stats", f"{API_ROOT}/players/{{player_id}}/stats/{{game_id}}", PlayerStats
)
GET_PLAYER_HISTORY = EndpointDescriptor(
    "get_player_history",
    f"{API_ROOT}/players/{{player_id}}/history",
    MatchHistoryList,
    query=(
        REQUIRED_GAME,
        QueryParam("from", ParamKind.INTEGER),
        QueryParam("to", ParamKind.INTEGER),
        *PAGE,
    ),
)
GET_PLAYER_BANS = EndpointDescriptor(
    "get_player_bans", f"{API_ROOT}/players/{{player_id}}/bans", PlayerBanList, query=PAGE
)
GET_PLAYER_HUBS = EndpointDescriptor("get_player_hubs", f"{API_ROOT}/players/{{player_id}}/hubs", HubList, query=PAGE)
GET_PLAYER_TEAMS = EndpointDescriptor(
    "get_player_teams", f"{API_ROOT}/players/{{player_id}}/teams", TeamList, query=PAGE
)
GET_PLAYER_TOURNAMENTS = EndpointDescriptor(
    "get_player_tournaments", f"{API_ROOT}/players/{{player_id}}/tournaments", TournamentList, query=PAGE
)

# Matches
GET_MATCH = EndpointDescriptor("get_match", f"{API_ROOT}/matches/{{match_id}}", Match)
GET_MATCH_STATS = EndpointDescriptor("get_match_stats", f"{API_ROOT}/matches/{{match_id}}/stats", MatchStats)

# Games
GET_GAMES = EndpointDescriptor("get_games", f"{API_ROOT}/games", GameList, query=PAGE)
GET_GAME = EndpointDescriptor("get_game", f"{API_ROOT}/games/{{game_id}}", Game)
GET_PARENT_GAME = EndpointDescriptor("get_parent_game", f"{API_ROOT}/games/{{game_id}}/parent", Game)
GET_GAME_MATCHMAKINGS = EndpointDescriptor(
    "get_game_matchmakings",
    f"{API_ROOT}/games/{{game_id}}/matchmakings",
    MatchmakingList,
    query=(REGION, *PAGE),
)

# Hubs
GET_HUB = EndpointDescriptor("get_hub", f"{API_ROOT}/hubs/{{hub_id}}", Hub, query=(EXPANDED,))
GET_HUB_MATCHES = EndpointDescriptor(
    "get_hub_matches", f"{API_ROOT}/hubs/{{hub_id}}/matches", MatchList, query=(LISTING_TYPE, *PAGE)
)
GET_HUB_MEMBERS = EndpointDescriptor(
    "get_hub_members", f"{API_ROOT}/hubs/{{hub_id}}/members", HubMemberList, query=PAGE
)
GET_HUB_STATS = EndpointDescriptor("get_hub_stats", f"{API_ROOT}/hubs/{{hub_id}}/stats", HubStats, query=PAGE)

# Championships
GET_CHAMPIONSHIPS = EndpointDescriptor(
    "get_championships",
    f"{API_ROOT}/championships",
    ChampionshipList,
    query=(REQUIRED_GAME, LISTING_TYPE, *PAGE),
)
GET_CHAMPIONSHIP = EndpointDescriptor(
    "get_championship", f"{API_ROOT}/championships/{{championship_id}}", Championship, query=(EXPANDED,)
)
GET_CHAMPIONSHIP_MATCHES = EndpointDescriptor(
    "get_championship_matches",
    f"{API_ROOT}/championships/{{championship_id}}/matches",
    MatchList,
    query=(LISTING_TYPE, *PAGE),
)

# Search
SEARCH_PLAYERS = EndpointDescriptor(
    "search_players",
    f"{API_ROOT}/search/players",
    UserSearchList,
    query=(QueryParam("nickname", required=True), GAME, COUNTRY, *PAGE),
)
SEARCH_TEAMS = EndpointDescriptor(
    "search_teams",
    f"{API_ROOT}/search/teams",
    TeamSearchList,
    query=(QueryParam("nickname", required=True), GAME, *PAGE),
)
SEARCH_HUBS = EndpointDescriptor(
    "search_hubs",
    f"{API_ROOT}/search/hubs",
    CompetitionSearchList,
    query=(QueryParam("name", required=True), GAME, REGION, *PAGE),
)

# Rankings
GET_GLOBAL_RANKING = EndpointDescriptor(
    "get_global_ranking",
    f"{API_ROOT}/rankings/games/{{game_id}}/regions/{{region}}",
    GlobalRankingList,
    query=(COUNTRY, *PAGE),
)
GET_PLAYER_RANKING = EndpointDescriptor(
    "get_player_ranking",
    f"{API_ROOT}/rankings/games/{{game_id}}/regions/{{region}}/players/{{player_id}}",
    PlayerGlobalRanking,
    query=(COUNTRY, LIMIT),
)

ALL_ENDPOINTS: tuple[EndpointDescriptor, ...] = (
    GET_PLAYER,
    LOOKUP_PLAYER,
    GET_PLAYER_STATS,
    GET_PLAYER_HISTORY,
    GET_PLAYER_BANS,
    GET_PLAYER_HUBS,
    GET_PLAYER_TEAMS,
    GET_PLAYER_TOURNAMENTS,
    GET_MATCH,
    GET_MATCH_STATS,
    GET_GAMES,
    GET_GAME,
    GET_PARENT_GAME,
    GET_GAME_MATCHMAKINGS,
    GET_HUB,
    GET_HUB_MATCHES,
    GET_HUB_MEMBERS,
    GET_HUB_STATS,
    GET_CHAMPIONSHIPS,
    GET_CHAMPIONSHIP,
    GET_CHAMPIONSHIP_MATCHES,
    SEARCH_PLAYERS,
    SEARCH_TEAMS,
    SEARCH_HUBS,
    GET_GLOBAL_RANKING,
    GET_PLAYER_RANKING,
)
