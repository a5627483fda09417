"""Option groups for operations with optional query parameters.

Each option class maps its fields onto the API's query parameter names via
``to_query()``. Fields left as None are dropped by the request builder.

Example:
    ```python
    from faceit_client.options import HistoryWindow, ListingType, MatchListing

    window = HistoryWindow(from_timestamp=1_700_000_000, limit=50)
    listing = MatchListing(type=ListingType.UPCOMING, limit=10)
    ```
"""

from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Any


class ListingType(StrEnum):
    """Match and championship listing filter."""

    ALL = "all"
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"


class Expansion(StrEnum):
    """Related entities that hub and championship details can embed."""

    ORGANIZER = "organizer"
    GAME = "game"


def _param(name: str) -> Any:
    return field(default=None, metadata={"param": name})


@dataclass(frozen=True)
class QueryOptions:
    def to_query(self) -> dict[str, Any]:
        """Query values keyed by API parameter name, None for unset fields."""
        return {f.metadata.get("param", f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class Page(QueryOptions):
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class PlayerLookup(QueryOptions):
    """Find a player by nickname or by in-game id (optionally scoped to a game)."""

    nickname: str | None = None
    game: str | None = None
    game_player_id: str | None = None


@dataclass(frozen=True)
class HistoryWindow(QueryOptions):
    """Time window (unix seconds) and page for a player's match history."""

    from_timestamp: int | None = _param("from")
    to_timestamp: int | None = _param("to")
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class MatchListing(QueryOptions):
    type: ListingType | str | None = None
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class MatchmakingQuery(QueryOptions):
    region: str | None = None
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class PlayerSearchQuery(QueryOptions):
    game: str | None = None
    country: str | None = None
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class TeamSearchQuery(QueryOptions):
    game: str | None = None
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class HubSearchQuery(QueryOptions):
    game: str | None = None
    region: str | None = None
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class RankingQuery(QueryOptions):
    country: str | None = None
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class PlayerRankingQuery(QueryOptions):
    country: str | None = None
    limit: int | None = None
