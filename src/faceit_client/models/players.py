"""Player records."""

from datetime import datetime
from typing import Any

from pydantic import Field

from faceit_client.models.common import FaceitModel, ItemPage


class GameDetail(FaceitModel):
    """Per-game profile of a player (elo, skill level, in-game identity)."""

    faceit_elo: int | None = None
    game_player_id: str | None = None
    game_player_name: str | None = None
    game_profile_id: str | None = None
    region: str | None = None
    regions: list[str] | None = None
    skill_level: int | None = None
    skill_level_label: str | None = None


class UserSettings(FaceitModel):
    language: str | None = None


class Player(FaceitModel):
    player_id: str
    nickname: str
    avatar: str | None = None
    country: str | None = None
    faceit_url: str | None = None
    steam_id_64: str | None = None
    steam_nickname: str | None = None
    new_steam_id: str | None = None
    memberships: list[str] | None = None
    games: dict[str, GameDetail] | None = None
    verified: bool | None = None
    activated_at: datetime | None = None
    cover_image: str | None = None
    friends_ids: list[str] | None = None
    platforms: dict[str, str] | None = None
    settings: UserSettings | None = None


class PlayerStats(FaceitModel):
    player_id: str
    game_id: str
    # Stat keys vary per game, so these stay untyped
    lifetime: dict[str, Any] | None = None
    segments: list[dict[str, Any]] | None = None


class PlayerBan(FaceitModel):
    user_id: str
    nickname: str
    game: str
    starts_at: datetime
    ends_at: datetime | None = None
    ban_type: str = Field(alias="type")
    reason: str


class PlayerBanList(ItemPage[PlayerBan]):
    pass
