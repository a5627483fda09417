"""Hub records."""

from typing import Any

from faceit_client.models.common import FaceitModel, ItemPage
from faceit_client.models.games import Game
from faceit_client.models.organizers import Organizer


class Hub(FaceitModel):
    hub_id: str
    name: str
    avatar: str | None = None
    game_id: str
    # Only present when requested with ``expanded``
    game_data: Game | None = None
    organizer_id: str
    organizer_data: Organizer | None = None
    region: str | None = None
    description: str | None = None
    faceit_url: str | None = None
    cover_image: str | None = None
    background_image: str | None = None
    chat_room_id: str | None = None
    join_permission: str | None = None
    min_skill_level: int | None = None
    max_skill_level: int | None = None
    players_joined: int | None = None
    rule_id: str | None = None


class HubList(ItemPage[Hub]):
    pass


class HubUser(FaceitModel):
    user_id: str
    nickname: str
    avatar: str | None = None
    faceit_url: str | None = None
    roles: list[str] | None = None


class HubMemberList(ItemPage[HubUser]):
    pass


class CompetitionPlayerStats(FaceitModel):
    player_id: str
    nickname: str
    # Stat keys and value types vary per game
    stats: Any


class HubStats(FaceitModel):
    game_id: str
    players: list[CompetitionPlayerStats]
