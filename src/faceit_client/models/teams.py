"""Team and tournament records listed on a player's profile."""

from typing import Any

from faceit_client.models.common import FaceitModel, ItemPage


class UserSimple(FaceitModel):
    user_id: str
    nickname: str
    avatar: str | None = None
    country: str | None = None
    faceit_url: str | None = None
    membership_type: str | None = None
    memberships: list[str] | None = None
    skill_level: int | None = None


class Team(FaceitModel):
    team_id: str
    name: str
    nickname: str
    avatar: str | None = None
    cover_image: str | None = None
    description: str | None = None
    game: str | None = None
    leader: str | None = None
    members: list[UserSimple] | None = None
    faceit_url: str | None = None
    chat_room_id: str | None = None
    twitter: str | None = None
    youtube: str | None = None
    facebook: str | None = None
    website: str | None = None
    team_type: str | None = None


class TeamList(ItemPage[Team]):
    pass


class TournamentSimple(FaceitModel):
    tournament_id: str
    name: str
    game_id: str
    region: str | None = None
    status: str
    started_at: int | None = None
    faceit_url: str | None = None
    featured_image: str | None = None
    anticheat_required: bool | None = None
    custom: bool | None = None
    match_type: str | None = None
    invite_type: str | None = None
    membership_type: str | None = None
    min_skill: int | None = None
    max_skill: int | None = None
    number_of_players: int | None = None
    number_of_players_joined: int | None = None
    number_of_players_checkedin: int | None = None
    number_of_players_participants: int | None = None
    team_size: int | None = None
    total_prize: str | None = None
    prize_type: str | None = None
    organizer_id: str
    subscriptions_count: int | None = None
    whitelist_countries: list[str] | None = None
    rounds: list[dict[str, Any]] | None = None


class TournamentList(ItemPage[TournamentSimple]):
    pass
