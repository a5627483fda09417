"""Match records: details, stats and history."""

from typing import Any

from pydantic import Field

from faceit_client.models.common import FaceitModel, ItemPage


class MatchResult(FaceitModel):
    score: dict[str, int] | None = None
    winner: str | None = None


class FactionResult(FaceitModel):
    score: int


class DetailedMatchResult(FaceitModel):
    asc_score: bool | None = None
    factions: dict[str, FactionResult] | None = None
    winner: str | None = None


class RosterMember(FaceitModel):
    player_id: str
    nickname: str
    avatar: str | None = None
    game_player_id: str | None = None
    game_player_name: str | None = None
    game_skill_level: int | None = None
    anticheat_required: bool | None = None
    membership: str | None = None


class SkillLevelRange(FaceitModel):
    min: int | None = None
    max: int | None = None


class SkillLevel(FaceitModel):
    average: int | None = None
    range: SkillLevelRange | None = None


class FactionStats(FaceitModel):
    rating: int | None = None
    skill_level: SkillLevel | None = Field(default=None, alias="skillLevel")
    win_probability: float | None = Field(default=None, alias="winProbability")


class Faction(FaceitModel):
    faction_id: str | None = None
    leader: str | None = None
    avatar: str | None = None
    name: str | None = None
    faction_type: str | None = Field(default=None, alias="type")
    roster: list[RosterMember] | None = None
    stats: FactionStats | None = None
    substituted: bool | None = None


class Match(FaceitModel):
    match_id: str
    game: str
    region: str | None = None
    competition_id: str | None = None
    competition_type: str | None = None
    competition_name: str | None = None
    organizer_id: str | None = None
    teams: dict[str, Faction] | None = None
    status: str
    started_at: int | None = None
    finished_at: int | None = None
    scheduled_at: int | None = None
    configured_at: int | None = None
    best_of: int | None = None
    results: MatchResult | None = None
    detailed_results: list[DetailedMatchResult] | None = None
    round: int | None = None
    group: int | None = None
    faceit_url: str | None = None
    chat_room_id: str | None = None
    demo_url: list[str] | None = None
    calculate_elo: bool | None = None
    broadcast_start_time: int | None = None
    broadcast_start_time_label: str | None = None
    version: int | None = None
    voting: dict[str, Any] | None = None


class MatchList(ItemPage[Match]):
    pass


class PlayerRoundStats(FaceitModel):
    player_id: str | None = None
    nickname: str | None = None
    player_stats: dict[str, Any] | None = None


class TeamRoundStats(FaceitModel):
    team_id: str | None = None
    premade: bool | None = None
    team_stats: dict[str, Any] | None = None
    players: list[PlayerRoundStats] | None = None


class RoundStats(FaceitModel):
    match_id: str | None = None
    game_id: str | None = None
    competition_id: str | None = None
    game_mode: str | None = None
    match_round: int | None = None
    played: int | None = None
    best_of: int | None = None
    round_stats: dict[str, Any] | None = None
    teams: list[TeamRoundStats] | None = None


class MatchStats(FaceitModel):
    rounds: list[RoundStats]


class MatchHistoryPlayer(FaceitModel):
    player_id: str
    nickname: str
    avatar: str | None = None
    faceit_url: str | None = None
    game_player_id: str | None = None
    game_player_name: str | None = None
    skill_level: int | None = None


class HistoryFaction(FaceitModel):
    team_id: str | None = None
    nickname: str | None = None
    avatar: str | None = None
    faction_type: str | None = Field(default=None, alias="type")
    players: list[MatchHistoryPlayer] | None = None


class MatchHistory(FaceitModel):
    match_id: str
    game_id: str
    region: str | None = None
    match_type: str | None = None
    game_mode: str | None = None
    max_players: int | None = None
    teams_size: int | None = None
    teams: dict[str, HistoryFaction] | None = None
    playing_players: list[str] | None = None
    competition_id: str | None = None
    competition_name: str | None = None
    competition_type: str | None = None
    organizer_id: str | None = None
    started_at: int | None = None
    finished_at: int | None = None
    status: str
    results: MatchResult | None = None
    faceit_url: str | None = None


class MatchHistoryList(ItemPage[MatchHistory]):
    # Echo of the requested time window (unix seconds)
    from_: int | None = Field(default=None, alias="from")
    to: int | None = None
