"""Search result records."""

from faceit_client.models.common import FaceitModel, ItemPage


class GameUserSearch(FaceitModel):
    name: str
    skill_level: str


class UserSearch(FaceitModel):
    player_id: str
    nickname: str
    avatar: str | None = None
    country: str | None = None
    verified: bool | None = None
    status: str | None = None
    games: list[GameUserSearch] | None = None


class UserSearchList(ItemPage[UserSearch]):
    pass


class TeamSearch(FaceitModel):
    team_id: str
    name: str
    avatar: str | None = None
    game: str | None = None
    faceit_url: str | None = None
    chat_room_id: str | None = None
    verified: bool | None = None


class TeamSearchList(ItemPage[TeamSearch]):
    pass


class CompetitionSearch(FaceitModel):
    competition_id: str
    competition_type: str
    name: str
    game: str | None = None
    region: str | None = None
    organizer_id: str
    organizer_name: str | None = None
    organizer_type: str | None = None
    status: str | None = None
    started_at: int | None = None
    slots: int | None = None
    number_of_members: int | None = None
    players_joined: int | None = None
    players_checkedin: int | None = None
    prize_type: str | None = None
    total_prize: str | None = None


class CompetitionSearchList(ItemPage[CompetitionSearch]):
    pass
