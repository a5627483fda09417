"""Game records."""

from faceit_client.models.common import FaceitModel, ItemPage


class GameAssets(FaceitModel):
    cover: str | None = None
    featured_img_l: str | None = None
    featured_img_m: str | None = None
    featured_img_s: str | None = None
    flag_img_icon: str | None = None
    flag_img_l: str | None = None
    flag_img_m: str | None = None
    flag_img_s: str | None = None
    landing_page: str | None = None


class Game(FaceitModel):
    game_id: str
    short_label: str
    long_label: str
    assets: GameAssets | None = None
    platforms: list[str] | None = None
    regions: list[str] | None = None
    order: int | None = None
    parent_game_id: str | None = None


class GameList(ItemPage[Game]):
    pass


class MatchmakingQueue(FaceitModel):
    id: str
    name: str
    open: bool | None = None
    paused: bool | None = None
    organizer_id: str | None = None


class MatchmakingSlim(FaceitModel):
    id: str
    name: str
    game: str
    region: str | None = None
    has_league: bool | None = None


class MatchmakingList(ItemPage[MatchmakingSlim]):
    pass
