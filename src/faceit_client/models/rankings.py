"""Global ranking records."""

from faceit_client.models.common import FaceitModel, ItemPage


class GlobalRanking(FaceitModel):
    player_id: str
    nickname: str
    position: int
    faceit_elo: int
    game_skill_level: int
    country: str | None = None


class GlobalRankingList(ItemPage[GlobalRanking]):
    pass


class PlayerGlobalRanking(ItemPage[GlobalRanking]):
    """Ranking page centred on one player, whose rank is ``position``."""

    position: int
