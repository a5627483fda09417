"""Game-bound wrapper."""

from typing import TYPE_CHECKING

from faceit_client import models
from faceit_client.options import MatchmakingQuery

if TYPE_CHECKING:
    from faceit_client.client import FaceitClient


class Game:
    def __init__(self, client: "FaceitClient", game_id: str):
        self._client = client
        self._game_id = game_id

    @property
    def id(self) -> str:
        return self._game_id

    def __repr__(self) -> str:
        return f"Game({self._game_id!r})"

    async def get(self) -> models.Game:
        return await self._client.get_game(self._game_id)

    async def parent(self) -> models.Game:
        """The parent game, e.g. the base title of a regional variant."""
        return await self._client.get_parent_game(self._game_id)

    async def matchmakings(self, query: MatchmakingQuery | None = None) -> models.MatchmakingList:
        return await self._client.get_game_matchmakings(self._game_id, query)
