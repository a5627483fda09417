"""Player-bound wrapper."""

from typing import TYPE_CHECKING

from faceit_client import models
from faceit_client.options import HistoryWindow, Page

if TYPE_CHECKING:
    from faceit_client.client import FaceitClient


class Player:
    """Player operations with the player id bound once."""

    def __init__(self, client: "FaceitClient", player_id: str):
        self._client = client
        self._player_id = player_id

    @property
    def id(self) -> str:
        return self._player_id

    def __repr__(self) -> str:
        return f"Player({self._player_id!r})"

    async def get(self) -> models.Player:
        return await self._client.get_player(self._player_id)

    async def stats(self, game_id: str) -> models.PlayerStats:
        return await self._client.get_player_stats(self._player_id, game_id)

    async def history(self, game: str, window: HistoryWindow | None = None) -> models.MatchHistoryList:
        return await self._client.get_player_history(self._player_id, game, window)

    async def bans(self, page: Page | None = None) -> models.PlayerBanList:
        return await self._client.get_player_bans(self._player_id, page)

    async def hubs(self, page: Page | None = None) -> models.HubList:
        return await self._client.get_player_hubs(self._player_id, page)

    async def teams(self, page: Page | None = None) -> models.TeamList:
        return await self._client.get_player_teams(self._player_id, page)

    async def tournaments(self, page: Page | None = None) -> models.TournamentList:
        return await self._client.get_player_tournaments(self._player_id, page)
