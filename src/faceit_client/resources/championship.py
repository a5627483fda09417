"""Championship-bound wrapper."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from faceit_client import models
from faceit_client.options import Expansion, MatchListing

if TYPE_CHECKING:
    from faceit_client.client import FaceitClient


class Championship:
    def __init__(self, client: "FaceitClient", championship_id: str):
        self._client = client
        self._championship_id = championship_id

    @property
    def id(self) -> str:
        return self._championship_id

    def __repr__(self) -> str:
        return f"Championship({self._championship_id!r})"

    async def get(self, expanded: Iterable[Expansion | str] | None = None) -> models.Championship:
        return await self._client.get_championship(self._championship_id, expanded)

    async def matches(self, listing: MatchListing | None = None) -> models.MatchList:
        return await self._client.get_championship_matches(self._championship_id, listing)
