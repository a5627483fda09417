"""Hub-bound wrapper."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from faceit_client import models
from faceit_client.options import Expansion, MatchListing, Page

if TYPE_CHECKING:
    from faceit_client.client import FaceitClient


class Hub:
    def __init__(self, client: "FaceitClient", hub_id: str):
        self._client = client
        self._hub_id = hub_id

    @property
    def id(self) -> str:
        return self._hub_id

    def __repr__(self) -> str:
        return f"Hub({self._hub_id!r})"

    async def get(self, expanded: Iterable[Expansion | str] | None = None) -> models.Hub:
        return await self._client.get_hub(self._hub_id, expanded)

    async def matches(self, listing: MatchListing | None = None) -> models.MatchList:
        return await self._client.get_hub_matches(self._hub_id, listing)

    async def members(self, page: Page | None = None) -> models.HubMemberList:
        return await self._client.get_hub_members(self._hub_id, page)

    async def stats(self, page: Page | None = None) -> models.HubStats:
        return await self._client.get_hub_stats(self._hub_id, page)
