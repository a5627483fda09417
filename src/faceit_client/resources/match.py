"""Match-bound wrapper."""

from typing import TYPE_CHECKING

from faceit_client import models

if TYPE_CHECKING:
    from faceit_client.client import FaceitClient


class Match:
    def __init__(self, client: "FaceitClient", match_id: str):
        self._client = client
        self._match_id = match_id

    @property
    def id(self) -> str:
        return self._match_id

    def __repr__(self) -> str:
        return f"Match({self._match_id!r})"

    async def get(self) -> models.Match:
        return await self._client.get_match(self._match_id)

    async def stats(self) -> models.MatchStats:
        return await self._client.get_match_stats(self._match_id)
