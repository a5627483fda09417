"""Tests for id-bound wrappers."""

import httpx
import pytest

from faceit_client import resources
from faceit_client.errors import ApiError
from faceit_client.options import Expansion, HistoryWindow, ListingType, MatchListing, MatchmakingQuery, Page
from faceit_client.testing import error_response, mock_client


@pytest.fixture
def recorded():
    return []


@pytest.fixture
def client(recorded):
    def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        return error_response(404, "Not here")

    return mock_client(handler)


async def _url_of(recorded, call):
    with pytest.raises(ApiError):
        await call
    return recorded[-1].url


@pytest.mark.unit
def test_factories_bind_ids(client):
    assert isinstance(client.player("p1"), resources.Player)
    assert client.player("p1").id == "p1"
    assert client.match("m1").id == "m1"
    assert client.game("cs2").id == "cs2"
    assert client.hub("h1").id == "h1"
    assert client.championship("c1").id == "c1"
    assert repr(client.hub("h1")) == "Hub('h1')"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("wrapped", "direct"),
    [
        (lambda c: c.player("p1").get(), lambda c: c.get_player("p1")),
        (lambda c: c.player("p1").stats("cs2"), lambda c: c.get_player_stats("p1", "cs2")),
        (
            lambda c: c.player("p1").history("cs2", HistoryWindow(from_timestamp=1, limit=5)),
            lambda c: c.get_player_history("p1", "cs2", HistoryWindow(from_timestamp=1, limit=5)),
        ),
        (lambda c: c.player("p1").bans(Page(limit=3)), lambda c: c.get_player_bans("p1", Page(limit=3))),
        (lambda c: c.player("p1").hubs(), lambda c: c.get_player_hubs("p1")),
        (lambda c: c.player("p1").teams(), lambda c: c.get_player_teams("p1")),
        (lambda c: c.player("p1").tournaments(), lambda c: c.get_player_tournaments("p1")),
        (lambda c: c.match("m1").get(), lambda c: c.get_match("m1")),
        (lambda c: c.match("m1").stats(), lambda c: c.get_match_stats("m1")),
        (lambda c: c.game("cs2").get(), lambda c: c.get_game("cs2")),
        (lambda c: c.game("cs2").parent(), lambda c: c.get_parent_game("cs2")),
        (
            lambda c: c.game("cs2").matchmakings(MatchmakingQuery(region="EU")),
            lambda c: c.get_game_matchmakings("cs2", MatchmakingQuery(region="EU")),
        ),
        (lambda c: c.hub("h1").get([Expansion.GAME]), lambda c: c.get_hub("h1", [Expansion.GAME])),
        (
            lambda c: c.hub("h1").matches(MatchListing(type=ListingType.ONGOING)),
            lambda c: c.get_hub_matches("h1", MatchListing(type=ListingType.ONGOING)),
        ),
        (lambda c: c.hub("h1").members(), lambda c: c.get_hub_members("h1")),
        (lambda c: c.hub("h1").stats(), lambda c: c.get_hub_stats("h1")),
        (lambda c: c.championship("c1").get(), lambda c: c.get_championship("c1")),
        (lambda c: c.championship("c1").matches(), lambda c: c.get_championship_matches("c1")),
    ],
)
async def test_wrapper_sends_same_request_as_client(client, recorded, wrapped, direct):
    async with client:
        wrapper_url = await _url_of(recorded, wrapped(client))
        direct_url = await _url_of(recorded, direct(client))

    assert wrapper_url == direct_url
    assert len(recorded) == 2
