"""Tests for the endpoint descriptor table."""

import pytest

from faceit_client import endpoints
from faceit_client.endpoints import ALL_ENDPOINTS, API_ROOT, ParamKind


@pytest.mark.unit
def test_every_endpoint_is_a_read_under_the_api_root():
    for endpoint in ALL_ENDPOINTS:
        assert endpoint.method == "GET"
        assert endpoint.path.startswith(API_ROOT + "/")
        assert endpoint.body is None


@pytest.mark.unit
def test_names_are_unique():
    names = [endpoint.name for endpoint in ALL_ENDPOINTS]

    assert len(names) == len(set(names)) == 26


@pytest.mark.unit
def test_path_params_in_template_order():
    assert endpoints.GET_PLAYER_RANKING.path_params == ("game_id", "region", "player_id")
    assert endpoints.GET_PLAYER_STATS.path_params == ("player_id", "game_id")
    assert endpoints.GET_GAMES.path_params == ()


@pytest.mark.unit
def test_query_param_lookup():
    history = endpoints.GET_PLAYER_HISTORY

    assert history.query_param("game").required
    assert history.query_param("from").kind is ParamKind.INTEGER
    assert history.query_param("nickname") is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("endpoint", "required"),
    [
        (endpoints.GET_PLAYER_HISTORY, {"game"}),
        (endpoints.GET_CHAMPIONSHIPS, {"game"}),
        (endpoints.SEARCH_PLAYERS, {"nickname"}),
        (endpoints.SEARCH_TEAMS, {"nickname"}),
        (endpoints.SEARCH_HUBS, {"name"}),
        (endpoints.LOOKUP_PLAYER, set()),
        (endpoints.GET_HUB, set()),
    ],
)
def test_required_query_params(endpoint, required):
    assert {param.name for param in endpoint.query if param.required} == required


@pytest.mark.unit
def test_paged_endpoints_take_integer_offset_and_limit():
    for endpoint in (endpoints.GET_GAMES, endpoints.GET_PLAYER_BANS, endpoints.GET_HUB_MEMBERS):
        assert endpoint.query_param("offset").kind is ParamKind.INTEGER
        assert endpoint.query_param("limit").kind is ParamKind.INTEGER
