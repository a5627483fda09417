"""Pytest configuration and shared fixtures for faceit-client tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear FACEIT and test environment variables before each test.

    This keeps a developer's real API key (or .env) out of credential tests.
    """
    import os

    test_prefixes = ("TEST_", "FACEIT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def player_payload():
    """A trimmed but realistic GET /players/{id} body."""
    return {
        "player_id": "ac71ba3c-d3d4-45e7-8be2-26aa3986867d",
        "nickname": "s1mple",
        "avatar": "https://assets.faceit-cdn.net/avatars/s1mple.jpg",
        "country": "ua",
        "games": {
            "cs2": {
                "region": "EU",
                "game_player_id": "76561198034202275",
                "skill_level": 10,
                "faceit_elo": 3421,
                "game_player_name": "s1mple",
            }
        },
        "membership_type": "",
        "memberships": ["free"],
        "verified": True,
        "activated_at": "2014-04-08T11:12:01Z",
    }
