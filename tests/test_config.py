import pytest

from snapfriends.config import Settings, EndpointSettings, load_config


def test_defaults():
    settings = Settings()

    assert settings.max_retries == 1
    assert settings.endpoints.resolve("friends.friend") == "/bq/friend"
    assert settings.endpoints.resolve("friends.find") == "/ph/find_friends"
    assert settings.endpoints.resolve("friends.findNearby") == "/bq/find_nearby_friends"
    assert settings.endpoints.resolve("friends.search") == "/loq/friend_search"
    assert settings.endpoints.resolve("friends.exists") == "/bq/user_exists"
    assert settings.endpoints.resolve("misc.suggestFriend") == "/bq/suggest_friend"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SNAPFRIENDS_BASE_URL", " http://localhost:9000/ ")
    monkeypatch.setenv("SNAPFRIENDS_LOG_LEVEL", "debug")
    monkeypatch.setenv("SNAPFRIENDS_ENDPOINTS__FIND", "/bq/find_friends")

    settings = load_config()

    assert settings.base_url == "http://localhost:9000"
    assert settings.log_level == "DEBUG"
    assert settings.endpoints.resolve("friends.find") == "/bq/find_friends"
    assert settings.endpoints.resolve("friends.friend") == "/bq/friend"


def test_max_retries_must_be_positive():
    with pytest.raises(ValueError):
        Settings(max_retries=0)


def test_unknown_endpoint():
    with pytest.raises(KeyError):
        EndpointSettings().resolve("friends.bests")
