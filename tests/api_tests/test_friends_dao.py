import pytest
import httpx

from snapfriends.adapters.api.dao import CommonHTTPClient, FriendsHTTPDAO
from snapfriends.adapters.api.service import FriendsClient
from snapfriends.core import Session
from snapfriends.config import EndpointSettings


@pytest.mark.asyncio
async def test_routes_come_from_endpoint_settings(http_client):
    dao = FriendsHTTPDAO(http_client, endpoints=EndpointSettings(friend="/v2/friend", exists="/v2/exists"))

    await dao.add("me", "carol", "ADDED_BY_USERNAME")
    assert http_client.post.await_args.args[0] == "/v2/friend"

    await dao.exists("me", "carol")
    assert http_client.post.await_args.args[0] == "/v2/exists"


@pytest.mark.asyncio
async def test_token_is_optional(http_client):
    dao = FriendsHTTPDAO(http_client)

    await dao.search("me", "car")

    http_client.set_auth_token.assert_not_called()
    http_client.clear_auth_token.assert_called_once_with()


@pytest.mark.asyncio
async def test_set_blocked_action(http_client):
    dao = FriendsHTTPDAO(http_client)

    await dao.set_blocked("me", "mallory", True, token="t")
    assert http_client.post.await_args.args[1]["action"] == "block"
    http_client.set_auth_token.assert_called_once_with("t")

    await dao.set_blocked("me", "mallory", False)
    assert http_client.post.await_args.args[1]["action"] == "unblock"


@pytest.mark.asyncio
async def test_dropped_session_token_is_not_reused():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={})

    session = Session(username="me", country_code="US", auth_token="old")
    async with CommonHTTPClient(base_url="http://testserver", transport=httpx.MockTransport(handler)) as http_client:
        friends_client = FriendsClient(friends_dao=FriendsHTTPDAO(http_client), session=session)

        await friends_client.add_friend("carol")
        session.auth_token = None
        await friends_client.add_friend("carol")

    assert seen == ["Bearer old", None]
