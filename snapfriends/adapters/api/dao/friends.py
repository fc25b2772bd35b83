from typing import Any
import json
import logging

from .common import CommonHTTPClient
from snapfriends.config import EndpointSettings

ADDED_BY_USERNAME = "ADDED_BY_USERNAME"
ADDED_BY_ADDED_ME_BACK = "ADDED_BY_ADDED_ME_BACK"


class FriendsHTTPDAO:
    """
    Request shaping for the friends endpoints. Every method is one POST.
    """
    def __init__(self, http_client: CommonHTTPClient, endpoints: EndpointSettings | None = None):
        self._http_client = http_client
        self._endpoints = endpoints or EndpointSettings()
        self._logger = logging.getLogger(__name__)

    async def _post(self, endpoint: str, data: dict[str, Any], token: str | None) -> Any:
        if token:
            self._http_client.set_auth_token(token)
        else:
            self._http_client.clear_auth_token()
        return await self._http_client.post(self._endpoints.resolve(endpoint), data)

    async def multi_add_delete(
            self,
            username: str,
            to_add: list[str],
            to_delete: list[str],
            token: str | None = None
    ) -> Any:
        data = {
            "username": username,
            "action": "multiadddelete",
            "friend": {
                "friendsToAdd": json.dumps(to_add),
                "friendsToDelete": json.dumps(to_delete)
            },
            "added_by": ADDED_BY_USERNAME
        }
        return await self._post("friends.friend", data, token)

    async def add(self, username: str, friend: str, added_by: str, token: str | None = None) -> Any:
        data = {
            "action": "add",
            "friend": friend,
            "username": username,
            "added_by": added_by
        }
        return await self._post("friends.friend", data, token)

    async def delete(self, username: str, friend: str, token: str | None = None) -> Any:
        data = {
            "action": "delete",
            "friend": friend,
            "username": username
        }
        return await self._post("friends.friend", data, token)

    async def set_display(self, username: str, friend: str, display: str, token: str | None = None) -> Any:
        data = {
            "action": "display",
            "display": display,
            "friend": friend,
            "friend_id": "",
            "username": username
        }
        return await self._post("friends.friend", data, token)

    async def set_blocked(self, username: str, friend: str, blocked: bool, token: str | None = None) -> Any:
        data = {
            "action": "block" if blocked else "unblock",
            "friend": friend,
            "username": username
        }
        return await self._post("friends.friend", data, token)

    async def find(self, username: str, country_code: str, numbers: dict[str, str], token: str | None = None) -> Any:
        """
        Phone number lookup; ``numbers`` maps phone number to desired display name
        """
        data = {
            "username": username,
            "countryCode": country_code,
            "numbers": json.dumps(numbers)
        }
        return await self._post("friends.find", data, token)

    async def find_nearby(
            self,
            username: str,
            lat: float,
            lng: float,
            accuracy_meters: float,
            total_polling_duration_millis: int,
            token: str | None = None
    ) -> Any:
        data = {
            "username": username,
            "accuracyMeters": accuracy_meters,
            "action": "update",
            "lat": lat,
            "lng": lng,
            "totalPollingDurationMillis": total_polling_duration_millis
        }
        return await self._post("friends.findNearby", data, token)

    async def search(self, username: str, query: str, token: str | None = None) -> Any:
        data = {
            "query": query,
            "username": username
        }
        return await self._post("friends.search", data, token)

    async def exists(self, username: str, request_username: str, token: str | None = None) -> Any:
        data = {
            "request_username": request_username,
            "username": username
        }
        return await self._post("friends.exists", data, token)

    async def seen_suggested(self, username: str, usernames: list[str], seen: bool, token: str | None = None) -> Any:
        data = {
            "action": "update",
            "seen": seen,
            "seen_suggested_friend_list": json.dumps(usernames),
            "username": username
        }
        return await self._post("misc.suggestFriend", data, token)
