from typing import Any, Iterable, Mapping, TypeVar
import logging

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..dao.friends import FriendsHTTPDAO, ADDED_BY_USERNAME, ADDED_BY_ADDED_ME_BACK
from snapfriends.core import (
    Session, User, UpdatedUser, FoundFriend, NearbyUser,
    FindFriendsResponse, NearbyFriendsResponse, UserExistsResponse,
    DisplayNameResponse, SuggestFriendResponse,
)
from snapfriends.exceptions import APIError, TransportError, VerificationRequiredError, ParseError, ValidationError

DEFAULT_ACCURACY_METERS = 10

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _as_list(usernames: Iterable[str] | str | None) -> list[str]:
    # A bare username is one username, not its characters
    if isinstance(usernames, str):
        return [usernames]
    return list(usernames or [])


class FriendsClient:
    """
    Friends-related API calls for an authenticated session.

    Transport failures are re-raised unchanged. Responses missing the fields
    an operation needs raise ParseError. Only unfriend and update_display_name
    touch ``session.friends``, and only after the request succeeded.
    """
    def __init__(
            self,
            friends_dao: FriendsHTTPDAO,
            session: Session,
            logger: logging.Logger | None = None
    ):
        self._friends_dao = friends_dao
        self._session = session
        self._logger = logger or logging.getLogger(__name__)

    @property
    def session(self) -> Session:
        return self._session

    async def bulk_update_friends(
            self,
            to_add: Iterable[str] | str | None = None,
            to_unfriend: Iterable[str] | str | None = None
    ) -> Any:
        """
        Adds the users in to_add and unfriends the users in to_unfriend in one request.
        Does not update the session friends list.
        :param to_add: usernames to add, already being friends doesn't matter
        :param to_unfriend: usernames to remove, not being friends doesn't matter
        :return: raw response body
        """
        to_add = _as_list(to_add)
        to_unfriend = _as_list(to_unfriend)
        self._logger.debug(f"bulk_update_friends (to_add {to_add}, to_unfriend {to_unfriend})")

        return await self._call(
            "bulk_update_friends",
            self._friends_dao.multi_add_delete(self._session.username, to_add, to_unfriend, self._token)
        )

    async def add_friend(self, username: str) -> Any:
        self._logger.debug(f"add_friend ({username})")
        return await self._call(
            "add_friend",
            self._friends_dao.add(self._session.username, username, ADDED_BY_USERNAME, self._token)
        )

    async def add_friend_back(self, username: str) -> Any:
        """
        Adds back a user who added you, sort of like accepting a friend request.
        Only the "added by" string the other user sees differs from add_friend.
        """
        self._logger.debug(f"add_friend_back ({username})")
        return await self._call(
            "add_friend_back",
            self._friends_dao.add(self._session.username, username, ADDED_BY_ADDED_ME_BACK, self._token)
        )

    async def unfriend(self, username: str) -> None:
        self._logger.debug(f"unfriend ({username})")
        await self._call(
            "unfriend",
            self._friends_dao.delete(self._session.username, username, self._token)
        )

        self._remove_friends_from_session([User(username=username)])
        self._logger.info(f"Unfriended {username}")

    async def find_friends_by_phone(self, numbers: Mapping[str, str]) -> list[FoundFriend]:
        """
        Finds friends given phone numbers and names.
        :param numbers: phone number -> desired display name for any username found
        :return: one FoundFriend per match
        """
        self._logger.debug(f"find_friends_by_phone ({len(numbers)} numbers)")

        if self._session.requires_phone_verification:
            self._logger.warning("find_friends_by_phone refused, phone number is not verified")
            raise VerificationRequiredError("Phone number must be verified before finding friends")

        result = await self._call(
            "find_friends_by_phone",
            self._friends_dao.find(self._session.username, self._session.country_code, dict(numbers), self._token)
        )
        return self._parse("find_friends_by_phone", FindFriendsResponse, result).results

    async def find_nearby_friends(
            self,
            location: Mapping[str, float],
            accuracy_meters: float = DEFAULT_ACCURACY_METERS,
            total_polling_duration_millis: int = 0
    ) -> list[NearbyUser]:
        """
        Finds nearby users who are also looking for nearby users.
        :param location: {"lat": ..., "lng": ...}
        :param accuracy_meters: search radius, replaced by 10 when not positive
        :param total_polling_duration_millis: time since polling started, when polling in a loop
        :return:
        """
        self._logger.debug(f"find_nearby_friends ({location})")

        try:
            lat, lng = location["lat"], location["lng"]
        except (KeyError, TypeError) as e:
            raise ValidationError("location must provide lat and lng", field="location") from e

        if accuracy_meters <= 0:
            accuracy_meters = DEFAULT_ACCURACY_METERS

        result = await self._call(
            "find_nearby_friends",
            self._friends_dao.find_nearby(
                self._session.username, lat, lng, accuracy_meters, total_polling_duration_millis, self._token
            )
        )
        return self._parse("find_nearby_friends", NearbyFriendsResponse, result).nearby_snapchatters

    async def search_friend(self, query: str) -> Any:
        # Response shape is unknown, returned as is
        self._logger.debug(f"search_friend ({query})")
        return await self._call(
            "search_friend",
            self._friends_dao.search(self._session.username, query, self._token)
        )

    async def user_exists(self, username: str) -> bool:
        self._logger.debug(f"user_exists ({username})")
        result = await self._call(
            "user_exists",
            self._friends_dao.exists(self._session.username, username, self._token)
        )
        return bool(self._parse("user_exists", UserExistsResponse, result).exists)

    async def update_display_name(self, friend_username: str, new_display_name: str) -> UpdatedUser:
        """
        Updates the display name for one of your friends and swaps the
        session record for the one echoed back by the server.
        """
        self._logger.debug(f'update_display_name ({friend_username}, "{new_display_name}")')
        result = await self._call(
            "update_display_name",
            self._friends_dao.set_display(self._session.username, friend_username, new_display_name, self._token)
        )
        updated = self._parse("update_display_name", DisplayNameResponse, result).object

        self._remove_friends_from_session([updated])
        self._add_friends_to_session([updated])
        self._logger.info(f"Display name for {updated.username} set to {updated.display!r}")
        return updated

    async def block_user(self, username: str) -> Any:
        self._logger.debug(f"block_user ({username})")
        return await self._set_user_blocked(username, True)

    async def unblock_user(self, username: str) -> Any:
        self._logger.debug(f"unblock_user ({username})")
        return await self._set_user_blocked(username, False)

    async def mark_suggested_friends_seen(self, usernames: Iterable[str] | str | None = None, seen: bool = False) -> bool:
        """
        Marks suggested friends as seen.
        :return: the server's "logged" acknowledgement
        """
        usernames = _as_list(usernames)
        self._logger.debug(f"mark_suggested_friends_seen ({usernames}, {seen})")
        result = await self._call(
            "mark_suggested_friends_seen",
            self._friends_dao.seen_suggested(self._session.username, usernames, bool(seen), self._token)
        )
        return bool(self._parse("mark_suggested_friends_seen", SuggestFriendResponse, result).logged)

    @property
    def _token(self) -> str | None:
        return self._session.auth_token

    async def _set_user_blocked(self, username: str, blocked: bool) -> Any:
        operation = "block_user" if blocked else "unblock_user"
        return await self._call(
            operation,
            self._friends_dao.set_blocked(self._session.username, username, blocked, self._token)
        )

    async def _call(self, operation: str, request) -> Any:
        try:
            return await request
        except APIError as e:
            if e.is_client_error:
                self._logger.warning(f"{operation} rejected: {e}")
            else:
                self._logger.error(f"{operation} failed: {e}")
            raise
        except TransportError as e:
            self._logger.error(f"{operation} failed: {e}")
            raise

    def _parse(self, operation: str, model: type[ResponseT], result: Any) -> ResponseT:
        if result is None:
            self._logger.warning(f"{operation} parse error: empty response")
            raise ParseError(operation, result)
        try:
            return model.model_validate(result)
        except PydanticValidationError as e:
            self._logger.warning(f"{operation} parse error {result}: {e}")
            raise ParseError(operation, result) from e

    def _remove_friends_from_session(self, friends: list[User]):
        self._session.remove_friends(friends)

    def _add_friends_to_session(self, friends: list[User]):
        self._session.add_friends(friends)
