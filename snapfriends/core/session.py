from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .dto import User


class Session(BaseModel):
    """
    Authenticated session state shared with the friends client.

    Field names accept both snake_case and the service's camelCase
    (``countryCode``, ``shouldTextToVerifyNumber``, ...).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str
    country_code: str
    should_text_to_verify_number: bool = False
    should_call_to_verify_number: bool = False
    auth_token: str | None = None
    friends: list[User] = Field(default_factory=list)

    @property
    def requires_phone_verification(self) -> bool:
        return self.should_text_to_verify_number or self.should_call_to_verify_number

    def get_friend(self, username: str) -> User | None:
        for friend in self.friends:
            if friend.username == username:
                return friend
        return None

    def remove_friends(self, friends: Iterable[User]) -> list[User]:
        """
        Drop every record whose username matches one of ``friends``
        """
        usernames = {friend.username for friend in friends}
        self.friends = [friend for friend in self.friends if friend.username not in usernames]
        return self.friends

    def add_friends(self, friends: Iterable[User]) -> list[User]:
        self.friends = self.friends + list(friends)
        return self.friends
