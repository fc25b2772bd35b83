from typing import Any

from pydantic import BaseModel, ConfigDict, Field, AliasChoices

class User(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    username: str
    user_id: str | None = Field(default=None, validation_alias=AliasChoices("user_id", "userId", "id"))
    display: str | None = Field(default=None, validation_alias=AliasChoices("display", "displayName"))
    type: int | str | None = None
    added_by: str | None = Field(default=None, validation_alias=AliasChoices("added_by", "addedBy"))
    ts: int | str | None = None

    @property
    def display_name(self) -> str | None:
        return self.display

# Friend records held by the session are plain users
FriendRecord = User

class UpdatedUser(User):
    pass

class FoundFriend(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None
    display: str | None = None
    type: int | str | None = None

class NearbyUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    username: str
    user_id: str = Field(validation_alias=AliasChoices("user_id", "userId"))

# Response shapes, one per validated endpoint
class FindFriendsResponse(BaseModel):
    results: list[FoundFriend]

class NearbyFriendsResponse(BaseModel):
    nearby_snapchatters: list[NearbyUser]

class UserExistsResponse(BaseModel):
    exists: Any

class DisplayNameResponse(BaseModel):
    object: UpdatedUser

class SuggestFriendResponse(BaseModel):
    logged: Any = False
