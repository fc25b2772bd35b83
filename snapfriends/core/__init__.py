from .dto import (
    User, FriendRecord, UpdatedUser, FoundFriend, NearbyUser,
    FindFriendsResponse, NearbyFriendsResponse, UserExistsResponse,
    DisplayNameResponse, SuggestFriendResponse,
)
from .session import Session
