from .common import CommonHTTPClient
from .friends import FriendsHTTPDAO, ADDED_BY_USERNAME, ADDED_BY_ADDED_ME_BACK
