from .adapters.api.dao import CommonHTTPClient, FriendsHTTPDAO
from .adapters.api.service import FriendsClient
from .config import Settings, EndpointSettings, load_config
from .core import Session, User, UpdatedUser, FoundFriend, NearbyUser
from .exceptions import (
    BaseAppError,
    TransportError,
    NetworkError,
    APIError,
    VerificationRequiredError,
    ParseError,
)

__version__ = "0.1.0"
