import pytest
import logging
from unittest.mock import AsyncMock, MagicMock

from snapfriends.adapters.api.dao import CommonHTTPClient, FriendsHTTPDAO
from snapfriends.adapters.api.service import FriendsClient
from snapfriends.core import Session, User


@pytest.fixture(autouse=True)
def setup_logging():
    """
    Sets up logging for all tests
    """
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


@pytest.fixture
def session():
    return Session(
        username="me",
        country_code="US",
        auth_token="test-token",
        friends=[User(username="alice"), User(username="bob", display="Bobby")]
    )


@pytest.fixture
def http_client():
    """
    Transport double recording every POST
    """
    client = MagicMock(spec=CommonHTTPClient)
    client.post = AsyncMock(return_value={})
    return client


@pytest.fixture
def friends_client(http_client, session):
    return FriendsClient(friends_dao=FriendsHTTPDAO(http_client), session=session)
