import logging
from typing import AsyncIterable
from dishka import Provider, provide, Scope, from_context

from snapfriends.adapters.api.dao import CommonHTTPClient, FriendsHTTPDAO
from snapfriends.adapters.api.service import FriendsClient
from snapfriends.config import Settings, load_config
from snapfriends.core import Session
from snapfriends.log import configure_logging


class AppProvider(Provider):
    scope = Scope.APP

    # Supplied by the caller: make_async_container(AppProvider(), context={Session: session})
    session = from_context(provides=Session, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def settings(self) -> Settings:
        return load_config()

    @provide(scope=Scope.APP)
    async def logger(self, settings: Settings) -> logging.Logger:
        return configure_logging(settings.log_level)

    @provide(scope=Scope.APP)
    async def api_client(self, settings: Settings, logger: logging.Logger) -> AsyncIterable[CommonHTTPClient]:
        client = CommonHTTPClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            retry_delay=settings.retry_delay,
            logger=logger
        )
        async with client:
            yield client

    @provide(scope=Scope.REQUEST)
    async def friends_http_dao(self, http_client: CommonHTTPClient, settings: Settings) -> FriendsHTTPDAO:
        return FriendsHTTPDAO(http_client=http_client, endpoints=settings.endpoints)

    @provide(scope=Scope.REQUEST)
    async def friends_client(
            self,
            friends_dao: FriendsHTTPDAO,
            session: Session,
            logger: logging.Logger
    ) -> FriendsClient:
        return FriendsClient(
            friends_dao=friends_dao,
            session=session,
            logger=logger
        )
