import logging
from typing import Any, Self

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from docrepo.models.base import Entity

from .settings import MongoSettings

log = logging.getLogger(__name__)


def redact_url(url: str) -> str:
    """Hide the password part of a MongoDB URL so it can be logged."""
    if '://' not in url:
        return url
    scheme, rest = url.split('://', 1)
    if '@' not in rest:
        return url
    credentials, host = rest.rsplit('@', 1)
    if ':' not in credentials:
        return url
    username = credentials.split(':', 1)[0]
    return f'{scheme}://{username}:***@{host}'


class MongoContext:
    """Owns the motor client and resolves entity types to their collections."""

    def __init__(self, client: AsyncIOMotorClient, database: str) -> None:
        self.client = client
        self.database: AsyncIOMotorDatabase = client[database]

    @classmethod
    def from_settings(cls, settings: MongoSettings | None = None) -> Self:
        settings = settings or MongoSettings()
        client_options: dict[str, Any] = {
            'serverSelectionTimeoutMS': settings.server_selection_timeout_ms,
            'tz_aware': settings.tz_aware,
        }
        if settings.app_name:
            client_options['appname'] = settings.app_name
        log.debug('Opening MongoDB client for %s', redact_url(settings.url))
        return cls(AsyncIOMotorClient(settings.url, **client_options), settings.database)

    def get_collection(self, model: type[Entity]) -> AsyncIOMotorCollection:
        return self.database[model.collection_name()]

    async def ping(self) -> bool:
        try:
            await self.client.admin.command('ping')
        except PyMongoError:
            log.warning('MongoDB ping failed', exc_info=True)
            return False
        return True

    def close(self) -> None:
        log.debug('Closing MongoDB client')
        self.client.close()
