"""Connection settings loaded from ``MONGO_*`` environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='MONGO_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    url: str = Field(
        default='mongodb://localhost:27017',
        description='MongoDB connection string',
    )
    database: str = Field(default='docrepo', description='Database name')
    server_selection_timeout_ms: int = Field(
        default=5000,
        gt=0,
        description='How long to wait for a reachable server, in milliseconds',
    )
    tz_aware: bool = Field(
        default=True,
        description='Return datetimes as timezone-aware UTC values',
    )
    app_name: str | None = Field(
        default=None,
        description='Application name reported to the server',
    )
