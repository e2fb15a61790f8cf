from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from rankly.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_NAME: str = "Rankly"
    APP_ENV: Literal["development", "production"] = "production"

    # Profile ids look like <name prefix>_<epoch millis>_<random base36 suffix>
    PROFILE_ID_NAME_PREFIX: int = 10
    PROFILE_ID_RANDOM_SUFFIX: int = 2
    # Collisions are retried this many times, then the last id is used anyway
    PROFILE_ID_MAX_ATTEMPTS: int = 100

    # "requeue" moves a skipped pair to the back of the queue, "in_place" leaves it where it was
    SKIP_POLICY: Literal["requeue", "in_place"] = "requeue"

    # 4 spaces, because tabs are difficult in browsers.
    ITEM_LINE_SEPARATOR: str = "    "


settings = Settings()

APP_VERSION = __version__
