from __future__ import annotations

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    # Exercise Directory: bundled catalog unless overridden
    CATALOG_PATH: Optional[str] = None

    # Editor defaults
    DEFAULT_SET_COUNT: int = 3
    DEFAULT_EMOM_INTERVAL_SECONDS: int = 60
    DEFAULT_WEIGHT_TYPE: str = "freeweight"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL (or an explicit level) to the root logger."""
    resolved = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
