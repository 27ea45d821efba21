from __future__ import annotations

import secrets
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "ATM Ledger API"
    log_level: str = "INFO"
    ledger_dir: str = "ledgers"
    ledger_name_secret: str = Field(default_factory=lambda: secrets.token_hex(16))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ATM_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
