"""
Settings read from ``POSTBOX_*`` environment variables and a ``.env`` file.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from .store import DEFAULT_MAX_TOTAL_LENGTH, StorePolicy


class Settings(BaseSettings):
    database_url: str | None = None  # unset ➜ in-memory id counter
    max_total_length: int = DEFAULT_MAX_TOTAL_LENGTH
    enforce_ownership: bool = True
    id_start: int = 0
    identity_header: str = "X-Caller-Identity"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="POSTBOX_", env_file=".env", extra="ignore"
    )

    def policy(self) -> StorePolicy:
        return StorePolicy(
            max_total_length=self.max_total_length,
            enforce_ownership=self.enforce_ownership,
        )
