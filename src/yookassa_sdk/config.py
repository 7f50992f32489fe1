"""Configuration surface for the YooKassa client."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.yookassa.ru/v3/"


class YooKassaSettings(BaseSettings):
    """Credentials and endpoint for the YooKassa API.

    Read from ``YOOKASSA_*`` environment variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="YOOKASSA_",
        env_file=".env",
        extra="ignore",
    )

    # Shop ID in the YooKassa merchant profile
    account_id: str = ""
    secret_key: SecretStr = SecretStr("")
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Paths are appended to the base URL, so it must end with a slash."""
        return v if v.endswith("/") else f"{v}/"


@lru_cache
def load_settings(env_file: str | None = None) -> YooKassaSettings:
    """Load YooKassaSettings once per process."""
    env_path = Path(env_file) if env_file else None
    if env_path is None:
        return YooKassaSettings()
    return YooKassaSettings(_env_file=env_path)
