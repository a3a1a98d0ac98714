"""
Application configuration models and helpers.

Centralizes the portal credentials and default user attributes so the library
factories and the command line helpers share one configuration surface.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import os

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_env_file(path: str = ".env") -> None:
    """Best-effort load key=value pairs from a .env file without extra deps."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


_load_env_file()


class SSOSettings(BaseSettings):
    """Credentials and defaults for the support portal SSO integration."""

    model_config = SettingsConfigDict(extra="ignore")

    account_id: str = Field(
        ...,
        validation_alias="SSO_ACCOUNT_ID",
        description="Portal account identifier (the subdomain name).",
    )
    shared_secret: SecretStr = Field(
        ...,
        validation_alias="SSO_SHARED_SECRET",
        description="SSO key issued by the portal; used to derive the cipher key.",
    )
    default_attributes: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias="SSO_DEFAULT_ATTRIBUTES",
        description="JSON object merged under every user's attributes.",
    )

    @field_validator("account_id")
    @classmethod
    def _strip_account_id(cls, value: str) -> str:
        """Tolerate stray whitespace around the subdomain name."""
        return value.strip()


class AppSettings(BaseSettings):
    """Root settings object for the token generator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    sso: SSOSettings = Field(default_factory=SSOSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "SSOSettings",
    "get_settings",
]
