"""Summarist configuration — loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"
MIN_API_KEY_LENGTH = 10


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- LLM ------------------------------------------------------------
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = ""  # any OpenAI-compatible endpoint; empty = api.openai.com

    # Low temperature favours schema adherence over creative variance.
    summary_temperature: float = 0.5

    # --- Local state ----------------------------------------------------
    data_dir: str = "~/.summarist"
    history_max_items: int = 20
    default_language: str = "en"

    # --- Logging --------------------------------------------------------
    log_level: str = "warning"

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()


def credential_configured(api_key: str | None) -> bool:
    """Return False for an empty, placeholder or implausibly short key."""
    if not api_key:
        return False
    key = api_key.strip()
    return key != PLACEHOLDER_API_KEY and len(key) >= MIN_API_KEY_LENGTH


settings = Settings()
