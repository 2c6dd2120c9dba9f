"""Configuration helpers for the caddie service."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_COURSE_DOCUMENT = REPO_ROOT / "data" / "courses" / "Chateau_Elan_Course.txt"
DEFAULT_WEB_DIR = REPO_ROOT / "web"

_STRICT_ENVS = {"staging", "production", "prod"}


class _Settings(BaseSettings):
    course_data_path: Path = Field(
        default=DEFAULT_COURSE_DOCUMENT, alias="COURSE_DATA_PATH"
    )

    caddie_provider: str = Field(default="openai", alias="CADDIE_PROVIDER")
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    openai_timeout: float = Field(default=10.0, alias="OPENAI_TIMEOUT")
    advice_max_tokens: int = Field(default=150, alias="ADVICE_MAX_TOKENS")
    advice_timeout_s: float = Field(default=15.0, alias="ADVICE_TIMEOUT_S")

    heygen_api_key: str | None = Field(default=None, alias="HEYGEN_API_KEY")
    heygen_avatar_id: str | None = Field(default=None, alias="HEYGEN_AVATAR_ID")
    heygen_voice_id: str = Field(
        default="1bd001e7e50f421d891986aad5158bc8", alias="HEYGEN_VOICE_ID"
    )
    heygen_enabled: bool = Field(default=False, alias="HEYGEN_ENABLED")
    avatar_timeout_s: float = Field(default=8.0, alias="AVATAR_TIMEOUT_S")

    google_tts_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_TTS_API_KEY", "Google_Text_2_Audio"),
    )
    tts_timeout_s: float = Field(default=10.0, alias="TTS_TIMEOUT_S")
    tts_request_timeout_s: float = Field(default=8.0, alias="TTS_REQUEST_TIMEOUT_S")

    app_env: str = Field(default="development", alias="APP_ENV")
    serve_web: bool = Field(default=True, alias="SERVE_WEB")
    web_dir: Path = Field(default=DEFAULT_WEB_DIR, alias="WEB_DIR")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    @property
    def is_development(self) -> bool:
        return self.app_env.strip().lower() in {"development", "dev"}

    @property
    def is_strict(self) -> bool:
        return (
            os.getenv("STAGING") == "1"
            or self.app_env.strip().lower() in _STRICT_ENVS
        )

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def heygen_configured(self) -> bool:
        return bool(self.heygen_api_key and self.heygen_avatar_id)

    @property
    def google_tts_configured(self) -> bool:
        return bool(self.google_tts_api_key)


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def cors_origins() -> list[str]:
    allow = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    return [o.strip() for o in allow if o.strip()]
