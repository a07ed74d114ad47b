from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    transcripts_dir: Path = Path("transcripts")
    uploads_dir: Path = Path("uploads")
    youtube_api_key: str | None = None
    youtube_api_base: str = "https://www.googleapis.com/youtube/v3"
    metadata_timeout_seconds: float = 10.0
    batch_delay_ms: int = 1000
    batch_max_size: int | None = None
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="YTT_", env_file_encoding="utf-8")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("batch_max_size", mode="before")
    @classmethod
    def _blank_means_unbounded(cls, value: str | int | None) -> str | int | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

@lru_cache

def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


settings = get_settings()
