"""Application configuration and environment variables."""
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

DEFAULT_ANIME_FILE = Path(__file__).resolve().parent.parent / "data" / "anime.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Anime Catalog API"
    debug: bool = False
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage
    anime_file: Path = DEFAULT_ANIME_FILE
    storage_backend: Literal["json", "memory"] = "json"
    # Hold one lock around every load and every read-modify-write cycle. Off by default:
    # concurrent writers race on the file exactly as separate requests would.
    serialize_writes: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
