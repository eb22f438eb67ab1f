"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio_projects.domain.entities import LoadMode


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: LoadMode = LoadMode.PRODUCTION
    github_token: SecretStr | None = None
    revalidate_seconds: int = 86_400
    request_timeout_seconds: float = 10.0
    concurrent_fetches: bool = True
    assets_dir: Path = Path("public/images")
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
