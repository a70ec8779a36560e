"""Client configuration read from environment variables and a .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the GitHub REST client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_api_url: str = "https://api.github.com/"
    github_upload_url: str = "https://uploads.github.com/"
    github_user_agent: str | None = None
    github_api_version: str = "2022-11-28"
    github_timeout: float = 30.0

    log_level: str = "WARNING"
    json_logs: bool = False


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, read once."""
    return Settings()
