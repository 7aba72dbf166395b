"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_changelog.utils.constants import DEFAULT_CHANGELOG_PATH, DEFAULT_GITHUB_API_URL


class Settings(BaseSettings):
    """Environment variable settings for the application.

    The ``INPUT_*`` names are how GitHub Actions passes action inputs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    # Generic application-wide settings
    DEBUG: bool = False
    CHANGELOG_PATH: Path = Path(DEFAULT_CHANGELOG_PATH)

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_TOKEN: str | None = Field(default=None, validation_alias=AliasChoices("GITHUB_TOKEN", "INPUT_TOKEN"))
    OWNER: str | None = Field(default=None, validation_alias=AliasChoices("OWNER", "INPUT_OWNER"))
    REPO: str | None = Field(default=None, validation_alias=AliasChoices("REPO", "INPUT_REPO", "GITHUB_REPOSITORY"))
