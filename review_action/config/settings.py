"""Application settings using Pydantic Settings for environment variable management."""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from review_action.errors import ConfigurationError
from review_action.utils.filters import parse_exclude_patterns


class Settings(BaseSettings):
    """Action settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Action inputs
    # GitHub Actions exposes `with:` inputs as INPUT_<NAME>; plain names are
    # accepted for local runs.
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN", "GH_TOKEN"),
        description="GitHub token used to read the PR and post the review",
    )
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_OPENAI_API_KEY", "OPENAI_API_KEY"),
        description="OpenAI API key for the review model",
    )
    openai_api_model: str = Field(
        default="gpt-4",
        validation_alias=AliasChoices("INPUT_OPENAI_API_MODEL", "OPENAI_API_MODEL"),
        description="OpenAI model to use",
    )
    exclude: str = Field(
        default="",
        validation_alias=AliasChoices("INPUT_EXCLUDE", "EXCLUDE"),
        description="Comma-separated glob patterns of files to skip",
    )

    # Runner environment
    github_event_path: str | None = Field(
        default=None,
        validation_alias="GITHUB_EVENT_PATH",
        description="Path to the JSON payload of the triggering event",
    )
    github_event_name: str = Field(
        default="",
        validation_alias="GITHUB_EVENT_NAME",
        description="Name of the triggering event",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_API_URL",
        description="GitHub REST API base URL (differs on GitHub Enterprise Server)",
    )

    # Observability
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL", description="Logging level"
    )
    logfire_token: str | None = Field(
        default=None,
        validation_alias="LOGFIRE_TOKEN",
        description="Pydantic Logfire token for observability",
    )

    @property
    def exclude_patterns(self) -> list[str]:
        """Exclusion globs with surrounding whitespace removed."""
        return parse_exclude_patterns(self.exclude)

    def require_credentials(self) -> None:
        """Fail fast when a value the run cannot do without is missing.

        Raises:
            ConfigurationError: Listing every missing variable
        """
        missing = []
        if not self.github_token:
            missing.append("GITHUB_TOKEN")
        if not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        if not self.github_event_path:
            missing.append("GITHUB_EVENT_PATH")
        if missing:
            raise ConfigurationError(
                "Missing required environment variables: " + ", ".join(missing)
            )
