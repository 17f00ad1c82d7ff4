"""Dependency injection types for the review pipeline."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from review_action.agents.code_reviewer import ReviewModelClient
from review_action.services.github_service import GitHubService


class ReviewDependencies(BaseModel):
    """Dependencies for one review run.

    Holds the external-service clients (created once per process) and the
    run inputs, so the handler can be driven with test doubles.
    """

    github: GitHubService
    model_client: ReviewModelClient
    event_path: str
    event_name: str = ""
    exclude_patterns: list[str] = Field(default_factory=list)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("event_path")
    @classmethod
    def validate_event_path(cls, v: str) -> str:
        """Validate event_path is not blank."""
        if not v or not v.strip():
            raise ValueError("event_path cannot be empty")
        return v
