"""GitHub-specific type definitions."""

from pydantic import BaseModel, ConfigDict, Field


class EventOwner(BaseModel):
    """Owner block of the event's repository."""

    model_config = ConfigDict(extra="ignore")

    login: str


class EventRepository(BaseModel):
    """Repository block of a pull_request event payload."""

    model_config = ConfigDict(extra="ignore")

    name: str
    owner: EventOwner


class EventPayload(BaseModel):
    """The parts of the triggering pull_request event the action relies on.

    The payload is read from the JSON file GitHub Actions points
    ``GITHUB_EVENT_PATH`` at. Everything else in it is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    action: str = ""
    number: int = Field(gt=0)
    repository: EventRepository

    @property
    def owner(self) -> str:
        return self.repository.owner.login

    @property
    def repo(self) -> str:
        return self.repository.name


class PullRequestRecord(BaseModel):
    """Fields read from the pull request as currently stored on GitHub."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    body: str = ""
    base_sha: str
    head_sha: str


class PRDetails(BaseModel):
    """Pull request context shared by every stage of a review run.

    Built once from the event payload and the fetched pull request; never
    modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    pull_number: int
    title: str = ""
    description: str = ""

    @property
    def review_key(self) -> str:
        """Human-readable ``owner/repo#number`` used in log lines."""
        return f"{self.owner}/{self.repo}#{self.pull_number}"
