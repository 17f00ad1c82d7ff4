"""GitHub access for the review run: event payload, PR metadata, diffs, reviews."""

import asyncio
import logging
from pathlib import Path

import httpx
from github import Github, GithubException
from github.PullRequest import PullRequest
from pydantic import ValidationError

from review_action.errors import EventPayloadError, GitHubServiceError
from review_action.models.github_types import EventPayload, PullRequestRecord
from review_action.models.outputs import ReviewComment

logger = logging.getLogger(__name__)

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"
GITHUB_API_VERSION = "2022-11-28"


def read_event_payload(event_path: str) -> EventPayload:
    """Read the triggering event from the JSON file the runner provides.

    Args:
        event_path: Value of ``GITHUB_EVENT_PATH``

    Returns:
        Parsed event payload

    Raises:
        EventPayloadError: If the file cannot be read or lacks the PR fields
    """
    try:
        raw = Path(event_path).read_text(encoding="utf-8")
        return EventPayload.model_validate_json(raw)
    except OSError as e:
        raise EventPayloadError(f"Error reading event payload {event_path}: {e}") from e
    except ValidationError as e:
        raise EventPayloadError(f"Invalid event payload {event_path}: {e}") from e


def create_http_client(token: str, api_url: str) -> httpx.AsyncClient:
    """Create the async HTTP client used for raw diff downloads."""
    return httpx.AsyncClient(
        base_url=api_url,
        headers={
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": "ai-code-review-action",
        },
        timeout=30.0,
    )


class GitHubService:
    """Pull request operations needed by the review pipeline.

    Metadata and review submission go through PyGithub, whose blocking calls
    run in a worker thread via ``asyncio.to_thread``; diffs are fetched with
    httpx because PyGithub has no accessor for the diff media type. Every
    failure is raised as GitHubServiceError.
    """

    def __init__(self, github_client: Github, http_client: httpx.AsyncClient):
        self.github_client = github_client
        self.http_client = http_client
        self._pulls: dict[tuple[str, str, int], PullRequest] = {}

    async def _get_pull(
        self, owner: str, repo: str, pull_number: int, refresh: bool = True
    ) -> PullRequest:
        key = (owner, repo, pull_number)
        if refresh or key not in self._pulls:
            self._pulls[key] = await asyncio.to_thread(
                lambda: self.github_client.get_repo(f"{owner}/{repo}").get_pull(
                    pull_number
                )
            )
        return self._pulls[key]

    async def _get_diff(self, endpoint: str) -> str:
        response = await self.http_client.get(
            endpoint, headers={"Accept": DIFF_MEDIA_TYPE}
        )
        response.raise_for_status()
        return response.text

    async def get_pull_request(
        self, owner: str, repo: str, pull_number: int
    ) -> PullRequestRecord:
        """Fetch the pull request's title, body and commit SHAs.

        Raises:
            GitHubServiceError: If the GitHub API request fails
        """
        try:
            pr = await self._get_pull(owner, repo, pull_number)
        except GithubException as e:
            raise GitHubServiceError(f"Error fetching PR details: {e}") from e

        logger.info(f"Fetched PR {owner}/{repo}#{pull_number}: {pr.title}")
        return PullRequestRecord(
            title=pr.title or "",
            body=pr.body or "",
            base_sha=pr.base.sha,
            head_sha=pr.head.sha,
        )

    async def get_base_and_head_shas(
        self, owner: str, repo: str, pull_number: int
    ) -> tuple[str, str]:
        """Fetch the current base and head commit SHAs of the pull request.

        Raises:
            GitHubServiceError: If the GitHub API request fails
        """
        try:
            pr = await self._get_pull(owner, repo, pull_number)
        except GithubException as e:
            raise GitHubServiceError(f"Error fetching base and head SHAs: {e}") from e
        return pr.base.sha, pr.head.sha

    async def get_pull_request_diff(
        self, owner: str, repo: str, pull_number: int
    ) -> str:
        """Fetch the full diff of the pull request as raw text.

        Raises:
            GitHubServiceError: If the request fails or returns an error status
        """
        try:
            diff = await self._get_diff(f"/repos/{owner}/{repo}/pulls/{pull_number}")
        except httpx.HTTPError as e:
            raise GitHubServiceError(f"Error fetching diff: {e}") from e

        logger.info(f"Fetched diff for {owner}/{repo}#{pull_number} ({len(diff)} bytes)")
        return diff

    async def compare_commits_diff(
        self, owner: str, repo: str, base_sha: str, head_sha: str
    ) -> str:
        """Fetch the diff between two commits as raw text.

        Raises:
            GitHubServiceError: If the request fails or returns an error status
        """
        try:
            diff = await self._get_diff(
                f"/repos/{owner}/{repo}/compare/{base_sha}...{head_sha}"
            )
        except httpx.HTTPError as e:
            raise GitHubServiceError(f"Error fetching diff: {e}") from e

        logger.info(
            f"Fetched diff for {owner}/{repo} {base_sha[:7]}..{head_sha[:7]} "
            f"({len(diff)} bytes)"
        )
        return diff

    async def create_review(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        comments: list[ReviewComment],
    ) -> None:
        """Submit all comments as one non-blocking ``COMMENT`` review.

        Reuses the pull request object fetched earlier in the run, if any.

        Raises:
            GitHubServiceError: If the GitHub API request fails
        """
        try:
            pr = await self._get_pull(owner, repo, pull_number, refresh=False)
            await asyncio.to_thread(
                pr.create_review,
                event="COMMENT",
                comments=[comment.model_dump() for comment in comments],
            )
        except GithubException as e:
            raise GitHubServiceError(f"Error creating review comments: {e}") from e

        logger.info(
            f"Posted review with {len(comments)} comments on {owner}/{repo}#{pull_number}"
        )
