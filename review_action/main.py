"""GitHub Action entry point."""

import asyncio
import logging
import sys

from github import Auth, Github

from review_action.agents.code_reviewer import ReviewModelClient
from review_action.config.settings import Settings
from review_action.handlers.pr_review_handler import handle_pr_review
from review_action.models.dependencies import ReviewDependencies
from review_action.models.outputs import ReviewRunResult
from review_action.services.github_service import GitHubService, create_http_client
from review_action.utils.actions import set_failed
from review_action.utils.logging import setup_observability

logger = logging.getLogger(__name__)


async def main(settings: Settings) -> ReviewRunResult:
    """Build the API clients from ``settings`` and review the triggering PR.

    Raises:
        ConfigurationError: If a required setting is missing
        ReviewActionError: For any failure during the review run
    """
    settings.require_credentials()

    # retry=None: failed GitHub calls end the run instead of being retried
    github_client = Github(
        auth=Auth.Token(settings.github_token),
        base_url=settings.github_api_url,
        retry=None,
    )
    model_client = ReviewModelClient.from_openai(
        settings.openai_api_model, settings.openai_api_key
    )

    async with create_http_client(
        settings.github_token, settings.github_api_url
    ) as http_client:
        deps = ReviewDependencies(
            github=GitHubService(github_client, http_client),
            model_client=model_client,
            event_path=settings.github_event_path,
            event_name=settings.github_event_name,
            exclude_patterns=settings.exclude_patterns,
        )
        result = await handle_pr_review(deps)

    logger.info(
        f"Review run finished: {result.outcome}, {result.total_comments} comments"
    )
    return result


def run() -> None:
    """Console entry point: run the review and exit non-zero on failure."""
    try:
        settings = Settings()
        setup_observability(settings)
        asyncio.run(main(settings))
    except Exception as e:
        set_failed(f"Error in main function: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
