"""Pull request review event handler.

Runs one review for the pull_request event that triggered the workflow:

    read event -> fetch PR details -> pick diff by action -> parse and filter
    -> review every chunk -> submit one review

Any exception raised here aborts the run; the entry point reports it.
"""

import logging

from review_action.agents.code_reviewer import ReviewModelClient
from review_action.models.dependencies import ReviewDependencies
from review_action.models.diff import DiffFile
from review_action.models.github_types import EventPayload, PRDetails
from review_action.models.outputs import ReviewComment, ReviewRunResult
from review_action.prompts.code_reviewer_prompt import create_prompt
from review_action.services.github_service import GitHubService, read_event_payload
from review_action.utils.comments import create_comments
from review_action.utils.diff_parser import parse_diff
from review_action.utils.filters import filter_excluded_files

logger = logging.getLogger(__name__)


# === MAIN HANDLER ===


async def handle_pr_review(deps: ReviewDependencies) -> ReviewRunResult:
    """
    Review the pull request named by the triggering event.

    Input:
        deps: GitHub service, model client and run inputs

    Output:
        ReviewRunResult describing which way the run finished

    Logic Flow:
        READ event payload, FETCH PR details
        IF action == "opened": fetch the whole PR diff
        ELIF action == "synchronize": fetch base/head SHAs, diff between them
        ELSE: log and return "unsupported_event"
        IF diff is empty: log and return "no_diff"
        PARSE diff, DROP excluded files
        REVIEW every non-empty chunk in file order, then chunk order
        IF any comments: submit them as a single review

    Edge Cases:
        - Unparseable model reply: that chunk contributes no comments
        - Model provider unreachable: ReviewModelError propagates, nothing is posted
        - GitHub API failure at any step: GitHubServiceError propagates
    """
    event = read_event_payload(deps.event_path)
    pr_details = await _get_pr_details(deps.github, event)
    logger.info(
        f"Starting review for {pr_details.review_key} (action={event.action or '-'})"
    )

    if event.action == "opened":
        diff = await deps.github.get_pull_request_diff(
            pr_details.owner, pr_details.repo, pr_details.pull_number
        )
    elif event.action == "synchronize":
        diff = await _get_pushed_changes_diff(deps.github, pr_details)
    else:
        logger.info(f"Unsupported event: {deps.event_name} (action={event.action})")
        return ReviewRunResult(outcome="unsupported_event")

    if not diff:
        logger.info("No diff found")
        return ReviewRunResult(outcome="no_diff")

    parsed_diff = parse_diff(diff)
    filtered_diff = filter_excluded_files(parsed_diff, deps.exclude_patterns)
    logger.info(
        f"Reviewing {len(filtered_diff)} of {len(parsed_diff)} changed files "
        f"({len(parsed_diff) - len(filtered_diff)} excluded)"
    )

    comments = await analyze_code(filtered_diff, pr_details, deps.model_client)

    if not comments:
        logger.info(f"No review comments for {pr_details.review_key}")
        return ReviewRunResult(outcome="no_comments", files_reviewed=len(filtered_diff))

    await deps.github.create_review(
        pr_details.owner, pr_details.repo, pr_details.pull_number, comments
    )
    return ReviewRunResult(
        outcome="reviewed", comments=comments, files_reviewed=len(filtered_diff)
    )


# === HELPER FUNCTIONS ===


async def _get_pr_details(github: GitHubService, event: EventPayload) -> PRDetails:
    """Combine the event's repository coordinates with the PR's current text."""
    record = await github.get_pull_request(event.owner, event.repo, event.number)
    return PRDetails(
        owner=event.owner,
        repo=event.repo,
        pull_number=event.number,
        title=record.title,
        description=record.body,
    )


async def _get_pushed_changes_diff(github: GitHubService, pr_details: PRDetails) -> str:
    """Diff between the PR's base and head commits, looked up right now."""
    base_sha, head_sha = await github.get_base_and_head_shas(
        pr_details.owner, pr_details.repo, pr_details.pull_number
    )
    return await github.compare_commits_diff(
        pr_details.owner, pr_details.repo, base_sha, head_sha
    )


async def analyze_code(
    parsed_diff: list[DiffFile],
    pr_details: PRDetails,
    model_client: ReviewModelClient,
) -> list[ReviewComment]:
    """
    Ask the model about every chunk and collect the resulting comments.

    Chunks are sent one at a time, in file order then chunk order, so the
    comments come back in a deterministic order. Deleted files and chunks
    without changes are skipped.
    """
    comments: list[ReviewComment] = []
    for file in parsed_diff:
        if file.is_deleted_file:
            continue
        for chunk in file.chunks:
            if not chunk.has_changes:
                continue
            prompt = create_prompt(file, chunk, pr_details)
            suggestions = await model_client.get_ai_response(prompt)
            if not suggestions:
                continue
            new_comments = create_comments(file, chunk, suggestions)
            logger.debug(
                f"{file.to_path} {chunk.content}: {len(new_comments)} comments"
            )
            comments.extend(new_comments)
    return comments
