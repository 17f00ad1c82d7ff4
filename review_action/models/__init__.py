"""Data models for the AI code review action."""

from .diff import DiffChange, DiffChunk, DiffFile
from .github_types import EventPayload, PRDetails, PullRequestRecord
from .outputs import ReviewComment, ReviewRunResult, ReviewSuggestion

__all__ = [
    "DiffChange",
    "DiffChunk",
    "DiffFile",
    "EventPayload",
    "PRDetails",
    "PullRequestRecord",
    "ReviewComment",
    "ReviewRunResult",
    "ReviewSuggestion",
]
