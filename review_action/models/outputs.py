"""Output models for review model replies and the review submitted to GitHub."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ReviewSuggestion(BaseModel):
    """One entry of the JSON array the review model is asked to return.

    ``line_number`` is kept exactly as the model sent it; converting it to a
    usable line happens when comments are created.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    line_number: int | float | str | bool | None = Field(
        default=None, alias="lineNumber"
    )
    review_comment: str = Field(alias="reviewComment")


class ReviewComment(BaseModel):
    """An inline comment ready to be submitted as part of a review."""

    model_config = ConfigDict(frozen=True)

    path: str
    line: int = Field(gt=0)
    body: str


class ReviewRunResult(BaseModel):
    """How a review run ended.

    ``reviewed`` means a review carrying ``comments`` was submitted;
    the other outcomes are successful runs that posted nothing.
    """

    outcome: Literal["reviewed", "no_comments", "no_diff", "unsupported_event"]
    comments: list[ReviewComment] = Field(default_factory=list)
    files_reviewed: int = 0

    @property
    def total_comments(self) -> int:
        return len(self.comments)
