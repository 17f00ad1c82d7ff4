"""Conversion of model suggestions into GitHub review comments."""

import logging
import math
import re

from review_action.models.diff import DiffChunk, DiffFile
from review_action.models.outputs import ReviewComment, ReviewSuggestion

logger = logging.getLogger(__name__)

_LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_line_number(value: object) -> int | None:
    """Interpret a model-supplied line number.

    Only the leading integer of a string is used, so ``"12-14"``
    gives 12 and ``"3.5"`` gives 3. Fractional numbers are truncated.

    Args:
        value: ``lineNumber`` as the model returned it (number or text)

    Returns:
        The integer, or None if the value does not start with one
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        if match := _LEADING_INTEGER_RE.match(value):
            return int(match.group(1))
    return None


def create_comments(
    file: DiffFile,
    chunk: DiffChunk,
    suggestions: list[ReviewSuggestion],
) -> list[ReviewComment]:
    """Turn the suggestions for one chunk into review comments.

    Suggestions for a deleted file, or with a line number that is not a
    positive integer, are dropped. Several comments may land on the same line.

    Args:
        file: File the chunk belongs to
        chunk: Chunk the suggestions were produced for
        suggestions: Parsed model reply

    Returns:
        Comments in the order the model returned them
    """
    if not file.to_path:
        return []

    comments = []
    for suggestion in suggestions:
        line = parse_line_number(suggestion.line_number)
        if line is None or line <= 0:
            logger.debug(
                f"Dropping suggestion for {file.to_path} ({chunk.content}) - "
                f"invalid line number {suggestion.line_number!r}"
            )
            continue
        comments.append(
            ReviewComment(path=file.to_path, line=line, body=suggestion.review_comment)
        )
    return comments
