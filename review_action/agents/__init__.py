"""Review model client."""

from .code_reviewer import ReviewModelClient, parse_review_suggestions

__all__ = ["ReviewModelClient", "parse_review_suggestions"]
