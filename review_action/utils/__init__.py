"""Utility functions and helpers."""

from .actions import set_failed
from .comments import create_comments, parse_line_number
from .diff_parser import parse_diff
from .filters import filter_excluded_files, parse_exclude_patterns
from .logging import setup_observability

__all__ = [
    "create_comments",
    "filter_excluded_files",
    "parse_diff",
    "parse_exclude_patterns",
    "parse_line_number",
    "set_failed",
    "setup_observability",
]
