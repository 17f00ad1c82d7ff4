"""File filtering utilities for determining which files to review."""

from collections.abc import Iterable

from wcmatch import glob

from review_action.models.diff import DiffFile

# Brace sets, extended patterns and globstar; case-sensitive on every platform
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.CASE


def parse_exclude_patterns(raw: str | None) -> list[str]:
    """Split the comma-separated ``exclude`` input into glob patterns.

    Args:
        raw: Value such as ``"*.md, dist/**"``

    Returns:
        Patterns with surrounding whitespace removed; blank entries are dropped
    """
    if not raw:
        return []
    return [pattern.strip() for pattern in raw.split(",") if pattern.strip()]


def matches_pattern(file_path: str, pattern: str) -> bool:
    """Check a path against one glob pattern.

    ``*`` and ``?`` never cross a ``/``; ``**`` matches any number of
    directories, including none. Dotfiles are only matched explicitly.
    """
    pattern = pattern.strip()
    if not pattern or not file_path:
        return False
    return glob.globmatch(file_path, pattern, flags=GLOB_FLAGS)


def is_excluded(file_path: str | None, patterns: Iterable[str]) -> bool:
    """Determine if a file matches any exclusion pattern.

    Args:
        file_path: Destination path; None (deleted file) is matched as "",
            which no pattern matches
        patterns: Glob patterns

    Returns:
        True if at least one pattern matches
    """
    path = file_path or ""
    return any(matches_pattern(path, pattern) for pattern in patterns)


def filter_excluded_files(
    files: list[DiffFile], patterns: Iterable[str]
) -> list[DiffFile]:
    """Drop the files whose destination path matches an exclusion pattern.

    Args:
        files: Parsed diff files
        patterns: Glob patterns; an empty collection keeps every file

    Returns:
        The remaining files, in their original order
    """
    patterns = list(patterns)
    if not patterns:
        return list(files)
    return [f for f in files if not is_excluded(f.to_path, patterns)]
