"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from review_action.models.github_types import PRDetails

SAMPLE_DIFF = "\n".join(
    [
        "diff --git a/src/app.py b/src/app.py",
        "index 83db48f..bf269f4 100644",
        "--- a/src/app.py",
        "+++ b/src/app.py",
        "@@ -1,4 +1,5 @@",
        " import os",
        "-import sys",
        "+import json",
        "+import logging",
        " ",
        " def main():",
        "@@ -10,3 +11,3 @@ def main():",
        "     value = 1",
        "-    return value",
        "+    return value * 2",
        " ",
        "diff --git a/old.txt b/old.txt",
        "deleted file mode 100644",
        "index e69de29..0000000",
        "--- a/old.txt",
        "+++ /dev/null",
        "@@ -1,2 +0,0 @@",
        "-first",
        "-second",
        "diff --git a/docs/guide.md b/docs/guide.md",
        "new file mode 100644",
        "index 0000000..3b18e51",
        "--- /dev/null",
        "+++ b/docs/guide.md",
        "@@ -0,0 +1,2 @@",
        "+# Guide",
        "+hello",
        "\\ No newline at end of file",
        "",
    ]
)


@pytest.fixture
def sample_diff() -> str:
    """Return a three-file diff: modified, deleted and added file."""
    return SAMPLE_DIFF


@pytest.fixture
def pr_details() -> PRDetails:
    """Return PR context for owner/repo#42."""
    return PRDetails(
        owner="owner",
        repo="repo",
        pull_number=42,
        title="Add JSON output",
        description="Switches the report to JSON.",
    )


@pytest.fixture
def write_event(tmp_path: Path) -> Callable[..., str]:
    """Return a helper that writes a pull_request event file and returns its path."""

    def _write(action: str = "opened", number: int = 42, **extra) -> str:
        payload = {
            "action": action,
            "number": number,
            "repository": {"owner": {"login": "owner"}, "name": "repo"},
            **extra,
        }
        path = tmp_path / "event.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    return _write
