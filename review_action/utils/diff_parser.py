"""Unified diff parsing.

Turns the raw text returned by GitHub's diff media type into DiffFile
records using ``unidiff``: one per file, each holding its hunks and every
changed or context line with the line numbers it occupies in the old and
new file.
"""

import logging

from unidiff import Hunk, PatchedFile, PatchSet, UnidiffParseError

from review_action.errors import DiffParseError
from review_action.models.diff import DiffChange, DiffChunk, DiffFile

logger = logging.getLogger(__name__)

DEV_NULL = "/dev/null"


def parse_diff(diff_text: str | None) -> list[DiffFile]:
    """Parse a unified diff.

    Args:
        diff_text: Raw diff, as returned for ``application/vnd.github.v3.diff``

    Returns:
        Files in the order they appear in the diff

    Raises:
        DiffParseError: If the text is not a well-formed unified diff
    """
    if not diff_text:
        return []

    try:
        patch_set = PatchSet.from_string(diff_text.replace("\r\n", "\n"))
    except UnidiffParseError as e:
        raise DiffParseError(f"Error parsing diff: {e}") from e

    files = [_to_diff_file(patched_file) for patched_file in patch_set]
    logger.debug(f"Parsed diff: {len(files)} files")
    return files


def _strip_prefix(path: str, prefix: str) -> str | None:
    """Drop git's ``a/`` / ``b/`` prefix; ``/dev/null`` means no file."""
    if path == DEV_NULL:
        return None
    return path[len(prefix):] if path.startswith(prefix) else path


def _to_diff_file(patched_file: PatchedFile) -> DiffFile:
    from_path = _strip_prefix(patched_file.source_file, "a/")
    to_path = _strip_prefix(patched_file.target_file, "b/")
    deleted = to_path is None or patched_file.is_removed_file
    return DiffFile(
        from_path=None if patched_file.is_added_file else from_path,
        to_path=None if deleted else to_path,
        chunks=[_to_diff_chunk(hunk) for hunk in patched_file],
        new=from_path is None or patched_file.is_added_file,
        deleted=deleted,
        additions=patched_file.added,
        deletions=patched_file.removed,
    )


def _range(start: int, length: int) -> str:
    # git omits the count when it is 1
    return str(start) if length == 1 else f"{start},{length}"


def _to_diff_chunk(hunk: Hunk) -> DiffChunk:
    header = (
        f"@@ -{_range(hunk.source_start, hunk.source_length)} "
        f"+{_range(hunk.target_start, hunk.target_length)} @@"
    )
    if hunk.section_header:
        header = f"{header} {hunk.section_header}"

    changes = []
    for line in hunk:
        content = line.line_type + line.value.rstrip("\n")
        if line.is_added:
            changes.append(DiffChange(type="add", content=content, ln=line.target_line_no))
        elif line.is_removed:
            changes.append(DiffChange(type="del", content=content, ln=line.source_line_no))
        elif line.is_context:
            changes.append(
                DiffChange(
                    type="normal",
                    content=content,
                    ln1=line.source_line_no,
                    ln2=line.target_line_no,
                )
            )
        # "\ No newline at end of file" markers carry no line

    return DiffChunk(
        content=header,
        old_start=hunk.source_start,
        old_lines=hunk.source_length,
        new_start=hunk.target_start,
        new_lines=hunk.target_length,
        changes=changes,
    )
