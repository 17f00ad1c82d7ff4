"""Structured unified-diff records produced by the diff parser."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DiffChange(BaseModel):
    """A single line inside a diff chunk.

    Added lines carry the new-file line number in ``ln``, deleted lines the
    old-file line number in ``ln``. Context lines carry both, as ``ln1`` (old)
    and ``ln2`` (new).
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["add", "del", "normal"]
    content: str
    ln: int | None = None
    ln1: int | None = None
    ln2: int | None = None

    @property
    def line_number(self) -> int | None:
        """Line number used to anchor this change: ``ln``, falling back to ``ln2``."""
        return self.ln if self.ln is not None else self.ln2


class DiffChunk(BaseModel):
    """A hunk: the ``@@`` header plus its ordered changes."""

    model_config = ConfigDict(frozen=True)

    content: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    changes: list[DiffChange] = Field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return len(self.changes) > 0


class DiffFile(BaseModel):
    """All chunks touching one file.

    ``to_path`` is None when the file was deleted (the diff's ``/dev/null``
    destination); ``from_path`` is None for newly added files.
    """

    model_config = ConfigDict(frozen=True)

    from_path: str | None = None
    to_path: str | None = None
    chunks: list[DiffChunk] = Field(default_factory=list)
    new: bool = False
    deleted: bool = False
    additions: int = 0
    deletions: int = 0

    @property
    def is_deleted_file(self) -> bool:
        return self.to_path is None
