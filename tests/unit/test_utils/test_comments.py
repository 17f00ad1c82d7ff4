"""Tests for turning model suggestions into review comments."""

import pytest

from review_action.models.diff import DiffChange, DiffChunk, DiffFile
from review_action.models.outputs import ReviewComment, ReviewSuggestion
from review_action.utils.comments import create_comments, parse_line_number


@pytest.fixture
def chunk() -> DiffChunk:
    return DiffChunk(
        content="@@ -1 +1 @@",
        old_start=1,
        old_lines=1,
        new_start=1,
        new_lines=1,
        changes=[DiffChange(type="add", content="+x = 1", ln=1)],
    )


def _suggestion(line_number, comment: str = "Consider a constant.") -> ReviewSuggestion:
    return ReviewSuggestion.model_validate(
        {"lineNumber": line_number, "reviewComment": comment}
    )


class TestParseLineNumber:
    """Tests for parse_line_number()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (12, 12),
            ("12", 12),
            (" 7 ", 7),
            (4.0, 4),
            ("-3", -3),
            ("+5", 5),
            ("12-14", 12),
            ("3.5", 3),
            (3.9, 3),
            ("12abc", 12),
        ],
    )
    def test_leading_integer(self, value, expected):
        assert parse_line_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "line 4", True, None, float("nan")])
    def test_no_leading_integer(self, value):
        assert parse_line_number(value) is None


class TestCreateComments:
    """Tests for create_comments()."""

    def test_maps_suggestions(self, chunk):
        file = DiffFile(to_path="src/app.py", chunks=[chunk])

        comments = create_comments(
            file, chunk, [_suggestion("3", "Use a context manager."), _suggestion(8)]
        )

        assert comments == [
            ReviewComment(path="src/app.py", line=3, body="Use a context manager."),
            ReviewComment(path="src/app.py", line=8, body="Consider a constant."),
        ]

    def test_line_range_anchors_to_first_line(self, chunk):
        file = DiffFile(to_path="src/app.py", chunks=[chunk])

        comments = create_comments(file, chunk, [_suggestion("12-14", "Extract a helper.")])

        assert comments == [
            ReviewComment(path="src/app.py", line=12, body="Extract a helper.")
        ]

    @pytest.mark.parametrize("line_number", ["abc", "", None, 0, "-1", "0.5"])
    def test_invalid_line_numbers_are_dropped(self, chunk, line_number):
        file = DiffFile(to_path="src/app.py", chunks=[chunk])

        comments = create_comments(file, chunk, [_suggestion(line_number), _suggestion(2)])

        assert [c.line for c in comments] == [2]

    def test_deleted_file_yields_nothing(self, chunk):
        file = DiffFile(from_path="gone.py", to_path=None, deleted=True)

        assert create_comments(file, chunk, [_suggestion("1"), _suggestion(2)]) == []

    def test_same_line_is_not_deduplicated(self, chunk):
        file = DiffFile(to_path="a.py", chunks=[chunk])

        comments = create_comments(
            file, chunk, [_suggestion(1, "first"), _suggestion(1, "first")]
        )

        assert len(comments) == 2
        assert comments[0] == comments[1]

    def test_comment_serializes_for_review_api(self):
        comment = ReviewComment(path="a.py", line=4, body="Nope")

        assert comment.model_dump() == {"path": "a.py", "line": 4, "body": "Nope"}
