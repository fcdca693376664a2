"""Unit tests for core/models.py"""

import pytest
from pydantic import ValidationError

from udiff.core.models import ChangeRange, EditScript, Equal, Line, TextFile


@pytest.mark.parametrize("content,expected", [
    ("", False),
    ("line1", False),
    ("line1\n", True),
    ("line1\r\n", True),
    ("line1\nline2", False),
])
def test_text_file_ends_with_newline(content, expected):
    """ends_with_newline reflects the last character of the raw content."""
    assert TextFile(path="f", content=content).ends_with_newline is expected


def test_text_file_is_frozen():
    """TextFile cannot be mutated after construction."""
    f = TextFile(path="f", content="x\n")
    with pytest.raises(ValidationError):
        f.content = "y\n"


def test_line_numbers_are_one_based():
    """Line rejects a zero line number."""
    with pytest.raises(ValidationError):
        Line(number=0, text="x")


def test_change_range_span_empty_is_zero():
    """An empty collection spans (0, 0)."""
    r = ChangeRange.span([])
    assert (r.start, r.count) == (0, 0)


def test_change_range_span_includes_gaps():
    """span runs from min to max even when numbers in between are missing."""
    r = ChangeRange.span([7, 3, 5])
    assert (r.start, r.count, r.end) == (3, 5, 7)


def test_change_range_span_single_line():
    """A single number gives a one-line range whose end equals its start."""
    r = ChangeRange.span([4])
    assert (r.start, r.count, r.end) == (4, 1, 4)


def test_edit_script_round_trips_through_json(ops):
    """EditScript keeps operation kinds when dumped and reloaded as JSON."""
    script = EditScript(operations=[
        ops.delete(1, "a"), ops.insert(1, "b"), ops.equal(2, 2, "c"),
    ])
    loaded = EditScript.model_validate_json(script.model_dump_json())
    assert loaded == script
    assert isinstance(loaded.operations[2], Equal)


def test_edit_script_rejects_unknown_kind():
    """An operation with an unknown kind fails validation."""
    with pytest.raises(ValidationError):
        EditScript.model_validate({"operations": [{"kind": "move", "old": {"number": 1, "text": "x"}}]})
