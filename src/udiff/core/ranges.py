"""Change-range calculation and edit script validation"""

from typing import Sequence

from udiff.core.models import ChangeRange, Delete, EditOperation, Equal, Insert


class EditScriptError(ValueError):
    """Raised when an edit script breaks the per-side line number ordering."""


def _side_numbers(operations: Sequence[EditOperation]) -> tuple[list[int], list[int]]:
    """Collect old-side and new-side line numbers in sequence order."""
    old_numbers: list[int] = []
    new_numbers: list[int] = []
    for op in operations:
        if isinstance(op, (Delete, Equal)):
            old_numbers.append(op.old.number)
        if isinstance(op, (Insert, Equal)):
            new_numbers.append(op.new.number)
    return old_numbers, new_numbers


def compute_change_ranges(operations: Sequence[EditOperation]) -> tuple[ChangeRange, ChangeRange]:
    """Return (old_range, new_range) spanning every line number each side touches."""
    old_numbers, new_numbers = _side_numbers(operations)
    return ChangeRange.span(old_numbers), ChangeRange.span(new_numbers)


def validate_edit_script(operations: Sequence[EditOperation]) -> None:
    """Raise EditScriptError unless line numbers are non-decreasing on each side."""
    old_numbers, new_numbers = _side_numbers(operations)
    for side, numbers in (("old", old_numbers), ("new", new_numbers)):
        for prev, cur in zip(numbers, numbers[1:]):
            if cur < prev:
                raise EditScriptError(
                    f"{side} line numbers out of order: {cur} follows {prev}"
                )
