"""Unified diff rendering: header, range line, and body with end-of-file markers"""

from typing import Optional, Sequence

from udiff.core.engine import LineDiffEngine
from udiff.core.models import ChangeRange, Delete, EditOperation, Equal, Insert, TextFile
from udiff.core.ranges import compute_change_ranges, validate_edit_script
from udiff.core.utils.log import get_logger

NO_NEWLINE_MARKER = "\\ No newline at end of file\n"

logger = get_logger("format")


def emit_header(source: TextFile, target: TextFile) -> str:
    """Return the '---' / '+++' file header lines."""
    return f"--- {source.path}\n+++ {target.path}\n"


def emit_range_line(old_range: ChangeRange, new_range: ChangeRange) -> str:
    """Return the '@@ -a,b +c,d @@' hunk marker, emitted even for empty ranges."""
    return f"@@ -{old_range.start},{old_range.count} +{new_range.start},{new_range.count} @@\n"


def emit_body(
    operations: Sequence[EditOperation],
    old_range: ChangeRange,
    new_range: ChangeRange,
    old_ends_with_newline: bool,
    new_ends_with_newline: bool,
    ) -> str:
    """Render one prefixed line per operation, followed by a marker where a side's last line is unterminated.

    The old and new checks on an Equal line are independent, so a final equal
    line in two unterminated files is followed by two markers.
    """
    out: list[str] = []
    for op in operations:
        if isinstance(op, Delete):
            out.append(f"-{op.old.text}\n")
        elif isinstance(op, Insert):
            out.append(f"+{op.new.text}\n")
        elif isinstance(op, Equal):
            out.append(f" {op.old.text}\n")
        else:
            raise TypeError(f"Unknown edit operation: {op!r}")

        if isinstance(op, (Delete, Equal)):
            if not old_ends_with_newline and op.old.number == old_range.end:
                out.append(NO_NEWLINE_MARKER)
        if isinstance(op, (Insert, Equal)):
            if not new_ends_with_newline and op.new.number == new_range.end:
                out.append(NO_NEWLINE_MARKER)
    return "".join(out)


def format_unified_diff(
    source: TextFile,
    target: TextFile,
    operations: Sequence[EditOperation],
    validate: bool = False,
    ) -> str:
    """Render the whole edit script as a single-hunk unified diff."""
    if validate:
        validate_edit_script(operations)
    old_range, new_range = compute_change_ranges(operations)
    logger.debug(
        "%s -> %s: %d operations, old=%s new=%s",
        source.path, target.path, len(operations), old_range, new_range,
    )
    return (
        emit_header(source, target)
        + emit_range_line(old_range, new_range)
        + emit_body(
            operations, old_range, new_range,
            source.ends_with_newline, target.ends_with_newline,
        )
    )


def build_diff(
    source: TextFile,
    target: TextFile,
    engine: Optional[LineDiffEngine] = None,
    validate: bool = False,
    ) -> str:
    """Diff source against target with engine; header only when no engine is available."""
    if engine is None:
        logger.debug("No diff engine; emitting header only")
        return emit_header(source, target)
    operations = engine.diff(source.content, target.content)
    return format_unified_diff(source, target, operations, validate=validate)
