"""Parse unified diffs and apply them to text"""

import re
from dataclasses import dataclass, field
from typing import Optional

from udiff.core.utils.log import get_logger
from udiff.core.utils.text import split_lines

HUNK_HEADER = re.compile(r"^@@\s+-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s+@@")

logger = get_logger("patch")


class PatchError(ValueError):
    """Raised when a diff is malformed or does not apply to the given content."""


@dataclass
class HunkLine:
    prefix: str                 # ' ', '-' or '+'
    text: str
    terminated: bool = True


@dataclass
class Hunk:
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: list[HunkLine] = field(default_factory=list)

    def old_lines(self) -> list[str]:
        return [_render(line) for line in self.lines if line.prefix in (" ", "-")]

    def new_lines(self) -> list[str]:
        return [_render(line) for line in self.lines if line.prefix in (" ", "+")]


@dataclass
class Patch:
    source_path: Optional[str] = None
    target_path: Optional[str] = None
    hunks: list[Hunk] = field(default_factory=list)


def _render(line: HunkLine) -> str:
    return line.text + ("\n" if line.terminated else "")


def _parse_hunk_header(header: str) -> Hunk:
    m = HUNK_HEADER.match(header)
    if not m:
        raise PatchError(f"Invalid hunk header: {header}")
    return Hunk(
        old_start=int(m.group(1)),
        old_count=int(m.group(2)) if m.group(2) is not None else 1,
        new_start=int(m.group(3)),
        new_count=int(m.group(4)) if m.group(4) is not None else 1,
    )


def parse_patch(text: str) -> Patch:
    """Parse unified diff text into a Patch.

    A '\\ No newline at end of file' line marks the preceding body line as
    unterminated; repeated markers after the same line have no further effect.
    """
    patch = Patch()
    hunk: Optional[Hunk] = None

    for number, raw in enumerate(split_lines(text), start=1):
        line = raw.removesuffix("\n")
        if hunk is None and line.startswith("--- "):
            patch.source_path = line[4:]
        elif hunk is None and line.startswith("+++ "):
            patch.target_path = line[4:]
        elif line.startswith("@@"):
            hunk = _parse_hunk_header(line)
            patch.hunks.append(hunk)
        elif hunk is None:
            raise PatchError(f"Line {number}: unexpected content before first hunk: {line!r}")
        elif line.startswith("\\"):
            if not hunk.lines:
                raise PatchError(f"Line {number}: end-of-file marker with no preceding line")
            hunk.lines[-1].terminated = False
        elif line == "":
            hunk.lines.append(HunkLine(" ", ""))
        elif line[0] in " -+":
            hunk.lines.append(HunkLine(line[0], line[1:]))
        else:
            raise PatchError(f"Line {number}: invalid hunk line: {line!r}")
    return patch


def apply_patch(content: str, patch: Patch) -> str:
    """Apply patch hunks in order to content and return the result."""
    source = split_lines(content)
    result: list[str] = []
    cursor = 0

    for hunk in patch.hunks:
        old, new = hunk.old_lines(), hunk.new_lines()
        if len(old) != hunk.old_count or len(new) != hunk.new_count:
            raise PatchError(
                f"Hunk @@ -{hunk.old_start},{hunk.old_count} +{hunk.new_start},{hunk.new_count} @@ "
                f"has {len(old)} old and {len(new)} new lines"
            )
        # a zero-length old range inserts after line old_start
        index = hunk.old_start - 1 if hunk.old_count else hunk.old_start
        if index < cursor:
            raise PatchError(f"Hunk at line {hunk.old_start} overlaps the previous hunk")
        if source[index:index + hunk.old_count] != old:
            raise PatchError(f"Hunk at line {hunk.old_start} does not match the source content")

        result.extend(source[cursor:index])
        result.extend(new)
        cursor = index + hunk.old_count
        logger.debug("Applied hunk at line %d (-%d +%d)", hunk.old_start, len(old), len(new))

    result.extend(source[cursor:])
    return "".join(result)
