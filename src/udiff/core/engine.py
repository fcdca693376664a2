"""Line diff engine boundary and the difflib-backed default engine"""

import difflib
from typing import Optional, Protocol

from udiff.core.models import Delete, EditOperation, Equal, Insert, Line
from udiff.core.utils.text import split_lines

ENGINES = ("difflib", "none")


class LineDiffEngine(Protocol):
    """Produces an ordered edit script turning old_text into new_text."""

    def diff(self, old_text: str, new_text: str) -> list[EditOperation]:
        ...


class DifflibEngine:
    """Edit scripts from difflib.SequenceMatcher opcodes.

    Lines are matched with their terminators, so an unterminated last line
    never pairs with a terminated one. Every line of both inputs appears
    in the script; within a replaced block deletes precede inserts.
    """

    def __init__(self, autojunk: bool = False):
        self.autojunk = autojunk

    def diff(self, old_text: str, new_text: str) -> list[EditOperation]:
        old_lines, new_lines = split_lines(old_text), split_lines(new_text)
        matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=self.autojunk)
        ops: list[EditOperation] = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                for i, j in zip(range(i1, i2), range(j1, j2)):
                    ops.append(Equal(old=_line(old_lines, i), new=_line(new_lines, j)))
                continue
            if tag in ("replace", "delete"):
                ops.extend(Delete(old=_line(old_lines, i)) for i in range(i1, i2))
            if tag in ("replace", "insert"):
                ops.extend(Insert(new=_line(new_lines, j)) for j in range(j1, j2))
        return ops


def _line(lines: list[str], index: int) -> Line:
    return Line(number=index + 1, text=lines[index].removesuffix("\n"))


def get_engine(name: str) -> Optional[LineDiffEngine]:
    """Return the engine registered under name; 'none' means no engine (header-only output)."""
    if name == "difflib":
        return DifflibEngine()
    if name == "none":
        return None
    raise ValueError(f"Unknown diff engine '{name}' (expected one of: {', '.join(ENGINES)})")
