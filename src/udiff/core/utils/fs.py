"""File record provider"""

from pathlib import Path

from udiff.core.models import TextFile


def read_text_file(path: str, encoding: str = "utf-8") -> TextFile:
    """Load path into a TextFile, preserving line terminators exactly.

    OSError and UnicodeDecodeError propagate to the caller.
    """
    with open(Path(path), encoding=encoding, newline="") as f:
        content = f.read()
    return TextFile(path=path, content=content)
