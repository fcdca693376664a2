"""Shared fixtures for core unit tests"""

from types import SimpleNamespace

import pytest

from udiff.core.models import Delete, Equal, Insert, Line, TextFile


def delete(number: int, text: str) -> Delete:
    return Delete(old=Line(number=number, text=text))


def insert(number: int, text: str) -> Insert:
    return Insert(new=Line(number=number, text=text))


def equal(old: int, new: int, text: str) -> Equal:
    return Equal(old=Line(number=old, text=text), new=Line(number=new, text=text))


@pytest.fixture(name="ops")
def ops_fixture():
    """Builders for edit operations: ops.delete(n, text), ops.insert(n, text), ops.equal(o, n, text)."""
    return SimpleNamespace(delete=delete, insert=insert, equal=equal)


@pytest.fixture(name="make_file")
def make_file_fixture():
    def _make(content: str, path: str = "a.txt") -> TextFile:
        return TextFile(path=path, content=content)
    return _make
