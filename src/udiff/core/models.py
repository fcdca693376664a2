"""Data models for files, edit operations and change ranges"""

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TextFile(BaseModel):
    """A named, loaded text file."""
    model_config = ConfigDict(frozen=True)

    path: str
    content: str                    # full raw text, terminators included

    @property
    def ends_with_newline(self) -> bool:
        return self.content.endswith("\n")


class Line(BaseModel):
    """One line of a file, terminator stripped."""
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1)       # 1-based
    text: str


class Delete(BaseModel):
    """A line present only in the source."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["delete"] = "delete"
    old: Line


class Insert(BaseModel):
    """A line present only in the target."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["insert"] = "insert"
    new: Line


class Equal(BaseModel):
    """A line unchanged in both files; numbers may differ."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["equal"] = "equal"
    old: Line
    new: Line


EditOperation = Annotated[Union[Delete, Insert, Equal], Field(discriminator="kind")]


class EditScript(BaseModel):
    """Serializable edit script: ordered operations as produced by a line diff engine."""
    operations: list[EditOperation] = Field(default_factory=list)


class ChangeRange(BaseModel):
    """Span of line numbers on one side of a hunk."""
    model_config = ConfigDict(frozen=True)

    start: int = 0
    count: int = 0

    @property
    def end(self) -> int:
        """Last line number in the span; only meaningful when count > 0."""
        return self.start + self.count - 1

    @classmethod
    def span(cls, numbers: Iterable[int]) -> "ChangeRange":
        """Range from min to max of numbers, gaps included; (0, 0) when empty."""
        numbers = list(numbers)
        if not numbers:
            return cls(start=0, count=0)
        low, high = min(numbers), max(numbers)
        return cls(start=low, count=high - low + 1)
