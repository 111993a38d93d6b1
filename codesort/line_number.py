"""1-based line numbers and inclusive ranges of them."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

_NUMBER = re.compile(r"\+?[0-9]+")
_RANGE = re.compile(r"(\d+)\D+(\d+)")


@dataclass(frozen=True, order=True)
class LineNumber:
    """A 1-based line number, as used in most text editors."""

    number: int

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError("Line numbers are 1-based, so 0 is not a valid line number")

    @classmethod
    def parse(cls, text: str) -> LineNumber:
        if not text:
            raise ValueError("cannot parse integer from empty string")
        if not _NUMBER.fullmatch(text):
            raise ValueError("invalid digit found in string")
        number = int(text)
        if number == 0:
            raise ValueError("number would be zero for non-zero type")
        return cls(number)

    def to_index(self) -> int:
        """The 0-based index of this line."""
        return self.number - 1

    @classmethod
    def from_index(cls, index: int) -> LineNumber:
        return cls(index + 1)

    def __str__(self) -> str:
        return str(self.number)


@dataclass(frozen=True)
class LineNumberRange:
    """A range of 1-based line numbers, both ends included."""

    start: LineNumber
    end: LineNumber

    @classmethod
    def parse(cls, text: str) -> LineNumberRange:
        """Parse two numbers separated by non digits, like `3:12`."""
        match = _RANGE.fullmatch(text)
        if match is None:
            raise ValueError(f"Invalid line number range: {text}")
        start = LineNumber.parse(match.group(1))
        end = LineNumber.parse(match.group(2))
        if start >= end:
            raise ValueError(f"Invalid range: {text}")
        return cls(start, end)

    @classmethod
    def of_line(cls, line: LineNumber) -> LineNumberRange:
        """Make a range spanning one line."""
        return cls(line, line)

    def contains(self, line: LineNumber) -> bool:
        return self.start <= line <= self.end

    def __iter__(self) -> Iterator[LineNumber]:
        for number in range(self.start.number, self.end.number + 1):
            yield LineNumber(number)

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"