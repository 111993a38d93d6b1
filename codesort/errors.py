"""Errors raised while reading, analyzing or sorting code."""

from __future__ import annotations

from typing import Any


class CsError(Exception):
    """Base class of every error raised by codesort."""


class InputNotBalancedError(CsError):
    """The input has unbalanced braces."""

    def __init__(self) -> None:
        super().__init__("Provided input not balanced")


class InvalidRangeError(CsError):
    """A range of lines doesn't fit in the list (indexes are 0-based)."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid range {start + 1}..{end + 1}")


class NoSortableRangeAroundError(CsError):
    """No sortable range could be found around the given 0-based line index."""

    def __init__(self, line_index: int) -> None:
        self.line_index = line_index
        super().__init__(f"No sortable range found around line {line_index + 1}")


class RangeAndAroundError(CsError):
    """Both a line to sort around and a range were given."""

    def __init__(self) -> None:
        super().__init__("You can't specify both --around and --range")


class RangeNotSortableError(CsError):
    """The given range can't be sorted in the given language."""

    def __init__(self, language: Any) -> None:
        self.language = language
        name = getattr(language, "name", str(language))
        super().__init__(f"Provided range not sortable (lang: {name})")


class UnclosedCharLiteralError(CsError):
    """A char literal isn't closed at the end of its line (0-based index)."""

    def __init__(self, line_index: int) -> None:
        self.line_index = line_index
        super().__init__(f"Unclosed char literal at line {line_index + 1}")


class UnexpectedClosingBraceError(CsError):
    """A closing brace doesn't match the last opened one."""

    def __init__(self, brace: str) -> None:
        self.brace = brace
        super().__init__(f"Unexpected closing brace: {brace}")