"""A single analyzed line of code."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field

from .gifts import Gift, Wish


@functools.total_ordering
@dataclass(eq=False)
class Loc:
    """A line of code, analyzed.

    Lines compare and sort by their sort key only.
    """

    content: str
    sort_key: str = ""
    indent: int = 0
    start_depth: int = 0
    end_depth: int = 0
    is_annotation: bool = False
    can_complete: bool = False
    wishes: list[Wish] = field(default_factory=list)
    gifts: list[Gift] = field(default_factory=list)
    starts_normal: bool = True

    __hash__ = None  # type: ignore[assignment]

    def min_depth(self) -> int:
        """The smaller of the depths at start and at end of line."""
        return min(self.start_depth, self.end_depth)

    def starts_with(self, prefix: str) -> bool:
        """Whether the deindented content starts with the given string."""
        return self.content[self.indent:].startswith(prefix)

    def last_significant_char(self) -> str | None:
        """The last character of the sort key which isn't whitespace."""
        return next((c for c in reversed(self.sort_key) if not c.isspace()), None)

    def is_blank(self) -> bool:
        return not self.content[self.indent:].strip()

    def is_sortable(self) -> bool:
        return not self.is_annotation and bool(self.sort_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Loc):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Loc):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.content