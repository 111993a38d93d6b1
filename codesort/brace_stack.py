"""Tracking of nested braces."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import UnexpectedClosingBraceError

_OPENING = ("(", "[", "{")
_MATCHING = {")": "(", "]": "[", "}": "{"}


@dataclass
class BraceStack:
    """The stack of currently opened braces."""

    braces: list[str] = field(default_factory=list)

    def push(self, brace: str) -> None:
        """Open or close a brace; raise if a closing brace doesn't match."""
        if brace in _OPENING:
            self.braces.append(brace)
        elif brace in _MATCHING:
            last = self.braces.pop() if self.braces else None
            if last != _MATCHING[brace]:
                raise UnexpectedClosingBraceError(brace)
        else:
            raise ValueError(f"unexpected brace: {brace}")

    def depth(self) -> int:
        return len(self.braces)

    def is_in(self, brace: str) -> bool:
        """Whether the given opening brace is anywhere in the stack."""
        return brace in self.braces


def char_is_brace(c: str) -> bool:
    return c in _OPENING or c in _MATCHING