"""Wishes and gifts: what a line calls for, and what can answer the call."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Wish:
    """Something required by the state of a list of lines.

    `any_of` holds the characters any one of which satisfies the wish.
    """

    any_of: str
    depth: int


@dataclass(frozen=True)
class Gift:
    """Something that can maybe satisfy a wish."""

    depth: int
    c: str

    def satisfies(self, wish: Wish) -> bool:
        return wish.depth == self.depth and self.c in wish.any_of