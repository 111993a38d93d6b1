"""Recognition and restoration of the spacing between blocks."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loc_list import LocList


class Spacing(enum.Enum):
    """The kind of spacing between blocks.

    Only BETWEEN matters: it is the one that raw sorting breaks.
    """

    # at least one blank line between every two blocks, and none
    # before the first one
    BETWEEN = "between"
    OTHER = "other"

    @classmethod
    def recognize(cls, blocks: Sequence[LocList]) -> Spacing:
        """Tell which kind of spacing separates the given blocks."""
        if not blocks:
            return cls.OTHER
        first, *rest = blocks
        if first.count_blank_lines_at_start() > 0:
            return cls.OTHER
        if all(block.count_blank_lines_at_start() > 0 for block in rest):
            return cls.BETWEEN
        return cls.OTHER

    def apply(self, blocks: Sequence[LocList]) -> None:
        """Restore this spacing on blocks that were sorted, in place."""
        if self is not Spacing.BETWEEN or not blocks:
            return
        # the blank lines now heading the first block are moved to
        # the first block having none
        first = blocks[0]
        count = first.count_blank_lines_at_start()
        if count == 0:
            return
        blank_lines = first.locs[:count]
        del first.locs[:count]
        target = next(
            (block for block in blocks[1:] if block.count_blank_lines_at_start() == 0),
            None,
        )
        if target is None:
            return
        target.locs[0:0] = reversed(blank_lines)