"""Lists of analyzed lines of code, and their sorting."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import InvalidRangeError, NoSortableRangeAroundError
from .language import Language
from .line_number import LineNumber, LineNumberRange
from .loc import Loc
from .spacing import Spacing


def _split_lines(text: str) -> list[str]:
    """Split text after each newline, keeping the newlines."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


@dataclass(eq=False)
class LocList:
    """A list of lines of code.

    To sort it, focus it on the area to sort, then sort the focused list.
    """

    locs: list[Loc] = field(default_factory=list)

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, lines: Iterable[str], lang: Language = Language.RUST) -> LocList:
        """Analyze lines, each with its ending newline."""
        return cls(lang.analyzer().read(lines))

    @classmethod
    def read_str(cls, text: str, lang: Language = Language.RUST) -> LocList:
        return cls.read(_split_lines(text), lang)

    @classmethod
    def read_file(
        cls, path: str | os.PathLike[str], lang: Language = Language.RUST
    ) -> LocList:
        with open(path, encoding="utf-8", newline="") as file:
            text = file.read()
        return cls.read_str(text, lang)

    def write_file(self, path: str | os.PathLike[str]) -> None:
        with open(path, "w", encoding="utf-8", newline="") as file:
            file.write(str(self))

    def __len__(self) -> int:
        return len(self.locs)

    def sort_range(self, line_range: LineNumberRange) -> None:
        """Sort the blocks of the given range, in place."""
        self.locs = self.focus(line_range).sort().locs

    def sort_around_line_index(self, line_index: int) -> None:
        self.sort_range(self.range_around_line_index(line_index))

    def sort_around_line_number(self, line_number: LineNumber) -> None:
        self.sort_range(self.range_around_line_number(line_number))

    def focus_all(self) -> Focused:
        return Focused(LocList(), LocList(list(self.locs)), LocList())

    def focus(self, line_range: LineNumberRange) -> Focused:
        start = line_range.start.to_index()
        end = line_range.end.to_index()
        if start >= len(self.locs) or end >= len(self.locs):
            raise InvalidRangeError(start, end)
        return Focused(
            before=LocList(self.locs[:start]),
            focus=LocList(self.locs[start : end + 1]),
            after=LocList(self.locs[end + 1 :]),
        )

    def focus_around_line_index(self, line_index: int) -> Focused:
        return self.focus(self.range_around_line_index(line_index))

    def focus_around_line_number(self, line_number: LineNumber) -> Focused:
        return self.focus(self.range_around_line_index(line_number.to_index()))

    def line_at_number(self, line_number: LineNumber) -> Loc | None:
        index = line_number.to_index()
        return self.locs[index] if index < len(self.locs) else None

    def print_range_debug(self, label: str, line_range: LineNumberRange) -> None:
        print(f"{label:=^80}")
        for line_number in line_range:
            loc = self.line_at_number(line_number)
            if loc is None:
                print(f"{str(line_number):>3} | <no loc>")
            else:
                print(f"{str(line_number):>4} | {loc.content.rstrip():<30}")

    def print_debug(self, label: str) -> None:
        line_range = self.full_range()
        if line_range is None:
            print(f"{label}: <empty>")
            return
        self.print_range_debug(label, line_range)

    def trimmed_range(self, line_range: LineNumberRange) -> LineNumberRange:
        """The range without its leading and trailing blank lines."""
        start = line_range.start.to_index()
        end = line_range.end.to_index()
        while start < end and self.locs[start].is_blank():
            start += 1
        while end > start and self.locs[end].is_blank():
            end -= 1
        return LineNumberRange(LineNumber.from_index(start), LineNumber.from_index(end))

    def count_blank_lines_at_start(self) -> int:
        count = 0
        for loc in self.locs:
            if not loc.is_blank():
                break
            count += 1
        return count

    def full_range(self) -> LineNumberRange | None:
        """A range covering the whole list, or None if it's empty."""
        if not self.locs:
            return None
        return LineNumberRange(
            LineNumber.from_index(0), LineNumber.from_index(len(self.locs) - 1)
        )

    def check_range(self, line_range: LineNumberRange) -> None:
        """Raise InvalidRangeError unless the range fits the list."""
        start = line_range.start.to_index()
        end = line_range.end.to_index()
        if start >= len(self.locs) or end >= len(self.locs) or start > end:
            raise InvalidRangeError(start, end)

    def range_exists(self, line_range: LineNumberRange) -> bool:
        """Whether the range is valid and contains at least one line."""
        start = line_range.start.to_index()
        end = line_range.end.to_index()
        return start < len(self.locs) and end < len(self.locs) and start <= end

    def range_has_content(self, line_range: LineNumberRange) -> bool:
        """Whether a line at the depth of the first one is sortable."""
        if not self.range_exists(line_range):
            return False
        start = line_range.start.to_index()
        end = line_range.end.to_index()
        first_start_depth = self.locs[start].start_depth
        return any(
            loc.start_depth == first_start_depth and loc.is_sortable()
            for loc in self.locs[start : end + 1]
        )

    def has_content(self) -> bool:
        line_range = self.full_range()
        return line_range is not None and self.range_has_content(line_range)

    def last_significant_char(self) -> str | None:
        for loc in reversed(self.locs):
            c = loc.last_significant_char()
            if c is not None:
                return c
        return None

    def last_line_with_content(self) -> Loc | None:
        return next((loc for loc in reversed(self.locs) if loc.is_sortable()), None)

    def last_line_in_range_with_content(
        self, line_range: LineNumberRange
    ) -> Loc | None:
        start = line_range.start.to_index()
        end = line_range.end.to_index()
        return next(
            (loc for loc in reversed(self.locs[start : end + 1]) if loc.is_sortable()),
            None,
        )

    def is_range_complete(self, line_range: LineNumberRange) -> bool:
        """Whether the range is balanced and may end a block.

        A complete range isn't necessarily a block: a bigger range may be
        complete too.
        """
        if not self.range_has_content(line_range):
            return False
        start = line_range.start.to_index()
        end = line_range.end.to_index()
        first = self.locs[start]
        last = self.last_line_in_range_with_content(line_range)
        if last is None or first.start_depth != last.end_depth:
            return False
        if not last.can_complete:
            return False
        wished = []
        for loc in self.locs[start : end + 1]:
            for gift in loc.gifts:
                wished = [wish for wish in wished if not gift.satisfies(wish)]
            wished.extend(loc.wishes)
        return not wished

    def is_complete(self) -> bool:
        line_range = self.full_range()
        return line_range is not None and self.is_range_complete(line_range)

    def block_ranges_in_range(
        self, line_range: LineNumberRange
    ) -> list[LineNumberRange]:
        """The ranges of the blocks in a range assumed valid."""
        blocks: list[LineNumberRange] = []
        current_start = current_end = line_range.start
        for line_number in line_range:
            current = LineNumberRange(current_start, current_end)
            if self.is_range_complete(current):
                blocks.append(current)
                current_start = current_end = line_number
            else:
                current_end = line_number
        if not blocks or blocks[-1].end != line_range.end:
            blocks.append(LineNumberRange(current_start, current_end))
        return blocks

    def block_range_of_line_number(self, line_number: LineNumber) -> LineNumberRange:
        """The range of the block the line is part of.

        The block includes its comments, annotations, inner lines and the
        blank lines before it which stick with it.
        """
        line_range = self.range_around_line_number(line_number)
        for block in self.block_ranges_in_range(line_range):
            if block.contains(line_number):
                return block
        raise InvalidRangeError(line_range.start.to_index(), line_range.end.to_index())

    def into_blocks(self) -> list[LocList]:
        blocks: list[LocList] = []
        current = LocList()
        for loc in self.locs:
            current.locs.append(loc)
            if current.is_complete():
                blocks.append(current)
                current = LocList()
        if current.locs:
            blocks.append(current)
        return blocks

    def range_around_line_number(self, line_number: LineNumber) -> LineNumberRange:
        return self.range_around_line_index(line_number.to_index())

    def range_around_line_index(self, line_index: int) -> LineNumberRange:
        """The sortable range containing the line of the given 0-based index."""
        locs = self.locs
        if not 0 <= line_index < len(locs):
            raise NoSortableRangeAroundError(line_index)
        depth = locs[line_index].min_depth()
        start = end = line_index
        while start > 0 and locs[start - 1].min_depth() >= depth:
            start -= 1
        while end < len(locs) - 1 and locs[end + 1].min_depth() >= depth:
            end += 1
        # trailing empty lines or comments stick with the end of the container
        while end > line_index and not locs[end].is_sortable():
            end -= 1
        return LineNumberRange(LineNumber.from_index(start), LineNumber.from_index(end))

    def __str__(self) -> str:
        return "".join(loc.content for loc in self.locs)

    def __eq__(self, other: object) -> bool:
        """Equal when the lines the two lists share have equal sort keys."""
        if not isinstance(other, LocList):
            return NotImplemented
        return all(a == b for a, b in zip(self.locs, other.locs))

    def _compare(self, other: LocList) -> int:
        mine = [loc for loc in self.locs if loc.is_sortable()]
        theirs = [loc for loc in other.locs if loc.is_sortable()]
        for a, b in zip(mine, theirs):
            if a.sort_key != b.sort_key:
                return -1 if a.sort_key < b.sort_key else 1
        return (len(mine) > len(theirs)) - (len(mine) < len(theirs))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocList):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocList):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocList):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocList):
            return NotImplemented
        return self._compare(other) >= 0


@dataclass
class Focused:
    """A list split around the part to sort."""

    before: LocList
    focus: LocList
    after: LocList

    def print_debug(self) -> None:
        self.before.print_debug(" BEFORE ")
        self.focus.print_debug(" FOCUS ")
        self.after.print_debug(" AFTER ")

    def sort(self) -> LocList:
        """Sort the blocks of the focus and return the whole list."""
        locs = list(self.before.locs)
        blocks = self.focus.into_blocks()
        spacing = Spacing.recognize(blocks)
        blocks.sort()
        spacing.apply(blocks)
        for block in blocks:
            locs.extend(block.locs)
        locs.extend(self.after.locs)
        return LocList(locs)