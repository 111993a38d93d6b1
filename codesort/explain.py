"""Dump information about how a file is sorted around a given line."""

from __future__ import annotations

import argparse
import sys

from .errors import CsError
from .language import Language
from .line_number import LineNumber
from .loc_list import LocList


def explain(loc_list: LocList, line_number: LineNumber | None = None) -> LocList:
    """Print the analysis of the sort around the line and return the sorted list.

    Without a line number, the whole list is printed and returned unchanged.
    """
    if line_number is None:
        loc_list.print_debug(" WHOLE FILE ")
        return loc_list
    focused = loc_list.focus_around_line_number(line_number)
    focused.print_debug()
    for i, block in enumerate(focused.focus.into_blocks()):
        block.print_debug(f" BLOCK {i} ")
    return focused.sort()


def _line_number(text: str) -> LineNumber:
    try:
        return LineNumber.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="codesort-explain",
        description=(
            "Dump to stdout information about the sorting of the given file "
            "at the specified location"
        ),
    )
    parser.add_argument(
        "--sort-around",
        metavar="LINE",
        type=_line_number,
        help="line number (1-based) around which to sort",
    )
    parser.add_argument("path", help="Path to the file")
    args = parser.parse_args(argv)
    try:
        loc_list = LocList.read_file(args.path, Language.RUST)
        result = explain(loc_list, args.sort_around)
    except (CsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.sort_around is not None:
        print("------------ RESULT ------------")
        sys.stdout.write(str(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())