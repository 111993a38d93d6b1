"""Sort the variants of all enums of the Rust files found in a directory."""

from __future__ import annotations

import argparse
import os
import re
import sys
import time
from collections.abc import Iterable
from pathlib import Path

from .errors import CsError
from .language import Language
from .line_number import LineNumber
from .loc_list import LocList

# directories we don't want to touch
EXCLUDED_DIRS = (".git", "target", "build")

# keywords which, found in the annotations before an enum, prevent
# its variants from being sorted
EXCLUDING_KEYWORDS = ("repr", "serde", "PartialOrd", "Ord")

_ENUM_START = re.compile(r"^[\s\w()]*\benum\s+([^({]+)\s+\{\s*$")


def get_all_rust_files(
    root: str | os.PathLike[str],
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Find the Rust files under root.

    A root which isn't a directory is returned as is. Hidden directories and
    those named in `exclude` are skipped, as are the usually excluded ones
    unless named in `include`.
    """
    root = Path(root)
    if not root.is_dir():
        return [root]
    included = set(include)
    excluded = set(exclude)
    files: list[Path] = []
    dirs = [root]
    while dirs:
        directory = dirs.pop()
        for path in sorted(directory.iterdir()):
            name = path.name
            if path.is_dir():
                if name.startswith("."):
                    continue
                if name in excluded:
                    print(f"Excluded {path}", file=sys.stderr)
                    continue
                if name in EXCLUDED_DIRS and name not in included:
                    print(f"Excluded {path}", file=sys.stderr)
                    continue
                dirs.append(path)
                continue
            if path.suffix == ".rs":
                files.append(path)
    return files


def sort_enums(loc_list: LocList) -> tuple[list[str], list[tuple[str, str]]]:
    """Sort the variants of every enum of the list, in place.

    Return the names of the sorted enums, and the (name, keyword) pairs of
    the enums left alone because of an excluding keyword.
    """
    sorted_names: list[str] = []
    excluded: list[tuple[str, str]] = []
    line_idx = 0
    while line_idx + 2 < len(loc_list):
        loc = loc_list.locs[line_idx]
        if not loc.starts_normal:
            line_idx += 1
            continue
        match = _ENUM_START.match(loc.content)
        if match is None:
            line_idx += 1
            continue
        name = match.group(1)

        whole_enum_range = loc_list.block_range_of_line_number(
            LineNumber.from_index(line_idx)
        )
        whole_enum_range = loc_list.trimmed_range(whole_enum_range)
        heading = loc_list.locs[whole_enum_range.start.to_index() : line_idx]
        keyword = next(
            (
                keyword
                for keyword in EXCLUDING_KEYWORDS
                if any(keyword in line.sort_key for line in heading)
            ),
            None,
        )
        if keyword is not None:
            print(f"skipping enum {name} ({keyword})", file=sys.stderr)
            excluded.append((name, keyword))
            line_idx = whole_enum_range.end.to_index() + 1
            continue

        loc_list.print_range_debug(f" sorting enum {name} ", whole_enum_range)
        variants_range = loc_list.range_around_line_index(line_idx + 1)
        loc_list.sort_range(variants_range)
        line_idx = variants_range.end.to_index() + 2
        sorted_names.append(name)
    return sorted_names, excluded


def _summary(
    file_count: int,
    ok_count: int,
    empty_count: int,
    incomplete_count: int,
    invalid_count: int,
    excluded_count: int,
    sorted_count: int,
    modified_count: int,
) -> list[str]:
    lines = [f"I analyzed {file_count} files"]
    problems = []
    if empty_count:
        problems.append(f"{empty_count} empty files")
    if incomplete_count:
        problems.append(f"{incomplete_count} incomplete files")
    if invalid_count:
        problems.append(f"{invalid_count} invalid files")
    if problems:
        lines.append(f"{ok_count} files were OK but I encountered {', '.join(problems)}")
    else:
        lines.append(f"All {ok_count} files were ok")
    if excluded_count:
        lines.append(
            f"I excluded {excluded_count} enums whose annotation contained "
            "excluding keywords"
        )
    lines.append(f"I sorted {sorted_count} enums in {modified_count} files")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    start = time.perf_counter()
    parser = argparse.ArgumentParser(
        prog="codesort-sort-enums",
        description=(
            "Sort all enums of all rust files found in the given directory. "
            "Files in .git, target and build directories, and files which "
            "don't appear correct enough, are excluded."
        ),
    )
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        help="directories normally excluded to include",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="directory names to exclude",
    )
    parser.add_argument("path", help="Path to the file(s)")
    args = parser.parse_args(argv)

    try:
        files = get_all_rust_files(args.path, args.include, args.exclude)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Found {len(files)} rust files", file=sys.stderr)

    sorted_count = 0
    ok_count = 0
    invalid_count = 0
    incomplete_count = 0
    excluded_count = 0
    modified_count = 0
    empty_count = 0
    for file in files:
        try:
            loc_list = LocList.read_file(file, Language.RUST)
        except (CsError, OSError, UnicodeDecodeError) as e:
            print(f"ERROR in {file}: {e}", file=sys.stderr)
            invalid_count += 1
            continue
        if not loc_list.has_content():
            empty_count += 1
            continue
        if not loc_list.is_complete():
            print(f"skipping {file} (not consistent enough)", file=sys.stderr)
            incomplete_count += 1
            continue
        ok_count += 1
        try:
            sorted_names, excluded = sort_enums(loc_list)
        except CsError as e:
            print(f"Error in {file}: {e}", file=sys.stderr)
            return 1
        sorted_count += len(sorted_names)
        excluded_count += len(excluded)
        if sorted_names:
            try:
                loc_list.write_file(file)
            except OSError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
            print(f"wrote {file}", file=sys.stderr)
            modified_count += 1

    print(f"\nDone in {time.perf_counter() - start:.3f}s\n", file=sys.stderr)
    for line in _summary(
        len(files),
        ok_count,
        empty_count,
        incomplete_count,
        invalid_count,
        excluded_count,
        sorted_count,
        modified_count,
    ):
        print(line, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())