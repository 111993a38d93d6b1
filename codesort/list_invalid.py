"""List the Rust files which can't be analyzed or don't look complete."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from pathlib import Path

from .errors import CsError
from .language import Language
from .loc_list import LocList

EXCLUDED_DIRS = (".git", "build", "target")


def get_all_rust_files(
    root: str | os.PathLike[str], include: Iterable[str] = ()
) -> list[Path]:
    """Find the Rust files under root.

    A root which isn't a directory is returned as is, whatever its extension,
    as the user probably wants this very file. Hidden directories are skipped,
    and so are the usually excluded ones unless named in `include`.
    """
    root = Path(root)
    if not root.is_dir():
        return [root]
    included = set(include)
    files: list[Path] = []
    dirs = [root]
    while dirs:
        directory = dirs.pop()
        for path in sorted(directory.iterdir()):
            name = path.name
            if path.is_dir():
                if name.startswith("."):
                    continue
                if name in EXCLUDED_DIRS and name not in included:
                    print(f"Excluded {path}", file=sys.stderr)
                    continue
                dirs.append(path)
                continue
            if path.suffix == ".rs":
                files.append(path)
    return files


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="codesort-list-invalid",
        description="List the Rust files which can't be read as complete code",
    )
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        help="directories normally excluded to include",
    )
    parser.add_argument("path", help="Path to the file(s)")
    args = parser.parse_args(argv)

    try:
        files = get_all_rust_files(args.path, args.include)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Found {len(files)} rust files", file=sys.stderr)

    incomplete_count = 0
    error_count = 0
    ok_count = 0
    for file in files:
        try:
            loc_list = LocList.read_file(file, Language.RUST)
        except (CsError, OSError, UnicodeDecodeError) as e:
            print(f"ERROR {file} : {e}", file=sys.stderr)
            error_count += 1
            continue
        if loc_list.is_complete():
            ok_count += 1
            continue
        if not loc_list.has_content():
            print(f"EMPTY {file}", file=sys.stderr)
            ok_count += 1
            continue
        print(f"NOT COMPLETE {file}", file=sys.stderr)
        incomplete_count += 1

    print(f"OK files: {ok_count}", file=sys.stderr)
    print(f"Erroring files: {error_count}", file=sys.stderr)
    print(f"Uncomplete files: {incomplete_count}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())