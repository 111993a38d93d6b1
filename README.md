# codesort

`codesort` sorts code. Given a line inside an enum, a struct, a `match`,
a trait or a list of functions, it sorts the surrounding block of items
alphabetically, keeping each item together with its doc comments,
attributes/annotations, trailing comments and the blank lines that
separate items.

It understands Rust (also used for C and Zig), Java and JavaScript.

## Installation

```sh
pip install .
```

## Library

```python
from codesort.language import Language
from codesort.loc_list import LocList

source = """\
pub enum ContentSearchResult {
    /// the file wasn't searched because it's binary or too big
    NotSuitable,
    /// the needle has been found at the given pos
    Found {
        pos: usize,
    },
    /// the needle hasn't been found
    NotFound, // no match
}
"""

loc_list = LocList.read_str(source, Language.detect("main.rs"))
loc_list.sort_around_line_index(4)
print(str(loc_list), end="")
```

prints

```text
pub enum ContentSearchResult {
    /// the needle has been found at the given pos
    Found {
        pos: usize,
    },
    /// the needle hasn't been found
    NotFound, // no match
    /// the file wasn't searched because it's binary or too big
    NotSuitable,
}
```

Main entry points of `codesort.loc_list.LocList`:

- `LocList.read_str(text, lang)`, `LocList.read_file(path, lang)`,
  `LocList.read(lines, lang)` analyze code; `write_file(path)` writes it back.
- `sort_around_line_index(index)` (0-based), `sort_around_line_number(line)`
  and `sort_range(line_range)` sort in place.
- `focus(line_range)`, `focus_all()`, `focus_around_line_number(line)` give a
  `Focused` list, whose `sort()` returns a new `LocList`.
- `range_around_line_number`, `block_range_of_line_number`,
  `block_ranges_in_range`, `into_blocks`, `is_complete`, `has_content`
  inspect the structure of the code.

Line numbers are 1-based `codesort.line_number.LineNumber` values;
`LineNumberRange.parse("10:25")` builds a range with both ends included.
`codesort.language.Language.detect(path)` guesses the language from the
extension (`.rs`, `.java`, `.js`) and returns `None` otherwise.

Analysis and range errors are raised as subclasses of
`codesort.errors.CsError`, such as `UnexpectedClosingBraceError`,
`UnclosedCharLiteralError`, `InvalidRangeError` or
`NoSortableRangeAroundError`.

## Commands

Show how a Rust file is analyzed and how the block around a line is split
into blocks before sorting, then print the sorted result:

```sh
codesort-explain --sort-around 12 path/to/file.rs
```

Without `--sort-around`, the whole file is dumped with its line numbers.
The same is available as `codesort.explain.explain(loc_list, line_number)`.

List the Rust files of a directory that can't be analyzed or don't read
as complete code:

```sh
codesort-list-invalid path/to/project
```

Sort the variants of every enum in every Rust file of a directory, writing
the modified files back:

```sh
codesort-sort-enums path/to/project
```

Enums whose annotations mention `repr`, `serde`, `PartialOrd` or `Ord` are
left alone. Hidden directories and `.git`, `target` and `build` are skipped;
`--include NAME` brings one of the last three back, and `--exclude NAME`
skips more directories (both options can be repeated; `--include` is also
accepted by `codesort-list-invalid`). The sorting itself is
`codesort.sort_enums.sort_enums(loc_list)`.

## What it does not do

There is no general `codesort` command for sorting an arbitrary file in
place, a range of lines, or text read from stdin for an editor. To sort
code from Python, use `LocList` as shown above; from the command line, only
the three commands listed here are provided.