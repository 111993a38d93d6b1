"""Languages and the analyzers reading them."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable
from pathlib import Path

from .analyzers import java, javascript, rust
from .loc import Loc

_EXTENSIONS = {"rs": "RUST", "java": "JAVA", "js": "JAVASCRIPT"}


class Analyzer(enum.Enum):
    """A way of analyzing lines of code; Rust, C and Zig share one."""

    JAVA = "java"
    JAVASCRIPT = "javascript"
    RUST = "rust"

    def read(self, lines: Iterable[str]) -> list[Loc]:
        """Analyze lines, each with its ending newline."""
        if self is Analyzer.JAVA:
            return java.read(lines)
        if self is Analyzer.JAVASCRIPT:
            return javascript.read(lines)
        return rust.read(lines)


class Language(enum.Enum):
    """The language syntax to use for analyzing the code."""

    C = "c"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    RUST = "rust"
    ZIG = "zig"

    @classmethod
    def detect(cls, path: str | os.PathLike[str]) -> Language | None:
        """Guess the language from the extension of a path."""
        suffix = Path(path).suffix
        if not suffix:
            return None
        name = _EXTENSIONS.get(suffix[1:])
        return cls[name] if name else None

    def analyzer(self) -> Analyzer:
        if self is Language.JAVA:
            return Analyzer.JAVA
        if self is Language.JAVASCRIPT:
            return Analyzer.JAVASCRIPT
        return Analyzer.RUST