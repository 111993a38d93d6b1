"""Line analysis of Java code."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from ..brace_stack import BraceStack, char_is_brace
from ..loc import Loc

_IGNORED = (" ", "\t", "\n", "\r")


class _State(enum.Enum):
    """A state which goes beyond line boundaries."""

    NORMAL = enum.auto()
    DOUBLE_QUOTED_STRING = enum.auto()
    LINE_COMMENT = enum.auto()
    STAR_COMMENT = enum.auto()


def read(lines: Iterable[str]) -> list[Loc]:
    """Analyze lines (each with its ending newline) of Java code."""
    locs: list[Loc] = []
    braces = BraceStack()
    last_is_antislash = False
    last_is_quote = False
    state = _State.NORMAL
    for content in lines:
        if state is _State.LINE_COMMENT:
            state = _State.NORMAL
        starts_normal = state is _State.NORMAL
        start_depth = braces.depth()
        indented = content.lstrip()
        indent = len(content) - len(indented)
        key: list[str] = []
        for i, c in enumerate(indented):
            if state is _State.NORMAL:
                escaped = last_is_antislash or last_is_quote
                if c == '"' and not escaped:
                    state = _State.DOUBLE_QUOTED_STRING
                    key.append(c)
                elif c == "/" and not escaped:
                    following = indented[i + 1 : i + 2]
                    if following == "/":
                        state = _State.LINE_COMMENT
                    elif following == "*":
                        state = _State.STAR_COMMENT
                    else:
                        key.append(c)
                elif char_is_brace(c) and not escaped:
                    braces.push(c)
                    key.append(c)
                elif c in _IGNORED and not escaped:
                    pass
                else:
                    key.append(c)
                last_is_antislash = c == "\\" and not last_is_antislash
                last_is_quote = c == "'"
            elif state is _State.DOUBLE_QUOTED_STRING:
                if c == '"' and not last_is_antislash:
                    state = _State.NORMAL
                key.append(c)
            elif state is _State.STAR_COMMENT:
                if c == "/" and i > 0 and indented[i - 1] == "*":
                    state = _State.NORMAL
        sort_key = "".join(key)
        last = next((ch for ch in reversed(sort_key) if not ch.isspace()), None)
        can_complete = last is not None and (char_is_brace(last) or last == ";")
        locs.append(
            Loc(
                content=content,
                sort_key=sort_key,
                indent=indent,
                start_depth=start_depth,
                end_depth=braces.depth(),
                is_annotation=sort_key.startswith("#["),
                can_complete=can_complete,
                starts_normal=starts_normal,
            )
        )
    return locs