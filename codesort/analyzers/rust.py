"""Line analysis of Rust code (also used for C and Zig)."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from ..brace_stack import BraceStack, char_is_brace
from ..errors import UnclosedCharLiteralError
from ..gifts import Gift, Wish
from ..loc import Loc

_IGNORED = (" ", "\t", "\n", "\r")


class _Mode(enum.Enum):
    """A state which goes beyond line boundaries."""

    NORMAL = enum.auto()
    CHAR = enum.auto()
    DOUBLE_QUOTED_STRING = enum.auto()
    RAW_STRING = enum.auto()
    LINE_COMMENT = enum.auto()
    BLOCK_COMMENT = enum.auto()


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def char_is_gift(c: str) -> bool:
    """Whether the character may satisfy a wish."""
    return c in ("(", "{", ";")


def token_wishes(token: str) -> list[str]:
    """What the token calls for, as sets of characters any one of which will do.

    No block should sit between the token and the characters it wishes for,
    at the same depth.
    """
    if token == "fn":
        # after a "fn" we need a ( and then either a { or a ;
        return ["(", "{;"]
    if token in ("impl", "enum", "trait", "match"):
        return ["{"]
    return []


def read(lines: Iterable[str]) -> list[Loc]:
    """Analyze lines (each with its ending newline) of Rust code."""
    locs: list[Loc] = []
    braces = BraceStack()
    last_is_antislash = False
    mode = _Mode.NORMAL
    # sharp count of a raw string, or nesting level of a block comment
    count = 0
    annotation_start_depth: int | None = None
    line_index = 0
    for content in lines:
        if mode is _Mode.LINE_COMMENT:
            mode = _Mode.NORMAL
        elif mode is _Mode.CHAR:
            raise UnclosedCharLiteralError(line_index - 1)
        starts_normal = mode is _Mode.NORMAL
        start_depth = braces.depth()
        indented = content.lstrip()
        indent = len(content) - len(indented)
        key: list[str] = []
        token_chars: list[str] = []
        wishes: list[Wish] = []
        gifts: list[Gift] = []
        if (
            annotation_start_depth is None
            and starts_normal
            and indented.startswith("#[")
        ):
            annotation_start_depth = braces.depth()
        for i, c in enumerate(indented):
            if _is_ascii_alpha(c) or c == "_":
                # only possible keywords are of interest
                token_chars.append(c)
                token = None
            else:
                token = "".join(token_chars)
                token_chars.clear()
            keep = annotation_start_depth is None
            if mode is _Mode.NORMAL:
                depth = braces.depth()
                if token and not braces.is_in("[") and not braces.is_in("("):
                    wishes.extend(Wish(any_of, depth) for any_of in token_wishes(token))
                if char_is_gift(c):
                    gift = Gift(depth, c)
                    wishes = [wish for wish in wishes if not gift.satisfies(wish)]
                    gifts.append(gift)
                escaped = last_is_antislash
                if c == "'" and not escaped:
                    # either a char literal or a lifetime
                    following = indented[i + 1 : i + 3]
                    if len(following) == 2:
                        a, b = following
                        if a == "\\":
                            mode = _Mode.CHAR
                        elif a == "_" or _is_ascii_alpha(a):
                            if b == "'":
                                mode = _Mode.CHAR
                        else:
                            mode = _Mode.CHAR
                    if keep:
                        key.append(c)
                elif c == '"' and not escaped:
                    before = indented[1:i]
                    sharp_count = len(before) - len(before.rstrip("#"))
                    if i > sharp_count and indented[i - sharp_count - 1] == "r":
                        mode = _Mode.RAW_STRING
                        count = sharp_count
                    else:
                        mode = _Mode.DOUBLE_QUOTED_STRING
                    if keep:
                        key.append(c)
                elif c == "/" and not escaped:
                    following = indented[i + 1 : i + 2]
                    if following == "/":
                        mode = _Mode.LINE_COMMENT
                    elif following == "*":
                        mode = _Mode.BLOCK_COMMENT
                        count = 0
                    elif keep:
                        key.append(c)
                elif char_is_brace(c) and not escaped:
                    braces.push(c)
                    if (
                        annotation_start_depth is not None
                        and braces.depth() == annotation_start_depth
                    ):
                        annotation_start_depth = None
                    elif keep:
                        key.append(c)
                elif c in _IGNORED and not escaped:
                    pass
                elif keep:
                    key.append(c)
            elif mode is _Mode.CHAR:
                if c == "'" and not last_is_antislash:
                    mode = _Mode.NORMAL
                if keep:
                    key.append(c)
            elif mode is _Mode.DOUBLE_QUOTED_STRING:
                if c == '"' and not last_is_antislash:
                    mode = _Mode.NORMAL
                if keep:
                    key.append(c)
            elif mode is _Mode.RAW_STRING:
                if c == '"' and indented[i + 1 : i + 1 + count] == "#" * count:
                    mode = _Mode.NORMAL
                if keep:
                    key.append(c)
            elif mode is _Mode.BLOCK_COMMENT:
                if c == "/" and i > 0 and indented[i - 1] == "*":
                    if count > 0:
                        count -= 1
                    else:
                        mode = _Mode.NORMAL
                elif (
                    c == "/"
                    and not last_is_antislash
                    and indented[i + 1 : i + 2] == "*"
                ):
                    count += 1
            last_is_antislash = c == "\\" and not last_is_antislash
        sort_key = "".join(key)
        last = next((ch for ch in reversed(sort_key) if not ch.isspace()), None)
        can_complete = last is not None and (char_is_brace(last) or last in ",;")
        locs.append(
            Loc(
                content=content,
                sort_key=sort_key,
                indent=indent,
                start_depth=start_depth,
                end_depth=braces.depth(),
                is_annotation=indented.startswith("#["),
                can_complete=can_complete,
                wishes=wishes,
                gifts=gifts,
                starts_normal=starts_normal,
            )
        )
        line_index += 1
    if mode is _Mode.CHAR:
        raise UnclosedCharLiteralError(line_index - 1)
    return locs