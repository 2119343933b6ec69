"""
Regular-expression splitting with Java-style limit semantics.

Native split implementations disagree on two points: what ``limit`` means
(truncate the result vs. cap the number of parts) and what an empty pattern
produces. ``split`` normalises both:

- ``limit > 0`` caps the number of parts; the last part holds the rest of the
  input.
- ``limit == 0`` splits fully and drops trailing empty parts.
- ``limit < 0`` splits fully and keeps every part.
- An empty pattern yields single characters bounded by empty strings, e.g.
  ``split("abc", "", -1) == ["", "a", "b", "c", ""]``.
"""

import regex

from .patterns import PatternLike, compile_pattern, is_empty_pattern

__all__ = ["NEWLINE_PATTERN", "split", "split_lines"]

NEWLINE_PATTERN = regex.compile(r"\n|\r\n")


def _pop_last_while_empty(parts: list[str]) -> list[str]:
    while parts and parts[-1] == "":
        parts.pop()
    return parts or [""]


def _discard_trailing_if_needed(limit: int, parts: list[str]) -> list[str]:
    if limit == 0 and len(parts) > 1:
        return _pop_last_while_empty(parts)
    return parts


def _split_with_empty_pattern(s: str, limit: int) -> list[str]:
    chars = list(s)
    if limit <= 0 or limit >= len(s) + 2:
        return ["", *chars, ""]
    if limit == 1:
        return [s]
    if limit == 2:  # noqa: PLR2004
        return ["", s]
    taken = limit - 2
    return ["", *chars[:taken], s[taken:]]


def _split_on_matches(s: str, pattern: regex.Pattern, limit: int) -> list[str]:
    parts: list[str] = []
    last_end = 0
    for m in pattern.finditer(s):
        if limit > 0 and len(parts) == limit - 1:
            break
        # A zero-width match at the previous split point, or at the very end
        # of the input, never produces a part.
        if m.end() == last_end or m.start() == len(s):
            continue
        parts.append(s[last_end : m.start()])
        last_end = m.end()
    parts.append(s[last_end:])
    return parts


def split(s: str, pattern: PatternLike, limit: int = 0) -> list[str]:
    """
    Split ``s`` on non-overlapping matches of ``pattern``.

    Groups captured by the pattern are not included in the result.

    Args:
        s: The string to split.
        pattern: A pattern source string or a compiled pattern.
        limit: The maximum number of parts. ``0`` drops trailing empty parts,
            a negative value keeps them.

    Returns:
        The list of parts. Never empty: splitting ``""`` yields ``[""]``.

    Raises:
        InvalidArgumentError: If ``pattern`` is not a string or compiled pattern.

    """
    compiled = compile_pattern(pattern)
    if is_empty_pattern(compiled):
        parts = _split_with_empty_pattern(s, limit)
    else:
        parts = _split_on_matches(s, compiled, limit)
    return _discard_trailing_if_needed(limit, parts)


def split_lines(s: str) -> list[str]:
    """Split ``s`` on ``\\n`` or ``\\r\\n``. Trailing empty lines are not returned."""
    return split(s, NEWLINE_PATTERN)
