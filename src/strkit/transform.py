"""Whole-string transforms: case, trimming, reversal, joining and escaping."""

from collections.abc import Mapping
from typing import Any

import regex

__all__ = [
    "capitalize",
    "escape",
    "join",
    "lower_case",
    "reverse",
    "stringify",
    "trim",
    "trim_newline",
    "triml",
    "trimr",
    "upper_case",
]

_SURROGATE_PAIR = regex.compile(r"([\uD800-\uDBFF])([\uDC00-\uDFFF])")
_NEWLINE_CHARS = "\r\n"
_MISSING = object()


def stringify(value: object) -> str:
    """Return the string form of ``value``; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def upper_case(s: str) -> str:
    """Convert string to all upper-case."""
    return s.upper()


def lower_case(s: str) -> str:
    """Convert string to all lower-case."""
    return s.lower()


def capitalize(s: str) -> str:
    """Convert the first character to upper-case and all other characters to lower-case."""
    # str.capitalize() title-cases the first character, which differs for digraphs like "ǆ".
    return s[:1].upper() + s[1:].lower()


def trim(s: str) -> str:
    """Remove whitespace from both ends of string."""
    return s.strip()


def triml(s: str) -> str:
    """Remove whitespace from the left side of string."""
    return s.lstrip()


def trimr(s: str) -> str:
    """Remove whitespace from the right side of string."""
    return s.rstrip()


def trim_newline(s: str) -> str:
    """
    Remove all trailing newline ``\\n`` or return ``\\r`` characters from string.

    Other trailing whitespace is kept. Similar to Perl's ``chomp``.
    """
    index = len(s)
    while index > 0 and s[index - 1] in _NEWLINE_CHARS:
        index -= 1
    return s[:index]


def reverse(s: str) -> str:
    """
    Return ``s`` with its characters reversed.

    A UTF-16 surrogate pair carried as two code points (high then low
    surrogate) stays in its original order, so the character it encodes
    survives the reversal.
    """
    return _SURROGATE_PAIR.sub(r"\2\1", s)[::-1]


def join(separator_or_coll: Any, coll: Any = _MISSING) -> str:  # noqa: ANN401
    """
    Return a string of all elements in ``coll``, separated by an optional separator.

    Called as ``join(coll)`` or ``join(separator, coll)``. Each element is
    converted with :func:`stringify`, so ``None`` elements contribute nothing.

    Examples:
        >>> join(["a", "b", "c"])
        'abc'
        >>> join(", ", ["a", "b", "c"])
        'a, b, c'

    """
    if coll is _MISSING:
        separator, items = "", separator_or_coll
    else:
        separator, items = stringify(separator_or_coll), coll
    if items is None:
        return ""
    return separator.join(stringify(item) for item in items)


def escape(s: str, cmap: Mapping[str, Any]) -> str:
    """
    Return a new string, using ``cmap`` to escape each character ``ch`` of ``s``.

    If ``cmap`` has no entry for ``ch`` (or maps it to ``None`` or ``False``),
    ``ch`` is appended unchanged; otherwise the string form of the mapped value
    is appended instead. Lookup is per code point.
    """
    buffer: list[str] = []
    for ch in s:
        replacement = cmap.get(ch)
        buffer.append(ch if replacement is None or replacement is False else stringify(replacement))
    return "".join(buffer)
