"""
Pattern primitive shared by the splitting and replacing functions.

Everything that touches the regular-expression engine goes through this
module. Callers may hand in a pattern source string, a compiled
``regex.Pattern`` or a stdlib ``re.Pattern``; all of them are normalised to a
``regex.Pattern`` whose flags are carried over explicitly through
:class:`PatternFlags`.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from typing import Any

import regex

from .errors import InvalidArgumentError

__all__ = [
    "EMPTY_PATTERN_SOURCES",
    "MatchResult",
    "PatternFlags",
    "PatternLike",
    "compile_pattern",
    "escape_literal",
    "is_empty_pattern",
    "is_pattern",
    "match",
    "match_all",
]

PatternLike = str | regex.Pattern | re.Pattern

# Sources that match the empty string at every position and nothing else.
EMPTY_PATTERN_SOURCES = frozenset({"", "(?:)"})

# Flag name -> (regex flag, re flag)
_FLAG_TABLE: dict[str, tuple[int, int]] = {
    "ignore_case": (regex.IGNORECASE, re.IGNORECASE),
    "multiline": (regex.MULTILINE, re.MULTILINE),
    "dotall": (regex.DOTALL, re.DOTALL),
    "unicode": (regex.UNICODE, re.UNICODE),
    "ascii": (regex.ASCII, re.ASCII),
    "verbose": (regex.VERBOSE, re.VERBOSE),
}


@dataclass(frozen=True)
class PatternFlags:
    """The engine-independent set of flags a pattern carries."""

    ignore_case: bool = False
    multiline: bool = False
    dotall: bool = False
    unicode: bool = False
    ascii: bool = False
    verbose: bool = False

    @classmethod
    def from_names(cls, names: list[str] | tuple[str, ...]) -> PatternFlags:
        """
        Build flags from a list of flag names such as ``["ignore_case"]``.

        Raises:
            ValueError: If a name is not a known flag.

        """
        unknown = [name for name in names if name not in _FLAG_TABLE]
        if unknown:
            msg = f"Unknown pattern flag(s): {', '.join(unknown)}. Expected any of: {', '.join(_FLAG_TABLE)}"
            raise ValueError(msg)
        return cls(**dict.fromkeys(names, True))

    @classmethod
    def from_pattern(cls, pattern: regex.Pattern | re.Pattern) -> PatternFlags:
        """Read the flags of a compiled ``regex`` or ``re`` pattern."""
        column = 0 if isinstance(pattern, regex.Pattern) else 1
        return cls(**{name: bool(pattern.flags & bits[column]) for name, bits in _FLAG_TABLE.items()})

    def merged(self, other: PatternFlags | None = None, **changes: bool) -> PatternFlags:
        """Return a copy with every flag set in ``other`` or ``changes`` switched on."""
        values = dataclasses.asdict(self)
        if other is not None:
            for name, enabled in dataclasses.asdict(other).items():
                values[name] = values[name] or enabled
        values.update(changes)
        return PatternFlags(**values)

    def to_regex_flags(self) -> int:
        """Return the integer flag set understood by ``regex.compile``."""
        bits = 0
        for name, (regex_bit, _) in _FLAG_TABLE.items():
            if getattr(self, name):
                bits |= regex_bit
        if self.ascii:
            # ASCII and UNICODE are mutually exclusive in the engine.
            bits &= ~regex.UNICODE
        return bits

    @property
    def names(self) -> list[str]:
        """Names of the flags that are switched on."""
        return [name for name in _FLAG_TABLE if getattr(self, name)]


@dataclass(frozen=True)
class MatchResult:
    """
    A single match of a pattern against a string.

    Attributes:
        text: The matched substring.
        start: Offset of the first matched character.
        end: Offset just past the last matched character.
        groups: Captured groups in positional order; ``None`` for a group that
            did not take part in the match.
        named: Named groups, by name.

    """

    text: str
    start: int
    end: int
    groups: tuple[str | None, ...] = ()
    named: dict[str, str | None] = field(default_factory=dict)

    @classmethod
    def from_match(cls, m: Any) -> MatchResult:  # noqa: ANN401
        """Convert an engine match object."""
        return cls(text=m.group(0), start=m.start(), end=m.end(), groups=m.groups(), named=m.groupdict())

    @property
    def is_empty(self) -> bool:
        """Whether the match consumed no characters."""
        return self.start == self.end


def is_pattern(value: object) -> bool:
    """Return True for compiled ``regex`` or ``re`` patterns."""
    return isinstance(value, (regex.Pattern, re.Pattern))


def compile_pattern(pattern: PatternLike, flags: PatternFlags | None = None) -> regex.Pattern:
    """
    Normalise ``pattern`` to a compiled ``regex.Pattern``.

    A ``regex.Pattern`` without extra ``flags`` is returned as is. A stdlib
    ``re.Pattern`` is recompiled with its own flags preserved. Extra ``flags``
    are added on top of whatever the pattern already carries.

    Raises:
        InvalidArgumentError: If ``pattern`` is neither a string nor a compiled pattern.
        regex.error: If the pattern source is not a valid regular expression.

    """
    if isinstance(pattern, regex.Pattern):
        if flags is None:
            return pattern
        # Preserve engine-only flags (WORD, V1) the caller set.
        bits = pattern.flags | flags.to_regex_flags()
        if flags.ascii:
            bits &= ~regex.UNICODE
        return regex.compile(pattern.pattern, bits)

    if isinstance(pattern, str):
        base = PatternFlags()
        source = pattern
    elif is_pattern(pattern):
        base = PatternFlags.from_pattern(pattern)
        source = pattern.pattern
    else:
        msg = f"Expected a pattern or pattern source string, got {type(pattern).__name__}: {pattern!r}"
        raise InvalidArgumentError(msg)

    return regex.compile(source, base.merged(flags).to_regex_flags())


def escape_literal(text: str) -> str:
    """Return a pattern source that matches ``text`` literally."""
    return regex.escape(text)


def is_empty_pattern(pattern: PatternLike) -> bool:
    """Return True when the pattern source is empty, i.e. it matches only the empty string everywhere."""
    source = pattern if isinstance(pattern, str) else pattern.pattern
    return source in EMPTY_PATTERN_SOURCES


def match(pattern: PatternLike, s: str) -> MatchResult | None:
    """Return the first match of ``pattern`` in ``s``, or None."""
    m = compile_pattern(pattern).search(s)
    return MatchResult.from_match(m) if m is not None else None


def match_all(pattern: PatternLike, s: str) -> list[MatchResult]:
    """Return every non-overlapping match of ``pattern`` in ``s``, left to right."""
    return [MatchResult.from_match(m) for m in compile_pattern(pattern).finditer(s)]
