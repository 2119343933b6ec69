"""Defines the tagged argument variants used by the replace functions."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import regex

# Called with the matched text, or with [whole, group1, group2, ...] when the pattern has groups.
ReplacementFn = Callable[[Any], Any]


@dataclass(frozen=True)
class LiteralMatch:
    """Match every literal occurrence of ``text``."""

    text: str


@dataclass(frozen=True)
class PatternMatch:
    """Match a compiled pattern."""

    pattern: regex.Pattern


@dataclass(frozen=True)
class LiteralReplacement:
    """
    Replace with a fixed string.

    Attributes:
        text: The replacement text.
        expand: Whether ``$1``-style back-reference tokens in ``text`` are substituted.

    """

    text: str
    expand: bool = False


@dataclass(frozen=True)
class FnReplacement:
    """Replace with whatever ``fn`` returns for each match."""

    fn: ReplacementFn


MatchSpec = LiteralMatch | PatternMatch
ReplacementSpec = LiteralReplacement | FnReplacement
