"""
Literal and pattern-based replacement.

``replace`` and ``replace_first`` accept two shapes of ``match`` (a literal
string or a compiled pattern) and two shapes of ``replacement`` (a string or a
function of the match). The shapes are resolved once into the tagged variants
from :mod:`strkit.types` and a single substitution routine runs over them.

Back-reference tokens understood in a string replacement for a pattern match:

- ``$1`` .. ``$99``: the text of that group (``""`` if it did not participate)
- ``$&``: the whole match
- a dollar sign followed by a backtick or by ``'``: the text before or after the match
- ``$<name>``: a named group
- ``$$``: a literal ``$``

A token that names a group the pattern does not have is kept as written.
"""

from collections.abc import Callable
from typing import Any

import regex

from .errors import InvalidArgumentError
from .patterns import compile_pattern, escape_literal, is_pattern
from .transform import stringify
from .types import FnReplacement, LiteralMatch, LiteralReplacement, MatchSpec, PatternMatch, ReplacementSpec

__all__ = ["expand_template", "replace", "replace_first"]

_TOKEN_PATTERN = regex.compile(r"\$(?:(?P<dollar>\$)|(?P<whole>&)|(?P<before>`)|(?P<after>')|(?P<digits>\d{1,2})|<(?P<name>[^>]*)>)")

_ALL = 0
_FIRST = 1


def _group_text(m: Any, group: int | str) -> str:  # noqa: ANN401
    return m.group(group) or ""


def _expand_digits(m: Any, token: Any) -> str:  # noqa: ANN401
    digits = token.group("digits")
    group_count = m.re.groups
    if len(digits) == 2 and 1 <= int(digits) <= group_count:  # noqa: PLR2004
        return _group_text(m, int(digits))
    first = int(digits[0])
    if 1 <= first <= group_count:
        return _group_text(m, first) + digits[1:]
    return token.group(0)


def expand_template(template: str, m: Any) -> str:  # noqa: ANN401
    """
    Substitute the back-reference tokens in ``template`` for the match ``m``.

    Args:
        template: The replacement string, possibly containing ``$`` tokens.
        m: A ``regex`` match object.

    Returns:
        The expanded replacement text.

    """

    def _token(token: Any) -> str:  # noqa: ANN401
        kind = token.lastgroup
        if kind == "dollar":
            return "$"
        if kind == "whole":
            return m.group(0)
        if kind == "before":
            return m.string[: m.start()]
        if kind == "after":
            return m.string[m.end() :]
        if kind == "name":
            name = token.group("name")
            return _group_text(m, name) if name in m.re.groupindex else token.group(0)
        return _expand_digits(m, token)

    return _TOKEN_PATTERN.sub(_token, template)


def _resolve_match(match: object) -> MatchSpec:
    if isinstance(match, str):
        return LiteralMatch(match)
    if is_pattern(match):
        return PatternMatch(compile_pattern(match))
    msg = f"Invalid match arg: {match!r}. Expected a string or a compiled pattern."
    raise InvalidArgumentError(msg)


def _resolve_replacement(match_spec: MatchSpec, replacement: object) -> ReplacementSpec:
    if isinstance(replacement, str):
        return LiteralReplacement(replacement, expand=isinstance(match_spec, PatternMatch))
    if callable(replacement):
        return FnReplacement(replacement)
    msg = f"Invalid replacement arg: {replacement!r}. Expected a string or a function."
    raise InvalidArgumentError(msg)


def _replacer(spec: ReplacementSpec) -> Callable[[Any], str]:
    if isinstance(spec, FnReplacement):

        def _call(m: Any) -> str:  # noqa: ANN401
            argument = m.group(0) if m.re.groups == 0 else [m.group(0), *m.groups()]
            return stringify(spec.fn(argument))

        return _call

    if spec.expand:
        return lambda m: expand_template(spec.text, m)
    return lambda _m: spec.text


def _substitute(s: str, match_spec: MatchSpec, replacement_spec: ReplacementSpec, count: int) -> str:
    if isinstance(match_spec, PatternMatch):
        pattern = match_spec.pattern
    else:
        pattern = regex.compile(escape_literal(match_spec.text))
    return pattern.sub(_replacer(replacement_spec), s, count=count)


def _run(s: str, match: object, replacement: object, count: int) -> str:
    match_spec = _resolve_match(match)
    replacement_spec = _resolve_replacement(match_spec, replacement)
    return _substitute(s, match_spec, replacement_spec, count)


def replace(s: str, match: object, replacement: object) -> str:
    """
    Replace every instance of ``match`` in ``s`` with ``replacement``.

    ``match``/``replacement`` can be:

    - string / string: literal replacement of every occurrence
    - pattern / string: ``$1``, ``$2``, ... in the replacement are substituted
      with the text of the corresponding group
    - pattern (or string) / function: the function receives the matched text,
      or ``[whole, group1, ...]`` when the pattern has groups

    The replacement is literal in every case except pattern / string.

    Example:
        >>> replace("Almost Pig Latin", regex.compile(r"\\b(\\w)(\\w+)\\b"), "$2$1ay")
        'lmostAay igPay atinLay'

    Raises:
        InvalidArgumentError: If ``match`` is neither a string nor a pattern, or
            ``replacement`` is neither a string nor callable.

    """
    return _run(s, match, replacement, _ALL)


def replace_first(s: str, match: object, replacement: object) -> str:
    """
    Replace the first instance of ``match`` in ``s`` with ``replacement``.

    Accepts the same argument shapes as :func:`replace`.

    Example:
        >>> replace_first("swap first two words", regex.compile(r"(\\w+)(\\s+)(\\w+)"), "$3$2$1")
        'first swap two words'

    """
    return _run(s, match, replacement, _FIRST)
