"""StrKit: string manipulation functions over Python strings and the regex engine."""

import importlib.metadata

from .errors import InvalidArgumentError, StrKitError
from .patterns import MatchResult, PatternFlags, compile_pattern, escape_literal, match, match_all
from .replace import replace, replace_first
from .search import ends_with, includes, index_of, is_blank, last_index_of, starts_with
from .splitting import split, split_lines
from .transform import capitalize, escape, join, lower_case, reverse, trim, trim_newline, triml, trimr, upper_case


def _get_version() -> str:
    """
    Retrieve the package version from metadata.

    Returns:
        The version string, or a development version if not installed.

    """
    try:
        return importlib.metadata.version("strkit")
    except importlib.metadata.PackageNotFoundError:
        # Not installed, e.g. running from a source checkout
        return "0.0.0-dev"


__version__ = _get_version()

__all__ = [
    "InvalidArgumentError",
    "MatchResult",
    "PatternFlags",
    "StrKitError",
    "__version__",
    "capitalize",
    "compile_pattern",
    "ends_with",
    "escape",
    "escape_literal",
    "includes",
    "index_of",
    "is_blank",
    "join",
    "last_index_of",
    "lower_case",
    "match",
    "match_all",
    "replace",
    "replace_first",
    "reverse",
    "split",
    "split_lines",
    "starts_with",
    "trim",
    "trim_newline",
    "triml",
    "trimr",
    "upper_case",
]
