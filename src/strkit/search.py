"""Substring search and string predicates. Searches return None when nothing is found."""

__all__ = ["ends_with", "includes", "index_of", "is_blank", "last_index_of", "starts_with"]


def _clamp(index: int, length: int) -> int:
    return min(max(index, 0), length)


def index_of(s: str, value: str, from_index: int = 0) -> int | None:
    """
    Return the index of ``value`` in ``s``, searching forward from ``from_index``.

    ``from_index`` is clamped to ``[0, len(s)]``.

    Returns:
        The index of the first occurrence, or None if not found.

    """
    result = s.find(value, _clamp(from_index, len(s)))
    return None if result < 0 else result


def last_index_of(s: str, value: str, from_index: int | None = None) -> int | None:
    """
    Return the last index of ``value`` in ``s``, searching backward from ``from_index``.

    Only occurrences starting at or before ``from_index`` are considered.
    ``from_index`` defaults to the end of the string and is clamped to
    ``[0, len(s)]``.

    Returns:
        The index of the last occurrence, or None if not found.

    """
    start_limit = len(s) if from_index is None else _clamp(from_index, len(s))
    result = s.rfind(value, 0, start_limit + len(value))
    return None if result < 0 else result


def starts_with(s: str, substr: str) -> bool:
    """True if ``s`` starts with ``substr``."""
    return s.startswith(substr)


def ends_with(s: str, substr: str) -> bool:
    """True if ``s`` ends with ``substr``."""
    return s.endswith(substr)


def includes(s: str, substr: str) -> bool:
    """True if ``s`` includes ``substr``."""
    return substr in s


def is_blank(s: str | None) -> bool:
    """True if ``s`` is None, empty, or contains only whitespace."""
    return not s or s.isspace()
