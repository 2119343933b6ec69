"""Tests for substring search and string predicates."""

import pytest

from strkit.search import ends_with, includes, index_of, is_blank, last_index_of, starts_with


def test_index_of() -> None:
    """index_of finds the first occurrence at or after from_index."""
    assert index_of("abcabc", "b") == 1
    assert index_of("abcabc", "b", 2) == 4
    assert index_of("abcabc", "ca") == 2


def test_index_of_not_found_returns_none() -> None:
    """A missing value yields None rather than -1 or an exception."""
    assert index_of("abc", "z") is None
    assert index_of("abcabc", "a", 4) is None


def test_index_of_clamps_from_index() -> None:
    """from_index outside [0, len(s)] is clamped."""
    assert index_of("abc", "a", -5) == 0
    assert index_of("abc", "", 10) == 3


def test_last_index_of() -> None:
    """last_index_of finds the last occurrence at or before from_index."""
    assert last_index_of("abcabc", "b") == 4
    assert last_index_of("abcabc", "b", 4) == 4
    assert last_index_of("abcabc", "b", 3) == 1
    assert last_index_of("abcabc", "bc", 1) == 1


def test_last_index_of_not_found_returns_none() -> None:
    """A missing value yields None."""
    assert last_index_of("abc", "z") is None
    assert last_index_of("abcabc", "c", 1) is None


def test_last_index_of_clamps_from_index() -> None:
    """from_index outside [0, len(s)] is clamped."""
    assert last_index_of("abc", "a", -1) == 0
    assert last_index_of("abc", "c", 99) == 2
    assert last_index_of("abc", "") == 3


def test_starts_and_ends_with() -> None:
    """Prefix and suffix checks are case-sensitive."""
    assert starts_with("Hello", "He")
    assert not starts_with("Hello", "he")
    assert ends_with("Hello", "llo")
    assert not ends_with("Hello", "LLO")


def test_includes() -> None:
    """includes is a case-sensitive substring check."""
    assert includes("Hello", "ell")
    assert includes("Hello", "")
    assert not includes("Hello", "ELL")


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n", " \u3000"])
def test_is_blank_true(value: str | None) -> None:
    """None, empty and whitespace-only strings are blank."""
    assert is_blank(value)


@pytest.mark.parametrize("value", ["a", " a ", "\ta\n"])
def test_is_blank_false(value: str) -> None:
    """Any non-whitespace character makes a string non-blank."""
    assert not is_blank(value)
