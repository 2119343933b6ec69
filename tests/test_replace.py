"""Tests for literal and pattern-based replacement."""

import re

import pytest
import regex

from strkit.errors import InvalidArgumentError
from strkit.replace import replace, replace_first


class TestLiteralReplace:
    """String match / string replacement."""

    def test_replaces_every_occurrence(self) -> None:
        """Every literal occurrence is replaced."""
        assert replace("cat cat cat", "cat", "dog") == "dog dog dog"

    def test_match_is_not_a_regex(self) -> None:
        """Regex metacharacters in the match are literal."""
        assert replace("a.b.c", ".", "-") == "a-b-c"
        assert replace("$(who -b)", "$(who", "$(are") == "$(are -b)"

    def test_replacement_is_literal(self) -> None:
        """Back-reference tokens and backslashes in the replacement are not expanded."""
        assert replace("cost", "cost", "$1") == "$1"
        assert replace("aaa", "a", "$&") == "$&$&$&"
        assert replace("a", "a", r"\1") == r"\1"

    def test_empty_match_inserts_everywhere(self) -> None:
        """The empty string matches between every character."""
        assert replace("ab", "", "-") == "-a-b-"

    def test_no_match_returns_input(self) -> None:
        """Input without the match is returned unchanged."""
        assert replace("hello world", "goodbye", "farewell") == "hello world"

    def test_replace_first_only_first_occurrence(self) -> None:
        """replace_first stops after one replacement."""
        assert replace_first("a.b.c", ".", "-") == "a-b.c"


class TestPatternReplace:
    """Pattern match / string replacement with back-references."""

    def test_pig_latin(self) -> None:
        """Groups are substituted for $1 and $2."""
        assert replace("Almost Pig Latin", regex.compile(r"\b(\w)(\w+)\b"), "$2$1ay") == "lmostAay igPay atinLay"

    def test_replace_first_swap_words(self) -> None:
        """replace_first expands back-references for the first match only."""
        assert replace_first("swap first two words", regex.compile(r"(\w+)(\s+)(\w+)"), "$3$2$1") == "first swap two words"

    def test_stdlib_pattern(self) -> None:
        """A re.Pattern behaves like a regex.Pattern."""
        assert replace("swap words", re.compile(r"(\w+) (\w+)"), "$2 $1") == "words swap"

    def test_whole_match_and_dollar_tokens(self) -> None:
        """$& is the whole match and $$ is a literal dollar."""
        assert replace("5 and 7", regex.compile(r"\d"), "$$$&") == "$5 and $7"

    def test_before_and_after_tokens(self) -> None:
        """$` and $' expand to the text around the match."""
        assert replace("abc", regex.compile("b"), "[$`$']") == "a[ac]c"

    def test_named_group_token(self) -> None:
        """$<name> expands to the named group."""
        assert replace("2024-01", regex.compile(r"(?P<y>\d+)-(?P<m>\d+)"), "$<m>/$<y>") == "01/2024"

    def test_unknown_group_is_kept_literally(self) -> None:
        """A token naming a missing group stays as written."""
        assert replace("ab", regex.compile("(a)"), "$2") == "$2b"
        assert replace("ab", regex.compile("a"), "$0") == "$0b"
        assert replace("ab", regex.compile("(a)"), "$<nope>") == "$<nope>b"

    def test_two_digit_token_falls_back_to_one_digit(self) -> None:
        """$12 with a single group means group 1 followed by the digit 2."""
        assert replace("ab", regex.compile("(a)"), "$12") == "a2b"

    def test_two_digit_token(self) -> None:
        """$10 refers to the tenth group when it exists."""
        pattern = regex.compile("(a)(b)(c)(d)(e)(f)(g)(h)(i)(j)")
        assert replace("abcdefghij", pattern, "$10$1") == "ja"

    def test_non_participating_group_expands_to_empty(self) -> None:
        """A group that did not match contributes nothing."""
        assert replace("b", regex.compile("(a)?b"), "[$1]") == "[]"

    def test_backslashes_in_replacement_are_literal(self) -> None:
        """Only $ tokens are special in a pattern replacement."""
        assert replace("a", regex.compile("(a)"), r"\1$1") == r"\1a"


class TestFunctionReplace:
    """Pattern (or string) match / function replacement."""

    def test_function_receives_match_without_groups(self) -> None:
        """Without groups the function gets the matched text."""
        assert replace("hello world", regex.compile("o"), lambda m: m.upper()) == "hellO wOrld"

    def test_function_receives_groups(self) -> None:
        """With groups the function gets [whole, group1, ...]."""
        seen = []

        def swap(groups: list[str]) -> str:
            seen.append(groups)
            return groups[2] + groups[1]

        assert replace("a1 b2", regex.compile(r"(\w)(\d)"), swap) == "1a 2b"
        assert seen == [["a1", "a", "1"], ["b2", "b", "2"]]

    def test_function_result_is_not_expanded(self) -> None:
        """The function's return value is used verbatim."""
        assert replace("ab", regex.compile("(a)"), lambda _m: "$1") == "$1b"

    def test_function_result_is_stringified(self) -> None:
        """Non-string return values are converted to strings."""
        assert replace("a1b2", regex.compile(r"\d"), lambda m: int(m) + 1) == "a2b3"

    def test_function_with_literal_match(self) -> None:
        """A literal match can also be replaced through a function."""
        assert replace("a-b", "-", lambda m: f"[{m}]") == "a[-]b"

    def test_replace_first_with_function(self) -> None:
        """replace_first calls the function for the first match only."""
        assert replace_first("one two", regex.compile(r"\w+"), str.upper) == "ONE two"


class TestFlagsPreserved:
    """Flags on the caller's pattern survive internal normalisation."""

    def test_ignore_case_stdlib(self) -> None:
        """re.IGNORECASE is carried over."""
        assert replace("Cat cat CAT", re.compile("cat", re.IGNORECASE), "dog") == "dog dog dog"

    def test_ignore_case_regex(self) -> None:
        """regex.IGNORECASE is carried over."""
        assert replace_first("CAT cat", regex.compile("cat", regex.IGNORECASE), "dog") == "dog cat"

    def test_multiline(self) -> None:
        """MULTILINE lets ^ match at every line start."""
        assert replace("a\nb", re.compile("^", re.MULTILINE), "> ") == "> a\n> b"


class TestInvalidArguments:
    """Argument shapes that are rejected."""

    @pytest.mark.parametrize("bad_match", [42, None, ["a"]])
    def test_invalid_match(self, bad_match: object) -> None:
        """A match that is neither a string nor a pattern raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Invalid match arg"):
            replace("abc", bad_match, "x")
        with pytest.raises(InvalidArgumentError, match="Invalid match arg"):
            replace_first("abc", bad_match, "x")

    def test_invalid_replacement(self) -> None:
        """A replacement that is neither a string nor callable raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Invalid replacement arg"):
            replace("abc", "a", 5)

    def test_invalid_argument_is_a_type_error(self) -> None:
        """InvalidArgumentError can be caught as TypeError."""
        with pytest.raises(TypeError):
            replace("abc", 1.5, "x")
