"""Tests for the quote-aware scan primitives."""

import unittest

from htmltext.scan import (
    collapse_whitespace,
    find_char_outside_quotes,
    find_first_of,
    find_ignore_case,
    find_substring_outside_quotes,
    startswith_ignore_case,
)


class TestFindCharOutsideQuotes(unittest.TestCase):
    def test_skips_quoted_delimiter(self):
        assert find_char_outside_quotes('a="x>y" >', ">") == 8

    def test_apostrophe_inside_double_quotes(self):
        """A single quote inside a double-quoted run does not open a new run."""
        assert find_char_outside_quotes("\"it's\" >", ">") == 7

    def test_double_quote_closes_single_quoted_run(self):
        assert find_char_outside_quotes("'a\" >", ">") == 4

    def test_not_found(self):
        assert find_char_outside_quotes('"only >inside"', ">") == -1

    def test_empty_input(self):
        assert find_char_outside_quotes("", ">") == -1
        assert find_char_outside_quotes("abc", "") == -1

    def test_bounded_search(self):
        text = "a>b>c"
        assert find_char_outside_quotes(text, ">", 2) == 3
        assert find_char_outside_quotes(text, ">", 2, 3) == -1


class TestFindSubstringOutsideQuotes(unittest.TestCase):
    def test_case_insensitive(self):
        assert find_substring_outside_quotes("<A HREF=x>", "href") == 3

    def test_quoted_match_is_skipped(self):
        assert find_substring_outside_quotes('title="HREF" href=x', "href") == 13

    def test_empty_input(self):
        assert find_substring_outside_quotes("", "x") == -1
        assert find_substring_outside_quotes("abc", "") == -1

    def test_not_found(self):
        assert find_substring_outside_quotes("<a src=x>", "href") == -1


class TestHelpers(unittest.TestCase):
    def test_find_ignore_case(self):
        assert find_ignore_case("Hello World", "WORLD") == 6
        assert find_ignore_case("Hello World", "world", 0, 8) == -1
        assert find_ignore_case("", "x") == -1

    def test_find_ignore_case_escapes_needle(self):
        assert find_ignore_case("a.b a*b", "a*b") == 4

    def test_find_first_of(self):
        assert find_first_of("abc;def>", ";>") == 3
        assert find_first_of("abc;def>", ";>", 4) == 7
        assert find_first_of("abc", "xyz") == -1

    def test_startswith_ignore_case(self):
        assert startswith_ignore_case("<SCRIPT>", "<script")
        assert startswith_ignore_case("x Symbol", "symbol", 2)
        assert not startswith_ignore_case("abc", "abd")
        assert not startswith_ignore_case("abc", "a", -1)

    def test_collapse_whitespace(self):
        assert collapse_whitespace("  a \n b\t") == "a b"
        assert collapse_whitespace("") == ""


if __name__ == "__main__":
    unittest.main()
