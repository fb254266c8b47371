"""Tests for tag, attribute and element location."""

import unittest

from htmltext.locator import (
    NOT_FOUND,
    compare_element,
    compare_element_case_sensitive,
    find_bookmark,
    find_close_tag,
    find_closing_element,
    find_element,
    find_tag,
    get_element_name,
    read_attribute,
    read_attribute_as_int,
    read_attribute_as_string,
    read_element_as_string,
)


class TestFindCloseTag(unittest.TestCase):
    def test_simple(self):
        assert find_close_tag("<p>x") == 2

    def test_quoted_gt_is_skipped(self):
        assert find_close_tag('<a title="x>y">') == 14

    def test_nested_angle_brackets(self):
        text = "<a onclick=f(<b>)>"
        assert find_close_tag(text) == len(text) - 1

    def test_unterminated(self):
        assert find_close_tag('<a href="x"') == -1
        assert find_close_tag("") == -1
        assert find_close_tag("<p>", -1) == -1

    def test_bounded(self):
        assert find_close_tag("<p>", 0, 2) == -1


class TestFindTag(unittest.TestCase):
    def test_whole_token_only(self):
        """``color`` is not matched inside ``bgcolor``."""
        text = '<td bgcolor="red" color="blue">'
        assert find_tag(text, "color", False) == 18

    def test_css_property_after_quote(self):
        text = '<p style="color: red">'
        assert find_tag(text, "color", True) == 10
        assert find_tag(text, "color", False) == -1

    def test_outside_element(self):
        assert find_tag("<p> href=x", "href", False) == -1


class TestReadAttribute(unittest.TestCase):
    def test_span(self):
        assert read_attribute('<a href="x.html">', "href", False) == (9, 6)

    def test_missing(self):
        assert read_attribute("<a>", "href", False) == NOT_FOUND
        assert read_attribute("", "href", False) == NOT_FOUND

    def test_unquoted_value_trims_self_closing_slash(self):
        assert read_attribute_as_string("<img src=a.png/>", "src", False) == "a.png"

    def test_spaces_in_value(self):
        text = '<span class="os-caption hidden">'
        assert read_attribute_as_string(text, "class", False) == "os-caption"
        assert read_attribute_as_string(text, "class", False, True) == "os-caption hidden"

    def test_css_value_stops_at_semicolon(self):
        text = '<p style="font-family: Symbol; color: red">'
        assert read_attribute_as_string(text, "font-family", True, True) == "Symbol"

    def test_colon_separator(self):
        text = '<p style="page-break-before:always">'
        assert read_attribute_as_string(text, "page-break-before", True) == "always"

    def test_as_int(self):
        assert read_attribute_as_int('<td colspan="3">', "colspan", False) == 3
        assert read_attribute_as_int("<td colspan=-2>", "colspan", False) == -2
        assert read_attribute_as_int("<td width=abc>", "width", False) == 0
        assert read_attribute_as_int("<td>", "colspan", False) == 0

    def test_empty_value(self):
        assert read_attribute('<a href="">', "href", False) == NOT_FOUND


class TestCompareElement(unittest.TestCase):
    def test_case_insensitive(self):
        assert compare_element("<BR>", 1, "br")
        assert not compare_element_case_sensitive("<BR>", 1, "br")
        assert compare_element_case_sensitive("<br>", 1, "br")

    def test_prefix_is_not_a_match(self):
        assert not compare_element("<brx>", 1, "br")
        assert not compare_element("<b", 1, "b")

    def test_self_terminating(self):
        assert not compare_element("<br/>", 1, "br")
        assert compare_element("<br/>", 1, "br", True)
        assert not compare_element("<br />", 1, "br")
        assert compare_element("<br />", 1, "br", True)

    def test_attributes(self):
        assert compare_element('<a href="x">', 1, "a")


class TestElementNames(unittest.TestCase):
    def test_get_element_name(self):
        assert get_element_name("<DIV class=x>", 1) == "DIV"
        assert get_element_name("</p>", 1) == "/p"
        assert get_element_name("<br/>", 1) == "br"
        assert get_element_name("<br/>", 1, False) == "br/"
        assert get_element_name("", 0) == ""

    def test_find_element(self):
        text = "<p>x<div>y</div>"
        assert find_element(text, "div") == 4
        assert find_element(text, "div", 5) == -1
        assert find_element(text, "span") == -1

    def test_find_closing_element_is_balanced(self):
        text = "<div><div>X</div></div>"
        assert find_closing_element(text, "div", 0) == 17
        assert find_closing_element(text, "div", 5) == 11

    def test_find_closing_element_unclosed(self):
        assert find_closing_element("<div><div>X</div>", "div", 0) == -1

    def test_read_element_as_string(self):
        assert read_element_as_string("<ul><li> one </li></ul>", "li") == "one"
        assert read_element_as_string("<ul></ul>", "li") == ""


class TestFindBookmark(unittest.TestCase):
    def test_skips_anchors_without_name(self):
        text = '<a href="x">x</a><a name="#sec2">S</a>'
        assert find_bookmark(text) == (17, "sec2")

    def test_not_found(self):
        assert find_bookmark('<a href="x">x</a>') == (-1, "")
        assert find_bookmark('<a name="late">', 0, 1) == (-1, "")

    def test_many_anchors(self):
        text = "<a>" * 5000 + '<a name="end">'
        assert find_bookmark(text) == (15000, "end")


if __name__ == "__main__":
    unittest.main()
