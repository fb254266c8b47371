"""Tests for whole-document helpers."""

import unittest

from htmltext import get_body, get_style_section, parse_charset


class TestSections(unittest.TestCase):
    def test_body(self):
        assert get_body("<html><BODY class=x>Hi</body></html>") == "Hi"

    def test_no_body(self):
        assert get_body("no body here") == "no body here"

    def test_unclosed_body(self):
        html = "<body>Hi"
        assert get_body(html) == html

    def test_style_section(self):
        html = "<head><style type='text/css'><!-- p {color:red} --></style></head>"
        assert get_style_section(html) == "p {color:red}"

    def test_plain_style_section(self):
        assert get_style_section("<STYLE>\n  h1 { margin: 0 }\n</STYLE>") == "h1 { margin: 0 }"

    def test_no_style(self):
        assert get_style_section("<p>x</p>") == ""
        assert get_style_section("<style>never closed") == ""


class TestParseCharset(unittest.TestCase):
    def test_content_type(self):
        html = '<meta http-equiv="Content-Type" content="text/html; charset=utf-8">'
        assert parse_charset(html) == "utf-8"

    def test_content_type_on_later_meta(self):
        html = (
            '<meta name="author" content="x">'
            "<meta http-equiv='content-type' content='text/html; charset=windows-1252'>"
        )
        assert parse_charset(html) == "windows-1252"

    def test_html5_meta_charset(self):
        assert parse_charset('<meta charset="iso-8859-1">') == "iso-8859-1"

    def test_bytes(self):
        assert parse_charset(b'<head><meta charset=utf-8></head>') == "utf-8"

    def test_xml_declaration(self):
        assert parse_charset('<?xml version="1.0" encoding="UTF-8"?><root/>') == "UTF-8"

    def test_missing(self):
        assert parse_charset("") == ""
        assert parse_charset("<p>plain</p>") == ""
        assert parse_charset('<meta name="author" content="x">') == ""

    def test_length(self):
        html = '<p>x</p><meta charset="utf-8">'
        assert parse_charset(html, 8) == ""
        assert parse_charset(html) == "utf-8"


if __name__ == "__main__":
    unittest.main()
