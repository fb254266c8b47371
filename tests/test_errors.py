"""Tests for diagnostic collection and strict mode."""

import unittest

from htmltext import Diagnostic, ExtractorOpts, HtmlExtractText, StrictModeError


class TestDiagnosticCollection(unittest.TestCase):
    """Recoverable problems are recorded, never raised, by default."""

    def test_no_diagnostics_for_clean_markup(self):
        extractor = HtmlExtractText()
        extractor.extract("<html><body><p>Fine &amp; dandy</p></body></html>")
        assert extractor.diagnostics == []
        assert extractor.log == []

    def test_diagnostic_has_position(self):
        extractor = HtmlExtractText()
        extractor.extract("ab &bogus; cd")
        assert extractor.diagnostics == [Diagnostic("Unknown HTML entity: &bogus", 3)]

    def test_diagnostics_are_cleared_between_calls(self):
        extractor = HtmlExtractText()
        extractor.extract("&bogus;")
        assert len(extractor.diagnostics) == 1
        extractor.extract("<p>ok</p>")
        assert extractor.diagnostics == []

    def test_several_diagnostics_in_order(self):
        extractor = HtmlExtractText()
        extractor.extract("&one; AT&T <b oops")
        assert extractor.log == [
            "Unknown HTML entity: &one",
            "Unencoded ampersand or unknown HTML entity: &T",
            "Unterminated tag copied as text",
        ]

    def test_metadata_diagnostics_are_merged(self):
        """Problems inside a title are reported on the outer extractor."""
        extractor = HtmlExtractText()
        extractor.extract("<title>a &bogus; b</title>")
        assert extractor.title == "a ? b"
        assert extractor.log == ["Unknown HTML entity: &bogus"]

    def test_symbol_font_conversion_is_reported(self):
        extractor = HtmlExtractText()
        extractor.extract('<font face="Symbol">abc</font>')
        assert extractor.log == ['Symbol font used for the following: "αβχ"']

    def test_unclosed_skipped_element(self):
        extractor = HtmlExtractText()
        text = extractor.extract("<style>p {}<p>after")
        assert text == "\n\nafter"
        assert extractor.log == ["Unclosed <style> element"]

    def test_diagnostics_are_logged(self):
        with self.assertLogs("htmltext", level="DEBUG") as captured:
            HtmlExtractText().extract("&bogus;")
        assert any("Unknown HTML entity: &bogus" in line for line in captured.output)


class TestStrictMode(unittest.TestCase):
    """With strict=True the first diagnostic is raised."""

    def strict(self):
        return HtmlExtractText(ExtractorOpts(strict=True))

    def test_strict_mode_raises(self):
        with self.assertRaises(StrictModeError) as ctx:
            self.strict().extract("<p>&bogus;</p>")
        assert ctx.exception.diagnostic.message == "Unknown HTML entity: &bogus"
        assert ctx.exception.diagnostic.position == 3

    def test_strict_error_is_syntax_error(self):
        with self.assertRaises(SyntaxError):
            self.strict().extract("a<!-- never closed")

    def test_strict_mode_clean_markup(self):
        assert self.strict().extract("<p>Hello &copy; 2024</p>") == "\n\nHello © 2024\n\n"

    def test_strict_mode_in_metadata(self):
        with self.assertRaises(StrictModeError):
            self.strict().extract("<title>&bogus;</title>")

    def test_strict_error_message(self):
        with self.assertRaises(StrictModeError) as ctx:
            self.strict().extract("<b oops")
        assert str(ctx.exception) == "Unterminated tag copied as text"

    def test_default_is_lenient(self):
        assert ExtractorOpts().strict is False
        assert HtmlExtractText().extract("<p>&bogus;</p>") == "\n\n?\n\n"


if __name__ == "__main__":
    unittest.main()
