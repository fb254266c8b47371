"""Tests for the ``python -m htmltext`` command line."""

import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from htmltext.__main__ import main, read_document


class TestCommandLine(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def write(self, content, name="page.html"):
        path = Path(self._tmp.name) / name
        path.write_bytes(content)
        return str(path)

    def run_main(self, *argv):
        out = io.StringIO()
        err = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_prints_text(self):
        path = self.write("<p>Caf&eacute; au lait</p>".encode())
        code, out, err = self.run_main(path)
        assert code == 0
        assert "Café au lait" in out
        assert err == ""

    def test_declared_charset(self):
        html = '<meta http-equiv="Content-Type" content="text/html; charset=iso-8859-1"><p>Caf\xe9</p>'
        path = self.write(html.encode("latin-1"))
        assert read_document(path).endswith("Caf\xe9</p>")
        code, out, _err = self.run_main(path)
        assert code == 0
        assert "Caf\xe9" in out

    def test_unknown_charset_falls_back_to_utf8(self):
        path = self.write('<meta charset="no-such-codec"><p>ok</p>'.encode())
        with self.assertLogs("htmltext", level="WARNING"):
            assert read_document(path).endswith("<p>ok</p>")

    def test_metadata(self):
        path = self.write(b'<title>T</title><meta name="author" content="Ann"><p>x</p>')
        code, out, _err = self.run_main(path, "--metadata")
        assert code == 0
        assert "title: T" in out
        assert "author: Ann" in out

    def test_links(self):
        path = self.write(b'<p><a href="y.html">y</a><img src="i.png"></p>')
        code, out, _err = self.run_main(path, "--links", "--base-url", "http://a.com/x/")
        assert code == 0
        assert "http://a.com/x/y.html" in out
        assert "http://a.com/x/i.png" in out

    def test_diagnostics_go_to_stderr(self):
        path = self.write(b"<p>&bogus;</p>")
        code, out, err = self.run_main(path)
        assert code == 0
        assert "?" in out
        assert "Unknown HTML entity: &bogus" in err

    def test_strict_failure(self):
        path = self.write(b"<p>&bogus;</p>")
        code, _out, err = self.run_main(path, "--strict")
        assert code == 1
        assert "Unknown HTML entity" in err

    def test_missing_file(self):
        code, _out, err = self.run_main(str(Path(self._tmp.name) / "missing.html"))
        assert code == 2
        assert "cannot read" in err

    def test_no_outer_text(self):
        path = self.write(b"lead<b>x</b>trail")
        _code, out, _err = self.run_main(path, "--no-outer-text")
        assert out == "x\n"


if __name__ == "__main__":
    unittest.main()
