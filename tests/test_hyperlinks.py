"""Tests for link discovery and stripping."""

import unittest

from htmltext import (
    HtmlHyperlinkParser,
    HtmlImageParser,
    Hyperlink,
    JavaScriptHyperlinkParser,
    strip_hyperlinks,
)


class TestHyperlinkParser(unittest.TestCase):
    def test_mixed_links(self):
        html = '<a href="a.html">x</a><img src="i.png"><script src="s.js"></script>'
        links = list(HtmlHyperlinkParser(html))
        assert [link.url for link in links] == ["a.html", "i.png", "s.js"]
        assert links[0] == Hyperlink(9, 6, "a.html")
        assert links[1].is_image and not links[1].is_javascript
        assert links[2].is_javascript and not links[2].is_image

    def test_span_points_into_source(self):
        html = '<p>see <A HREF="docs/index.html">docs</A></p>'
        link = HtmlHyperlinkParser(html)()
        assert html[link.start : link.start + link.length] == "docs/index.html"

    def test_without_images(self):
        html = '<img src="i.png"><a href="a.html">x</a>'
        assert [link.url for link in HtmlHyperlinkParser(html, include_image_links=False)] == ["a.html"]

    def test_frames_link_and_area(self):
        html = (
            '<link rel="stylesheet" href="site.css">'
            '<frame src="top.html"><iframe src="ad.html"></iframe>'
            '<map><area href="region.html"></map>'
        )
        assert [link.url for link in HtmlHyperlinkParser(html)] == ["site.css", "top.html", "ad.html", "region.html"]

    def test_anchor_without_href(self):
        assert list(HtmlHyperlinkParser('<a name="top">x</a>')) == []

    def test_script_literals(self):
        html = '<script>var u = "images/pic.gif"; var s = "hello";</script><a href="b.html">b</a>'
        links = list(HtmlHyperlinkParser(html))
        assert [link.url for link in links] == ["images/pic.gif", "b.html"]
        assert links[0].is_javascript

    def test_meta_refresh(self):
        html = '<meta http-equiv="refresh" content="5; url=http://x.com/next">'
        links = list(HtmlHyperlinkParser(html))
        assert [link.url for link in links] == ["http://x.com/next"]

    def test_other_meta_is_ignored(self):
        assert list(HtmlHyperlinkParser('<meta name="url" content="x">')) == []

    def test_base_url(self):
        html = '<html><head><base href="http://b.com/dir/"></head><body></body></html>'
        assert HtmlHyperlinkParser(html).base_url == "http://b.com/dir/"
        assert HtmlHyperlinkParser("<p>no head</p>").base_url == ""

    def test_basefont_is_not_base(self):
        html = '<head><basefont href="http://wrong.com/"><base href="http://b.com/"></head>'
        assert HtmlHyperlinkParser(html).base_url == "http://b.com/"
        assert HtmlHyperlinkParser('<head><basefont href="http://wrong.com/"></head>').base_url == ""

    def test_exhausted(self):
        parser = HtmlHyperlinkParser('<a href="x">')
        assert parser() is not None
        assert parser() is None
        assert parser() is None

    def test_empty(self):
        assert list(HtmlHyperlinkParser("")) == []
        assert list(HtmlHyperlinkParser(None)) == []

    def test_length_limit(self):
        html = '<a href="a.html">x</a><a href="b.html">y</a>'
        assert [link.url for link in HtmlHyperlinkParser(html, length=22)] == ["a.html"]


class TestImageParser(unittest.TestCase):
    def test_images(self):
        html = '<p><img src="a.png"><IMG SRC=b.png></p><a href="c.html">c</a>'
        links = list(HtmlImageParser(html))
        assert [link.url for link in links] == ["a.png", "b.png"]
        assert all(link.is_image for link in links)

    def test_image_without_src(self):
        assert list(HtmlImageParser('<img alt="x"><img src="y.png">')) == [Hyperlink(23, 5, "y.png", is_image=True)]


class TestJavaScriptParser(unittest.TestCase):
    def test_file_like_literals(self):
        text = 'x = "doc/file.html"; y = "a b.html"; z = "page.php"; w = "short"'
        links = list(JavaScriptHyperlinkParser(text))
        assert [link.url for link in links] == ["doc/file.html", "page.php"]
        assert links[0].start == text.index("doc/")

    def test_bounded(self):
        text = '"one.html" "two.html"'
        assert [link.url for link in JavaScriptHyperlinkParser(text, 0, 10)] == ["one.html"]

    def test_reuse(self):
        parser = JavaScriptHyperlinkParser()
        assert parser() is None
        parser.set('"a/b.jpeg"')
        assert parser().url == "a/b.jpeg"


class TestStripHyperlinks(unittest.TestCase):
    def test_anchor_wrappers_removed(self):
        html = 'See <a href="x.html">this page</a> now.'
        assert strip_hyperlinks(html) == "See this page now."

    def test_bookmarks_kept(self):
        html = 'See <a href="x.html">this</a> and <a name="top">here</a>.'
        assert strip_hyperlinks(html) == 'See this and <a name="top">here</a>.'

    def test_no_links(self):
        assert strip_hyperlinks("<p>plain</p>") == "<p>plain</p>"
        assert strip_hyperlinks("") == ""

    def test_unclosed_anchor(self):
        assert strip_hyperlinks('<a href="x">dangling') == "dangling"


if __name__ == "__main__":
    unittest.main()
