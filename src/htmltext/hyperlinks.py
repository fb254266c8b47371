"""Link discovery in raw markup.

The parsers here are pull-style: each call returns the next ``Hyperlink``
(or None once the document is exhausted), and iterating over a parser
drains it. Links are reported exactly as written; resolving them against
a base URL is the job of ``htmltext.urls.HtmlUrlFormat``.
"""

import logging

from .constants import SAFE_URI_CHARS
from .locator import (
    compare_element,
    find_close_tag,
    find_closing_element,
    find_element,
    find_tag,
    read_attribute,
    read_attribute_as_string,
)
from .scan import find_first_of, find_ignore_case
from .tokens import Hyperlink

logger = logging.getLogger(__name__)


def _text_end(html, length):
    if length is None or length > len(html):
        return len(html)
    return max(length, 0)


class JavaScriptHyperlinkParser:
    """Finds quoted string literals in script code that look like file links.

    A literal qualifies when it is at least six characters long, has a
    three or four character extension and only holds URI-safe characters.
    """

    __slots__ = ("_end", "_pos", "_text")

    def __init__(self, text="", start=0, end=None):
        self.set(text, start, end)

    def set(self, text, start=0, end=None):
        self._text = text or ""
        self._pos = max(start, 0)
        self._end = _text_end(self._text, end)

    def __iter__(self):
        return iter(self, None)

    def __call__(self):
        text = self._text
        while self._pos < self._end:
            open_quote = text.find('"', self._pos, self._end)
            if open_quote == -1:
                break
            begin = open_quote + 1
            close_quote = text.find('"', begin, self._end)
            if close_quote == -1:
                break
            self._pos = close_quote + 1
            size = close_quote - begin
            if size < 6 or (text[close_quote - 4] != "." and text[close_quote - 5] != "."):
                continue
            if not SAFE_URI_CHARS.issuperset(text[begin:close_quote]):
                continue
            return Hyperlink(begin, size, text[begin:close_quote], is_javascript=True)
        self._pos = self._end
        return None


class HtmlImageParser:
    """Yields the ``src`` of every ``<img>``."""

    __slots__ = ("_end", "_html", "_pos")

    def __init__(self, html, length=None):
        self._html = html or ""
        self._end = _text_end(self._html, length)
        self._pos = 0

    def __iter__(self):
        return iter(self, None)

    def __call__(self):
        html = self._html
        while self._pos < self._end:
            image = find_element(html, "img", self._pos, self._end)
            if image == -1:
                break
            start, length = read_attribute(html, "src", False, True, image)
            if start != -1:
                self._pos = start + length
                return Hyperlink(start, length, html[start : start + length], is_image=True)
            self._pos = image + 4
        self._pos = self._end
        return None


class HtmlHyperlinkParser:
    """Yields every link in a page.

    Covers ``href`` on ``a``/``link``/``area``, ``src`` on ``img`` (unless
    image links are turned off), ``frame``, ``iframe`` and ``script``,
    file-like string literals inside script bodies, and the target of a
    ``<meta http-equiv="refresh">`` redirect. The ``<base href>`` declared
    in the page head is available as ``base_url``.
    """

    __slots__ = ("_end", "_html", "_in_script", "_javascript", "_pos", "_script_end", "base_url", "include_image_links")

    def __init__(self, html, length=None, include_image_links=True):
        self._html = html or ""
        self._end = _text_end(self._html, length)
        self._pos = 0
        self._in_script = False
        self._script_end = 0
        self._javascript = JavaScriptHyperlinkParser()
        self.include_image_links = bool(include_image_links)
        self.base_url = self._read_base_url()

    def __iter__(self):
        return iter(self, None)

    def _read_base_url(self):
        html = self._html
        head = find_ignore_case(html, "<head", 0, self._end)
        if head == -1:
            return ""
        base = find_element(html, "base", head, self._end)
        if base == -1:
            return ""
        href = find_ignore_case(html, "href=", base, self._end)
        if href == -1 or href + 5 >= self._end:
            return ""
        quoted = html[href + 5] in "\"'"
        start = href + 6 if quoted else href + 5
        while start < self._end and html[start].isspace():
            start += 1
        if start >= self._end:
            return ""
        stop = find_first_of(html, "\"'" if quoted else " \r\n\t>", start, self._end)
        if stop == -1:
            return ""
        return html[start:stop]

    def _next_script_link(self):
        link = self._javascript()
        if link is None:
            self._in_script = False
            self._pos = max(self._pos, self._script_end)
        return link

    def __call__(self):
        if self._in_script:
            link = self._next_script_link()
            if link is not None:
                return link

        html = self._html
        while True:
            lt = html.find("<", self._pos, self._end)
            if lt == -1 or lt + 1 >= self._end:
                self._pos = self._end
                return None
            name_start = lt + 1
            if html[name_start] == "/":
                self._pos = name_start
                continue

            is_image = compare_element(html, name_start, "img", True)
            is_script = compare_element(html, name_start, "script", True)
            if is_script:
                open_end = find_close_tag(html, lt, self._end)
                script_end = find_ignore_case(html, "</script>", lt, self._end)
                if open_end != -1 and script_end != -1:
                    self._javascript.set(html, open_end, script_end)
                    self._in_script = True
                    self._script_end = script_end

            if (
                (self.include_image_links and is_image)
                or is_script
                or compare_element(html, name_start, "frame", True)
                or compare_element(html, name_start, "iframe", True)
            ):
                start, length = read_attribute(html, "src", False, True, name_start)
                if start != -1:
                    self._pos = start + length
                    return Hyperlink(
                        start, length, html[start : start + length], is_image=is_image, is_javascript=is_script
                    )
                self._pos = name_start
                if self._in_script:
                    link = self._next_script_link()
                    if link is not None:
                        return link
                continue

            if (
                compare_element(html, name_start, "a", True)
                or compare_element(html, name_start, "link", True)
                or compare_element(html, name_start, "area", True)
            ):
                self._pos = name_start
                start, length = read_attribute(html, "href", False, True, name_start)
                if start != -1:
                    self._pos = start + length
                    return Hyperlink(start, length, html[start : start + length])
                continue

            self._pos = name_start
            if compare_element(html, name_start, "meta", True):
                http_equiv = read_attribute_as_string(html, "http-equiv", False, pos=name_start)
                if http_equiv.lower() != "refresh":
                    continue
                url = find_tag(html, "url=", True, name_start)
                if url == -1 or url >= self._end:
                    continue
                start = url + 4
                while start < self._end and (html[start].isspace() or html[start] == "'"):
                    start += 1
                stop = find_first_of(html, "'\">", start, self._end)
                if stop == -1 or stop == start:
                    logger.debug("Malformed meta refresh at %d", lt)
                    continue
                self._pos = stop
                return Hyperlink(start, stop - start, html[start:stop])


def strip_hyperlinks(html, length=None):
    """Copy of `html` with the ``<a ...>`` and ``</a>`` wrappers removed.

    Anchor text is kept, and named anchors (bookmarks) are left untouched.
    """
    if not html:
        return ""
    end = _text_end(html, length)
    pieces = []
    pos = last = 0
    while pos < end:
        anchor = find_element(html, "a", pos, end, True)
        if anchor == -1:
            break
        if find_tag(html, "name", False, anchor) != -1:
            pos = anchor + 2
            continue
        open_end = find_close_tag(html, anchor, end)
        if open_end == -1:
            break
        pieces.append(html[last:anchor])
        last = open_end + 1
        closing = find_closing_element(html, "a", open_end, end)
        if closing == -1:
            break
        pieces.append(html[last:closing])
        close_end = find_close_tag(html, closing, end)
        if close_end == -1:
            last = end
            break
        last = pos = close_end + 1
    pieces.append(html[last:end])
    return "".join(pieces)
