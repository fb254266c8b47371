"""HTML to plain text extraction.

The extractor walks the markup from one ``<`` to the next and dispatches on
the element name. Nothing is built in between: tags only decide what
separators to emit, and the text between two tags is handed to the raw-text
decoder. Malformed markup never raises; each recovery is recorded as a
diagnostic instead (or raises ``StrictModeError`` when strict mode is on).
"""

import logging

from .constants import (
    META_FIELDS,
    METADATA_ELEMENTS,
    PAGE_BREAK_VALUES,
    PARAGRAPH_ELEMENTS,
    QUIET_CLOSING_ELEMENTS,
    SKIPPED_ELEMENTS,
)
from .context import ExtractionContext, StrictModeError
from .decoder import parse_raw_text
from .entities import convert_symbol_font
from .locator import (
    find_close_tag,
    find_closing_element,
    get_element_name,
    read_attribute,
    read_attribute_as_string,
)
from .scan import collapse_whitespace, find_char_outside_quotes, find_ignore_case, startswith_ignore_case

logger = logging.getLogger(__name__)

__all__ = ["ExtractorOpts", "HtmlExtractText", "StrictModeError"]


class ExtractorOpts:
    __slots__ = ("discard_bom", "strict")

    def __init__(self, strict=False, discard_bom=True):
        self.strict = bool(strict)
        self.discard_bom = bool(discard_bom)


def _is_symbol_font(html, pos, attr, allow_quoted):
    start, _length = read_attribute(html, attr, allow_quoted, True, pos)
    return start != -1 and startswith_ignore_case(html, "symbol", start)


def _leave_inline_section(ctx, html, pos):
    """Drop one level of pre/sup/sub when the tag at `pos` closes it."""
    closer = html[pos : pos + 6].lower()
    if closer == "</pre>":
        if ctx.preformatted_depth > 0:
            ctx.preformatted_depth -= 1
    elif closer == "</sup>":
        if ctx.superscript_depth > 0:
            ctx.superscript_depth -= 1
    elif closer == "</sub>":
        if ctx.subscript_depth > 0:
            ctx.subscript_depth -= 1


class HtmlExtractText:
    """Converts HTML markup into plain text plus a few metadata fields.

    One instance can be reused; every call to ``extract`` (or to the
    instance itself) starts from a clean state.
    """

    __slots__ = ("_ctx", "_text", "author", "description", "keywords", "opts", "subject", "title")

    def __init__(self, opts=None):
        self.opts = opts or ExtractorOpts()
        self._ctx = ExtractionContext(strict=self.opts.strict)
        self._text = None
        self._reset_metadata()

    def __call__(self, html, length=None, include_outer_text=True, preserve_newlines=False):
        return self.extract(html, length, include_outer_text, preserve_newlines)

    def _reset_metadata(self):
        self.title = ""
        self.author = ""
        self.description = ""
        self.keywords = ""
        self.subject = ""

    @property
    def text(self):
        return self._text or ""

    @property
    def diagnostics(self):
        return self._ctx.diagnostics

    @property
    def log(self):
        return [str(d) for d in self._ctx.diagnostics]

    def extract(self, html, length=None, include_outer_text=True, preserve_newlines=False):
        """Return the plain text of `html`, or None when there is no input.

        `length` limits how much of `html` is read. Text before the first
        and after the last tag is only kept with `include_outer_text`.
        `preserve_newlines` treats the whole input as preformatted.
        """
        self._ctx.reset(preserve_newlines)
        self._reset_metadata()
        self._text = None
        if not html:
            return None
        if length is not None and length < len(html):
            if length <= 0:
                return None
            html = html[:length]

        begin = 1 if self.opts.discard_bom and html[0] == "\ufeff" else 0
        self._scan(html, begin, include_outer_text)
        self._text = self._ctx.output.getvalue()
        logger.debug(
            "Extracted %d characters from %d characters of markup (%d diagnostics)",
            len(self._text),
            len(html),
            len(self._ctx.diagnostics),
        )
        return self._text

    def _extract_value(self, value):
        """Run a fresh extractor over markup held in a tag or attribute."""
        if not value:
            return ""
        child = HtmlExtractText(self.opts)
        try:
            result = child.extract(value, include_outer_text=True, preserve_newlines=False)
        finally:
            self._ctx.diagnostics.extend(child.diagnostics)
        return collapse_whitespace(result or "")

    def _scan(self, html, begin, include_outer_text):
        ctx = self._ctx
        emit = ctx.emit
        end_sentinel = len(html)

        start = html.find("<", begin)
        if start == -1:
            if include_outer_text:
                parse_raw_text(ctx, html, begin, end_sentinel)
            return
        if start > begin and include_outer_text:
            parse_raw_text(ctx, html, begin, start)

        end = -1
        while start != -1 and start < end_sentinel:
            remaining = end_sentinel - start
            name = get_element_name(html, start + 1, True).lower()
            is_symbol_font_section = False

            if html.startswith("<!--", start):
                close = html.find("-->", start + 2)
                if close == -1:
                    # the rest of the document is one big comment
                    ctx.report("Unterminated comment; ignoring the rest of the document", start)
                    end = end_sentinel
                    break
                end = close + 3

            elif name in SKIPPED_ELEMENTS:
                close = find_ignore_case(html, f"</{name}>", start)
                if close == -1:
                    ctx.report(f"Unclosed <{name}> element", start)
                    open_end = find_close_tag(html, start)
                    next_lt = html.find("<", open_end) if open_end != -1 else -1
                    if next_lt == -1:
                        end = end_sentinel
                        break
                    end = next_lt
                else:
                    end = close + len(name) + 3

            elif name == "meta":
                open_end = find_close_tag(html, start)
                if open_end == -1:
                    end = end_sentinel
                    break
                field = read_attribute_as_string(html, "name", False, pos=start).lower()
                if field in META_FIELDS and not getattr(self, field):
                    content = read_attribute_as_string(html, "content", False, True, pos=start)
                    setattr(self, field, self._extract_value(content))
                end = open_end + 1

            elif name in METADATA_ELEMENTS:
                open_end = find_close_tag(html, start)
                if open_end == -1:
                    end = end_sentinel
                    break
                close = find_ignore_case(html, f"</{name}>", open_end + 1)
                if close == -1:
                    ctx.report(f"Unclosed <{name}> element", start)
                    next_lt = html.find("<", open_end + 1)
                    if next_lt == -1:
                        end = end_sentinel
                        break
                    end = next_lt
                else:
                    if not getattr(self, name):
                        setattr(self, name, self._extract_value(html[open_end + 1 : close]))
                    end = close + len(name) + 3

            elif (remaining >= 2 and html[start + 1].isspace()) or (
                remaining >= 7 and html[start + 1 : start + 7].lower() == "&nbsp;"
            ):
                # an unencoded '<' in running text
                next_lt = html.find("<", start + 1)
                if next_lt == -1:
                    parse_raw_text(ctx, html, start, end_sentinel)
                    end = end_sentinel
                    break
                parse_raw_text(ctx, html, start, next_lt)
                start = next_lt
                _leave_inline_section(ctx, html, start)
                continue

            elif name.startswith("![cdata["):
                body = start + 9
                close = html.find("]]>", body)
                if close == -1:
                    ctx.report("Unterminated CDATA section", start)
                    ctx.preformatted_depth += 1
                    parse_raw_text(ctx, html, body, end_sentinel)
                    ctx.preformatted_depth -= 1
                    end = end_sentinel
                    break
                emit(html[body:close])
                end = close + 3

            else:
                close = find_close_tag(html, start + 1)
                next_open = find_char_outside_quotes(html, "<", start + 1)
                if close == -1 or (next_open != -1 and next_open < close):
                    # no ">" before the next "<": keep it as text up to that "<"
                    ctx.report("Unterminated tag copied as text", start)
                    next_lt = html.find("<", start + 1)
                    if next_lt == -1:
                        parse_raw_text(ctx, html, start, end_sentinel)
                        end = end_sentinel
                        break
                    parse_raw_text(ctx, html, start, next_lt)
                    start = next_lt
                    _leave_inline_section(ctx, html, start)
                    continue

                if name == "font":
                    is_symbol_font_section = _is_symbol_font(html, start + 1, "face", False) or _is_symbol_font(
                        html, start + 1, "font-family", True
                    )
                else:
                    is_symbol_font_section = _is_symbol_font(html, start + 1, "font-family", True)

                if name == "pre":
                    ctx.preformatted_depth += 1
                elif name == "sup":
                    ctx.superscript_depth += 1
                elif name == "sub":
                    ctx.subscript_depth += 1
                elif name in PARAGRAPH_ELEMENTS:
                    emit("\n\n")
                    page_break = read_attribute_as_string(html, "page-break-before", True, False, start + 1)
                    if page_break.lower().startswith(PAGE_BREAK_VALUES):
                        emit("\f")
                elif name == "br":
                    emit("\n")
                elif name.startswith("/"):
                    if name[1:] in PARAGRAPH_ELEMENTS and name not in QUIET_CLOSING_ELEMENTS:
                        emit("\n\n")
                elif name == "li":
                    emit("\n\t")
                elif name == "td":
                    emit("\t")
                elif name == "dd":
                    emit(":\t")
                elif name == "a":
                    href = read_attribute_as_string(html, "href", False, False, start + 1).lower()
                    # e-mail and phone links are often glued to the preceding word
                    if href.startswith(("mailto:", "tel:")):
                        emit(" ")
                    if "FooterLink" in read_attribute_as_string(html, "class", False, True, start + 1):
                        emit("\n\n")
                elif name == "span":
                    data_type = read_attribute_as_string(html, "data-type", False, False, start + 1)
                    if data_type == "newline":
                        emit("\n")
                    elif data_type == "footnote-ref-content":
                        emit("\t")
                    css_class = read_attribute_as_string(html, "class", False, True, start + 1)
                    if css_class:
                        if "BookBanner" in css_class or css_class == "os-caption":
                            emit("\n\n")
                        elif css_class == "os-term-section":
                            emit("\t")
                        elif "hidden" in css_class:
                            # drop the whole span, resuming after its </span>
                            span_end = find_closing_element(html, "span", start)
                            span_close = find_close_tag(html, span_end + 1) if span_end != -1 else -1
                            if span_close != -1:
                                close = span_close
                end = close + 1

            start = html.find("<", end)
            if start == -1:
                break
            mark = len(ctx.output)
            parse_raw_text(ctx, html, end, start)
            if is_symbol_font_section:
                converted = convert_symbol_font(ctx.output.pop_since(mark))
                emit(converted)
                if converted:
                    ctx.report(f'Symbol font used for the following: "{converted}"', end)

            _leave_inline_section(ctx, html, start)

        if include_outer_text and 0 <= end < end_sentinel:
            parse_raw_text(ctx, html, end, end_sentinel)
