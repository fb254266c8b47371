"""Whole-document helpers: body and style sections, declared charset."""

from .scan import find_ignore_case


def get_body(text):
    """Inner markup of ``<body>``; the whole text when there is no body."""
    body = find_ignore_case(text, "<body")
    if body != -1:
        body = text.find(">", body)
        if body == -1:
            return text
        body += 1
        body_end = find_ignore_case(text, "</body>", body)
        if body_end != -1:
            return text[body:body_end]
    return text


def get_style_section(text):
    """Trimmed contents of the first ``<style>``, without a ``<!-- -->`` wrapper."""
    style = find_ignore_case(text, "<style")
    if style == -1:
        return ""
    style = text.find(">", style)
    if style == -1:
        return ""
    style_end = find_ignore_case(text, "</style>", style)
    if style_end == -1:
        return ""
    section = text[style + 1 : style_end].strip()
    if len(section) > 4 and section.startswith("<!--"):
        section = section[4:]
    if len(section) > 3 and section.endswith("-->"):
        section = section[:-3]
    return section.strip()


def _content_type_charset(content):
    start = find_ignore_case(content, "<meta")
    if start == -1:
        return None
    # find the <meta> that carries both content-type and content=
    while True:
        next_gt = content.find(">", start)
        content_type = find_ignore_case(content, "content-type", start)
        content_attr = find_ignore_case(content, " content=", start)
        if next_gt == -1 or content_type == -1 or content_attr == -1:
            return None
        if content_type < next_gt and content_attr < next_gt:
            start = content_attr + 9
            break
        start = find_ignore_case(content, "<meta", next_gt)
        if start == -1:
            return None

    if start < len(content) and content[start] in "\"'":
        start += 1
    stops = [p for p in (content.find(">", start), content.find("/>", start)) if p != -1]
    if not stops:
        return None
    tag_end = min(stops)

    charset = find_ignore_case(content, "charset=", start, tag_end)
    if charset != -1:
        start = charset + 8
    else:
        semicolon = content.find(";", start, tag_end)
        if semicolon == -1:
            return None
        start = semicolon + 1
    while start < tag_end and content[start] in " '":
        start += 1
    stop = start
    while stop < tag_end and content[stop] not in " '\"/>":
        stop += 1
    return content[start:stop]


def _meta_charset(content):
    # <meta charset="utf-8">
    start = find_ignore_case(content, "<meta charset=")
    if start == -1:
        return None
    start += 14
    if start < len(content) and content[start] in "\"'":
        start += 1
    stop = start
    while stop < len(content) and content[stop] not in " '\"/>":
        stop += 1
    return content[start:stop] or None


def _xml_encoding(content):
    if not content.startswith("<?xml"):
        return None
    encoding = content.find('encoding="')
    if encoding == -1:
        return None
    encoding += 10
    stop = content.find('"', encoding)
    return content[encoding:stop] if stop != -1 else None


def parse_charset(content, length=None):
    """Charset label declared by a page, or "" when it declares none.

    `content` may be ``str`` or raw ``bytes``; declarations are ASCII, so
    bytes are read as Latin-1 just for the search.
    """
    if not content:
        return ""
    if length is not None:
        content = content[:length]
    if isinstance(content, (bytes, bytearray)):
        content = bytes(content).decode("latin-1")
    if find_ignore_case(content, "<meta") == -1:
        return _xml_encoding(content) or ""
    return _content_type_charset(content) or _meta_charset(content) or ""
