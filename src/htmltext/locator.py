"""Tag, attribute and element location over raw markup.

Every function takes the whole document plus integer positions and returns
positions back into it, so nothing is copied while searching. Missing
results are -1 (positions), ``(-1, 0)`` (spans) or an empty string.
"""

import re

from .scan import (
    find_first_of,
    find_ignore_case,
    find_substring_outside_quotes,
)

NOT_FOUND = (-1, 0)

# Value terminators, keyed by (allow_quoted, allow_spaces_in_value).
_VALUE_TERMINATORS = {
    (True, True): "\"'>;",
    (True, False): " \"'>;",
    (False, True): "\"'>",
    (False, False): " \"'>",
}

_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+")


def find_close_tag(text, pos=0, end=None):
    """Return the index of the ``>`` closing the tag at `pos`, or -1.

    A leading ``<`` is skipped; ``<``/``>`` pairs nested inside the tag and
    anything inside quotes are stepped over.
    """
    if not text or pos < 0:
        return -1
    length = len(text)
    if end is None or end > length:
        end = length
    if pos < end and text[pos] == "<":
        pos += 1
    in_quotes = False
    in_single_quotes = False
    open_tags = 0
    for i in range(pos, end):
        c = text[i]
        if c == '"':
            in_quotes = not in_quotes
            in_single_quotes = False
        elif c == "'" and (not in_quotes or in_single_quotes):
            in_quotes = not in_quotes
            in_single_quotes = True
        elif in_quotes:
            continue
        elif c == "<":
            open_tags += 1
        elif c == ">":
            if open_tags == 0:
                return i
            open_tags -= 1
    return -1


def find_tag(text, tag, allow_quoted, pos=0):
    """Find attribute (or CSS property) `tag` inside the element at `pos`.

    Only whole tokens count: the match has to sit at `pos` or follow
    whitespace, ``;`` or (with `allow_quoted`) a quote, so ``color`` is not
    found inside ``bgcolor``.
    """
    if not text or not tag or pos < 0:
        return -1
    element_end = find_close_tag(text, pos)
    if element_end == -1:
        return -1
    found = pos
    while True:
        if allow_quoted:
            found = find_ignore_case(text, tag, found, element_end)
        else:
            found = find_substring_outside_quotes(text, tag, found, element_end)
        if found == -1:
            return -1
        if found == pos:
            return found
        previous = text[found - 1]
        if allow_quoted and previous in "'\"":
            return found
        if previous.isspace() or previous == ";":
            return found
        found += len(tag)


def read_attribute(text, attr, allow_quoted, allow_spaces_in_value=False, pos=0):
    """Return the ``(start, length)`` span of `attr`'s value, or ``(-1, 0)``."""
    if not text or not attr:
        return NOT_FOUND
    found = find_tag(text, attr, allow_quoted, pos)
    element_end = find_close_tag(text, pos)
    if found == -1 or element_end == -1 or found >= element_end:
        return NOT_FOUND

    i = found + len(attr)
    while i < element_end and text[i] == " ":
        i += 1
    if i < element_end and text[i] in ":=":
        i += 1
    while i < element_end and text[i] == " ":
        i += 1
    if i < element_end and text[i] in "'\"":
        i += 1
    if i >= element_end:
        return NOT_FOUND

    stop = find_first_of(text, _VALUE_TERMINATORS[(bool(allow_quoted), bool(allow_spaces_in_value))], i)
    if stop == -1 or stop > element_end:
        return NOT_FOUND
    # '/' is legal inside a value (paths), so it is only trimmed right before '>'
    if text[stop] == ">":
        while stop - 1 > i and text[stop - 1] in "/ ":
            stop -= 1
    if stop == i:
        return NOT_FOUND
    return i, stop - i


def read_attribute_as_string(text, attr, allow_quoted, allow_spaces_in_value=False, pos=0):
    start, length = read_attribute(text, attr, allow_quoted, allow_spaces_in_value, pos)
    if start == -1:
        return ""
    return text[start : start + length]


def read_attribute_as_int(text, attr, allow_quoted, pos=0):
    """Leading integer of the attribute value; 0 when missing or not numeric."""
    value = read_attribute_as_string(text, attr, allow_quoted, False, pos)
    match = _LEADING_INT_RE.match(value)
    return int(match.group()) if match else 0


def _is_element_boundary(text, pos, accept_self_terminating):
    if pos >= len(text):
        return False
    c = text[pos]
    if c == ">":
        return True
    if accept_self_terminating:
        return c == "/" or c.isspace()
    if c.isspace():
        # attributes follow; make sure the tag is not closed with "/>"
        close = find_close_tag(text, pos)
        if close == -1:
            return False
        j = close - 1
        while j > pos and text[j].isspace():
            j -= 1
        return text[j] != "/"
    return False


def compare_element(text, pos, element, accept_self_terminating=False):
    """True if the element name at `pos` (just after ``<``) is exactly `element`."""
    if not text or not element or pos < 0:
        return False
    size = len(element)
    if text[pos : pos + size].lower() != element.lower():
        return False
    return _is_element_boundary(text, pos + size, accept_self_terminating)


def compare_element_case_sensitive(text, pos, element, accept_self_terminating=False):
    if not text or not element or pos < 0:
        return False
    if not text.startswith(element, pos):
        return False
    return _is_element_boundary(text, pos + len(element), accept_self_terminating)


def get_element_name(text, pos, accept_self_terminating=True):
    """Name of the element starting at `pos` (just after ``<``), as written.

    The name runs up to whitespace, ``>`` or, when `accept_self_terminating`
    is set, a closing ``/>``. Closing tags keep their leading ``/``.
    """
    if not text or pos < 0:
        return ""
    length = len(text)
    i = pos
    while i < length:
        c = text[i]
        if c == ">" or c.isspace():
            break
        if accept_self_terminating and c == "/" and i + 1 < length and text[i + 1] == ">":
            break
        i += 1
    return text[pos:i]


def find_element(text, element, start=0, end=None, accept_self_terminating=True):
    """Position of the ``<`` of the next `element` in ``[start, end)``, or -1."""
    if not text or not element or start < 0:
        return -1
    if end is None or end > len(text):
        end = len(text)
    size = len(element)
    while start + size < end:
        lt = text.find("<", start, end)
        if lt == -1 or lt + size > end:
            return -1
        if compare_element(text, lt + 1, element, accept_self_terminating):
            return lt
        start = lt + 1
    return -1


def find_closing_element(text, element, start=0, end=None):
    """Position of the ``<`` of the ``</element>`` balancing the one at `start`.

    Nested elements of the same name are counted so their closers are
    skipped. Returns -1 when the document ends first.
    """
    if not text or not element or start < 0:
        return -1
    if end is None or end > len(text):
        end = len(text)
    size = len(element)
    lt = text.find("<", start)
    if lt == -1 or lt + size > end:
        return -1
    if compare_element(text, lt + 1, element, True):
        # step past the opener so it is not counted again below
        start = lt + 1 + size
    elif text.startswith("/", lt + 1) and compare_element(text, lt + 2, element, True):
        return lt

    depth = 1
    lt = text.find("<", start)
    while lt != -1 and lt + size + 1 < end:
        if text.startswith("/", lt + 1) and compare_element(text, lt + 2, element, True):
            depth -= 1
        elif compare_element(text, lt + 1, element, True):
            depth += 1
        if depth == 0:
            return lt
        lt = text.find("<", lt + 1)
    return -1


def read_element_as_string(text, element, start=0, end=None):
    """Trimmed inner markup of the first `element` in ``[start, end)``."""
    if end is None or end > len(text):
        end = len(text)
    element_start = find_element(text, element, start, end)
    if element_start == -1:
        return ""
    element_end = find_closing_element(text, element, element_start, end)
    open_end = find_close_tag(text, element_start)
    if element_end == -1 or open_end == -1:
        return ""
    return text[open_end + 1 : element_end].strip()


def find_bookmark(text, start=0, end=None):
    """Return ``(position, name)`` of the next ``<a name=...>`` in the section.

    A leading ``#`` is dropped from the name. Anchors without a name are
    skipped; ``(-1, "")`` when none is left.
    """
    while True:
        anchor = find_element(text, "a", start, end)
        if anchor == -1:
            return -1, ""
        name_start, name_length = read_attribute(text, "name", False, pos=anchor)
        if name_start != -1 and name_length > 0:
            if text[name_start] == "#":
                name_start += 1
                name_length -= 1
            return anchor, text[name_start : name_start + name_length]
        start = anchor + 1
