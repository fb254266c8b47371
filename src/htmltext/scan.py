"""Low-level scanning primitives shared by the locator and the extractor.

All functions work on positions into the original string and return -1 when
nothing is found; none of them raise on empty or out-of-range input.
"""

import re
from functools import lru_cache


def _bounds(text, pos, end):
    length = len(text)
    if end is None or end > length:
        end = length
    if pos < 0:
        pos = 0
    return pos, end


def find_char_outside_quotes(text, ch, pos=0, end=None):
    """Return the index of the first `ch` that is not inside a quoted run.

    A double quote toggles the quoted state and also closes an open single
    quote; a single quote only counts when we are not inside double quotes.
    """
    if not text or not ch:
        return -1
    pos, end = _bounds(text, pos, end)
    in_quotes = False
    in_single_quotes = False
    for i in range(pos, end):
        c = text[i]
        if c == '"':
            in_quotes = not in_quotes
            in_single_quotes = False
        elif c == "'" and (not in_quotes or in_single_quotes):
            in_quotes = not in_quotes
            in_single_quotes = True
        if not in_quotes and c == ch:
            return i
    return -1


def find_substring_outside_quotes(text, needle, pos=0, end=None):
    """Case-insensitive search for `needle` that skips quoted matches."""
    if not text or not needle:
        return -1
    pos, end = _bounds(text, pos, end)
    needle = needle.lower()
    first = needle[0]
    size = len(needle)
    in_quotes = False
    in_single_quotes = False
    i = pos
    while i + size <= end:
        c = text[i]
        if c.lower() == first and text[i : i + size].lower() == needle:
            if not in_quotes:
                return i
            # quoted match: step over it, still tracking quotes inside it
            stop = i + size
            while i < stop:
                c = text[i]
                if c == '"':
                    in_quotes = not in_quotes
                    in_single_quotes = False
                elif c == "'" and (not in_quotes or in_single_quotes):
                    in_quotes = not in_quotes
                    in_single_quotes = True
                i += 1
            continue
        if c == '"':
            in_quotes = not in_quotes
            in_single_quotes = False
        elif c == "'" and (not in_quotes or in_single_quotes):
            in_quotes = not in_quotes
            in_single_quotes = True
        i += 1
    return -1


@lru_cache(maxsize=128)
def _ignore_case_pattern(needle):
    return re.compile(re.escape(needle), re.IGNORECASE)


@lru_cache(maxsize=64)
def _char_set_pattern(chars):
    return re.compile(f"[{re.escape(chars)}]")


def find_ignore_case(text, needle, pos=0, end=None):
    if not text or not needle:
        return -1
    pos, end = _bounds(text, pos, end)
    match = _ignore_case_pattern(needle).search(text, pos, end)
    return match.start() if match else -1


def find_first_of(text, chars, pos=0, end=None):
    """Index of the first character of `text[pos:end]` found in `chars`."""
    if not text or not chars:
        return -1
    pos, end = _bounds(text, pos, end)
    match = _char_set_pattern(chars).search(text, pos, end)
    return match.start() if match else -1


def startswith_ignore_case(text, prefix, pos=0):
    if pos < 0:
        return False
    return text[pos : pos + len(prefix)].lower() == prefix.lower()


def collapse_whitespace(value):
    """Trim `value` and fold every whitespace run into one space."""
    return " ".join(value.split())
