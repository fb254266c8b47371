"""Decoding of the text found between tags.

Character references, ``${...}`` template placeholders and (outside of
preformatted blocks) line endings are the only special characters; every
other character is copied, transliterated while inside ``<sup>``/``<sub>``.
"""

import re

from .constants import SOFT_HYPHEN, UNKNOWN_ENTITY
from .entities import decode_codepoint, lookup_entity, parse_numeric_reference, to_subscript, to_superscript
from .scan import find_first_of

_SPECIAL_RE = re.compile(r"[&$\r\n]")
_PREFORMATTED_SPECIAL_RE = re.compile(r"[&$]")

_ENTITY_TERMINATORS = ";< \t\n\r"

_SOFT_HYPHEN_CHAR = chr(SOFT_HYPHEN)


def _emit_literal(ctx, text, start, end):
    if start >= end:
        return
    if ctx.superscript_depth > 0:
        ctx.output.append("".join([to_superscript(c) for c in text[start:end]]))
    elif ctx.subscript_depth > 0:
        ctx.output.append("".join([to_subscript(c) for c in text[start:end]]))
    else:
        ctx.output.append(text[start:end])


def _decode_reference(ctx, text, amp, end):
    """Decode the reference starting at `amp`; return where scanning resumes."""
    emit = ctx.output.append
    if amp + 1 < end and text[amp + 1].isspace():
        # unencoded ampersand used as a word
        emit("& ")
        return amp + 2

    term = find_first_of(text, _ENTITY_TERMINATORS, amp + 1, end)
    if term == -1:
        term = end
        has_semicolon = False
    else:
        has_semicolon = text[term] == ";"
    name = text[amp + 1 : term]
    if not name:
        emit("&")
        return amp + 1
    resume = term + 1 if has_semicolon else term

    if name[0] == "#":
        codepoint = parse_numeric_reference(name[1:])
        if codepoint is None:
            raw = text[amp:resume]
            ctx.report(f"Invalid numeric HTML entity: {raw}", amp)
            emit(raw)
            return resume
        emit(decode_codepoint(codepoint))
        if not has_semicolon:
            ctx.report(f"Missing semicolon on HTML entity: {text[amp:term]}", amp)
        return resume

    value = lookup_entity(name)
    if value == _SOFT_HYPHEN_CHAR:
        return resume

    if value == UNKNOWN_ENTITY and not has_semicolon:
        # most likely a bare '&' glued to a word, e.g. "AT&T"
        ctx.report(f"Unencoded ampersand or unknown HTML entity: {text[amp:term]}", amp)
        emit(text[amp:term])
        return term

    if has_semicolon and value == "&":
        # "&amp;le;" written where "&le;" was meant
        nested_end = term + 1
        while nested_end < end and not text[nested_end].isspace() and text[nested_end] != ";":
            nested_end += 1
        if nested_end < end and text[nested_end] == ";":
            nested = lookup_entity(text[term + 1 : nested_end])
            if nested != UNKNOWN_ENTITY:
                ctx.report(f"Ampersand incorrectly encoded in HTML entity: {text[amp : nested_end + 1]}", amp)
                if nested != _SOFT_HYPHEN_CHAR:
                    emit(nested)
                return nested_end + 1

    emit(value)
    if value == UNKNOWN_ENTITY:
        ctx.report(f"Unknown HTML entity: {text[amp:term]}", amp)
    if not has_semicolon:
        # the terminator (space, newline, '<') is handled by the caller
        ctx.report(f"Missing semicolon on HTML entity: {text[amp:term]}", amp)
    return resume


def parse_raw_text(ctx, text, start=0, end=None):
    """Decode ``text[start:end]`` into ``ctx.output``."""
    if end is None or end > len(text):
        end = len(text)
    if start >= end:
        return
    pattern = _PREFORMATTED_SPECIAL_RE if ctx.preformatted_depth > 0 else _SPECIAL_RE
    emit = ctx.output.append
    run = start
    pos = start
    while True:
        match = pattern.search(text, pos, end)
        if match is None:
            break
        i = match.start()
        _emit_literal(ctx, text, run, i)
        c = text[i]
        if c == "&":
            pos = _decode_reference(ctx, text, i, end)
        elif c == "$":
            close = -1
            if i + 1 < end and text[i + 1] == "{":
                close = text.find("}", i + 2, end)
            if close == -1:
                emit("$")
                pos = i + 1
            else:
                pos = close + 1
        else:
            emit(" ")
            pos = i + 1
            if c == "\r" and pos < end and text[pos] == "\n":
                pos += 1
        run = pos
    _emit_literal(ctx, text, run, end)
