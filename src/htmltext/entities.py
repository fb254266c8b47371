"""Character reference and legacy font decoding.

Named references come from the HTML 4 set in ``html.entities`` (plus the
common ``apos``), with ``nbsp`` flattened to a plain space so extracted text
stays normalized. Unknown names decode to ``?`` and leave it to the caller
to report them.
"""

import html.entities
import re

from .constants import (
    LIGATURES,
    NUMERIC_REPLACEMENTS,
    SOFT_HYPHEN,
    SUBSCRIPTS,
    SUPERSCRIPTS,
    SYMBOL_FONT_TABLE,
    UNKNOWN_ENTITY,
)

_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")


class EntityTable:
    """Read-only entity name -> character mapping."""

    __slots__ = ("_table",)

    def __init__(self, codepoints=None):
        if codepoints is None:
            codepoints = html.entities.name2codepoint
        table = {name: chr(cp) for name, cp in codepoints.items()}
        table["apos"] = "'"
        table["nbsp"] = " "
        self._table = table

    def __contains__(self, name):
        return name in self._table or name.lower() in self._table

    def __len__(self):
        return len(self._table)

    def find(self, name):
        """Exact lookup, then lowercase, else ``?``."""
        value = self._table.get(name)
        if value is None:
            value = self._table.get(name.lower(), UNKNOWN_ENTITY)
        return value


ENTITY_TABLE = EntityTable()


def lookup_entity(name):
    return ENTITY_TABLE.find(name)


def parse_numeric_reference(body):
    """Parse the part after ``&#`` (``"960"``, ``"x3C0"``) into a code point.

    Like ``atoi`` only the leading digits count. Returns None when there
    are no digits at all.
    """
    if body[:1] in ("x", "X"):
        match = _HEX_RE.match(body, 1)
        return int(match.group(), 16) if match else None
    match = _DECIMAL_RE.match(body)
    return int(match.group(), 10) if match else None


def decode_codepoint(codepoint):
    """Text to emit for a numeric reference's code point (may be empty)."""
    if codepoint == SOFT_HYPHEN or codepoint == 0:
        return ""
    ligature = LIGATURES.get(codepoint)
    if ligature is not None:
        return ligature
    replacement = NUMERIC_REPLACEMENTS.get(codepoint)
    if replacement is not None:
        return replacement
    if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        return "\ufffd"
    return chr(codepoint)


def convert_symbol_font(text):
    """Map each character drawn with the legacy Symbol font to Unicode."""
    return "".join([SYMBOL_FONT_TABLE.get(c, c) for c in text])


def to_superscript(c):
    return SUPERSCRIPTS.get(c, c)


def to_subscript(c):
    return SUBSCRIPTS.get(c, c)
