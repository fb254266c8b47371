"""Text Extraction Constants

This module defines the fixed tables used while turning HTML into plain text.
Element sets are plain frozensets of lowercase names; character tables are
dicts keyed by a single character (or code point for numeric references).

Usage:
    from htmltext.constants import PARAGRAPH_ELEMENTS, SYMBOL_FONT_TABLE
"""

import string

# Elements whose opening (and, with a few exceptions, closing) tag starts a
# new paragraph in the extracted text.
PARAGRAPH_ELEMENTS = frozenset(
    [
        "button",
        "div",
        "dl",
        "dt",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "input",
        "ol",
        "option",
        "p",
        "select",
        "table",
        "tr",
        "ul",
    ]
)

# Closing tags that do not emit a paragraph break; the enclosing
# </table>, </dl> or </select> does that.
QUIET_CLOSING_ELEMENTS = frozenset(["/tr", "/dt", "/option"])

# Elements whose whole body is skipped.
SKIPPED_ELEMENTS = frozenset(["script", "style", "noscript", "annotation", "annotation-xml"])

# <meta name="..."> values that are copied into metadata fields.
META_FIELDS = frozenset(["author", "description", "keywords"])

# Element-bodied metadata: <title> and the Library of Congress <subject>.
METADATA_ELEMENTS = frozenset(["title", "subject"])

PAGE_BREAK_VALUES = ("always", "auto", "left", "right")

SOFT_HYPHEN = 173

UNKNOWN_ENTITY = "?"

# Alphabetic presentation forms (U+FB00..U+FB06) spelled out.
LIGATURES = {
    0xFB00: "ff",
    0xFB01: "fi",
    0xFB02: "fl",
    0xFB03: "ffi",
    0xFB04: "ffl",
    0xFB05: "ft",
    0xFB06: "st",
}

# Numeric references in the C1 range that browsers read as windows-1252.
NUMERIC_REPLACEMENTS = {
    0x80: "€",  # EURO SIGN
    0x82: "‚",  # SINGLE LOW-9 QUOTATION MARK
    0x83: "ƒ",  # LATIN SMALL LETTER F WITH HOOK
    0x84: "„",  # DOUBLE LOW-9 QUOTATION MARK
    0x85: "…",  # HORIZONTAL ELLIPSIS
    0x86: "†",  # DAGGER
    0x87: "‡",  # DOUBLE DAGGER
    0x88: "ˆ",  # MODIFIER LETTER CIRCUMFLEX ACCENT
    0x89: "‰",  # PER MILLE SIGN
    0x8a: "Š",  # LATIN CAPITAL LETTER S WITH CARON
    0x8b: "‹",  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    0x8c: "Œ",  # LATIN CAPITAL LIGATURE OE
    0x8e: "Ž",  # LATIN CAPITAL LETTER Z WITH CARON
    0x91: "‘",  # LEFT SINGLE QUOTATION MARK
    0x92: "’",  # RIGHT SINGLE QUOTATION MARK
    0x93: "“",  # LEFT DOUBLE QUOTATION MARK
    0x94: "”",  # RIGHT DOUBLE QUOTATION MARK
    0x95: "•",  # BULLET
    0x96: "–",  # EN DASH
    0x97: "—",  # EM DASH
    0x98: "˜",  # SMALL TILDE
    0x99: "™",  # TRADE MARK SIGN
    0x9a: "š",  # LATIN SMALL LETTER S WITH CARON
    0x9b: "›",  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    0x9c: "œ",  # LATIN SMALL LIGATURE OE
    0x9e: "ž",  # LATIN SMALL LETTER Z WITH CARON
    0x9f: "Ÿ",  # LATIN CAPITAL LETTER Y WITH DIAERESIS
}

# Legacy "Symbol" font: the character typed in the markup -> the glyph the
# font actually draws.
SYMBOL_FONT_TABLE = {
    # Greek alphabet
    "A": "Α",  # Alpha
    "B": "Β",  # Beta
    "G": "Γ",  # Gamma
    "D": "Δ",  # Delta
    "E": "Ε",  # Epsilon
    "Z": "Ζ",  # Zeta
    "H": "Η",  # Eta
    "Q": "Θ",  # Theta
    "I": "Ι",  # Iota
    "K": "Κ",  # Kappa
    "L": "Λ",  # Lambda
    "M": "Μ",  # Mu
    "N": "Ν",  # Nu
    "X": "Ξ",  # Xi
    "O": "Ο",  # Omicron
    "P": "Π",  # Pi
    "R": "Ρ",  # Rho
    "S": "Σ",  # Sigma
    "T": "Τ",  # Tau
    "U": "Υ",  # Upsilon
    "F": "Φ",  # Phi
    "C": "Χ",  # Chi
    "Y": "Ψ",  # Psi
    "W": "Ω",  # Omega
    "a": "α",  # alpha
    "b": "β",  # beta
    "g": "γ",  # gamma
    "d": "δ",  # delta
    "e": "ε",  # epsilon
    "z": "ζ",  # zeta
    "h": "η",  # eta
    "q": "θ",  # theta
    "i": "ι",  # iota
    "k": "κ",  # kappa
    "l": "λ",  # lambda
    "m": "μ",  # mu
    "n": "ν",  # nu
    "x": "ξ",  # xi
    "o": "ο",  # omicron
    "p": "π",  # pi
    "r": "ρ",  # rho
    "V": "ς",  # final sigma
    "s": "σ",  # sigma
    "t": "τ",  # tau
    "u": "υ",  # upsilon
    "f": "φ",  # phi
    "c": "χ",  # chi
    "y": "ψ",  # psi
    "w": "ω",  # omega
    "J": "ϑ",  # theta symbol
    "¡": "ϒ",  # upsilon with hook
    "j": "ϕ",  # phi symbol
    "v": "ϖ",  # pi symbol
    # Arrows
    "«": "↔",
    "¬": "←",
    "\u00ad": "↑",
    "®": "→",
    "¯": "↓",
    "¿": "↵",
    "Û": "⇔",
    "Ü": "⇐",
    "Ý": "⇑",
    "Þ": "⇒",
    "ß": "⇓",
    # Math
    '"': "∀",
    "$": "∃",
    "'": "∍",
    "*": "∗",
    "-": "−",
    "@": "≅",
    "\\": "∴",
    "^": "⊥",
    "~": "∼",
    "£": "≤",
    "¥": "∞",
    "³": "≥",
    "µ": "∝",
    "¶": "∂",
    "·": "∙",
    "¹": "≠",
    "º": "≡",
    "»": "≈",
    "Ä": "⊗",
    "Å": "⊕",
    "Æ": "∅",
    "Ç": "∩",
    "È": "∪",
    "É": "⊃",
    "Ê": "⊇",
    "Ë": "⊄",
    "Ì": "⊂",
    "Í": "⊆",
    "Î": "∈",
    "Ï": "∉",
    "Ð": "∠",
    "Ñ": "∇",
    "Õ": "∏",
    "Ö": "√",
    "×": "⋅",
    "Ù": "∧",
    "Ú": "∨",
    "å": "∑",
    "ò": "∫",
    "à": "◊",
    "½": "⏐",
    "¾": "⎯",
    "á": "\u2329",
    "æ": "⎛",
    "ç": "⎜",
    "è": "⎝",
    "é": "⎡",
    "ê": "⎢",
    "ë": "⎣",
    "ì": "⎧",
    "í": "⎨",
    "î": "⎩",
    "ï": "⎪",
    "ñ": "\u232a",
    "ó": "⌠",
    "ô": "⎮",
    "õ": "⌡",
    "ö": "⎞",
    "÷": "⎟",
    "ø": "⎠",
    "ù": "⎤",
    "ú": "⎥",
    "û": "⎦",
    "ü": "⎫",
    "ý": "⎬",
    "þ": "⎭",
    "´": "×",  # multiplication sign
    "¸": "÷",  # division sign
    "Ø": "¬",  # not sign
}

SUPERSCRIPTS = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
    "+": "⁺",
    "-": "⁻",
    "=": "⁼",
    "(": "⁽",
    ")": "⁾",
    "a": "ᵃ",
    "b": "ᵇ",
    "c": "ᶜ",
    "d": "ᵈ",
    "e": "ᵉ",
    "f": "ᶠ",
    "g": "ᵍ",
    "h": "ʰ",
    "i": "ⁱ",
    "j": "ʲ",
    "k": "ᵏ",
    "l": "ˡ",
    "m": "ᵐ",
    "n": "ⁿ",
    "o": "ᵒ",
    "p": "ᵖ",
    "r": "ʳ",
    "s": "ˢ",
    "t": "ᵗ",
    "u": "ᵘ",
    "v": "ᵛ",
    "w": "ʷ",
    "x": "ˣ",
    "y": "ʸ",
    "z": "ᶻ",
}

SUBSCRIPTS = {
    "0": "₀",
    "1": "₁",
    "2": "₂",
    "3": "₃",
    "4": "₄",
    "5": "₅",
    "6": "₆",
    "7": "₇",
    "8": "₈",
    "9": "₉",
    "+": "₊",
    "-": "₋",
    "=": "₌",
    "(": "₍",
    ")": "₎",
    "a": "ₐ",
    "e": "ₑ",
    "h": "ₕ",
    "i": "ᵢ",
    "j": "ⱼ",
    "k": "ₖ",
    "l": "ₗ",
    "m": "ₘ",
    "n": "ₙ",
    "o": "ₒ",
    "p": "ₚ",
    "r": "ᵣ",
    "s": "ₛ",
    "t": "ₜ",
    "u": "ᵤ",
    "v": "ᵥ",
    "x": "ₓ",
}

# RFC 3986 unreserved + reserved characters, plus '%' for escapes.
SAFE_URI_CHARS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")

# Schemes (and the bare "www." prefix) treated as already-absolute links.
ABSOLUTE_URL_PREFIXES = (
    "http://",
    "https://",
    "ftp://",
    "ftps://",
    "file://",
    "mailto:",
    "tel:",
    "news:",
    "javascript:",
    "data:",
    "www.",
)

# Protocol prefixes stripped before splitting a URL into domain parts.
PROTOCOL_PREFIXES = ("http://", "https://", "ftp://", "ftps://")
