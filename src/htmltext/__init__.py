from .context import StrictModeError
from .document import get_body, get_style_section, parse_charset
from .entities import ENTITY_TABLE, EntityTable, convert_symbol_font
from .extractor import ExtractorOpts, HtmlExtractText
from .hyperlinks import HtmlHyperlinkParser, HtmlImageParser, JavaScriptHyperlinkParser, strip_hyperlinks
from .locator import (
    compare_element,
    compare_element_case_sensitive,
    find_bookmark,
    find_close_tag,
    find_closing_element,
    find_element,
    find_tag,
    get_element_name,
    read_attribute,
    read_attribute_as_int,
    read_attribute_as_string,
    read_element_as_string,
)
from .scan import find_char_outside_quotes, find_substring_outside_quotes
from .tokens import Diagnostic, Hyperlink
from .urls import DomainParts, HtmlUrlFormat

__all__ = [
    "ENTITY_TABLE",
    "Diagnostic",
    "DomainParts",
    "EntityTable",
    "ExtractorOpts",
    "HtmlExtractText",
    "HtmlHyperlinkParser",
    "HtmlImageParser",
    "HtmlUrlFormat",
    "Hyperlink",
    "JavaScriptHyperlinkParser",
    "StrictModeError",
    "compare_element",
    "compare_element_case_sensitive",
    "convert_symbol_font",
    "find_bookmark",
    "find_char_outside_quotes",
    "find_close_tag",
    "find_closing_element",
    "find_element",
    "find_substring_outside_quotes",
    "find_tag",
    "get_body",
    "get_element_name",
    "get_style_section",
    "parse_charset",
    "read_attribute",
    "read_attribute_as_int",
    "read_attribute_as_string",
    "read_element_as_string",
    "strip_hyperlinks",
]
