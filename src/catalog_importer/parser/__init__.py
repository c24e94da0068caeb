"""Streaming parser for vendor catalog XML files."""

from .driver import CatalogTarget, ParseResult, parse_catalog
from .exceptions import CatalogNotFoundError, MalformedInputError, ParseError
from .handlers import XMLNode, handle_close_tag, handle_open_tag, handle_text
from .state import ParserState

__all__ = [
    "CatalogNotFoundError",
    "CatalogTarget",
    "MalformedInputError",
    "ParseError",
    "ParseResult",
    "ParserState",
    "XMLNode",
    "handle_close_tag",
    "handle_open_tag",
    "handle_text",
    "parse_catalog",
]
