"""Parse driver feeding lxml tokenizer events into the catalog mapper."""

import logging
import re
from pathlib import Path
from typing import NamedTuple

from lxml import etree

from schemas.catalog import Article, ArticleGroup

from .exceptions import CatalogNotFoundError, MalformedInputError, ParseError
from .handlers import XMLNode, handle_close_tag, handle_open_tag, handle_text
from .state import ParserState

logger = logging.getLogger(__name__)

WHITESPACE_RUN = re.compile(r"\s+")


class ParseResult(NamedTuple):
    """Records collected from one catalog file."""

    article_groups: dict[str, ArticleGroup]
    articles: dict[str, Article]


class CatalogTarget:
    """lxml parser target translating tokenizer callbacks into mapper events.

    Tag and attribute names are lowercased with namespace URIs dropped.
    Character data of one text node is buffered until the next tag event,
    then trimmed and whitespace-normalized; empty text is not forwarded.

    Example:
        target = CatalogTarget()
        parser = etree.XMLParser(target=target)
        parser.feed(data)
        result = parser.close()
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.state = ParserState()
        self._chunks: list[str] = []

    def start(self, tag, attrib) -> None:
        self._flush_text()
        name = self._normalize_name(tag)
        attributes = {
            self._normalize_name(key): str(value) for key, value in attrib.items()
        }
        if self.verbose:
            logger.debug(f"Open tag: {name}")
        handle_open_tag(self.state, XMLNode(name=name, attributes=attributes))

    def end(self, tag) -> None:
        self._flush_text()
        name = self._normalize_name(tag)
        if self.verbose:
            logger.debug(f"Close tag: {name}")
        handle_close_tag(self.state, name)

    def data(self, data: str) -> None:
        self._chunks.append(data)

    def close(self) -> ParseResult:
        self._flush_text()
        return ParseResult(
            article_groups=self.state.article_groups,
            articles=self.state.articles,
        )

    def _flush_text(self) -> None:
        if not self._chunks:
            return
        text = WHITESPACE_RUN.sub(" ", "".join(self._chunks)).strip()
        self._chunks = []
        if not text:
            return
        if self.verbose:
            logger.debug(f"Text: {text}")
        handle_text(self.state, text)

    @staticmethod
    def _normalize_name(name) -> str:
        return etree.QName(name).localname.lower()


def parse_catalog(file_path: Path | str, verbose: bool = False) -> ParseResult:
    """Parse a catalog XML file into article groups and articles.

    The whole file is read into memory and fed to a fresh tokenizer and
    mapper state; nothing is returned until the tokenizer reaches the end
    of the input.

    Args:
        file_path: Path to the catalog XML file
        verbose: If True, log every tokenizer event at DEBUG level

    Returns:
        ParseResult with groups keyed by external id and articles by SKU

    Raises:
        CatalogNotFoundError: If the file does not exist
        MalformedInputError: If the XML is not well-formed
        ParseError: If the file cannot be read
    """
    file_path = Path(file_path)
    logger.info(f"Parsing catalog file: {file_path}")

    if not file_path.exists():
        raise CatalogNotFoundError(f"Catalog file not found: {file_path}")

    try:
        content = file_path.read_bytes()
    except OSError as e:
        raise ParseError(f"Failed to read catalog file {file_path}: {e}") from e

    parser = etree.XMLParser(target=CatalogTarget(verbose=verbose), huge_tree=True)

    try:
        parser.feed(content)
        result = parser.close()
    except etree.XMLSyntaxError as e:
        line, column = e.position if e.position else (e.lineno, None)
        logger.error(f"XML syntax error in {file_path}: {e}")
        raise MalformedInputError(
            f"Malformed XML in {file_path} at line {line}, column {column}: {e.msg}",
            line=line,
            column=column,
        ) from e

    logger.info(
        f"Parsed {len(result.article_groups)} article groups and "
        f"{len(result.articles)} articles from {file_path.name}"
    )
    return result
