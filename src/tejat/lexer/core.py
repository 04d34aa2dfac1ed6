"""Line lexer for Gemtext.

Every line is classified independently by trying the classifiers in a
fixed order against the same cursor. The first classifier that matches
consumes the line (or, for a preformatted block, all of its lines) and the
lexer moves on. Text matches anything, so each line always resolves and
every iteration advances.

The parse is all-or-nothing: a line that cannot be classified aborts the
whole document with a ParseError. There is no partial result.

Thread Safety:
Lexer instances hold only immutable state. One instance may be used from
several threads, and independent sources can be parsed concurrently.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from tejat.config import get_parse_config
from tejat.errors import ErrorKind, ParseError
from tejat.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    LinkClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    TextClassifierMixin,
)
from tejat.lexer.cursor import Cursor
from tejat.lexer.scanners import all_consuming, alternatives
from tejat.nodes import Line
from tejat.utils.logger import get_logger

logger = get_logger(__name__)

L = TypeVar("L", bound=Line)

# Precedence matters: a fence must not be swallowed as text, and Text
# always succeeds so it comes last.
CLASSIFIER_ORDER = (
    "_classify_preformatted",
    "_classify_heading",
    "_classify_link",
    "_classify_list_item",
    "_classify_blockquote",
    "_classify_text",
)


class Lexer(
    FenceClassifierMixin,
    HeadingClassifierMixin,
    LinkClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    TextClassifierMixin,
):
    """Gemtext line lexer.

    Usage:
        >>> lexer = Lexer("# Hello\\n\\n=> gemini://example.com Example")
        >>> for line in lexer.tokenize():
        ...     print(line)
        Heading(level=1, text='Hello')
        Text(text='')
        Link(target=AbsoluteTarget(url=Url(serialization='gemini://example.com')), text='Example')

    """

    __slots__ = ("_source", "_source_file", "_classifiers")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Gemtext source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._classifiers = tuple(getattr(self, name) for name in CLASSIFIER_ORDER)

    @property
    def source(self) -> str:
        return self._source

    def tokenize(self) -> Iterator[Line]:
        """Yield line records in document order.

        Records borrow their text from the source unless the active
        ParseConfig asks for detached records.

        Raises:
            ParseError: At the first line that cannot be classified.
        """
        detach = get_parse_config().detach
        cursor = self._start()
        while not cursor.at_end:
            cursor, line = self._classify_line(cursor)
            yield line.to_owned() if detach else line

    def parse(self) -> list[Line]:
        """Parse the whole source into a list of records.

        Raises:
            ParseError: At the first line that cannot be classified.
        """
        try:
            lines = list(self.tokenize())
        except ParseError as e:
            logger.debug("Gemtext parse failed: %s", e)
            raise
        logger.debug("Parsed %d lines from %d characters", len(lines), len(self._source))
        return lines

    def parse_single(self, line_type: type[L]) -> L:
        """Parse the whole source as exactly one record of ``line_type``.

        The result owns its text.

        Raises:
            ParseError: If the classifier fails or input is left over.
        """
        classifier = getattr(self, line_type._classifier, None)
        if classifier is None:
            msg = f"{line_type.__name__} has no classifier"
            raise TypeError(msg)
        line = all_consuming(self._start(), classifier)
        return line.to_owned()

    def _start(self) -> Cursor:
        return Cursor(self._source, source_file=self._source_file)

    def _classify_line(self, cursor: Cursor) -> tuple[Cursor, Line]:
        """Try every classifier in order at ``cursor``."""
        end, line = alternatives(cursor, self._classifiers)
        if end.offset <= cursor.offset:
            raise ParseError.at(cursor, ErrorKind.INTERNAL, "classifier made no progress")
        return end, line
