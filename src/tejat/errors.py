"""Exception classes for Tejat.

ParseError is a located diagnostic: line, column, a short snippet of the
offending text and a classified kind. Errors can be layered: a classifier
that fails because a lower-level scanner failed wraps that failure with a
``CONTEXT`` error describing what it was trying to recognise. The chain is
walked outermost first, innermost (the root cause) last, both by ``chain()``
and in the formatted message.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING

from tejat.config import get_parse_config

if TYPE_CHECKING:
    from tejat.lexer.cursor import Cursor


class TejatError(Exception):
    """Base exception for all Tejat errors."""

    pass


class ErrorKind(Enum):
    """Classification of a ParseError."""

    CONTEXT = "context"  # Wrapping annotation, not a root cause
    EXPECTED_END_OF_INPUT = "expected_end_of_input"
    EXPECTED_LINE_END = "expected_line_end"
    EXPECTED_WHITESPACE = "expected_whitespace"
    EXPECTED_LITERAL = "expected_literal"
    INTERNAL = "internal"
    INVALID_URL = "invalid_url"

    def describe(self, detail: str | None) -> str:
        """Human-readable message for this kind."""
        match self:
            case ErrorKind.CONTEXT:
                return f"expected {detail}"
            case ErrorKind.EXPECTED_END_OF_INPUT:
                return "expected end of input"
            case ErrorKind.EXPECTED_LINE_END:
                return "expected the end of the line"
            case ErrorKind.EXPECTED_WHITESPACE:
                return "expected one or more whitespace characters"
            case ErrorKind.EXPECTED_LITERAL:
                return f"expected {detail!r}"
            case ErrorKind.INTERNAL:
                return f"internal parser error: {detail}"
            case ErrorKind.INVALID_URL:
                return f"invalid URL: {detail}"


class ParseError(TejatError):
    """Located diagnostic raised when input cannot be recognised.

    Attributes:
        kind: Error classification
        detail: Kind payload (expected literal, context description, URL
            failure reason, or internal detail)
        lineno: Line of the offending text (1-indexed)
        col_offset: Column of the offending text (1-indexed)
        snippet: Start of the offending text, truncated to the configured
            snippet length
        previous: Wrapped lower-level error, if any
        source_file: Path to source file (optional)

    """

    def __init__(
        self,
        kind: ErrorKind,
        detail: str | None = None,
        *,
        lineno: int,
        col_offset: int,
        snippet: str = "",
        previous: ParseError | None = None,
        source_file: str | None = None,
    ) -> None:
        self.kind = kind
        self.detail = detail
        self.lineno = lineno
        self.col_offset = col_offset
        self.snippet = snippet
        self.previous = previous
        self.source_file = source_file
        if previous is not None:
            self.__cause__ = previous

        lines = [self._format_one()]
        lines.extend(f"  caused by {err._format_one()}" for err in self.chain() if err is not self)
        super().__init__("\n".join(lines))

    @classmethod
    def at(
        cls,
        cursor: Cursor,
        kind: ErrorKind,
        detail: str | None = None,
        previous: ParseError | None = None,
    ) -> ParseError:
        """Create an error located at ``cursor``."""
        return cls(
            kind,
            detail,
            lineno=cursor.lineno,
            col_offset=cursor.col,
            snippet=cursor.snippet(get_parse_config().snippet_length),
            previous=previous,
            source_file=cursor.source_file,
        )

    @property
    def message(self) -> str:
        """Message of this error alone, without location or chain."""
        return self.kind.describe(self.detail)

    @property
    def root_cause(self) -> ParseError:
        """Innermost error of the chain."""
        err = self
        while err.previous is not None:
            err = err.previous
        return err

    def chain(self) -> Iterator[ParseError]:
        """Iterate this error and its wrapped errors, outermost first."""
        err: ParseError | None = self
        while err is not None:
            yield err
            err = err.previous

    def with_context(self, cursor: Cursor, description: str) -> ParseError:
        """Wrap this error with what the caller was trying to recognise.

        The wrapper keeps this error's class, so a committed failure stays
        committed as it propagates.
        """
        return type(self).at(cursor, ErrorKind.CONTEXT, description, previous=self)

    def commit(self) -> FatalParseError:
        """Return this error as a FatalParseError."""
        if isinstance(self, FatalParseError):
            return self
        return FatalParseError(
            self.kind,
            self.detail,
            lineno=self.lineno,
            col_offset=self.col_offset,
            snippet=self.snippet,
            previous=self.previous,
            source_file=self.source_file,
        )

    def _key(self) -> tuple:
        return (
            self.kind,
            self.detail,
            self.lineno,
            self.col_offset,
            self.snippet,
            self.source_file,
            self.previous,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self):
        return (
            _rebuild_parse_error,
            (
                type(self),
                self.kind,
                self.detail,
                self.lineno,
                self.col_offset,
                self.snippet,
                self.previous,
                self.source_file,
            ),
        )

    def _format_one(self) -> str:
        location = f"{self.lineno}:{self.col_offset}"
        if self.source_file:
            location = f"{self.source_file}:{location}"
        return f"{location} ({self.snippet!r}): {self.message}"


class FatalParseError(ParseError):
    """A failure after a classifier committed to its line type.

    Ordered alternation does not try later classifiers when it sees this
    error; it propagates straight to the caller of the parse.
    """

    pass


class UrlError(TejatError, ValueError):
    """A string is not an absolute URL."""

    def __init__(self, reason: str, url: str = "") -> None:
        self.reason = reason
        self.url = url
        super().__init__(f"{reason}: {url!r}" if url else reason)


def _rebuild_parse_error(cls, kind, detail, lineno, col_offset, snippet, previous, source_file):
    return cls(
        kind,
        detail,
        lineno=lineno,
        col_offset=col_offset,
        snippet=snippet,
        previous=previous,
        source_file=source_file,
    )


__all__ = [
    "ErrorKind",
    "FatalParseError",
    "ParseError",
    "TejatError",
    "UrlError",
]
