"""Primitive scanners.

A scanner takes a Cursor and either returns the advanced cursor (and, for
scanners that produce a value, that value) or raises ParseError. Scanners
never look past the current line except ``line_end``, which consumes one
line terminator, so every attempt does bounded work.

Line terminators are ``"\\n"`` and ``"\\r\\n"``. Horizontal whitespace is
space and tab.

No regex in the hot path.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from tejat.errors import ErrorKind, FatalParseError, ParseError
from tejat.lexer.cursor import Cursor
from tejat.text import SourceText

T = TypeVar("T")

Scanner = Callable[[Cursor], tuple[Cursor, T]]

HORIZONTAL_WHITESPACE = " \t"
TOKEN_BOUNDARY = " \t\r\n"


def leader(cursor: Cursor, token: str) -> Cursor:
    """Consume the literal ``token``.

    Raises:
        ParseError: EXPECTED_LITERAL if the input does not start with it.
    """
    if not cursor.startswith(token):
        raise ParseError.at(cursor, ErrorKind.EXPECTED_LITERAL, token)
    return cursor.advance(len(token))


def whitespace0(cursor: Cursor) -> Cursor:
    """Consume zero or more spaces and tabs."""
    source = cursor.source
    pos = cursor.offset
    source_len = len(source)
    while pos < source_len and source[pos] in HORIZONTAL_WHITESPACE:
        pos += 1
    return cursor.advance_to(pos)


def whitespace1(cursor: Cursor) -> Cursor:
    """Consume one or more spaces and tabs.

    Raises:
        ParseError: EXPECTED_WHITESPACE if there is none.
    """
    after = whitespace0(cursor)
    if after.offset == cursor.offset:
        raise ParseError.at(cursor, ErrorKind.EXPECTED_WHITESPACE)
    return after


def _terminator_length(source: str, pos: int) -> int:
    """Length of the line terminator at ``pos`` (0 if none)."""
    if source.startswith("\n", pos):
        return 1
    if source.startswith("\r\n", pos):
        return 2
    return 0


def line_end(cursor: Cursor) -> Cursor:
    """Consume a line terminator, or succeed without consuming at end of input.

    Raises:
        ParseError: EXPECTED_LINE_END wrapped in "a line ending or EOF".
    """
    if cursor.at_end:
        return cursor
    length = _terminator_length(cursor.source, cursor.offset)
    if not length:
        err = ParseError.at(cursor, ErrorKind.EXPECTED_LINE_END)
        raise err.with_context(cursor, "a line ending or EOF")
    return cursor.advance(length)


def until_line_end(cursor: Cursor) -> tuple[Cursor, SourceText]:
    """Consume the rest of the line and its terminator.

    Returns:
        The cursor at the start of the next line and the line content
        without its terminator (borrowed, possibly empty).
    """
    content_end, end = cursor.find_line_end()
    return cursor.advance_to(end), cursor.text_to(content_end)


def optional_until_line_end(cursor: Cursor) -> tuple[Cursor, SourceText | None]:
    """Like until_line_end, but an empty line yields None."""
    cursor, text = until_line_end(cursor)
    return cursor, (text if text else None)


def line_with_leader(cursor: Cursor, token: str) -> tuple[Cursor, SourceText]:
    """Consume ``token``, optional whitespace, then the rest of the line."""
    return until_line_end(whitespace0(leader(cursor, token)))


def take_till_whitespace(cursor: Cursor) -> tuple[Cursor, SourceText]:
    """Consume the longest run of characters up to whitespace or line end.

    Raises:
        ParseError: INTERNAL if the run is empty.
    """
    source = cursor.source
    pos = cursor.offset
    source_len = len(source)
    while pos < source_len and source[pos] not in TOKEN_BOUNDARY:
        pos += 1
    if pos == cursor.offset:
        raise ParseError.at(cursor, ErrorKind.INTERNAL, "empty token")
    return cursor.advance_to(pos), cursor.text_to(pos)


def alternatives(cursor: Cursor, scanners: Sequence[Scanner[T]]) -> tuple[Cursor, T]:
    """Try ``scanners`` in order against the same cursor.

    Each alternative starts from ``cursor``; a failed attempt consumes
    nothing. A FatalParseError stops the search immediately.

    Raises:
        ParseError: The last failure if no alternative matches.
    """
    last_error: ParseError | None = None
    for scanner in scanners:
        try:
            return scanner(cursor)
        except FatalParseError:
            raise
        except ParseError as e:
            last_error = e
    if last_error is None:
        raise ParseError.at(cursor, ErrorKind.INTERNAL, "no alternatives to try")
    raise last_error


def all_consuming(cursor: Cursor, scanner: Scanner[T]) -> T:
    """Run ``scanner`` and require it to consume all remaining input.

    Raises:
        ParseError: EXPECTED_END_OF_INPUT at the leftover text.
    """
    rest, value = scanner(cursor)
    if not rest.at_end:
        raise ParseError.at(rest, ErrorKind.EXPECTED_END_OF_INPUT)
    return value


__all__ = [
    "HORIZONTAL_WHITESPACE",
    "Scanner",
    "all_consuming",
    "alternatives",
    "leader",
    "line_end",
    "line_with_leader",
    "optional_until_line_end",
    "take_till_whitespace",
    "until_line_end",
    "whitespace0",
    "whitespace1",
]
