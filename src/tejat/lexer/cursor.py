"""Immutable input cursor.

A Cursor is a view over ``source[offset:]`` that also knows the line and
column of its first character. Scanners never mutate a cursor: consuming
input returns a new one, so an alternative that fails leaves the caller's
cursor untouched and backtracking is free.

Thread Safety:
Cursor is frozen and holds only immutable values.

"""

from __future__ import annotations

from dataclasses import dataclass

from tejat.location import SourceLocation
from tejat.text import SourceText


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position in a source buffer.

    Attributes:
        source: The whole document
        offset: Index of the first unconsumed character
        lineno: Line of ``source[offset]`` (1-indexed)
        col: Column of ``source[offset]`` (1-indexed, in characters)
        source_file: Optional source file path for error messages

    """

    source: str
    offset: int = 0
    lineno: int = 1
    col: int = 1
    source_file: str | None = None

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.source)

    @property
    def remaining(self) -> str:
        """Unconsumed text (copies; meant for diagnostics and tests)."""
        return self.source[self.offset :]

    def startswith(self, token: str) -> bool:
        return self.source.startswith(token, self.offset)

    def find_line_end(self) -> tuple[int, int]:
        """Find where the current line's content ends.

        Returns:
            (content_end, line_end): content_end excludes the terminator,
            line_end is the position after it (equal at end of input).
        """
        source = self.source
        nl = source.find("\n", self.offset)
        if nl == -1:
            return len(source), len(source)
        if nl > self.offset and source[nl - 1] == "\r":
            return nl - 1, nl + 1
        return nl, nl + 1

    def advance(self, count: int) -> Cursor:
        """Return a cursor ``count`` characters further on."""
        if count == 0:
            return self
        end = self.offset + count
        if count < 0 or end > len(self.source):
            msg = f"cannot advance {count} characters from offset {self.offset}"
            raise ValueError(msg)

        newlines = self.source.count("\n", self.offset, end)
        if newlines:
            last_nl = self.source.rfind("\n", self.offset, end)
            return Cursor(
                self.source,
                end,
                self.lineno + newlines,
                end - last_nl,
                self.source_file,
            )
        return Cursor(self.source, end, self.lineno, self.col + count, self.source_file)

    def advance_to(self, offset: int) -> Cursor:
        """Return a cursor at absolute ``offset`` (not before this one)."""
        return self.advance(offset - self.offset)

    def text_to(self, end: Cursor | int) -> SourceText:
        """Borrowed text between this cursor and ``end``."""
        end_offset = end if isinstance(end, int) else end.offset
        return SourceText.borrowed(self.source, self.offset, end_offset)

    def snippet(self, length: int) -> str:
        """Up to ``length`` characters of unconsumed text."""
        return self.source[self.offset : self.offset + length]

    def span_to(self, end: Cursor) -> SourceLocation:
        """Location of the text between this cursor and ``end``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=end.offset,
            end_lineno=end.lineno,
            end_col_offset=end.col,
            source_file=self.source_file,
        )

    def __repr__(self) -> str:
        rest = self.snippet(20)
        if len(self.source) - self.offset > 20:
            rest = rest[:17] + "..."
        return f"Cursor({rest!r}, {self.lineno}:{self.col})"
