"""Source location tracking for line records and diagnostics.

Every parsed line record carries the span of source it consumed, including
its line terminator. Concatenating ``source[loc.offset:loc.end_offset]`` over
all records of a successful parse reproduces the document exactly.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of source text consumed by one line record.

    Line and column are 1-indexed and count characters, not bytes.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start offset in the source buffer
        end_offset: Absolute end offset (exclusive, after the terminator)
        end_lineno: Line number of the position after the span
        end_col_offset: Column of the position after the span
        source_file: Source file path (optional, for error messages)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1, offset=20, end_offset=31)
        >>> str(loc)
        '3:1'
        >>> loc.length
        11

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered by the span."""
        return self.end_offset - self.offset

    def slice(self, source: str) -> str:
        """Return the exact source text covered by this span."""
        return source[self.offset : self.end_offset]
