"""Read-only text handle shared by all line records.

A parsed record does not copy its text out of the source buffer. It keeps a
SourceText that remembers the buffer and the bounds of the span, and only
materialises a string when asked. Records built by hand hold owned strings
instead. Both forms behave the same to consumers: they compare, hash and
format as the string they denote.

Example:
    >>> source = "# Hello"
    >>> title = SourceText.borrowed(source, 2, 7)
    >>> title == "Hello"
    True
    >>> title.is_borrowed, title.to_owned().is_borrowed
    (True, False)

Thread Safety:
SourceText is immutable and safe to share across threads.

"""

from __future__ import annotations


class SourceText:
    """Text that is either a borrowed span of a source buffer or owned."""

    __slots__ = ("_source", "_start", "_end", "_borrowed")

    def __init__(self, source: str, start: int, end: int, *, borrowed: bool) -> None:
        self._source = source
        self._start = start
        self._end = end
        self._borrowed = borrowed

    @classmethod
    def borrowed(cls, source: str, start: int, end: int) -> SourceText:
        """Create a handle over ``source[start:end]`` without copying."""
        if not 0 <= start <= end <= len(source):
            msg = f"span {start}:{end} out of range for source of length {len(source)}"
            raise ValueError(msg)
        return cls(source, start, end, borrowed=True)

    @classmethod
    def owned(cls, value: str) -> SourceText:
        """Create a handle that owns ``value``."""
        return cls(value, 0, len(value), borrowed=False)

    @property
    def is_borrowed(self) -> bool:
        """True if the text still points into a source buffer."""
        return self._borrowed

    @property
    def span(self) -> tuple[int, int]:
        """Bounds of the text in its buffer."""
        return self._start, self._end

    def to_owned(self) -> SourceText:
        """Detach from the source buffer.

        Only the denoted text is kept, so the original buffer can be released.
        """
        if not self._borrowed:
            return self
        return SourceText.owned(str(self))

    def __str__(self) -> str:
        if not self._borrowed:
            return self._source
        return self._source[self._start : self._end]

    def __repr__(self) -> str:
        return repr(str(self))

    def __len__(self) -> int:
        return self._end - self._start

    def __bool__(self) -> bool:
        return self._end > self._start

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SourceText):
            return len(self) == len(other) and str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def startswith(self, prefix: str) -> bool:
        return self._source.startswith(prefix, self._start, self._end)

    def endswith(self, suffix: str) -> bool:
        return self._source.endswith(suffix, self._start, self._end)

    def __contains__(self, item: str) -> bool:
        return self._source.find(item, self._start, self._end) != -1


def as_text(value: str | SourceText) -> SourceText:
    """Normalise constructor input to a SourceText.

    Plain strings become owned handles; handles pass through unchanged.
    """
    if isinstance(value, SourceText):
        return value
    if isinstance(value, str):
        return SourceText.owned(value)
    msg = f"expected str or SourceText, got {type(value).__name__}"
    raise TypeError(msg)


__all__ = ["SourceText", "as_text"]
