"""Typed line records for Tejat.

A Gemtext document is a flat sequence of lines. Each record is a frozen
dataclass with slots, so records are immutable, cheap and work with
``match`` statements.

Record Types:
Line (base)
├── Blockquote      > text
├── Heading         #, ## or ### text
├── Link            => target [text]
├── ListItem        * text
├── Preformatted    ```alt ... ``` (the only multi-line record)
└── Text            anything else, including blank lines

Text fields hold a SourceText: records produced by the lexer borrow their
text from the source buffer, records built by hand own it. Call
``to_owned()`` before keeping records beyond the life of the source.

``location`` is excluded from equality, so a parsed record equals the same
record built with the helpers in ``tejat.builders``.

Constructors raise ValueError for values the lexer never produces, so a
heading, link or preformatted record renders back to an equal record.
Single-line fields may not contain ``"\\n"``. Text after a
leader that trims whitespace may not start with a space or tab. Link targets
are single tokens, and a preformatted body may not contain a closing fence
line. An empty link text or alt text becomes None.

Thread Safety:
All records are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Self

from tejat.location import SourceLocation
from tejat.targets import LinkTarget, resolve_target
from tejat.text import SourceText, as_text

HEADING_LEVELS = (1, 2, 3)

FENCE = "```"

_TARGET_BOUNDARY = " \t\r\n"


def _check_single_line(value: SourceText, name: str) -> None:
    if "\n" in value:
        msg = f"{name} must be a single line, got {str(value)!r}"
        raise ValueError(msg)


def _check_no_leading_whitespace(value: SourceText, name: str) -> None:
    if value.startswith(" ") or value.startswith("\t"):
        msg = f"{name} must not start with whitespace, got {str(value)!r}"
        raise ValueError(msg)


def _has_fence_line(body: str) -> bool:
    """True if the lexer would read a line of ``body`` as the closing fence.

    Every line but the last is followed by its own terminator, so a
    trailing ``"\\r"`` there belongs to a ``"\\r\\n"``. The last line is
    compared as is.
    """
    *lines, last = body.split("\n")
    return last == FENCE or any(line.removesuffix("\r") == FENCE for line in lines)


def _optional_text(value: str | SourceText | None, name: str) -> SourceText | None:
    """Normalise an optional single-line field; empty text means absent."""
    if value is None:
        return None
    text = as_text(value)
    _check_single_line(text, name)
    return text if text else None


@dataclass(frozen=True, slots=True)
class Line:
    """Base class for all line records."""

    location: SourceLocation | None = field(
        default=None, kw_only=True, compare=False, repr=False
    )

    # Name of the Lexer method that recognises this record type
    _classifier: ClassVar[str] = ""

    @property
    def is_borrowed(self) -> bool:
        """True if any text of this record still points into a source buffer."""
        return False

    def to_owned(self) -> Self:
        """Return a copy that does not reference the source buffer."""
        return self

    @classmethod
    def from_string(cls, source: str) -> Self:
        """Parse ``source`` as exactly one record of this type.

        The whole string must be consumed. The result owns its text.

        Raises:
            ParseError: If ``source`` is not a single line of this type.
        """
        from tejat.lexer import Lexer

        return Lexer(source).parse_single(cls)


@dataclass(frozen=True, slots=True)
class _TextLine(Line):
    """A record whose only payload is one line of text."""

    text: SourceText

    # The lexer trims whitespace after this record's leader
    _leader_trims_whitespace: ClassVar[bool] = False

    def __post_init__(self) -> None:
        text = as_text(self.text)
        _check_single_line(text, "text")
        if self._leader_trims_whitespace:
            _check_no_leading_whitespace(text, "text")
        object.__setattr__(self, "text", text)

    @property
    def is_borrowed(self) -> bool:
        return self.text.is_borrowed

    def to_owned(self) -> Self:
        if not self.text.is_borrowed:
            return self
        return type(self)(self.text.to_owned(), location=self.location)


@dataclass(frozen=True, slots=True)
class Blockquote(_TextLine):
    """Quoted line.

    Gemtext: > text

    """

    _classifier: ClassVar[str] = "_classify_blockquote"
    _leader_trims_whitespace: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class ListItem(_TextLine):
    """Unordered list item.

    Gemtext: * text

    """

    _classifier: ClassVar[str] = "_classify_list_item"


@dataclass(frozen=True, slots=True)
class Text(_TextLine):
    """Plain text line. A blank line is a Text with empty text."""

    _classifier: ClassVar[str] = "_classify_text"


@dataclass(frozen=True, slots=True)
class Heading(Line):
    """Heading line, level 1 to 3.

    Gemtext: # text, ## text or ### text

    ``text`` may not start with a space or tab.

    """

    level: int
    text: SourceText

    _classifier: ClassVar[str] = "_classify_heading"

    def __post_init__(self) -> None:
        if self.level not in HEADING_LEVELS:
            msg = f"heading level must be 1, 2 or 3, got {self.level!r}"
            raise ValueError(msg)
        text = as_text(self.text)
        _check_single_line(text, "heading text")
        _check_no_leading_whitespace(text, "heading text")
        object.__setattr__(self, "text", text)

    @property
    def is_borrowed(self) -> bool:
        return self.text.is_borrowed

    def to_owned(self) -> Heading:
        if not self.text.is_borrowed:
            return self
        return Heading(self.level, self.text.to_owned(), location=self.location)


@dataclass(frozen=True, slots=True)
class Link(Line):
    """Link line.

    Gemtext: => target [text]

    A ``str`` target is resolved with ``resolve_target``. ``text`` may not
    start with a space or tab; an empty ``text`` is stored as None.

    """

    target: LinkTarget
    text: SourceText | None = None

    _classifier: ClassVar[str] = "_classify_link"

    def __post_init__(self) -> None:
        if isinstance(self.target, (str, SourceText)):
            object.__setattr__(self, "target", resolve_target(self.target))
        token = str(self.target) if self.target.is_absolute else self.target.path
        if not token or any(c in token for c in _TARGET_BOUNDARY):
            msg = f"link target must be a non-empty token without whitespace, got {str(token)!r}"
            raise ValueError(msg)
        text = _optional_text(self.text, "link text")
        if text is not None:
            _check_no_leading_whitespace(text, "link text")
        object.__setattr__(self, "text", text)

    @property
    def is_borrowed(self) -> bool:
        if self.text is not None and self.text.is_borrowed:
            return True
        return not self.target.is_absolute and self.target.path.is_borrowed

    def to_owned(self) -> Link:
        if not self.is_borrowed:
            return self
        return Link(
            self.target.to_owned(),
            self.text.to_owned() if self.text is not None else None,
            location=self.location,
        )


@dataclass(frozen=True, slots=True)
class Preformatted(Line):
    """Preformatted block.

    Gemtext:
        ```alt text
        verbatim lines
        ```

    ``text`` holds the lines between the fences joined by their original
    terminators, without the terminator before the closing fence.

    """

    text: SourceText
    alt_text: SourceText | None = None

    _classifier: ClassVar[str] = "_classify_preformatted"

    def __post_init__(self) -> None:
        text = as_text(self.text)
        if FENCE in text and _has_fence_line(str(text)):
            msg = f"preformatted text must not contain a closing fence line, got {str(text)!r}"
            raise ValueError(msg)
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "alt_text", _optional_text(self.alt_text, "alt text"))

    @property
    def is_borrowed(self) -> bool:
        if self.alt_text is not None and self.alt_text.is_borrowed:
            return True
        return self.text.is_borrowed

    def to_owned(self) -> Preformatted:
        if not self.is_borrowed:
            return self
        return Preformatted(
            self.text.to_owned(),
            self.alt_text.to_owned() if self.alt_text is not None else None,
            location=self.location,
        )


__all__ = [
    "HEADING_LEVELS",
    "FENCE",
    "Blockquote",
    "Heading",
    "Line",
    "Link",
    "ListItem",
    "Preformatted",
    "Text",
]
