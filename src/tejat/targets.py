"""Link target resolution.

A link line's destination is either an absolute URL or an opaque relative
reference. The distinction is purely syntactic: whatever ``parse_url``
accepts is absolute, everything else is relative. Nothing is fetched or
checked for existence.

Example:
    >>> resolve_target("https://example.com")
    AbsoluteTarget(url=Url(serialization='https://example.com'))
    >>> resolve_target("/root-relative/link")
    RelativeTarget(path='/root-relative/link')

"""

from __future__ import annotations

from dataclasses import dataclass

from tejat.errors import ErrorKind, ParseError, UrlError
from tejat.text import SourceText, as_text
from tejat.uri import GeminiUrl, Url, parse_url


@dataclass(frozen=True, slots=True)
class AbsoluteTarget:
    """Link target that parsed as an absolute URL."""

    url: Url

    def __str__(self) -> str:
        return str(self.url)

    @property
    def is_absolute(self) -> bool:
        return True

    def gemini_url(self) -> GeminiUrl:
        """Validate the URL as a Gemini request target.

        Raises:
            UrlError: If it is not a usable ``gemini://`` URL.
        """
        return GeminiUrl.from_url(self.url)

    def to_owned(self) -> AbsoluteTarget:
        return self


@dataclass(frozen=True, slots=True)
class RelativeTarget:
    """Link target kept verbatim as a relative reference."""

    path: SourceText

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", as_text(self.path))

    def __str__(self) -> str:
        return str(self.path)

    @property
    def is_absolute(self) -> bool:
        return False

    def to_owned(self) -> RelativeTarget:
        if not self.path.is_borrowed:
            return self
        return RelativeTarget(self.path.to_owned())


LinkTarget = AbsoluteTarget | RelativeTarget


def resolve_target(token: str | SourceText) -> LinkTarget:
    """Classify a link destination token. Never fails."""
    try:
        return AbsoluteTarget(parse_url(str(token)))
    except UrlError:
        return RelativeTarget(as_text(token))


def parse_target(source: str) -> LinkTarget:
    """Parse a standalone link target.

    ``source`` must be a single token with no whitespace. The result owns
    its text.

    Raises:
        ParseError: If ``source`` is empty or contains whitespace.
    """
    from tejat.lexer.cursor import Cursor
    from tejat.lexer.scanners import all_consuming, take_till_whitespace

    cursor = Cursor(source)
    try:
        token = all_consuming(cursor, take_till_whitespace)
    except ParseError as e:
        raise e.with_context(cursor, "a link target")
    return resolve_target(token).to_owned()


def absolute_target(source: str) -> AbsoluteTarget:
    """Parse ``source`` as a target that must be an absolute URL.

    Raises:
        ParseError: INVALID_URL carrying the URL parser's reason.
    """
    try:
        return AbsoluteTarget(parse_url(source))
    except UrlError as e:
        from tejat.lexer.cursor import Cursor

        raise ParseError.at(Cursor(source), ErrorKind.INVALID_URL, e.reason) from e


__all__ = [
    "AbsoluteTarget",
    "LinkTarget",
    "RelativeTarget",
    "absolute_target",
    "parse_target",
    "resolve_target",
]
