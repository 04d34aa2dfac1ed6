"""
Tejat: Gemtext line parser for Python

Turns a Gemtext document into a list of typed line records. Each line is
classified by its leading characters; the one multi-line construct is the
fenced preformatted block. Parsing is all-or-nothing and failures carry a
located, layered diagnostic.

Quick Start:
    >>> from tejat import parse
    >>> lines = parse("# Hello\\n=> gemini://example.com Example\\n* item")
    >>> [type(line).__name__ for line in lines]
    ['Heading', 'Link', 'ListItem']
    >>> lines[1].target.is_absolute
    True

Building records by hand:
    >>> from tejat import h1, link
    >>> parse("# Hello") == [h1("Hello")]
    True

Keeping records beyond the source buffer:
    owned = [line.to_owned() for line in parse(source)]
    # or: with parse_config_context(ParseConfig(detach=True)): ...

Installation:
    pip install tejat
"""

from collections.abc import Iterator

from tejat.builders import (
    blockquote,
    h1,
    h2,
    h3,
    heading,
    link,
    list_item,
    preformatted,
)
from tejat.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tejat.errors import ErrorKind, FatalParseError, ParseError, TejatError, UrlError
from tejat.lexer import Cursor, Lexer
from tejat.location import SourceLocation
from tejat.nodes import Blockquote, Heading, Line, Link, ListItem, Preformatted, Text
from tejat.renderers.gemtext import render, render_line
from tejat.serialization import from_dict, from_json, to_dict, to_json
from tejat.targets import (
    AbsoluteTarget,
    LinkTarget,
    RelativeTarget,
    absolute_target,
    parse_target,
    resolve_target,
)
from tejat.text import SourceText
from tejat.uri import GeminiUrl, Url, parse_url

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> list[Line]:
    """Parse a Gemtext document into line records.

    Args:
        source: Gemtext source text
        source_file: Optional source file path for error messages

    Returns:
        Records in document order. Blank lines are empty Text records; the
        empty document gives an empty list.

    Raises:
        ParseError: At the first line that cannot be classified. No partial
            result is returned.

    Example:
        >>> parse("```banner\\n ascii art\\n```\\nafter")
        [Preformatted(text=' ascii art', alt_text='banner'), Text(text='after')]
    """
    return Lexer(source, source_file=source_file).parse()


def iter_lines(source: str, *, source_file: str | None = None) -> Iterator[Line]:
    """Lazily yield line records; raises ParseError when a bad line is reached."""
    return Lexer(source, source_file=source_file).tokenize()


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "iter_lines",
    "Lexer",
    "Cursor",
    # Line records
    "Line",
    "Blockquote",
    "Heading",
    "Link",
    "ListItem",
    "Preformatted",
    "Text",
    "SourceText",
    "SourceLocation",
    # Link targets
    "LinkTarget",
    "AbsoluteTarget",
    "RelativeTarget",
    "resolve_target",
    "parse_target",
    "absolute_target",
    "Url",
    "GeminiUrl",
    "parse_url",
    # Builders
    "blockquote",
    "h1",
    "h2",
    "h3",
    "heading",
    "link",
    "list_item",
    "preformatted",
    # Rendering and serialization
    "render",
    "render_line",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "TejatError",
    "ParseError",
    "FatalParseError",
    "ErrorKind",
    "UrlError",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
