"""Canonical Gemtext rendering of line records.

Produces the text a record would most plainly be written as. Parsing the
rendering of a heading, link or preformatted record gives back an equal
record; the record constructors reject the values for which this could not
hold.

A line whose text ends with a lone ``"\\r"`` is terminated with ``"\\r\\n"``
so the lexer does not take that ``"\\r"`` as part of the terminator.

Example:
    >>> from tejat.builders import h2, link
    >>> render([h2("Heading 2"), link("/about", text="About")])
    '## Heading 2\\n=> /about About'

Thread Safety:
All functions are pure.

"""

from __future__ import annotations

from collections.abc import Iterable

from tejat.nodes import FENCE, Blockquote, Heading, Line, Link, ListItem, Preformatted, Text


def _terminator(line: str) -> str:
    return "\r\n" if line.endswith("\r") else "\n"


def render_line(line: Line) -> str:
    """Render one record, without a trailing newline."""
    match line:
        case Text():
            return str(line.text)
        case Heading():
            return f"{'#' * line.level} {line.text}"
        case Link():
            if line.text is None:
                return f"=> {line.target}"
            return f"=> {line.target} {line.text}"
        case ListItem():
            return f"* {line.text}"
        case Blockquote():
            return f"> {line.text}"
        case Preformatted():
            opening = FENCE + (str(line.alt_text) if line.alt_text is not None else "")
            if not line.text:
                return f"{opening}{_terminator(opening)}{FENCE}"
            body = str(line.text)
            return f"{opening}{_terminator(opening)}{body}{_terminator(body)}{FENCE}"
        case _:
            msg = f"cannot render {type(line).__name__}"
            raise TypeError(msg)


def render(lines: Iterable[Line]) -> str:
    """Render records as a document, one per line."""
    parts: list[str] = []
    for line in lines:
        if parts:
            parts.append(_terminator(parts[-1]))
        parts.append(render_line(line))
    return "".join(parts)


__all__ = ["render", "render_line"]
