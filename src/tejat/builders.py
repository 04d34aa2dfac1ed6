"""Helpers to build line records by hand.

These are for fixtures and generated documents. They perform no parsing,
except that ``link`` resolves its target the same way the lexer does.
Every helper takes either a literal or a ``str.format`` template with
arguments:

    >>> h1("Chapter {}", 3)
    Heading(level=1, text='Chapter 3')
    >>> link("gemini://example.com/{}", "docs", text="The {} page", text_args=("docs",))
    Link(target=AbsoluteTarget(url=Url(serialization='gemini://example.com/docs')), text='The docs page')

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from tejat.nodes import Blockquote, Heading, Link, ListItem, Preformatted, Text
from tejat.targets import parse_target


def _fmt(template: str, args: Sequence[Any]) -> str:
    return template.format(*args) if args else template


def text(template: str, *args: Any) -> Text:
    return Text(_fmt(template, args))


def blockquote(template: str, *args: Any) -> Blockquote:
    return Blockquote(_fmt(template, args))


def list_item(template: str, *args: Any) -> ListItem:
    return ListItem(_fmt(template, args))


def heading(level: int, template: str, *args: Any) -> Heading:
    return Heading(level, _fmt(template, args))


def h1(template: str, *args: Any) -> Heading:
    return heading(1, template, *args)


def h2(template: str, *args: Any) -> Heading:
    return heading(2, template, *args)


def h3(template: str, *args: Any) -> Heading:
    return heading(3, template, *args)


def link(
    target: str,
    *args: Any,
    text: str | None = None,
    text_args: Sequence[Any] = (),
) -> Link:
    """Build a link line.

    Raises:
        ParseError: If the formatted target is empty or contains whitespace.
    """
    label = _fmt(text, text_args) if text is not None else None
    return Link(parse_target(_fmt(target, args)), label)


def preformatted(
    template: str,
    *args: Any,
    alt_text: str | None = None,
    alt_args: Sequence[Any] = (),
) -> Preformatted:
    alt = _fmt(alt_text, alt_args) if alt_text is not None else None
    return Preformatted(_fmt(template, args), alt)


__all__ = [
    "blockquote",
    "h1",
    "h2",
    "h3",
    "heading",
    "link",
    "list_item",
    "preformatted",
    "text",
]
