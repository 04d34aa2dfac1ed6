"""Link line classifier mixin."""

from tejat.errors import ParseError
from tejat.lexer.cursor import Cursor
from tejat.lexer.scanners import (
    alternatives,
    leader,
    line_end,
    optional_until_line_end,
    take_till_whitespace,
    whitespace0,
    whitespace1,
)
from tejat.nodes import Link
from tejat.targets import resolve_target
from tejat.text import SourceText

LINK_LEADER = "=>"


class LinkClassifierMixin:
    """Mixin providing link line classification."""

    def _classify_link(self, cursor: Cursor) -> tuple[Cursor, Link]:
        """Classify ``=>``, optional whitespace, a target and optional text.

        The target runs up to the first whitespace or line end; link targets
        never contain whitespace, so whatever follows it is the label. No
        space is required between ``=>`` and the target.
        """
        try:
            after_target, token = take_till_whitespace(
                whitespace0(leader(cursor, LINK_LEADER))
            )
            end, text = alternatives(after_target, [_label, _bare_end])
        except ParseError as e:
            raise e.with_context(cursor, "a link line") from e
        return end, Link(resolve_target(token), text, location=cursor.span_to(end))


def _label(cursor: Cursor) -> tuple[Cursor, SourceText | None]:
    return optional_until_line_end(whitespace1(cursor))


def _bare_end(cursor: Cursor) -> tuple[Cursor, None]:
    return line_end(whitespace0(cursor)), None
