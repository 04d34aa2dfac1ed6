"""Blockquote classifier mixin."""

from tejat.lexer.cursor import Cursor
from tejat.lexer.scanners import line_with_leader
from tejat.nodes import Blockquote

QUOTE_LEADER = ">"


class QuoteClassifierMixin:
    """Mixin providing blockquote classification."""

    def _classify_blockquote(self, cursor: Cursor) -> tuple[Cursor, Blockquote]:
        end, text = line_with_leader(cursor, QUOTE_LEADER)
        return end, Blockquote(text, location=cursor.span_to(end))
