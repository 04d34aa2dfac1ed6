"""Plain text classifier mixin."""

from tejat.lexer.cursor import Cursor
from tejat.lexer.scanners import until_line_end
from tejat.nodes import Text


class TextClassifierMixin:
    """Mixin providing the catch-all text classification.

    Always succeeds, even on an empty line, so it must be tried last.
    """

    def _classify_text(self, cursor: Cursor) -> tuple[Cursor, Text]:
        end, text = until_line_end(cursor)
        return end, Text(text, location=cursor.span_to(end))
