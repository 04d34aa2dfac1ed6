"""Preformatted block classifier mixin."""

from tejat.errors import ErrorKind, ParseError
from tejat.lexer.cursor import Cursor
from tejat.lexer.scanners import leader, optional_until_line_end, until_line_end
from tejat.nodes import FENCE, Preformatted


class FenceClassifierMixin:
    """Mixin providing preformatted block classification."""

    def _classify_preformatted(self, cursor: Cursor) -> tuple[Cursor, Preformatted]:
        """Classify a fenced block from its opening to its closing fence.

        The rest of the opening line is the alt text. Every following line
        is kept verbatim until a line that is exactly the fence. Once the
        opening fence matched the classifier is committed: a missing closing
        fence raises FatalParseError located at the opening fence.
        """
        body, alt_text = optional_until_line_end(leader(cursor, FENCE))
        end, text = self._scan_preformatted_body(cursor, body)
        return end, Preformatted(text, alt_text, location=cursor.span_to(end))

    def _scan_preformatted_body(self, opening: Cursor, body: Cursor):
        """Find the closing fence line.

        Returns:
            Cursor after the closing fence line and the body text, which
            excludes the terminator that precedes the closing fence.
        """
        line = body
        content_end = body.offset
        while not line.at_end:
            next_line, content = until_line_end(line)
            if content == FENCE:
                return next_line, body.text_to(content_end)
            content_end = line.offset + len(content)
            line = next_line

        err = ParseError.at(line, ErrorKind.EXPECTED_LITERAL, FENCE)
        raise err.with_context(opening, "a preformatted block").commit()
