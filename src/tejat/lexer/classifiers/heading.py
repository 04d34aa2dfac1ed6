"""Heading classifier mixin."""

from tejat.lexer.cursor import Cursor
from tejat.lexer.scanners import alternatives, line_with_leader
from tejat.nodes import Heading

# Longest leader first: "###" must win over "##" and "#"
HEADING_LEADERS = (("###", 3), ("##", 2), ("#", 1))


class HeadingClassifierMixin:
    """Mixin providing heading classification."""

    def _classify_heading(self, cursor: Cursor) -> tuple[Cursor, Heading]:
        """Classify ``#``, ``##`` or ``###`` followed by optional whitespace.

        Only the matched leader counts toward the level: ``####x`` is a level
        3 heading with text ``#x``.
        """
        return alternatives(
            cursor,
            [_heading_scanner(token, level) for token, level in HEADING_LEADERS],
        )


def _heading_scanner(token: str, level: int):
    def scan(cursor: Cursor) -> tuple[Cursor, Heading]:
        end, text = line_with_leader(cursor, token)
        return end, Heading(level, text, location=cursor.span_to(end))

    return scan
