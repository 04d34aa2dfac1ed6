"""List item classifier mixin."""

from tejat.lexer.cursor import Cursor
from tejat.lexer.scanners import leader, until_line_end
from tejat.nodes import ListItem

LIST_ITEM_LEADER = "* "


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _classify_list_item(self, cursor: Cursor) -> tuple[Cursor, ListItem]:
        """Classify ``* `` followed by the item text.

        Exactly one space belongs to the leader; any further whitespace is
        part of the text.
        """
        end, text = until_line_end(leader(cursor, LIST_ITEM_LEADER))
        return end, ListItem(text, location=cursor.span_to(end))
