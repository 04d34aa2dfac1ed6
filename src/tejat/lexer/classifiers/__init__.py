"""Line classifiers for the Tejat lexer.

Each classifier is a mixin providing one ``_classify_*`` method. A
classifier takes a Cursor at the start of a line and either returns the
cursor after the line with its record, or raises ParseError without
having consumed anything.
"""

from tejat.lexer.classifiers.fence import FenceClassifierMixin
from tejat.lexer.classifiers.heading import HeadingClassifierMixin
from tejat.lexer.classifiers.link import LinkClassifierMixin
from tejat.lexer.classifiers.list import ListClassifierMixin
from tejat.lexer.classifiers.quote import QuoteClassifierMixin
from tejat.lexer.classifiers.text import TextClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "LinkClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "TextClassifierMixin",
]
