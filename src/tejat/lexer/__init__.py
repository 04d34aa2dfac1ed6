"""Line lexer for the Tejat Gemtext parser.

The lexer walks an immutable Cursor over the source, classifying one line
at a time. Classification is ordered alternation: each classifier gets the
same cursor and either matches or leaves it untouched.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Cursor
├── core.py              # Lexer class (classifier composition + assembly)
├── cursor.py            # Immutable Cursor with line/column tracking
├── scanners.py          # Primitive scanners and combinators
└── classifiers/         # One mixin per line type
    ├── fence.py         # Preformatted block
    ├── heading.py       # #, ##, ###
    ├── link.py          # =>
    ├── list.py          # *
    ├── quote.py         # >
    └── text.py          # Catch-all

Usage:
    >>> from tejat.lexer import Lexer
    >>> Lexer("* one\\n* two").parse()
    [ListItem(text='one'), ListItem(text='two')]

"""

from tejat.lexer.core import CLASSIFIER_ORDER, Lexer
from tejat.lexer.cursor import Cursor

__all__ = ["CLASSIFIER_ORDER", "Cursor", "Lexer"]
