"""Input view and result protocol shared by all combinators.

Python 3.13+.
"""

from .cursor import Cursor, Parser, PartialParse

__all__ = ["Cursor", "Parser", "PartialParse"]
