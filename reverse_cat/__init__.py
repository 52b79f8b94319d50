# reverse_cat
#
# Reverse the line order of a text file (last line first, first line last).

from .line_store import LINE_TERMINATOR, MAX_LINE_LEN, Line, LineStore
from .reader import read_lines
from .writer import WriterState, drain_to, write_lines

__version__ = "1.0.0"

__all__ = [
    "LINE_TERMINATOR",
    "MAX_LINE_LEN",
    "Line",
    "LineStore",
    "WriterState",
    "drain_to",
    "read_lines",
    "write_lines",
]
