# reader.py
#
# Load every line of a file into a LineStore, last line at the head.
# Bytes in, bytes out: no decoding, lines split on "\n" only.

import sys
from pathlib import Path
from typing import Union

from .errors import SourceUnreadable
from .line_store import LineStore


def read_lines(path: Union[str, Path], strict: bool = False) -> LineStore:
    """
    Read `path` line by line, prepending each line, then fix up the last line's terminator.

    If the file cannot be opened, an empty store is returned (or SourceUnreadable
    is raised when strict=True). Lines longer than MAX_LINE_LEN are truncated and
    counted in store.truncated.
    """
    store = LineStore()
    try:
        f = open(path, "rb")
    except OSError as e:
        if strict:
            raise SourceUnreadable(path) from e
        print(f"[warn] Could not open {path}: {e}", file=sys.stderr)
        return store

    with f:
        try:
            for raw in f:
                store.prepend(raw)
        except OSError as e:
            if strict:
                raise SourceUnreadable(path) from e
            print(f"[warn] Read of {path} stopped early: {e}", file=sys.stderr)

    store.fix_last_line_terminator()
    return store
