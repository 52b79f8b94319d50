# writer.py
#
# Drain a LineStore to a file or to standard output, head first.
#
# State machine: OPEN -> WRITING -> (ERROR | DONE)
# After the first failed write the writer stops writing but keeps draining,
# so every line leaves the store either way. Nothing is retried.

import sys
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import DestinationUnwritable, WriteFailure
from .line_store import LineStore


class WriterState(Enum):
    OPEN = "open"
    WRITING = "writing"
    ERROR = "error"
    DONE = "done"


class LineWriter:
    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.state = WriterState.OPEN
        self.written = 0
        self.dropped = 0

    def drain(self, store: LineStore) -> bool:
        self.state = WriterState.WRITING
        for line in store.drain():
            if not line.present:
                continue
            if self.state is WriterState.ERROR:
                self.dropped += 1
                continue
            try:
                self.stream.write(line.text)
                self.written += 1
            except (OSError, ValueError):
                self.state = WriterState.ERROR
                self.dropped += 1

        if self.state is WriterState.WRITING:
            try:
                self.stream.flush()
            except (OSError, ValueError):
                self.state = WriterState.ERROR
        if self.state is WriterState.WRITING:
            self.state = WriterState.DONE
        return self.state is WriterState.DONE


def drain_to(store: LineStore, stream: BinaryIO) -> bool:
    """Write every present line of `store` to an open binary stream. True if no write failed."""
    return LineWriter(stream).drain(store)


def write_lines(store: LineStore, path: Optional[Union[str, Path]] = None, strict: bool = False) -> bool:
    """
    Drain `store` to `path` (created or truncated), or to standard output when path is None.

    Returns False if the destination cannot be opened or any write fails. With
    strict=True those cases raise DestinationUnwritable / WriteFailure instead.
    Standard output is flushed but never closed.
    """
    if path is None:
        ok = drain_to(store, sys.stdout.buffer)
        if not ok and strict:
            raise WriteFailure(None)
        return ok

    try:
        f = open(path, "wb")
    except OSError as e:
        if strict:
            raise DestinationUnwritable(path) from e
        return False

    ok = True
    try:
        with f:
            ok = drain_to(store, f)
    except OSError:
        # close() failed to flush
        ok = False

    if not ok and strict:
        raise WriteFailure(path)
    return ok
