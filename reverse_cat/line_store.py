# line_store.py
#
# In-memory holder for the lines of one file, kept in reverse order of reading.
# - prepend() puts each newly read line at the head (O(1))
# - fix_last_line_terminator() makes sure the head line ends with "\n"
# - drain() hands lines out head-to-tail and forgets each one as it goes

from collections import deque
from typing import Iterator, NamedTuple, Optional, Tuple

from .errors import LineStoreMemoryError

# ----------------------------- Constants ---------------------------------

LINE_TERMINATOR = b"\n"
MAX_LINE_LEN = 32766  # bytes of content per line, terminator not counted


class Line(NamedTuple):
    """One stored line. present=False is the "absent" sentinel, which is not the same as b""."""
    text: bytes = b""
    present: bool = True

    @classmethod
    def absent(cls) -> "Line":
        return cls(b"", False)

    def has_terminator(self) -> bool:
        return LINE_TERMINATOR in self.text


def clip_line(raw: bytes) -> Tuple[bytes, bool]:
    """
    Cut a line down to MAX_LINE_LEN bytes of content.
    The trailing "\n" survives the cut. Returns (text, was_truncated).
    """
    body = raw[:-1] if raw.endswith(LINE_TERMINATOR) else raw
    if len(body) <= MAX_LINE_LEN:
        return raw, False
    return body[:MAX_LINE_LEN] + raw[len(body):], True


class LineStore:
    def __init__(self):
        self._lines = deque()
        self.truncated = 0

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    @property
    def head(self) -> Optional[Line]:
        return self._lines[0] if self._lines else None

    def prepend(self, text: Optional[bytes] = None) -> "LineStore":
        """Store `text` (or an absent line for None) as the new head. Returns the store."""
        try:
            if text is None:
                line = Line.absent()
            else:
                clipped, was_cut = clip_line(bytes(text))
                if was_cut:
                    self.truncated += 1
                line = Line(clipped)
            self._lines.appendleft(line)
        except MemoryError:
            raise LineStoreMemoryError(len(self._lines)) from None
        return self

    def fix_last_line_terminator(self) -> None:
        """The head is the last line of the file; give it a "\n" if it has none."""
        head = self.head
        if head is None or not head.present:
            return
        if not head.has_terminator():
            try:
                self._lines[0] = Line(head.text + LINE_TERMINATOR)
            except MemoryError:
                raise LineStoreMemoryError(len(self._lines)) from None

    def drain(self) -> Iterator[Line]:
        while self._lines:
            yield self._lines.popleft()
