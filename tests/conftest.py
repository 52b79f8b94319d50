import pytest


@pytest.fixture
def make_file(tmp_path):
    """Write raw bytes to tmp_path/<name> and return the path."""
    def _make(content: bytes, name: str = "source.txt"):
        p = tmp_path / name
        p.write_bytes(content)
        return p
    return _make


class FlakyStream:
    """Binary sink that raises OSError on every write after the first `fail_after` calls."""

    def __init__(self, fail_after: int, fail_flush: bool = False):
        self.fail_after = fail_after
        self.fail_flush = fail_flush
        self.calls = 0
        self.chunks = []

    def write(self, data: bytes):
        self.calls += 1
        if self.calls > self.fail_after:
            raise OSError(28, "No space left on device")
        self.chunks.append(data)
        return len(data)

    def flush(self):
        if self.fail_flush:
            raise OSError(5, "Input/output error")


@pytest.fixture
def flaky_stream():
    return FlakyStream


class UnclosableStream(FlakyStream):
    """Accepts every write, then fails in close() the way a full disk does on the final flush."""

    def __init__(self):
        super().__init__(fail_after=10 ** 6)
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        raise OSError(28, "No space left on device")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def unclosable_stream():
    return UnclosableStream()
