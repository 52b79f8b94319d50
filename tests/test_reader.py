import pytest

from reverse_cat.errors import SourceUnreadable
from reverse_cat.line_store import MAX_LINE_LEN
from reverse_cat.reader import read_lines


def test_read_reverses_and_fixes_last_line(make_file):
    store = read_lines(make_file(b"a\nb\nc"))

    assert [line.text for line in store] == [b"c\n", b"b\n", b"a\n"]


def test_read_keeps_existing_terminators(make_file):
    store = read_lines(make_file(b"one\n\ntwo\r\n"))

    assert [line.text for line in store] == [b"two\r\n", b"\n", b"one\n"]


def test_read_empty_file_gives_empty_store(make_file):
    store = read_lines(make_file(b""))

    assert len(store) == 0
    assert store.head is None


def test_read_missing_file_returns_empty_store(tmp_path, capsys):
    store = read_lines(tmp_path / "nope.txt")

    assert not store
    assert "[warn] Could not open" in capsys.readouterr().err


def test_read_missing_file_strict_raises(tmp_path):
    with pytest.raises(SourceUnreadable):
        read_lines(tmp_path / "nope.txt", strict=True)


def test_read_truncates_long_lines(make_file):
    store = read_lines(make_file(b"a" * (MAX_LINE_LEN + 5) + b"\nshort\n"))

    assert store.truncated == 1
    short, long_line = list(store)
    assert short.text == b"short\n"
    assert long_line.text == b"a" * MAX_LINE_LEN + b"\n"


def test_read_does_not_decode(make_file):
    raw = b"\xff\xfe latin-1 \xe9\n\x00nul\n"
    store = read_lines(make_file(raw))

    assert b"".join(line.text for line in reversed(list(store))) == raw
