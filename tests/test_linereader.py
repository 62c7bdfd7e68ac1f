import io

import pytest

from pushswap.linereader import LineReader


class _FailingStream:
    def __init__(self, data):
        self._data = data
        self._calls = 0

    def read(self, size):
        self._calls += 1
        if self._calls > 2:
            raise OSError("read failed")
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk


def test_reads_lines_with_newlines():
    reader = LineReader(io.StringIO("one\ntwo\nthree"))
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two\n"
    assert reader.read_line() == "three"
    assert reader.read_line() is None


def test_exhausted_stays_exhausted():
    reader = LineReader(io.StringIO("a\n"))
    assert reader.read_line() == "a\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None
    assert list(LineReader(io.BytesIO(b""))) == []


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64])
def test_round_trip_for_buffer_sizes(size):
    text = "alpha\n\nbeta\ngamma delta\nlast"
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_binary_stream():
    data = b"10 20\n30\n"
    lines = list(LineReader(io.BytesIO(data), 4))
    assert lines == [b"10 20\n", b"30\n"]


def test_empty_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"), 5)) == ["\n", "\n"]


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), -3)


def test_read_error_discards_buffer():
    reader = LineReader(_FailingStream("abcdef"), 2)
    with pytest.raises(OSError):
        reader.read_line()
    with pytest.raises(OSError):
        reader.read_line()


def test_iteration_matches_read_line():
    text = "x\ny\nz\n"
    by_iter = list(LineReader(io.StringIO(text), 2))
    reader = LineReader(io.StringIO(text), 2)
    by_call = [reader.read_line() for _ in range(3)]
    assert by_iter == by_call
    assert reader.read_line() is None