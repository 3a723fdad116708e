import io

import pytest

from fdfview.reader import LineReader, read_lines

TEXT = "a\nbb\n\nccc"


@pytest.mark.parametrize("size", [1, 2, 3, 4096])
def test_lines_keep_newlines_for_any_buffer(size):
    reader = LineReader(io.StringIO(TEXT), size)
    assert list(reader) == ["a\n", "bb\n", "\n", "ccc"]


def test_joined_lines_reproduce_input():
    assert "".join(LineReader(io.StringIO(TEXT))) == TEXT


def test_binary_stream():
    reader = LineReader(io.BytesIO(b"x\ny\n"), 1)
    assert list(reader) == [b"x\n", b"y\n"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("one\n"))
    assert reader.next_line() == "one\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


@pytest.mark.parametrize("size", [0, -1, 0x7FFFFFFF])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_read_lines_round_trip(tmp_path):
    content = "0 0 0\n0 10 0\n0 0 0\n"
    path = tmp_path / "map.fdf"
    path.write_text(content, encoding="utf-8")
    lines = read_lines(path)
    assert len(lines) == content.count("\n")
    assert "".join(lines) == content


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.fdf")