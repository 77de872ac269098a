import io
import os

import pytest

from fractol.lines import iter_lines

SAMPLE = b"first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 3, 10, 1000])
def test_round_trip(size):
    lines = list(iter_lines(io.BytesIO(SAMPLE), size))
    assert b"".join(lines) == SAMPLE


@pytest.mark.parametrize("size", [1, 4, 10])
def test_each_line_has_one_newline_at_end(size):
    lines = list(iter_lines(io.BytesIO(SAMPLE), size))
    for line in lines[:-1]:
        assert line.endswith(b"\n")
        assert line.count(b"\n") == 1
    assert b"\n" not in lines[-1]
    assert len(lines) == SAMPLE.count(b"\n") + 1


def test_last_line_without_newline():
    assert list(iter_lines(io.BytesIO(b"a\nb"))) == [b"a\n", b"b"]


def test_empty_input_yields_nothing():
    assert list(iter_lines(io.BytesIO(b""))) == []


def test_reads_from_file_descriptor(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(SAMPLE)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(iter_lines(fd, 7))
    finally:
        os.close(fd)
    assert b"".join(lines) == SAMPLE
    assert lines[0] == b"first line\n"


def test_zero_buffer_size_rejected():
    with pytest.raises(ValueError):
        iter_lines(io.BytesIO(SAMPLE), 0)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        iter_lines(-1)


def test_closed_fd_raises(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_bytes(SAMPLE)
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        list(iter_lines(fd))