import os

import pytest

from libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    """An OS pipe whose write end is handed to the code under test."""

    def __init__(self):
        self._read_fd, self.fd = os.pipe()
        self._write_open = True

    def read(self):
        """Close the write end and return everything written to it."""
        self._close_write()
        chunks = []
        while True:
            chunk = os.read(self._read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def _close_write(self):
        if self._write_open:
            os.close(self.fd)
            self._write_open = False

    def close(self):
        self._close_write()
        os.close(self._read_fd)


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_putchar_str_and_int(pipe):
    putchar_fd("a", pipe.fd)
    putchar_fd(ord("b"), pipe.fd)
    assert pipe.read() == b"ab"


def test_putstr(pipe):
    putstr_fd("hello world", pipe.fd)
    assert pipe.read() == b"hello world"


def test_putstr_none_writes_nothing(pipe):
    putstr_fd(None, pipe.fd)
    putstr_fd("x", pipe.fd)
    assert pipe.read() == b"x"


def test_putendl(pipe):
    putendl_fd("line", pipe.fd)
    assert pipe.read() == b"line\n"


def test_putendl_none_still_newline(pipe):
    putendl_fd(None, pipe.fd)
    assert pipe.read() == b"\n"


@pytest.mark.parametrize("n", [0, 7, -7, 147483648, 2147483647])
def test_putnbr_round_trip(pipe, n):
    putnbr_fd(n, pipe.fd)
    assert int(pipe.read().decode()) == n


def test_putnbr_min_int(pipe):
    putnbr_fd(-2147483648, pipe.fd)
    assert pipe.read() == b"-2147483648"


def test_negative_fd_is_ignored(pipe):
    results = [
        putchar_fd("a", -1),
        putstr_fd("abc", -1),
        putendl_fd("abc", -1),
        putnbr_fd(5, -1),
    ]
    assert results == [None, None, None, None]
    putstr_fd("ok", pipe.fd)
    assert pipe.read() == b"ok"


def test_putchar_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        putchar_fd("ab", pipe.fd)


def test_putnbr_rejects_non_int(pipe):
    with pytest.raises(TypeError):
        putnbr_fd("5", pipe.fd)