import pytest

from libft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"x" * 5
    assert buf[5:] == b" world"


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == b"abc"


def test_memset_count_past_end_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    assert bzero(buf, 3) is None
    assert buf == bytes(3) + b"def"


def test_memcpy_copies_prefix():
    dst = bytearray(b"..........")
    src = b"abcdef"
    result = memcpy(dst, src, 4)
    assert result is dst
    assert dst[:4] == src[:4]
    assert dst[4:] == b"." * 6


def test_memcpy_same_buffer_is_identity():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) is buf
    assert buf == b"same"


def test_memcpy_count_past_source_rejected():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == b"ab" + b"abcde" + b"h"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == b"cdefg" + b"fgh"


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 3, 3, 4)
    assert buf == b"abcdefgh"


def test_memmove_out_of_range_rejected():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_matches_byte_of_value():
    data = bytes([1, 2, 0xFF, 3])
    assert memchr(data, -1, 4) == 2


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_difference():
    a, b = b"abcX", b"abcY"
    assert memcmp(a, b, 4) == a[3] - b[3]
    assert memcmp(b, a, 4) == -(a[3] - b[3])


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(bytes([0x80]), bytes([0x01]), 1) > 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


@pytest.mark.parametrize("count,size", [(0, 10), (10, 0), (0, 0)])
def test_calloc_zero_gives_empty(count, size):
    assert calloc(count, size) == bytearray()


def test_calloc_overflow_rejected():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)