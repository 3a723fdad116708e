import pytest

from fdfview import memory


def test_memset_fills_prefix():
    buffer = bytearray(b"abcdef")
    result = memory.memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer == bytearray(b"xxxdef")


def test_memset_uses_low_byte():
    buffer = bytearray(4)
    memory.memset(buffer, 0x1FF, len(buffer))
    assert set(buffer) == {0xFF}


def test_memset_rejects_overflow():
    with pytest.raises(ValueError):
        memory.memset(bytearray(2), 0, 5)


def test_bzero_clears_prefix():
    buffer = bytearray(b"abcd")
    memory.bzero(buffer, 2)
    assert buffer == bytearray(b"\0\0cd")


def test_memcpy_copies_bytes():
    dest = bytearray(b"......")
    src = b"hello!"
    result = memory.memcpy(dest, src, 4)
    assert result is dest
    assert dest == bytearray(src[:4] + b"..")


def test_memcpy_both_missing():
    assert memory.memcpy(None, None, 3) is None


def test_memcpy_one_missing():
    with pytest.raises(ValueError):
        memory.memcpy(bytearray(3), None, 1)


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    memory.memmove(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    memory.memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memory.memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"hello"
    assert memory.memchr(data, ord("l"), len(data)) == data.index(b"l")
    assert memory.memchr(data, ord("o"), 3) is None
    assert memory.memchr(data, ord("z"), len(data)) is None


def test_memcmp_reports_difference():
    assert memory.memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memory.memcmp(b"abc", b"abd", 2) == 0
    assert memory.memcmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_memcmp_is_antisymmetric():
    first, second = b"xyz1", b"xya2"
    assert memory.memcmp(first, second, 4) == -memory.memcmp(second, first, 4)


def test_calloc_zeroed():
    buffer = memory.calloc(3, 4)
    assert len(buffer) == 3 * 4
    assert not any(buffer)
    with pytest.raises(ValueError):
        memory.calloc(-1, 2)