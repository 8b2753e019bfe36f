import pytest

from fractol.memory import (
    SIZE_MAX,
    calloc,
    mem_chr,
    mem_cmp,
    mem_copy,
    mem_move,
    mem_set,
    zero,
)


def test_zero_clears_prefix_only():
    original = b"evanescio"
    buf = bytearray(original)
    zero(buf, 5)
    assert buf[:5] == bytes(5)
    assert buf[5:] == original[5:]


def test_zero_with_zero_length_leaves_buffer():
    buf = bytearray(b"evanescio")
    zero(buf, 0)
    assert buf == bytearray(b"evanescio")


def test_zero_past_end_raises():
    with pytest.raises(IndexError):
        zero(bytearray(3), 4)


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)


@pytest.mark.parametrize("nmemb,size", [(0, 5), (5, 0), (0, 0)])
def test_calloc_empty(nmemb, size):
    assert calloc(nmemb, size) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_mem_chr_finds_first():
    data = b"tripouille"
    assert mem_chr(data, ord("i"), len(data)) == data.index(b"i")


def test_mem_chr_respects_limit():
    data = b"tripouille"
    assert mem_chr(data, ord("e"), len(data) - 1) is None


def test_mem_chr_missing():
    assert mem_chr(b"tripouille", ord("z"), 10) is None


def test_mem_chr_reduces_value_to_byte():
    data = b"tripouille"
    assert mem_chr(data, ord("t") + 256, len(data)) == 0


def test_mem_chr_past_end_raises():
    with pytest.raises(IndexError):
        mem_chr(b"abc", ord("z"), 20)


def test_mem_cmp_differs_after_nul():
    s2 = bytes([52, 0, 127, 0])
    s3 = bytes([52, 0, 42, 0])
    assert mem_cmp(s2, s3, 4) != 0
    assert mem_cmp(s2, s3, 4) > 0
    assert mem_cmp(s3, s2, 4) == -mem_cmp(s2, s3, 4)


def test_mem_cmp_equal_prefix():
    assert mem_cmp(bytes([52, 0, 127]), bytes([52, 0, 42]), 2) == 0


def test_mem_cmp_zero_length():
    assert mem_cmp(b"a", b"b", 0) == 0


def test_mem_cmp_unsigned_bytes():
    assert mem_cmp(b"\xff", b"\x01", 1) > 0


def test_mem_set_fills_and_returns_buffer():
    buf = bytearray(b"lixo")
    result = mem_set(buf, ord("0"), 2)
    assert result is buf
    assert buf[:2] == b"00"
    assert buf[2:] == b"xo"


def test_mem_set_negative_length():
    with pytest.raises(ValueError):
        mem_set(bytearray(4), 0, -1)


def test_mem_copy_copies_prefix():
    dest = bytearray(b"Shit")
    src = b"Fucking"
    result = mem_copy(dest, src, 3)
    assert result is dest
    assert dest[:3] == src[:3]
    assert dest[3:] == b"t"


def test_mem_copy_zero_length():
    dest = bytearray(b"lixo")
    mem_copy(dest, b"", 0)
    assert dest == bytearray(b"lixo")


def test_mem_copy_too_long_raises():
    with pytest.raises(IndexError):
        mem_copy(bytearray(2), b"lixo", 4)


@pytest.mark.parametrize("dest,src", [(3, 0), (0, 3), (2, 2), (1, 0), (0, 1)])
def test_mem_move_handles_overlap(dest, src):
    original = b"lixo\0\0\0"
    buf = bytearray(original)
    n = 4
    result = mem_move(buf, dest, src, n)
    assert result is buf
    assert buf[dest : dest + n] == original[src : src + n]
    assert len(buf) == len(original)


def test_mem_move_leaves_rest_untouched():
    original = b"lixo\0\0\0"
    buf = bytearray(original)
    mem_move(buf, 3, 0, 4)
    assert buf[:3] == original[:3]


def test_mem_move_out_of_range():
    with pytest.raises(IndexError):
        mem_move(bytearray(b"lixo"), 3, 0, 4)