import pytest
from hypothesis import given
from hypothesis import strategies as st

from fastvlq.prefix import offset, prefix_byte
from fastvlq.vu32 import Vu32, decode_len_vu32, decode_vu32, encode_vu32

U32 = st.integers(min_value=0, max_value=2**32 - 1)


@given(U32)
def test_round_trip(n):
    assert decode_vu32(encode_vu32(n)) == n


@given(U32)
def test_round_trip_through_bytes(n):
    encoded = bytes(Vu32(n))
    assert decode_vu32(encoded) == n
    assert Vu32.from_raw(encoded).value == n


@given(U32)
def test_first_byte_announces_length(n):
    v = Vu32(n)
    data = bytes(v)
    assert len(data) == len(v)
    assert decode_len_vu32(data[0]) == len(v)


@given(U32)
def test_raw_is_padded_buffer(n):
    v = Vu32(n)
    assert len(v.raw) == 5
    assert v.raw[: len(v)] == bytes(v)
    assert v.raw[len(v):] == bytes(5 - len(v))


@given(U32, U32)
def test_length_is_monotonic(a, b):
    low, high = sorted((a, b))
    assert len(Vu32(low)) <= len(Vu32(high))


@pytest.mark.parametrize("length", range(1, 5))
def test_length_boundaries(length):
    assert len(Vu32(offset(length + 1) - 1)) == length
    assert len(Vu32(offset(length + 1))) == length + 1


def test_max_value():
    v = Vu32(2**32 - 1)
    assert len(v) == 5
    assert v.value == 2**32 - 1


def test_wire_bytes_of_small_values():
    assert bytes(Vu32(0)) == b"\x80"
    assert bytes(Vu32(offset(2))) == b"\x40\x00"


def test_repr_shows_binary_bytes():
    assert repr(Vu32(0)) == "Vu32(0b10000000)"
    assert repr(Vu32(offset(2))) == "Vu32(0b01000000_00000000)"


def test_str_and_int():
    v = Vu32(123456)
    assert str(v) == "123456"
    assert int(v) == 123456


def test_decode_len_clamps_to_five():
    assert decode_len_vu32(0) == 5
    assert decode_len_vu32(0xFF) == 1


def test_decode_len_rejects_non_byte():
    with pytest.raises(ValueError):
        decode_len_vu32(256)


def test_longer_encoding_adds_offset():
    raw = bytes([prefix_byte(2, 0), 5])
    assert Vu32.from_raw(raw).value == offset(2) + 5


def test_equality_and_hash():
    a = Vu32(300)
    b = Vu32.from_raw(bytes(Vu32(300)))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Vu32(301)


@pytest.mark.parametrize("value", [-1, 2**32])
def test_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Vu32(value)


def test_rejects_non_integer():
    with pytest.raises(TypeError):
        Vu32(1.5)


def test_from_raw_rejects_empty():
    with pytest.raises(ValueError):
        Vu32.from_raw(b"")


def test_from_raw_rejects_truncated():
    with pytest.raises(ValueError):
        Vu32.from_raw(bytes(Vu32(offset(3)))[:2])


def test_from_raw_rejects_too_long():
    with pytest.raises(ValueError):
        Vu32.from_raw(bytes(6))


@given(st.binary(min_size=5, max_size=5))
def test_any_five_bytes_decode_into_range(raw):
    assert 0 <= Vu32.from_raw(raw).value <= 2**32 - 1