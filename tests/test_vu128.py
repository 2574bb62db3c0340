import pytest
from hypothesis import given
from hypothesis import strategies as st

from fastvlq.prefix import offset
from fastvlq.vu128 import (
    BUF_SIZE,
    MAX_VALUE,
    Vu128,
    decode_len_vu128,
    decode_vu128,
    encode_vu128,
)


def _boundaries():
    values = {0, 1, MAX_VALUE, MAX_VALUE - 1}
    for length in range(2, 18):
        values.add(offset(length) - 1)
        values.add(offset(length))
        values.add(offset(length) + 1)
    nine = offset(9)
    values.update({nine + (1 << 63) - 1, nine + (1 << 63), nine + (1 << 64) - 1})
    for length in range(10, 17):
        values.add(offset(length) + (1 << (7 * length)) - 1)
        values.add(offset(length) + (1 << (7 * length)))
    return sorted(v for v in values if 0 <= v <= MAX_VALUE)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (0x80, 0x00, 1),
        (0xFF, 0x12, 1),
        (0x40, 0x00, 2),
        (0x20, 0x00, 3),
        (0x01, 0xFF, 8),
        (0x00, 0x80, 9),
        (0x00, 0xFF, 9),
        (0x00, 0x40, 10),
        (0x00, 0x7F, 10),
        (0x00, 0x20, 11),
        (0x00, 0x3F, 11),
        (0x00, 0x01, 16),
        (0x00, 0x00, 18),
    ],
)
def test_decode_len(first, second, expected):
    assert decode_len_vu128(first, second) == expected


@pytest.mark.parametrize("first, second", [(256, 0), (0, 256), (-1, 0)])
def test_decode_len_rejects_non_bytes(first, second):
    with pytest.raises(ValueError):
        decode_len_vu128(first, second)


def test_small_values_wire_bytes():
    assert bytes(encode_vu128(0)) == b"\x80"
    assert bytes(encode_vu128(127)) == b"\xff"
    assert bytes(encode_vu128(128)) == b"\x40\x00"


def test_max_value_uses_raw_form():
    encoded = encode_vu128(MAX_VALUE)
    assert bytes(encoded) == b"\x00\x00" + b"\xff" * 16
    assert len(encoded) == 18


def test_nine_byte_form():
    n = offset(9) + (1 << 63)
    encoded = encode_vu128(n)
    assert bytes(encoded) == b"\x00\x80" + bytes(7)
    assert decode_vu128(encoded) == n


@pytest.mark.parametrize("length", range(2, 9))
def test_standard_offsets_start_each_length(length):
    assert len(encode_vu128(offset(length))) == length
    assert len(encode_vu128(offset(length) - 1)) == length - 1


@pytest.mark.parametrize("length", range(10, 17))
def test_extended_offsets_start_each_length(length):
    encoded = encode_vu128(offset(length))
    assert len(encoded) == length
    assert bytes(encoded)[0] == 0
    assert decode_vu128(encoded) == offset(length)


def test_values_below_nine_byte_range_use_raw_form():
    n = offset(9)
    encoded = encode_vu128(n)
    assert len(encoded) == 18
    assert decode_vu128(encoded) == n


@pytest.mark.parametrize("n", _boundaries())
def test_boundary_round_trip(n):
    encoded = encode_vu128(n)
    assert decode_vu128(encoded) == n
    assert decode_vu128(bytes(encoded)) == n
    assert len(bytes(encoded)) == len(encoded)


@given(st.integers(min_value=0, max_value=MAX_VALUE))
def test_round_trip(n):
    encoded = Vu128(n)
    assert encoded.value == n
    assert int(encoded) == n
    assert Vu128.from_raw(bytes(encoded)).value == n


@given(st.integers(min_value=0, max_value=MAX_VALUE))
def test_length_is_announced_by_leading_bytes(n):
    encoded = Vu128(n)
    raw = encoded.raw
    assert len(raw) == BUF_SIZE
    assert decode_len_vu128(raw[0], raw[1]) == len(encoded)
    assert raw[len(encoded):] == bytes(BUF_SIZE - len(encoded))


@given(
    st.integers(min_value=0, max_value=MAX_VALUE),
    st.integers(min_value=0, max_value=MAX_VALUE),
)
def test_encoding_preserves_order_of_lengths(a, b):
    if a <= b:
        assert len(Vu128(a)) <= len(Vu128(b)) or len(Vu128(b)) == 18 or len(Vu128(a)) == 18
    assert (Vu128(a) == Vu128(b)) == (a == b)


@pytest.mark.parametrize("bad", [-1, MAX_VALUE + 1])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        Vu128(bad)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        Vu128(1.5)


def test_from_raw_accepts_padding():
    padded = bytes(encode_vu128(300)) + bytes(5)
    assert Vu128.from_raw(padded).value == 300


def test_from_raw_empty():
    with pytest.raises(ValueError):
        Vu128.from_raw(b"")


def test_from_raw_too_long():
    with pytest.raises(ValueError):
        Vu128.from_raw(bytes(BUF_SIZE + 1))


def test_from_raw_truncated():
    with pytest.raises(ValueError):
        Vu128.from_raw(b"\x40")
    with pytest.raises(ValueError):
        Vu128.from_raw(b"\x00")
    with pytest.raises(ValueError):
        decode_vu128(b"\x00\x80\x00")


def test_str_and_repr():
    assert str(Vu128(12345)) == "12345"
    assert repr(Vu128(0)) == "Vu128(0b10000000)"
    assert repr(Vu128(128)) == "Vu128(0b01000000_00000000)"


def test_equality_and_hash():
    a = Vu128(987654321)
    b = Vu128.from_raw(bytes(a))
    assert a == b
    assert hash(a) == hash(b)
    assert {a, b} == {a}
    assert a != Vu128(1)


def test_index_allows_int_use():
    assert [10, 20, 30][Vu128(2)] == 30