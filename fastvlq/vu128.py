"""Unsigned 128-bit VLQ encoding (at most 18 bytes).

Lengths 1 to 8 use the same prefix scheme as the 64-bit encoding. A first
byte of zero announces a longer form, and the second byte then tells which:

* ``1xxx_xxxx``: 9 bytes, holding an offset value whose top bit is set;
* ``01xx_xxxx`` down to ``0000_0001``: 10 to 16 bytes (extended prefix);
* ``0000_0000``: 18 bytes, the raw big-endian 128-bit value.

Any value that none of the shorter forms can hold is written in the raw
18-byte form.
"""

from __future__ import annotations

from .prefix import offset, prefix_byte, unprefix_byte
from .vu32 import (
    _bit_repr,
    _check_byte,
    _check_unsigned,
    _decode_prefixed,
    _encode_prefixed,
    _padded,
    _prefix_len,
)
from .vu64 import _UnsignedVlq

BUF_SIZE = 18
MAX_VALUE = (1 << 128) - 1

_RAW_LEN = 18
_NINE_MIN = offset(9) + (1 << 63)
_NINE_MAX = offset(9) + (1 << 64) - 1


def decode_len_vu128(first: int, second: int) -> int:
    """Return the encoded length, in bytes, announced by the first two bytes."""
    _check_byte(first)
    _check_byte(second)
    if first:
        return 9 - first.bit_length()
    if second >= 0x80:
        return 9
    if second == 0:
        return _RAW_LEN
    return 9 + (8 - second.bit_length())


def _encode_len(n: int) -> int:
    length = _prefix_len(n, 9)
    if length < 9:
        return length
    if _NINE_MIN <= n <= _NINE_MAX:
        return 9
    for length in range(10, 17):
        start = offset(length)
        if start <= n < start + (1 << (7 * length)):
            return length
    return _RAW_LEN


def _encode_raw(n: int) -> bytes:
    length = _encode_len(n)
    if length <= 9:
        return _encode_prefixed(n, length, BUF_SIZE)
    if length == _RAW_LEN:
        return b"\x00\x00" + n.to_bytes(16, "big")
    data = (n - offset(length)).to_bytes(length - 1, "big")
    encoded = b"\x00" + bytes([prefix_byte(length - 8, data[0])]) + data[1:]
    return encoded + bytes(BUF_SIZE - length)


def _decode_raw(raw: bytes) -> int:
    length = decode_len_vu128(raw[0], raw[1])
    if length <= 9:
        return _decode_prefixed(raw, length, MAX_VALUE)
    if length == _RAW_LEN:
        return int.from_bytes(raw[2:_RAW_LEN], "big")
    data = bytes([unprefix_byte(length - 8, raw[1])]) + raw[2:length]
    return (int.from_bytes(data, "big") + offset(length)) & MAX_VALUE


def _length_of(raw: bytes) -> int:
    return decode_len_vu128(raw[0], raw[1])


class Vu128(_UnsignedVlq):
    """An unsigned 128-bit integer in variable-length quantity encoding."""

    __slots__ = ()

    def __init__(self, value: int) -> None:
        self._raw = _encode_raw(_check_unsigned(value, 128))

    @classmethod
    def from_raw(cls, raw: bytes) -> Vu128:
        """Build an instance from encoded bytes, which may carry zero padding."""
        return cls._adopt(_padded(raw, BUF_SIZE, _length_of))

    @property
    def value(self) -> int:
        """The stored number."""
        return _decode_raw(self._raw)

    @property
    def raw(self) -> bytes:
        """The whole fixed-size internal buffer, padding included."""
        return self._raw

    def __len__(self) -> int:
        return _length_of(self._raw)

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return self._raw[: len(self)]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return _bit_repr(self)


def encode_vu128(n: int) -> Vu128:
    """Encode an unsigned 128-bit integer."""
    return Vu128(n)


def decode_vu128(v: Vu128 | bytes) -> int:
    """Decode a Vu128 instance, or its encoded bytes, back into an integer."""
    return Vu128._coerce(v).value