"""Unsigned 32-bit VLQ encoding (at most 5 bytes).

This module also holds the pieces shared by every VLQ type in the package:
range checks, the prefix encoding of lengths 1 to 9 and the common dunders.
"""

from __future__ import annotations

import operator
from typing import Callable

from .prefix import offset, prefix_byte, unprefix_byte

BUF_SIZE = 5
MAX_VALUE = 0xFFFF_FFFF


def _check_unsigned(value: int, bits: int) -> int:
    value = operator.index(value)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"value out of range for an unsigned {bits}-bit integer: {value}")
    return value


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value must be between 0 and 255, got {value}")
    return value


def _prefix_len(n: int, max_len: int) -> int:
    """Shortest prefix-encoded length able to hold n, capped at max_len."""
    return next(
        (length for length in range(1, max_len) if n < offset(length + 1)),
        max_len,
    )


def _encode_prefixed(n: int, length: int, size: int) -> bytes:
    """Prefix-encode n in length bytes, zero-padded to size bytes."""
    data = (n - offset(length)).to_bytes(length, "big")
    return bytes([prefix_byte(length, data[0])]) + data[1:] + bytes(size - length)


def _decode_prefixed(raw: bytes, length: int, mask: int) -> int:
    """Decode length prefix-encoded bytes, wrapping the result with mask."""
    data = bytes([unprefix_byte(length, raw[0])]) + raw[1:length]
    return (int.from_bytes(data, "big") + offset(length)) & mask


def _padded(raw: bytes, size: int, length_of: Callable[[bytes], int]) -> bytes:
    """Validate encoded bytes and pad them with zeros to size bytes."""
    raw = bytes(raw)
    if not raw:
        raise ValueError("encoded value is empty")
    if len(raw) > size:
        raise ValueError(f"encoded value longer than {size} bytes")
    padded = raw + bytes(size - len(raw))
    length = length_of(padded)
    if len(raw) < length:
        raise ValueError(f"encoded value truncated: need {length} bytes, got {len(raw)}")
    return padded


def _bit_repr(obj: object) -> str:
    bits = "_".join(f"{b:08b}" for b in bytes(obj))
    return f"{type(obj).__name__}(0b{bits})"


class _Vlq:
    """Comparison, hashing and index conversion shared by all VLQ types."""

    __slots__ = ()

    def __index__(self) -> int:
        return int(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bytes(self) == bytes(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, bytes(self)))

    @classmethod
    def _adopt(cls, raw: bytes):
        instance = cls.__new__(cls)
        instance._raw = raw
        return instance


def decode_len_vu32(first: int) -> int:
    """Return the encoded length, in bytes, announced by the first byte."""
    return min(9 - _check_byte(first).bit_length(), BUF_SIZE)


class Vu32(_Vlq):
    """An unsigned 32-bit integer in variable-length quantity encoding."""

    __slots__ = ("_raw",)

    def __init__(self, value: int) -> None:
        value = _check_unsigned(value, 32)
        self._raw = _encode_prefixed(value, _prefix_len(value, BUF_SIZE), BUF_SIZE)

    @classmethod
    def from_raw(cls, raw: bytes) -> Vu32:
        """Build an instance from encoded bytes, which may carry zero padding."""
        return cls._adopt(_padded(raw, BUF_SIZE, lambda b: decode_len_vu32(b[0])))

    @property
    def value(self) -> int:
        """The stored number."""
        return _decode_prefixed(self._raw, len(self), MAX_VALUE)

    @property
    def raw(self) -> bytes:
        """The whole fixed-size internal buffer, padding included."""
        return self._raw

    def __len__(self) -> int:
        return decode_len_vu32(self._raw[0])

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return self._raw[: len(self)]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return _bit_repr(self)


def encode_vu32(n: int) -> Vu32:
    """Encode an unsigned 32-bit integer."""
    return Vu32(n)


def decode_vu32(v: Vu32 | bytes) -> int:
    """Decode a Vu32 instance, or its encoded bytes, back into an integer."""
    if isinstance(v, Vu32):
        return v.value
    return Vu32.from_raw(v).value