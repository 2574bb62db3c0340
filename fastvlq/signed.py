"""Signed VLQ encodings, built on the unsigned ones through zigzag encoding.

Zigzag encoding maps signed integers onto unsigned ones so that numbers of
small magnitude stay small: 0, -1, 1, -2, 2, ... become 0, 1, 2, 3, 4, ...
"""

from __future__ import annotations

import operator

from .vu32 import Vu32, _bit_repr, _check_unsigned, _Vlq, decode_vu32
from .vu64 import Vu64, decode_vu64
from .vu128 import Vu128, decode_vu128


def _check_signed(n: int, bits: int) -> int:
    n = operator.index(n)
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if not low <= n <= high:
        raise ValueError(f"value out of range for a signed {bits}-bit integer: {n}")
    return n


def _zigzag_encode(n: int, bits: int) -> int:
    n = _check_signed(n, bits)
    return ((n << 1) ^ (n >> (bits - 1))) & ((1 << bits) - 1)


def _zigzag_decode(n: int, bits: int) -> int:
    n = _check_unsigned(n, bits)
    return (n >> 1) ^ -(n & 1)


def zigzag_encode_i32(n: int) -> int:
    """Map a signed 32-bit integer onto an unsigned one."""
    return _zigzag_encode(n, 32)


def zigzag_decode_i32(n: int) -> int:
    """Map a zigzag-encoded unsigned 32-bit integer back to a signed one."""
    return _zigzag_decode(n, 32)


def zigzag_encode_i64(n: int) -> int:
    """Map a signed 64-bit integer onto an unsigned one."""
    return _zigzag_encode(n, 64)


def zigzag_decode_i64(n: int) -> int:
    """Map a zigzag-encoded unsigned 64-bit integer back to a signed one."""
    return _zigzag_decode(n, 64)


def zigzag_encode_i128(n: int) -> int:
    """Map a signed 128-bit integer onto an unsigned one."""
    return _zigzag_encode(n, 128)


def zigzag_decode_i128(n: int) -> int:
    """Map a zigzag-encoded unsigned 128-bit integer back to a signed one."""
    return _zigzag_decode(n, 128)


class _SignedVlq(_Vlq):
    """A signed integer stored as the zigzag image of an unsigned encoding.

    Subclasses set ``_BITS`` and ``_DECODE_UNSIGNED`` (the matching unsigned
    decode function).
    """

    __slots__ = ("_inner",)

    _BITS = 0

    @classmethod
    def _decode_any(cls, v) -> int:
        if isinstance(v, cls):
            return v.value
        return _zigzag_decode(cls._DECODE_UNSIGNED(v), cls._BITS)


class Vi32(_SignedVlq):
    """A signed 32-bit integer in zigzag variable-length quantity encoding."""

    __slots__ = ()
    _BITS = 32
    _DECODE_UNSIGNED = staticmethod(decode_vu32)

    def __init__(self, value: int) -> None:
        self._inner = Vu32(zigzag_encode_i32(value))

    @property
    def value(self) -> int:
        """The stored number."""
        return zigzag_decode_i32(self._inner.value)

    @property
    def raw(self) -> bytes:
        """The whole fixed-size internal buffer, padding included."""
        return self._inner.raw

    def __len__(self) -> int:
        return len(self._inner)

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return bytes(self._inner)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return _bit_repr(self)


class Vi64(_SignedVlq):
    """A signed 64-bit integer in zigzag variable-length quantity encoding."""

    __slots__ = ()
    _BITS = 64
    _DECODE_UNSIGNED = staticmethod(decode_vu64)

    def __init__(self, value: int) -> None:
        self._inner = Vu64(zigzag_encode_i64(value))

    @property
    def value(self) -> int:
        """The stored number."""
        return zigzag_decode_i64(self._inner.value)

    @property
    def raw(self) -> bytes:
        """The whole fixed-size internal buffer, padding included."""
        return self._inner.raw

    def __len__(self) -> int:
        return len(self._inner)

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return bytes(self._inner)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return _bit_repr(self)


class Vi128(_SignedVlq):
    """A signed 128-bit integer in zigzag variable-length quantity encoding."""

    __slots__ = ()
    _BITS = 128
    _DECODE_UNSIGNED = staticmethod(decode_vu128)

    def __init__(self, value: int) -> None:
        self._inner = Vu128(zigzag_encode_i128(value))

    @property
    def value(self) -> int:
        """The stored number."""
        return zigzag_decode_i128(self._inner.value)

    @property
    def raw(self) -> bytes:
        """The whole fixed-size internal buffer, padding included."""
        return self._inner.raw

    def __len__(self) -> int:
        return len(self._inner)

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return bytes(self._inner)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return _bit_repr(self)


def encode_vi32(n: int) -> Vi32:
    """Encode a signed 32-bit integer."""
    return Vi32(n)


def decode_vi32(v: Vi32 | bytes) -> int:
    """Decode a Vi32 instance, or its encoded bytes, back into an integer."""
    return Vi32._decode_any(v)


def encode_vi64(n: int) -> Vi64:
    """Encode a signed 64-bit integer."""
    return Vi64(n)


def decode_vi64(v: Vi64 | bytes) -> int:
    """Decode a Vi64 instance, or its encoded bytes, back into an integer."""
    return Vi64._decode_any(v)


def encode_vi128(n: int) -> Vi128:
    """Encode a signed 128-bit integer."""
    return Vi128(n)


def decode_vi128(v: Vi128 | bytes) -> int:
    """Decode a Vi128 instance, or its encoded bytes, back into an integer."""
    return Vi128._decode_any(v)