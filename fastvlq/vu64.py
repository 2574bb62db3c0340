"""Unsigned 64-bit VLQ encoding (at most 9 bytes)."""

from __future__ import annotations

from .vu32 import (
    _bit_repr,
    _check_byte,
    _check_unsigned,
    _decode_prefixed,
    _encode_prefixed,
    _padded,
    _prefix_len,
    _Vlq,
)

BUF_SIZE = 9
MAX_VALUE = 0xFFFF_FFFF_FFFF_FFFF


def decode_len_vu64(first: int) -> int:
    """Return the encoded length, in bytes, announced by the first byte.

    1xxx_xxxx is 1 byte, 01xx_xxxx is 2 bytes, and so on down to
    0000_0000, which is 9 bytes.
    """
    return 9 - _check_byte(first).bit_length()


class _UnsignedVlq(_Vlq):
    """Storage shared by unsigned encodings kept in a fixed-size buffer."""

    __slots__ = ("_raw",)

    @classmethod
    def _coerce(cls, v):
        return v if isinstance(v, cls) else cls.from_raw(v)


def _length_of(raw: bytes) -> int:
    return decode_len_vu64(raw[0])


def _encode_raw(value: int) -> bytes:
    return _encode_prefixed(value, _prefix_len(value, BUF_SIZE), BUF_SIZE)


def _decode_raw(raw: bytes) -> int:
    return _decode_prefixed(raw, decode_len_vu64(raw[0]), MAX_VALUE)


class Vu64(_UnsignedVlq):
    """An unsigned 64-bit integer in variable-length quantity encoding."""

    __slots__ = ()

    def __init__(self, value: int) -> None:
        self._raw = _encode_raw(_check_unsigned(value, 64))

    @classmethod
    def from_raw(cls, raw: bytes) -> Vu64:
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


def encode_vu64(n: int) -> Vu64:
    """Encode an unsigned 64-bit integer."""
    return Vu64(n)


def decode_vu64(v: Vu64 | bytes) -> int:
    """Decode a Vu64 instance, or its encoded bytes, back into an integer."""
    return Vu64._coerce(v).value