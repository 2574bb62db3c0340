"""Prefix bytes and value offsets shared by the VLQ encodings.

An encoded number of ``length`` bytes starts with ``length - 1`` zero bits
followed by a one bit (no marker bit at all for lengths 8 and 9 of the
standard scheme). Each length covers a range of values that begins where
the previous length's range ends; ``offset(length)`` is that first value.
"""

from __future__ import annotations

_STANDARD_MAX = 9
_EXTENDED_MAX = 17


def _build_offsets() -> dict[int, int]:
    offsets = {1: 0}
    for length in range(2, _STANDARD_MAX + 1):
        offsets[length] = offsets[length - 1] + (1 << (7 * (length - 1)))
    for length in range(_STANDARD_MAX + 1, _EXTENDED_MAX + 1):
        offsets[length] = offsets[length - 1] + (1 << (64 + 7 * (length - 10)))
    return offsets


_OFFSETS = _build_offsets()

_MARKERS = {length: 0x80 >> (length - 1) for length in range(1, 9)}
_MARKERS[9] = 0x00

_DATA_MASKS = {length: 0xFF >> length for length in range(1, 10)}


def _check_prefix_length(length: int) -> None:
    if length not in _MARKERS:
        raise ValueError(f"prefix length must be between 1 and 9, got {length}")


def _check_byte(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value must be between 0 and 255, got {value}")


def offset(length: int) -> int:
    """Return the smallest value that is encoded with ``length`` bytes."""
    try:
        return _OFFSETS[length]
    except KeyError:
        raise ValueError(
            f"offset length must be between 1 and {_EXTENDED_MAX}, got {length}"
        ) from None


def prefix_byte(length: int, value: int) -> int:
    """Combine the length marker for ``length`` with the data bits of ``value``."""
    _check_prefix_length(length)
    _check_byte(value)
    return (value & _DATA_MASKS[length]) | _MARKERS[length]


def unprefix_byte(length: int, value: int) -> int:
    """Strip the length marker for ``length`` from ``value``, keeping the data bits."""
    _check_prefix_length(length)
    _check_byte(value)
    return value & _DATA_MASKS[length]