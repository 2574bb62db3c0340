"""Reading and writing VLQ-encoded integers on binary file-like objects.

Readers need a ``read(size)`` method and writers a ``write(data)`` method,
as provided by ``io.BytesIO`` and files opened in binary mode. A stream that
ends in the middle of a number raises ``EOFError``.
"""

from __future__ import annotations

from typing import BinaryIO

from .signed import (
    zigzag_decode_i32,
    zigzag_decode_i64,
    zigzag_decode_i128,
    zigzag_encode_i32,
    zigzag_encode_i64,
    zigzag_encode_i128,
)
from .vu32 import Vu32, decode_len_vu32
from .vu64 import Vu64, decode_len_vu64
from .vu128 import Vu128, decode_len_vu128


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = reader.read(remaining)
        if not chunk:
            raise EOFError(f"stream ended: needed {remaining} more byte(s)")
        chunks.append(bytes(chunk))
        remaining -= len(chunk)
    return b"".join(chunks)


def _write_all(writer: BinaryIO, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = writer.write(view)
        if written is None:
            return
        if written == 0:
            raise OSError("failed to write whole buffer")
        view = view[written:]


def read_vu32(reader: BinaryIO) -> int:
    """Read a variable-length unsigned 32-bit integer."""
    head = _read_exact(reader, 1)
    length = decode_len_vu32(head[0])
    return Vu32.from_raw(head + _read_exact(reader, length - 1)).value


def read_vi32(reader: BinaryIO) -> int:
    """Read a variable-length signed 32-bit integer."""
    return zigzag_decode_i32(read_vu32(reader))


def read_vu64(reader: BinaryIO) -> int:
    """Read a variable-length unsigned 64-bit integer."""
    head = _read_exact(reader, 1)
    length = decode_len_vu64(head[0])
    return Vu64.from_raw(head + _read_exact(reader, length - 1)).value


def read_vi64(reader: BinaryIO) -> int:
    """Read a variable-length signed 64-bit integer."""
    return zigzag_decode_i64(read_vu64(reader))


def read_vu128(reader: BinaryIO) -> int:
    """Read a variable-length unsigned 128-bit integer."""
    head = _read_exact(reader, 1)
    if head[0] == 0:
        # A zero first byte means the second byte decides the length.
        head += _read_exact(reader, 1)
    second = head[1] if len(head) > 1 else 0
    length = decode_len_vu128(head[0], second)
    return Vu128.from_raw(head + _read_exact(reader, length - len(head))).value


def read_vi128(reader: BinaryIO) -> int:
    """Read a variable-length signed 128-bit integer."""
    return zigzag_decode_i128(read_vu128(reader))


def write_vu32(writer: BinaryIO, n: int) -> None:
    """Write a variable-length unsigned 32-bit integer."""
    _write_all(writer, bytes(Vu32(n)))


def write_vi32(writer: BinaryIO, n: int) -> None:
    """Write a variable-length signed 32-bit integer."""
    write_vu32(writer, zigzag_encode_i32(n))


def write_vu64(writer: BinaryIO, n: int) -> None:
    """Write a variable-length unsigned 64-bit integer."""
    _write_all(writer, bytes(Vu64(n)))


def write_vi64(writer: BinaryIO, n: int) -> None:
    """Write a variable-length signed 64-bit integer."""
    write_vu64(writer, zigzag_encode_i64(n))


def write_vu128(writer: BinaryIO, n: int) -> None:
    """Write a variable-length unsigned 128-bit integer."""
    _write_all(writer, bytes(Vu128(n)))


def write_vi128(writer: BinaryIO, n: int) -> None:
    """Write a variable-length signed 128-bit integer."""
    write_vu128(writer, zigzag_encode_i128(n))