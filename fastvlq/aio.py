"""Reading and writing VLQ-encoded integers on asynchronous streams.

A reader needs either an awaitable ``readexactly(size)``, as on
``asyncio.StreamReader``, or an awaitable ``read(size)``. A writer needs a
``write(data)`` method, which may be a coroutine. If the writer has an
awaitable ``drain()``, as on ``asyncio.StreamWriter``, it is awaited after
each write. A stream that ends in the middle of a number raises ``EOFError``.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any

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


async def _read_exact(reader: Any, size: int) -> bytes:
    if size <= 0:
        return b""
    readexactly = getattr(reader, "readexactly", None)
    if readexactly is not None:
        try:
            return bytes(await readexactly(size))
        except asyncio.IncompleteReadError as exc:
            missing = size - len(exc.partial)
            raise EOFError(f"stream ended: needed {missing} more byte(s)") from exc
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = await reader.read(remaining)
        if not chunk:
            raise EOFError(f"stream ended: needed {remaining} more byte(s)")
        chunks.append(bytes(chunk))
        remaining -= len(chunk)
    return b"".join(chunks)


async def _write_all(writer: Any, data: bytes) -> None:
    result = writer.write(data)
    if inspect.isawaitable(result):
        await result
    drain = getattr(writer, "drain", None)
    if drain is not None:
        await drain()


async def read_vu32(reader: Any) -> int:
    """Read a variable-length unsigned 32-bit integer."""
    head = await _read_exact(reader, 1)
    length = decode_len_vu32(head[0])
    return Vu32.from_raw(head + await _read_exact(reader, length - 1)).value


async def read_vi32(reader: Any) -> int:
    """Read a variable-length signed 32-bit integer."""
    return zigzag_decode_i32(await read_vu32(reader))


async def read_vu64(reader: Any) -> int:
    """Read a variable-length unsigned 64-bit integer."""
    head = await _read_exact(reader, 1)
    length = decode_len_vu64(head[0])
    return Vu64.from_raw(head + await _read_exact(reader, length - 1)).value


async def read_vi64(reader: Any) -> int:
    """Read a variable-length signed 64-bit integer."""
    return zigzag_decode_i64(await read_vu64(reader))


async def read_vu128(reader: Any) -> int:
    """Read a variable-length unsigned 128-bit integer."""
    head = await _read_exact(reader, 1)
    if head[0] == 0:
        # A zero first byte means the second byte decides the length.
        head += await _read_exact(reader, 1)
    second = head[1] if len(head) > 1 else 0
    length = decode_len_vu128(head[0], second)
    rest = await _read_exact(reader, length - len(head))
    return Vu128.from_raw(head + rest).value


async def read_vi128(reader: Any) -> int:
    """Read a variable-length signed 128-bit integer."""
    return zigzag_decode_i128(await read_vu128(reader))


async def write_vu32(writer: Any, n: int) -> None:
    """Write a variable-length unsigned 32-bit integer."""
    await _write_all(writer, bytes(Vu32(n)))


async def write_vi32(writer: Any, n: int) -> None:
    """Write a variable-length signed 32-bit integer."""
    await write_vu32(writer, zigzag_encode_i32(n))


async def write_vu64(writer: Any, n: int) -> None:
    """Write a variable-length unsigned 64-bit integer."""
    await _write_all(writer, bytes(Vu64(n)))


async def write_vi64(writer: Any, n: int) -> None:
    """Write a variable-length signed 64-bit integer."""
    await write_vu64(writer, zigzag_encode_i64(n))


async def write_vu128(writer: Any, n: int) -> None:
    """Write a variable-length unsigned 128-bit integer."""
    await _write_all(writer, bytes(Vu128(n)))


async def write_vi128(writer: Any, n: int) -> None:
    """Write a variable-length signed 128-bit integer."""
    await write_vu128(writer, zigzag_encode_i128(n))