# fastvlq

A fast variant of variable-length quantity (VLQ) encoding for integers. The
total number of bytes in an encoded value can always be worked out from its
first byte (for 128-bit values, from at most the first two), so a reader never
has to scan for a terminator.

Supported widths:

| Type    | Module             | Range            | Max bytes |
|---------|--------------------|------------------|-----------|
| `Vu32`  | `fastvlq.vu32`     | unsigned 32-bit  | 5         |
| `Vu64`  | `fastvlq.vu64`     | unsigned 64-bit  | 9         |
| `Vu128` | `fastvlq.vu128`    | unsigned 128-bit | 18        |
| `Vi32`  | `fastvlq.signed`   | signed 32-bit    | 5         |
| `Vi64`  | `fastvlq.signed`   | signed 64-bit    | 9         |
| `Vi128` | `fastvlq.signed`   | signed 128-bit   | 18        |

Signed types use zigzag encoding (`0, -1, 1, -2, ...` become `0, 1, 2, 3, ...`),
so numbers of small magnitude stay short.

The format doesn't require each number to have only one encoding. For example,
`1` can be stored as both `0b1000_0001` and `0b0100_0000_0000_0001`; both decode
to the same value.

## Installation

```sh
pip install fastvlq
```

## Encoding and decoding values

```python
from fastvlq.vu64 import Vu64, encode_vu64, decode_vu64

v = encode_vu64(300)
bytes(v)                 # b'@\xac' (two bytes)
len(v)                   # 2
decode_vu64(v)           # 300
decode_vu64(b"@\xac")    # 300, encoded bytes are accepted too
int(Vu64(300))           # 300
Vu64.from_raw(b"@\xac")  # build an instance from encoded bytes
```

Each type has a `value` property, `len()` for the encoded length, `bytes()` for
the encoded bytes and a `raw` property holding the whole fixed-size buffer,
zero padding included. Instances compare equal when their encoded bytes are
equal, and can be hashed.

Values outside a type's range raise `ValueError`, as do encoded bytes given to
`from_raw` or a decode function that are empty, too long or truncated.

Signed values:

```python
from fastvlq.signed import encode_vi32, decode_vi32, zigzag_encode_i32

v = encode_vi32(-1)
bytes(v)               # b'\x81'
decode_vi32(v)         # -1
zigzag_encode_i32(-2)  # 3
```

An instance's `repr` shows its encoded bits:

```python
>>> from fastvlq.vu32 import Vu32
>>> Vu32(128)
Vu32(0b01000000_00000000)
```

## Streams

`fastvlq.stream` reads and writes encoded integers on binary file-like objects
(anything with `read(size)` or `write(data)`). A stream that ends in the middle
of a number raises `EOFError`.

```python
import io
from fastvlq.stream import write_vu64, write_vi32, read_vu64, read_vi32

buf = io.BytesIO()
write_vu64(buf, 123456789)
write_vi32(buf, -42)

buf.seek(0)
read_vu64(buf)  # 123456789
read_vi32(buf)  # -42
```

There are `read_*` and `write_*` functions for `vu32`, `vi32`, `vu64`, `vi64`,
`vu128` and `vi128`.

## asyncio streams

`fastvlq.aio` offers the same functions as coroutines. A reader needs an
awaitable `readexactly(size)` (as on `asyncio.StreamReader`) or an awaitable
`read(size)`; a writer needs `write(data)`, which may be a coroutine, and its
`drain()` is awaited after each write when it has one (as on
`asyncio.StreamWriter`).

```python
from fastvlq.aio import read_vu128, write_vu128

async def echo(reader, writer):
    value = await read_vu128(reader)
    await write_vu128(writer, value)
```

## Command line

Print the 64-bit encoding of a number:

```sh
fastvlq 300
```

This prints `Vu64(0b01000000_10101100)`. The command only handles unsigned
64-bit numbers; anything else prints `Usage: <number>` to standard error and
exits with status 1.

## Development

```sh
pip install -e ".[test]"
pytest
```