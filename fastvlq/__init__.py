"""Variable-length quantity encoding of 32-, 64- and 128-bit integers, signed and unsigned.

The encoded length is known from the first byte (the first two for 128-bit values).
Submodules: vu32, vu64, vu128, signed, stream, aio and cli.
"""

__version__ = "2.0.0"