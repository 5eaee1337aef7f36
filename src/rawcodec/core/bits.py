"""Bit-array packing and narrowing conversions.

None of these depend on byte order.

  - bits_to_byte: 8 flags (LSB first) -> one byte
  - byte_to_bits: the mirror of bits_to_byte
  - chars_to_bytes: low 8 bits of every char (lossy above U+00FF)
  - int_to_bytes: low 32 bits little-endian, zero padded to ``size``
"""

from __future__ import annotations

from collections.abc import Sequence

from rawcodec.errors import DataSizeInvalid, ParameterInvalid

BITS_PER_BYTE = 8
INT_BYTES = 4


def bits_to_byte(bits: Sequence[int]) -> int:
    if bits is None:
        raise ParameterInvalid("bit array is None")
    if len(bits) != BITS_PER_BYTE:
        raise ParameterInvalid(f"bit array length must be {BITS_PER_BYTE}: got {len(bits)}")
    out = 0
    for i, b in enumerate(bits):
        # True/False and 1.0 would pass `in (0, 1)`; only real ints are flags
        if isinstance(b, bool) or not isinstance(b, int) or b not in (0, 1):
            raise ParameterInvalid(f"bit array value must be 0 or 1: bits[{i}]={b!r}")
        out |= b << i
    return out


def byte_to_bits(value: int) -> list[int]:
    """Unpack a byte (0..255, or signed -128..127) into 8 flags, LSB first."""
    if isinstance(value, bool) or not isinstance(value, int) or not (-128 <= value <= 255):
        raise ParameterInvalid(f"byte value out of range: {value!r}")
    v = value & 0xFF
    return [(v >> i) & 1 for i in range(BITS_PER_BYTE)]


def chars_to_bytes(chars: Sequence[str]) -> bytes:
    if chars is None:
        raise ParameterInvalid("char array is None")
    out = bytearray(len(chars))
    for i, c in enumerate(chars):
        if not isinstance(c, str) or len(c) != 1:
            raise ParameterInvalid(f"char array element must be a single character: chars[{i}]={c!r}")
        out[i] = ord(c) & 0xFF
    return bytes(out)


def int_to_bytes(value: int, size: int = INT_BYTES) -> bytes:
    if size < INT_BYTES:
        raise DataSizeInvalid(f"array size must be at least {INT_BYTES}: {size}")
    out = bytearray(size)
    out[:INT_BYTES] = (value & 0xFFFFFFFF).to_bytes(INT_BYTES, "little")
    return bytes(out)
