"""Public API of rawcodec.

Thin wrappers over ``rawcodec.core``: each one builds a ``CodecOptions``
from its keyword arguments and calls the canonical operation.

    >>> buf = bytearray(8)
    >>> write_int(buf, 0x12345678, order=LITTLE_ENDIAN)
    >>> buf[:4].hex()
    '78563412'
    >>> read_int(buf, order=LITTLE_ENDIAN) == 0x12345678
    True

``options=`` supplies position/order/encoding in one value; explicit
keyword arguments win over it.
"""

from __future__ import annotations

from rawcodec.core import scalars, text
from rawcodec.core.bits import bits_to_byte, byte_to_bits, chars_to_bytes, int_to_bytes
from rawcodec.core.range_view import BytesLike
from rawcodec.core.scalars import read_scalar, write_scalar
from rawcodec.options import (
    BIG_ENDIAN,
    DEFAULT_ENCODING,
    DEFAULT_OPTIONS,
    LITTLE_ENDIAN,
    ByteOrder,
    CodecOptions,
)

__all__ = [
    "BIG_ENDIAN",
    "LITTLE_ENDIAN",
    "DEFAULT_ENCODING",
    "CodecOptions",
    "read_bool",
    "write_bool",
    "read_short",
    "read_int",
    "read_long",
    "write_short",
    "write_int",
    "write_long",
    "read_scalar",
    "write_scalar",
    "read_string",
    "write_string",
    "chars_to_bytes",
    "bits_to_byte",
    "byte_to_bits",
    "int_to_bytes",
]


def _opts(
    options: CodecOptions | None,
    position: int | None,
    order: ByteOrder | str | None = None,
    encoding: str | None = None,
) -> CodecOptions:
    base = DEFAULT_OPTIONS if options is None else options
    return base.replace(position=position, order=order, encoding=encoding)


def read_bool(buf: BytesLike, position: int | None = None, *, options: CodecOptions | None = None) -> bool:
    return scalars.read_bool(buf, _opts(options, position))


def write_bool(
    buf: BytesLike, value: bool, position: int | None = None, *, options: CodecOptions | None = None
) -> None:
    scalars.write_bool(buf, value, _opts(options, position))


def read_short(
    buf: BytesLike,
    position: int | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> int:
    return scalars.read_short(buf, _opts(options, position, order))


def read_int(
    buf: BytesLike,
    position: int | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> int:
    return scalars.read_int(buf, _opts(options, position, order))


def read_long(
    buf: BytesLike,
    position: int | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> int:
    return scalars.read_long(buf, _opts(options, position, order))


def write_short(
    buf: BytesLike,
    value: int,
    position: int | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> None:
    scalars.write_short(buf, value, _opts(options, position, order))


def write_int(
    buf: BytesLike,
    value: int,
    position: int | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> None:
    scalars.write_int(buf, value, _opts(options, position, order))


def write_long(
    buf: BytesLike,
    value: int,
    position: int | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> None:
    scalars.write_long(buf, value, _opts(options, position, order))


def read_string(
    buf: BytesLike,
    position: int | None = None,
    length: int | None = None,
    encoding: str | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> str:
    """Decode text; ``length=None`` means up to the end of ``buf``."""
    return text.read_string(buf, length, _opts(options, position, order, encoding))


def write_string(
    buf: BytesLike,
    value: str | None,
    position: int | None = None,
    encoding: str | None = None,
    order: ByteOrder | str | None = None,
    *,
    options: CodecOptions | None = None,
) -> None:
    """Encode text into ``buf``; empty or ``None`` values are a no-op."""
    text.write_string(buf, value, _opts(options, position, order, encoding))
