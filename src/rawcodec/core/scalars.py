from __future__ import annotations

from rawcodec.core.range_view import BytesLike, check_range, ordered, read_range, write_range
from rawcodec.errors import DataSizeInvalid, DataSizeUnknown, ParameterInvalid
from rawcodec.options import BYTE_FALSE, BYTE_TRUE, DEFAULT_OPTIONS, CodecOptions

# Supported widths (bits). Keep these stable.
BITS_BYTE = 8
BITS_SHORT = 16
BITS_INT = 32
BITS_LONG = 64

_CODEC_BITS = (BITS_BYTE, BITS_SHORT, BITS_INT, BITS_LONG)


def _width_bytes(bits: int) -> int:
    """Bits -> bytes; only positive whole-byte widths pass."""
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0 or bits % 8 != 0:
        raise DataSizeInvalid(f"data size must be a positive multiple of 8 bits: {bits!r}")
    return bits // 8


def _require_codec(bits: int) -> None:
    """Final width dispatch; whole-byte widths without a codec end here."""
    if bits not in _CODEC_BITS:
        raise DataSizeUnknown(f"no codec for data size: {bits} bits")


def _to_raw(value: int, bits: int) -> bytes:
    """Encode ``value`` as big-endian two's complement of ``bits`` width."""
    _require_codec(bits)
    lo = -(1 << (bits - 1))
    hi = 1 << bits
    if not (lo <= value < hi):
        raise ParameterInvalid(f"value {value} does not fit in {bits} bits")
    # unsigned aliases (e.g. 0xFFFF for a short) map onto the same bytes
    return (value & (hi - 1)).to_bytes(bits // 8, "big", signed=False)


def read_scalar(buf: BytesLike, bits: int, options: CodecOptions = DEFAULT_OPTIONS) -> int:
    """Read a signed integer of ``bits`` width at ``options.position``."""
    n = _width_bytes(bits)
    _require_codec(bits)
    raw = read_range(buf, options.position, n)
    return int.from_bytes(ordered(raw, options.order), "big", signed=True)


def write_scalar(
    buf: BytesLike, value: int, bits: int, options: CodecOptions = DEFAULT_OPTIONS
) -> None:
    """Write ``value`` as a ``bits``-wide integer at ``options.position``.

    Order of checks: width, value, bounds. The buffer is only touched once
    all of them pass.
    """
    n = _width_bytes(bits)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParameterInvalid(f"value must be an integer: {value!r}")
    raw = ordered(_to_raw(value, bits), options.order)
    check_range(buf, options.position, n)
    write_range(buf, options.position, raw)


def read_bool(buf: BytesLike, options: CodecOptions = DEFAULT_OPTIONS) -> bool:
    return read_range(buf, options.position, 1)[0] == BYTE_TRUE


def write_bool(buf: BytesLike, value: bool, options: CodecOptions = DEFAULT_OPTIONS) -> None:
    raw = bytes([BYTE_TRUE if value else BYTE_FALSE])
    write_range(buf, options.position, raw)


def read_short(buf: BytesLike, options: CodecOptions = DEFAULT_OPTIONS) -> int:
    return read_scalar(buf, BITS_SHORT, options)


def read_int(buf: BytesLike, options: CodecOptions = DEFAULT_OPTIONS) -> int:
    return read_scalar(buf, BITS_INT, options)


def read_long(buf: BytesLike, options: CodecOptions = DEFAULT_OPTIONS) -> int:
    return read_scalar(buf, BITS_LONG, options)


def write_short(buf: BytesLike, value: int, options: CodecOptions = DEFAULT_OPTIONS) -> None:
    write_scalar(buf, value, BITS_SHORT, options)


def write_int(buf: BytesLike, value: int, options: CodecOptions = DEFAULT_OPTIONS) -> None:
    write_scalar(buf, value, BITS_INT, options)


def write_long(buf: BytesLike, value: int, options: CodecOptions = DEFAULT_OPTIONS) -> None:
    write_scalar(buf, value, BITS_LONG, options)
