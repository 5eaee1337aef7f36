"""Bounds-checked range view.

The only place that touches caller buffers. Everything else asks for a
window here and reads or writes through it.
"""

from __future__ import annotations

from typing import Union

from rawcodec.errors import OutOfIndex, ParameterInvalid
from rawcodec.options import BIG_ENDIAN, ByteOrder, normalize_order

BytesLike = Union[bytes, bytearray, memoryview]


def _capacity(buf: BytesLike) -> int:
    if buf is None:
        raise ParameterInvalid("buffer is None")
    try:
        mv = memoryview(buf)
    except TypeError as e:
        raise ParameterInvalid(f"buffer is not bytes-like: {type(buf).__name__}") from e
    # strided views cannot be cast to a flat byte window
    if not mv.c_contiguous:
        raise ParameterInvalid("buffer must be C-contiguous")
    return mv.nbytes


def check_range(buf: BytesLike, position: int, length: int) -> int:
    """Validate ``[position, position + length)`` against ``buf``; return capacity."""
    capacity = _capacity(buf)
    # bool is an int subclass
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (position, length)):
        raise ParameterInvalid(f"position/length must be integers: {position!r}, {length!r}")
    if position < 0:
        raise ParameterInvalid(f"position must be >= 0: {position}")
    if length < 0:
        raise ParameterInvalid(f"length must be >= 0: {length}")
    if position + length > capacity:
        raise OutOfIndex(capacity, position, length)
    return capacity


def range_view(buf: BytesLike, position: int, length: int, writable: bool = False) -> memoryview:
    """Return a memoryview over exactly ``[position, position + length)``.

    With ``writable=True`` the buffer must accept item assignment
    (bytearray, writable memoryview); ``bytes`` is rejected.
    """
    check_range(buf, position, length)
    mv = memoryview(buf).cast("B")
    if writable and mv.readonly:
        raise ParameterInvalid(f"buffer is read-only: {type(buf).__name__}")
    return mv[position : position + length]


def ordered(data: BytesLike, order: ByteOrder = BIG_ENDIAN) -> bytes:
    """Return ``data`` as big-endian-first bytes laid out in ``order``.

    Big endian is the identity; little endian reverses the bytes. The swap
    is its own inverse, so the same call converts in both directions.
    """
    b = bytes(data)
    if normalize_order(order) == BIG_ENDIAN:
        return b
    return b[::-1]


def read_range(buf: BytesLike, position: int, length: int) -> bytes:
    """Copy ``length`` bytes out of ``buf`` starting at ``position``."""
    return bytes(range_view(buf, position, length))


def write_range(buf: BytesLike, position: int, data: BytesLike) -> None:
    """Copy ``data`` into ``buf`` at ``position``; all-or-nothing."""
    payload = bytes(data)
    view = range_view(buf, position, len(payload), writable=True)
    view[:] = payload
