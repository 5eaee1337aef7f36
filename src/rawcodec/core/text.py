from __future__ import annotations

from rawcodec.core.range_view import BytesLike, check_range, read_range, write_range
from rawcodec.errors import NotSupportedEncoding, ParameterInvalid
from rawcodec.options import DEFAULT_OPTIONS, CodecOptions, normalize_order, resolve_encoding


def read_string(
    buf: BytesLike, length: int | None = None, options: CodecOptions = DEFAULT_OPTIONS
) -> str:
    """Decode ``length`` bytes at ``options.position`` as text.

    ``length=None`` reads up to the end of the buffer. Byte order is
    validated but never reorders text bytes.
    """
    encoding = resolve_encoding(options.encoding)
    normalize_order(options.order)
    position = options.position
    if length is None:
        capacity = check_range(buf, position, 0)
        length = capacity - position
    raw = read_range(buf, position, length)
    if not raw:
        return ""
    try:
        return raw.decode(encoding)
    except LookupError as e:
        raise NotSupportedEncoding(options.encoding) from e
    except UnicodeDecodeError as e:
        raise ParameterInvalid(f"bytes not valid {encoding}: {e.reason} at {e.start}") from e


def write_string(
    buf: BytesLike, value: str | None, options: CodecOptions = DEFAULT_OPTIONS
) -> None:
    """Encode ``value`` and copy it into ``buf`` at ``options.position``.

    ``None`` and ``""`` are no-ops. Encoding happens first; the buffer is
    only touched once the encoded bytes are known to fit.
    """
    if value is None:
        return
    if not isinstance(value, str):
        raise ParameterInvalid(f"value must be a string: {type(value).__name__}")
    if not value:
        return
    encoding = resolve_encoding(options.encoding)
    normalize_order(options.order)
    try:
        raw = value.encode(encoding)
    except LookupError as e:
        raise NotSupportedEncoding(options.encoding) from e
    except UnicodeEncodeError as e:
        raise ParameterInvalid(f"text not representable in {encoding}: {e.reason} at {e.start}") from e
    check_range(buf, options.position, len(raw))
    write_range(buf, options.position, raw)
