"""Codec options (v1): position, byte order, text encoding.

Every codec operation takes its defaults from a ``CodecOptions`` value.
The JSON loader follows the same rules as every other config input:
  - JSON only (inline or ``@file.json``)
  - explicit schema id
  - unknown keys are rejected
"""

from __future__ import annotations

import codecs
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from rawcodec.errors import NotSupportedEncoding, ParameterInvalid

SPEC_ID_V1 = "rawcodec.options.v1"

ByteOrder = Literal["big", "little"]

BIG_ENDIAN: ByteOrder = "big"
LITTLE_ENDIAN: ByteOrder = "little"

DEFAULT_ENCODING = "utf-8"

# Sentinel bytes stored by write_bool. read_bool only treats 0x01 as true.
BYTE_TRUE = 0x01
BYTE_FALSE = 0x00

_ORDER_ALIASES: dict[str, ByteOrder] = {
    "big": BIG_ENDIAN,
    "be": BIG_ENDIAN,
    "big_endian": BIG_ENDIAN,
    "little": LITTLE_ENDIAN,
    "le": LITTLE_ENDIAN,
    "little_endian": LITTLE_ENDIAN,
}


class OptionsError(ValueError):
    pass


def normalize_order(order: Any) -> ByteOrder:
    """Return the canonical byte order for ``order`` ('big', 'LE', ...)."""
    if isinstance(order, str):
        o = _ORDER_ALIASES.get(order.strip().lower().replace("-", "_"))
        if o is not None:
            return o
    raise ParameterInvalid(f"byte order not valid: {order!r} (expected 'big' or 'little')")


def resolve_encoding(encoding: Any) -> str:
    """Return the canonical codec name, or raise NotSupportedEncoding."""
    if not isinstance(encoding, str) or not encoding.strip():
        raise NotSupportedEncoding(encoding)
    try:
        info = codecs.lookup(encoding.strip())
    except LookupError as e:
        raise NotSupportedEncoding(encoding) from e
    # bytes-to-bytes and str-to-str codecs (base64, rot13, ...) are registered too;
    # CodecInfo._is_text_encoding is CPython-private, hence the getattr default
    if not getattr(info, "_is_text_encoding", True):
        raise NotSupportedEncoding(encoding)
    return info.name


@dataclass(frozen=True)
class CodecOptions:
    """Where and how a single codec call reads or writes."""

    position: int = 0
    order: ByteOrder = BIG_ENDIAN
    encoding: str = DEFAULT_ENCODING

    def replace(
        self,
        position: int | None = None,
        order: str | None = None,
        encoding: str | None = None,
    ) -> CodecOptions:
        """Copy with the given overrides; ``None`` keeps the current value."""
        return CodecOptions(
            position=self.position if position is None else position,
            order=self.order if order is None else normalize_order(order),
            encoding=self.encoding if encoding is None else encoding,
        )


DEFAULT_OPTIONS = CodecOptions()


def _load_json_arg(options_arg: str) -> dict[str, Any]:
    s = options_arg.strip()
    if not s:
        raise OptionsError("options: empty argument")

    if s.startswith("@"):
        p = Path(s[1:]).expanduser()
        if not p.exists() or not p.is_file():
            raise OptionsError(f"options: file not found: {p}")
        raw = p.read_text(encoding="utf-8")
        try:
            obj = json.loads(raw)
        except Exception as e:
            raise OptionsError(f"options: invalid JSON in {p}: {e}") from e
        if not isinstance(obj, dict):
            raise OptionsError(f"options: JSON in {p} must be an object")
        return obj

    try:
        obj = json.loads(s)
    except Exception as e:
        raise OptionsError(f"options: invalid inline JSON: {e}") from e
    if not isinstance(obj, dict):
        raise OptionsError("options: inline JSON must be an object")
    return obj


def load_codec_options(options_arg: str) -> CodecOptions:
    """Load and validate codec options.

    options_arg:
      - '@file.json'
      - inline JSON object
    """
    obj = _load_json_arg(options_arg)

    allowed = {"spec", "position", "order", "encoding"}
    extra = sorted(set(obj.keys()) - allowed)
    if extra:
        raise OptionsError(f"options: unsupported keys: {', '.join(extra)}")

    spec_id = obj.get("spec")
    if spec_id != SPEC_ID_V1:
        raise OptionsError(f"options: unsupported spec: {spec_id!r} (expected {SPEC_ID_V1!r})")

    position = obj.get("position", 0)
    # bool is an int subclass
    if isinstance(position, bool) or not isinstance(position, int):
        raise OptionsError("options: field 'position' must be an integer")
    if position < 0:
        raise OptionsError(f"options: field 'position' must be >= 0: {position}")

    order = obj.get("order", BIG_ENDIAN)
    try:
        order = normalize_order(order)
    except ParameterInvalid as e:
        raise OptionsError(f"options: {e}") from e

    encoding = obj.get("encoding", DEFAULT_ENCODING)
    try:
        resolve_encoding(encoding)
    except NotSupportedEncoding as e:
        raise OptionsError(f"options: {e}") from e

    return CodecOptions(position=position, order=order, encoding=encoding.strip())
