"""rawcodec CLI.

This is the stable CLI entrypoint (console-script: ``rawcodec``).

Buffers go in and out as hex strings, so every codec operation can be
exercised from a shell:

    rawcodec write int 0000000000 305419896 --position 1
    rawcodec read int 0012345678 --position 1
    rawcodec bits 1 0 1 0 0 0 0 0
"""

from __future__ import annotations

import argparse
import sys

from rawcodec import raw
from rawcodec.errors import EXIT_GENERIC, EXIT_OK, EXIT_USAGE, RawCodecError, UsageError
from rawcodec.options import DEFAULT_OPTIONS, CodecOptions, OptionsError, load_codec_options

VALUE_TYPES = ("bool", "short", "int", "long", "string")

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")
    p.add_argument(
        "--options",
        default=None,
        help="Codec options JSON (inline or @file.json); explicit flags win",
    )


def _add_codec_args(p: argparse.ArgumentParser, with_length: bool) -> None:
    p.add_argument("type", choices=VALUE_TYPES, help="Value type")
    p.add_argument("buffer", help="Buffer as hex (spaces allowed, '' for empty)")
    p.add_argument("--position", type=int, default=None, help="Byte offset (default 0)")
    p.add_argument("--order", default=None, help="big|little (default big)")
    p.add_argument("--encoding", default=None, help="Text encoding (default utf-8)")
    if with_length:
        p.add_argument("--length", type=int, default=None, help="Text length (default: to end)")


def _parse_hex(s: str) -> bytearray:
    try:
        return bytearray.fromhex(s)
    except ValueError as e:
        raise UsageError(f"buffer is not valid hex: {e}") from e


def _parse_int(s: str) -> int:
    try:
        return int(s, 0)
    except ValueError as e:
        raise UsageError(f"not an integer: {s!r}") from e


def _parse_bool(s: str) -> bool:
    w = s.strip().lower()
    if w in _TRUE_WORDS:
        return True
    if w in _FALSE_WORDS:
        return False
    raise UsageError(f"not a boolean: {s!r}")


def _options(ns: argparse.Namespace) -> CodecOptions:
    base = DEFAULT_OPTIONS if ns.options is None else load_codec_options(str(ns.options))
    return base.replace(position=ns.position, order=ns.order, encoding=ns.encoding)


def _cmd_read(ns: argparse.Namespace) -> int:
    buf = _parse_hex(ns.buffer)
    opts = _options(ns)

    if ns.type == "bool":
        print("true" if raw.read_bool(buf, options=opts) else "false")
    elif ns.type == "short":
        print(raw.read_short(buf, options=opts))
    elif ns.type == "int":
        print(raw.read_int(buf, options=opts))
    elif ns.type == "long":
        print(raw.read_long(buf, options=opts))
    elif ns.type == "string":
        print(raw.read_string(buf, length=ns.length, options=opts))
    else:
        raise AssertionError("unreachable")
    return EXIT_OK


def _cmd_write(ns: argparse.Namespace) -> int:
    buf = _parse_hex(ns.buffer)
    opts = _options(ns)

    if ns.type == "bool":
        raw.write_bool(buf, _parse_bool(ns.value), options=opts)
    elif ns.type == "short":
        raw.write_short(buf, _parse_int(ns.value), options=opts)
    elif ns.type == "int":
        raw.write_int(buf, _parse_int(ns.value), options=opts)
    elif ns.type == "long":
        raw.write_long(buf, _parse_int(ns.value), options=opts)
    elif ns.type == "string":
        raw.write_string(buf, ns.value, options=opts)
    else:
        raise AssertionError("unreachable")

    print(buf.hex())
    return EXIT_OK


def _cmd_bits(ns: argparse.Namespace) -> int:
    bits = [_parse_int(b) for b in ns.bits]
    print(raw.bits_to_byte(bits))
    return EXIT_OK


def _cmd_unbits(ns: argparse.Namespace) -> int:
    print(" ".join(str(b) for b in raw.byte_to_bits(_parse_int(ns.value))))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rawcodec", description="Raw byte codec over hex buffers")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_read = sub.add_parser("read", help="Decode a value from a hex buffer")
    _add_codec_args(p_read, with_length=True)
    _add_common_args(p_read)

    p_write = sub.add_parser("write", help="Encode a value into a hex buffer, print the buffer")
    _add_codec_args(p_write, with_length=False)
    p_write.add_argument("value", help="Value to write (ints accept 0x.. prefixes)")
    _add_common_args(p_write)

    p_bits = sub.add_parser("bits", help="Pack 8 flags (LSB first) into one byte")
    p_bits.add_argument("bits", nargs="+", help="Eight 0/1 values")
    p_bits.add_argument("--debug", action="store_true", help="Show stack traces on errors")

    p_unbits = sub.add_parser("unbits", help="Unpack one byte into 8 flags (LSB first)")
    p_unbits.add_argument("value", help="Byte value (0..255)")
    p_unbits.add_argument("--debug", action="store_true", help="Show stack traces on errors")

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "read":
            return _cmd_read(ns)
        if ns.cmd == "write":
            return _cmd_write(ns)
        if ns.cmd == "bits":
            return _cmd_bits(ns)
        if ns.cmd == "unbits":
            return _cmd_unbits(ns)
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except OptionsError as e:
        # Treat as usage/config error.
        if getattr(ns, "debug", False):
            raise
        print(f"[rawcodec] {e}", file=sys.stderr)
        return EXIT_USAGE
    except RawCodecError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[rawcodec] {e.kind}: {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[rawcodec] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
