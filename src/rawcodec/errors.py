"""Typed errors for rawcodec.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Every codec error carries a stable ``kind``; assert on it, not on messages.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_OUT_OF_INDEX = 11
EXIT_DATA_SIZE = 12
EXIT_ENCODING = 13
EXIT_PARAMETER = 14


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid options JSON, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_OUT_OF_INDEX, "OUT_OF_INDEX", "Requested byte range exceeds buffer capacity"),
    ExitCodeInfo(EXIT_DATA_SIZE, "DATA_SIZE", "Invalid or unsupported scalar width"),
    ExitCodeInfo(EXIT_ENCODING, "NOT_SUPPORTED_ENCODING", "Unknown text encoding name"),
    ExitCodeInfo(EXIT_PARAMETER, "PARAMETER_INVALID", "Invalid parameter (buffer, position, value, bit array)"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE. Do not edit manually.\n")
    lines.append("> Source of truth: `src/rawcodec/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Codec errors extend `RawCodecError` and carry `kind` and `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class RawCodecError(Exception):
    """Base error for rawcodec."""

    kind: str = "GENERIC"
    exit_code: int = EXIT_GENERIC


class UsageError(RawCodecError):
    kind = "USAGE"
    exit_code = EXIT_USAGE


class OutOfIndex(RawCodecError):
    """Byte range ``[position, position + length)`` does not fit the buffer."""

    kind = "OUT_OF_INDEX"
    exit_code = EXIT_OUT_OF_INDEX

    def __init__(self, capacity: int, position: int, length: int) -> None:
        self.capacity = int(capacity)
        self.position = int(position)
        self.length = int(length)
        super().__init__(
            f"out of index: capacity={self.capacity} position={self.position} length={self.length}"
        )


class DataSizeInvalid(RawCodecError):
    kind = "DATA_SIZE_INVALID"
    exit_code = EXIT_DATA_SIZE


class DataSizeUnknown(RawCodecError):
    kind = "DATA_SIZE_UNKNOWN"
    exit_code = EXIT_DATA_SIZE


class NotSupportedEncoding(RawCodecError):
    kind = "NOT_SUPPORTED_ENCODING"
    exit_code = EXIT_ENCODING

    def __init__(self, encoding: object) -> None:
        self.encoding = encoding
        super().__init__(f"encoding not supported: {encoding!r}")


class ParameterInvalid(RawCodecError):
    kind = "PARAMETER_INVALID"
    exit_code = EXIT_PARAMETER
