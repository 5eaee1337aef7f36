from __future__ import annotations

import pytest

from rawcodec.errors import DataSizeInvalid, ParameterInvalid
from rawcodec.raw import bits_to_byte, byte_to_bits, chars_to_bytes, int_to_bytes

# Golden vectors (byte-level) for int_to_bytes: low 32 bits, little endian, zero padded.
INT_TO_BYTES_DEFAULT_HEX = "78563412"
INT_TO_BYTES_NONCE_HEX = "01000000" + "00" * 12


def test_bits_to_byte_vectors() -> None:
    assert bits_to_byte([1, 0, 1, 0, 0, 0, 0, 0]) == 5
    assert bits_to_byte([1, 1, 1, 1, 1, 1, 1, 1]) == 255
    assert bits_to_byte([0] * 8) == 0
    assert bits_to_byte([0, 0, 0, 0, 0, 0, 0, 1]) == 128
    assert bits_to_byte((1, 0, 0, 0, 0, 0, 0, 0)) == 1


@pytest.mark.parametrize("bits", [[], [1] * 7, [0] * 9])
def test_bits_to_byte_bad_length(bits: list[int]) -> None:
    with pytest.raises(ParameterInvalid, match="length") as ei:
        bits_to_byte(bits)
    assert ei.value.kind == "PARAMETER_INVALID"


@pytest.mark.parametrize("bad", [2, -1, True, 1.0, 0.5])
def test_bits_to_byte_bad_value(bad: object) -> None:
    bits = [0] * 8
    bits[3] = bad  # type: ignore[call-overload]
    with pytest.raises(ParameterInvalid, match="0 or 1"):
        bits_to_byte(bits)


def test_bits_to_byte_none() -> None:
    with pytest.raises(ParameterInvalid):
        bits_to_byte(None)  # type: ignore[arg-type]


def test_byte_to_bits_mirrors_bits_to_byte() -> None:
    assert byte_to_bits(5) == [1, 0, 1, 0, 0, 0, 0, 0]
    assert byte_to_bits(-1) == [1] * 8
    for v in range(256):
        assert bits_to_byte(byte_to_bits(v)) == v


@pytest.mark.parametrize("bad", [256, -129, False, "1"])
def test_byte_to_bits_out_of_range(bad: object) -> None:
    with pytest.raises(ParameterInvalid):
        byte_to_bits(bad)  # type: ignore[arg-type]


def test_chars_to_bytes_narrows() -> None:
    assert chars_to_bytes("abc") == b"abc"
    assert chars_to_bytes(["\x00", "\xff"]) == b"\x00\xff"
    assert chars_to_bytes("") == b""
    # lossy above U+00FF: only the low 8 bits survive
    assert chars_to_bytes("Ł") == b"\x41"
    assert chars_to_bytes("中") == bytes([ord("中") & 0xFF])


def test_chars_to_bytes_none() -> None:
    with pytest.raises(ParameterInvalid):
        chars_to_bytes(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("chars", [["ab", "c"], ["a", ""], [65], [b"a"]])
def test_chars_to_bytes_rejects_non_chars(chars: list[object]) -> None:
    with pytest.raises(ParameterInvalid, match="single character"):
        chars_to_bytes(chars)  # type: ignore[arg-type]


def test_int_to_bytes_vectors() -> None:
    assert int_to_bytes(0x12345678).hex() == INT_TO_BYTES_DEFAULT_HEX
    assert int_to_bytes(1, 16).hex() == INT_TO_BYTES_NONCE_HEX
    assert int_to_bytes(-1).hex() == "ffffffff"
    # only the low 32 bits are kept
    assert int_to_bytes(0x1_0000_0002).hex() == "02000000"


def test_int_to_bytes_size_too_small() -> None:
    with pytest.raises(DataSizeInvalid):
        int_to_bytes(1, 3)
