from __future__ import annotations

import json
from pathlib import Path

import pytest

from rawcodec.errors import NotSupportedEncoding, ParameterInvalid
from rawcodec.options import (
    BIG_ENDIAN,
    DEFAULT_ENCODING,
    LITTLE_ENDIAN,
    CodecOptions,
    OptionsError,
    load_codec_options,
    normalize_order,
    resolve_encoding,
)


def test_defaults() -> None:
    opts = CodecOptions()
    assert opts.position == 0
    assert opts.order == BIG_ENDIAN
    assert opts.encoding == DEFAULT_ENCODING == "utf-8"


def test_replace_ignores_none() -> None:
    opts = CodecOptions(position=3, order=LITTLE_ENDIAN, encoding="ascii")
    assert opts.replace() == opts
    assert opts.replace(position=0).position == 0
    assert opts.replace(order="BE").order == BIG_ENDIAN


def test_normalize_order_aliases() -> None:
    assert normalize_order("little") == LITTLE_ENDIAN
    assert normalize_order("Little-Endian") == LITTLE_ENDIAN
    assert normalize_order(" be ") == BIG_ENDIAN
    with pytest.raises(ParameterInvalid):
        normalize_order(None)
    with pytest.raises(ParameterInvalid):
        normalize_order("native")


def test_resolve_encoding() -> None:
    assert resolve_encoding("UTF8") == "utf-8"
    assert resolve_encoding("GB2312") == "gb2312"
    for bad in ("", "nope", "rot13", None):
        with pytest.raises(NotSupportedEncoding):
            resolve_encoding(bad)


def test_options_inline_minimal() -> None:
    opts = load_codec_options(json.dumps({"spec": "rawcodec.options.v1"}))
    assert opts == CodecOptions()


def test_options_inline_full() -> None:
    obj = {"spec": "rawcodec.options.v1", "position": 4, "order": "le", "encoding": "latin-1"}
    opts = load_codec_options(json.dumps(obj))
    assert opts == CodecOptions(position=4, order=LITTLE_ENDIAN, encoding="latin-1")


def test_options_from_file(tmp_path: Path) -> None:
    p = tmp_path / "o.json"
    p.write_text(json.dumps({"spec": "rawcodec.options.v1", "order": "little"}), encoding="utf-8")
    opts = load_codec_options("@" + str(p))
    assert opts.order == LITTLE_ENDIAN


@pytest.mark.parametrize(
    "arg",
    [
        "",
        "[]",
        "{not json",
        json.dumps({"position": 1}),
        json.dumps({"spec": "rawcodec.options.v0"}),
        json.dumps({"spec": "rawcodec.options.v1", "wat": 1}),
        json.dumps({"spec": "rawcodec.options.v1", "position": -1}),
        json.dumps({"spec": "rawcodec.options.v1", "position": "3"}),
        json.dumps({"spec": "rawcodec.options.v1", "position": True}),
        json.dumps({"spec": "rawcodec.options.v1", "order": "middle"}),
        json.dumps({"spec": "rawcodec.options.v1", "encoding": "no-such-charset"}),
        "@/definitely/not/here.json",
    ],
)
def test_options_rejected(arg: str) -> None:
    with pytest.raises(OptionsError):
        load_codec_options(arg)
