"""Tests for dotenv and structured document parsing."""

from __future__ import annotations

import base64

import pytest

from sopsgen.errors import FormatError, ParseError
from sopsgen.formats import Format
from sopsgen.parsers import encode_value, parse_document, parse_dotenv, parse_json, parse_yaml


def _b64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def test_encode_value_uses_standard_padded_alphabet() -> None:
    raw = bytes([0xFB, 0xFF, 0x01])
    encoded = encode_value(raw)

    assert encoded == "+/8B"
    assert base64.b64decode(encoded) == raw
    assert encode_value(b"\x01\x02") == "AQI="
    assert encode_value(b"") == ""


def test_parse_dotenv_skips_blank_and_comment_lines() -> None:
    content = b"FOO=bar\n\n   \n#comment\n   # indented comment\nBAZ=qux\n"

    assert parse_dotenv(content) == [("FOO", _b64("bar")), ("BAZ", _b64("qux"))]


def test_parse_dotenv_splits_on_first_equals_and_keeps_value_verbatim() -> None:
    content = b'URL=postgres://u:p@host/db?a=b\nQUOTED="x y" \nEMPTY=\n'

    assert parse_dotenv(content) == [
        ("URL", _b64("postgres://u:p@host/db?a=b")),
        ("QUOTED", _b64('"x y" ')),
        ("EMPTY", ""),
    ]


def test_parse_dotenv_trims_leading_whitespace_and_crlf() -> None:
    content = b"  KEY=value\r\nOTHER=1\r\n"

    assert parse_dotenv(content) == [("KEY", _b64("value")), ("OTHER", _b64("1"))]


def test_parse_dotenv_strips_byte_order_mark() -> None:
    content = b"\xef\xbb\xbfKEY=value\n"

    assert parse_dotenv(content) == [("KEY", _b64("value"))]


def test_parse_dotenv_reports_zero_based_line_number() -> None:
    content = b"# header\nFOO=bar\n\n  MISSING_VALUE\n"

    with pytest.raises(ParseError) as excinfo:
        parse_dotenv(content)

    assert str(excinfo.value) == "line 3: requires value: MISSING_VALUE"


def test_parse_dotenv_rejects_invalid_utf8_before_reading_lines() -> None:
    content = b"# \xff\xfe comment only\nFOO=bar\n"

    with pytest.raises(ParseError, match="invalid utf8 sequence"):
        parse_dotenv(content)


def test_parse_dotenv_handles_multibyte_values() -> None:
    content = "GREETING=héllo wörld\n".encode("utf-8")

    assert parse_dotenv(content) == [("GREETING", _b64("héllo wörld"))]


def test_parse_yaml_returns_pairs_in_document_order() -> None:
    content = b"zeta: last\nalpha: first\n"

    assert parse_yaml(content) == [("zeta", _b64("last")), ("alpha", _b64("first"))]


def test_parse_yaml_empty_document_yields_nothing() -> None:
    assert parse_yaml(b"") == []


@pytest.mark.parametrize(
    "content",
    [
        b"port: 8080\n",
        b"nested:\n  key: value\n",
        b"- a\n- b\n",
        b"1: one\n",
        b"key: [unclosed\n",
    ],
)
def test_parse_yaml_rejects_non_flat_string_documents(content: bytes) -> None:
    with pytest.raises(ParseError):
        parse_yaml(content)


def test_parse_json_returns_pairs() -> None:
    content = b'{"USER": "admin", "PASSWORD": "s3cr3t"}'

    assert parse_json(content) == [("USER", _b64("admin")), ("PASSWORD", _b64("s3cr3t"))]


@pytest.mark.parametrize(
    "content",
    [b'{"n": 1}', b'["a"]', b"{not json", b'{"flag": true}'],
)
def test_parse_json_rejects_invalid_documents(content: bytes) -> None:
    with pytest.raises(ParseError):
        parse_json(content)


def test_parse_document_dispatches_by_format() -> None:
    assert parse_document(Format.DOTENV, b"A=1\n") == [("A", _b64("1"))]
    assert parse_document(Format.YAML, b"A: '1'\n") == [("A", _b64("1"))]
    assert parse_document(Format.JSON, b'{"A": "1"}') == [("A", _b64("1"))]


def test_parse_document_rejects_binary() -> None:
    with pytest.raises(FormatError, match="unknown file format, use dotenv, yaml or json"):
        parse_document(Format.BINARY, b"\x00\x01")


def test_parse_yaml_unquoted_boolean_keys_are_rejected() -> None:
    with pytest.raises(ParseError, match="key True must be a string"):
        parse_yaml(b"yes: value\n")


def test_parse_yaml_quoted_boolean_keys_are_strings() -> None:
    assert parse_yaml(b"'yes': value\n\"on\": other\n") == [
        ("yes", _b64("value")),
        ("on", _b64("other")),
    ]
