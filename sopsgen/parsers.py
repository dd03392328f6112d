"""Parsers that turn decrypted plaintext into base64-encoded key/value pairs."""

from __future__ import annotations

import base64
import json
from typing import Any, List, Tuple

import yaml

from .errors import FormatError, ParseError
from .formats import Format

Pair = Tuple[str, str]

_UTF8_BOM = b"\xef\xbb\xbf"


def encode_value(value: bytes) -> str:
    """Encode raw bytes with the standard, padded base64 alphabet."""
    return base64.b64encode(value).decode("ascii")


def parse_document(fmt: Format, content: bytes) -> List[Pair]:
    """Dispatch plaintext of a whole-document source to its parser."""
    if fmt is Format.DOTENV:
        return parse_dotenv(content)
    if fmt is Format.YAML:
        return parse_yaml(content)
    if fmt is Format.JSON:
        return parse_json(content)
    raise FormatError("unknown file format, use dotenv, yaml or json")


def parse_dotenv(content: bytes) -> List[Pair]:
    """Parse ``KEY=value`` lines.

    Blank lines and ``#`` comments are skipped after trimming leading
    whitespace. Values are taken verbatim: no unquoting, no trailing trim.
    Line numbers in errors are 0-based.
    """
    if content.startswith(_UTF8_BOM):
        content = content[len(_UTF8_BOM):]
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError("invalid utf8 sequence") from exc

    pairs: List[Pair] = []
    for line_num, raw in enumerate(text.split("\n")):
        line = raw[:-1] if raw.endswith("\r") else raw
        line = line.lstrip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            raise ParseError(f"line {line_num}: requires value: {line}")
        key, value = line.split("=", 1)
        pairs.append((key, encode_value(value.encode("utf-8"))))
    return pairs


def parse_yaml(content: bytes) -> List[Pair]:
    try:
        loaded = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid yaml: {exc}") from exc
    return _flat_pairs(loaded)


def parse_json(content: bytes) -> List[Pair]:
    try:
        loaded = json.loads(content)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ParseError(f"invalid json: {exc}") from exc
    return _flat_pairs(loaded)


def _flat_pairs(document: Any) -> List[Pair]:
    if document is None:
        return []
    if not isinstance(document, dict):
        raise ParseError(
            f"expected a mapping of strings to strings, got {type(document).__name__}"
        )
    pairs: List[Pair] = []
    for key, value in document.items():
        if not isinstance(key, str):
            raise ParseError(f"key {key!r} must be a string")
        if not isinstance(value, str):
            raise ParseError(
                f"value for key {key} must be a string, got {type(value).__name__}"
            )
        pairs.append((key, encode_value(value.encode("utf-8"))))
    return pairs


__all__ = [
    "Pair",
    "encode_value",
    "parse_document",
    "parse_dotenv",
    "parse_json",
    "parse_yaml",
]
