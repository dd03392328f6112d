"""Tests for extension-based format classification."""

from __future__ import annotations

import pytest

from sopsgen.formats import Format, classify


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("secrets.yaml", Format.YAML),
        ("secrets.yml", Format.YAML),
        ("dir/secrets.enc.yaml", Format.YAML),
        ("secrets.json", Format.JSON),
        ("secrets.env", Format.DOTENV),
        (".env", Format.DOTENV),
        ("secrets.txt", Format.BINARY),
        ("noextension", Format.BINARY),
        ("archive.yaml.gz", Format.BINARY),
        ("SECRETS.YAML", Format.BINARY),
        ("secrets.Json", Format.BINARY),
        ("environment", Format.BINARY),
    ],
)
def test_classify_by_suffix(path: str, expected: Format) -> None:
    assert classify(path) is expected


def test_sops_type_hints() -> None:
    assert Format.YAML.sops_type == "yaml"
    assert Format.JSON.sops_type == "json"
    assert Format.DOTENV.sops_type == "dotenv"
    assert Format.BINARY.sops_type == "binary"


def test_only_binary_is_not_a_document() -> None:
    assert [fmt for fmt in Format if not fmt.is_document] == [Format.BINARY]
