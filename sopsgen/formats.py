"""Content format classification for source paths."""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class Format(str, Enum):
    """Content formats understood by sops and the content parsers."""

    YAML = "structured-yaml"
    JSON = "structured-json"
    DOTENV = "dotenv"
    BINARY = "binary"

    @property
    def sops_type(self) -> str:
        """Value passed to sops as ``--input-type``/``--output-type``."""
        return _SOPS_TYPES[self]

    @property
    def is_document(self) -> bool:
        """True for formats that hold many key/value pairs."""
        return self is not Format.BINARY


_SOPS_TYPES = {
    Format.YAML: "yaml",
    Format.JSON: "json",
    Format.DOTENV: "dotenv",
    Format.BINARY: "binary",
}

# Checked in order; matching is case-sensitive, like sops itself.
_SUFFIX_RULES: Sequence[tuple[Format, Sequence[str]]] = (
    (Format.YAML, (".yaml", ".yml")),
    (Format.JSON, (".json",)),
    (Format.DOTENV, (".env",)),
)


def classify(path: str) -> Format:
    """Return the content format of ``path`` based on its suffix alone."""
    for fmt, suffixes in _SUFFIX_RULES:
        if path.endswith(tuple(suffixes)):
            return fmt
    return Format.BINARY


__all__ = ["Format", "classify"]
