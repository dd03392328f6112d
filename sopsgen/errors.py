"""Error types raised while generating secrets."""

from __future__ import annotations

from typing import Optional


class GeneratorError(RuntimeError):
    """Base class for every failure surfaced to the CLI."""


class ValidationError(GeneratorError):
    """Raised when the generator descriptor is malformed or mismatched."""


class ReadError(GeneratorError):
    """Raised when a descriptor or source file cannot be read."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class DecryptionError(GeneratorError):
    """Raised when sops refuses or fails to decrypt a payload."""

    def __init__(self, message: str, user_detail: str | None = None) -> None:
        super().__init__(message)
        self.user_detail = user_detail


class FormatError(GeneratorError):
    """Raised when a source format is not allowed for its source kind."""


class ParseError(GeneratorError):
    """Raised when decrypted plaintext cannot be turned into key/value pairs."""


class SpecificationError(GeneratorError):
    """Raised when a `[key=]path` file source entry is malformed."""


class SourceError(GeneratorError):
    """Wraps a per-source failure with the declaration that caused it."""

    def __init__(self, kind: str, source: str, cause: GeneratorError) -> None:
        super().__init__(f"{kind} source {source}: {cause}")
        self.kind = kind
        self.source = source
        self.cause = cause


def find_decryption_error(exc: BaseException) -> Optional[DecryptionError]:
    """Return the first DecryptionError in the cause chain of ``exc``."""
    current: BaseException | None = exc
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        if isinstance(current, DecryptionError):
            return current
        seen.add(id(current))
        if isinstance(current, SourceError):
            current = current.cause
        else:
            current = current.__cause__
    return None


__all__ = [
    "DecryptionError",
    "FormatError",
    "GeneratorError",
    "ParseError",
    "ReadError",
    "SourceError",
    "SpecificationError",
    "ValidationError",
    "find_decryption_error",
]
