"""Resolution of declared sources into secret data."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from .decrypt import Decryptor
from .errors import FormatError, GeneratorError, ReadError, SourceError, SpecificationError
from .formats import classify
from .logging import get_logger
from .merge import ResolvedData
from .models import GeneratorDescriptor
from .parsers import encode_value, parse_document


class SourceResolver:
    """Reads, decrypts and parses every declared source in declaration order.

    Env sources are processed before file sources so that file sources can
    overwrite keys produced by documents. The first failure aborts the run.
    """

    def __init__(self, decryptor: Decryptor, *, base_dir: Path | None = None) -> None:
        self.decryptor = decryptor
        self.base_dir = base_dir
        self.logger = get_logger("resolver")

    def resolve(self, descriptor: GeneratorDescriptor) -> ResolvedData:
        data = ResolvedData()
        for source in descriptor.env_sources:
            try:
                self.resolve_env_source(source, data)
            except GeneratorError as exc:
                raise SourceError("env", source, exc) from exc
        for source in descriptor.file_sources:
            try:
                self.resolve_file_source(source, data)
            except GeneratorError as exc:
                raise SourceError("file", source, exc) from exc
        return data

    def resolve_env_source(self, source: str, data: ResolvedData) -> None:
        content = self._read(source)
        fmt = classify(source)
        decrypted = self.decryptor.decrypt(content, fmt)
        if not fmt.is_document:
            raise FormatError("unknown file format, use dotenv, yaml or json")
        pairs = parse_document(fmt, decrypted)
        self.logger.debug("Env source %s (%s) yielded %d keys", source, fmt.value, len(pairs))
        data.merge(pairs, source=source)

    def resolve_file_source(self, source: str, data: ResolvedData) -> None:
        key, path = parse_file_spec(source)
        content = self._read(path)
        fmt = classify(path)
        decrypted = self.decryptor.decrypt(content, fmt)
        self.logger.debug("File source %s (%s) stored under key %s", path, fmt.value, key)
        data.merge([(key, encode_value(decrypted))], source=source)

    def _read(self, path: str) -> bytes:
        target = Path(path)
        if self.base_dir is not None and not target.is_absolute():
            target = self.base_dir / target
        try:
            return target.read_bytes()
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise ReadError(f"open {path}: {reason}", path) from exc


def parse_file_spec(source: str) -> Tuple[str, str]:
    """Split a ``[key=]path`` file source into its key and path."""
    components = source.split("=")
    if len(components) == 1:
        return _base_name(source), source
    if len(components) == 2:
        key, path = components
        if not key:
            raise SpecificationError(f"key name for file path {path} missing")
        if not path:
            raise SpecificationError(f"file path for key name {key} missing")
        return key, path
    raise SpecificationError("key names or file paths cannot contain '='")


def _base_name(path: str) -> str:
    """Return the last slash-separated element, ignoring trailing slashes."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


__all__ = ["SourceResolver", "parse_file_spec"]
