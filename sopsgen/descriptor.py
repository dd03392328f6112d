"""Loading and validation of SopsSecretGenerator descriptors."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from .config import GeneratorSettings
from .errors import ReadError, ValidationError
from .models import GeneratorDescriptor, ObjectMeta


def read_descriptor(
    path: Path | str, settings: GeneratorSettings | None = None
) -> GeneratorDescriptor:
    """Read a descriptor file from disk and validate it."""
    descriptor_path = Path(path)
    try:
        content = descriptor_path.read_bytes()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise ReadError(f"open {path}: {reason}", str(path)) from exc
    return load_descriptor(content, settings)


def load_descriptor(
    content: bytes, settings: GeneratorSettings | None = None
) -> GeneratorDescriptor:
    """Parse descriptor bytes and check them against the expected type metadata."""
    settings = settings or GeneratorSettings()
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ValidationError(f"invalid descriptor: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("descriptor must contain a mapping at the root")

    api_version = _as_str(data.get("apiVersion"), "apiVersion")
    kind = _as_str(data.get("kind"), "kind")
    if api_version != settings.api_version or kind != settings.kind:
        raise ValidationError(
            f"input must be apiVersion {settings.api_version}, kind {settings.kind}"
        )

    metadata_data = _as_dict(data.get("metadata"), "metadata")
    name = _as_str(metadata_data.get("name"), "metadata.name")
    if not name:
        raise ValidationError("input must contain metadata.name value")

    metadata = ObjectMeta(
        name=name,
        namespace=_as_str(metadata_data.get("namespace"), "metadata.namespace") or None,
        labels=_as_str_map(metadata_data.get("labels"), "metadata.labels"),
        annotations=_as_str_map(metadata_data.get("annotations"), "metadata.annotations"),
    )

    return GeneratorDescriptor(
        api_version=api_version,
        kind=kind,
        metadata=metadata,
        env_sources=_as_str_tuple(data.get("envs"), "envs"),
        file_sources=_as_str_tuple(data.get("files"), "files"),
        behavior=_as_str(data.get("behavior"), "behavior") or None,
        disable_name_suffix_hash=_as_bool(
            data.get("disableNameSuffixHash"), "disableNameSuffixHash"
        ),
        type=_as_str(data.get("type"), "type") or None,
    )


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ValidationError(f"{field} must be a string")


def _as_bool(value: Any, field: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise ValidationError(f"{field} must be a boolean")


def _as_dict(value: Any, field: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise ValidationError(f"{field} must be a mapping")


def _as_str_map(value: Any, field: str) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for key, item in _as_dict(value, field).items():
        if not isinstance(key, str) or not isinstance(item, str):
            raise ValidationError(f"{field} must map strings to strings")
        result[key] = item
    return result


def _as_str_tuple(value: Any, field: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValidationError(f"{field} must be a list of strings")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f"{field} must be a list of strings")
        items.append(item)
    return tuple(items)


__all__ = ["load_descriptor", "read_descriptor"]
