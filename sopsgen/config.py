"""Runtime settings for the secret generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

API_VERSION = "kustomize.meiqia.com/v1beta1"
KIND = "SopsSecretGenerator"

ENV_SOPS_EXECUTABLE = "SOPSGEN_SOPS_EXECUTABLE"
DEFAULT_SOPS_EXECUTABLE = "sops"


@dataclass(frozen=True)
class GeneratorSettings:
    """Expected descriptor type metadata and the decryption tool to invoke."""

    api_version: str = API_VERSION
    kind: str = KIND
    sops_executable: str = DEFAULT_SOPS_EXECUTABLE


def load_settings(environ: Optional[Mapping[str, str]] = None) -> GeneratorSettings:
    """Build settings from environment overrides."""
    env = os.environ if environ is None else environ
    executable = _as_str(env.get(ENV_SOPS_EXECUTABLE)) or DEFAULT_SOPS_EXECUTABLE
    return GeneratorSettings(sops_executable=executable)


def _as_str(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


__all__ = [
    "API_VERSION",
    "DEFAULT_SOPS_EXECUTABLE",
    "ENV_SOPS_EXECUTABLE",
    "GeneratorSettings",
    "KIND",
    "load_settings",
]
