"""Pipeline that turns a generator descriptor into a rendered Secret."""

from __future__ import annotations

from pathlib import Path

from .config import GeneratorSettings, load_settings
from .decrypt import Decryptor, SopsDecryptor
from .descriptor import read_descriptor
from .logging import get_logger
from .manifest import build_manifest, render_manifest
from .models import GeneratorDescriptor, SecretManifest
from .resolver import SourceResolver


class SecretGenerator:
    """Coordinates descriptor loading, source resolution and manifest assembly."""

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        decryptor: Decryptor | None = None,
        *,
        base_dir: Path | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.decryptor = decryptor or SopsDecryptor(self.settings.sops_executable)
        self.resolver = SourceResolver(self.decryptor, base_dir=base_dir)
        self.logger = get_logger("generator")

    def generate(self, descriptor: GeneratorDescriptor) -> SecretManifest:
        self.logger.debug(
            "Resolving %d env and %d file sources for %s",
            len(descriptor.env_sources),
            len(descriptor.file_sources),
            descriptor.name,
        )
        data = self.resolver.resolve(descriptor)
        manifest = build_manifest(descriptor, data)
        self.logger.debug("Assembled Secret %s with keys %s", descriptor.name, list(data))
        return manifest

    def process(self, path: Path | str) -> str:
        """Read the descriptor at ``path`` and return the rendered Secret."""
        self.logger.debug("Loading descriptor %s", path)
        descriptor = read_descriptor(path, self.settings)
        return render_manifest(self.generate(descriptor))


__all__ = ["SecretGenerator"]
