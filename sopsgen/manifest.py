"""Assembly and rendering of the generated Secret."""

from __future__ import annotations

from typing import Dict, Mapping

import yaml

from .models import GeneratorDescriptor, ObjectMeta, SecretManifest

NEEDS_HASH_ANNOTATION = "kustomize.config.k8s.io/needs-hash"
BEHAVIOR_ANNOTATION = "kustomize.config.k8s.io/behavior"


def build_annotations(descriptor: GeneratorDescriptor) -> Dict[str, str]:
    """Return the descriptor's annotations plus the kustomize generator hints."""
    annotations = dict(descriptor.metadata.annotations)
    if not descriptor.disable_name_suffix_hash:
        annotations[NEEDS_HASH_ANNOTATION] = "true"
    if descriptor.behavior:
        annotations[BEHAVIOR_ANNOTATION] = descriptor.behavior
    return annotations


def build_manifest(
    descriptor: GeneratorDescriptor, data: Mapping[str, str]
) -> SecretManifest:
    metadata = ObjectMeta(
        name=descriptor.metadata.name,
        namespace=descriptor.metadata.namespace,
        labels=dict(descriptor.metadata.labels),
        annotations=build_annotations(descriptor),
    )
    return SecretManifest(metadata=metadata, data=dict(data), type=descriptor.type)


def render_manifest(manifest: SecretManifest) -> str:
    """Serialise the manifest as a YAML document, preserving key order."""
    return yaml.safe_dump(
        manifest.to_dict(),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


__all__ = [
    "BEHAVIOR_ANNOTATION",
    "NEEDS_HASH_ANNOTATION",
    "build_annotations",
    "build_manifest",
    "render_manifest",
]
