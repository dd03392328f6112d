"""Core data models shared across generator components."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ObjectMeta:
    """Kubernetes object metadata carried from descriptor to manifest."""

    name: str
    namespace: Optional[str] = None
    labels: Mapping[str, str] = field(default_factory=dict)
    annotations: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name}
        if self.namespace:
            payload["namespace"] = self.namespace
        if self.labels:
            payload["labels"] = dict(self.labels)
        if self.annotations:
            payload["annotations"] = dict(self.annotations)
        return payload


@dataclass(frozen=True)
class GeneratorDescriptor:
    """Validated SopsSecretGenerator input document."""

    api_version: str
    kind: str
    metadata: ObjectMeta
    env_sources: Tuple[str, ...] = ()
    file_sources: Tuple[str, ...] = ()
    behavior: Optional[str] = None
    disable_name_suffix_hash: bool = False
    type: Optional[str] = None

    @property
    def name(self) -> str:
        return self.metadata.name


@dataclass
class SecretManifest:
    """Kubernetes Secret emitted by the generator."""

    metadata: ObjectMeta
    data: Dict[str, str]
    type: Optional[str] = None
    api_version: str = "v1"
    kind: str = "Secret"

    def to_dict(self) -> Dict[str, Any]:
        """Return the manifest in output key order, omitting empty optional fields."""
        payload: Dict[str, Any] = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": self.metadata.to_dict(),
            "data": dict(self.data),
        }
        if self.type:
            payload["type"] = self.type
        return payload
