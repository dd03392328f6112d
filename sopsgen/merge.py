"""Ordered last-write-wins merging of resolved secret data."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Tuple

from .logging import get_logger


class ResolvedData(Mapping[str, str]):
    """Key to base64 value map built up across sources.

    A later pair with an existing key replaces the value in place; the key
    keeps its original position. Collisions are never reported as errors.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}
        self.logger = get_logger("merge")

    def merge(self, pairs: Iterable[Tuple[str, str]], *, source: str | None = None) -> None:
        for key, value in pairs:
            if key in self._entries:
                self.logger.debug("Key %s overwritten by %s", key, source or "later source")
            self._entries[key] = value

    def to_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResolvedData(keys={list(self._entries)!r})"


__all__ = ["ResolvedData"]
