"""Storage backend interface definitions.

A backend persists one opaque blob per configuration namespace. Encoding
records into that blob is the job of a serializer (see `serializer.py`).
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable


class StorageBackend(ABC):
    """Abstract namespace storage backend.

    Implementations must be thread-safe if used concurrently.
    """

    @abstractmethod
    def save(self, namespace: str, data: bytes) -> None:
        """Store `data` as the content of `namespace`, replacing any previous content."""

    @abstractmethod
    def load(self, namespace: str) -> bytes:
        """Return the stored content of `namespace`.

        Should raise `KeyError` if nothing is stored for it.
        """

    @abstractmethod
    def list_namespaces(self) -> Iterable[str]:
        """Return an iterable of the namespaces currently stored."""

    @abstractmethod
    def exists(self, namespace: str) -> bool:
        """Return True if content is stored for `namespace`."""
