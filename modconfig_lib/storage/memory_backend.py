"""Simple memory-backed storage backend

Keeps serialized namespaces in a dict. Useful for tests and for hosts that
do not want configuration written to disk.
"""
from threading import RLock
from typing import Dict, Iterable

from .base import StorageBackend


class MemoryStorageBackend(StorageBackend):
    def __init__(self):
        self._lock = RLock()
        self._store: Dict[str, bytes] = {}

    def save(self, namespace: str, data: bytes) -> None:
        with self._lock:
            self._store[namespace] = bytes(data)

    def load(self, namespace: str) -> bytes:
        with self._lock:
            if namespace not in self._store:
                raise KeyError(namespace)
            return self._store[namespace]

    def list_namespaces(self) -> Iterable[str]:
        with self._lock:
            return sorted(self._store.keys())

    def exists(self, namespace: str) -> bool:
        with self._lock:
            return namespace in self._store
