"""File-backed storage: one file per namespace.

Namespace `foo` is stored at `<config_dir>/foo<extension>`. Writes go to a
temporary file first and are then renamed over the target.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable

from .base import StorageBackend

logger = logging.getLogger(__name__)


def validate_namespace(namespace: str) -> str:
    if not namespace or namespace in (".", ".."):
        raise ValueError(f"Invalid namespace {namespace!r}")
    if "/" in namespace or "\\" in namespace or os.sep in namespace:
        raise ValueError(f"Namespace {namespace!r} must not contain path separators")
    return namespace


class FileStorageBackend(StorageBackend):
    def __init__(self, config_dir: str | Path = "./Config", extension: str = ".json") -> None:
        self.config_dir = Path(config_dir)
        if not extension.startswith("."):
            extension = "." + extension
        self.extension = extension

    def ensure_dir(self) -> Path:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        return self.config_dir

    def path_for(self, namespace: str) -> Path:
        return self.config_dir / f"{validate_namespace(namespace)}{self.extension}"

    def save(self, namespace: str, data: bytes) -> None:
        path = self.path_for(namespace)
        self.ensure_dir()
        tmp = path.with_suffix(path.suffix + ".tmp")
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
        logger.debug("Wrote %s (%d bytes)", path, len(data))

    def load(self, namespace: str) -> bytes:
        path = self.path_for(namespace)
        if not path.exists():
            raise KeyError(namespace)
        with open(path, "rb") as f:
            return f.read()

    def list_namespaces(self) -> Iterable[str]:
        """Yield the namespace of every file with this backend's extension, sorted by name."""
        directory = self.ensure_dir()
        for p in sorted(directory.iterdir()):
            if p.is_file() and p.suffix == self.extension:
                yield p.stem

    def exists(self, namespace: str) -> bool:
        return self.path_for(namespace).exists()
