"""Loading and saving namespaces of a `NamespacedStore`.

`load_all` is called once at host startup. A file that cannot be read or
parsed is logged and skipped, and the other files still load. `save_namespace`
is called explicitly by each mod. Errors raised while saving are not caught
here.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import List

from modconfig_lib.storage.base import StorageBackend
from modconfig_lib.storage.serializer import JSONSerializer, Serializer

from .errors import MalformedConfigError
from .records import decode_table, encode_table
from .store import NamespacedStore

logger = logging.getLogger(__name__)


class FilePersistence:
    def __init__(
        self,
        store: NamespacedStore,
        backend: StorageBackend,
        serializer: Serializer | None = None,
    ) -> None:
        self.store = store
        self.backend = backend
        self.serializer = serializer or JSONSerializer()

    def _decode(self, data: bytes, source: str):
        try:
            parsed = self.serializer.load(data)
        except Exception as e:
            raise MalformedConfigError(f"Config {source} could not be parsed: {e}") from e
        return decode_table(parsed)

    def load_all(self) -> List[str]:
        """Load every stored namespace into the store.

        Returns the namespaces that were installed. Namespaces whose content
        is unreadable or malformed are logged and left out.
        """
        loaded: List[str] = []
        for namespace in list(self.backend.list_namespaces()):
            try:
                self.load_namespace(namespace)
            except (OSError, KeyError, ValueError):
                logger.exception("Error loading config for %s; skipping", namespace)
                continue
            loaded.append(namespace)
        logger.info("Loaded configuration for %d namespace(s)", len(loaded))
        return loaded

    def load_namespace(self, namespace: str) -> None:
        data = self.backend.load(namespace)
        table = self._decode(data, namespace)
        self.store.replace_namespace(namespace, table)

    def load_file(self, path: str | Path) -> str:
        """Load one file into the store. The namespace is the file name without extension.

        The previous in-memory content of that namespace is replaced only if
        the whole file parses. Returns the namespace name.
        """
        path = Path(path)
        namespace = path.stem
        data = path.read_bytes()
        table = self._decode(data, str(path))
        self.store.replace_namespace(namespace, table)
        return namespace

    def save_namespace(self, namespace: str) -> None:
        table = self.store.snapshot(namespace)
        self.backend.save(namespace, self.serializer.dump(encode_table(table)))
        logger.info("Saved configuration for %s (%d keys)", namespace, len(table))
