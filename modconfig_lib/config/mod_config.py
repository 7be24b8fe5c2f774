"""Per-mod view of the shared configuration store.

The host creates one `ModConfiguration` per mod and binds the mod's namespace
into it, so a mod can only read and write its own keys:

    config = host.config_for("audio")
    config.set_int("volume", 5)
    config.get_int("volume", -1)   # -> 5
    config.save()

Values only reach disk when `save()` is called.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from .store import Listener, NamespacedStore
from .types import ValueKind

if TYPE_CHECKING:
    from .persistence import FilePersistence


class ModConfiguration:
    def __init__(
        self,
        store: NamespacedStore,
        namespace: str,
        persistence: Optional["FilePersistence"] = None,
    ) -> None:
        if not namespace:
            raise ValueError("namespace must be a non-empty string")
        self.store = store
        self.namespace = namespace
        self.persistence = persistence

    # Getters return `default` when the key is missing or holds another type.

    def get_string(self, key: str, default: Optional[str]) -> Optional[str]:
        return self.store.get_typed(self.namespace, key, ValueKind.STRING, default)

    def get_int(self, key: str, default: int) -> int:
        return self.store.get_typed(self.namespace, key, ValueKind.INT, default)

    def get_float(self, key: str, default: float) -> float:
        return self.store.get_typed(self.namespace, key, ValueKind.FLOAT, default)

    def get_double(self, key: str, default: float) -> float:
        return self.store.get_typed(self.namespace, key, ValueKind.DOUBLE, default)

    def get_bool(self, key: str, default: bool) -> bool:
        return self.store.get_typed(self.namespace, key, ValueKind.BOOL, default)

    def set_string(self, key: str, value: str) -> None:
        self.store.set_typed(self.namespace, key, ValueKind.STRING, value)

    def set_int(self, key: str, value: int) -> None:
        self.store.set_typed(self.namespace, key, ValueKind.INT, value)

    def set_float(self, key: str, value: float) -> None:
        self.store.set_typed(self.namespace, key, ValueKind.FLOAT, value)

    def set_double(self, key: str, value: float) -> None:
        self.store.set_typed(self.namespace, key, ValueKind.DOUBLE, value)

    def set_bool(self, key: str, value: bool) -> None:
        self.store.set_typed(self.namespace, key, ValueKind.BOOL, value)

    def does_key_exist(self, key: str) -> bool:
        return self.store.does_key_exist(self.namespace, key)

    def get_keys(self) -> List[str]:
        return self.store.get_keys(self.namespace)

    def remove_key(self, key: str) -> bool:
        return self.store.remove_key(self.namespace, key)

    def subscribe(self, listener: Listener) -> None:
        """Call `listener` with a `ConfigurationChange` whenever a value of this mod is set."""
        self.store.subscribe(self.namespace, listener)

    def unsubscribe(self, listener: Listener) -> bool:
        return self.store.unsubscribe(self.namespace, listener)

    def save(self) -> None:
        if self.persistence is None:
            raise RuntimeError(f"No persistence configured for namespace {self.namespace!r}")
        self.persistence.save_namespace(self.namespace)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"ModConfiguration(namespace={self.namespace!r})"
