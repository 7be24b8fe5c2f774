"""In-memory, namespaced store for typed mod configuration values.

One `NamespacedStore` is shared by every mod in the host process. Each mod
works in its own namespace (see `ModConfiguration`), so mods never see or
overwrite each other's keys.

Listeners registered with `subscribe` are called synchronously, in
registration order, after every successful `set_typed` on their namespace.
They are invoked outside the store lock. An exception raised by a listener
is logged and does not stop the remaining listeners or reach the caller of
`set_typed`, whose write has already been applied. A listener may write to
other namespaces but not to the one it is being notified for; such a write
raises `ReentrantSetError` inside the listener.
"""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Dict, List

from .errors import CorruptValueError, ReentrantSetError
from .types import TypedValue, ValueKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigurationChange:
    namespace: str
    key: str
    kind: ValueKind
    text: str


Listener = Callable[[ConfigurationChange], Any]


class NamespacedStore:
    def __init__(self) -> None:
        self._lock = RLock()
        self._tables: Dict[str, Dict[str, TypedValue]] = {}
        self._listeners: Dict[str, List[Listener]] = {}
        self._local = threading.local()

    def _notifying(self) -> set:
        active = getattr(self._local, "namespaces", None)
        if active is None:
            active = set()
            self._local.namespaces = active
        return active

    def get_typed(self, namespace: str, key: str, kind: ValueKind, default: Any) -> Any:
        """Return the value at `key` in `namespace` converted to `kind`.

        Returns `default` when the namespace or key is missing or when the
        stored value has a different kind. Raises `CorruptValueError` when the
        kind matches but the stored text does not parse.
        """
        with self._lock:
            value = self._tables.get(namespace, {}).get(key)
        if value is None or value.kind != kind:
            return default
        try:
            return kind.parse(value.text)
        except ValueError as e:
            raise CorruptValueError(key, kind.value, value.text) from e

    def get_value(self, namespace: str, key: str) -> TypedValue | None:
        with self._lock:
            return self._tables.get(namespace, {}).get(key)

    def set_typed(self, namespace: str, key: str, kind: ValueKind, value: Any) -> None:
        self.set_value(namespace, key, TypedValue.of(kind, value))

    def set_value(self, namespace: str, key: str, value: TypedValue) -> None:
        if namespace in self._notifying():
            raise ReentrantSetError(
                f"Listener for {namespace!r} tried to set {key!r} during notification"
            )
        with self._lock:
            if namespace not in self._tables:
                self._tables[namespace] = {}
                self._listeners.setdefault(namespace, [])
            self._tables[namespace][key] = value
            listeners = list(self._listeners.get(namespace, ()))
        if not listeners:
            return
        event = ConfigurationChange(namespace, key, value.kind, value.text)
        active = self._notifying()
        active.add(namespace)
        try:
            for listener in listeners:
                try:
                    listener(event)
                except Exception:
                    logger.exception("Change listener %r failed for %s:%s", listener, namespace, key)
        finally:
            active.discard(namespace)

    def does_key_exist(self, namespace: str, key: str) -> bool:
        with self._lock:
            return namespace in self._tables and key in self._tables[namespace]

    def get_keys(self, namespace: str) -> List[str]:
        with self._lock:
            return list(self._tables.get(namespace, {}).keys())

    def remove_key(self, namespace: str, key: str) -> bool:
        """Remove `key` from `namespace`. No change event is fired."""
        with self._lock:
            table = self._tables.get(namespace)
            if table is None or key not in table:
                return False
            del table[key]
            return True

    def subscribe(self, namespace: str, listener: Listener) -> None:
        with self._lock:
            self._listeners.setdefault(namespace, []).append(listener)

    def unsubscribe(self, namespace: str, listener: Listener) -> bool:
        with self._lock:
            listeners = self._listeners.get(namespace, [])
            for i, registered in enumerate(listeners):
                if registered is listener:
                    del listeners[i]
                    return True
            return False

    def namespaces(self) -> List[str]:
        with self._lock:
            return list(self._tables.keys())

    def has_namespace(self, namespace: str) -> bool:
        with self._lock:
            return namespace in self._tables

    def snapshot(self, namespace: str) -> Dict[str, TypedValue]:
        """Return an ordered copy of the namespace table (empty if absent)."""
        with self._lock:
            return dict(self._tables.get(namespace, {}))

    def replace_namespace(self, namespace: str, table: Dict[str, TypedValue]) -> None:
        """Install `table` as the whole content of `namespace`.

        Used when loading from disk. Replaces any existing entries and does not
        notify listeners.
        """
        with self._lock:
            self._tables[namespace] = dict(table)
            self._listeners.setdefault(namespace, [])
        logger.debug("Installed namespace %s with %d keys", namespace, len(table))
