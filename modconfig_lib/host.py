"""Host-side composition of the configuration store.

`create_host(settings)` is called once while the host process starts, before
any mod runs. It loads every namespace from the configuration directory and
restores the keybindings. Mods then receive their own handle:

    host = create_host(load_settings())
    audio = host.config_for("audio")

Only the host's own namespace is saved by `shutdown()`. Each mod saves its
own namespace.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from modconfig_lib.config import FilePersistence, ModConfiguration, NamespacedStore
from modconfig_lib.keybindings import Keybindings
from modconfig_lib.logging_config import configure_logging
from modconfig_lib.services import KEYBINDINGS, PERSISTENCE, SETTINGS, STORE, ServiceContainer
from modconfig_lib.settings import HostSettings
from modconfig_lib.storage import FileStorageBackend, MemoryStorageBackend, StorageBackend, get_serializer

logger = logging.getLogger(__name__)


def create_storage(settings: HostSettings) -> FilePersistence:
    """Build a store plus the persistence layer selected by `settings`."""
    serializer = get_serializer(settings.serializer)
    backend: StorageBackend
    if settings.storage_backend == "file":
        backend = FileStorageBackend(settings.config_dir, extension=serializer.extension)
    elif settings.storage_backend == "memory":
        backend = MemoryStorageBackend()
    else:
        raise ValueError(f"Unknown storage backend {settings.storage_backend!r}")
    return FilePersistence(NamespacedStore(), backend, serializer)


@dataclass
class Host:
    settings: HostSettings
    store: NamespacedStore
    persistence: FilePersistence
    keybindings: Keybindings
    container: ServiceContainer

    def __post_init__(self) -> None:
        self._handles: Dict[str, ModConfiguration] = {}

    def config_for(self, mod: str) -> ModConfiguration:
        """Return the configuration handle bound to `mod`'s namespace."""
        handle = self._handles.get(mod)
        if handle is None:
            handle = ModConfiguration(self.store, mod, self.persistence)
            self._handles[mod] = handle
        return handle

    def shutdown(self) -> None:
        """Persist keybindings into the host namespace and save it."""
        self.keybindings.save_to_config()
        self.persistence.save_namespace(self.settings.host_namespace)


def create_host(settings: Optional[HostSettings] = None, *, setup_logging: bool = True) -> Host:
    settings = settings or HostSettings()
    if setup_logging:
        configure_logging(settings.log_level)

    persistence = create_storage(settings)
    store = persistence.store
    loaded = persistence.load_all()
    logger.info("Configuration loaded from %s: %s", settings.config_dir, ", ".join(loaded) or "(none)")

    host_config = ModConfiguration(store, settings.host_namespace, persistence)
    keybindings = Keybindings(host_config)
    restored = keybindings.load_from_config()
    logger.debug("Restored %d keybinding(s)", restored)

    container = ServiceContainer()
    container.register_singleton(SETTINGS, settings)
    container.register_singleton(STORE, store)
    container.register_singleton(PERSISTENCE, persistence)
    container.register_singleton(KEYBINDINGS, keybindings)

    host = Host(settings, store, persistence, keybindings, container)
    host._handles[settings.host_namespace] = host_config
    return host
