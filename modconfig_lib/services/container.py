from typing import Any, Dict

# Names under which the host registers its services.
STORE = "config_store"
PERSISTENCE = "config_persistence"
KEYBINDINGS = "keybindings"
SETTINGS = "host_settings"


class ServiceNotRegistered(KeyError):
    pass


class ServiceContainer:
    """Registry of the host's shared services, looked up by name."""

    def __init__(self) -> None:
        self._singletons: Dict[str, Any] = {}

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        try:
            return self._singletons[key]
        except KeyError:
            raise ServiceNotRegistered(f"No service registered for key '{key}'") from None
