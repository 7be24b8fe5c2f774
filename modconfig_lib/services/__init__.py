"""Services package: the container shared by the host, the API and the CLI."""
from .container import (
    KEYBINDINGS,
    PERSISTENCE,
    SETTINGS,
    STORE,
    ServiceContainer,
    ServiceNotRegistered,
)

__all__ = [
    "KEYBINDINGS",
    "PERSISTENCE",
    "SETTINGS",
    "STORE",
    "ServiceContainer",
    "ServiceNotRegistered",
]
