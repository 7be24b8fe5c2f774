"""Typed, namespaced configuration store for mods."""

from .errors import CorruptValueError, MalformedConfigError, ReentrantSetError
from .mod_config import ModConfiguration
from .persistence import FilePersistence
from .store import ConfigurationChange, NamespacedStore
from .types import TypedValue, ValueKind

__all__ = [
    "ConfigurationChange",
    "CorruptValueError",
    "FilePersistence",
    "MalformedConfigError",
    "ModConfiguration",
    "NamespacedStore",
    "ReentrantSetError",
    "TypedValue",
    "ValueKind",
]
