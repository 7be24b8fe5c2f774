"""Keybindings registered by mods.

A keybinding is a modifier held down while a trigger is pressed, e.g.
`Key("LeftControl", "K")`. Mods register bindings with a default and the
user may rebind them from a settings UI. Bindings are persisted through the
host's own configuration namespace as two string values per binding::

    keybinding:<mod>:<name>:modifier
    keybinding:<mod>:<name>:trigger
"""
from __future__ import annotations
import logging
from typing import Dict

from modconfig_lib.config.mod_config import ModConfiguration

logger = logging.getLogger(__name__)

KEY_PREFIX = "keybinding:"
NO_MODIFIER = "None"


class UnknownKeybindingError(KeyError):
    """Raised when looking up a keybinding that was never registered."""


class Key:
    def __init__(self, modifier: str, trigger: str) -> None:
        self.modifier = modifier or NO_MODIFIER
        self.trigger = trigger

    def copy(self) -> "Key":
        return Key(self.modifier, self.trigger)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.modifier == other.modifier and self.trigger == other.trigger

    def __str__(self) -> str:
        if self.modifier == NO_MODIFIER:
            return self.trigger
        return f"{self.modifier}+{self.trigger}"

    def __repr__(self) -> str:
        return f"Key(modifier={self.modifier!r}, trigger={self.trigger!r})"


def _config_key(mod: str, name: str, part: str) -> str:
    return f"{KEY_PREFIX}{mod}:{name}:{part}"


class Keybindings:
    def __init__(self, config: ModConfiguration) -> None:
        self.config = config
        self._bindings: Dict[str, Dict[str, Key]] = {}

    def add_keybinding(self, mod: str, name: str, default: Key) -> Key:
        """Register `name` for `mod` and return its Key.

        If the binding already exists, for example because it was loaded from
        configuration, `default` is ignored and the existing Key is returned.
        Raises ValueError if `mod` or `name` contains ":", which separates the
        parts of the stored configuration key.
        """
        if ":" in mod or ":" in name:
            raise ValueError(f"Keybinding mod and name must not contain ':': {mod!r}, {name!r}")
        bindings = self._bindings.setdefault(mod, {})
        if name not in bindings:
            bindings[name] = default.copy()
        return bindings[name]

    def get(self, mod: str, name: str) -> Key:
        try:
            return self._bindings[mod][name]
        except KeyError:
            raise UnknownKeybindingError(f"No such keybinding: {mod}:{name}") from None

    def all_keybindings(self) -> Dict[str, Dict[str, Key]]:
        return {mod: dict(bindings) for mod, bindings in self._bindings.items()}

    def save_to_config(self) -> None:
        for mod, bindings in self._bindings.items():
            for name, key in bindings.items():
                self.config.set_string(_config_key(mod, name, "modifier"), key.modifier)
                self.config.set_string(_config_key(mod, name, "trigger"), key.trigger)

    def load_from_config(self) -> int:
        """Restore bindings stored by `save_to_config`. Returns how many were loaded."""
        loaded = 0
        for key in self.config.get_keys():
            if not key.startswith(KEY_PREFIX):
                continue
            parts = key.split(":")
            if len(parts) != 4:
                logger.error("Invalid keybinding format in configuration: %s", key)
                continue
            _, mod, name, part = parts
            if part != "modifier":
                continue
            modifier = self.config.get_string(_config_key(mod, name, "modifier"), None)
            trigger = self.config.get_string(_config_key(mod, name, "trigger"), None)
            if modifier is None or trigger is None:
                logger.error("Invalid keybinding in configuration: %s:%s", mod, name)
                continue
            bindings = self._bindings.setdefault(mod, {})
            if name in bindings:
                bindings[name].modifier = modifier
                bindings[name].trigger = trigger
            else:
                bindings[name] = Key(modifier, trigger)
            loaded += 1
        return loaded
