"""Host settings for the configuration store.

Settings are read from a small YAML file (default `modconfig.yml`)::

    config_dir: Plugins/Config
    serializer: json
    log_level: INFO

A missing file gives the defaults. `MODCONFIG_DIR` in the environment
overrides `config_dir`.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional
import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path("modconfig.yml")
CONFIG_DIR_ENV = "MODCONFIG_DIR"


@dataclass
class HostSettings:
    config_dir: str = "Config"
    serializer: str = "json"
    log_level: str = "WARNING"
    host_namespace: str = "modconfig"
    # Backend used for namespaces: "file" or "memory"
    storage_backend: str = "file"


def load_settings(path: Optional[Path] = None) -> HostSettings:
    """Load HostSettings from YAML. Unknown keys are ignored with a warning."""
    cfg_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    data: Any = {}
    if cfg_path.exists():
        with cfg_path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"invalid settings file {cfg_path}: parse error") from e
        if not isinstance(data, dict):
            raise ValueError(f"invalid settings file {cfg_path}: expected mapping")

    known = {f.name for f in fields(HostSettings)}
    for name in sorted(set(data) - known):
        logger.warning("Ignoring unknown setting %r in %s", name, cfg_path)
    settings = HostSettings(**{k: str(v) for k, v in data.items() if k in known})

    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        settings.config_dir = env_dir
    return settings
