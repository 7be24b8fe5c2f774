"""Command-line access to the configuration directory.

Usage: modconfig [--config-dir DIR] [--format json|yaml] <command> ...

    set <mod> <key> <type> <value>   set a value and save the mod's file
    get <mod> <key>                  print "<type> <value>"
    keys <mod>                       print every key of the mod
    remove <mod> <key>               remove a key and save the mod's file
    dump <mod>                       print the mod's file
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Iterable, Optional

from modconfig_lib.config import ValueKind
from modconfig_lib.host import create_storage
from modconfig_lib.logging_config import configure_logging
from modconfig_lib.settings import HostSettings, load_settings

logger = logging.getLogger(__name__)


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="modconfig", description="Inspect and edit mod configuration files")
    p.add_argument("--settings", default=None, help="Path to the host settings YAML file")
    p.add_argument("--config-dir", default=None, help="Configuration directory (overrides settings)")
    p.add_argument("--format", choices=["json", "yaml"], default=None, help="File format (overrides settings)")
    p.add_argument("--log-level", default=None, help="Log level, e.g. INFO")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("set", help="Set a configuration value")
    s.add_argument("mod")
    s.add_argument("key")
    s.add_argument("type", choices=[k.value for k in ValueKind])
    s.add_argument("value")

    g = sub.add_parser("get", help="Print a configuration value")
    g.add_argument("mod")
    g.add_argument("key")

    k = sub.add_parser("keys", help="List the keys of a mod")
    k.add_argument("mod")

    r = sub.add_parser("remove", help="Remove a configuration value")
    r.add_argument("mod")
    r.add_argument("key")

    d = sub.add_parser("dump", help="Print the configuration file of a mod")
    d.add_argument("mod")
    return p


def _settings_from_args(args: argparse.Namespace) -> HostSettings:
    settings = load_settings(args.settings)
    if args.config_dir:
        settings.config_dir = args.config_dir
    if args.format:
        settings.serializer = args.format
    if args.log_level:
        settings.log_level = args.log_level
    settings.storage_backend = "file"
    return settings


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    settings = _settings_from_args(args)
    configure_logging(settings.log_level)

    persistence = create_storage(settings)
    store = persistence.store
    persistence.load_all()

    if args.command == "set":
        kind = ValueKind(args.type)
        try:
            native = kind.parse(args.value)
        except ValueError:
            parser.error(f"{args.value!r} is not a valid {kind.value}")
        store.set_typed(args.mod, args.key, kind, native)
        persistence.save_namespace(args.mod)
        print("Updated configuration.")
        return 0

    if args.command == "get":
        value = store.get_value(args.mod, args.key)
        if value is None:
            print(f"No key {args.key!r} for {args.mod}", file=sys.stderr)
            return 1
        print(f"{value.kind.value} {value.text}")
        return 0

    if args.command == "keys":
        for key in store.get_keys(args.mod):
            print(key)
        return 0

    if args.command == "remove":
        if not store.remove_key(args.mod, args.key):
            print(f"No key {args.key!r} for {args.mod}", file=sys.stderr)
            return 1
        persistence.save_namespace(args.mod)
        return 0

    # dump
    if not persistence.backend.exists(args.mod):
        print(f"No configuration file for {args.mod}", file=sys.stderr)
        return 1
    sys.stdout.write(persistence.backend.load(args.mod).decode("utf-8-sig"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
