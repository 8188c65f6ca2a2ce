"""Command-line front end for inspecting and editing configuration files."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .conversion import parse_value
from .errors import ConfigStoreError
from .logging_utils import configure_logging
from .settings import StoreSettings
from .store import ConfigStore

TYPES: dict[str, type] = {"str": str, "int": int, "float": float, "bool": bool}

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="config-store", description="Inspect and edit INI-style configuration files")
    parser.add_argument("--config", help="Path to a TOML settings file")
    parser.add_argument("--log-level", help="Override the configured logging level")
    parser.add_argument(
        "--allow-global-keys",
        action="store_true",
        help="Accept keys that appear before the first [section] header",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="Load one or more files (later files win) and print every entry")
    show.add_argument("files", nargs="+", help="Configuration files to merge")

    get = commands.add_parser("get", help="Print the value of a section/key")
    get.add_argument("file")
    get.add_argument("key", help="Full key, e.g. time/dt")
    get.add_argument("--type", choices=sorted(TYPES), default="str", help="Convert the value before printing")

    set_ = commands.add_parser("set", help="Set a section/key and save the file")
    set_.add_argument("file")
    set_.add_argument("key", help="Full key, e.g. time/dt")
    set_.add_argument("value")
    set_.add_argument("--type", choices=sorted(TYPES), default="str", help="Validate and normalize the value as this type")
    set_.add_argument("--output", help="Write to this path instead of updating the file in place")

    section = commands.add_parser("section", help="Print the entries of one section")
    section.add_argument("file")
    section.add_argument("name", help="Section name")
    return parser


def _load_settings(args: argparse.Namespace) -> StoreSettings:
    settings = StoreSettings.from_toml(args.config) if args.config else StoreSettings()
    if args.log_level:
        settings.logging.level = args.log_level
    if args.allow_global_keys:
        settings.parser.allow_global_keys = True
    return settings


def run(args: argparse.Namespace, settings: StoreSettings) -> None:
    store = ConfigStore(config=settings.parser)
    if args.command == "show":
        for path in args.files:
            store.load(path)
        store.print(sys.stdout)
        return

    store.load(args.file)
    if args.command == "get":
        print(store.get(args.key, TYPES[args.type]))
    elif args.command == "set":
        # Parsing first rejects bad literals and normalizes the stored text.
        store.set(args.key, parse_value(args.value, TYPES[args.type], key=args.key))
        destination = args.output or args.file
        store.save(destination)
        logger.info("value_updated", extra={"key": args.key, "destination": destination})
    elif args.command == "section":
        for key, value in store.get_section_map(args.name).items():
            print(f"{key} = {value}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = _load_settings(args)
    except (OSError, ValueError) as exc:
        print(f"config-store: cannot read settings: {exc}", file=sys.stderr)
        return 1
    configure_logging(settings.logging)
    try:
        run(args, settings)
    except ConfigStoreError as exc:
        logger.debug("command_failed", exc_info=True)
        print(f"config-store: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
