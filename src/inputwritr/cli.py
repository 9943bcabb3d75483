import argparse
import logging
import sys
from pathlib import Path

from jsonschema import ValidationError
from yaml import YAMLError

from .errors import InputWritrError
from .logging_config import configure_logging
from .settings import InputSettings
from .writr import InputWritr


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="inputwritr",
        description="Inspect input alias settings as an InputWritr would load them",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user input settings YAML file to load/override defaults.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    parser.add_argument(
        "view",
        choices=["aliases", "keys"],
        help="'aliases' prints each action's key strings; 'keys' prints the key alias -> code table.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(default_level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = InputSettings.load(user_path=args.settings_path)
        writr = InputWritr.from_settings(settings)
    except (ValidationError, YAMLError, InputWritrError) as exc:
        print(f"Invalid input settings: {exc}", file=sys.stderr)
        return 2

    if args.view == "aliases":
        for name, keys in writr.get_aliases_as_key_strings().items():
            print(f"{name}: {', '.join(keys)}")
    else:
        for alias, code in sorted(writr.alias_table.get_key_table().items(), key=lambda item: item[1]):
            print(f"{alias}: {code}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
