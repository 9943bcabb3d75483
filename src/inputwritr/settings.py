from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from jsonschema import Draft202012Validator
from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "inputwritr"
SETTINGS_FILE_ENV = "INPUTWRITR_SETTINGS_FILE"
SETTINGS_FILE_NAME = "input.yaml"

SETTINGS_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "aliases": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": ["string", "integer"]},
            },
        },
        "key_aliases_to_codes": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "integer"},
        },
        "key_codes_to_aliases": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "string"},
        },
        "can_trigger": {"type": "boolean"},
    },
    "additionalProperties": False,
}


def validate_settings_dict(data: Dict[str, Any]) -> None:
    """Validate a settings document against ``SETTINGS_SCHEMA``.

    Raises:
        jsonschema.ValidationError if the data is invalid.
    """
    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.error("Input settings validation error at %s: %s", list(err.path), err.message)
        raise errors[0]


def _read_document(path: Path) -> Any:
    document = yaml.safe_load(path.read_text(encoding="utf-8"))
    return {} if document is None else document


def _overlay(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``defaults`` with ``overrides`` applied; nested mappings merge key by key."""
    result = dict(defaults)
    for name, value in overrides.items():
        current = result.get(name)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _overlay(current, value)
        result[name] = value
    return result


@dataclass
class InputSettings:
    """Initial alias and gate configuration for an ``InputWritr``.

    Callbacks are never loaded from files; pass triggers to
    ``InputWritr.from_settings`` instead. When both key tables are None the
    built-in key aliases are used.

    Example ``input.yaml``:

        aliases:
          left: [37, a]
          fire: [space]
        key_aliases_to_codes:
          left: 37
          a: 65
          space: 32
        can_trigger: true
    """

    aliases: Dict[str, List[Any]] = field(default_factory=dict)
    key_aliases_to_codes: Optional[Dict[str, int]] = None
    key_codes_to_aliases: Optional[Dict[Any, str]] = None
    can_trigger: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputSettings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - allowed
        if unknown:
            logger.warning("Ignoring unknown input settings keys: %s", sorted(unknown))
        filtered = {k: v for k, v in data.items() if k in allowed}
        return cls(**filtered)

    @classmethod
    def discover_config_path(cls) -> Optional[Path]:
        env_path = os.environ.get(SETTINGS_FILE_ENV)
        if env_path:
            return Path(env_path).expanduser()
        default = Path(user_config_dir(APP_NAME)) / SETTINGS_FILE_NAME
        if default.exists():
            return default
        return None

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "InputSettings":
        """Load settings from defaults overlaid with an optional user YAML file.

        Without ``user_path`` the file named by ``INPUTWRITR_SETTINGS_FILE`` is
        used, then ``input.yaml`` in the platform's user config directory.
        """
        if user_path is None:
            user_path = cls.discover_config_path()

        user_data: Any = {}
        if user_path is not None:
            if user_path.exists():
                user_data = _read_document(user_path)
                logger.info("Loaded input settings from %s", user_path)
            else:
                logger.warning("Input settings file not found: %s", user_path)

        defaults = dataclasses.asdict(cls())
        # A non-mapping document is passed through so validation reports it
        merged = _overlay(defaults, user_data) if isinstance(user_data, dict) else user_data
        validate_settings_dict(merged)
        settings = cls.from_dict(merged)
        logger.debug("Input settings merged: %s", settings)
        return settings

    def to_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for the ``InputWritr`` constructor."""
        return {
            "aliases": dict(self.aliases),
            "key_aliases_to_codes": self.key_aliases_to_codes,
            "key_codes_to_aliases": self.key_codes_to_aliases,
            "can_trigger": self.can_trigger,
        }


__all__ = ["InputSettings", "SETTINGS_SCHEMA", "validate_settings_dict"]
