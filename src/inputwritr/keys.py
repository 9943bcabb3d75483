"""Label normalization and the default key alias table.

Labels and aliases may be strings ("left") or integer key codes (37). Every
table in this package is keyed by ``label_key``, so ``37`` and ``"37"`` address
the same slot.
"""
from __future__ import annotations

import string
from typing import Dict, Optional, Union

from .errors import InvalidAliasError

Alias = Union[str, int]


def label_key(value: Alias) -> str:
    """Convert a string or integer alias into its canonical table key."""
    # bool is an int subclass but never a key code
    if isinstance(value, bool):
        raise InvalidAliasError(f"Alias must be a string or integer code, got {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise InvalidAliasError(f"Alias must be a string or integer code, got {value!r}")


def as_code(value: Alias) -> Optional[int]:
    """Return ``value`` as an integer code, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    # isdigit alone accepts superscripts like "²" that int() rejects
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def _default_key_aliases() -> Dict[str, int]:
    table: Dict[str, int] = {
        "backspace": 8,
        "tab": 9,
        "enter": 13,
        "shift": 16,
        "ctrl": 17,
        "escape": 27,
        "space": 32,
        "left": 37,
        "up": 38,
        "right": 39,
        "down": 40,
    }
    for offset, letter in enumerate(string.ascii_lowercase):
        table[letter] = 65 + offset
    return table


# Browser-style keyCode values
DEFAULT_KEY_ALIASES_TO_CODES: Dict[str, int] = _default_key_aliases()


__all__ = ["Alias", "DEFAULT_KEY_ALIASES_TO_CODES", "as_code", "label_key"]
