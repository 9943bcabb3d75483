from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional

from .errors import InvalidAliasError
from .keys import DEFAULT_KEY_ALIASES_TO_CODES, Alias, as_code, label_key

logger = logging.getLogger(__name__)


def _ensure_sequence(name: Any, values: Any) -> None:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidAliasError(f"Alias values for {name!r} must be a list or tuple, got {values!r}")


class AliasTable:
    """Bidirectional key alias <-> code table plus action alias sets.

    Two kinds of aliasing live here:

    - Key aliases: a bijection between human key names ("left") and raw codes
      (37). Writing a pair drops any previous pair touching either side.
    - Action aliases: an ordered list of aliases/codes per action name
      ("left" -> [37, "a"]) that may stand in for that name at dispatch time.

    Example usage:
        table = AliasTable()
        table.add_alias_values("left", [37, "a"])
        table.convert_key_string_to_alias("left")   # -> 37
        table.get_alias_as_key_strings("left")      # -> ["left", "a"]
    """

    def __init__(
        self,
        aliases: Optional[Mapping[Any, Sequence[Alias]]] = None,
        key_aliases_to_codes: Optional[Mapping[str, int]] = None,
        key_codes_to_aliases: Optional[Mapping[Any, str]] = None,
    ) -> None:
        self._aliases: Dict[str, List[Alias]] = {}
        # label key of an alias value -> action names holding it (one entry per occurrence)
        self._owners: Dict[str, List[str]] = {}
        self._aliases_to_codes: Dict[str, int] = {}
        self._codes_to_aliases: Dict[int, str] = {}

        if key_aliases_to_codes is None and key_codes_to_aliases is None:
            key_aliases_to_codes = DEFAULT_KEY_ALIASES_TO_CODES
        for alias, code in (key_aliases_to_codes or {}).items():
            self.register_key(alias, code)
        for code, alias in (key_codes_to_aliases or {}).items():
            self.register_key(alias, code)

        if aliases:
            self.add_aliases(aliases)

    # ---------- Key alias <-> code ----------
    def register_key(self, alias: str, code: Any) -> None:
        """Map a key alias to a code, replacing any pair touching either side."""
        if not isinstance(alias, str) or not alias:
            raise InvalidAliasError(f"Key alias must be a non-empty string, got {alias!r}")
        numeric = as_code(code)
        if numeric is None:
            raise InvalidAliasError(f"Key code for {alias!r} must be an integer, got {code!r}")

        old_code = self._aliases_to_codes.pop(alias, None)
        if old_code is not None:
            self._codes_to_aliases.pop(old_code, None)
        old_alias = self._codes_to_aliases.pop(numeric, None)
        if old_alias is not None:
            self._aliases_to_codes.pop(old_alias, None)

        self._aliases_to_codes[alias] = numeric
        self._codes_to_aliases[numeric] = alias

    def get_key_table(self) -> Dict[str, int]:
        return dict(self._aliases_to_codes)

    def convert_alias_to_key_string(self, alias: Any) -> Any:
        """Return the key name for a code, or ``alias`` unchanged if unknown."""
        code = as_code(alias)
        if code is not None and code in self._codes_to_aliases:
            return self._codes_to_aliases[code]
        return alias

    def convert_key_string_to_alias(self, key: Any) -> Any:
        """Return the code for a key name, or ``key`` unchanged if unknown."""
        if isinstance(key, str) and key in self._aliases_to_codes:
            return self._aliases_to_codes[key]
        return key

    # ---------- Action aliases ----------
    def get_aliases(self) -> Dict[str, List[Alias]]:
        return {name: list(values) for name, values in self._aliases.items()}

    def get_alias_as_key_strings(self, alias: Alias) -> List[str]:
        values = self._aliases.get(label_key(alias), [])
        return [str(self.convert_alias_to_key_string(value)) for value in values]

    def get_aliases_as_key_strings(self) -> Dict[str, List[str]]:
        return {name: self.get_alias_as_key_strings(name) for name in self._aliases}

    def add_alias_values(self, name: Alias, values: Sequence[Alias]) -> List[Alias]:
        """Append ``values`` to the aliases of ``name``.

        Existing values are kept. Returns the values that were added, so the
        result can be passed straight back to ``remove_alias_values``.
        """
        _ensure_sequence(name, values)
        key = label_key(name)
        value_keys = [label_key(value) for value in values]

        self._aliases.setdefault(key, []).extend(values)
        for value_key in value_keys:
            self._owners.setdefault(value_key, []).append(key)
        logger.debug("Added aliases %s to '%s'", list(values), key)
        return list(values)

    def remove_alias_values(self, name: Alias, values: Sequence[Alias]) -> None:
        """Remove one occurrence of each listed value; absent values are ignored."""
        _ensure_sequence(name, values)
        key = label_key(name)
        value_keys = [label_key(value) for value in values]
        current = self._aliases.get(key)
        if current is None:
            return

        for value_key in value_keys:
            index = next((i for i, v in enumerate(current) if label_key(v) == value_key), None)
            if index is None:
                continue
            del current[index]
            owners = self._owners.get(value_key, [])
            if key in owners:
                owners.remove(key)
            if not owners:
                self._owners.pop(value_key, None)

        if not current:
            del self._aliases[key]
        logger.debug("Removed aliases %s from '%s'", list(values), key)

    def switch_alias_values(
        self, name: Alias, values_old: Sequence[Alias], values_new: Sequence[Alias]
    ) -> None:
        self.remove_alias_values(name, values_old)
        self.add_alias_values(name, values_new)

    def add_aliases(self, aliases_raw: Mapping[Any, Sequence[Alias]]) -> None:
        """Bulk form of ``add_alias_values`` for a ``{name: [values]}`` mapping.

        Every entry is validated before any is applied.
        """
        if not isinstance(aliases_raw, Mapping):
            raise InvalidAliasError(f"Aliases must be a mapping of name -> values, got {aliases_raw!r}")
        for name, values in aliases_raw.items():
            _ensure_sequence(name, values)
            label_key(name)
            for value in values:
                label_key(value)
        for name, values in aliases_raw.items():
            self.add_alias_values(name, values)
        logger.info("Loaded aliases for %d actions", len(aliases_raw))

    # ---------- Dispatch-time resolution ----------
    def resolve_labels(self, label: Alias) -> List[str]:
        """Candidate label keys for ``label``, most specific first.

        Order: the label itself, its code, its key name, then every action
        name whose alias values contain any of those forms.
        """
        forms = [
            label_key(label),
            label_key(self.convert_key_string_to_alias(label)),
            label_key(self.convert_alias_to_key_string(label)),
        ]
        candidates: List[str] = []
        for form in forms:
            if form not in candidates:
                candidates.append(form)
        for form in forms:
            for owner in self._owners.get(form, []):
                if owner not in candidates:
                    candidates.append(owner)
        return candidates


__all__ = ["AliasTable"]
