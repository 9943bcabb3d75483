from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .errors import UnknownLabelError, UnknownTriggerError
from .keys import Alias, label_key

logger = logging.getLogger(__name__)

TriggerCallback = Callable[[Optional[Any]], Any]


class TriggerRegistry:
    """Nested table of trigger name -> label -> callback.

    One callback is stored per (trigger, label) pair under the label's
    canonical key. Aliases are not copied into the table; they are resolved
    when an event is dispatched.
    """

    def __init__(self, triggers: Optional[Mapping[str, Mapping[Alias, TriggerCallback]]] = None) -> None:
        self._triggers: Dict[str, Dict[str, TriggerCallback]] = {}
        for trigger, labels in (triggers or {}).items():
            self._triggers.setdefault(trigger, {})
            for label, callback in labels.items():
                self.add_event(trigger, label, callback)

    def get_triggers(self) -> Dict[str, Dict[str, TriggerCallback]]:
        return {trigger: dict(labels) for trigger, labels in self._triggers.items()}

    def has_trigger(self, trigger: str) -> bool:
        return trigger in self._triggers

    def add_event(self, trigger: str, label: Alias, callback: TriggerCallback) -> None:
        """Register ``callback`` under ``trigger``/``label``, replacing any existing one."""
        if not callable(callback):
            raise TypeError(f"Callback for {trigger!r}/{label!r} must be callable, got {callback!r}")
        key = label_key(label)
        self._triggers.setdefault(trigger, {})[key] = callback
        logger.debug("Registered callback for trigger '%s' label '%s'", trigger, key)

    def remove_event(self, trigger: str, label: Alias) -> None:
        """Drop the callback for ``trigger``/``label``; the trigger's table is kept."""
        labels = self._triggers.get(trigger)
        if labels is None:
            return
        if labels.pop(label_key(label), None) is not None:
            logger.debug("Removed callback for trigger '%s' label '%s'", trigger, label)

    def lookup(self, trigger: str, candidates: Iterable[str], label: Any = None) -> TriggerCallback:
        """Return the first callback registered under one of ``candidates``."""
        labels = self._triggers.get(trigger)
        if labels is None:
            raise UnknownTriggerError(trigger)
        tried = []
        for candidate in candidates:
            callback = labels.get(candidate)
            if callback is not None:
                return callback
            tried.append(candidate)
        raise UnknownLabelError(trigger, label, tried)


__all__ = ["TriggerCallback", "TriggerRegistry"]
