from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from .dispatch import Dispatcher
from .errors import UnknownTriggerError

logger = logging.getLogger(__name__)

Pipe = Callable[[Any], None]


def _extract_code(raw_event: Any, code_label: str) -> Any:
    if isinstance(raw_event, Mapping):
        return raw_event.get(code_label)
    return getattr(raw_event, code_label, None)


def _prevent_default(raw_event: Any) -> None:
    for name in ("prevent_default", "preventDefault"):
        method = getattr(raw_event, name, None)
        if callable(method):
            method()
            return


class PipeFactory:
    """Builds event-handler closures that forward raw events to a Dispatcher.

    Example usage:
        on_key_down = factory.make_pipe("onkeydown", "keyCode", prevent_defaults=True)
        on_key_down({"keyCode": 37})
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self.dispatcher = dispatcher

    def make_pipe(self, trigger: str, code_label: str, prevent_defaults: bool = False) -> Pipe:
        """Return a handler that dispatches ``raw_event[code_label]`` under ``trigger``.

        Raises:
            UnknownTriggerError: ``trigger`` has no label table yet.
        """
        if not self.dispatcher.registry.has_trigger(trigger):
            raise UnknownTriggerError(trigger)
        if not isinstance(code_label, str) or not code_label:
            raise ValueError(f"code_label must be a non-empty string, got {code_label!r}")
        dispatcher = self.dispatcher

        def pipe(raw_event: Any) -> None:
            if prevent_defaults:
                _prevent_default(raw_event)
            dispatcher.call_event(trigger, _extract_code(raw_event, code_label), raw_event)

        logger.debug("Created pipe for trigger '%s' reading '%s'", trigger, code_label)
        return pipe


__all__ = ["Pipe", "PipeFactory"]
