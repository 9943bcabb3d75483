from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional, Union

from .aliases import AliasTable
from .errors import UnknownLabelError, UnknownTriggerError
from .gate import GateController
from .history import InputHistory
from .registry import TriggerRegistry

logger = logging.getLogger(__name__)


def _invoke(callback: Callable[..., Any], source_event: Any) -> Any:
    """Call ``callback`` with the source event, or with nothing if it takes no arguments."""
    try:
        inspect.signature(callback).bind(source_event)
    except TypeError:
        return callback()
    except ValueError:
        # No introspectable signature
        pass
    return callback(source_event)


class Dispatcher:
    """Resolves a trigger/label pair into a callback and runs it.

    Callbacks receive the source event, or nothing if they take no
    arguments. Dispatch is synchronous and exceptions raised by callbacks
    propagate to the caller unchanged. When the gate disallows dispatch the
    call is a silent no-op returning None.
    """

    def __init__(
        self,
        registry: TriggerRegistry,
        aliases: AliasTable,
        gate: GateController,
        history: Optional[InputHistory] = None,
    ) -> None:
        self.registry = registry
        self.aliases = aliases
        self.gate = gate
        self.history = history

    def call_event(
        self,
        event: Union[str, Callable[..., Any]],
        key_code: Any = None,
        source_event: Any = None,
    ) -> Any:
        """Run the callback for ``event`` and return its result.

        Args:
            event: A trigger name, or a callable to invoke directly without
                consulting the registry.
            key_code: Label under the trigger, typically a code or key alias.
            source_event: The raw event handed to the callback.

        Raises:
            UnknownTriggerError: ``event`` names no registered trigger.
            UnknownLabelError: nothing is registered for ``key_code`` or its aliases.
        """
        if callable(event):
            if not self.gate.allows(event, key_code):
                logger.debug("Gate closed; skipped direct callable %r", event)
                return None
            return _invoke(event, source_event)

        if not isinstance(event, str):
            raise TypeError(f"Event must be a trigger name or a callable, got {event!r}")
        if not self.registry.has_trigger(event):
            raise UnknownTriggerError(event)
        if key_code is None:
            raise UnknownLabelError(event, key_code)

        candidates = self.aliases.resolve_labels(key_code)
        callback = self.registry.lookup(event, candidates, label=key_code)

        if not self.gate.allows(event, key_code):
            logger.debug("Gate closed; skipped trigger '%s' label %r", event, key_code)
            return None

        if self.history is not None:
            self.history.record(event, key_code)
        logger.debug("Dispatching trigger '%s' label %r", event, key_code)
        return _invoke(callback, source_event)


__all__ = ["Dispatcher"]
