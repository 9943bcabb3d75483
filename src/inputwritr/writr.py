from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .aliases import AliasTable
from .dispatch import Dispatcher
from .gate import BooleanGetter, GateController, GateValue
from .history import InputHistory, RecordedEvent
from .keys import Alias
from .pipes import Pipe, PipeFactory
from .registry import TriggerCallback, TriggerRegistry

if TYPE_CHECKING:  # pragma: no cover
    from .settings import InputSettings

logger = logging.getLogger(__name__)


class InputWritr:
    """Bridges raw input events to named actions.

    Callbacks are registered under a trigger name ("onkeydown") and a label
    (a key code or key alias). Pipes made with ``make_pipe`` are attached to
    an event source; each raw event is mapped to its label, aliases are
    resolved, and the matching callback runs if the gate allows it.

    Example usage:
        writr = InputWritr()
        writr.add_event("onkeydown", "left", player.move_left)
        writr.add_alias_values("left", [65])    # "a" also moves left
        on_key_down = writr.make_pipe("onkeydown", "keyCode")
        on_key_down({"keyCode": 37})
    """

    def __init__(
        self,
        triggers: Optional[Mapping[str, Mapping[Alias, TriggerCallback]]] = None,
        get_timestamp: Optional[Callable[[], float]] = None,
        aliases: Optional[Mapping[Any, Sequence[Alias]]] = None,
        key_aliases_to_codes: Optional[Mapping[str, int]] = None,
        key_codes_to_aliases: Optional[Mapping[Any, str]] = None,
        can_trigger: GateValue = True,
    ) -> None:
        self.get_timestamp: Callable[[], float] = get_timestamp or time.perf_counter
        self.alias_table = AliasTable(
            aliases=aliases,
            key_aliases_to_codes=key_aliases_to_codes,
            key_codes_to_aliases=key_codes_to_aliases,
        )
        self.registry = TriggerRegistry(triggers)
        self.gate = GateController(can_trigger)
        self.history = InputHistory(self.get_timestamp)
        self.dispatcher = Dispatcher(self.registry, self.alias_table, self.gate, self.history)
        self.pipes = PipeFactory(self.dispatcher)

    @classmethod
    def from_settings(
        cls,
        settings: "InputSettings",
        triggers: Optional[Mapping[str, Mapping[Alias, TriggerCallback]]] = None,
        get_timestamp: Optional[Callable[[], float]] = None,
    ) -> "InputWritr":
        return cls(triggers=triggers, get_timestamp=get_timestamp, **settings.to_kwargs())

    def timestamp(self) -> float:
        return self.get_timestamp()

    # ---------- Aliases ----------
    def get_aliases(self) -> Dict[str, List[Alias]]:
        return self.alias_table.get_aliases()

    def get_aliases_as_key_strings(self) -> Dict[str, List[str]]:
        return self.alias_table.get_aliases_as_key_strings()

    def get_alias_as_key_strings(self, alias: Alias) -> List[str]:
        return self.alias_table.get_alias_as_key_strings(alias)

    def convert_alias_to_key_string(self, alias: Any) -> Any:
        return self.alias_table.convert_alias_to_key_string(alias)

    def convert_key_string_to_alias(self, key: Any) -> Any:
        return self.alias_table.convert_key_string_to_alias(key)

    def add_alias_values(self, name: Alias, values: Sequence[Alias]) -> List[Alias]:
        return self.alias_table.add_alias_values(name, values)

    def remove_alias_values(self, name: Alias, values: Sequence[Alias]) -> None:
        self.alias_table.remove_alias_values(name, values)

    def switch_alias_values(
        self, name: Alias, values_old: Sequence[Alias], values_new: Sequence[Alias]
    ) -> None:
        self.alias_table.switch_alias_values(name, values_old, values_new)

    def add_aliases(self, aliases_raw: Mapping[Any, Sequence[Alias]]) -> None:
        self.alias_table.add_aliases(aliases_raw)

    # ---------- Gate ----------
    def get_can_trigger(self) -> BooleanGetter:
        return self.gate.get_can_trigger()

    def set_can_trigger(self, can_trigger: GateValue) -> None:
        self.gate.set_can_trigger(can_trigger)

    # ---------- Triggers ----------
    def get_triggers(self) -> Dict[str, Dict[str, TriggerCallback]]:
        return self.registry.get_triggers()

    def add_event(self, trigger: str, label: Alias, callback: TriggerCallback) -> None:
        self.registry.add_event(trigger, label, callback)

    def remove_event(self, trigger: str, label: Alias) -> None:
        self.registry.remove_event(trigger, label)

    def call_event(
        self,
        event: Union[str, Callable[..., Any]],
        key_code: Any = None,
        source_event: Any = None,
    ) -> Any:
        return self.dispatcher.call_event(event, key_code, source_event)

    def make_pipe(self, trigger: str, code_label: str, prevent_defaults: bool = False) -> Pipe:
        return self.pipes.make_pipe(trigger, code_label, prevent_defaults)

    # ---------- History ----------
    @property
    def is_recording(self) -> bool:
        return self.history.is_recording

    def start_recording(self) -> None:
        self.history.start_recording()

    def stop_recording(self) -> None:
        self.history.stop_recording()

    def get_history(self) -> List[RecordedEvent]:
        return self.history.get_history()

    def clear_history(self) -> None:
        self.history.clear()

    def play_history(self, events: Iterable[RecordedEvent]) -> List[Any]:
        """Re-dispatch recorded events in order and return the callback results.

        Recording is paused during playback so replayed events are not
        captured again.
        """
        was_recording = self.history.is_recording
        if was_recording:
            self.history.stop_recording()
        try:
            results = [self.call_event(event.trigger, event.label) for event in events]
        finally:
            if was_recording:
                self.history.resume_recording()
        logger.debug("Replayed %d recorded events", len(results))
        return results


__all__ = ["InputWritr"]
