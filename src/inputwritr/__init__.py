"""
Input binding layer: routes raw input events to named application actions.

Exposes:
- InputWritr: Facade over the alias table, trigger registry, gate, dispatcher and pipes.
- AliasTable: Key alias <-> code bijection plus per-action alias lists.
- TriggerRegistry: trigger -> label -> callback table.
- GateController: Boolean or predicate deciding whether dispatch proceeds.
- Dispatcher / PipeFactory: Event dispatch and event-handler closures.
- InputSettings: YAML-backed initial alias configuration.
"""
from .aliases import AliasTable
from .dispatch import Dispatcher
from .errors import InputWritrError, InvalidAliasError, UnknownLabelError, UnknownTriggerError
from .gate import GateController
from .history import InputHistory, RecordedEvent
from .keys import DEFAULT_KEY_ALIASES_TO_CODES, Alias, as_code, label_key
from .pipes import PipeFactory
from .registry import TriggerRegistry
from .settings import InputSettings
from .writr import InputWritr

__all__ = [
    "Alias",
    "AliasTable",
    "DEFAULT_KEY_ALIASES_TO_CODES",
    "Dispatcher",
    "GateController",
    "InputHistory",
    "InputSettings",
    "InputWritr",
    "InputWritrError",
    "InvalidAliasError",
    "PipeFactory",
    "RecordedEvent",
    "TriggerRegistry",
    "UnknownLabelError",
    "UnknownTriggerError",
    "as_code",
    "label_key",
]
