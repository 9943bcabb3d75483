from __future__ import annotations

from typing import Any, Optional


class InputWritrError(Exception):
    """Base error for input binding and dispatch failures."""


class InvalidAliasError(InputWritrError):
    """Raised when alias input is malformed (wrong type or not a sequence)."""


class UnknownTriggerError(InputWritrError):
    """Raised when dispatching to a trigger name with no label table."""

    def __init__(self, trigger: Any) -> None:
        super().__init__(f"Unknown trigger requested: {trigger!r}")
        self.trigger = trigger


class UnknownLabelError(InputWritrError):
    """Raised when no callback is registered for a label under a known trigger."""

    def __init__(self, trigger: str, label: Any, candidates: Optional[list] = None) -> None:
        super().__init__(f"No callback for label {label!r} under trigger {trigger!r}")
        self.trigger = trigger
        self.label = label
        self.candidates = list(candidates or [])
