from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedEvent:
    """One dispatched trigger captured while recording.

    Attributes:
        timestamp: Value of the owner's timestamp function at dispatch.
        trigger: Trigger name the event was dispatched to.
        label: The label as it was passed to dispatch (before alias resolution).
    """

    timestamp: float
    trigger: str
    label: Any


class InputHistory:
    """Records dispatched trigger events with caller-supplied timestamps."""

    def __init__(self, get_timestamp: Callable[[], float]) -> None:
        self._get_timestamp = get_timestamp
        self._events: List[RecordedEvent] = []
        self._recording: bool = False

    @property
    def is_recording(self) -> bool:
        return self._recording

    def start_recording(self) -> None:
        """Begin a fresh recording, discarding previously recorded events."""
        self._events = []
        self._recording = True
        logger.debug("Input recording started")

    def resume_recording(self) -> None:
        """Continue recording without discarding what was captured so far."""
        self._recording = True

    def stop_recording(self) -> None:
        self._recording = False
        logger.debug("Input recording stopped with %d events", len(self._events))

    def record(self, trigger: str, label: Any) -> None:
        if not self._recording:
            return
        self._events.append(RecordedEvent(timestamp=self._get_timestamp(), trigger=trigger, label=label))

    def get_history(self) -> List[RecordedEvent]:
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()


__all__ = ["InputHistory", "RecordedEvent"]
