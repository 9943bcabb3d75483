from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Union

logger = logging.getLogger(__name__)

BooleanGetter = Callable[..., bool]
GateValue = Union[bool, BooleanGetter]


def _dispatch_arity(predicate: Callable[..., Any]) -> int:
    """How many of ``(event, key_code)`` the predicate can take."""
    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError):
        # Builtins without a signature get both dispatch arguments
        return 2
    for arity in (2, 1):
        try:
            signature.bind(*([None] * arity))
        except TypeError:
            continue
        return arity
    return 0


def _normalize(value: GateValue) -> BooleanGetter:
    if isinstance(value, bool):
        constant = value

        def _constant(*args: Any) -> bool:
            return constant

        return _constant
    if callable(value):
        arity = _dispatch_arity(value)
        if arity == 2:
            return value

        predicate = value

        def _truncated(*args: Any) -> bool:
            return predicate(*args[:arity])

        return _truncated
    raise TypeError(f"can_trigger must be a bool or a callable, got {value!r}")


class GateController:
    """Holds whether dispatch is currently allowed.

    The value is either a constant or a predicate. Predicates are evaluated
    on every dispatch attempt, never cached. Predicates receive as much of
    ``(event, key_code)`` as their signature accepts, so ``lambda: flag``
    works as well as ``lambda event, code: ...``.
    """

    def __init__(self, can_trigger: GateValue = True) -> None:
        self._predicate: BooleanGetter = _normalize(can_trigger)

    def get_can_trigger(self) -> BooleanGetter:
        return self._predicate

    def set_can_trigger(self, value: GateValue) -> None:
        self._predicate = _normalize(value)
        logger.debug("Gate set to %r", value)

    def allows(self, event: Any = None, key_code: Any = None) -> bool:
        return bool(self._predicate(event, key_code))


__all__ = ["BooleanGetter", "GateController", "GateValue"]
