from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

try:
    import arcade
except Exception:  # pragma: no cover - Import errors handled at runtime where used
    arcade = None  # type: ignore

from ..pipes import Pipe

logger = logging.getLogger(__name__)

# Code label for pipes fed by arcade_handler
ARCADE_CODE_LABEL = "symbol"


@dataclass(frozen=True)
class ArcadeKeyEvent:
    """Raw key event built from an Arcade ``on_key_press``/``on_key_release`` call."""

    symbol: int
    modifiers: int = 0


def arcade_key_codes() -> Dict[str, int]:
    """Key alias -> code table built from ``arcade.key`` constants.

    Names are lower-cased ("LEFT" -> "left"), so the result can be passed as
    ``key_aliases_to_codes``. Where several names share a code the last one
    in alphabetical order wins.
    """
    if arcade is None:  # pragma: no cover - runtime guard
        raise RuntimeError("arcade is not available. Install 'arcade' to use arcade_key_codes.")
    table: Dict[str, int] = {}
    for name in sorted(dir(arcade.key)):
        value = getattr(arcade.key, name)
        if name.isupper() and isinstance(value, int) and not isinstance(value, bool):
            table[name.lower()] = value
    logger.debug("Built %d key aliases from arcade.key", len(table))
    return table


def arcade_handler(pipe: Pipe) -> Callable[[int, int], None]:
    """Adapt a pipe made with code label ``"symbol"`` to Arcade's key callbacks.

    Example usage:
        on_key_press = arcade_handler(writr.make_pipe("onkeydown", ARCADE_CODE_LABEL))
        window.on_key_press = on_key_press
    """

    def handler(symbol: int, modifiers: int = 0) -> None:
        pipe(ArcadeKeyEvent(symbol=symbol, modifiers=modifiers))

    return handler


__all__ = ["ARCADE_CODE_LABEL", "ArcadeKeyEvent", "arcade_handler", "arcade_key_codes"]
