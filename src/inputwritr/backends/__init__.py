"""Adapters between concrete windowing toolkits and InputWritr pipes."""
from .arcade_keys import ARCADE_CODE_LABEL, ArcadeKeyEvent, arcade_handler, arcade_key_codes

__all__ = ["ARCADE_CODE_LABEL", "ArcadeKeyEvent", "arcade_handler", "arcade_key_codes"]
