import pytest

from inputwritr import InputWritr
from inputwritr.backends import arcade_keys
from inputwritr.backends.arcade_keys import ARCADE_CODE_LABEL, ArcadeKeyEvent, arcade_handler


def test_arcade_handler_feeds_pipe_with_key_event(recorder):
    writr = InputWritr(key_aliases_to_codes={"left": 65361})
    callback = recorder()
    writr.add_event("onkeydown", "left", callback)
    on_key_press = arcade_handler(writr.make_pipe("onkeydown", ARCADE_CODE_LABEL))

    on_key_press(65361, 1)
    assert callback.calls == [ArcadeKeyEvent(symbol=65361, modifiers=1)]


def test_arcade_key_codes_uses_lowercase_constant_names():
    if arcade_keys.arcade is None:
        pytest.skip("arcade is not installed")
    key = arcade_keys.arcade.key
    table = arcade_keys.arcade_key_codes()
    assert table["left"] == key.LEFT
    assert table["space"] == key.SPACE
    assert all(name == name.lower() for name in table)
