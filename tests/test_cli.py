import logging
from pathlib import Path

import pytest

from inputwritr.cli import main, parse_args


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("inputwritr")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.yaml"
    path.write_text(
        "aliases:\n  fire: [32, x]\nkey_aliases_to_codes:\n  space: 32\n  x: 88\n",
        encoding="utf-8",
    )
    return path


def test_parse_args_defaults():
    args = parse_args(["keys"])
    assert args.view == "keys"
    assert args.settings_path is None
    assert args.debug is False


def test_aliases_view(settings_file: Path, capsys: pytest.CaptureFixture):
    assert main(["--settings", str(settings_file), "aliases"]) == 0
    assert capsys.readouterr().out.splitlines() == ["fire: space, x"]


def test_keys_view_sorted_by_code(settings_file: Path, capsys: pytest.CaptureFixture):
    assert main(["--settings", str(settings_file), "keys"]) == 0
    assert capsys.readouterr().out.splitlines() == ["space: 32", "x: 88"]


def test_invalid_settings_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture):
    path = tmp_path / "input.yaml"
    path.write_text("aliases:\n  fire: space\n", encoding="utf-8")
    assert main(["--settings", str(path), "aliases"]) == 2
    assert "Invalid input settings" in capsys.readouterr().err
