import pytest

from inputwritr.errors import InvalidAliasError
from inputwritr.keys import DEFAULT_KEY_ALIASES_TO_CODES, as_code, label_key


def test_label_key_normalizes_ints_and_strings_to_the_same_slot():
    assert label_key(37) == "37"
    assert label_key("37") == "37"
    assert label_key("left") == "left"


@pytest.mark.parametrize("bad", [True, 1.5, None, ("a",), b"left"])
def test_label_key_rejects_other_types(bad):
    with pytest.raises(InvalidAliasError):
        label_key(bad)


def test_as_code():
    assert as_code(37) == 37
    assert as_code("37") == 37
    assert as_code("left") is None
    assert as_code(False) is None


def test_non_ascii_digits_are_not_codes():
    assert as_code("²") is None
    assert as_code("٣") is None


def test_default_key_table_contains_arrows_and_letters():
    assert DEFAULT_KEY_ALIASES_TO_CODES["left"] == 37
    assert DEFAULT_KEY_ALIASES_TO_CODES["down"] == 40
    assert DEFAULT_KEY_ALIASES_TO_CODES["shift"] == 16
    assert DEFAULT_KEY_ALIASES_TO_CODES["a"] == 65
    assert DEFAULT_KEY_ALIASES_TO_CODES["z"] == 90
    # Codes are unique so the default table is a bijection
    assert len(set(DEFAULT_KEY_ALIASES_TO_CODES.values())) == len(DEFAULT_KEY_ALIASES_TO_CODES)
