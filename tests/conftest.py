import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class CallRecorder:
    """Callback stand-in that remembers every source event it was given."""

    def __init__(self, result=None) -> None:
        self.calls = []
        self.result = result

    def __call__(self, event=None):
        self.calls.append(event)
        return self.result


@pytest.fixture
def recorder():
    return CallRecorder


@pytest.fixture
def writr():
    from inputwritr import InputWritr

    return InputWritr()
