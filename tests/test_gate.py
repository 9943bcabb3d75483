import pytest

from inputwritr.gate import GateController


def test_default_gate_allows():
    gate = GateController()
    assert gate.allows("onkeydown", 37) is True
    assert gate.get_can_trigger()() is True


def test_constant_gate_is_wrapped_as_predicate():
    gate = GateController(False)
    predicate = gate.get_can_trigger()
    assert callable(predicate)
    assert predicate() is False
    assert predicate("onkeydown", 37) is False
    assert gate.allows() is False


def test_predicate_is_evaluated_on_every_call():
    state = {"open": False}
    gate = GateController()
    gate.set_can_trigger(lambda: state["open"])
    assert gate.allows("onkeydown", 37) is False
    state["open"] = True
    assert gate.allows("onkeydown", 37) is True


def test_predicate_receives_as_many_dispatch_args_as_it_accepts():
    seen = []

    def two(event, key_code):
        seen.append(("two", event, key_code))
        return True

    def one(event):
        seen.append(("one", event))
        return True

    def star(*args):
        seen.append(("star",) + args)
        return True

    gate = GateController(two)
    assert gate.get_can_trigger() is two
    gate.allows("onkeydown", 37)
    gate.set_can_trigger(one)
    gate.allows("onkeydown", 37)
    gate.set_can_trigger(star)
    gate.allows("onkeydown", 37)
    assert seen == [("two", "onkeydown", 37), ("one", "onkeydown"), ("star", "onkeydown", 37)]


def test_gate_rejects_other_values():
    with pytest.raises(TypeError):
        GateController("yes")
    gate = GateController()
    with pytest.raises(TypeError):
        gate.set_can_trigger(None)
    assert gate.allows() is True
