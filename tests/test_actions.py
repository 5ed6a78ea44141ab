"""Tests for key mapping and dispatch."""

import os

import pytest
from timetracker.actions import Action, Engine, Step, keyToAction
from timetracker.config import loads
from timetracker.timer import observe

T0 = 1_700_000_000


def makeEngine(text: str = "A=5M\nB=10M\nC=1M\n", source_path=None) -> Engine:
    return Engine(loads(text, source_path=source_path))


def test_slot_keys_map_to_slots():
    assert keyToAction("1", 3) == Action.ToggleSlot(1)
    assert keyToAction("3", 3) == Action.ToggleSlot(3)
    assert keyToAction("0", 10) == Action.ToggleSlot(10)
    assert keyToAction("j", 20) == Action.ToggleSlot(20)


def test_slot_key_past_loaded_set_is_ignored():
    assert keyToAction("4", 3) is None
    assert keyToAction("0", 9) is None


def test_command_keys():
    assert keyToAction("q", 1) == Action.Quit()
    assert keyToAction("s", 1) == Action.Save()
    assert keyToAction("z", 1) == Action.ZeroAll()


@pytest.mark.parametrize("key", ["x", "Q", " ", "escape", "ctrl+a", ""])
def test_other_keys_are_ignored(key):
    assert keyToAction(key, 20) is None


def test_toggle_slot_dispatch():
    engine = makeEngine()
    assert engine.dispatch(Action.ToggleSlot(2), T0) == Step.REDRAW
    timer = engine.timer_set[1]
    assert timer.running
    assert observe(timer, T0 + 60) == 540
    assert engine.pressKey("2", T0 + 60) == Step.REDRAW
    assert not timer.running
    assert timer.remaining_seconds == 540


def test_ignored_key_leaves_state_alone():
    engine = makeEngine()
    assert engine.pressKey("9", T0) == Step.IDLE
    assert engine.pressKey("x", T0) == Step.IDLE
    assert not any(t.running for t in engine.timer_set)


def test_out_of_range_toggle_is_idle():
    engine = makeEngine()
    assert engine.dispatch(Action.ToggleSlot(7), T0) == Step.IDLE


def test_quit_is_a_step():
    engine = makeEngine()
    assert engine.pressKey("q", T0) == Step.QUIT


def test_zero_all_dispatch():
    engine = makeEngine()
    engine.pressKey("1", T0)
    assert engine.pressKey("z", T0 + 30) == Step.REDRAW
    assert all(
        not t.running and t.remaining_seconds == 0 for t in engine.timer_set
    )


def test_save_writes_source_and_sets_status(tmp_path):
    path = tmp_path / "timers.conf"
    path.write_text("# mine\nA=5M\nB=10M\n", encoding="utf-8")
    engine = makeEngine(path.read_text(encoding="utf-8"), str(path))
    engine.pressKey("1", T0)
    assert engine.pressKey("s", T0 + 120) == Step.REDRAW
    assert path.read_text(encoding="utf-8") == "A=3M\nB=10M\n"
    assert engine.status is not None
    assert engine.status.startswith("Saved at ")
    assert engine.timer_set[0].running


def test_save_failure_reported_in_status(tmp_path):
    bad_path = os.path.join(str(tmp_path), "missing", "timers.conf")
    engine = makeEngine(source_path=bad_path)
    assert engine.pressKey("s", T0) == Step.REDRAW
    assert engine.status is not None
    assert "failed to save" in engine.status


def test_save_without_source():
    engine = makeEngine()
    engine.pressKey("s", T0)
    assert engine.status == "Nowhere to save."


def test_describe():
    assert Action.ToggleSlot(4).describe() == "toggle slot 4"
    assert Action.ZeroAll().describe() == "zero all"


def test_save_status_cleared_by_next_toggle(tmp_path):
    engine = makeEngine(source_path=str(tmp_path / "timers.conf"))
    engine.pressKey("s", T0)
    assert engine.status is not None
    engine.pressKey("1", T0 + 5)
    assert engine.status is None


def test_save_status_cleared_by_zero_all(tmp_path):
    engine = makeEngine(source_path=str(tmp_path / "missing" / "timers.conf"))
    engine.pressKey("s", T0)
    assert engine.status is not None
    engine.pressKey("z", T0 + 5)
    assert engine.status is None


def test_ignored_key_keeps_save_status(tmp_path):
    engine = makeEngine(source_path=str(tmp_path / "timers.conf"))
    engine.pressKey("s", T0)
    engine.pressKey("x", T0 + 5)
    assert engine.status.startswith("Saved at ")
