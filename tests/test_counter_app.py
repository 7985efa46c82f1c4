import io

import pytest

from embpatterns.counter import CounterMode
from embpatterns.counter_app import main, run
from embpatterns.fsm_procedural import ProceduralCounterCtrl
from embpatterns.fsm_state import CountUpState, StatePatternCounterCtrl
from embpatterns.fsm_table import TableCounterCtrl


@pytest.mark.parametrize("cls", [ProceduralCounterCtrl, TableCounterCtrl])
def test_run_counts_up(cls):
    ctrl = cls(0, io.StringIO())
    stdout = io.StringIO()
    run(ctrl, io.StringIO("u\nc\nc\nq\n"), stdout)
    assert ctrl.counter.value == 2
    assert ctrl.state is CounterMode.COUNT_UP
    assert stdout.getvalue().count("Please press key: ") == 4


def test_run_state_pattern():
    ctrl = StatePatternCounterCtrl(10, io.StringIO())
    run(ctrl, io.StringIO("u c c c q"), io.StringIO())
    assert ctrl.counter.value == 10 + 3
    assert ctrl.state is CountUpState()


def test_run_stops_at_q():
    ctrl = ProceduralCounterCtrl(0, io.StringIO())
    run(ctrl, io.StringIO("q\nu\nc\n"), io.StringIO())
    assert ctrl.state is CounterMode.IDLE
    assert ctrl.counter.value == 0


def test_run_ends_on_eof_and_ignores_unknown_keys():
    ctrl = ProceduralCounterCtrl(4, io.StringIO())
    stdout = io.StringIO()
    run(ctrl, io.StringIO("x\nd\nz\nc\n"), stdout)
    assert ctrl.state is CounterMode.COUNT_DOWN
    assert ctrl.counter.value == 4 - 1
    assert stdout.getvalue().count("    q   Quit") == 5


def test_main_with_table(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("u\nc\nq\n"))
    assert main(["--impl", "table", "--init", "3"]) == 0
    text = capsys.readouterr().out
    assert "State: idleState, counter = 3" in text
    assert "State: countUpState, counter = 4" in text


def test_main_rejects_unknown_impl(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    with pytest.raises(SystemExit):
        main(["--impl", "bogus"])