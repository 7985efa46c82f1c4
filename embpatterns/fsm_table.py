"""Counter state machine driven by a table of transitions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional, TextIO, Union

from embpatterns.counter import Counter, CounterEvent, CounterMode

Action = Callable[["TableCounterCtrl"], None]
Checker = Callable[["TableCounterCtrl", CounterEvent], bool]


@dataclass(frozen=True)
class Transition:
    """One table row: in ``state``, ``trigger`` runs ``action`` and moves to ``next_state``.

    ``trigger`` is either the event that fires the transition or a checker
    called with the controller and the event that decides whether it fires.
    ``action`` may be ``None`` for a transition without an action.
    """

    state: CounterMode
    trigger: Union[CounterEvent, Checker]
    action: Optional[Action]
    next_state: CounterMode


def _report_idle(ctrl: TableCounterCtrl) -> None:
    print(f"State: idleState, counter = {ctrl.counter.value}", file=ctrl.out)


def _count_up(ctrl: TableCounterCtrl) -> None:
    ctrl.counter.count(1)
    print(f"State: countUpState, counter = {ctrl.counter.value}", file=ctrl.out)


def _count_down(ctrl: TableCounterCtrl) -> None:
    ctrl.counter.count(-1)
    print(f"State: countDownState, counter = {ctrl.counter.value}", file=ctrl.out)


DEFAULT_TRANSITIONS: tuple[Transition, ...] = (
    Transition(CounterMode.IDLE, CounterEvent.UP, _report_idle, CounterMode.COUNT_UP),
    Transition(CounterMode.IDLE, CounterEvent.DOWN, _report_idle, CounterMode.COUNT_DOWN),
    Transition(CounterMode.COUNT_UP, CounterEvent.COUNT, _count_up, CounterMode.COUNT_UP),
    Transition(CounterMode.COUNT_UP, CounterEvent.STOP, None, CounterMode.IDLE),
    Transition(CounterMode.COUNT_DOWN, CounterEvent.COUNT, _count_down, CounterMode.COUNT_DOWN),
    Transition(CounterMode.COUNT_DOWN, CounterEvent.STOP, None, CounterMode.IDLE),
)


class TableCounterCtrl:
    """Runs the first table row matching the current state and event."""

    def __init__(
        self,
        init_value: int = 0,
        out: TextIO | None = None,
        transitions: Iterable[Transition] | None = None,
    ) -> None:
        self.state = CounterMode.IDLE
        self.counter = Counter(init_value)
        self.out = sys.stdout if out is None else out
        self.transitions = tuple(DEFAULT_TRANSITIONS if transitions is None else transitions)

    def _fires(self, transition: Transition, event: CounterEvent) -> bool:
        if transition.state is not self.state:
            return False
        if isinstance(transition.trigger, CounterEvent):
            return transition.trigger is event
        return bool(transition.trigger(self, event))

    def process(self, event: CounterEvent) -> None:
        """Apply the first transition that fires on ``event``; otherwise do nothing."""
        for transition in self.transitions:
            if self._fires(transition, event):
                if transition.action is not None:
                    transition.action(self)
                self.state = transition.next_state
                return