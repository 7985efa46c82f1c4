"""Counter state machine written as a state/event switch."""

from __future__ import annotations

import sys
from typing import TextIO

from embpatterns.counter import Counter, CounterEvent, CounterMode


class ProceduralCounterCtrl:
    """Up/down counter controller whose transitions are coded per state."""

    def __init__(self, init_value: int = 0, out: TextIO | None = None) -> None:
        self.state = CounterMode.IDLE
        self.counter = Counter(init_value)
        self.out = sys.stdout if out is None else out

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _change_to(self, mode: CounterMode) -> None:
        self._say(f"Changing to State: {mode.value}")
        self.state = mode

    def process(self, event: CounterEvent) -> None:
        """Change state according to ``event`` and run the transition's actions."""
        state = self.state
        self._say(f"State: {state.value}")
        if state is CounterMode.IDLE:
            if event is CounterEvent.UP:
                self._say(f"State: idleState, counter = {self.counter.value}")
                self._change_to(CounterMode.COUNT_UP)
            elif event is CounterEvent.DOWN:
                self._say(f"State: idleState, counter = {self.counter.value}")
                self._change_to(CounterMode.COUNT_DOWN)
        elif state in (CounterMode.COUNT_UP, CounterMode.COUNT_DOWN):
            if event is CounterEvent.COUNT:
                self.counter.count(1 if state is CounterMode.COUNT_UP else -1)
                self._say(f"State: {state.value}, counter = {self.counter.value}")
            elif event is CounterEvent.STOP:
                self._change_to(CounterMode.IDLE)