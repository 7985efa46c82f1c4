"""Counter state machine built with the State pattern: one object per state."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional, TextIO

from embpatterns.counter import Counter, CounterEvent

Action = Callable[[Counter, TextIO], None]


def _show_counter(entity: Counter, out: TextIO) -> None:
    print(f"counter = {entity.value}", file=out)


def _count_up(entity: Counter, out: TextIO) -> None:
    entity.count(1)
    print(f"counter = {entity.value}", file=out)


def _count_down(entity: Counter, out: TextIO) -> None:
    entity.count(-1)
    print(f"counter = {entity.value}", file=out)


class CounterState(ABC):
    """Base of all counter states; each concrete state exists only once."""

    name = "counterState"
    _instances: dict[type, CounterState] = {}

    def __new__(cls) -> CounterState:
        instance = CounterState._instances.get(cls)
        if instance is None:
            instance = super().__new__(cls)
            CounterState._instances[cls] = instance
        return instance

    @classmethod
    def init(cls, entity: Counter, out: TextIO | None = None) -> CounterState:
        """Return the initial state after running its entry action."""
        out = sys.stdout if out is None else out
        initial = IdleState()
        initial.entry_action(entity, out)
        return initial

    @abstractmethod
    def handle(
        self, entity: Counter, event: CounterEvent, out: TextIO | None = None
    ) -> CounterState:
        """React to ``event`` and return the next state."""

    def entry_action(self, entity: Counter, out: TextIO | None = None) -> None:
        """Run when the state is entered."""

    def exit_action(self, entity: Counter, out: TextIO | None = None) -> None:
        """Run when the state is left."""

    def change_state(
        self,
        entity: Counter,
        action: Optional[Action],
        new_state: CounterState,
        out: TextIO | None = None,
    ) -> CounterState:
        """Leave this state, run ``action`` if given, enter ``new_state`` and return it."""
        out = sys.stdout if out is None else out
        self.exit_action(entity, out)
        if action is not None:
            action(entity, out)
        new_state.entry_action(entity, out)
        return new_state


class _NamedState(CounterState):
    """A state announcing when it is entered and left."""

    def entry_action(self, entity: Counter, out: TextIO | None = None) -> None:
        out = sys.stdout if out is None else out
        print(f"Entering {self.name}", file=out)

    def exit_action(self, entity: Counter, out: TextIO | None = None) -> None:
        out = sys.stdout if out is None else out
        print(f"Exiting from {self.name}", file=out)


class IdleState(_NamedState):
    """Not counting; waits for a direction."""

    name = "idleState"

    def handle(
        self, entity: Counter, event: CounterEvent, out: TextIO | None = None
    ) -> CounterState:
        out = sys.stdout if out is None else out
        print(f"State: {self.name}", file=out)
        if event is CounterEvent.UP:
            return self.change_state(entity, _show_counter, CountUpState(), out)
        if event is CounterEvent.DOWN:
            return self.change_state(entity, _show_counter, CountDownState(), out)
        return self


class CountUpState(_NamedState):
    """Counts up by one on every count event."""

    name = "countUpState"

    def handle(
        self, entity: Counter, event: CounterEvent, out: TextIO | None = None
    ) -> CounterState:
        out = sys.stdout if out is None else out
        print(f"State: {self.name}", file=out)
        if event is CounterEvent.COUNT:
            return self.change_state(entity, _count_up, CountUpState(), out)
        if event is CounterEvent.STOP:
            return self.change_state(entity, None, IdleState(), out)
        return self


class CountDownState(_NamedState):
    """Counts down by one on every count event."""

    name = "countDownState"

    def handle(
        self, entity: Counter, event: CounterEvent, out: TextIO | None = None
    ) -> CounterState:
        out = sys.stdout if out is None else out
        print(f"State: {self.name}", file=out)
        if event is CounterEvent.COUNT:
            return self.change_state(entity, _count_down, CountDownState(), out)
        if event is CounterEvent.STOP:
            return self.change_state(entity, None, IdleState(), out)
        return self


class StatePatternCounterCtrl:
    """Context of the State pattern: delegates every event to the current state."""

    def __init__(self, init_value: int = 0, out: TextIO | None = None) -> None:
        self.out = sys.stdout if out is None else out
        self.counter = Counter(init_value)
        self.state: CounterState = CounterState.init(self.counter, self.out)

    def process(self, event: CounterEvent) -> None:
        """Let the current state handle ``event`` and switch to the state it returns."""
        self.state = self.state.handle(self.counter, event, self.out)