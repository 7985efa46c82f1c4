"""Observer pattern: subjects notify a bounded set of attached observers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


class Observer(ABC):
    """Something that reacts when a subject it watches changes."""

    @abstractmethod
    def update(self) -> None:
        """React to a change of the observed subject."""


class ObserverError(Exception):
    """Raised when an observer cannot be attached or detached."""


class Subject:
    """Keeps a fixed number of observer slots and notifies them in slot order."""

    def __init__(self, size: int = 4) -> None:
        self._observers: list[Observer | None] = [None] * size

    def attach(self, observer: Observer) -> None:
        """Attach ``observer`` in the first free slot."""
        for index, entry in enumerate(self._observers):
            if entry is None:
                self._observers[index] = observer
                return
        raise ObserverError("number of observers exceeded")

    def detach(self, observer: Observer) -> None:
        """Detach ``observer``; it must currently be attached."""
        for index, entry in enumerate(self._observers):
            if entry is observer:
                self._observers[index] = None
                return
        raise ObserverError("observer is not attached")

    def notify(self) -> None:
        """Call ``update`` on every attached observer."""
        for observer in list(self._observers):
            if observer is not None:
                observer.update()


class StateSubject(Subject):
    """A subject holding an unsigned state; setting it notifies observers."""

    def __init__(self, size: int = 4) -> None:
        super().__init__(size)
        self._state = 0

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, new_state: int) -> None:
        if new_state < 0:
            raise ValueError("state must not be negative")
        self._state = new_state
        self.notify()


class PrintingObserver(Observer):
    """Attaches to a state subject, records and prints its state on every update."""

    def __init__(self, subject: StateSubject, out: TextIO | None = None) -> None:
        self._subject = subject
        self._out = sys.stdout if out is None else out
        self.views: list[int] = []
        subject.attach(self)
        self._attached = True

    def update(self) -> None:
        """Record the subject's current state and print it."""
        state = self._subject.state
        self.views.append(state)
        print(f"Observer1 view: {state}", file=self._out)

    def close(self) -> None:
        """Detach from the subject; further calls do nothing."""
        if self._attached:
            self._subject.detach(self)
            self._attached = False

    def __enter__(self) -> PrintingObserver:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Show an observer reacting to two state changes."""
    subject = StateSubject()
    with PrintingObserver(subject, sys.stdout):
        subject.state = 23
        subject.state = 87
    return 0


if __name__ == "__main__":
    sys.exit(main())