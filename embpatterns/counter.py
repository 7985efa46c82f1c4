"""Up/down counter and the events and modes used by the counter state machines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CounterEvent(Enum):
    """Events that drive a counter state machine."""

    UP = "up"
    DOWN = "down"
    COUNT = "count"
    STOP = "stop"


class CounterMode(Enum):
    """States of a counter state machine."""

    IDLE = "idleState"
    COUNT_UP = "countUpState"
    COUNT_DOWN = "countDownState"


@dataclass
class Counter:
    """An integer counter that moves by a signed step."""

    value: int = 0

    def count(self, step: int) -> None:
        """Count up (``step`` > 0) or down (``step`` < 0) by ``step``."""
        self.value += step