"""Interactive driver for the up/down counter state machines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Protocol, TextIO

from embpatterns.counter import CounterEvent
from embpatterns.fsm_procedural import ProceduralCounterCtrl
from embpatterns.fsm_state import StatePatternCounterCtrl
from embpatterns.fsm_table import TableCounterCtrl

_MENU = (
    "\n-------------------------------------------\n"
    "    u   Count up\n"
    "    d   Count down\n"
    "    c   Count\n"
    "    s   Stop counting\n"
    "    q   Quit\n"
    "\nPlease press key: "
)

_KEYS = {
    "u": CounterEvent.UP,
    "d": CounterEvent.DOWN,
    "c": CounterEvent.COUNT,
    "s": CounterEvent.STOP,
}

_IMPLEMENTATIONS = {
    "procedural": ProceduralCounterCtrl,
    "table": TableCounterCtrl,
    "state": StatePatternCounterCtrl,
}


class _Controller(Protocol):
    def process(self, event: CounterEvent) -> None: ...


def _keys(stream: TextIO) -> Iterator[str]:
    for line in stream:
        for char in line:
            if not char.isspace():
                yield char


def run(ctrl: _Controller, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read keys and feed the matching events to ``ctrl`` until 'q' or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    keys = _keys(stdin)
    while True:
        stdout.write(_MENU)
        stdout.flush()
        key = next(keys, None)
        stdout.write("\n")
        if key is None or key == "q":
            return
        event = _KEYS.get(key)
        if event is not None:
            ctrl.process(event)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive counter with the chosen state machine implementation."""
    parser = argparse.ArgumentParser(description="Up/down counter state machine.")
    parser.add_argument(
        "--impl", choices=sorted(_IMPLEMENTATIONS), default="procedural",
        help="state machine implementation to use",
    )
    parser.add_argument("--init", type=int, default=0, help="initial counter value")
    args = parser.parse_args(argv)
    ctrl = _IMPLEMENTATIONS[args.impl](args.init, sys.stdout)
    run(ctrl, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())