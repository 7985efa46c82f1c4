"""Interactive signal generator driving a callback server."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from embpatterns.callback import CallbackError, CallbackServer, Event

_RULE = "------------------------------"
_MENU = (
    f"{_RULE}\n"
    "\nChoose event to be signalled\n"
    "    (1)     Event 1\n"
    "    (2)     Event 2\n"
    "    (3)     Event 3\n"
    "\n    (0)     Exit\n"
    "\n\nYour choice: "
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def generate_signals(
    server: CallbackServer, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Ask for events to signal on ``server`` until 0 is chosen or input ends."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)
    while True:
        stdout.write(_MENU)
        stdout.flush()
        token = next(tokens, None)
        stdout.write(f"\n{_RULE}\n")
        if token is None:
            return
        try:
            answer = int(token)
        except ValueError:
            continue
        if answer == 0:
            return
        if answer in (1, 2, 3):
            server.signal(Event(answer))


def _client(name: str, out: TextIO):
    def callback(event: int) -> None:
        print(f"{name}() called. Event# = {event}.", file=out)

    return callback


def _try_register(server: CallbackServer, event: Event, func) -> int | None:
    try:
        return server.register(event, func)
    except CallbackError:
        return None


def _report_failures(ids: list[int | None], out: TextIO) -> None:
    for index, cb_id in enumerate(ids):
        if cb_id is None:
            print(f"fId[{index}] failed to register", file=out)


def main(argv: list[str] | None = None) -> int:
    """Register sample clients, signal events interactively, then rearrange them."""
    out = sys.stdout
    server = CallbackServer()
    f1, f2, f3, f4, f5 = (_client(f"f{n}", out) for n in range(1, 6))

    ids: list[int | None] = [0] * 8
    ids[0] = _try_register(server, Event.EV1, f1)
    ids[1] = _try_register(server, Event.EV1, f2)
    ids[2] = _try_register(server, Event.EV1, f3)
    ids[3] = _try_register(server, Event.EV2, f4)
    ids[4] = _try_register(server, Event.EV2, f2)
    ids[5] = _try_register(server, Event.EV3, f5)
    _report_failures(ids, out)

    generate_signals(server, sys.stdin, out)

    try:
        if ids[0] is None:
            raise CallbackError("f1 was never registered")
        server.unregister(Event.EV1, ids[0])
        print("f1 successfully unregistered from foo_ev1", file=out)
    except CallbackError:
        print("failed to unregister f1 from foo_ev1", file=out)

    try:
        server.unregister(Event.EV1, 27)
        print("xy successfully unregistered from qr", file=out)
    except CallbackError:
        print("failed to unregister (unknown id)", file=out)

    print("try to register f4 on foo_ev2 at fId[6]", file=out)
    ids[6] = _try_register(server, Event.EV2, f4)
    _report_failures(ids, out)

    generate_signals(server, sys.stdin, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())