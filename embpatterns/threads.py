"""Thread demonstrations: joining, mutual exclusion and condition variables."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import TextIO


class SharedResource:
    """A value guarded by its own lock.

    Entering the ``with`` block locks the resource and leaving it unlocks it,
    also when the block raises.
    """

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self._cond = threading.Condition(threading.Lock())

    def __enter__(self) -> SharedResource:
        self._cond.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._cond.release()


def _writer(out: TextIO):
    guard = threading.Lock()

    def say(text: str) -> None:
        with guard:
            out.write(text + "\n")
            out.flush()

    return say


def _check_non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def condvar_demo(
    max_count: int = 10,
    num_incrementers: int = 2,
    count_limit: int = 12,
    delay: float = 1.0,
    out: TextIO | None = None,
) -> int:
    """Let incrementer threads count while a watcher waits for ``count_limit``.

    Each incrementer adds one ``max_count`` times, pausing ``delay`` seconds
    between steps, and signals the watcher when the count equals the limit.
    The watcher then adds 125. If the limit is reached before the watcher
    starts waiting, or is never reached, the watcher adds nothing.
    Returns the final count.
    """
    _check_non_negative(
        max_count=max_count, num_incrementers=num_incrementers, delay=delay
    )
    out = sys.stdout if out is None else out
    say = _writer(out)
    shared = SharedResource(0)
    finished = 0

    def watch_count(my_id: int) -> None:
        say(f"Starting watchCount(): thread {my_id}")
        with shared:
            while shared.value < count_limit:
                if finished == num_incrementers:
                    break
                shared._cond.wait()
                if shared.value < count_limit:
                    continue
                say("watchCount(): condition signal received.")
                shared.value += 125

    def inc_count(my_id: int) -> None:
        nonlocal finished
        say(f"Starting incCount(): thread {my_id}")
        for _ in range(max_count):
            with shared:
                shared.value += 1
                if shared.value == count_limit:
                    shared._cond.notify_all()
            time.sleep(delay)
        with shared:
            finished += 1
            shared._cond.notify_all()

    threads = [threading.Thread(target=watch_count, args=(1,))]
    threads.extend(
        threading.Thread(target=inc_count, args=(my_id,))
        for my_id in range(2, num_incrementers + 2)
    )
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return shared.value


def mutex_demo(
    limit: int = 20,
    num_threads: int = 2,
    seed: int = 17,
    max_delay: float = 0.2,
    out: TextIO | None = None,
) -> int:
    """Let threads raise a shared value to ``limit`` one step at a time.

    Outside the critical section a thread sleeps up to ``max_delay`` seconds,
    inside it up to one and a half times that. Every step prints the new
    value. Returns the final value.
    """
    _check_non_negative(limit=limit, num_threads=num_threads, max_delay=max_delay)
    out = sys.stdout if out is None else out
    say = _writer(out)
    shared = SharedResource(0)

    def routine() -> None:
        rng = random.Random(seed)
        while True:
            time.sleep(rng.random() * max_delay)
            with shared:
                if shared.value >= limit:
                    break
                time.sleep(rng.random() * max_delay * 1.5)
                shared.value += 1
                say(f"val = {shared.value:2d}")

    threads = [threading.Thread(target=routine) for _ in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return shared.value


def print_dashes(count: int = 20, delay: float = 0.04, out: TextIO | None = None) -> None:
    """Write ``count`` dashes unbuffered, one every ``delay`` seconds."""
    _check_non_negative(count=count, delay=delay)
    out = sys.stdout if out is None else out
    for _ in range(count):
        time.sleep(delay)
        out.write("-")
        out.flush()


def join_demo(count: int = 20, delay: float = 0.04, out: TextIO | None = None) -> None:
    """Print "start", wait for a thread printing dashes, then print "end"."""
    _check_non_negative(count=count, delay=delay)
    out = sys.stdout if out is None else out
    out.write("start")
    out.flush()
    dasher = threading.Thread(target=print_dashes, args=(count, delay, out))
    dasher.start()
    dasher.join()
    out.write("end\n")
    out.flush()


def main(argv: list[str] | None = None) -> int:
    """Run one of the thread demonstrations."""
    parser = argparse.ArgumentParser(description="Thread demonstrations.")
    parser.add_argument(
        "demo", nargs="?", choices=("join", "mutex", "condvar"), default="join",
        help="demonstration to run",
    )
    args = parser.parse_args(argv)
    if args.demo == "join":
        join_demo(out=sys.stdout)
    elif args.demo == "mutex":
        mutex_demo(out=sys.stdout)
    else:
        condvar_demo(out=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())