"""Callback server: clients register functions on events and are called when they occur."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import IntEnum

Callback = Callable[[int], None]


class Event(IntEnum):
    """Events a client can register callbacks on."""

    EV1 = 1
    EV2 = 2
    EV3 = 3


class CallbackError(Exception):
    """Raised when a callback cannot be registered or unregistered."""


DEFAULT_CAPACITIES: Mapping[Event, int] = {Event.EV1: 3, Event.EV2: 2, Event.EV3: 2}


class CallbackServer:
    """Holds a fixed-size table of callbacks per event."""

    def __init__(self, capacities: Mapping[Event, int] | None = None) -> None:
        if capacities is None:
            capacities = DEFAULT_CAPACITIES
        self._clients: dict[Event, list[Callback | None]] = {
            Event(event): [None] * size for event, size in capacities.items()
        }

    def _slots(self, event: Event | int) -> list[Callback | None] | None:
        try:
            return self._clients.get(Event(event))
        except ValueError:
            return None

    def register(self, event: Event | int, func: Callback) -> int:
        """Register ``func`` on ``event`` and return its id."""
        slots = self._slots(event)
        if slots is None:
            raise CallbackError(f"unknown event: {event!r}")
        for cb_id, entry in enumerate(slots):
            if entry is None:
                slots[cb_id] = func
                return cb_id
        raise CallbackError(f"number of registered functions exceeded for {event!r}")

    def unregister(self, event: Event | int, cb_id: int) -> int:
        """Remove the callback with id ``cb_id`` from ``event`` and return the id."""
        slots = self._slots(event)
        if slots is None:
            raise CallbackError(f"unknown event: {event!r}")
        if not 0 <= cb_id < len(slots):
            raise CallbackError(f"illegal id {cb_id} for {event!r}")
        slots[cb_id] = None
        return cb_id

    def signal(self, event: Event | int) -> None:
        """Call every callback registered on ``event`` with the event number."""
        slots = self._slots(event)
        if slots is None:
            return
        number = int(event)
        for func in list(slots):
            if func is not None:
                func(number)