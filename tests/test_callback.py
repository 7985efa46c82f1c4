import pytest

from embpatterns.callback import CallbackError, CallbackServer, Event


def _recorder():
    calls = []

    def make(name):
        def cb(arg):
            calls.append((name, arg))

        return cb

    return calls, make


def test_callbacks_receive_event_numbers():
    server = CallbackServer()
    calls, make = _recorder()
    ids = [server.register(event, make("x")) for event in Event]
    assert ids == [0, 0, 0]
    for event in Event:
        server.signal(event)
    assert calls == [("x", 1), ("x", 2), ("x", 3)]


def test_register_returns_sequential_ids_until_full():
    server = CallbackServer()
    ids = [server.register(Event.EV1, lambda a: None) for _ in range(3)]
    assert ids == [0, 1, 2]
    with pytest.raises(CallbackError):
        server.register(Event.EV1, lambda a: None)


def test_ev2_capacity_is_two():
    server = CallbackServer()
    server.register(Event.EV2, lambda a: None)
    server.register(Event.EV2, lambda a: None)
    with pytest.raises(CallbackError):
        server.register(Event.EV2, lambda a: None)


def test_unregister_frees_slot_for_reuse():
    server = CallbackServer()
    first = server.register(Event.EV3, lambda a: None)
    server.register(Event.EV3, lambda a: None)
    assert server.unregister(Event.EV3, first) == first
    assert server.register(Event.EV3, lambda a: None) == first


@pytest.mark.parametrize("bad_id", [27, -1, 3])
def test_unregister_illegal_id_raises(bad_id):
    server = CallbackServer()
    with pytest.raises(CallbackError):
        server.unregister(Event.EV1, bad_id)


def test_register_unknown_event_raises():
    server = CallbackServer()
    with pytest.raises(CallbackError):
        server.register(99, lambda a: None)
    with pytest.raises(CallbackError):
        server.unregister(99, 0)


def test_signal_calls_clients_in_slot_order_with_event_number():
    server = CallbackServer()
    calls, make = _recorder()
    assert server.register(Event.EV1, make("a")) == 0
    assert server.register(Event.EV1, make("b")) == 1
    assert server.register(Event.EV2, make("c")) == 0
    server.signal(Event.EV1)
    assert calls == [("a", int(Event.EV1)), ("b", int(Event.EV1))]


def test_unregistered_callback_is_not_called():
    server = CallbackServer()
    calls, make = _recorder()
    a_id = server.register(Event.EV1, make("a"))
    assert server.register(Event.EV1, make("b")) == 1
    assert server.unregister(Event.EV1, a_id) == 0
    server.signal(Event.EV1)
    assert calls == [("b", int(Event.EV1))]


def test_same_function_on_two_events():
    server = CallbackServer()
    calls, make = _recorder()
    shared = make("shared")
    assert server.register(Event.EV1, shared) == 0
    assert server.register(Event.EV2, shared) == 0
    server.signal(Event.EV2)
    server.signal(Event.EV1)
    assert calls == [("shared", int(Event.EV2)), ("shared", int(Event.EV1))]


def test_signal_unknown_event_calls_nothing():
    server = CallbackServer()
    calls, make = _recorder()
    assert server.register(Event.EV1, make("a")) == 0
    server.signal(42)
    assert calls == []


def test_custom_capacities():
    server = CallbackServer({Event.EV1: 1})
    assert server.register(Event.EV1, lambda a: None) == 0
    with pytest.raises(CallbackError):
        server.register(Event.EV1, lambda a: None)
    with pytest.raises(CallbackError):
        server.register(Event.EV2, lambda a: None)