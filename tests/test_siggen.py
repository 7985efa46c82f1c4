import io

from embpatterns.callback import CallbackServer, Event
from embpatterns.siggen import generate_signals, main


def _server_with_recorder():
    calls = []
    server = CallbackServer()
    for event in Event:
        server.register(event, calls.append)
    return server, calls


def test_generate_signals_dispatches_until_zero():
    server, calls = _server_with_recorder()
    out = io.StringIO()
    generate_signals(server, io.StringIO("1\n3\n2\n0\n1\n"), out)
    assert calls == [1, 3, 2]
    assert out.getvalue().count("Choose event to be signalled") == 4


def test_generate_signals_stops_at_end_of_input():
    server, calls = _server_with_recorder()
    out = io.StringIO()
    generate_signals(server, io.StringIO("2\n"), out)
    assert calls == [2]
    assert out.getvalue().count("Your choice: ") == 2


def test_generate_signals_ignores_invalid_choices():
    server, calls = _server_with_recorder()
    generate_signals(server, io.StringIO("x 7 3 0"), io.StringIO())
    assert calls == [3]


def test_main_runs_full_scenario(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n1\n0\n"))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert text.count("f1() called. Event# = 1.") == 1
    assert "f1 successfully unregistered from foo_ev1" in text
    assert "failed to unregister (unknown id)" in text
    assert "fId[6] failed to register" in text
    assert "fId[7] failed to register" not in text
    assert text.index("f1 successfully unregistered") < text.index("try to register f4")