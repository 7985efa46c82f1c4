# embpatterns

Small, self-contained implementations of patterns that come up again and again
in event-driven embedded software. Each one is a working component you can use
or study on its own. No third-party packages are needed.

## Components

- **Callback server** (`embpatterns.callback`): `CallbackServer` keeps a
  fixed-size table of callbacks for each `Event` (`EV1`, `EV2`, `EV3`). By
  default the tables hold 3, 2 and 2 callbacks; pass a mapping of event to
  size as `capacities` to change that. `register(event, func)` puts `func` in
  the first free slot and returns its slot id, `unregister(event, cb_id)`
  frees a slot and returns the id, and `signal(event)` calls every registered
  callback with the event number, in slot order. A full table, an unknown
  event or an id outside the table raises `CallbackError`; signalling an
  unknown event does nothing.
- **Signal generator** (`embpatterns.siggen`): `generate_signals(server,
  stdin, stdout)` shows a menu, reads event numbers from `stdin` and signals
  events 1 to 3 on the server. It stops at `0` or at the end of input; other
  numbers and non-numeric input are ignored.
- **Observer** (`embpatterns.observer`): a `Subject` with a bounded number of
  `Observer` slots (4 by default), notified in slot order by `notify()`. A
  `StateSubject` has a `state` property; assigning a new value notifies its
  observers, and a negative value raises `ValueError`. A `PrintingObserver`
  attaches itself when created, records each state it sees in `views`, prints
  `Observer1 view: <state>`, and detaches on `close()` or at the end of a
  `with` block. Attaching to a full subject or detaching an observer that is
  not attached raises `ObserverError`.
- **Up/down counter** (`embpatterns.counter`): a `Counter` dataclass with a
  `value` and `count(step)`, plus the `CounterEvent` (`UP`, `DOWN`, `COUNT`,
  `STOP`) and `CounterMode` (`IDLE`, `COUNT_UP`, `COUNT_DOWN`) enumerations
  shared by the state machines below.
- **Three ways to write the same state machine**, each starting idle, moving
  to counting up or down on `UP`/`DOWN`, counting by one on `COUNT` and
  returning to idle on `STOP`:
  - `ProceduralCounterCtrl` (`embpatterns.fsm_procedural`): a plain branch
    on the current state.
  - `TableCounterCtrl` (`embpatterns.fsm_table`): a generic engine that runs
    the first matching `Transition` row of a table. A row's trigger is either
    a `CounterEvent` or a checker function called with the controller and the
    event; its action may be `None`. Pass your own rows as `transitions`.
  - `StatePatternCounterCtrl` (`embpatterns.fsm_state`): one shared object
    per state (`IdleState`, `CountUpState`, `CountDownState`), derived from
    `CounterState`, with entry, exit and transition actions run by
    `change_state`.
- **Thread coordination** (`embpatterns.threads`): `SharedResource`, a value
  guarded by a lock that is held for the length of a `with` block, and
  demonstrations returning their final count: `condvar_demo` (incrementing
  threads wake a watcher through a condition variable when the count reaches
  a limit; the watcher then adds 125), `mutex_demo` (threads raise a shared
  value to a limit one step at a time, with seeded random pauses), and
  `join_demo` with `print_dashes` (a worker thread prints dashes while the
  caller waits for it).

All state machines take events through `process(event)` and write their trace
to the stream given as `out` (standard output by default), so they can be
driven from tests or other code as easily as from the keyboard.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line programs

```
embpatterns-callbacks
```

Registers sample callbacks on the three events and reports any that failed to
register, then shows the signal menu; `0` or the end of input leaves it. One
callback is then unregistered, unregistering an unknown id is tried and
reported as failing, an over-full registration on event 2 is attempted and
reported, and the menu is shown again.

```
embpatterns-observer
```

Attaches a printing observer to a subject and sets the subject's state to 23
and then 87; each change is printed by the observer.

```
embpatterns-counter [--impl {procedural,state,table}] [--init N]
```

Drives the up/down counter from the keyboard: `u` count up, `d` count down,
`c` count, `s` stop counting, `q` quit. `--impl` chooses the state machine
implementation (default `procedural`) and `--init` the initial counter value
(default 0).

```
embpatterns-threads [{join,mutex,condvar}]
```

Runs one thread demonstration with its default settings: `join` (the default)
prints dashes from a worker thread between `start` and `end`, `mutex` has two
threads raise a shared counter to 20, and `condvar` has two incrementing
threads wake a watcher through a condition variable.

## What is not included

The package does not talk to hardware: there are no register, port, pin, LED
or switch drivers. Events are signalled from code or from the menu of
`embpatterns-callbacks`, not from devices.