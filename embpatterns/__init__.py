"""Event-driven design patterns: callback server, observer, counter state machines, threads."""

__version__ = "0.1.0"
__all__ = [
    "callback",
    "siggen",
    "observer",
    "counter",
    "fsm_procedural",
    "fsm_table",
    "fsm_state",
    "counter_app",
    "threads",
]