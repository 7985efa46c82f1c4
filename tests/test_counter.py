import pytest

from embpatterns.counter import Counter


def test_default_value_is_zero():
    assert Counter().value == 0


def test_initial_value_is_kept():
    assert Counter(42).value == 42


@pytest.mark.parametrize("start, step", [(0, 1), (10, -1), (-5, 7), (3, 0)])
def test_count_adds_step(start, step):
    counter = Counter(start)
    counter.count(step)
    assert counter.value == start + step


def test_count_up_then_down_returns_to_start():
    counter = Counter(17)
    for _ in range(5):
        counter.count(1)
    for _ in range(5):
        counter.count(-1)
    assert counter.value == 17


def test_value_can_be_set():
    counter = Counter(1)
    counter.value = 99
    counter.count(1)
    assert counter.value == 99 + 1