import pytest

from mathprog.fibonacci import fib, time_fib


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@pytest.mark.parametrize("n", [-1, -5])
def test_fib_negative_is_zero(n):
    assert fib(n) == 0


@pytest.mark.parametrize("n", range(2, 16))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_known_value():
    assert fib(10) == 55


def test_fib_is_increasing_from_two():
    values = [fib(n) for n in range(2, 20)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_time_fib_covers_range():
    timings = time_fib(5, 10)
    assert [n for n, _ in timings] == list(range(5, 10))
    assert all(seconds >= 0 for _, seconds in timings)


def test_time_fib_empty_range():
    assert time_fib(10, 10) == []