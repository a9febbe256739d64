"""Unit tests for the memoizing evaluation cache."""

import numpy as np
import pytest

from simplexmin.core.cache import EvaluationCache
from simplexmin.core.ordering import Ordering


class CountingFunction:
    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, x):
        self.calls.append(np.array(x, copy=True))
        return self.func(x)


@pytest.fixture
def counted():
    return CountingFunction(lambda x: float(np.sum(np.asarray(x) ** 2)))


def test_cache_is_an_ordering():
    assert isinstance(EvaluationCache(lambda x: 0.0), Ordering)


def test_storage_is_allocated_lazily(counted):
    cache = EvaluationCache(counted)
    assert cache.entries is None
    assert cache.size == 0

    cache.get(np.array([1.0, 2.0]))

    assert cache.capacity == 6  # n + 4
    assert cache.entries.shape == (6, 3)
    assert cache.size == 1


def test_repeat_query_is_served_from_cache(counted):
    cache = EvaluationCache(counted)

    first = cache.get(np.array([1.0, 2.0]))
    second = cache.get(np.array([1.0, 2.0]))

    assert first == second == 5.0
    assert len(counted.calls) == 1
    assert cache.func_evals == 1
    assert cache.hits == 1


def test_any_differing_coordinate_is_evaluated_again(counted):
    cache = EvaluationCache(counted)

    cache.get(np.array([1.0, 2.0]))
    value = cache.get(np.array([1.0, 2.0 + 1e-15]))

    assert value == counted.func(np.array([1.0, 2.0 + 1e-15]))
    assert len(counted.calls) == 2


def test_lookup_uses_exact_equality():
    counted = CountingFunction(lambda x: 1.0)
    cache = EvaluationCache(counted)

    cache.get(np.array([0.1 + 0.2]))
    cache.get(np.array([0.3]))

    assert len(counted.calls) == 2


def test_unwritten_entries_are_not_a_cached_zero():
    counted = CountingFunction(lambda x: 42.0)
    cache = EvaluationCache(counted)

    assert cache.get(np.array([0.0, 0.0])) == 42.0
    assert len(counted.calls) == 1


def test_least_recently_used_entry_is_evicted(counted):
    cache = EvaluationCache(counted)  # n = 1 -> capacity 5

    for v in range(6):
        cache.get(np.array([float(v)]))
    assert len(counted.calls) == 6

    # most recent entries are still cached
    cache.get(np.array([5.0]))
    cache.get(np.array([1.0]))
    assert len(counted.calls) == 6

    # the first point was pushed out by the sixth distinct query
    cache.get(np.array([0.0]))
    assert len(counted.calls) == 7


def test_hit_promotes_entry_to_front(counted):
    cache = EvaluationCache(counted, capacity=3)

    for v in (0.0, 1.0, 2.0):
        cache.get(np.array([v]))
    cache.get(np.array([0.0]))  # hit: 0 becomes most recent, 1 is now oldest
    assert cache.entries[0, 0] == 0.0

    cache.get(np.array([3.0]))  # evicts 1
    assert len(counted.calls) == 4

    cache.get(np.array([0.0]))
    assert len(counted.calls) == 4
    cache.get(np.array([1.0]))
    assert len(counted.calls) == 5


def test_cached_point_is_a_copy_of_the_query(counted):
    cache = EvaluationCache(counted)
    x = np.array([1.0, 2.0])

    cache.get(x)
    x[0] = 10.0
    cache.get(np.array([1.0, 2.0]))

    assert len(counted.calls) == 1


def test_less_compares_function_values(counted):
    cache = EvaluationCache(counted)
    a = np.array([1.0, 0.0])
    b = np.array([2.0, 0.0])

    assert cache.less(a, b)
    assert not cache.less(b, a)
    assert not cache.less(a, a)
    assert len(counted.calls) == 2


def test_objective_errors_propagate():
    def broken(x):
        raise ValueError("undefined")

    cache = EvaluationCache(broken)
    with pytest.raises(ValueError, match="undefined"):
        cache.get(np.array([1.0]))


@pytest.mark.parametrize("capacity", [0, -3])
def test_capacity_must_be_positive(capacity):
    with pytest.raises(ValueError, match="capacity"):
        EvaluationCache(lambda x: 0.0, capacity=capacity)


def test_reset_forgets_entries_and_counters(counted):
    cache = EvaluationCache(counted)
    cache.get(np.array([1.0, 2.0]))
    cache.get(np.array([1.0, 2.0]))

    cache.reset()

    assert cache.entries is None
    assert cache.capacity is None
    assert (cache.func_evals, cache.hits, cache.size) == (0, 0, 0)

    cache.get(np.array([1.0, 2.0, 3.0]))
    assert cache.entries.shape == (7, 4)
    assert len(counted.calls) == 2


def test_reset_keeps_explicit_capacity(counted):
    cache = EvaluationCache(counted, capacity=3)
    cache.get(np.array([1.0]))

    cache.reset()
    cache.get(np.array([1.0, 2.0]))

    assert cache.capacity == 3
    assert cache.entries.shape == (3, 3)
