"""Tests for single Nelder-Mead iterations and the ordering invariant."""

import numpy as np
import pytest

from simplexmin.core.cache import EvaluationCache
from simplexmin.core.functions import quadratic, rosenbrock, zero
from simplexmin.core.nelder_mead import (
    CHI,
    GAMMA,
    RHO,
    SIGMA,
    STEP_CONTRACTION_INSIDE,
    STEP_CONTRACTION_OUTSIDE,
    STEP_EXPANSION,
    STEP_REFLECTION,
    STEP_REFLECTION_BEST,
    STEP_SHRINK,
    NelderMeadMethod,
)
from simplexmin.core.ordering import PredicateOrdering


def _method(func):
    return NelderMeadMethod(PredicateOrdering(lambda x, y: func(x) < func(y)))


def _vertices(method):
    n = method.simplex.n
    return method.simplex.X[: n + 1].tolist()


def test_parameters_match_standard_method():
    assert (RHO, CHI, GAMMA, SIGMA) == (1.0, 2.0, 0.5, 0.5)


def test_reflection_is_inserted_between_best_and_worst():
    def f(x):
        return (x[0] - 2.0) ** 2 + (x[1] - 0.4) ** 2

    method = _method(f)
    method.initialize([0.0, 0.0], 1.0)
    assert _vertices(method) == [[1.0, 0.0], [0.0, 0.0], [0.0, 1.0]]

    res = method.step()

    # centroid [0.5, 0], reflected worst [1, -1] ranks between the other two
    assert res.step_type == STEP_REFLECTION
    assert res.position == 1
    assert _vertices(method) == [[1.0, 0.0], [1.0, -1.0], [0.0, 0.0]]


def test_expansion_replaces_best():
    method = _method(quadratic)
    method.initialize([5.0], -1.0)
    assert _vertices(method) == [[4.0], [5.0]]

    res = method.step()

    # reflected [3] beats the best, expanded [2] beats the reflection
    assert res.step_type == STEP_EXPANSION
    assert res.position == 0
    assert _vertices(method) == [[2.0], [4.0]]


def test_reflection_kept_when_expansion_is_worse():
    def f(x):
        return (x[0] - 3.0) ** 2

    method = _method(f)
    method.initialize([5.0], -1.0)

    res = method.step()

    # reflected [3] is optimal, expanded [2] is worse
    assert res.step_type == STEP_REFLECTION_BEST
    assert _vertices(method) == [[3.0], [4.0]]


def test_outside_contraction():
    method = _method(quadratic)
    method.initialize([1.0], 2.0)
    assert _vertices(method) == [[1.0], [3.0]]

    res = method.step()

    # reflected [-1] ties the best and beats the worst: contract towards it
    assert res.step_type == STEP_CONTRACTION_OUTSIDE
    assert _vertices(method) == [[0.0], [1.0]]


def test_inside_contraction():
    method = _method(quadratic)
    method.initialize([1.0], -2.0)
    assert _vertices(method) == [[1.0], [-1.0]]

    res = method.step()

    # reflected [3] is worse than the worst: contract between centroid and worst
    assert res.step_type == STEP_CONTRACTION_INSIDE
    assert res.position == 0
    assert _vertices(method) == [[0.0], [1.0]]


def test_shrink_when_nothing_improves():
    method = _method(zero)
    method.initialize([1.0, 2.0], 0.5)

    res = method.step()

    assert res.step_type == STEP_SHRINK
    assert res.position == -1
    assert res.shrink_count == 1
    assert _vertices(method) == [[1.0, 2.0], [1.25, 2.0], [1.0, 2.25]]


@pytest.mark.parametrize(
    "target, expected_step",
    [(4.0, STEP_EXPANSION), (4.5, STEP_REFLECTION_BEST)],
)
def test_shrink_counter_resets_on_new_best(target, expected_step):
    method = _method(zero)
    method.initialize([5.0], -1.0)
    method.step()
    method.step()
    assert method.shrink_count == 2
    assert _vertices(method) == [[5.0], [4.75]]

    def f(x):
        return (x[0] - target) ** 2

    method.ordering = PredicateOrdering(lambda x, y: f(x) < f(y))
    method.simplex.ordering = method.ordering
    method.simplex.sort()

    # reflected [4.5] beats the best [4.75], expanded point is [4.25]
    res = method.step()

    assert res.step_type == expected_step
    assert res.shrink_count == 0
    assert method.shrink_count == 0


def test_vertices_stay_sorted_after_every_move():
    cache = EvaluationCache(rosenbrock)
    method = NelderMeadMethod(cache)
    method.initialize([-2.0, 2.0], 0.1)
    seen = set()

    for _ in range(500):
        res = method.step()
        seen.add(res.step_type)
        assert method.simplex.is_sorted(), res.step_type

    assert STEP_REFLECTION in seen
    assert STEP_EXPANSION in seen
    assert seen & {STEP_CONTRACTION_INSIDE, STEP_CONTRACTION_OUTSIDE}


def test_vertices_stay_sorted_after_shrink():
    def f(x):
        # flat except at the origin, so shrinking is the only move that fires
        return 0.0 if np.any(x) else -1.0

    method = _method(f)
    method.initialize([0.0, 0.0], 1.0)
    res = method.step()

    assert res.step_type == STEP_SHRINK
    assert method.simplex.is_sorted()
    assert _vertices(method)[0] == [0.0, 0.0]


def test_iteration_counter_and_best_copy():
    method = _method(quadratic)
    method.initialize(np.array([3.0, -1.0]), 0.1)

    for _ in range(5):
        method.step()

    assert method.iteration == 5
    best = method.best()
    best[:] = 0.0
    assert method.simplex.X[0].tolist() != [0.0, 0.0]
