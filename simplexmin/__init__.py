"""
simplexmin

Мінімізація без похідних методом Нелдера–Міда (варіант Лагаріаса–Рідса–
Райта–Райта) з інкрементною вставкою вершин і кешем значень f.

    from simplexmin import minimize
    x = minimize(f, [-2.0, 2.0], 0.1)
"""

from .core import (
    DEFAULT_CONFIG,
    LONG_RUN_CONFIG,
    EvaluationCache,
    OptimizationRunResult,
    Ordering,
    PredicateOrdering,
    SimplexConfig,
    minimize,
    minimize_with_order,
    run_minimize,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "LONG_RUN_CONFIG",
    "EvaluationCache",
    "OptimizationRunResult",
    "Ordering",
    "PredicateOrdering",
    "SimplexConfig",
    "minimize",
    "minimize_with_order",
    "run_minimize",
]
