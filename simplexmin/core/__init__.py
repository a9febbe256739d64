"""
Ядро: симплекс, кеш значень, метод Нелдера–Міда та движок.
"""

from .cache import EvaluationCache
from .config import DEFAULT_CONFIG, LONG_RUN_CONFIG, SimplexConfig
from .engine import (
    OptimizationEngine,
    OptimizationRunResult,
    minimize,
    minimize_with_order,
    run_minimize,
)
from .iteration_result import IterationResult
from .nelder_mead import NelderMeadMethod, StepResult
from .ordering import Ordering, PredicateOrdering
from .simplex import Simplex

__all__ = [
    "EvaluationCache",
    "DEFAULT_CONFIG",
    "LONG_RUN_CONFIG",
    "SimplexConfig",
    "OptimizationEngine",
    "OptimizationRunResult",
    "minimize",
    "minimize_with_order",
    "run_minimize",
    "IterationResult",
    "NelderMeadMethod",
    "StepResult",
    "Ordering",
    "PredicateOrdering",
    "Simplex",
]
