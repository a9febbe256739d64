"""
benchmark.py

Прогін методу Нелдера–Міда на тестових функціях з реєстру FUNCTIONS
по сітці початкових точок.

Результат - ResultsSummary з одним BenchmarkRun на кожну пару
(функція, початкова точка).
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .cache import EvaluationCache
from .config import SimplexConfig
from .engine import OptimizationRunResult, run_minimize
from .functions import FUNCTIONS, ArrayLike
from .results_summary import ResultsSummary

logger = logging.getLogger(__name__)

# Сітка початкових точок для задач у R²
DEFAULT_GRID_X: Sequence[float] = (-100.0, -2.1, -2.0, -1.0, 0.0, 1.0, 2.0, 50.0, 200.0)
DEFAULT_GRID_Y: Sequence[float] = (-200.0, -2.0, -1.0, 0.0, 1.0, 2.0, 5.0, 100.0)


@dataclass
class BenchmarkRun:
    """
    Один запуск бенчмарку.

    Атрибути:
        function_key - ключ функції у FUNCTIONS
        x0           - початкова точка
        f_star       - f у знайденій точці
        f_min        - відомий мінімум функції
        run          - повний OptimizationRunResult
    """
    function_key: str
    x0: np.ndarray
    f_star: float
    f_min: float
    run: OptimizationRunResult


def grid_starts(
    xs: Sequence[float] = DEFAULT_GRID_X,
    ys: Sequence[float] = DEFAULT_GRID_Y,
) -> List[np.ndarray]:
    """Усі початкові точки (x, y) декартового добутку xs × ys."""
    return [np.array([x, y], dtype=float) for x, y in itertools.product(xs, ys)]


def run_benchmark(
    keys: Optional[Iterable[str]] = None,
    starts: Optional[Iterable[ArrayLike]] = None,
    epsilon: float = 0.1,
    config: Optional[SimplexConfig] = None,
) -> ResultsSummary:
    """
    Запустити мінімізацію кожної функції з кожної початкової точки.

    Функції з фіксованою розмірністю пропускають точки іншої розмірності.
    """
    keys = list(keys) if keys is not None else list(FUNCTIONS)
    starts = [np.asarray(x0, dtype=float) for x0 in (starts if starts is not None else grid_starts())]

    summary = ResultsSummary()
    for key in keys:
        target = FUNCTIONS[key]
        for x0 in starts:
            if target.dim is not None and x0.size != target.dim:
                continue
            run = run_minimize(EvaluationCache(target.func), x0, epsilon, config)
            f_star = float(target.func(run.x_star))
            summary.add_run(
                BenchmarkRun(
                    function_key=key,
                    x0=x0,
                    f_star=f_star,
                    f_min=target.f_min,
                    run=run,
                )
            )

    logger.info("benchmark: %d runs, %d failures", len(summary), len(summary.failures()))
    return summary


__all__ = [
    "DEFAULT_GRID_X",
    "DEFAULT_GRID_Y",
    "BenchmarkRun",
    "grid_starts",
    "run_benchmark",
]
