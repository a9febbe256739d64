"""
engine.py

Ітераційний двигун для методу Нелдера–Міда та публічні точки входу.

Функціонал:
    - виконує цикл step() для NelderMeadMethod;
    - фіксує причину зупинки ("max_iter" або "stagnation");
    - за потреби формує трасу ітерацій (для таблиць і графіків);
    - підтримує callback для логів / візуалізації на кожній ітерації.

Точки входу:
    minimize(objective, start, epsilon)         - f(x) з кешем значень;
    minimize_with_order(less, start, epsilon)   - довільний порядок less(x, y);
    run_minimize(ordering, start, epsilon)      - повний OptimizationRunResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .cache import EvaluationCache
from .config import DEFAULT_CONFIG, SimplexConfig
from .functions import ArrayLike, LessPredicate, ScalarFunction
from .iteration_result import IterationResult
from .nelder_mead import STEP_SHRINK, NelderMeadMethod
from .ordering import Ordering, PredicateOrdering

logger = logging.getLogger(__name__)

STOPPED_BY_MAX_ITER = "max_iter"
STOPPED_BY_STAGNATION = "stagnation"


@dataclass
class OptimizationRunResult:
    """
    Підсумок одного запуску.

    Атрибути:
        method_name - назва методу
        x_star      - знайдена точка (копія найкращої вершини)
        n_iter      - кількість виконаних ітерацій
        n_shrink    - скільки разів симплекс стягувався
        stopped_by  - причина зупинки ("max_iter", "stagnation")
        iterations  - траса (порожня, якщо не запитувалась)
        func_evals  - кількість викликів f (None для порядку без f)
        cache_hits  - кількість влучень у кеш (None без кешу)
    """
    method_name: str
    x_star: np.ndarray
    n_iter: int
    n_shrink: int
    stopped_by: str
    iterations: List[IterationResult] = field(default_factory=list)
    func_evals: Optional[int] = None
    cache_hits: Optional[int] = None


# Тип callback'а для логів / графіків
IterationCallback = Callable[[IterationResult], None]


class OptimizationEngine:
    """
    Движок, який керує ітераційним процесом для NelderMeadMethod.

    Налаштування за замовчуванням беруться з config (DEFAULT_CONFIG,
    якщо не задано) і можуть бути переозначені у run().
    """

    def __init__(self, config: Optional[SimplexConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def run(
        self,
        method: NelderMeadMethod,
        x0: ArrayLike,
        epsilon: float,
        max_iter: Optional[int] = None,
        max_shrink: Optional[int] = None,
        callback: Optional[IterationCallback] = None,
        keep_trace: bool = False,
    ) -> OptimizationRunResult:
        """
        Запустити метод з точки x0 з початковим симплексом розміру epsilon.
        """
        max_iter = max_iter if max_iter is not None else self.config.max_iter
        max_shrink = max_shrink if max_shrink is not None else self.config.max_shrink

        method.initialize(x0, epsilon)
        logger.debug(
            "%s: start n=%d epsilon=%g max_iter=%d max_shrink=%d",
            method.name, method.simplex.n, epsilon, max_iter, max_shrink,
        )

        iterations: List[IterationResult] = []
        record = keep_trace or callback is not None

        if record:
            rec0 = IterationResult(index=0, x=method.best(), step_type="initial")
            if keep_trace:
                iterations.append(rec0)
            if callback is not None:
                callback(rec0)

        n_shrink = 0
        stopped_by = STOPPED_BY_MAX_ITER
        for k in range(1, max_iter + 1):
            step_res = method.step()
            if step_res.step_type == STEP_SHRINK:
                n_shrink += 1

            if record:
                rec = IterationResult(
                    index=k,
                    x=method.best(),
                    step_type=step_res.step_type,
                    shrink_count=step_res.shrink_count,
                    meta=dict(step_res.meta),
                )
                if keep_trace:
                    iterations.append(rec)
                if callback is not None:
                    callback(rec)

            if step_res.shrink_count > max_shrink:
                stopped_by = STOPPED_BY_STAGNATION
                break

        ordering = method.ordering
        result = OptimizationRunResult(
            method_name=method.name,
            x_star=method.best(),
            n_iter=method.iteration,
            n_shrink=n_shrink,
            stopped_by=stopped_by,
            iterations=iterations,
            func_evals=ordering.func_evals,
            cache_hits=ordering.hits,
        )
        logger.debug(
            "%s: stopped by %s after %d iterations (%d shrinks)",
            method.name, stopped_by, result.n_iter, n_shrink,
        )
        return result


# ---------------------------------------------------------------------------
# Публічні точки входу
# ---------------------------------------------------------------------------

def run_minimize(
    ordering: Ordering,
    start: ArrayLike,
    epsilon: float,
    config: Optional[SimplexConfig] = None,
    callback: Optional[IterationCallback] = None,
    keep_trace: bool = False,
) -> OptimizationRunResult:
    """Мінімізація за довільним Ordering з повним звітом про запуск."""
    engine = OptimizationEngine(config)
    method = NelderMeadMethod(ordering)
    return engine.run(method, start, epsilon, callback=callback, keep_trace=keep_trace)


def minimize(
    objective: ScalarFunction,
    start: ArrayLike,
    epsilon: float,
    config: Optional[SimplexConfig] = None,
    callback: Optional[IterationCallback] = None,
) -> np.ndarray:
    """
    Знайти (наближений) локальний мінімум f поблизу start.

    Значення f кешуються (EvaluationCache), щоб не обчислювати f повторно
    для тих самих точок. Параметр epsilon задає розмір початкового симплекса.
    """
    cache = EvaluationCache(objective)
    return run_minimize(cache, start, epsilon, config, callback).x_star


def minimize_with_order(
    less: LessPredicate,
    start: ArrayLike,
    epsilon: float,
    config: Optional[SimplexConfig] = None,
    callback: Optional[IterationCallback] = None,
) -> np.ndarray:
    """
    Знайти "найменшу" точку поблизу start за порядком less(x, y).

    less отримує view на робочий буфер; якщо точки потрібно зберегти,
    їх слід скопіювати.
    """
    return run_minimize(PredicateOrdering(less), start, epsilon, config, callback).x_star


__all__ = [
    "IterationCallback",
    "OptimizationRunResult",
    "OptimizationEngine",
    "STOPPED_BY_MAX_ITER",
    "STOPPED_BY_STAGNATION",
    "run_minimize",
    "minimize",
    "minimize_with_order",
]
