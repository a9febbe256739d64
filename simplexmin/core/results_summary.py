"""
results_summary.py

Зведена таблиця результатів кількох запусків методу Нелдера–Міда
(різні цільові функції та/або початкові точки).

Працює поверх об'єктів BenchmarkRun (див. benchmark.py), які мають поля:
    - function_key
    - x0
    - f_star
    - run (OptimizationRunResult)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass
class ResultsSummary:
    """
    Зведення результатів кількох запусків.

    Приклад використання:
        summary = ResultsSummary()
        summary.add_run(bench_run)
        rows = summary.as_rows()  # для pandas / CSV
    """
    runs: List[Any] = field(default_factory=list)

    def add_run(self, run: Any) -> None:
        """Додати результат одного запуску до зведення."""
        self.runs.append(run)

    def __len__(self) -> int:
        return len(self.runs)

    # ------------------------------------------------------------------
    # Перетворення в "табличний" вигляд
    # ------------------------------------------------------------------

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Повернути список dict-рядків, придатних для:
            - створення pandas.DataFrame,
            - експорту в CSV.

        Поля рядка:
            function, x0, x_star, f_star, n_iter, n_shrink,
            func_evals, cache_hits, stopped_by
        """
        rows: List[Dict[str, Any]] = []

        for bench in self.runs:
            run = bench.run
            rows.append(
                {
                    "function": bench.function_key,
                    "x0": np.asarray(bench.x0, dtype=float).tolist(),
                    "x_star": run.x_star.tolist(),
                    "f_star": float(bench.f_star),
                    "n_iter": int(run.n_iter),
                    "n_shrink": int(run.n_shrink),
                    "func_evals": run.func_evals,
                    "cache_hits": run.cache_hits,
                    "stopped_by": run.stopped_by,
                }
            )

        return rows

    # ------------------------------------------------------------------
    # Вибір найкращого запуску та невдалі запуски
    # ------------------------------------------------------------------

    def best_by_f(self) -> Optional[Any]:
        """
        Повернути запуск з найменшим f_star.
        Якщо список порожній - повертає None.
        """
        if not self.runs:
            return None
        return min(self.runs, key=lambda bench: float(bench.f_star))

    def failures(self, tol: float = 1e-6) -> List[Any]:
        """Запуски, де f_star відхиляється від відомого мінімуму на tol і більше."""
        return [
            bench for bench in self.runs
            if not float(bench.f_star) - float(bench.f_min) < tol
        ]

    # ------------------------------------------------------------------
    # Опційно: повернути pandas.DataFrame
    # ------------------------------------------------------------------

    def to_dataframe(self):
        """
        Повернути pandas.DataFrame зі зведеною таблицею.

        Вимога: встановлений пакет pandas.
        """
        try:
            import pandas as pd  # type: ignore
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError(
                "Для використання ResultsSummary.to_dataframe() "
                "потрібно встановити пакет 'pandas'."
            ) from exc

        return pd.DataFrame(self.as_rows())


__all__ = ["ResultsSummary"]
