"""
nelder_mead.py

Реалізація однієї ітерації методу Нелдера–Міда у варіанті
J. C. Lagarias, J. A. Reeds, M. H. Wright, P. E. Wright:
"Convergence Properties of the Nelder-Mead Simplex Method in Low Dimensions",
SIAM J. Optim. 9 (1998), No. 1, pp. 112-147.

Метод працює тільки з порядком на точках (Ordering), без градієнтів і
навіть без самих значень f, і оперує симплексом з (n + 1) вершин.

Основні кроки ітерації:
    1. Центроїд усіх вершин, окрім найгіршої.
    2. Відбиття (reflection) найгіршої вершини через центроїд.
    3. За потреби - розширення (expansion).
    4. Або зовнішнє / внутрішнє стиснення (contraction).
    5. Якщо нічого не допомогло - стягування симплекса (shrink).

Після кроків 2-4 нова точка вставляється на своє місце бінарним пошуком,
повне сортування потрібне лише після shrink.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from .functions import ArrayLike
from .ordering import Ordering
from .simplex import SIGMA, Simplex

# Параметри методу (фіксовані, не налаштовуються)
RHO = 1.0    # відбиття
CHI = 2.0    # розширення
GAMMA = 0.5  # стиснення

STEP_REFLECTION = "reflection"
STEP_REFLECTION_BEST = "reflection(best)"
STEP_EXPANSION = "expansion"
STEP_CONTRACTION_OUTSIDE = "contraction_outside"
STEP_CONTRACTION_INSIDE = "contraction_inside"
STEP_SHRINK = "shrink"


# ---------------------------------------------------------------------------
# Результат одного кроку
# ---------------------------------------------------------------------------

@dataclass
class StepResult:
    """
    Результат однієї ітерації.

    Атрибути:
        step_type    - який крок було прийнято (STEP_*)
        position     - куди вставлено нову точку (-1 для shrink)
        shrink_count - лічильник стиснень поспіль після кроку
        meta         - додаткова інформація
    """
    step_type: str
    position: int
    shrink_count: int
    meta: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Метод Нелдера–Міда
# ---------------------------------------------------------------------------

class NelderMeadMethod:
    """
    Метод Нелдера–Міда над абстрактним порядком.

    Особливості:
        - тримає всередині Simplex (робочий буфер з n + 4 точок);
        - один виклик step() = одна ітерація алгоритму;
        - рішення про зупинку приймає движок (engine.py) за iteration
          та shrink_count.

    Використання:
        method = NelderMeadMethod(ordering)
        method.initialize(x0, eps)
        res = method.step()     # StepResult
        x = method.best()
    """

    def __init__(self, ordering: Ordering, name: Optional[str] = None) -> None:
        self.ordering = ordering
        self.name: str = name or "Nelder–Mead simplex"

        self.simplex: Optional[Simplex] = None
        self.iteration: int = 0
        self.shrink_count: int = 0

    # ------------------------------------------------------------------
    # Життєвий цикл
    # ------------------------------------------------------------------

    def reset(self) -> None:
        self.simplex = None
        self.iteration = 0
        self.shrink_count = 0

    def initialize(self, x0: ArrayLike, eps: float) -> None:
        """
        Побудова початкового симплекса навколо x0 з кроком eps по кожній осі.

        eps = 0 вироджує симплекс в одну точку; перевірки немає.
        """
        x0 = np.asarray(x0, dtype=float)
        self.reset()
        self.ordering.reset()
        self.simplex = Simplex(self.ordering, x0.size)
        self.simplex.init(x0, eps)

    def best(self) -> np.ndarray:
        """Копія найкращої вершини."""
        return self.simplex.best()

    # ------------------------------------------------------------------
    # Одна ітерація
    # ------------------------------------------------------------------

    def step(self) -> StepResult:
        s = self.simplex
        n = s.n
        cent = s.centroid_index
        trial = s.trial_index
        expand = s.expand_index

        self.iteration += 1
        s.centroid()

        # 1. Reflection
        s.shift(trial, cent, n, -RHO)
        winner = s.less(trial, 0)
        if not winner and s.less(trial, n - 1):
            pos = s.insert(trial, 1, n - 1)
            return self._result(STEP_REFLECTION, pos)

        # 2. Expansion
        if winner:
            s.shift(expand, cent, trial, CHI)
            if s.less(expand, trial):
                pos = s.insert(expand, 0, 0)
                step_type = STEP_EXPANSION
            else:
                pos = s.insert(trial, 0, 0)
                step_type = STEP_REFLECTION_BEST
            # лічильник рахує shrink після останньої нової найкращої вершини,
            # тому скидається для обох варіантів, а не лише після expansion
            self.shrink_count = 0
            return self._result(step_type, pos)

        # 3. Contraction
        if s.less(trial, n):
            s.shift(trial, cent, trial, GAMMA)
            step_type = STEP_CONTRACTION_OUTSIDE
        else:
            s.shift(trial, cent, n, GAMMA)
            step_type = STEP_CONTRACTION_INSIDE
        if s.less(trial, n):
            pos = s.insert(trial, 0, n)
            return self._result(step_type, pos)

        # 4. Shrink
        s.shrink()
        s.sort()
        self.shrink_count += 1
        return self._result(STEP_SHRINK, -1)

    def _result(self, step_type: str, position: int) -> StepResult:
        return StepResult(
            step_type=step_type,
            position=position,
            shrink_count=self.shrink_count,
            meta={"iteration": self.iteration},
        )


__all__ = [
    "RHO",
    "CHI",
    "GAMMA",
    "SIGMA",
    "STEP_REFLECTION",
    "STEP_REFLECTION_BEST",
    "STEP_EXPANSION",
    "STEP_CONTRACTION_OUTSIDE",
    "STEP_CONTRACTION_INSIDE",
    "STEP_SHRINK",
    "StepResult",
    "NelderMeadMethod",
]
