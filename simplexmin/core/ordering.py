"""
ordering.py

Порядок на точках, яким користується симплекс.

Ідея:
    - Симплексу не потрібні самі значення f(x), лише відповідь на питання
      "чи точка x краща за точку y?".
    - Тому ядро працює з абстрактним класом Ordering (Strategy), а не з
      функцією f. Реалізацій дві:
        * PredicateOrdering - пряма обгортка над предикатом less(x, y);
        * EvaluationCache   - порівняння за значеннями f з кешем (див. cache.py).
    - Яку реалізацію використати, вирішує викликач (через вибір точки входу).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .functions import ArrayLike, LessPredicate


class Ordering(ABC):
    """
    Строгий слабкий порядок на точках.

    Точки x, y, які отримує less(), - це view на робочий буфер симплекса.
    Їхній вміст змінюється між ітераціями, тож якщо точку треба зберегти,
    її слід скопіювати.
    """

    # Лічильники викликів f та влучень у кеш (None - порядок не рахує f)
    func_evals: Optional[int] = None
    hits: Optional[int] = None

    @abstractmethod
    def less(self, x: ArrayLike, y: ArrayLike) -> bool:
        """Чи є x строго кращою (меншою) за y."""
        raise NotImplementedError

    def reset(self) -> None:
        """Скинути стан перед новим запуском (за замовчуванням стану немає)."""


class PredicateOrdering(Ordering):
    """
    Порядок, заданий безпосередньо предикатом less(x, y).

    Нічого не кешує: кожне порівняння - один виклик предиката.
    """

    def __init__(self, less: LessPredicate) -> None:
        self._less = less

    def less(self, x: ArrayLike, y: ArrayLike) -> bool:
        return bool(self._less(x, y))


__all__ = [
    "Ordering",
    "PredicateOrdering",
]
