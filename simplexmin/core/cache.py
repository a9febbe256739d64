"""
cache.py

Кеш значень цільової функції для методу Нелдера–Міда.

Ідея:
    - За одну ітерацію симплекс багато разів порівнює одні й ті самі точки
      (наприклад, нову пробну точку з кожною вершиною під час вставки).
    - Обчислення f(x) вважаємо найдорожчою операцією, тому пам'ятаємо
      останні capacity обчислених пар (x, f(x)).
    - За замовчуванням capacity = n + 4: саме стільки точок живе в робочому
      буфері симплекса (n + 1 вершина, центроїд і дві пробні точки).

Формат сховища:
    масив форми (capacity, n + 1); рядок = координати точки + значення f.
    Рядок 0 - використаний найнедавніше, останній рядок - найдавніше.
    Незаповнені рядки містять NaN і тому ніколи не збігаються з запитом.

Порівняння координат точне (==), без жодного допуску.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .functions import ArrayLike, ScalarFunction
from .ordering import Ordering


class EvaluationCache(Ordering):
    """
    Обгортка над f(x) з LRU-кешем фіксованого розміру.

    Використання:
        cache = EvaluationCache(f)
        cache.get(x)        # f(x), обчислене не більше одного разу поспіль
        cache.less(x, y)    # f(x) < f(y)
    """

    def __init__(self, func: ScalarFunction, capacity: Optional[int] = None) -> None:
        """
        Parameters
        ----------
        func : ScalarFunction
            Цільова функція f(x). Вважається чистою та детермінованою.
        capacity : Optional[int]
            Кількість записів у кеші. Якщо None - n + 4, де n визначається
            за першою запитаною точкою. Інакше має бути >= 1.
        """
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity має бути додатним, отримано: {capacity}")

        self.func = func
        self._capacity = capacity
        self.reset()

    def reset(self) -> None:
        """
        Забути всі записи та обнулити лічильники.

        Кеш живе в межах одного запуску: розмірність задачі та capacity
        за замовчуванням визначаються заново за першою точкою.
        """
        self.capacity = self._capacity
        self.n: int = 0

        # Створюється ліниво при першому get()
        self.entries: Optional[np.ndarray] = None
        self._tmp: Optional[np.ndarray] = None

        self.func_evals: int = 0
        self.hits: int = 0

    def _allocate(self, n: int) -> None:
        self.n = n
        if self.capacity is None:
            self.capacity = n + 4
        # позначаємо всі записи як недійсні
        self.entries = np.full((self.capacity, n + 1), np.nan, dtype=float)
        self._tmp = np.empty(n + 1, dtype=float)

    def _find(self, x: np.ndarray) -> int:
        """Індекс запису з координатами x або -1."""
        matches = np.flatnonzero(np.all(self.entries[:, :self.n] == x, axis=1))
        if matches.size == 0:
            return -1
        return int(matches[0])

    def get(self, x: ArrayLike) -> float:
        """
        Повернути f(x), за можливості - з кешу.

        При влученні запис переноситься на початок списку.
        При промаху f викликається, найдавніший запис витісняється,
        а новий записується на початок.
        """
        if self.entries is None:
            self._allocate(len(x))

        n = self.n
        entries = self.entries

        idx = self._find(x)
        if idx >= 0:
            self.hits += 1
            if idx > 0:
                # переносимо запис на початок
                self._tmp[:] = entries[idx]
                entries[1:idx + 1] = entries[:idx]
                entries[0] = self._tmp
            return float(entries[0, n])

        value = float(self.func(x))
        self.func_evals += 1

        entries[1:] = entries[:-1]
        entries[0, :n] = x
        entries[0, n] = value
        return value

    def less(self, x: ArrayLike, y: ArrayLike) -> bool:
        return self.get(x) < self.get(y)

    @property
    def size(self) -> int:
        """Кількість дійсних записів."""
        return min(self.func_evals, self.capacity or 0)


__all__ = [
    "EvaluationCache",
]
