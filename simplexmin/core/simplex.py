"""
simplex.py

Робочий буфер симплекса для методу Нелдера–Міда.

Усі точки зберігаються в одному масиві X форми (n + 4, n):

    0 .. n    - вершини симплекса, відсортовані за порядком Ordering
                (0 - найкраща, n - найгірша);
    n + 1     - центроїд (також тимчасовий слот для swap());
    n + 2     - пробна точка (відбиття / стиснення);
    n + 3     - пробна точка розширення.

Точка - це рядок X[i] (view, без копіювання). Геометричні операції
записують результат прямо в потрібний рядок, тому за ітерацію нові
точки не створюються.
"""

from __future__ import annotations

import numpy as np

from .functions import ArrayLike
from .ordering import Ordering

# Коефіцієнт стиснення (shrink) за Лагаріасом–Рідсом–Райтом–Райтом
SIGMA = 0.5


class Simplex:
    """
    Симплекс з n + 1 вершин і трьома допоміжними слотами.

    Використання:
        s = Simplex(ordering, n)
        s.init(x0, eps)
        s.centroid()
        s.shift(s.trial_index, s.centroid_index, n, -1.0)
        ...
        x_best = s.best()
    """

    def __init__(self, ordering: Ordering, n: int) -> None:
        self.ordering = ordering
        self.n = n
        self.X = np.zeros((n + 4, n), dtype=float)

        self.centroid_index = n + 1
        self.trial_index = n + 2
        self.expand_index = n + 3

    # ------------------------------------------------------------------
    # Доступ до точок
    # ------------------------------------------------------------------

    def point(self, i: int) -> np.ndarray:
        """Рядок X[i] як view на буфер."""
        return self.X[i]

    def __len__(self) -> int:
        return self.n + 1

    def less(self, i: int, j: int) -> bool:
        return self.ordering.less(self.X[i], self.X[j])

    def swap(self, i: int, j: int) -> None:
        """Поміняти місцями точки i та j через слот центроїда."""
        tmp = self.X[self.centroid_index]
        tmp[:] = self.X[i]
        self.X[i] = self.X[j]
        self.X[j] = tmp

    def best(self) -> np.ndarray:
        """Копія найкращої вершини (не view на буфер)."""
        return self.X[0].copy()

    # ------------------------------------------------------------------
    # Ініціалізація та впорядкування
    # ------------------------------------------------------------------

    def init(self, x0: ArrayLike, eps: float) -> None:
        """
        Побудова початкового симплекса навколо x0:
            вершина 0     = x0;
            вершина k + 1 = x0 + eps * e_k, k = 0 .. n-1.
        Після цього вершини сортуються.
        """
        n = self.n
        self.X[:n + 1] = x0
        for k in range(n):
            self.X[k + 1, k] += eps
        self.sort()

    def sort(self) -> None:
        """
        Відсортувати вершини 0 .. n сортуванням вставками.

        Використовує лише less() та swap(), тому порядок визначає
        виключно Ordering.
        """
        for i in range(1, self.n + 1):
            j = i
            while j > 0 and self.less(j, j - 1):
                self.swap(j, j - 1)
                j -= 1

    def is_sorted(self) -> bool:
        """Чи впорядковані вершини 0 .. n (для перевірок і тестів)."""
        return not any(self.less(k, k - 1) for k in range(1, self.n + 1))

    def insert(self, src: int, i: int, j: int) -> int:
        """
        Вставити точку src серед вершин, коли вже відомо, що її місце -
        одна з позицій i, ..., j.

        Бінарний пошук тримає інваріант:
            less(src, i - 1) == False,  less(src, j) == True.
        Після i == j вершини i .. n-1 зсуваються на одну позицію вправо
        (найгірша вершина відкидається), і src копіюється на місце i.

        Повертає індекс, на який потрапила точка.
        """
        while i < j:
            h = (i + j) // 2
            # i <= h < j
            if not self.less(src, h):
                i = h + 1
            else:
                j = h
        # i == j - найменший індекс, де less(src, i) == True

        n = self.n
        self.X[i + 1:n + 1] = self.X[i:n]
        self.X[i] = self.X[src]
        return i

    # ------------------------------------------------------------------
    # Геометричні операції
    # ------------------------------------------------------------------

    def centroid(self) -> None:
        """Центроїд вершин 0 .. n-1 (усіх, окрім найгіршої) -> слот n + 1."""
        n = self.n
        np.mean(self.X[:n], axis=0, out=self.X[self.centroid_index])

    def shift(self, a: int, b: int, c: int, lam: float) -> None:
        """
        p_a = (1 - lam) * p_b + lam * p_c

        Праву частину обчислюємо повністю до запису, тож a може
        збігатися з b або c.
        """
        X = self.X
        X[a] = (1.0 - lam) * X[b] + lam * X[c]

    def shrink(self) -> None:
        """Стягнути вершини 1 .. n до найкращої вершини 0."""
        n = self.n
        X = self.X
        X[1:n + 1] = (1.0 - SIGMA) * X[0] + SIGMA * X[1:n + 1]


__all__ = [
    "SIGMA",
    "Simplex",
]
