"""
functions.py

Спільні типи та тестові цільові функції для перевірки методу Нелдера–Міда.

Формат:
    - усі функції працюють з вектором x: numpy.ndarray форми (n,);
    - реалізовані:
        quadratic   - сума квадратів (довільна розмірність)
        rosenbrock  - функція Розенброка (n = 2)
        himmelblau  - функція Хіммельблау (n = 2)
        zero        - тотожний нуль (перевірка зупинки без покращень)
    - є реєстр FUNCTIONS для зручного вибору функції в бенчмарках.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np

ArrayLike = np.ndarray
ScalarFunction = Callable[[ArrayLike], float]
LessPredicate = Callable[[ArrayLike, ArrayLike], bool]


# ---------------------------------------------------------------------------
# Цільові функції
# ---------------------------------------------------------------------------

def quadratic(x: ArrayLike) -> float:
    """
    f(x) = x_1^2 + ... + x_n^2
    """
    x = np.asarray(x, dtype=float)
    return float(np.dot(x, x))


def rosenbrock(x: ArrayLike) -> float:
    """
    f(x1, x2) = (1 - x1)^2 + 100 * (x2 - x1^2)^2
    Мінімум: f(1, 1) = 0.
    """
    x1, x2 = np.asarray(x, dtype=float)
    p = 1.0 - x1
    q = x2 - x1 ** 2
    return p * p + 100.0 * q * q


def himmelblau(x: ArrayLike) -> float:
    """
    f(x1, x2) = (x1^2 + x2 - 11)^2 + (x1 + x2^2 - 7)^2
    Чотири мінімуми зі значенням 0, наприклад f(3, 2) = 0.
    """
    x1, x2 = np.asarray(x, dtype=float)
    p = x1 ** 2 + x2 - 11.0
    q = x1 + x2 ** 2 - 7.0
    return p * p + q * q


def zero(x: ArrayLike) -> float:
    return 0.0


# Відомі точки мінімуму функції Хіммельблау
HIMMELBLAU_MINIMA = np.array(
    [
        [3.0, 2.0],
        [-2.805118, 3.131312],
        [-3.779310, -3.283186],
        [3.584428, -1.848126],
    ],
    dtype=float,
)


# ---------------------------------------------------------------------------
# Реєстр функцій
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    """
    Опис тестової функції.

    Атрибути:
        key    - короткий ключ у реєстрі
        name   - людяна формула
        func   - сама функція f(x)
        f_min  - відоме мінімальне значення
        dim    - розмірність (None, якщо будь-яка)
    """
    key: str
    name: str
    func: ScalarFunction
    f_min: float = 0.0
    dim: Optional[int] = None


FUNCTIONS: Dict[str, TargetFunction] = {
    "quadratic": TargetFunction(
        key="quadratic",
        name="f(x) = x_1^2 + ... + x_n^2",
        func=quadratic,
    ),
    "rosenbrock": TargetFunction(
        key="rosenbrock",
        name="f(x1, x2) = (1 - x1)^2 + 100 * (x2 - x1^2)^2",
        func=rosenbrock,
        dim=2,
    ),
    "himmelblau": TargetFunction(
        key="himmelblau",
        name="f(x1, x2) = (x1^2 + x2 - 11)^2 + (x1 + x2^2 - 7)^2",
        func=himmelblau,
        dim=2,
    ),
    "zero": TargetFunction(
        key="zero",
        name="f(x) = 0",
        func=zero,
    ),
}

__all__ = [
    "ArrayLike",
    "ScalarFunction",
    "LessPredicate",
    "quadratic",
    "rosenbrock",
    "himmelblau",
    "zero",
    "HIMMELBLAU_MINIMA",
    "TargetFunction",
    "FUNCTIONS",
]
