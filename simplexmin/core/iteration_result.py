"""
iteration_result.py

Структура даних для представлення результатів окремих ітерацій
методу Нелдера–Міда. Використовується в движку, callback'ах і графіках.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np


@dataclass
class IterationResult:
    """
    Опис однієї ітерації.

    Атрибути:
        index        - номер ітерації (0 - початковий симплекс)
        x            - копія найкращої вершини після ітерації
        step_type    - тип кроку ("reflection", "expansion", "shrink", ...)
        shrink_count - лічильник стиснень поспіль після ітерації
        meta         - довільна додаткова інформація
    """
    index: int
    x: np.ndarray
    step_type: str
    shrink_count: int = 0
    meta: Dict[str, Any] = field(default_factory=dict)


__all__ = [
    "IterationResult",
]
