"""
config.py

Параметри зупинки методу Нелдера–Міда.

Метод зупиняється або після max_iter ітерацій, або коли лічильник
стиснень (shrink) поспіль без нового найкращого значення перевищує
max_shrink. Толерансів по кроку чи по f немає.

Існують два набори значень за замовчуванням:
    DEFAULT_CONFIG   - 10 000 ітерацій, поріг стиснень 10;
    LONG_RUN_CONFIG  - 100 000 ітерацій, поріг стиснень 100.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimplexConfig:
    """
    Налаштування зупинки.

    Атрибути:
        max_iter   - жорстка межа кількості ітерацій
        max_shrink - допустима кількість стиснень поспіль; зупинка, коли
                     лічильник стає більшим за це значення
    """
    max_iter: int = 10_000
    max_shrink: int = 10

    def __post_init__(self) -> None:
        if self.max_iter <= 0:
            raise ValueError(f"max_iter має бути додатним, отримано: {self.max_iter}")
        if self.max_shrink < 0:
            raise ValueError(f"max_shrink не може бути від'ємним, отримано: {self.max_shrink}")


DEFAULT_CONFIG = SimplexConfig(max_iter=10_000, max_shrink=10)
LONG_RUN_CONFIG = SimplexConfig(max_iter=100_000, max_shrink=100)

__all__ = [
    "SimplexConfig",
    "DEFAULT_CONFIG",
    "LONG_RUN_CONFIG",
]
