"""
Графіки процесу мінімізації за трасою ітерацій (IterationResult).

Три види графіків:
    - графік f(k) для найкращої вершини;
    - контурні лінії + траєкторія найкращої вершини;
    - поверхня f(x1, x2) + траєкторія.

Кожна функція повертає matplotlib.figure.Figure і не залежить від
GUI-бекенда: фігуру можна зберегти через figure.savefig(...) або
вбудувати у будь-яке полотно.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np
from matplotlib.figure import Figure

from .core.iteration_result import IterationResult


@dataclass(frozen=True)
class Palette:
    surface: str = "#1f2430"
    border: str = "#3a4150"
    text_main: str = "#e6e9ef"
    text_muted: str = "#9aa3b2"
    accent: str = "#f0a35e"
    accent_alt: str = "#6cb6ff"


PALETTE = Palette()


# ---------------------------------------------------------------------------
# Стилізація
# ---------------------------------------------------------------------------

def _style_2d_axes(ax) -> None:
    ax.set_facecolor(PALETTE.surface)
    ax.tick_params(colors=PALETTE.text_muted, labelsize=9)
    for spine in ax.spines.values():
        spine.set_color(PALETTE.border)
        spine.set_linewidth(0.8)
    ax.grid(True, color=PALETTE.border, linestyle="--", linewidth=0.5, alpha=0.6)
    ax.title.set_color(PALETTE.text_main)
    ax.xaxis.label.set_color(PALETTE.text_main)
    ax.yaxis.label.set_color(PALETTE.text_main)


def _style_3d_axes(ax) -> None:
    ax.set_facecolor(PALETTE.surface)
    ax.tick_params(colors=PALETTE.text_muted, labelsize=8)
    ax.xaxis.label.set_color(PALETTE.text_main)
    ax.yaxis.label.set_color(PALETTE.text_main)
    ax.zaxis.label.set_color(PALETTE.text_main)
    ax.title.set_color(PALETTE.text_main)


def _new_figure(projection: Optional[str] = None) -> Tuple[Figure, object]:
    figure = Figure(facecolor=PALETTE.surface)
    if projection == "3d":
        ax = figure.add_subplot(111, projection="3d")
    else:
        ax = figure.add_subplot(111)
    return figure, ax


def _placeholder(ax, message: str) -> None:
    ax.text(0.5, 0.5, message, ha="center", va="center",
            transform=ax.transAxes, color=PALETTE.text_muted)


def _grid(
    func: Callable[[np.ndarray], float],
    xs: np.ndarray,
    padding: float,
    grid_size: int,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    x1_min, x1_max = xs[:, 0].min(), xs[:, 0].max()
    x2_min, x2_max = xs[:, 1].min(), xs[:, 1].max()

    if abs(x1_max - x1_min) < 1e-9:
        x1_min -= 1.0
        x1_max += 1.0
    if abs(x2_max - x2_min) < 1e-9:
        x2_min -= 1.0
        x2_max += 1.0

    x1_vals = np.linspace(x1_min - padding, x1_max + padding, grid_size)
    x2_vals = np.linspace(x2_min - padding, x2_max + padding, grid_size)
    X1, X2 = np.meshgrid(x1_vals, x2_vals)

    Z = np.zeros_like(X1)
    for i in range(grid_size):
        for j in range(grid_size):
            Z[i, j] = func(np.array([X1[i, j], X2[i, j]], dtype=float))
    return X1, X2, Z


def _trajectory(iterations: List[IterationResult]) -> np.ndarray:
    return np.array([it.x for it in iterations], dtype=float)


# ---------------------------------------------------------------------------
# Публічні функції
# ---------------------------------------------------------------------------

def plot_fk(
    func: Callable[[np.ndarray], float],
    iterations: List[IterationResult],
) -> Figure:
    """Графік f(x_k) найкращої вершини від номера ітерації k."""
    figure, ax = _new_figure()
    _style_2d_axes(ax)

    if not iterations:
        _placeholder(ax, "Траса порожня")
        return figure

    ks = [it.index for it in iterations]
    fs = [float(func(it.x)) for it in iterations]

    ax.plot(ks, fs, marker="o", linestyle="-", linewidth=1.5, markersize=3, color=PALETTE.accent)
    if min(fs) > 0.0:
        ax.set_yscale("log")
    ax.set_xlabel("k (номер ітерації)")
    ax.set_ylabel("f(xₖ)")
    ax.set_title("Графік f(k)")
    return figure


def plot_contour_trajectory(
    func: Callable[[np.ndarray], float],
    iterations: List[IterationResult],
    levels: int = 18,
    padding: float = 0.5,
    grid_size: int = 120,
) -> Figure:
    """Контурні лінії функції в R² та траєкторія найкращої вершини."""
    figure, ax = _new_figure()
    _style_2d_axes(ax)

    if not iterations:
        _placeholder(ax, "Траса порожня")
        return figure

    xs = _trajectory(iterations)
    if xs.ndim != 2 or xs.shape[1] != 2:
        _placeholder(ax, "Contour доступний лише для задачі в R²")
        return figure

    X1, X2, Z = _grid(func, xs, padding, grid_size)

    ax.contour(X1, X2, Z, levels=levels, colors=PALETTE.text_muted, linewidths=0.8)
    ax.contourf(X1, X2, Z, levels=levels, cmap="magma", alpha=0.45)

    ax.plot(xs[:, 0], xs[:, 1], marker="o", linestyle="-", linewidth=1.2,
            markersize=3, color=PALETTE.accent)
    ax.scatter(xs[0, 0], xs[0, 1], color=PALETTE.accent_alt, marker="s", s=50, zorder=5)
    ax.scatter(xs[-1, 0], xs[-1, 1], color=PALETTE.accent, marker="*", s=120, zorder=6)

    ax.set_xlabel("x₁")
    ax.set_ylabel("x₂")
    ax.set_title("Рівні функції та траєкторія")
    return figure


def plot_surface_trajectory(
    func: Callable[[np.ndarray], float],
    iterations: List[IterationResult],
    padding: float = 0.5,
    grid_size: int = 60,
) -> Figure:
    """Поверхня f(x1, x2) та траєкторія найкращої вершини."""
    figure, ax = _new_figure(projection="3d")
    _style_3d_axes(ax)

    xs = _trajectory(iterations) if iterations else np.empty((0, 0))
    if xs.ndim != 2 or xs.shape[0] == 0 or xs.shape[1] != 2:
        ax.text2D(0.5, 0.5, "Поверхню можна показати лише для R²", ha="center",
                  va="center", transform=ax.transAxes, color=PALETTE.text_muted)
        return figure

    X1, X2, Z = _grid(func, xs, padding, grid_size)
    ax.plot_surface(X1, X2, Z, rstride=2, cstride=2, cmap="magma",
                    linewidth=0.2, antialiased=True, alpha=0.9)

    z_traj = np.array([func(x) for x in xs], dtype=float)
    ax.plot(xs[:, 0], xs[:, 1], z_traj, color=PALETTE.accent, marker="o",
            linewidth=2, markersize=4)
    ax.set_xlabel("x₁")
    ax.set_ylabel("x₂")
    ax.set_zlabel("f(x₁, x₂)")
    ax.set_title("Поверхня f(x₁, x₂) + траєкторія")
    return figure


__all__ = [
    "PALETTE",
    "plot_fk",
    "plot_contour_trajectory",
    "plot_surface_trajectory",
]
