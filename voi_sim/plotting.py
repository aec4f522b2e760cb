"""
Plotting helpers for the essay figures.

Only draws onto matplotlib axes and writes figure files; never changes the
numbers it is given.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from voi_sim import config
from voi_sim.models import VoiResult

COLOURS = {
    "hist": "#0072B2",   # blue
    "eol": "#D55E00",    # orange
    "curve": "#009E73",  # green
}


def _currency(x: float, _pos: int) -> str:
    sign = "-" if x < 0 else ""
    return f"{sign}${abs(x):,.0f}"


def _new_axes(ax: Optional[Axes]) -> Axes:
    if ax is not None:
        return ax
    _, ax = plt.subplots(figsize=(8, 5))
    return ax


def plot_histogram(
    samples: np.ndarray,
    title: str,
    *,
    currency: bool = False,
    bins: int = config.HIST_BINS,
    ax: Optional[Axes] = None,
) -> Axes:
    """
    Draw a density histogram of `samples`.

    With `currency=True` the x axis is labelled like $12,345.
    """
    if len(samples) == 0:
        raise ValueError("Cannot plot an empty sample")

    ax = _new_axes(ax)
    ax.hist(samples, bins=bins, density=True, color=COLOURS["hist"], alpha=0.8)
    ax.set_title(title)
    ax.set_ylabel("Density")
    if currency:
        ax.xaxis.set_major_formatter(FuncFormatter(_currency))
    ax.grid(True, axis="y", alpha=0.20)
    return ax


def plot_profit_curve(result: VoiResult, *, ax: Optional[Axes] = None) -> Axes:
    """Mean profit per willingness-to-pay threshold, with the analytic EOL marked."""
    ax = _new_axes(ax)
    ax.plot(result.thresholds, result.mean_profit, color=COLOURS["curve"])
    ax.axvline(
        result.expected_opportunity_loss,
        linestyle="--",
        color=COLOURS["eol"],
        linewidth=1.0,
        label=f"EOL = {result.expected_opportunity_loss:.3g}",
    )
    ax.set_xlabel("Maximum willingness to pay")
    ax.set_ylabel("Mean profit per flip")
    ax.set_title(f"Win {result.wager.win:g} / lose {result.wager.lose:g}")
    ax.yaxis.set_major_formatter(FuncFormatter(_currency))
    ax.legend(loc="lower right")
    return ax


def save_figure(fig: Figure, path: Path) -> Path:
    """Write `fig` to `path`, creating parent directories, then close it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path
