"""Metrics and analysis utilities for the Value-of-Information Simulator.

Functions for summarising Monte Carlo samples.
"""

from __future__ import annotations

import numpy as np

from voi_sim import config


def quantiles(
    arr: np.ndarray, qs: tuple[float, ...] = (0.05, 0.5, 0.95)
) -> dict[float, float]:
    """Compute quantiles of an array.

    Args:
        arr: Input array
        qs: Quantile values to compute

    Returns:
        Dictionary mapping quantile values to computed quantiles
    """
    if len(arr) == 0:
        return {q: 0.0 for q in qs}

    computed_quantiles = np.quantile(arr, qs)
    return {q: float(v) for q, v in zip(qs, computed_quantiles)}


def empirical_bounds(
    samples: np.ndarray, p1: float = config.P_LOW, p2: float = config.P_HIGH
) -> tuple[float, float]:
    """Empirical p1/p2 percentiles of a sample."""
    if len(samples) == 0:
        raise ValueError("Cannot compute bounds of an empty sample")

    lo, hi = np.quantile(samples, (p1, p2))
    return float(lo), float(hi)


def prob_loss(incomes: np.ndarray) -> float:
    """Fraction of draws with negative income."""
    if len(incomes) == 0:
        return 0.0

    return float(np.mean(incomes < 0))


def conditional_mean_loss(incomes: np.ndarray) -> float:
    """Mean income over the draws that lose money.

    Returns 0.0 when no draw is a loss.
    """
    losses = incomes[incomes < 0]
    if len(losses) == 0:
        return 0.0

    return float(np.mean(losses))


def loss_summary(incomes: np.ndarray) -> dict[str, float | dict[float, float]]:
    """Generate summary statistics for a profit distribution.

    Args:
        incomes: Array of simulated net incomes

    Returns:
        Dictionary with summary statistics
    """
    if len(incomes) == 0:
        return {
            "mean": 0.0,
            "sd": 0.0,
            "quantiles": {0.05: 0.0, 0.5: 0.0, 0.95: 0.0},
            "prob_loss": 0.0,
            "conditional_mean_loss": 0.0,
        }

    return {
        "mean": float(np.mean(incomes)),
        "sd": float(np.std(incomes)),
        "quantiles": quantiles(incomes),
        "prob_loss": prob_loss(incomes),
        "conditional_mean_loss": conditional_mean_loss(incomes),
    }
