"""Sampling utilities for the Value-of-Information Simulator.

Centralized, reproducible randomness and percentile-parametrized distributions.
"""

from __future__ import annotations

import numpy as np
from scipy import stats

from voi_sim import config


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def _check_percentiles(x1: float, x2: float, p1: float, p2: float) -> None:
    if not (0.0 < p1 < 1.0 and 0.0 < p2 < 1.0):
        raise ValueError("Percentiles must be in (0, 1)")
    if p1 >= p2:
        raise ValueError("p1 must be smaller than p2")
    if x1 >= x2:
        raise ValueError("x1 must be smaller than x2")


def _fit_location_scale(
    x1: float, x2: float, p1: float, p2: float
) -> tuple[float, float]:
    """Solve mu + z(p) * sigma = x at both percentiles."""
    z1 = stats.norm.ppf(p1)
    z2 = stats.norm.ppf(p2)
    sigma = (x2 - x1) / (z2 - z1)
    mu = x1 - z1 * sigma
    return float(mu), float(sigma)


def normal_from_percentiles(
    x1: float,
    x2: float,
    p1: float = config.P_LOW,
    p2: float = config.P_HIGH,
):
    """Build a normal distribution whose p1/p2 percentiles are x1/x2.

    Args:
        x1: Value at the lower percentile
        x2: Value at the upper percentile
        p1: Lower percentile, default 0.05
        p2: Upper percentile, default 0.95

    Returns:
        Frozen scipy.stats normal distribution
    """
    _check_percentiles(x1, x2, p1, p2)
    mu, sigma = _fit_location_scale(x1, x2, p1, p2)
    return stats.norm(loc=mu, scale=sigma)


def lognormal_from_percentiles(
    x1: float,
    x2: float,
    p1: float = config.P_LOW,
    p2: float = config.P_HIGH,
):
    """Build a log-normal distribution whose p1/p2 percentiles are x1/x2.

    The fit is done on ln(x), so both bounds must be positive.

    Returns:
        Frozen scipy.stats log-normal distribution
    """
    _check_percentiles(x1, x2, p1, p2)
    if x1 <= 0:
        raise ValueError("Log-normal bounds must be positive")
    mu, sigma = _fit_location_scale(np.log(x1), np.log(x2), p1, p2)
    return stats.lognorm(s=sigma, scale=np.exp(mu))


def sample(dist, rng: np.random.Generator, n: int) -> np.ndarray:
    """Draw n independent samples from a frozen distribution.

    Args:
        dist: Frozen scipy.stats distribution
        rng: Random number generator
        n: Number of samples

    Returns:
        Array of n samples
    """
    if n < 0:
        raise ValueError("Cannot generate negative number of samples")

    return np.asarray(dist.rvs(size=n, random_state=rng), dtype=float)
