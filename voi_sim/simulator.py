"""Simulation engine for the Value-of-Information Simulator.

A population of agents, each with a maximum price it will pay to learn a coin
flip in advance, faces the same wager many times. The threshold with the best
mean profit should match the expected opportunity loss of the default action.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from voi_sim import config
from voi_sim.models import Agent, VoiResult, Wager

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 250_000


def expected_opportunity_loss(wager: Wager) -> float:
    """Expected reward forgone by acting on the default decision.

    If the default is to play, the loss is avoided on tails; if the default
    is to decline, the win is missed on heads.
    """
    if wager.plays_by_default:
        return (1.0 - wager.p_heads) * wager.lose
    return wager.p_heads * wager.win


def expected_value_with_information(wager: Wager) -> float:
    """Expected profit of an agent who always knows the flip for free."""
    return wager.p_heads * wager.win


def simulate_once(
    rng: np.random.Generator,
    agents: list[Agent],
    wager: Wager,
    max_price: int = config.MAX_PRICE,
) -> dict[str, Any]:
    """Run a single flip against every agent.

    Returns dict with heads, price and profits (one per agent).
    """
    heads = bool(rng.random() < wager.p_heads)
    price = int(rng.integers(0, max_price + 1))
    profits = np.array([agent.profit(price, heads, wager) for agent in agents])

    return {
        "heads": heads,
        "price": price,
        "profits": profits,
    }


def _profit_sums(
    heads: np.ndarray, prices: np.ndarray, wager: Wager, max_price: int
) -> tuple[float, np.ndarray]:
    """Total default profit and informed-minus-default gain grouped by price."""
    if wager.plays_by_default:
        default_profit = np.where(heads, wager.win, -wager.lose)
    else:
        default_profit = np.zeros(len(heads))
    informed_profit = np.where(heads, wager.win, 0.0) - prices
    gain = informed_profit - default_profit

    gain_by_price = np.bincount(prices, weights=gain, minlength=max_price + 1)
    return float(default_profit.sum()), gain_by_price


def _mean_profit(
    default_total: float, gain_by_price: np.ndarray, repetitions: int
) -> np.ndarray:
    """Threshold t earns the default profit plus every gain priced at or below t."""
    return (default_total + np.cumsum(gain_by_price)) / repetitions


def mean_profit_by_threshold(
    heads: np.ndarray, prices: np.ndarray, wager: Wager, max_price: int
) -> np.ndarray:
    """Mean profit for every threshold 0..max_price over given flips and prices.

    An agent with threshold t buys on every repetition whose price is <= t,
    so its profit is the default profit plus the cumulative gain up to t.

    Args:
        heads: Boolean array of flip outcomes
        prices: Integer array of quoted prices in [0, max_price]
        wager: The wager being played
        max_price: Largest threshold (and price) considered

    Returns:
        Array of shape (max_price + 1,) with mean profits
    """
    if len(heads) != len(prices):
        raise ValueError("heads and prices must have same length")
    if len(heads) == 0:
        raise ValueError("Need at least one repetition")
    if np.any(prices < 0) or np.any(prices > max_price):
        raise ValueError("Prices must be in [0, max_price]")

    default_total, gain_by_price = _profit_sums(heads, prices, wager, max_price)
    return _mean_profit(default_total, gain_by_price, len(heads))


def run_value_of_information(
    rng: np.random.Generator,
    wager: Wager,
    repetitions: int = config.N_REPETITIONS,
    max_price: int = config.MAX_PRICE,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> VoiResult:
    """Run the Monte Carlo value-of-information experiment.

    Agents have thresholds 0..max_price. Each repetition flips the coin and
    quotes a price drawn uniformly from the integers 0..max_price; all agents
    see the same flip and price.

    Args:
        rng: Random number generator
        wager: The wager being played
        repetitions: Number of flips
        max_price: Largest threshold and quoted price
        chunk_size: Repetitions simulated per batch

    Returns:
        VoiResult with the mean profit of every threshold
    """
    if repetitions <= 0:
        raise ValueError("repetitions must be positive")
    if max_price < 0:
        raise ValueError("max_price must be non-negative")
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    eol = expected_opportunity_loss(wager)
    if max_price < eol:
        logger.warning(
            f"max_price={max_price} is below the expected opportunity loss {eol:.3f}; "
            "the best threshold will sit at max_price"
        )

    default_total = 0.0
    gain_by_price = np.zeros(max_price + 1)

    done = 0
    while done < repetitions:
        n = min(chunk_size, repetitions - done)
        heads = rng.random(n) < wager.p_heads
        prices = rng.integers(0, max_price + 1, size=n)

        chunk_default, chunk_gain = _profit_sums(heads, prices, wager, max_price)
        default_total += chunk_default
        gain_by_price += chunk_gain

        done += n
        logger.info(f"Progress: {done}/{repetitions}")

    mean_profit = _mean_profit(default_total, gain_by_price, repetitions)
    result = VoiResult(
        wager=wager,
        repetitions=repetitions,
        thresholds=np.arange(max_price + 1),
        mean_profit=mean_profit,
        expected_opportunity_loss=eol,
    )
    logger.info(
        f"best_threshold={result.best_threshold} "
        f"eol={result.expected_opportunity_loss:.3f}"
    )
    return result
