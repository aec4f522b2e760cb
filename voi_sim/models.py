"""Data models for the Value-of-Information Simulator.

Contains Wager, Agent, ProfitConstants and VoiResult with basic validation.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from voi_sim import config


@dataclass(frozen=True)
class Wager:
    """A coin-flip bet: gain `win` on heads, pay `lose` on tails."""

    win: float
    lose: float
    p_heads: float = config.P_HEADS

    def __post_init__(self) -> None:
        """Validate amounts and coin probability."""
        if self.win < 0 or self.lose < 0:
            raise ValueError("Win and lose amounts must be non-negative")
        if not (0.0 <= self.p_heads <= 1.0):
            raise ValueError("p_heads must be in [0, 1]")

    @property
    def expected_value(self) -> float:
        """Expected value of playing without any information."""
        return self.p_heads * self.win - (1.0 - self.p_heads) * self.lose

    @property
    def plays_by_default(self) -> bool:
        """Whether an uninformed decision-maker takes the bet.

        With a fair coin this is simply win > lose.
        """
        return self.expected_value > 0.0

    def payoff(self, heads: bool) -> float:
        """Outcome of playing for a given flip."""
        return self.win if heads else -self.lose


@dataclass(frozen=True)
class Agent:
    """A decision-maker identified only by its maximum willingness to pay."""

    max_price: int

    def buys(self, price: float) -> bool:
        return self.max_price >= price

    def profit(self, price: float, heads: bool, wager: Wager) -> float:
        """Net profit for one flip at the quoted information price.

        An agent that buys learns the flip, plays only on heads and pays the
        price. Otherwise it takes the default action.
        """
        if self.buys(price):
            return (wager.win if heads else 0.0) - price
        if wager.plays_by_default:
            return wager.payoff(heads)
        return 0.0


@dataclass(frozen=True)
class ProfitConstants:
    """Fixed inputs of the annual profit model."""

    labor_cost: float = config.LABOR_COST
    standard_vat: float = config.STANDARD_VAT
    reduced_vat: float = config.REDUCED_VAT
    income_tax: float = config.INCOME_TAX
    operating_days: int = config.OPERATING_DAYS

    def __post_init__(self) -> None:
        for name in ("standard_vat", "reduced_vat", "income_tax"):
            rate = getattr(self, name)
            if not (0.0 <= rate < 1.0):
                raise ValueError(f"{name} must be in [0, 1)")
        if self.operating_days <= 0:
            raise ValueError("operating_days must be positive")


@dataclass
class VoiResult:
    """Outcome of a value-of-information Monte Carlo run."""

    wager: Wager
    repetitions: int
    thresholds: np.ndarray
    mean_profit: np.ndarray
    expected_opportunity_loss: float

    @property
    def best_index(self) -> int:
        return int(np.argmax(self.mean_profit))

    @property
    def best_threshold(self) -> int:
        """Threshold with the highest mean profit."""
        return int(self.thresholds[self.best_index])

    @property
    def best_mean_profit(self) -> float:
        return float(self.mean_profit[self.best_index])

    def to_dict(self) -> dict[str, float | int]:
        return {
            "win": self.wager.win,
            "lose": self.wager.lose,
            "p_heads": self.wager.p_heads,
            "repetitions": self.repetitions,
            "best_threshold": self.best_threshold,
            "best_mean_profit": self.best_mean_profit,
            "expected_value": self.wager.expected_value,
            "expected_opportunity_loss": self.expected_opportunity_loss,
        }
