"""Tests for metrics module."""

import numpy as np
import pytest

from voi_sim.metrics import (
    conditional_mean_loss,
    empirical_bounds,
    loss_summary,
    prob_loss,
    quantiles,
)


def test_quantiles_basic():
    arr = np.arange(101, dtype=float)

    q = quantiles(arr)

    assert q == {0.05: 5.0, 0.5: 50.0, 0.95: 95.0}


def test_quantiles_empty():
    assert quantiles(np.array([])) == {0.05: 0.0, 0.5: 0.0, 0.95: 0.0}


def test_prob_loss_and_conditional_mean_loss():
    """Test loss statistics on a tiny hand-checked sample."""
    incomes = np.array([-300.0, -100.0, 50.0, 150.0])

    assert prob_loss(incomes) == pytest.approx(0.5)
    assert conditional_mean_loss(incomes) == pytest.approx(-200.0)


def test_conditional_mean_loss_without_losses():
    assert conditional_mean_loss(np.array([1.0, 2.0])) == 0.0
    assert prob_loss(np.array([1.0, 2.0])) == 0.0


def test_empirical_bounds_empty():
    with pytest.raises(ValueError, match="empty sample"):
        empirical_bounds(np.array([]))


def test_loss_summary_keys_and_values():
    """Test the summary of a profit sample."""
    incomes = np.array([-100.0, 100.0, 200.0, 400.0])

    summary = loss_summary(incomes)

    assert summary["mean"] == pytest.approx(150.0)
    assert summary["prob_loss"] == pytest.approx(0.25)
    assert summary["conditional_mean_loss"] == pytest.approx(-100.0)
    assert set(summary["quantiles"]) == {0.05, 0.5, 0.95}


def test_loss_summary_empty():
    summary = loss_summary(np.array([]))

    assert summary["mean"] == 0.0
    assert summary["prob_loss"] == 0.0
