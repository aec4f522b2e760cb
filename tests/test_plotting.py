"""Tests for plotting helpers."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from voi_sim.models import VoiResult, Wager
from voi_sim.plotting import _currency, plot_histogram, plot_profit_curve, save_figure


def test_currency_formatter():
    assert _currency(1234.4, 0) == "$1,234"
    assert _currency(-50000, 0) == "-$50,000"


def test_plot_histogram_density():
    """Test the histogram is drawn as a density on the given axes."""
    rng = np.random.default_rng(0)
    samples = rng.normal(0.0, 1.0, 5_000)
    fig, ax = plt.subplots()

    returned = plot_histogram(samples, "Normal", bins=20, ax=ax)

    assert returned is ax
    assert ax.get_title() == "Normal"
    heights = np.array([patch.get_height() for patch in ax.patches])
    widths = np.array([patch.get_width() for patch in ax.patches])
    assert len(heights) == 20
    assert np.sum(heights * widths) == pytest.approx(1.0)
    plt.close(fig)


def test_plot_histogram_currency_axis():
    fig, ax = plt.subplots()

    plot_histogram(np.array([1000.0, 2000.0, 3000.0]), "Income", currency=True, ax=ax)

    formatter = ax.xaxis.get_major_formatter()
    assert formatter(2500.0, 0) == "$2,500"
    plt.close(fig)


def test_plot_histogram_empty():
    with pytest.raises(ValueError, match="empty sample"):
        plot_histogram(np.array([]), "Empty")


def test_plot_profit_curve_and_save(tmp_path):
    """Test the profit curve is written to disk."""
    result = VoiResult(
        wager=Wager(win=200, lose=100),
        repetitions=100,
        thresholds=np.arange(5),
        mean_profit=np.array([50.0, 51.0, 52.0, 51.5, 51.0]),
        expected_opportunity_loss=2.0,
    )

    ax = plot_profit_curve(result)
    path = save_figure(ax.figure, tmp_path / "figures" / "voi.png")

    assert path.exists()
    assert len(ax.lines) == 2
