"""Annual profit model for a small shop.

Maps daily customers, spend per customer and the share of sales taxed at the
standard VAT rate to annual net income.
"""

from __future__ import annotations

import numpy as np

from voi_sim.models import ProfitConstants
from voi_sim.sampling import sample


def annual_net_income(
    customers,
    spend,
    vat_pct,
    constants: ProfitConstants | None = None,
):
    """Compute annual net income.

    Works on scalars or NumPy arrays of matching shape.

    Args:
        customers: Customers per day
        spend: Average spend per customer
        vat_pct: Percent of sales taxed at the standard rate (0-100)
        constants: Fixed model inputs, defaults to ProfitConstants()

    Returns:
        Net income after VAT, labor and income tax
    """
    if constants is None:
        constants = ProfitConstants()

    share = np.asarray(vat_pct, dtype=float) / 100.0
    revenue = np.asarray(customers, dtype=float) * spend * constants.operating_days
    vat = revenue * (share * constants.standard_vat + (1.0 - share) * constants.reduced_vat)
    pre_tax = revenue - vat - constants.labor_cost
    # No tax is paid on a loss
    income_tax = constants.income_tax * np.maximum(pre_tax, 0.0)
    net = pre_tax - income_tax

    if np.ndim(net) == 0:
        return float(net)
    return net


def simulate_profit(
    rng: np.random.Generator,
    n: int,
    customers_dist,
    spend_dist,
    vat_dist,
    constants: ProfitConstants | None = None,
) -> np.ndarray:
    """Monte Carlo draw of annual net income.

    Args:
        rng: Random number generator
        n: Number of draws
        customers_dist: Frozen distribution of customers per day
        spend_dist: Frozen distribution of spend per customer
        vat_dist: Frozen distribution of the standard-rate VAT share (percent)
        constants: Fixed model inputs

    Returns:
        Array of n net incomes
    """
    customers = sample(customers_dist, rng, n)
    spend = sample(spend_dist, rng, n)
    vat_pct = np.clip(sample(vat_dist, rng, n), 0.0, 100.0)
    return np.asarray(annual_net_income(customers, spend, vat_pct, constants))
