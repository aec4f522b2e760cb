"""Command-line interface for the Value-of-Information Simulator.

Provides the `voi-sim` entry point with one subcommand per experiment.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from voi_sim import config
from voi_sim.log_utils import get_logger
from voi_sim.metrics import empirical_bounds, loss_summary
from voi_sim.models import ProfitConstants, Wager
from voi_sim.plotting import plot_histogram, plot_profit_curve, save_figure
from voi_sim.profit import simulate_profit
from voi_sim.sampling import (
    lognormal_from_percentiles,
    make_rng,
    normal_from_percentiles,
    sample,
)
from voi_sim.simulator import expected_value_with_information, run_value_of_information


def run_voi(args: argparse.Namespace) -> dict[str, Any]:
    """Run the coin-flip value-of-information experiment."""
    wager = Wager(win=args.win, lose=args.lose, p_heads=args.p_heads)
    informed_value = expected_value_with_information(wager)
    result = run_value_of_information(
        make_rng(args.seed), wager, repetitions=args.repetitions, max_price=args.max_price
    )

    print("Value of Information Results")
    print("=" * 40)
    print(f"Win: {wager.win}  Lose: {wager.lose}  P(heads): {wager.p_heads}")
    print(f"Repetitions: {result.repetitions}")
    print(f"Default action: {'play' if wager.plays_by_default else 'decline'}")
    print(f"Best threshold: {result.best_threshold}")
    print(f"Best mean profit: {result.best_mean_profit:.3f}")
    print(f"Expected opportunity loss: {result.expected_opportunity_loss:.3f}")
    print(f"Value with perfect information: {informed_value:.3f}")

    if args.plot is not None:
        ax = plot_profit_curve(result)
        save_figure(ax.figure, args.plot)

    return {**result.to_dict(), "expected_value_with_information": informed_value}


def run_profit(args: argparse.Namespace) -> dict[str, Any]:
    """Monte Carlo estimate of the annual profit distribution."""
    customers = normal_from_percentiles(*config.CUSTOMERS_RANGE)
    spend = lognormal_from_percentiles(*config.SPEND_RANGE)
    vat = normal_from_percentiles(*config.VAT_MIX_RANGE)
    constants = ProfitConstants(labor_cost=args.labor_cost)

    incomes = simulate_profit(make_rng(args.seed), args.samples, customers, spend, vat, constants)
    summary = loss_summary(incomes)

    print("Profit Model Results")
    print("=" * 40)
    print(f"Samples: {args.samples}")
    print(f"Mean: {summary['mean']:,.0f}")
    print(f"SD: {summary['sd']:,.0f}")
    print(f"P(loss): {100.0 * summary['prob_loss']:.1f}%")
    print(f"Mean loss when losing: {summary['conditional_mean_loss']:,.0f}")

    if args.plot is not None:
        ax = plot_histogram(incomes, "Annual net income", currency=True)
        save_figure(ax.figure, args.plot)

    return {"samples": args.samples, "labor_cost": args.labor_cost, "summary": summary}


def run_percentiles(args: argparse.Namespace) -> dict[str, Any]:
    """Fit a distribution to a percentile pair and check it by sampling."""
    factory = lognormal_from_percentiles if args.lognormal else normal_from_percentiles
    dist = factory(args.low, args.high, args.p_low, args.p_high)
    draws = sample(dist, make_rng(args.seed), args.samples)
    lo, hi = empirical_bounds(draws, args.p_low, args.p_high)

    print("Percentile Fit")
    print("=" * 40)
    print(f"Family: {'log-normal' if args.lognormal else 'normal'}")
    print(f"Target:    [{args.low:.3f}, {args.high:.3f}]")
    print(f"Empirical: [{lo:.3f}, {hi:.3f}]")

    if args.plot is not None:
        ax = plot_histogram(draws, f"{args.low:g} to {args.high:g}")
        save_figure(ax.figure, args.plot)

    return {
        "family": "lognormal" if args.lognormal else "normal",
        "target": [args.low, args.high],
        "empirical": [lo, hi],
        "mean": float(dist.mean()),
        "sd": float(dist.std()),
    }


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", type=int, default=config.BASE_SEED, help="Random seed")
    common.add_argument("--log-file", type=Path, default=None, help="Also log to this file")

    parser = argparse.ArgumentParser(description="Value-of-Information Simulator")
    sub = parser.add_subparsers(dest="command", required=True)

    voi = sub.add_parser(
        "voi", parents=[common], help="Coin-flip value-of-information experiment"
    )
    voi.add_argument("--win", type=float, default=config.WIN_AMOUNT, help="Amount won on heads")
    voi.add_argument("--lose", type=float, default=config.LOSE_AMOUNT, help="Amount lost on tails")
    voi.add_argument("--p-heads", type=float, default=config.P_HEADS, help="Probability of heads")
    voi.add_argument(
        "--repetitions", type=int, default=config.N_REPETITIONS, help="Number of flips"
    )
    voi.add_argument(
        "--max-price",
        type=int,
        default=config.MAX_PRICE,
        help="Largest willingness-to-pay threshold and quoted price",
    )
    voi.add_argument("--plot", type=Path, default=None, help="Save the profit curve here")
    voi.set_defaults(func=run_voi)

    profit = sub.add_parser("profit", parents=[common], help="Annual profit Monte Carlo")
    profit.add_argument("--samples", type=int, default=config.N_SAMPLES, help="Number of draws")
    profit.add_argument(
        "--labor-cost", type=float, default=config.LABOR_COST, help="Annual labor cost"
    )
    profit.add_argument("--plot", type=Path, default=None, help="Save the histogram here")
    profit.set_defaults(func=run_profit)

    pct = sub.add_parser(
        "percentiles", parents=[common], help="Fit a distribution to two percentiles"
    )
    pct.add_argument("--low", type=float, required=True, help="Value at the lower percentile")
    pct.add_argument("--high", type=float, required=True, help="Value at the upper percentile")
    pct.add_argument("--p-low", type=float, default=config.P_LOW, help="Lower percentile")
    pct.add_argument("--p-high", type=float, default=config.P_HIGH, help="Upper percentile")
    pct.add_argument("--lognormal", action="store_true", help="Fit a log-normal instead")
    pct.add_argument("--samples", type=int, default=config.N_SAMPLES, help="Number of draws")
    pct.add_argument("--plot", type=Path, default=None, help="Save the histogram here")
    pct.set_defaults(func=run_percentiles)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = get_logger(log_path=args.log_file)
    logger.info(f"RUN START command={args.command} seed={args.seed}")

    try:
        results = args.func(args)
    except ValueError as exc:
        parser.error(str(exc))

    # Output JSON to stdout
    print("\n" + "=" * 40)
    print("JSON Output:")
    print(json.dumps(results, indent=2))

    logger.info("RUN END")


if __name__ == "__main__":
    main()
