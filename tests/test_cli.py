"""Tests for the command-line interface."""

import json

import pytest

from voi_sim.cli import build_parser, main


def _json_block(out: str) -> dict:
    return json.loads(out.split("JSON Output:\n", 1)[1])


def test_parser_defaults():
    args = build_parser().parse_args(["voi"])

    assert args.command == "voi"
    assert args.win == 200.0
    assert args.lose == 100.0


def test_cli_voi(capsys, tmp_path):
    """Test the voi subcommand prints results and writes the plot."""
    plot = tmp_path / "voi.png"

    main(
        [
            "voi",
            "--seed",
            "1",
            "--win",
            "50",
            "--lose",
            "1000",
            "--repetitions",
            "20000",
            "--max-price",
            "60",
            "--plot",
            str(plot),
        ]
    )

    out = capsys.readouterr().out
    assert "Value of Information Results" in out
    data = _json_block(out)
    assert data["expected_opportunity_loss"] == pytest.approx(25.0)
    assert 0 <= data["best_threshold"] <= 60
    assert plot.exists()


def test_cli_profit(capsys):
    main(["profit", "--seed", "3", "--samples", "2000"])

    data = _json_block(capsys.readouterr().out)
    assert data["samples"] == 2000
    assert 0.0 <= data["summary"]["prob_loss"] <= 1.0


def test_cli_percentiles(capsys):
    main(["percentiles", "--low", "10", "--high", "90", "--lognormal", "--samples", "50000"])

    data = _json_block(capsys.readouterr().out)
    assert data["family"] == "lognormal"
    assert data["empirical"][0] == pytest.approx(10.0, rel=0.05)
    assert data["empirical"][1] == pytest.approx(90.0, rel=0.05)


def test_cli_rejects_degenerate_bounds():
    with pytest.raises(SystemExit):
        main(["percentiles", "--low", "5", "--high", "5"])


def test_cli_log_file(tmp_path, capsys):
    log_path = tmp_path / "logs" / "run.log"

    main(["voi", "--log-file", str(log_path), "--repetitions", "1000", "--max-price", "10"])

    assert "RUN END" in log_path.read_text(encoding="utf-8")


def test_cli_seed_after_subcommand(capsys):
    """Test --seed is accepted after each subcommand and fixes the output."""
    argv = ["voi", "--repetitions", "1000", "--max-price", "10", "--seed", "3"]

    main(argv)
    first = _json_block(capsys.readouterr().out)
    main(argv)
    second = _json_block(capsys.readouterr().out)

    assert first == second
    assert first["expected_value_with_information"] == pytest.approx(100.0)

    main(["profit", "--samples", "100", "--seed", "3"])
    assert _json_block(capsys.readouterr().out)["samples"] == 100


def test_parser_seed_default_per_subcommand():
    args = build_parser().parse_args(["percentiles", "--low", "1", "--high", "2"])

    assert args.seed == 12345
    assert args.log_file is None
