"""Value-of-Information Simulator

Small Monte Carlo helpers for an essay on expected opportunity loss.
Uses NumPy/SciPy for deterministic, reproducible simulations.
"""

__version__ = "0.1.0"
