"""Keplerian orbit functions.

This sub-module provides Kepler's equation and its Newton-Raphson inverse,
working in degrees as the JPL approximate-position algorithm does.
"""

from .keplerian import (
    KeplerSolution,
    anomaly_eccentric_to_mean,
    solve_eccentric_anomaly,
    solve_kepler_equation,
)

__all__ = [
    "KeplerSolution",
    "anomaly_eccentric_to_mean",
    "solve_eccentric_anomaly",
    "solve_kepler_equation",
]
