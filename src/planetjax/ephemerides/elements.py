"""Evaluation of time-varying Keplerian elements.

Propagates a table row to an instant: every element moves linearly in
Julian centuries past J2000.0, and the mean anomaly picks up the periodic
correction terms of the long-baseline table.  All operations are
JAX-traceable, including a traced body index.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from planetjax.config import get_dtype
from planetjax.constants import DEG2RAD
from planetjax.ephemerides._types import EvaluatedElements, OrbitalElementTable
from planetjax.time import julian_centuries_from_j2000, unix_millis_to_jd
from planetjax.utils import wrap_to_180


def _coefficient_row(table: OrbitalElementTable, body) -> Array:
    coeffs = jnp.asarray(table.coefficients, dtype=get_dtype())
    if not isinstance(body, jax.core.Tracer):
        return coeffs[table.check_index(body)]
    # Traced indices cannot be bounds-checked
    return coeffs[body]


def normalize_mean_anomaly(anm_mean: ArrayLike) -> Array:
    """Bring a mean anomaly outside ``[-180, 180]`` back into that range.

    Values already inside the closed interval, including exactly -180 and
    180, are returned unchanged.  Other values are reduced modulo 360 with
    the sign of the dividend and then shifted once by 360 if needed.

    Args:
        anm_mean: Mean anomaly. Units: *deg*

    Returns:
        Mean anomaly in ``[-180, 180]``. Units: *deg*
    """
    M = jnp.asarray(anm_mean, dtype=get_dtype())
    outside = (M < -180.0) | (M > 180.0)
    return jnp.where(outside, wrap_to_180(M), M)


def evaluate_elements(
    table: OrbitalElementTable, body, instant_millis: ArrayLike
) -> EvaluatedElements:
    """Evaluate a body's osculating elements at an instant.

    Args:
        table: Keplerian element table.
        body: Row index into ``table``, typically a :class:`Body`. Concrete
            integers are bounds-checked; traced indices are not.
        instant_millis: Milliseconds since the Unix epoch (UTC).

    Returns:
        EvaluatedElements: Elements at the instant, angles in degrees.

    Raises:
        BodyIndexError: If a concrete ``body`` is outside the table.

    Examples:
        ```python
        from planetjax.ephemerides import JPL_1800_2050, Body, evaluate_elements
        el = evaluate_elements(JPL_1800_2050, Body.EMB, 946728000000)
        el.mean_anom  # -2.47311027
        ```
    """
    c = _coefficient_row(table, body)
    T = julian_centuries_from_j2000(unix_millis_to_jd(instant_millis))

    a = c[0] + c[6] * T          # semi-major axis (AU)
    e = c[1] + c[7] * T          # eccentricity
    incl = c[2] + c[8] * T       # inclination (deg)
    L = c[3] + c[9] * T          # mean longitude (deg)
    lon_peri = c[4] + c[10] * T  # longitude of perihelion (deg)
    lon_node = c[5] + c[11] * T  # longitude of ascending node (deg)
    b, cos_amp, sin_amp, f = c[12], c[13], c[14], c[15]

    arg_peri = lon_peri - lon_node

    fT = f * T * DEG2RAD
    M = L - lon_peri + b * T**2 + cos_amp * jnp.cos(fT) + sin_amp * jnp.sin(fT)
    M = normalize_mean_anomaly(M)

    return EvaluatedElements(a, e, incl, L, lon_peri, lon_node, arg_peri, M)
