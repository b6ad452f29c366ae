"""Kepler's equation for elliptical heliocentric orbits.

This module provides the forward Kepler equation and a Newton-Raphson
solver for its inverse, the eccentric anomaly.  The solver works in
degrees throughout, as the JPL approximate-position algorithm does: the
eccentricity is rescaled to a degree factor ``e* = (180/pi) * e`` so that
``E - e* sin(E) = M`` holds with ``E`` and ``M`` in degrees.

The iteration is implemented with ``jax.lax.while_loop``, so it is
compatible with ``jax.jit``, ``jax.vmap`` and batched inputs. Inputs are
coerced to the configured float dtype (see :func:`planetjax.config.set_dtype`).
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import jax
import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from planetjax.config import get_dtype, get_kepler_tolerance
from planetjax.constants import DEG2RAD, KEPLER_MAX_ITERATIONS, RAD2DEG
from planetjax.utils import from_radians, to_radians

logger = logging.getLogger(__name__)


class KeplerSolution(NamedTuple):
    """Result of a Kepler equation solve.

    Attributes:
        anomaly: Eccentric anomaly. Units: *deg*
        iterations: Number of Newton-Raphson steps taken.
        converged: ``True`` if the last step changed the anomaly by no more
            than the tolerance.
    """

    anomaly: Array
    iterations: Array
    converged: Array


def _log_non_convergence(converged, iterations, anm_mean, e) -> None:
    converged = np.asarray(converged)
    if np.all(converged):
        return
    failed = np.flatnonzero(~converged.ravel())
    first = failed[0]
    logger.warning(
        "Kepler solver did not converge in %d iterations for %d input(s) "
        "(first: M=%.6f deg, e=%.6f); returning last iterate",
        int(np.max(iterations)),
        failed.size,
        float(np.asarray(anm_mean).ravel()[first]),
        float(np.asarray(e).ravel()[first]),
    )


def solve_kepler_equation(
    anm_mean: ArrayLike,
    e: ArrayLike,
    tol: float | None = None,
    max_iter: int = KEPLER_MAX_ITERATIONS,
) -> KeplerSolution:
    """Solve Kepler's equation for the eccentric anomaly, in degrees.

    Starting from ``E0 = M + e* sin(M)``, applies the Newton-Raphson update

        ``dM = M - (E - e* sin(E))``,  ``dE = dM / (1 - e cos(E))``

    until ``|dE| <= tol`` or ``max_iter`` steps have been taken.  At least one
    step is always taken.  The last iterate is returned whether or not the
    tolerance was met; exhausting the iteration cap logs a warning.

    Args:
        anm_mean: Mean anomaly. Units: *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.
        tol: Convergence tolerance on the anomaly update. Units: *deg*.
            Defaults to :func:`planetjax.config.get_kepler_tolerance`
            (``1e-5`` at float64).
        max_iter: Iteration cap. Default: ``1000``

    Returns:
        KeplerSolution: eccentric anomaly, iteration count and convergence flag.

    Examples:
        ```python
        from planetjax.orbits import solve_kepler_equation
        sol = solve_kepler_equation(84.27042, 0.1)
        sol.anomaly, sol.converged
        ```
    """
    _float = get_dtype()
    M = jnp.asarray(anm_mean, dtype=_float)
    e = jnp.asarray(e, dtype=_float)
    M, e = jnp.broadcast_arrays(M, e)
    if tol is None:
        tol = get_kepler_tolerance()
    tol = _float(tol)

    e_star = RAD2DEG * e
    E0 = M + e_star * jnp.sin(M * DEG2RAD)

    def cond(carry):
        i, _, dE = carry
        return (i < max_iter) & jnp.any(dE > tol)

    def newton_step(carry):
        i, E, dE_prev = carry
        dM = M - (E - e_star * jnp.sin(E * DEG2RAD))
        dE = dM / (1.0 - e * jnp.cos(E * DEG2RAD))
        # Elements that already converged keep their iterate
        active = dE_prev > tol
        E = jnp.where(active, E + dE, E)
        dE = jnp.where(active, jnp.abs(dE), dE_prev)
        return i + 1, E, dE

    init = (jnp.int32(0), E0, jnp.full_like(E0, jnp.inf))
    iterations, E, dE = jax.lax.while_loop(cond, newton_step, init)

    converged = dE <= tol
    jax.debug.callback(_log_non_convergence, converged, iterations, M, e)

    return KeplerSolution(E, iterations, converged)


def solve_eccentric_anomaly(
    anm_mean: ArrayLike,
    e: ArrayLike,
    tol: float | None = None,
    max_iter: int = KEPLER_MAX_ITERATIONS,
) -> Array:
    """Convert mean anomaly to eccentric anomaly, in degrees.

    Thin wrapper around :func:`solve_kepler_equation` returning only the
    anomaly.

    Args:
        anm_mean: Mean anomaly. Units: *deg*
        e: Eccentricity. Dimensionless.
        tol: Convergence tolerance. Units: *deg*
        max_iter: Iteration cap. Default: ``1000``

    Returns:
        Eccentric anomaly. Units: *deg*

    Examples:
        ```python
        from planetjax.orbits import solve_eccentric_anomaly
        E = solve_eccentric_anomaly(84.27042, 0.1)
        ```
    """
    return solve_kepler_equation(anm_mean, e, tol, max_iter).anomaly


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = True) -> Array:
    """Convert eccentric anomaly to mean anomaly.

    Applies Kepler's equation: ``M = E - e * sin(E)``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *deg* or *rad*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True`` (default), input and output are in degrees.

    Returns:
        Mean anomaly. Units: *deg* or *rad*

    References:
        O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
        Applications*, 2012. Eq. 2.65.
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    M = E - e * jnp.sin(E)
    return from_radians(M, use_degrees)
