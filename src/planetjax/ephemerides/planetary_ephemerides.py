"""Approximate heliocentric planetary positions using JPL Keplerian elements.

Provides heliocentric position vectors for the major planets, the
Earth-Moon barycenter and Pluto in the J2000 mean ecliptic and ICRF
frames.  Positions are computed from time-varying Keplerian elements and
are returned in astronomical units.

Accuracy over the valid date range of the 1800-2050 table is roughly
1 arcminute for the inner planets and up to 10 arcminutes for the outer
planets; the 3000 BC - 3000 AD table trades some of that for its span.

Note:
    Instants are milliseconds since the Unix epoch and UTC is used as an
    approximation of TT.

References:
    E.M. Standish & J.G. Williams, "Keplerian Elements for
    Approximate Positions of the Major Planets",
    https://ssd.jpl.nasa.gov/planets/approx_pos.html
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from planetjax.config import get_dtype
from planetjax.ephemerides._types import OrbitalElementTable
from planetjax.ephemerides.elements import evaluate_elements
from planetjax.frames import (
    EclipticPosition,
    IcrfPosition,
    position_ecliptic_to_icrf,
    position_elements_to_ecliptic,
)
from planetjax.orbits import solve_eccentric_anomaly


def compute_ecliptic_coordinates(
    table: OrbitalElementTable, body, instant_millis: ArrayLike
) -> EclipticPosition:
    """Heliocentric position of a body in the J2000 ecliptic frame.

    Evaluates the body's elements at the instant, solves Kepler's equation
    and rotates the orbital-plane position into the ecliptic.  An array of
    instants gives components of the same shape.

    Args:
        table: Keplerian element table, e.g. ``JPL_1800_2050``.
        body: Row index into ``table``, typically a :class:`Body`.
        instant_millis: Milliseconds since the Unix epoch (UTC).

    Returns:
        EclipticPosition: Heliocentric position. Units: *AU*

    Raises:
        BodyIndexError: If a concrete ``body`` is outside the table.

    Examples:
        ```python
        from planetjax.ephemerides import JPL_1800_2050, Body, compute_ecliptic_coordinates
        r = compute_ecliptic_coordinates(JPL_1800_2050, Body.MARS, 1718409600000)
        ```
    """
    elements = evaluate_elements(table, body, instant_millis)
    E = solve_eccentric_anomaly(elements.mean_anom, elements.e)
    return position_elements_to_ecliptic(elements, E)


def convert_to_icrf(r_ecl: EclipticPosition | ArrayLike) -> IcrfPosition:
    """Rotate an ecliptic position into the ICRF (J2000 equatorial) frame.

    Uses the JPL-specified obliquity of 23.43928 degrees.

    Args:
        r_ecl: Ecliptic position.

    Returns:
        IcrfPosition: Position in the ICRF frame, in the input's units.
    """
    return position_ecliptic_to_icrf(r_ecl)


def planet_position_icrf(
    table: OrbitalElementTable, body, instant_millis: ArrayLike
) -> IcrfPosition:
    """Heliocentric position of a body in the ICRF frame.

    Args:
        table: Keplerian element table.
        body: Row index into ``table``, typically a :class:`Body`.
        instant_millis: Milliseconds since the Unix epoch (UTC).

    Returns:
        IcrfPosition: Heliocentric position. Units: *AU*

    Examples:
        ```python
        from planetjax.ephemerides import JPL_1800_2050, Body, planet_position_icrf
        r = planet_position_icrf(JPL_1800_2050, Body.JUPITER, 1718409600000)
        ```
    """
    return convert_to_icrf(compute_ecliptic_coordinates(table, body, instant_millis))


def planet_positions_ecliptic(
    table: OrbitalElementTable, body, instants_millis: ArrayLike
) -> Array:
    """Heliocentric ecliptic positions of a body at many instants.

    Vectorised over the instants with ``jax.vmap``.

    Args:
        table: Keplerian element table.
        body: Row index into ``table``, typically a :class:`Body`.
        instants_millis: 1-D array of milliseconds since the Unix epoch.

    Returns:
        Positions with shape ``(N, 3)``. Units: *AU*
    """
    if not isinstance(body, jax.core.Tracer):
        body = table.check_index(body)
    instants = jnp.asarray(instants_millis, dtype=get_dtype())

    def _one(t):
        return compute_ecliptic_coordinates(table, body, t).to_array()

    return jax.vmap(_one)(instants)
