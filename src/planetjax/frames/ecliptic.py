"""Orbital-plane, ecliptic and ICRF frame transformations.

Provides the two fixed rotations of the JPL approximate-position
algorithm:

- **Orbital plane -> ecliptic**: the Euler sequence ``Rz(-Omega) Rx(-I) Rz(-omega)``
  built from the argument of perihelion, inclination and longitude of the
  ascending node.
- **Ecliptic -> ICRF**: a rotation about the x-axis by the J2000 mean
  obliquity used by JPL for these element sets, 23.43928 deg.

Both frames are inertial, so no epoch or Earth orientation data is needed.
Positions may be given as :class:`EclipticPosition` / :class:`IcrfPosition`
values or as arrays whose trailing dimension is 3.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from planetjax.attitude_representations import Rx, Rz
from planetjax.config import get_dtype
from planetjax.constants import DEG2RAD, OBLIQUITY_J2000_DEG
from planetjax.frames._types import EclipticPosition, IcrfPosition

if TYPE_CHECKING:
    from planetjax.ephemerides._types import EvaluatedElements


def _as_vector(r, frame: type) -> Array:
    if isinstance(r, (EclipticPosition, IcrfPosition)) and not isinstance(r, frame):
        raise TypeError(f"Expected {frame.__name__} or a plain array, got {type(r).__name__}")
    if isinstance(r, tuple):
        return jnp.stack([jnp.asarray(c, dtype=get_dtype()) for c in r], axis=-1)
    return jnp.asarray(r, dtype=get_dtype())


def rotation_orbital_to_ecliptic(
    arg_peri: ArrayLike, incl: ArrayLike, lon_node: ArrayLike, use_degrees: bool = True
) -> Array:
    """Compute the 3x3 rotation matrix from the orbital plane to the ecliptic.

    The orbital frame has its x-axis towards perihelion and its z-axis along
    the orbit normal.  The matrix is ``Rz(-lon_node) @ Rx(-incl) @ Rz(-arg_peri)``.
    Array-valued angles give a stack of matrices with shape ``(..., 3, 3)``.

    Args:
        arg_peri: Argument of perihelion.
        incl: Inclination to the ecliptic.
        lon_node: Longitude of the ascending node.
        use_degrees: If ``True`` (default), angles are in degrees.

    Returns:
        Rotation matrix (orbital plane -> ecliptic) with shape ``(..., 3, 3)``.
    """
    # Rx and Rz put the angle's batch axes last
    R_node, R_incl, R_peri = (
        jnp.moveaxis(R, (0, 1), (-2, -1))
        for R in (Rz(-lon_node, use_degrees), Rx(-incl, use_degrees), Rz(-arg_peri, use_degrees))
    )
    return R_node @ R_incl @ R_peri


def position_elements_to_ecliptic(elements: EvaluatedElements, anm_ecc: ArrayLike) -> EclipticPosition:
    """Heliocentric ecliptic position from evaluated elements and eccentric anomaly.

    Computes the orbital-plane coordinates

        ``x' = a (cos E - e)``,  ``y' = a sqrt(1 - e^2) sin E``,  ``z' = 0``

    and rotates them into the J2000 mean ecliptic frame.  Elements and
    anomaly may be arrays of matching shape, one position per entry.

    Args:
        elements: Evaluated osculating elements (angles in degrees, ``a`` in AU).
        anm_ecc: Eccentric anomaly. Units: *deg*

    Returns:
        EclipticPosition: Position in the ecliptic frame. Units: *AU*
    """
    _float = get_dtype()
    a = jnp.asarray(elements.a, dtype=_float)
    e = jnp.asarray(elements.e, dtype=_float)
    E = jnp.asarray(anm_ecc, dtype=_float) * DEG2RAD

    x_orb = a * (jnp.cos(E) - e)
    y_orb = a * jnp.sqrt(1.0 - e * e) * jnp.sin(E)
    r_orbital = jnp.stack([x_orb, y_orb, jnp.zeros_like(x_orb)], axis=-1)

    R = rotation_orbital_to_ecliptic(elements.arg_peri, elements.incl, elements.lon_node)
    r_ecl = jnp.einsum("...ij,...j->...i", R, r_orbital)

    return EclipticPosition(r_ecl[..., 0], r_ecl[..., 1], r_ecl[..., 2])


def rotation_ecliptic_to_icrf() -> Array:
    """Compute the 3x3 rotation matrix from ecliptic to ICRF.

    Returns the matrix ``Rx(-eps)`` where eps is the J2000 mean obliquity.

    Returns:
        3x3 rotation matrix (ecliptic -> ICRF).

    Examples:
        ```python
        from planetjax.frames import rotation_ecliptic_to_icrf
        R = rotation_ecliptic_to_icrf()
        R.shape
        ```
    """
    return Rx(-OBLIQUITY_J2000_DEG, use_degrees=True)


def rotation_icrf_to_ecliptic() -> Array:
    """Compute the 3x3 rotation matrix from ICRF to ecliptic.

    This is the transpose of :func:`rotation_ecliptic_to_icrf`.

    Returns:
        3x3 rotation matrix (ICRF -> ecliptic).
    """
    return Rx(OBLIQUITY_J2000_DEG, use_degrees=True)


def position_ecliptic_to_icrf(r_ecl: EclipticPosition | ArrayLike) -> IcrfPosition:
    """Rotate a position from the ecliptic to the ICRF frame.

    ``x`` is unchanged; ``y`` and ``z`` are rotated about the x-axis by the
    mean obliquity.

    Args:
        r_ecl: Ecliptic position, as an :class:`EclipticPosition` or an array
            with trailing dimension 3.

    Returns:
        IcrfPosition: Position in the ICRF frame, in the input's units.

    Raises:
        TypeError: If ``r_ecl`` is an :class:`IcrfPosition`.

    Examples:
        ```python
        from planetjax.frames import position_ecliptic_to_icrf
        r_icrf = position_ecliptic_to_icrf([1.0, 0.0, 0.0])
        ```
    """
    r = _as_vector(r_ecl, EclipticPosition) @ rotation_ecliptic_to_icrf().T
    return IcrfPosition(r[..., 0], r[..., 1], r[..., 2])


def position_icrf_to_ecliptic(r_icrf: IcrfPosition | ArrayLike) -> EclipticPosition:
    """Rotate a position from the ICRF to the ecliptic frame.

    Args:
        r_icrf: ICRF position, as an :class:`IcrfPosition` or an array with
            trailing dimension 3.

    Returns:
        EclipticPosition: Position in the ecliptic frame, in the input's units.

    Raises:
        TypeError: If ``r_icrf`` is an :class:`EclipticPosition`.
    """
    r = _as_vector(r_icrf, IcrfPosition) @ rotation_icrf_to_ecliptic().T
    return EclipticPosition(r[..., 0], r[..., 1], r[..., 2])
