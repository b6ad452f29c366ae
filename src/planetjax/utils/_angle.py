"""Angle conversion and range-reduction helpers.

The conversion helpers wrap the ``use_degrees`` convention used throughout
planetjax, providing JAX-traceable degree/radian conversion via
``jnp.where``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def wrap_to_180(angle: ArrayLike) -> Array:
    """Reduce an angle in degrees to the interval ``[-180, 180]``.

    Takes the floating-point remainder by 360 with the sign of the dividend
    (C ``fmod``), then shifts once by 360 if the remainder is still outside
    the interval.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        Angle in degrees within ``[-180, 180]``.
    """
    r = jnp.fmod(angle, 360.0)
    r = jnp.where(r > 180.0, r - 360.0, r)
    return jnp.where(r < -180.0, r + 360.0, r)
