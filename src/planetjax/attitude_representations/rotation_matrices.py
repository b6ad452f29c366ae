"""Elementary frame rotations about the coordinate axes.

Both matrices use the passive (frame) convention: applied to a vector's
components in the original frame, they return its components in a frame
rotated counter-clockwise by ``angle`` about the given axis.  Composing
them with negated angles therefore rotates a vector *into* a parent frame,
which is how orbital-plane coordinates are carried to the ecliptic.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from planetjax.config import get_dtype
from planetjax.utils import to_radians


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    return jnp.array([[ one, zero, zero],
                      [zero,   +c,   +s],
                      [zero,   -s,   +c]])


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    return jnp.array([[  +c,   +s, zero],
                      [  -s,   +c, zero],
                      [zero, zero,  one]])
