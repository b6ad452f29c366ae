"""Position value types for the ecliptic and ICRF frames.

Both are :class:`~typing.NamedTuple` instances, which JAX treats as pytrees
automatically, so they pass through ``jax.jit`` and ``jax.vmap`` unchanged.
Components are named rather than positional; the frame is carried by the
type.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array


class EclipticPosition(NamedTuple):
    """Position in the J2000 mean ecliptic frame.

    Attributes:
        x: Component towards the J2000 vernal equinox. Units: *AU*
        y: Component in the ecliptic plane, 90 deg east of ``x``. Units: *AU*
        z: Component towards the north ecliptic pole. Units: *AU*
    """

    x: Array
    y: Array
    z: Array

    def to_array(self) -> Array:
        """Stack the components into an array with trailing dimension 3."""
        return jnp.stack([self.x, self.y, self.z], axis=-1)

    def norm(self) -> Array:
        """Distance from the origin. Units: *AU*"""
        return jnp.sqrt(self.x**2 + self.y**2 + self.z**2)


class IcrfPosition(NamedTuple):
    """Position in the ICRF (J2000 mean equator) frame.

    Attributes:
        x: Component towards the J2000 vernal equinox. Units: *AU*
        y: Component in the equatorial plane, 90 deg east of ``x``. Units: *AU*
        z: Component towards the north celestial pole. Units: *AU*
    """

    x: Array
    y: Array
    z: Array

    def to_array(self) -> Array:
        """Stack the components into an array with trailing dimension 3."""
        return jnp.stack([self.x, self.y, self.z], axis=-1)

    def norm(self) -> Array:
        """Distance from the origin. Units: *AU*"""
        return jnp.sqrt(self.x**2 + self.y**2 + self.z**2)
