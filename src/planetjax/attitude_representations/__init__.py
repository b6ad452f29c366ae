"""Elementary rotation matrices.

Re-exports :func:`Rx` and :func:`Rz`, the two axis rotations needed to
carry orbital-plane coordinates into the ecliptic and the ecliptic into the
ICRF.
"""

from .rotation_matrices import (
    Rx,
    Rz,
)

__all__ = [
    "Rx",
    "Rz",
]
