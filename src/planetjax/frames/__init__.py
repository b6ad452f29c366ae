"""Frame transformations.

This sub-module provides the fixed rotations used to carry a heliocentric
position from a body's orbital plane into the J2000 mean ecliptic frame and
from there into the ICRF (J2000 mean equator) frame.
"""

from ._types import EclipticPosition, IcrfPosition
from .ecliptic import (
    position_ecliptic_to_icrf,
    position_elements_to_ecliptic,
    position_icrf_to_ecliptic,
    rotation_ecliptic_to_icrf,
    rotation_icrf_to_ecliptic,
    rotation_orbital_to_ecliptic,
)

__all__ = [
    "EclipticPosition",
    "IcrfPosition",
    "position_ecliptic_to_icrf",
    "position_elements_to_ecliptic",
    "position_icrf_to_ecliptic",
    "rotation_ecliptic_to_icrf",
    "rotation_icrf_to_ecliptic",
    "rotation_orbital_to_ecliptic",
]
