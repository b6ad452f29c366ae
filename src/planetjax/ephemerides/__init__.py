"""Approximate planetary ephemerides from JPL Keplerian elements.

Provides:

- **Element tables**: ``JPL_1800_2050`` (Table 1) and ``JPL_3000BC_3000AD``
  (Tables 2a/2b), with :class:`Body` identifiers for their rows.
- **Element evaluation**: elements of a body at an instant.
- **Positions**: heliocentric positions in the ecliptic and ICRF frames.
"""

from ._jpl_planetary_coefficients import JPL_1800_2050, JPL_3000BC_3000AD
from ._types import (
    Body,
    BodyIndexError,
    EvaluatedElements,
    OrbitalElementRow,
    OrbitalElementTable,
)
from .elements import evaluate_elements, normalize_mean_anomaly
from .planetary_ephemerides import (
    compute_ecliptic_coordinates,
    convert_to_icrf,
    planet_position_icrf,
    planet_positions_ecliptic,
)

__all__ = [
    "Body",
    "BodyIndexError",
    "EvaluatedElements",
    "JPL_1800_2050",
    "JPL_3000BC_3000AD",
    "OrbitalElementRow",
    "OrbitalElementTable",
    "compute_ecliptic_coordinates",
    "convert_to_icrf",
    "evaluate_elements",
    "normalize_mean_anomaly",
    "planet_position_icrf",
    "planet_positions_ecliptic",
]
