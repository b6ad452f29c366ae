"""
planetjax computes approximate positions of the major planets from the JPL low-precision Keplerian elements, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    JD_MJD_OFFSET,
    JD_UNIX_EPOCH,
    JD_J2000,
    OBLIQUITY_J2000_DEG,
)

from .attitude_representations import (
    Rx,
    Rz
)

from .config import set_dtype, get_dtype

from .time import (
    unix_millis_to_jd,
    jd_to_unix_millis,
    julian_centuries_from_j2000,
    datetime_to_unix_millis,
    caldate_to_jd,
    caldate_to_unix_millis,
)

from .orbits import (
    KeplerSolution,
    solve_kepler_equation,
    solve_eccentric_anomaly,
    anomaly_eccentric_to_mean,
)

from .frames import (
    EclipticPosition,
    IcrfPosition,
    rotation_ecliptic_to_icrf,
    rotation_icrf_to_ecliptic,
    position_ecliptic_to_icrf,
    position_icrf_to_ecliptic,
)

from .ephemerides import (
    Body,
    BodyIndexError,
    EvaluatedElements,
    OrbitalElementRow,
    OrbitalElementTable,
    JPL_1800_2050,
    JPL_3000BC_3000AD,
    evaluate_elements,
    compute_ecliptic_coordinates,
    convert_to_icrf,
    planet_position_icrf,
    planet_positions_ecliptic,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "JD_MJD_OFFSET",
    "JD_UNIX_EPOCH",
    "JD_J2000",
    "OBLIQUITY_J2000_DEG",
    # Rotations
    "Rx",
    "Rz",
    # Config
    "set_dtype",
    "get_dtype",
    # Time
    "unix_millis_to_jd",
    "jd_to_unix_millis",
    "julian_centuries_from_j2000",
    "datetime_to_unix_millis",
    "caldate_to_jd",
    "caldate_to_unix_millis",
    # Kepler
    "KeplerSolution",
    "solve_kepler_equation",
    "solve_eccentric_anomaly",
    "anomaly_eccentric_to_mean",
    # Frames
    "EclipticPosition",
    "IcrfPosition",
    "rotation_ecliptic_to_icrf",
    "rotation_icrf_to_ecliptic",
    "position_ecliptic_to_icrf",
    "position_icrf_to_ecliptic",
    # Ephemerides
    "Body",
    "BodyIndexError",
    "EvaluatedElements",
    "OrbitalElementRow",
    "OrbitalElementTable",
    "JPL_1800_2050",
    "JPL_3000BC_3000AD",
    "evaluate_elements",
    "compute_ecliptic_coordinates",
    "convert_to_icrf",
    "planet_position_icrf",
    "planet_positions_ecliptic",
]
