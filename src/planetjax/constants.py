"""
The `constants` module defines the mathematical, time, and astronomical constants used by the planetary position model.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Time Constants

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5  # Offset between Julian Date and Modified Julian Date

"""
Julian Date of the Unix epoch (1970-01-01 00:00:00 UTC). Units: *days*
"""
JD_UNIX_EPOCH = 2440587.5

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
JD_J2000 = 2451545.0

"""
Number of days in a Julian century. Units: *days*
"""
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Number of milliseconds in a day. Units: *ms*
"""
MS_PER_DAY = 86400000.0

# Astronomical Constants
"""
Mean obliquity of the ecliptic at J2000 used by the JPL approximate planetary
position algorithm. Units: *deg*

References:

1. E.M. Standish & J.G. Williams, *Keplerian Elements for Approximate Positions of the Major Planets*
"""
OBLIQUITY_J2000_DEG = 23.43928

# Kepler Solver Constants
"""
Default convergence tolerance of the Kepler equation solver at float64. Units: *deg*
"""
KEPLER_TOLERANCE_DEG = 10e-6

"""
Maximum number of Newton-Raphson iterations taken by the Kepler equation solver.
"""
KEPLER_MAX_ITERATIONS = 1000
