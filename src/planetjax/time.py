"""Time scale helpers for the planetary position model.

The JPL element rates are expressed per Julian century past J2000.0, so
every query reduces its instant to a Julian Ephemeris Date and then to
Julian centuries.  Instants enter the model as milliseconds since the Unix
epoch; UTC is used directly as an approximation of TT, which shifts the
result by about a minute of time and is far below the accuracy of the
element sets.
"""

from __future__ import annotations

import datetime

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import (
    DAYS_PER_JULIAN_CENTURY,
    JD_J2000,
    JD_MJD_OFFSET,
    JD_UNIX_EPOCH,
    MS_PER_DAY,
)

_UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def unix_millis_to_jd(unix_millis: ArrayLike) -> jax.Array:
    """Convert milliseconds since the Unix epoch to a Julian Ephemeris Date.

    Args:
        unix_millis (ArrayLike): Milliseconds since 1970-01-01 00:00:00 UTC.

    Returns:
        Julian Ephemeris Date.
    """
    unix_millis = jnp.asarray(unix_millis, dtype=get_dtype())
    return unix_millis / 1000.0 / 86400.0 + JD_UNIX_EPOCH


def jd_to_unix_millis(jd: ArrayLike) -> jax.Array:
    """Convert a Julian Date to milliseconds since the Unix epoch.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        Milliseconds since 1970-01-01 00:00:00 UTC.
    """
    jd = jnp.asarray(jd, dtype=get_dtype())
    return (jd - JD_UNIX_EPOCH) * MS_PER_DAY


def julian_centuries_from_j2000(jd: ArrayLike) -> jax.Array:
    """Compute Julian centuries elapsed since the J2000.0 epoch.

    Args:
        jd (ArrayLike): Julian Ephemeris Date.

    Returns:
        Julian centuries (T) from J2000.0. Negative before 2000-01-01 12:00.
    """
    jd = jnp.asarray(jd, dtype=get_dtype())
    return (jd - JD_J2000) / DAYS_PER_JULIAN_CENTURY


def datetime_to_unix_millis(dt: datetime.datetime) -> float:
    """Convert a ``datetime`` to milliseconds since the Unix epoch.

    Naive datetimes are interpreted as UTC.

    Args:
        dt (datetime.datetime): Instant to convert.

    Returns:
        float: Milliseconds since 1970-01-01 00:00:00 UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    delta = dt - _UNIX_EPOCH
    return (delta.days * 86400 + delta.seconds) * 1000.0 + delta.microseconds / 1000.0


def caldate_to_mjd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date to Modified Julian Date. Algorithm is only valid from year 1583 onward.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Modified Julian Date.

    References:

        1. Montenbruck, O., & Gill, E. (2012). *Satellite Orbits: Models, Methods and Applications*. Springer Science & Business Media.
    """
    year = jnp.asarray(year)
    month = jnp.asarray(month)

    is_jan_or_feb = month <= 2
    year = jnp.where(is_jan_or_feb, year - 1, year)
    month = jnp.where(is_jan_or_feb, month + 12, month)

    B = jnp.floor(year / 400) - jnp.floor(year / 100) + jnp.floor(year / 4)

    mjd = 365 * year - 679004 + B + jnp.floor(30.6001 * (month + 1)) + day

    frac_day = (hour + (minute + second / 60.0) / 60.0) / 24.0

    return jnp.floor(mjd).astype(get_dtype()) + frac_day


def caldate_to_jd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date to Julian Date.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Julian Date.
    """
    return mjd_to_jd(caldate_to_mjd(year, month, day, hour, minute, second))


def caldate_to_unix_millis(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a UTC calendar date to milliseconds since the Unix epoch.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Milliseconds since 1970-01-01 00:00:00 UTC.
    """
    return jd_to_unix_millis(caldate_to_jd(year, month, day, hour, minute, second))


def jd_to_mjd(jd: ArrayLike) -> jax.Array:
    """Convert Julian Date to Modified Julian Date.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        Modified Julian Date.
    """
    return jd - JD_MJD_OFFSET


def mjd_to_jd(mjd: ArrayLike) -> jax.Array:
    """Convert Modified Julian Date to Julian Date.

    Args:
        mjd (ArrayLike): Modified Julian Date.

    Returns:
        Julian Date.
    """
    return mjd + JD_MJD_OFFSET
