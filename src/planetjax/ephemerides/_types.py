"""Type definitions for the Keplerian element tables.

- :class:`OrbitalElementRow`: one body's element coefficients.
- :class:`OrbitalElementTable`: an ordered, immutable collection of rows.
- :class:`Body`: body identifiers, usable as positional indices into
  either bundled table.
- :class:`EvaluatedElements`: elements evaluated at one instant, a
  :class:`~typing.NamedTuple` and therefore a JAX pytree.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, NamedTuple

import numpy as np
from jax import Array

# Alternative spellings accepted for the Earth-Moon barycenter row
_NAME_ALIASES = {
    "earth": "em bary",
    "emb": "em bary",
    "earth-moon barycenter": "em bary",
}


def _canonical_name(name: str) -> str:
    key = " ".join(name.strip().lower().split())
    return _NAME_ALIASES.get(key, key)


class BodyIndexError(IndexError):
    """Raised when a body index falls outside an element table."""


class OrbitalElementRow(NamedTuple):
    """Keplerian elements of one body and their secular rates.

    Angles are in degrees, ``a0`` in AU; rates are per Julian century past
    J2000.0.  ``b``, ``c``, ``s`` and ``f`` are the extra terms of the mean
    anomaly for Jupiter through Pluto over 3000 BC - 3000 AD and are zero
    elsewhere.

    Attributes:
        name: Body name as printed in the JPL table.
        a0: Semi-major axis. Units: *AU*
        e0: Eccentricity.
        I0: Inclination. Units: *deg*
        L0: Mean longitude. Units: *deg*
        W0: Longitude of perihelion. Units: *deg*
        O0: Longitude of the ascending node. Units: *deg*
        a_dot: Rate of ``a0``. Units: *AU/cy*
        e_dot: Rate of ``e0``. Units: *1/cy*
        I_dot: Rate of ``I0``. Units: *deg/cy*
        L_dot: Rate of ``L0``. Units: *deg/cy*
        W_dot: Rate of ``W0``. Units: *deg/cy*
        O_dot: Rate of ``O0``. Units: *deg/cy*
        b: Quadratic mean anomaly term. Units: *deg/cy^2*
        c: Cosine amplitude. Units: *deg*
        s: Sine amplitude. Units: *deg*
        f: Frequency of the periodic term. Units: *deg/cy*
    """

    name: str
    a0: float
    e0: float
    I0: float
    L0: float
    W0: float
    O0: float
    a_dot: float
    e_dot: float
    I_dot: float
    L_dot: float
    W_dot: float
    O_dot: float
    b: float = 0.0
    c: float = 0.0
    s: float = 0.0
    f: float = 0.0

    @property
    def coefficients(self) -> tuple[float, ...]:
        """The 16 numeric fields, in declaration order."""
        return tuple(self[1:])


@dataclass(frozen=True)
class OrbitalElementTable:
    """Ordered, immutable table of Keplerian element rows.

    Rows are addressed positionally, normally through :class:`Body`.

    Attributes:
        name: Short table identifier.
        valid_from: First astronomical year of validity (3000 BC is ``-2999``).
        valid_to: Last astronomical year of validity.
        rows: The element rows, Mercury first.
    """

    name: str
    valid_from: int
    valid_to: int
    rows: tuple[OrbitalElementRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[OrbitalElementRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> OrbitalElementRow:
        return self.row(index)

    def check_index(self, index: int) -> int:
        """Validate a concrete body index.

        Accepts Python and NumPy integers, :class:`Body` members and 0-d
        NumPy or JAX arrays.

        Args:
            index: Position in the table, or a :class:`Body`.

        Returns:
            int: The index as a plain integer.

        Raises:
            TypeError: If ``index`` is not a scalar.
            BodyIndexError: If ``index`` is outside ``[0, len(self))``.
        """
        if np.ndim(index) != 0:
            raise TypeError(f"Body index must be a scalar, got shape {np.shape(index)}")
        i = int(index)
        if not 0 <= i < len(self.rows):
            raise BodyIndexError(
                f"Body index {i} out of range for table {self.name!r} "
                f"with {len(self.rows)} rows"
            )
        return i

    def row(self, index: int) -> OrbitalElementRow:
        """Return the row at ``index``.

        Raises:
            BodyIndexError: If ``index`` is out of range.
        """
        return self.rows[self.check_index(index)]

    def index_of(self, name: str) -> int:
        """Return the position of the row called ``name``.

        Matching ignores case and repeated whitespace; ``"Earth"`` and
        ``"EMB"`` resolve to the Earth-Moon barycenter.

        Raises:
            KeyError: If no row has that name.
        """
        key = _canonical_name(name)
        for i, row in enumerate(self.rows):
            if _canonical_name(row.name) == key:
                return i
        raise KeyError(f"No body named {name!r} in table {self.name!r}")

    @cached_property
    def coefficients(self) -> np.ndarray:
        """Read-only ``(n, 16)`` float64 matrix of the row coefficients."""
        matrix = np.array([row.coefficients for row in self.rows], dtype=np.float64)
        matrix.flags.writeable = False
        return matrix


class Body(enum.IntEnum):
    """Bodies of the JPL approximate element tables, in table order."""

    MERCURY = 0
    VENUS = 1
    EMB = 2
    MARS = 3
    JUPITER = 4
    SATURN = 5
    URANUS = 6
    NEPTUNE = 7
    PLUTO = 8

    @classmethod
    def from_name(cls, name: str) -> Body:
        """Resolve a body from its name.

        Accepts enum member names and the JPL table spellings, ignoring
        case (``"mars"``, ``"EM Bary"``, ``"Earth"``).

        Raises:
            KeyError: If the name is not recognised.
        """
        key = _canonical_name(name)
        if key == "em bary":
            return cls.EMB
        try:
            return cls[key.upper()]
        except KeyError:
            raise KeyError(f"Unknown body {name!r}") from None


class EvaluatedElements(NamedTuple):
    """Osculating elements of one body at one instant.

    Attributes:
        a: Semi-major axis. Units: *AU*
        e: Eccentricity.
        incl: Inclination. Units: *deg*
        mean_lon: Mean longitude. Units: *deg*
        lon_peri: Longitude of perihelion. Units: *deg*
        lon_node: Longitude of the ascending node. Units: *deg*
        arg_peri: Argument of perihelion, ``lon_peri - lon_node``. Units: *deg*
        mean_anom: Mean anomaly, reduced to ``[-180, 180]``. Units: *deg*
    """

    a: Array
    e: Array
    incl: Array
    mean_lon: Array
    lon_peri: Array
    lon_node: Array
    arg_peri: Array
    mean_anom: Array
