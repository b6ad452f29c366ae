# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "planetjax"]
#
# [tool.uv.sources]
# planetjax = { path = ".." }
# ///
"""Print approximate heliocentric positions of the major planets.

Evaluates every body of the selected JPL element table at one UTC instant
and prints its ecliptic and ICRF position, heliocentric distance and
ecliptic longitude.  Optionally tabulates one body over a range of days
using the vmap'd batch evaluation.

Requires planetjax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/planet_positions.py [OPTIONS]

Examples:
    # All bodies at J2000.0
    uv run examples/planet_positions.py --time 2000-01-01T12:00:00

    # All bodies from the 3000 BC - 3000 AD table
    uv run examples/planet_positions.py --time 2024-06-15 --table long

    # Mars every 10 days for a year
    uv run examples/planet_positions.py --time 2024-01-01 --body mars --days 365 --step 10
"""

import datetime
import enum
import logging
import sys
from typing import Annotated

import jax.numpy as jnp
import typer

from planetjax import set_dtype
from planetjax.ephemerides import (
    JPL_1800_2050,
    JPL_3000BC_3000AD,
    Body,
    compute_ecliptic_coordinates,
    convert_to_icrf,
    planet_positions_ecliptic,
)
from planetjax.time import datetime_to_unix_millis

set_dtype(jnp.float64)  # Must be before any JIT compilation


class Table(enum.StrEnum):
    """Keplerian element table."""

    short = "short"
    long = "long"


_TABLES = {
    Table.short: JPL_1800_2050,
    Table.long: JPL_3000BC_3000AD,
}


def _print_all(table, millis: float) -> None:
    print(f"{'body':<10}{'x_ecl':>12}{'y_ecl':>12}{'z_ecl':>12}{'x_icrf':>12}{'y_icrf':>12}{'z_icrf':>12}{'r [AU]':>10}{'lon':>9}")
    for body in Body:
        r_ecl = compute_ecliptic_coordinates(table, body, millis)
        r_icrf = convert_to_icrf(r_ecl)
        lon = float(jnp.degrees(jnp.arctan2(r_ecl.y, r_ecl.x))) % 360.0
        print(
            f"{table.row(body).name:<10}"
            f"{float(r_ecl.x):12.6f}{float(r_ecl.y):12.6f}{float(r_ecl.z):12.6f}"
            f"{float(r_icrf.x):12.6f}{float(r_icrf.y):12.6f}{float(r_icrf.z):12.6f}"
            f"{float(r_ecl.norm()):10.5f}{lon:9.3f}"
        )


def main(
    time: Annotated[str, typer.Option(help="UTC instant, ISO 8601 (e.g. 2024-06-15T00:00:00)")] = "2000-01-01T12:00:00",
    table: Annotated[Table, typer.Option(help="short: 1800-2050 AD, long: 3000 BC-3000 AD")] = Table.short,
    body: Annotated[str | None, typer.Option(help="Tabulate a single body over time")] = None,
    days: Annotated[float, typer.Option(help="Tabulation span in days (with --body)")] = 365.0,
    step: Annotated[float, typer.Option(help="Tabulation step in days (with --body)")] = 10.0,
    verbose: Annotated[bool, typer.Option(help="Show solver warnings")] = False,
) -> None:
    """Print approximate heliocentric planetary positions."""
    logging.basicConfig(level=logging.WARNING if verbose else logging.ERROR)

    elements = _TABLES[table]
    dt = datetime.datetime.fromisoformat(time)
    millis = datetime_to_unix_millis(dt)

    year = dt.year
    if not elements.valid_from <= year <= elements.valid_to:
        print(f"WARNING: {year} is outside the validity span of table {elements.name!r}")

    if body is None:
        print(f"Heliocentric positions at {dt.isoformat()} UTC ({elements.name})\n")
        _print_all(elements, millis)
        return

    try:
        target = Body.from_name(body)
    except KeyError:
        print(f"ERROR: unknown body {body!r}. Choose from: {', '.join(b.name.lower() for b in Body)}")
        sys.exit(1)

    offsets = jnp.arange(0.0, days + step / 2.0, step)
    instants = millis + offsets * 86400000.0
    positions = planet_positions_ecliptic(elements, target, instants)

    print(f"{elements.row(target).name} from {dt.isoformat()} UTC every {step:g} days ({elements.name})\n")
    print(f"{'day':>8}{'x_ecl':>12}{'y_ecl':>12}{'z_ecl':>12}{'r [AU]':>10}")
    for offset, r in zip(offsets.tolist(), positions):
        print(f"{offset:8.1f}{float(r[0]):12.6f}{float(r[1]):12.6f}{float(r[2]):12.6f}{float(jnp.linalg.norm(r)):10.5f}")


if __name__ == "__main__":
    typer.run(main)
