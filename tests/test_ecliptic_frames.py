"""Tests for orbital-plane, ecliptic and ICRF frame transformations."""

import jax
import jax.numpy as jnp
import pytest

from planetjax.constants import DEG2RAD, OBLIQUITY_J2000_DEG
from planetjax.ephemerides import EvaluatedElements
from planetjax.frames import (
    EclipticPosition,
    IcrfPosition,
    position_ecliptic_to_icrf,
    position_elements_to_ecliptic,
    position_icrf_to_ecliptic,
    rotation_ecliptic_to_icrf,
    rotation_icrf_to_ecliptic,
    rotation_orbital_to_ecliptic,
)

_EPS = OBLIQUITY_J2000_DEG * DEG2RAD


def _elements(a=1.5, e=0.09, incl=1.85, arg_peri=-73.5, lon_node=49.56, mean_anom=20.0):
    lon_peri = arg_peri + lon_node
    return EvaluatedElements(
        a=jnp.asarray(a),
        e=jnp.asarray(e),
        incl=jnp.asarray(incl),
        mean_lon=jnp.asarray(mean_anom + lon_peri),
        lon_peri=jnp.asarray(lon_peri),
        lon_node=jnp.asarray(lon_node),
        arg_peri=jnp.asarray(arg_peri),
        mean_anom=jnp.asarray(mean_anom),
    )


def _closed_form_ecliptic(el, E_deg):
    """Explicit three-angle Euler composition applied to orbital-plane coordinates."""
    E = E_deg * DEG2RAD
    x1 = el.a * (jnp.cos(E) - el.e)
    y1 = el.a * jnp.sqrt(1.0 - el.e**2) * jnp.sin(E)
    cw, sw = jnp.cos(el.arg_peri * DEG2RAD), jnp.sin(el.arg_peri * DEG2RAD)
    cO, sO = jnp.cos(el.lon_node * DEG2RAD), jnp.sin(el.lon_node * DEG2RAD)
    cI, sI = jnp.cos(el.incl * DEG2RAD), jnp.sin(el.incl * DEG2RAD)
    x = (cw * cO - sw * sO * cI) * x1 + (-sw * cO - cw * sO * cI) * y1
    y = (cw * sO + sw * cO * cI) * x1 + (-sw * sO + cw * cO * cI) * y1
    z = (sw * sI) * x1 + (cw * sI) * y1
    return jnp.array([x, y, z])


# ---------------------------------------------------------------------------
# Orbital plane -> ecliptic
# ---------------------------------------------------------------------------


class TestOrbitalToEcliptic:
    def test_rotation_orthogonality(self):
        R = rotation_orbital_to_ecliptic(-73.5, 17.14, 110.3)
        assert R.shape == (3, 3)
        assert jnp.allclose(R @ R.T, jnp.eye(3), atol=1e-12)
        assert jnp.allclose(jnp.linalg.det(R), 1.0, atol=1e-12)

    def test_zero_angles_is_identity(self):
        assert jnp.allclose(rotation_orbital_to_ecliptic(0.0, 0.0, 0.0), jnp.eye(3), atol=1e-15)

    @pytest.mark.parametrize("E", [-170.0, -45.0, 0.0, 33.0, 120.0, 180.0])
    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"a": 0.387, "e": 0.2056, "incl": 7.005, "arg_peri": 29.12, "lon_node": 48.33},
            {"a": 39.48, "e": 0.2488, "incl": 17.14, "arg_peri": 113.76, "lon_node": 110.30},
            {"a": 1.0, "e": 0.0167, "incl": -0.00001531, "arg_peri": 102.94, "lon_node": 0.0},
        ],
    )
    def test_matches_closed_form(self, E, kwargs):
        el = _elements(**kwargs)
        r = position_elements_to_ecliptic(el, E)
        assert isinstance(r, EclipticPosition)
        assert jnp.allclose(r.to_array(), _closed_form_ecliptic(el, jnp.asarray(E)), atol=1e-12)

    @pytest.mark.parametrize("E", [-120.0, 0.0, 75.0, 180.0])
    def test_rotation_preserves_orbital_radius(self, E):
        el = _elements()
        r = position_elements_to_ecliptic(el, E)
        expected = el.a * (1.0 - el.e * jnp.cos(E * DEG2RAD))
        assert float(r.norm()) == pytest.approx(float(expected), rel=1e-12)

    def test_perihelion_direction(self):
        """At E=0 the body lies at perihelion, at ecliptic longitude lon_peri for I=0."""
        el = _elements(incl=0.0, arg_peri=30.0, lon_node=40.0)
        r = position_elements_to_ecliptic(el, 0.0)
        lon = jnp.degrees(jnp.arctan2(r.y, r.x))
        assert float(lon) == pytest.approx(70.0, abs=1e-9)
        assert float(r.z) == pytest.approx(0.0, abs=1e-15)
        assert float(r.norm()) == pytest.approx(1.5 * (1.0 - 0.09), rel=1e-12)

    def test_zero_inclination_stays_in_plane(self):
        r = position_elements_to_ecliptic(_elements(incl=0.0), 57.0)
        assert float(r.z) == 0.0

    def test_batched_rotation_matches_per_angle(self):
        arg_peri = jnp.array([-73.5, 29.12, 113.76])
        incl = jnp.array([1.85, 7.005, 17.14])
        lon_node = jnp.array([49.56, 48.33, 110.30])
        R = rotation_orbital_to_ecliptic(arg_peri, incl, lon_node)
        assert R.shape == (3, 3, 3)
        for i in range(3):
            single = rotation_orbital_to_ecliptic(arg_peri[i], incl[i], lon_node[i])
            assert jnp.allclose(R[i], single, atol=1e-15)

    @pytest.mark.parametrize("n", [2, 3, 4])
    def test_array_elements_match_closed_form(self, n):
        el = _elements(
            a=jnp.linspace(0.4, 30.0, n),
            e=jnp.linspace(0.01, 0.25, n),
            incl=jnp.linspace(0.5, 17.0, n),
            arg_peri=jnp.linspace(-170.0, 150.0, n),
            lon_node=jnp.linspace(5.0, 130.0, n),
        )
        E = jnp.linspace(-120.0, 175.0, n)
        r = position_elements_to_ecliptic(el, E)
        assert r.to_array().shape == (n, 3)
        assert jnp.allclose(r.to_array(), _closed_form_ecliptic(el, E).T, atol=1e-12)

    def test_jit_compatible(self):
        el = _elements()
        eager = position_elements_to_ecliptic(el, 42.0).to_array()
        jitted = jax.jit(position_elements_to_ecliptic)(el, 42.0).to_array()
        assert jnp.allclose(eager, jitted, atol=1e-12)


# ---------------------------------------------------------------------------
# Ecliptic <-> ICRF
# ---------------------------------------------------------------------------


class TestEclipticIcrfRotation:
    def test_matrices_are_transposes(self):
        assert jnp.allclose(rotation_ecliptic_to_icrf(), rotation_icrf_to_ecliptic().T, atol=1e-15)

    def test_orthogonality(self):
        R = rotation_ecliptic_to_icrf()
        assert jnp.allclose(R @ R.T, jnp.eye(3), atol=1e-12)
        assert jnp.allclose(jnp.linalg.det(R), 1.0, atol=1e-12)

    def test_elements(self):
        c, s = jnp.cos(_EPS), jnp.sin(_EPS)
        expected = jnp.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
        assert jnp.allclose(rotation_ecliptic_to_icrf(), expected, atol=1e-15)

    def test_position_formula(self):
        r_ecl = EclipticPosition(jnp.asarray(0.3), jnp.asarray(-0.9), jnp.asarray(0.05))
        r = position_ecliptic_to_icrf(r_ecl)
        assert isinstance(r, IcrfPosition)
        c, s = jnp.cos(_EPS), jnp.sin(_EPS)
        assert float(r.x) == 0.3
        assert float(r.y) == pytest.approx(float(c * -0.9 - s * 0.05), abs=1e-15)
        assert float(r.z) == pytest.approx(float(s * -0.9 + c * 0.05), abs=1e-15)

    def test_x_axis_unchanged(self):
        r = position_ecliptic_to_icrf([1.0, 0.0, 0.0])
        assert jnp.allclose(r.to_array(), jnp.array([1.0, 0.0, 0.0]), atol=1e-15)

    def test_ecliptic_pole_maps_to_tilted_pole(self):
        r = position_ecliptic_to_icrf([0.0, 0.0, 1.0])
        assert float(r.z) == pytest.approx(float(jnp.cos(_EPS)), abs=1e-15)
        assert float(r.y) == pytest.approx(-float(jnp.sin(_EPS)), abs=1e-15)

    @pytest.mark.parametrize("v", [[1.0, 2.0, 3.0], [-5.2, 0.1, 0.0], [0.0, -30.0, 9.0]])
    def test_magnitude_preserved(self, v):
        r = position_ecliptic_to_icrf(v)
        assert float(r.norm()) == pytest.approx(float(jnp.linalg.norm(jnp.array(v))), rel=1e-14)

    def test_roundtrip(self):
        v = jnp.array([0.4, -1.2, 0.07])
        back = position_icrf_to_ecliptic(position_ecliptic_to_icrf(v))
        assert isinstance(back, EclipticPosition)
        assert jnp.allclose(back.to_array(), v, atol=1e-15)

    def test_batched_positions(self):
        v = jnp.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        r = position_ecliptic_to_icrf(v)
        assert r.x.shape == (3,)
        assert jnp.allclose(r.to_array(), v @ rotation_ecliptic_to_icrf().T, atol=1e-15)


class TestPositionTypes:
    def test_icrf_position_rejected_by_ecliptic_to_icrf(self):
        r_icrf = IcrfPosition(jnp.asarray(1.0), jnp.asarray(0.0), jnp.asarray(0.0))
        with pytest.raises(TypeError, match="EclipticPosition"):
            position_ecliptic_to_icrf(r_icrf)

    def test_ecliptic_position_rejected_by_icrf_to_ecliptic(self):
        r_ecl = EclipticPosition(jnp.asarray(1.0), jnp.asarray(0.0), jnp.asarray(0.0))
        with pytest.raises(TypeError, match="IcrfPosition"):
            position_icrf_to_ecliptic(r_ecl)

    def test_plain_tuple_accepted(self):
        r = position_ecliptic_to_icrf((0.0, 0.0, 1.0))
        assert float(r.z) == pytest.approx(float(jnp.cos(_EPS)), abs=1e-15)

    def test_fields_by_name(self):
        r = EclipticPosition(jnp.asarray(1.0), jnp.asarray(2.0), jnp.asarray(2.0))
        assert float(r.y) == 2.0
        assert float(r.norm()) == pytest.approx(3.0)
        assert r.to_array().shape == (3,)

    def test_is_pytree(self):
        r = IcrfPosition(jnp.asarray(1.0), jnp.asarray(2.0), jnp.asarray(3.0))
        doubled = jax.tree_util.tree_map(lambda c: 2.0 * c, r)
        assert isinstance(doubled, IcrfPosition)
        assert float(doubled.z) == 6.0
