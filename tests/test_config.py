"""Tests for the planetjax.config module."""

import jax
import jax.numpy as jnp
import pytest

from planetjax.config import get_dtype, get_kepler_tolerance, set_dtype
from planetjax.ephemerides import JPL_1800_2050, Body, compute_ecliptic_coordinates
from planetjax.orbits import solve_kepler_equation
from planetjax.time import unix_millis_to_jd

pytestmark = pytest.mark.order("first")


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float64 before and after each test."""
    set_dtype(jnp.float64)
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_import_enables_x64(self):
        assert jax.config.jax_enable_x64
        assert jnp.asarray(1.0, dtype=jnp.float64).dtype == jnp.float64

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float64")


class TestKeplerTolerance:
    def test_float64_tolerance(self):
        assert get_kepler_tolerance() == pytest.approx(1e-5)

    def test_float32_tolerance(self):
        set_dtype(jnp.float32)
        assert get_kepler_tolerance() == pytest.approx(1e-3)

    @pytest.mark.parametrize("dtype", [jnp.float16, jnp.bfloat16])
    def test_half_precision_tolerance(self, dtype):
        set_dtype(dtype)
        assert get_kepler_tolerance() == pytest.approx(0.1)


class TestDtypePropagation:
    def test_time_conversion_dtype(self):
        set_dtype(jnp.float32)
        assert unix_millis_to_jd(0.0).dtype == jnp.float32

    def test_kepler_converges_in_float32(self):
        set_dtype(jnp.float32)
        sol = solve_kepler_equation(84.27042, 0.1)
        assert sol.anomaly.dtype == jnp.float32
        assert bool(sol.converged)
        assert float(sol.anomaly) == pytest.approx(90.0, abs=1e-2)

    def test_position_dtype_float64(self):
        r = compute_ecliptic_coordinates(JPL_1800_2050, Body.EMB, 946728000000)
        assert r.x.dtype == jnp.float64
