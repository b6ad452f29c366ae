"""Tests for the elementary rotation matrices."""

import jax
import jax.numpy as jnp
import pytest

from planetjax.attitude_representations import Rx, Rz


@pytest.mark.parametrize("R", [Rx, Rz])
@pytest.mark.parametrize("angle", [0.0, 23.43928, 90.0, -135.0, 270.0])
def test_orthonormal(R, angle):
    M = R(angle, use_degrees=True)
    assert M.shape == (3, 3)
    assert jnp.allclose(M @ M.T, jnp.eye(3), atol=1e-12)
    assert jnp.allclose(jnp.linalg.det(M), 1.0, atol=1e-12)


@pytest.mark.parametrize("R", [Rx, Rz])
def test_degrees_matches_radians(R):
    assert jnp.allclose(R(30.0, use_degrees=True), R(jnp.pi / 6.0), atol=1e-12)


@pytest.mark.parametrize("R", [Rx, Rz])
def test_negative_angle_is_transpose(R):
    assert jnp.allclose(R(-40.0, use_degrees=True), R(40.0, use_degrees=True).T, atol=1e-12)


def test_Rx_90():
    expected = jnp.array([[1.0, 0.0, 0.0],
                          [0.0, 0.0, 1.0],
                          [0.0, -1.0, 0.0]])
    assert jnp.allclose(Rx(90.0, use_degrees=True), expected, atol=1e-12)


def test_Rz_90():
    expected = jnp.array([[0.0, 1.0, 0.0],
                          [-1.0, 0.0, 0.0],
                          [0.0, 0.0, 1.0]])
    assert jnp.allclose(Rz(90.0, use_degrees=True), expected, atol=1e-12)


def test_Rz_passive_convention():
    # Rotating the frame by +90 deg about z moves the x-axis vector to -y
    v = Rz(90.0, use_degrees=True) @ jnp.array([1.0, 0.0, 0.0])
    assert jnp.allclose(v, jnp.array([0.0, -1.0, 0.0]), atol=1e-12)


def test_jit_compatible():
    angle = 0.3
    assert jnp.allclose(jax.jit(Rx)(angle), Rx(angle), atol=1e-12)
    assert jnp.allclose(jax.jit(Rz)(angle), Rz(angle), atol=1e-12)


def test_vmap_over_angles():
    angles = jnp.linspace(-jnp.pi, jnp.pi, 5)
    mats = jax.vmap(Rz)(angles)
    assert mats.shape == (5, 3, 3)
    assert jnp.allclose(mats[2], Rz(angles[2]), atol=1e-12)
