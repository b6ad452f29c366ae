import jax.numpy as jnp
import pytest

from planetjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    test_config.py switches to lower precisions inside its own tests; this
    fixture restores the default so every other test runs in float64, also
    under pytest-xdist where test order differs per worker.
    """
    set_dtype(jnp.float64)
