"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout planetjax.  The default is ``jnp.float64``: the mean longitude
rates of the inner planets reach ~1.5e5 degrees per century, so single
precision loses arcminutes over a few decades.  Selecting ``jnp.float64``
enables JAX's 64-bit mode (``jax_enable_x64``), which happens on import.

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from planetjax.constants import KEPLER_TOLERANCE_DEG

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float64
jax.config.update("jax_enable_x64", True)


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for planetjax.

    Must be called **before** any ``jax.jit`` compilation.  In eager mode
    the change takes effect immediately.  Under JIT, ``get_dtype()`` runs
    during tracing and its value is baked into the compiled program.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_kepler_tolerance() -> float:
    """Return the dtype-adaptive convergence tolerance of the Kepler solver.

    The tolerance scales with the precision of the configured float dtype so
    that the Newton-Raphson update can actually fall below it:

    - ``float16``:  0.1 deg
    - ``bfloat16``: 0.1 deg
    - ``float32``:  1e-3 deg
    - ``float64``:  1e-5 deg

    Returns:
        float: Tolerance in degrees.
    """
    if _dtype == jnp.float64:
        return KEPLER_TOLERANCE_DEG
    if _dtype == jnp.float32:
        return 1e-3
    # float16 and bfloat16
    return 0.1
