"""Shared utility functions for planetjax.

Provides the degree/radian helpers behind the ``use_degrees`` keyword and
angle range reduction.
"""

from planetjax.utils._angle import from_radians, to_radians, wrap_to_180

__all__ = [
    "from_radians",
    "to_radians",
    "wrap_to_180",
]
