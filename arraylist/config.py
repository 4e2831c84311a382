"""
Package-wide defaults.

Both values can be overridden from the environment before the package is
imported:

- ``ARRAYLIST_DEFAULT_CAPACITY``: slots allocated by ``ArrayList()``.
- ``ARRAYLIST_GROWTH_FACTOR``: multiplier applied when the buffer is full.
"""

import os


def _int_from_env(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


# Initial allocated capacity for a list created without an explicit one.
DEFAULT_CAPACITY: int = _int_from_env("ARRAYLIST_DEFAULT_CAPACITY", 100, 0)

# Capacity multiplier used when an append finds the buffer full.
GROWTH_FACTOR: int = _int_from_env("ARRAYLIST_GROWTH_FACTOR", 2, 2)
