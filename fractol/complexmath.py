"""Complex arithmetic for the escape-time fractal iteration."""

from __future__ import annotations

import math


def step(z: complex, c: complex) -> complex:
    """One iteration of the quadratic map: ``z * z + c``."""
    z = complex(z)
    c = complex(c)
    x, y = z.real, z.imag
    return complex(x * x - y * y + c.real, 2 * x * y + c.imag)


def magnitude(z: complex) -> float:
    """The modulus of ``z``."""
    z = complex(z)
    return math.sqrt(z.real * z.real + z.imag * z.imag)


def iterate(z: complex, c: complex, max_iter: int, bound: float) -> int:
    """Count the steps taken before ``z`` leaves the disc of radius ``bound``.

    The step that escapes is not counted. Returns ``max_iter`` when ``z``
    stays inside for all of them, and 0 when ``max_iter`` is not positive.
    """
    count = 0
    while count < max_iter:
        z = step(z, c)
        if magnitude(z) > bound:
            break
        count += 1
    return count