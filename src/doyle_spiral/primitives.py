"""
Closed-form geometry of two circles on a Doyle spiral.

One circle is centred at z*e^(it) (the base spiral, exponent 0/1), the other
at its image under the (p, q) spiral map. Every function takes the same
(z, t, p, q) signature and works elementwise on floats or numpy arrays.
z must be positive so that z ** (p / q) stays real.
"""
from typing import Tuple, Union

import numpy as np

# Scalars or numpy arrays broadcast together
Real = Union[float, np.ndarray]


def co_root(z: Real, t: Real, p: int, q: int) -> Tuple[Real, Real]:
    """Modulus and argument of the image of z*e^(it) under the (p, q) map."""
    w = z ** (p / q)
    s = (p * t + 2 * np.pi) / q
    return w, s


def squared_distance(z: Real, t: Real, p: int, q: int) -> Real:
    # Squared distance between z*e^(it) and w*e^(is)
    w, s = co_root(z, t, p, q)
    return (z * np.cos(t) - w * np.cos(s))**2 + (z * np.sin(t) - w * np.sin(s))**2


def squared_radius_sum(z: Real, t: Real, p: int, q: int) -> Real:
    # Squared sum of the two origin distances; t only keeps the signature uniform
    return (z + z ** (p / q)) ** 2


def radius_ratio_squared(z: Real, t: Real, p: int, q: int) -> Real:
    """
    Square of the radius ratio implied by touching circles centred at
    z*e^(it) and its (p, q) image.

    Circles whose radii are r times their origin distance touch exactly when
    r equals the square root of this value.
    """
    return squared_distance(z, t, p, q) / squared_radius_sum(z, t, p, q)
