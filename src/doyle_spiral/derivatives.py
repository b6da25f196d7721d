"""
Analytic partial derivatives of the primitives in ``primitives``.

Hand-derived by the chain rule through w = z ** (p / q) and
s = (p * t + 2 * pi) / q, so the Newton step sees exact slopes.
"""
import numpy as np

from .primitives import Real, co_root, squared_distance, squared_radius_sum


def co_root_dz(z: Real, p: int, q: int) -> Real:
    # dw/dz
    return (p / q) * z ** ((p - q) / q)


def co_root_dt(p: int, q: int) -> float:
    # ds/dt
    return p / q


def squared_distance_dz(z: Real, t: Real, p: int, q: int) -> Real:
    w, s = co_root(z, t, p, q)
    dw = co_root_dz(z, p, q)
    return (
        2 * (w * np.cos(s) - z * np.cos(t)) * (dw * np.cos(s) - np.cos(t))
        + 2 * (w * np.sin(s) - z * np.sin(t)) * (dw * np.sin(s) - np.sin(t))
    )


def squared_distance_dt(z: Real, t: Real, p: int, q: int) -> Real:
    w, s = co_root(z, t, p, q)
    ds = co_root_dt(p, q)
    return (
        2 * (z * np.cos(t) - w * np.cos(s)) * (-z * np.sin(t) + w * np.sin(s) * ds)
        + 2 * (z * np.sin(t) - w * np.sin(s)) * (z * np.cos(t) - w * np.cos(s) * ds)
    )


def squared_radius_sum_dz(z: Real, t: Real, p: int, q: int) -> Real:
    w = z ** (p / q)
    return 2 * (w + z) * (co_root_dz(z, p, q) + 1)


def squared_radius_sum_dt(z: Real, t: Real, p: int, q: int) -> float:
    """Always zero: the radius sum does not depend on the angle."""
    return 0.0


def radius_ratio_squared_dz(z: Real, t: Real, p: int, q: int) -> Real:
    num = squared_distance(z, t, p, q)
    den = squared_radius_sum(z, t, p, q)
    return (squared_distance_dz(z, t, p, q) * den - num * squared_radius_sum_dz(z, t, p, q)) / den**2


def radius_ratio_squared_dt(z: Real, t: Real, p: int, q: int) -> Real:
    # The num * d(den)/dt term of the quotient rule vanishes
    den = squared_radius_sum(z, t, p, q)
    return squared_distance_dt(z, t, p, q) * den / den**2
