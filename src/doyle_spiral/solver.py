import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .config import SolverConfig
from .derivatives import co_root_dt, co_root_dz, radius_ratio_squared_dt, radius_ratio_squared_dz
from .errors import (
    DomainCollapseError,
    InvalidSpiralIndexError,
    NonConvergenceError,
    RootNotFoundError,
    SingularJacobianError,
)
from .primitives import co_root, radius_ratio_squared

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class RootResult:
    """Outcome of the Newton-Raphson search: either a root or the error that stopped it."""
    ok: bool
    z: Optional[float] = None
    t: Optional[float] = None
    r: Optional[float] = None
    iterations: int = 0
    error: Optional[RootNotFoundError] = None


@dataclass(frozen=True)
class SpiralSolution:
    """Geometric parameters of a solved Doyle spiral."""
    p: int
    q: int
    a: Point
    b: Point
    r: float
    mod_a: float
    arg_a: float
    iterations: int = 0

    @property
    def a_complex(self) -> complex:
        return complex(*self.a)

    @property
    def b_complex(self) -> complex:
        return complex(*self.b)

    def to_dict(self) -> Dict[str, Any]:
        """
        Returns the solution in the mapping form the circle generator consumes.

        Returns:
            A dictionary with keys 'a', 'b' (complex centres), 'r', 'mod_a' and 'arg_a'.
        """
        return {
            "a": self.a_complex,
            "b": self.b_complex,
            "r": self.r,
            "mod_a": self.mod_a,
            "arg_a": self.arg_a,
        }


class DoyleSolver:
    """
    Finds the seed point of a Doyle spiral by 2D Newton-Raphson.

    We want (z, t) such that

        R(z, t, 0, 1) = R(z, t, p, q) = R(w, s, 0, 1)

    where R is ``radius_ratio_squared`` and (w, s) is the (p, q) image of the
    seed. ``residuals`` defines f and g to vanish when these equalities hold.
    The solver keeps no state besides its configuration, so one instance can
    serve any number of (p, q) pairs.
    """
    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    @staticmethod
    def residuals(p: int, q: int, z: float, t: float) -> Tuple[float, float]:
        """Values of f and g at (z, t)."""
        w, s = co_root(z, t, p, q)
        base = radius_ratio_squared(z, t, 0, 1)
        f = base - radius_ratio_squared(z, t, p, q)
        g = base - radius_ratio_squared(w, s, 0, 1)
        return f, g

    @staticmethod
    def jacobian(p: int, q: int, z: float, t: float) -> np.ndarray:
        """The 2x2 matrix [[df/dz, df/dt], [dg/dz, dg/dt]] at (z, t)."""
        w, s = co_root(z, t, p, q)
        base_dz = radius_ratio_squared_dz(z, t, 0, 1)
        base_dt = radius_ratio_squared_dt(z, t, 0, 1)
        # w depends only on z and s only on t, so each chain factor is a scalar
        return np.array([
            [base_dz - radius_ratio_squared_dz(z, t, p, q),
             base_dt - radius_ratio_squared_dt(z, t, p, q)],
            [base_dz - radius_ratio_squared_dz(w, s, 0, 1) * co_root_dz(z, p, q),
             base_dt - radius_ratio_squared_dt(w, s, 0, 1) * co_root_dt(p, q)],
        ])

    def find_root(self, p: int, q: int) -> RootResult:
        """
        Runs Newton-Raphson from the configured starting guess.

        Args:
            p: The p parameter of the spiral.
            q: The q parameter of the spiral (nonzero).

        Returns:
            A RootResult. On failure ``ok`` is False and ``error`` holds a
            SingularJacobianError, DomainCollapseError or NonConvergenceError.

        Raises:
            InvalidSpiralIndexError: If q is zero.
        """
        if q == 0:
            raise InvalidSpiralIndexError(p, q)

        eps = self.config.epsilon
        # numpy scalars turn overflow and 0 ** -x into inf/NaN instead of raising
        z, t = np.float64(self.config.initial_z), np.float64(self.config.initial_t)

        with np.errstate(all="ignore"):
            for iteration in range(1, self.config.max_iterations + 1):
                v_f, v_g = self.residuals(p, q, z, t)
                if abs(v_f) < eps and abs(v_g) < eps:
                    r = float(np.sqrt(radius_ratio_squared(z, t, 0, 1)))
                    logger.info("Converged for p=%s, q=%s after %d iterations: z=%.12g, t=%.12g, r=%.12g",
                                p, q, iteration, z, t, r)
                    return RootResult(ok=True, z=float(z), t=float(t), r=r, iterations=iteration)

                (a, b), (c, d) = self.jacobian(p, q, z, t)
                det = a * d - b * c
                logger.debug("p=%s q=%s iter %d: z=%.17g t=%.17g f=%.3e g=%.3e det=%.3e",
                             p, q, iteration, z, t, v_f, v_g, det)
                if abs(det) < eps:
                    return self._failure(SingularJacobianError(p, q, float(z), float(t), float(det)), iteration)

                # Cramer's rule for J * delta = (f, g)
                z = z - (d * v_f - b * v_g) / det
                t = t - (a * v_g - c * v_f) / det

                # NaN also lands here
                if not z >= eps:
                    return self._failure(DomainCollapseError(p, q, float(z), float(t)), iteration)

        return self._failure(NonConvergenceError(p, q, float(z), float(t), self.config.max_iterations),
                             self.config.max_iterations)

    @staticmethod
    def _failure(error: RootNotFoundError, iterations: int) -> RootResult:
        logger.warning("%s", error)
        return RootResult(ok=False, iterations=iterations, error=error)

    def solve(self, p: int, q: int) -> SpiralSolution:
        """
        Solves the Doyle system for a given (p, q).

        Args:
            p: The p parameter of the spiral.
            q: The q parameter of the spiral (nonzero).

        Returns:
            A SpiralSolution with centres 'a' and 'b', ratio 'r' and the seed's polar form.

        Raises:
            InvalidSpiralIndexError: If q is zero.
            RootNotFoundError: If the iteration fails; the subclass names the reason.
        """
        root = self.find_root(p, q)
        if not root.ok:
            raise root.error

        z, t = root.z, root.t
        w, s = co_root(z, t, p, q)
        return SpiralSolution(
            p=p,
            q=q,
            a=(float(z * np.cos(t)), float(z * np.sin(t))),
            b=(float(w * np.cos(s)), float(w * np.sin(s))),
            r=root.r,
            mod_a=z,
            arg_a=t,
            iterations=root.iterations,
        )


def doyle(p: int, q: int, config: Optional[SolverConfig] = None) -> SpiralSolution:
    """Solves the Doyle spiral for (p, q); see ``DoyleSolver.solve``."""
    return DoyleSolver(config).solve(p, q)
