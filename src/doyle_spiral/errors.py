"""Exceptions raised by the Doyle spiral solver."""
from typing import Optional


class DoyleSpiralError(Exception):
    """Base class for all solver failures; carries the offending (p, q)."""
    def __init__(self, p: int, q: int, message: Optional[str] = None):
        self.p = p
        self.q = q
        super().__init__(message or f"Doyle spiral error for p={p}, q={q}")

    def _init_args(self) -> tuple:
        return (self.p, self.q, str(self))

    def __reduce__(self):
        # Rebuild through __init__ so the payload survives pickling
        return (type(self), self._init_args())


class InvalidSpiralIndexError(DoyleSpiralError, ValueError):
    """Raised when (p, q) cannot index a spiral, i.e. q == 0."""
    def __init__(self, p: int, q: int):
        super().__init__(p, q, f"Invalid spiral index p={p}, q={q}: q must be nonzero")

    def _init_args(self) -> tuple:
        return (self.p, self.q)


class RootNotFoundError(DoyleSpiralError):
    """The Newton-Raphson iteration terminated without a root."""
    reason = "no root"

    def __init__(self, p: int, q: int, z: float, t: float):
        self.z = z
        self.t = t
        super().__init__(p, q, f"Failed to find root for p={p}, q={q} ({self.reason} at z={z}, t={t})")

    def _init_args(self) -> tuple:
        return (self.p, self.q, self.z, self.t)


class SingularJacobianError(RootNotFoundError):
    """The Jacobian determinant fell within epsilon of zero."""
    reason = "singular Jacobian"

    def __init__(self, p: int, q: int, z: float, t: float, det: float):
        self.det = det
        super().__init__(p, q, z, t)

    def _init_args(self) -> tuple:
        return (self.p, self.q, self.z, self.t, self.det)


class DomainCollapseError(RootNotFoundError):
    """An update drove the radius z to (or below) zero, or to NaN."""
    reason = "radius collapsed"


class NonConvergenceError(RootNotFoundError):
    """The iteration cap was reached before the residuals vanished."""
    reason = "no convergence"

    def __init__(self, p: int, q: int, z: float, t: float, iterations: int):
        self.iterations = iterations
        super().__init__(p, q, z, t)

    def _init_args(self) -> tuple:
        return (self.p, self.q, self.z, self.t, self.iterations)
