"""
Numeric settings for the Doyle spiral solver.

Module-level constants hold the defaults; ``SolverConfig`` bundles them so a
solver can be built with a tighter tolerance or a different iteration cap
without touching global state.
"""
from dataclasses import dataclass

# Residual, determinant and domain tolerance.
EPSILON: float = 1e-10

# Upper bound on Newton-Raphson passes; well-posed (p, q) converge in < 15.
MAX_ITERATIONS: int = 100

# Starting guess for the seed point z * e^(it).
INITIAL_Z: float = 2.0
INITIAL_T: float = 0.0


@dataclass(frozen=True)
class SolverConfig:
    """Tolerance, iteration cap and starting guess for ``DoyleSolver``."""
    epsilon: float = EPSILON
    max_iterations: int = MAX_ITERATIONS
    initial_z: float = INITIAL_Z
    initial_t: float = INITIAL_T

    def __post_init__(self):
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {self.max_iterations}")
        if not self.initial_z > 0:
            raise ValueError(f"initial_z must be positive, got {self.initial_z}")
