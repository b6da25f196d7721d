"""Numerics for Doyle spirals."""

from .config import SolverConfig
from .errors import (
    DoyleSpiralError,
    InvalidSpiralIndexError,
    RootNotFoundError,
    SingularJacobianError,
    DomainCollapseError,
    NonConvergenceError
)
from .primitives import co_root, squared_distance, squared_radius_sum, radius_ratio_squared
from .solver import DoyleSolver, RootResult, SpiralSolution, doyle

__all__ = [
    'SolverConfig',
    'DoyleSpiralError',
    'InvalidSpiralIndexError',
    'RootNotFoundError',
    'SingularJacobianError',
    'DomainCollapseError',
    'NonConvergenceError',
    'co_root',
    'squared_distance',
    'squared_radius_sum',
    'radius_ratio_squared',
    'DoyleSolver',
    'RootResult',
    'SpiralSolution',
    'doyle'
]
