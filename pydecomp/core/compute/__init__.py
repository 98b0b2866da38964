"""
Shared compute infrastructure for pydecomp.

This module provides timing utilities, convergence constants and the
leaf linear algebra kernels shared by every decomposition.

IMPORTANT: This is NOT where the decompositions live. Those go in
pydecomp.decomposition. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Convergence constants
    linalg: Householder, Givens and triangular kernels
"""

from pydecomp.core.compute.timing import Timer
from pydecomp.core.compute.tolerances import (
    BALANCE_IMPROVEMENT,
    BALANCE_RADIX,
    EIGEN_DEFLATION_EPS,
    cast_literal,
    machine_eps,
    min_positive,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "BALANCE_IMPROVEMENT",
    "BALANCE_RADIX",
    "EIGEN_DEFLATION_EPS",
    "cast_literal",
    "machine_eps",
    "min_positive",
]
