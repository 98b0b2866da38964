"""
Convergence constants.

The iterative algorithms compare against thresholds that are defined as
double-precision literals and cast to the working dtype at use:

- Francis QR deflation uses a relative epsilon of 1e-20
- Golub-Reinsch deflation uses the dtype's smallest positive normal number
- Radix-2 balancing accepts a rescaling when it shrinks c² + r² below 95%

Entries that are negligible at working precision (a 2x2 block that is
already triangular, a diagonal entry of a bidiagonal matrix that is zero
next to the largest one) are judged against the dtype's machine epsilon.
"""

from typing import Any

import numpy as np


# Relative threshold for zeroing a sub-diagonal entry in the Francis iteration
EIGEN_DEFLATION_EPS = 1e-20

# Scaling radix for matrix balancing
BALANCE_RADIX = 2.0

# A balancing step is kept only if it reduces c² + r² below this fraction
BALANCE_IMPROVEMENT = 0.95


def cast_literal(value: float, dtype: np.dtype | type) -> np.floating[Any]:
    """Cast a double-precision literal to the working dtype."""
    return np.dtype(dtype).type(value)


def min_positive(dtype: np.dtype | type) -> np.floating[Any]:
    """Smallest positive normal number representable in dtype."""
    return np.finfo(dtype).tiny


def machine_eps(dtype: np.dtype | type) -> np.floating[Any]:
    """Spacing between 1 and the next representable number in dtype."""
    return np.finfo(dtype).eps
