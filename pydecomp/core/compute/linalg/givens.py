"""Givens rotations."""

from typing import Any

import numpy as np


def givens_rot(a: Any, b: Any) -> tuple[Any, Any]:
    """
    Cosine and sine of the rotation that zeroes b in [a; b].

    Returns (c, s) = (a / r, -b / r) with r = hypot(a, b), so that
    [[c, -s], [s, c]] @ [a, b] = [r, 0] and [a, b] @ [[c, s], [-s, c]] = [r, 0].
    For a == b == 0 the rotation is the identity.
    """
    r = np.hypot(a, b)
    if r == 0:
        scalar = np.result_type(r).type
        return scalar(1), scalar(0)
    return a / r, -b / r
