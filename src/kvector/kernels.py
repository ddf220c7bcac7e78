# kvector/kernels.py
import logging
import time

import numpy as np
from numba import njit

logger = logging.getLogger(__name__)

# error_model="numpy" lets float division by zero produce inf/nan
# instead of raising ZeroDivisionError.


@njit(error_model="numpy")
def dot3(ax, ay, az, bx, by, bz):
    """
    Three-term dot product, accumulated from the last term forward.
    """
    acc = az * bz
    acc = ay * by + acc
    return ax * bx + acc


@njit(error_model="numpy")
def dot4(ax, ay, az, aw, bx, by, bz, bw):
    """
    Four-term dot product, accumulated from the last term forward.
    """
    acc = aw * bw
    acc = az * bz + acc
    acc = ay * by + acc
    return ax * bx + acc


@njit(error_model="numpy")
def cross3(ax, ay, az, bx, by, bz):
    """
    Determinant expansion of a x b, returned as an (x, y, z) tuple.
    """
    return (
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    )


@njit(error_model="numpy")
def reciprocal(value):
    # 1/0 -> inf, 1/-0 -> -inf
    return np.float64(1.0) / np.float64(value)


@njit(error_model="numpy")
def round_half_away(value):
    """
    Round to the nearest integer value, halves away from zero.
    The sign of zero is kept; inf and nan pass through unchanged.
    """
    r = np.trunc(value)
    # inf - inf is nan, and nan >= 0.5 is False
    if np.abs(value - r) >= 0.5:
        r += np.copysign(1.0, value)
    return r


def warmup():
    """
    Compile every kernel for float64 arguments so the first vector
    operation does not pay the JIT cost.
    """
    start = time.perf_counter()
    dot3(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    dot4(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    cross3(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    reciprocal(1.0)
    round_half_away(0.0)
    logger.debug("kvector kernels ready in %.3fs", time.perf_counter() - start)
