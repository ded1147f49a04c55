"""
Sum of absolute values using alternative indexing semantics.

Operation: result = Σ|x[offset + i*stride]|, i in [0, N)

BLAS level 1 reduction. Contiguous data is reduced with a six-way unrolled
loop; the grouping of each block of six terms is part of the result's
rounding and is kept explicit.
"""

import logging
from typing import Any

from . import accessors
from .arraylike import arraylike2object

logger = logging.getLogger(__name__)

# Unroll factor for unit-stride reductions
M = 6


def gasum_ndarray(N: int, x: Any, stride: int, offset: int) -> float:
    """
    Compute the sum of absolute values.

    Args:
        N: Number of indexed elements
        x: Input array (sequence, NumPy array, or accessor-protocol array)
        stride: ``x`` stride length
        offset: Starting ``x`` index

    Returns:
        Sum of absolute values

    Example:
        >>> gasum_ndarray(5, [1.0, -2.0, 3.0, -4.0, 5.0], 1, 0)
        15.0
    """
    total = 0.0
    if N <= 0:
        return total

    o = arraylike2object(x)
    if o.accessor_protocol:
        logger.debug(
            "gasum: accessor path (N=%d, stride=%d, offset=%d)", N, stride, offset
        )
        return accessors.gasum(N, o, stride, offset)

    # Every read is promoted to float; NumPy scalars never enter the arithmetic
    ix = offset
    if stride == 0:
        logger.debug("gasum: zero-stride path (N=%d, offset=%d)", N, offset)
        return abs(float(x[ix]) * N)

    if stride == 1:
        logger.debug("gasum: unrolled path (N=%d, offset=%d)", N, offset)
        m = N % M

        # Clean-up loop for the remainder
        for _ in range(m):
            total += abs(float(x[ix]))
            ix += 1
        if N < M:
            return total

        for _ in range(m, N, M):
            total += (
                abs(float(x[ix]))
                + abs(float(x[ix + 1]))
                + abs(float(x[ix + 2]))
                + abs(float(x[ix + 3]))
                + abs(float(x[ix + 4]))
                + abs(float(x[ix + 5]))
            )
            ix += M
        return total

    logger.debug(
        "gasum: strided path (N=%d, stride=%d, offset=%d)", N, stride, offset
    )
    for _ in range(N):
        total += abs(float(x[ix]))
        ix += stride
    return total
