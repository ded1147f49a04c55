"""
Sum of absolute values using BLAS-style stride semantics.
"""

from typing import Any

from .ndarray import gasum_ndarray
from .strides import stride2offset


def gasum(N: int, x: Any, stride: int) -> float:
    """
    Compute the sum of absolute values.

    For a negative stride the indexed elements are visited from the end of
    ``x`` back to its first element.

    Args:
        N: Number of indexed elements
        x: Input array
        stride: ``x`` stride length

    Returns:
        Sum of absolute values

    Example:
        >>> gasum(3, [1.0, -2.0, 3.0, -4.0, 5.0], -2)
        9.0
    """
    return gasum_ndarray(N, x, stride, stride2offset(N, stride))
