"""
Sum of absolute values for accessor-protocol arrays.
"""

from .arraylike import ArrayObject


def gasum(N: int, x: ArrayObject, stride: int, offset: int) -> float:
    """
    Compute the sum of absolute values of an accessor-protocol array.

    Every indexed element is read through the array's getter, one at a time,
    since a read may be arbitrarily expensive.

    Args:
        N: Number of indexed elements
        x: Adapter object for the input array
        stride: Stride length
        offset: Starting index

    Returns:
        Sum of absolute values
    """
    xbuf = x.data
    get = x.accessors[0]

    total = 0.0
    ix = offset
    for _ in range(N):
        total += abs(float(get(xbuf, ix)))
        ix += stride
    return total
