"""
Stride helpers for strided array APIs.
"""


def stride2offset(N: int, stride: int) -> int:
    """
    Return the index of the first indexed element for a given stride.

    A negative stride walks a buffer from its end back to index 0, so the
    first visited element sits at ``(1 - N) * stride``.

    Args:
        N: Number of indexed elements
        stride: Stride length

    Returns:
        Starting index

    Example:
        >>> stride2offset(4, -2)
        6
        >>> stride2offset(4, 2)
        0
    """
    if stride < 0:
        return (1 - N) * stride
    return 0
