"""
gasum

Strided sum of absolute values (BLAS level 1 asum) for generic numeric
arrays: lists, tuples, array.array, NumPy arrays and views, and arrays
implementing the accessor protocol (``get``/``set``).

Example:
    >>> import numpy as np
    >>> import gasum as ga
    >>>
    >>> x = np.array([1.0, -2.0, 3.0, -4.0, 5.0])
    >>> print(ga.gasum(x.shape[0], x, 1))
    15.0
    >>> print(ga.gasum_ndarray(2, x, 2, 1))  # x[1], x[3]
    6.0
    >>>
    >>> view = ga.ComputedArray(lambda i: -float(i), 4)
    >>> ga.gasum(4, view, 1)
    6.0
"""

import logging

__version__ = "0.1.0"

# Core kernels
from .main import gasum
from .ndarray import gasum_ndarray

# Array adapters
from .arraylike import ArrayObject, arraylike2object, is_accessor_array
from .accessor_array import AccessorArray, ComputedArray

# Utilities
from .dtypes import DataType, resolve_dtype, validate_dtype
from .strides import stride2offset

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Kernels
    "gasum",
    "gasum_ndarray",
    # Adapters
    "ArrayObject",
    "arraylike2object",
    "is_accessor_array",
    "AccessorArray",
    "ComputedArray",
    # Utilities
    "DataType",
    "resolve_dtype",
    "validate_dtype",
    "stride2offset",
    # Metadata
    "__version__",
]
