"""
Data type utilities for strided arrays.

Provides data type enumeration, resolution and validation utilities.
"""

from enum import Enum
from typing import Any

import numpy as np


class DataType(Enum):
    """Data types understood by the array adapters."""

    FLOAT64 = "float64"
    FLOAT32 = "float32"
    FLOAT16 = "float16"
    INT64 = "int64"
    INT32 = "int32"
    INT16 = "int16"
    INT8 = "int8"
    UINT64 = "uint64"
    UINT32 = "uint32"
    UINT16 = "uint16"
    UINT8 = "uint8"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value


_VALID_DTYPES = {dt.value for dt in DataType}


def _dtype_name(value: Any) -> str:
    try:
        name = np.dtype(value).name
    except (TypeError, ValueError):
        return DataType.GENERIC.value
    if name not in _VALID_DTYPES:
        return DataType.GENERIC.value
    return name


def resolve_dtype(x: Any) -> str:
    """
    Resolve the data type name of an array-like object.

    Only attributes are inspected; elements are never read.

    Args:
        x: Array-like object (list, tuple, array.array, NumPy array, accessor array)

    Returns:
        Data type name, "generic" when the type cannot be determined.
    """
    dtype = getattr(x, "dtype", None)
    if dtype is not None:
        if isinstance(dtype, DataType):
            return dtype.value
        if isinstance(dtype, str) and dtype.lower() in _VALID_DTYPES:
            return dtype.lower()
        return _dtype_name(dtype)

    # array.array exposes a struct typecode instead of a dtype
    typecode = getattr(x, "typecode", None)
    if isinstance(typecode, str):
        return _dtype_name(typecode)

    return DataType.GENERIC.value


def validate_dtype(dtype: str) -> str:
    """
    Validate and normalize a data type name.

    Args:
        dtype: Data type string ("float64", "float32", ..., "generic")

    Returns:
        Normalized data type string

    Raises:
        ValueError: If dtype is invalid
    """
    dtype_lower = str(dtype).lower()

    if dtype_lower not in _VALID_DTYPES:
        raise ValueError(
            f"Invalid dtype '{dtype}'. "
            f"Must be one of: {', '.join(sorted(_VALID_DTYPES))}"
        )

    return dtype_lower
