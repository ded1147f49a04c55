"""
Accessor-protocol arrays.

Arrays whose elements are read through ``get(i)`` and written through
``set(value, i)`` instead of ``x[i]``. The reduction kernels detect these
arrays via the accessor protocol and read them through their getter.
"""

from typing import Any, Callable, Optional

import numpy as np

from .dtypes import DataType, validate_dtype


class AccessorArray:
    """
    One-dimensional numeric array exposed through the accessor protocol.

    Example:
        >>> arr = AccessorArray([1.0, -2.0, 3.0])
        >>> arr.get(1)
        -2.0
        >>> arr.set(5.0, 1)
        >>> arr.to_numpy()
        array([1., 5., 3.])
    """

    def __init__(self, data: Any, dtype: Optional[str] = None):
        """
        Create an accessor array.

        Args:
            data: Numeric array-like (list, tuple, NumPy array)
            dtype: Optional data type name; defaults to the dtype of ``data``

        Raises:
            TypeError: If data is not numeric
            ValueError: If data is not one-dimensional or dtype is invalid
        """
        if dtype is not None:
            dtype = validate_dtype(dtype)
            if dtype == DataType.GENERIC.value:
                raise ValueError("AccessorArray requires a concrete numeric dtype, got 'generic'")

        arr = np.array(data, dtype=dtype)
        if arr.ndim != 1:
            raise ValueError(f"Expected one-dimensional data, got shape {arr.shape}")
        if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
            raise TypeError(f"Only real numeric data supported, got {arr.dtype}")

        self._data = arr

    @property
    def dtype(self) -> str:
        """Data type name."""
        return self._data.dtype.name

    @property
    def length(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    @property
    def nbytes(self) -> int:
        """Size of the underlying storage in bytes."""
        return self._data.nbytes

    def __len__(self) -> int:
        return self.length

    def get(self, idx: int) -> Any:
        """Return the element at index ``idx``."""
        return self._data[idx].item()

    def set(self, value: Any, idx: int) -> None:
        """Store ``value`` at index ``idx``."""
        self._data[idx] = value

    def from_numpy(self, arr: np.ndarray) -> None:
        """
        Copy values from a NumPy array.

        Raises:
            ValueError: If the array length doesn't match
        """
        flat = np.asarray(arr).reshape(-1)
        if flat.shape[0] != self.length:
            raise ValueError(
                f"Array size {flat.shape[0]} doesn't match accessor array length {self.length}"
            )
        self._data[:] = flat

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the elements as a NumPy array."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"AccessorArray(length={self.length}, dtype={self.dtype})"


class ComputedArray:
    """
    Read-only accessor array whose elements are computed on every read.

    Example:
        >>> arr = ComputedArray(lambda i: (-1.0) ** i * i, 4)
        >>> [arr.get(i) for i in range(4)]
        [0.0, -1.0, 2.0, -3.0]
    """

    def __init__(self, func: Callable[[int], Any], length: int, dtype: str = "generic"):
        if not callable(func):
            raise TypeError(f"Expected a callable element function, got {type(func)}")
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")

        self._func = func
        self._length = length
        self.dtype = validate_dtype(dtype)

    @property
    def length(self) -> int:
        """Number of elements."""
        return self._length

    def __len__(self) -> int:
        return self._length

    def get(self, idx: int) -> Any:
        """Compute the element at index ``idx``."""
        return self._func(idx)

    def set(self, value: Any, idx: int) -> None:
        raise TypeError("ComputedArray is read-only")

    def __repr__(self) -> str:
        return f"ComputedArray(length={self._length}, dtype={self.dtype})"
