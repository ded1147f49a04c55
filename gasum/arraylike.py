"""
Array-like object adapter.

Classifies an array-like object as directly indexable or accessor-mediated
and bundles the raw data handle with the matching element accessors.

Example:
    >>> from gasum import arraylike2object
    >>> obj = arraylike2object([1.0, -2.0, 3.0])
    >>> obj.accessor_protocol
    False
    >>> get, _ = obj.accessors
    >>> get(obj.data, 1)
    -2.0
"""

from dataclasses import dataclass
from typing import Any, Callable, Tuple

from .dtypes import resolve_dtype

Getter = Callable[[Any, int], Any]
Setter = Callable[[Any, int, Any], None]


@dataclass(frozen=True)
class ArrayObject:
    """
    Adapter view of an array-like object.

    Attributes:
        data: Raw data handle (the object that was classified)
        dtype: Resolved data type name
        accessor_protocol: Whether elements must be read through get/set
        accessors: (get, set) pair, each taking the raw handle first
    """

    data: Any
    dtype: str
    accessor_protocol: bool
    accessors: Tuple[Getter, Setter]


def _index_get(arr: Any, idx: int) -> Any:
    return arr[idx]


def _index_set(arr: Any, idx: int, value: Any) -> None:
    arr[idx] = value


def _accessor_get(arr: Any, idx: int) -> Any:
    return arr.get(idx)


def _accessor_set(arr: Any, idx: int, value: Any) -> None:
    arr.set(value, idx)


def is_accessor_array(x: Any) -> bool:
    """
    Check whether an object supports the accessor protocol.

    An accessor array exposes callable ``get(i)`` and ``set(value, i)``
    methods. Only attributes are inspected; no element is evaluated.
    """
    return callable(getattr(x, "get", None)) and callable(getattr(x, "set", None))


def arraylike2object(x: Any) -> ArrayObject:
    """
    Convert an array-like object to an ArrayObject.

    Every input is classifiable. Objects without the accessor protocol are
    treated as directly indexable; reading from an unsupported object fails
    later, at the first element access.

    Args:
        x: Array-like object

    Returns:
        ArrayObject describing ``x``
    """
    if is_accessor_array(x):
        return ArrayObject(
            data=x,
            dtype=resolve_dtype(x),
            accessor_protocol=True,
            accessors=(_accessor_get, _accessor_set),
        )
    return ArrayObject(
        data=x,
        dtype=resolve_dtype(x),
        accessor_protocol=False,
        accessors=(_index_get, _index_set),
    )
