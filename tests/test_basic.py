"""
Basic tests for gasum array adapters and utilities.
"""

from array import array

import pytest
import numpy as np

import gasum as ga


class RecordingList(list):
    """List that records every index it is read at."""

    def __init__(self, *args):
        super().__init__(*args)
        self.reads = []

    def __getitem__(self, idx):
        self.reads.append(idx)
        return super().__getitem__(idx)


class TestDataType:
    """Test data type utilities."""

    def test_data_type_enum(self):
        """Test DataType enum."""
        assert ga.DataType.FLOAT64.value == "float64"
        assert ga.DataType.FLOAT32.value == "float32"
        assert ga.DataType.GENERIC.value == "generic"
        assert str(ga.DataType.INT32) == "int32"

    def test_resolve_list(self):
        """Plain sequences resolve to generic."""
        assert ga.resolve_dtype([1.0, 2.0]) == "generic"
        assert ga.resolve_dtype((1, 2)) == "generic"

    def test_resolve_numpy(self):
        """NumPy arrays resolve through their dtype."""
        assert ga.resolve_dtype(np.zeros(3)) == "float64"
        assert ga.resolve_dtype(np.zeros(3, dtype=np.float32)) == "float32"
        assert ga.resolve_dtype(np.zeros(3, dtype=np.int16)) == "int16"

    def test_resolve_array_module(self):
        """array.array resolves through its typecode."""
        assert ga.resolve_dtype(array("d", [1.0])) == "float64"
        assert ga.resolve_dtype(array("f", [1.0])) == "float32"

    def test_resolve_unknown_dtype(self):
        """Unrecognised dtypes resolve to generic."""
        assert ga.resolve_dtype(np.array(["a", "b"])) == "generic"
        assert ga.resolve_dtype(np.zeros(2, dtype=np.complex128)) == "generic"

    def test_resolve_does_not_read(self):
        """Resolution inspects attributes only."""
        x = RecordingList([1.0, 2.0])
        ga.resolve_dtype(x)
        assert x.reads == []

    def test_validate_dtype(self):
        """Test dtype validation and normalization."""
        assert ga.validate_dtype("FLOAT32") == "float32"
        assert ga.validate_dtype("generic") == "generic"

    def test_invalid_dtype(self):
        """Test invalid dtype raises error."""
        with pytest.raises(ValueError, match="Invalid dtype"):
            ga.validate_dtype("quaternion")


class TestArrayLike2Object:
    """Test the accessor adapter."""

    def test_list_is_direct(self):
        """Lists are directly indexable."""
        x = [1.0, -2.0, 3.0]
        obj = ga.arraylike2object(x)
        assert obj.data is x
        assert obj.dtype == "generic"
        assert not obj.accessor_protocol

        get, set_ = obj.accessors
        assert get(x, 1) == -2.0
        set_(x, 1, 4.0)
        assert x[1] == 4.0

    def test_numpy_is_direct(self):
        """NumPy arrays are directly indexable."""
        x = np.array([1.0, 2.0], dtype=np.float32)
        obj = ga.arraylike2object(x)
        assert not obj.accessor_protocol
        assert obj.dtype == "float32"

    def test_accessor_array(self):
        """Objects with get/set use the accessor protocol."""
        x = ga.AccessorArray([1.0, -2.0, 3.0])
        obj = ga.arraylike2object(x)
        assert obj.accessor_protocol
        assert obj.dtype == "float64"

        get, set_ = obj.accessors
        assert get(x, 2) == 3.0
        set_(x, 2, 7.0)
        assert x.get(2) == 7.0

    def test_get_without_set_is_direct(self):
        """A getter alone does not make an accessor array."""

        class GetOnly(list):
            def get(self, idx):
                return self[idx]

        assert not ga.is_accessor_array(GetOnly([1.0]))
        assert not ga.arraylike2object(GetOnly([1.0])).accessor_protocol

    def test_non_callable_attributes(self):
        """get/set attributes must be callable."""

        class Attrs:
            get = 1
            set = 2

        assert not ga.is_accessor_array(Attrs())

    def test_classification_does_not_read(self):
        """Classification never evaluates elements."""
        x = RecordingList([1.0, 2.0, 3.0])
        ga.arraylike2object(x)
        assert x.reads == []

        calls = []
        view = ga.ComputedArray(lambda i: calls.append(i) or float(i), 3)
        ga.arraylike2object(view)
        assert calls == []

    def test_unsupported_input_is_classified(self):
        """Any object is classifiable; it degrades to direct indexing."""
        obj = ga.arraylike2object(object())
        assert not obj.accessor_protocol
        assert obj.dtype == "generic"

    def test_array_object_is_frozen(self):
        """ArrayObject is immutable."""
        obj = ga.arraylike2object([1.0])
        with pytest.raises(AttributeError):
            obj.accessor_protocol = True


class TestAccessorArray:
    """Test AccessorArray class."""

    def test_properties(self):
        """Test accessor array properties."""
        arr = ga.AccessorArray(np.arange(10, dtype=np.float32))
        assert arr.length == 10
        assert len(arr) == 10
        assert arr.dtype == "float32"
        assert arr.nbytes == 10 * 4

    def test_get_returns_python_scalar(self):
        """get() returns Python scalars."""
        arr = ga.AccessorArray([1.5, -2.5])
        assert arr.get(1) == -2.5
        assert isinstance(arr.get(1), float)

    def test_explicit_dtype(self):
        """Data is converted to an explicit dtype."""
        arr = ga.AccessorArray([1, 2, 3], dtype="float32")
        assert arr.dtype == "float32"

    def test_generic_dtype_rejected(self):
        """AccessorArray storage needs a concrete dtype."""
        with pytest.raises(ValueError, match="concrete numeric dtype"):
            ga.AccessorArray([1.0], dtype="generic")

    def test_invalid_dtype(self):
        """Invalid dtype raises error."""
        with pytest.raises(ValueError, match="Invalid dtype"):
            ga.AccessorArray([1.0], dtype="bogus")

    def test_non_numeric_rejected(self):
        """Non-numeric data raises TypeError."""
        with pytest.raises(TypeError, match="numeric"):
            ga.AccessorArray(["a", "b"])
        with pytest.raises(TypeError, match="numeric"):
            ga.AccessorArray([True, False])

    def test_multidimensional_rejected(self):
        """Only one-dimensional data is accepted."""
        with pytest.raises(ValueError, match="one-dimensional"):
            ga.AccessorArray(np.zeros((2, 2)))

    def test_roundtrip(self):
        """Test roundtrip: NumPy -> AccessorArray -> NumPy."""
        arr = ga.AccessorArray(np.zeros(100))
        original = np.arange(100, dtype=np.float64)

        arr.from_numpy(original)
        result = arr.to_numpy()

        np.testing.assert_array_equal(result, original)

    def test_to_numpy_is_copy(self):
        """to_numpy() does not alias the storage."""
        arr = ga.AccessorArray([1.0, 2.0])
        out = arr.to_numpy()
        out[0] = 99.0
        assert arr.get(0) == 1.0

    def test_from_numpy_size_mismatch(self):
        """from_numpy() checks the length."""
        arr = ga.AccessorArray(np.zeros(3))
        with pytest.raises(ValueError, match="doesn't match"):
            arr.from_numpy(np.zeros(4))

    def test_repr(self):
        """Test repr."""
        assert repr(ga.AccessorArray([1.0, 2.0])) == "AccessorArray(length=2, dtype=float64)"


class TestComputedArray:
    """Test ComputedArray class."""

    def test_computes_on_read(self):
        """Elements are computed on every read."""
        calls = []

        def element(i):
            calls.append(i)
            return i * 2.0

        arr = ga.ComputedArray(element, 5)
        assert arr.get(3) == 6.0
        assert arr.get(3) == 6.0
        assert calls == [3, 3]
        assert len(arr) == 5

    def test_read_only(self):
        """set() raises TypeError."""
        arr = ga.ComputedArray(float, 2)
        with pytest.raises(TypeError, match="read-only"):
            arr.set(1.0, 0)

    def test_negative_length(self):
        """Negative length raises ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            ga.ComputedArray(float, -1)

    def test_non_callable(self):
        """A non-callable element function raises TypeError."""
        with pytest.raises(TypeError, match="callable"):
            ga.ComputedArray(3.0, 2)

    def test_dtype(self):
        """dtype is validated and resolvable."""
        arr = ga.ComputedArray(float, 2, dtype="Float64")
        assert arr.dtype == "float64"
        assert ga.resolve_dtype(arr) == "float64"


class TestStride2Offset:
    """Test stride2offset."""

    @pytest.mark.parametrize(
        "N, stride, expected",
        [
            (4, 1, 0),
            (4, 2, 0),
            (4, 0, 0),
            (4, -1, 3),
            (4, -2, 6),
            (1, -3, 0),
            (0, -2, -2),
        ],
    )
    def test_offsets(self, N, stride, expected):
        assert ga.stride2offset(N, stride) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
