"""
Unit tests for opt-in shape validation.
"""
import numpy as np
import pytest

from mdarray.array import list_to_array
from mdarray.errors import MalformedArrayError
from mdarray.validation import is_rectangular, validate_shape


class TestValidateShape:
    """Test validate_shape function."""

    def test_rectangular_list(self):
        """Returns the dimensions of a rectangular list."""
        assert validate_shape([[1, 2], [3, 4]]) == (2, 2)

    def test_probability_table(self, table):
        """MDAs are validated the same way as nested lists."""
        assert validate_shape(table) == (2, 3, 3)

    def test_dense_ndarray(self):
        """Dense ndarrays are accepted."""
        assert validate_shape(np.zeros((3, 2))) == (3, 2)

    def test_empty(self):
        """An empty list has a single zero extent."""
        assert validate_shape([]) == (0,)

    def test_jagged_siblings(self):
        """Rows of different length are reported with their path."""
        with pytest.raises(MalformedArrayError, match="Jagged") as exc_info:
            validate_shape([[1, 2], [3]])
        assert exc_info.value.path == (1,)

    def test_jagged_deep(self):
        """Mismatches below element 0 are found too."""
        nested = [[[1, 2], [3, 4]], [[5, 6], [7]]]
        with pytest.raises(MalformedArrayError) as exc_info:
            validate_shape(nested)
        assert exc_info.value.path == (1, 1)

    def test_jagged_mda(self):
        """Jagged MDAs are rejected like jagged lists."""
        with pytest.raises(MalformedArrayError):
            validate_shape(list_to_array([[1.0, 2.0, 3.0], [4.0]]))

    def test_mixed_scalar_after_sequence(self):
        """A scalar among sequences is reported."""
        with pytest.raises(MalformedArrayError, match="Mixed") as exc_info:
            validate_shape([[1, 2], 3])
        assert exc_info.value.path == (1,)

    def test_mixed_sequence_after_scalar(self):
        """A sequence among scalars is reported."""
        with pytest.raises(MalformedArrayError, match="Mixed") as exc_info:
            validate_shape([1, [2, 3]])
        assert exc_info.value.path == (1,)

    def test_scalar(self):
        """A bare scalar is not an array."""
        with pytest.raises(MalformedArrayError, match="Expected a sequence"):
            validate_shape(0.5)

    def test_string_is_not_a_sequence(self):
        """Strings are scalars, not sequences of characters."""
        with pytest.raises(MalformedArrayError):
            validate_shape("abc")

    def test_is_value_error(self):
        """Callers catching ValueError also catch shape errors."""
        with pytest.raises(ValueError):
            validate_shape([[1], [2, 3]])


class TestIsRectangular:
    """Test is_rectangular function."""

    def test_true(self, table_list):
        """A rectangular table passes."""
        assert is_rectangular(table_list)

    def test_false(self):
        """A jagged table fails."""
        assert not is_rectangular([[1, 2], [3]])
