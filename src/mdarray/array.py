"""
Multi-Dimensional Arrays (MDA)
==============================
Nested, rectangular arrays stored as containers of containers.

An MDA is either
    * a leaf: a 1-D ``numpy.ndarray`` holding scalars, or
    * a node: a 1-D ``numpy.ndarray`` of dtype ``object`` whose elements are
      MDAs of identical dimensions.

Dense N-dimensional ndarrays satisfy the same access protocol (``arr[i]`` is
again an ndarray until the last axis), so every accessor here accepts them too.

Whether a level is a leaf is decided by looking at element 0 only. The
structure is assumed to be rectangular; nothing in this module checks it
(see :mod:`mdarray.validation` for an opt-in check). Results on jagged input
are unspecified.

Functions:
    array_dimensions: Per-axis extents, outermost first.
    array_ref: Read an element (or a sub-array) by a list of indices.
    array_set: Overwrite an element in place.
    list_to_array: Build an MDA from nested lists.
    array_to_list: Convert an MDA back to nested lists.
"""
from __future__ import annotations

import itertools
import logging
from typing import Any, Iterator, Optional, Sequence, TYPE_CHECKING

import numpy as np

from mdarray.config import DEFAULT_DTYPE, NODE_DTYPE
from mdarray.errors import InvalidIndexDepthError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def is_container(obj: Any) -> bool:
    """True for an ndarray that can be indexed one level deeper."""
    return isinstance(obj, np.ndarray) and obj.ndim >= 1


def is_sequence(obj: Any) -> bool:
    """True for anything that counts as one level of a NestedList or an MDA."""
    return isinstance(obj, (list, tuple)) or is_container(obj)


def _to_python(value: Any) -> Any:
    # numpy scalar -> builtin int/float/bool
    if isinstance(value, np.generic):
        return value.item()
    return value


# ------------------------------
# Accessors
# ------------------------------

def array_dimensions(array: npt.NDArray[Any]) -> list[int]:
    """
    Compute the extent of every axis of an MDA.

    Follows element 0 at each level until a level holding scalars is reached.
    An empty container ends the walk, since there is no element to follow.

    Args:
        array: The MDA (node or leaf).

    Returns:
        The dimensions, outermost first. A rectangular MDA of depth D gives
        exactly D integers.
    """
    dims: list[int] = []
    current = array
    while is_container(current):
        dims.append(len(current))
        if len(current) == 0:
            break
        current = current[0]
    return dims


def array_depth(array: npt.NDArray[Any]) -> int:
    """Number of nested levels, i.e. the index count that addresses a scalar."""
    return len(array_dimensions(array))


def array_ref(array: npt.NDArray[Any], indices: Sequence[int]) -> Any:
    """
    Read a value from an MDA.

    Descends one level per index. Passing fewer indices than the depth
    returns the sub-array at that position; the sub-array shares storage with
    ``array``. Surplus indices past a scalar are ignored.

    Args:
        array: The MDA to read from.
        indices: 0-based index per level, outermost first.

    Raises:
        IndexError: If an index is out of range for its level.

    Returns:
        A Python scalar, or an MDA when the indices stop above the leaf level.
    """
    current = array
    for index in indices:
        if not is_container(current):
            break
        current = current[index]
    return _to_python(current)


def array_set(array: npt.NDArray[Any], value: Any, indices: Sequence[int]) -> None:
    """
    Overwrite one element of an MDA in place.

    The container holding the element is modified, so the change is visible
    through every reference to ``array`` or to any of its sub-arrays. The
    value is stored as-is in ``object`` leaves; typed leaves cast it to
    their dtype.

    Args:
        array: The MDA to modify.
        value: The new scalar.
        indices: 0-based index per level, outermost first. Its length should
            equal the depth of ``array``.

    Raises:
        InvalidIndexDepthError: If a scalar is reached before the last index
            is used, or if ``indices`` is empty.
        IndexError: If an index is out of range for its level.
    """
    indices = list(indices)
    if not indices:
        logger.error("array_set called without indices.")
        raise InvalidIndexDepthError(indices, 0)

    current = array
    for depth, index in enumerate(indices[:-1]):
        if not is_container(current):
            logger.error(f"Indices {indices} exceed array depth {depth}.")
            raise InvalidIndexDepthError(indices, depth)
        current = current[index]

    if not is_container(current):
        depth = len(indices) - 1
        logger.error(f"Indices {indices} exceed array depth {depth}.")
        raise InvalidIndexDepthError(indices, depth)

    current[indices[-1]] = value


def iter_indices(array: npt.NDArray[Any]) -> Iterator[tuple[int, ...]]:
    """
    Yield every full index tuple of a rectangular MDA in row-major order
    (last axis varies fastest).
    """
    dims = array_dimensions(array)
    yield from itertools.product(*(range(dim) for dim in dims))


# ------------------------------
# Construction & conversion
# ------------------------------

def _convert_list(nested: Sequence[Any], dtype: Any) -> npt.NDArray[Any]:
    if len(nested) == 0 or not is_sequence(nested[0]):
        return np.array(nested, dtype=dtype)

    node = np.empty(len(nested), dtype=NODE_DTYPE)
    for i, element in enumerate(nested):
        node[i] = _convert_list(element, dtype)
    return node


def list_to_array(nested: Sequence[Any], dtype: Optional[Any] = None) -> npt.NDArray[Any]:
    """
    Build an MDA from a NestedList.

    A level whose first element is not a sequence becomes a leaf; otherwise
    every element is converted first and the results are collected into a
    node. Recursion depth equals the nesting depth of ``nested``.

    Args:
        nested: Nested lists (or tuples) of scalars, or a flat sequence.
        dtype: Element type of the leaves. Defaults to ``object``, which keeps
            every scalar exactly as given.

    Returns:
        The new MDA. It shares no storage with ``nested``.
    """
    leaf_dtype = DEFAULT_DTYPE if dtype is None else dtype
    array = _convert_list(nested, leaf_dtype)
    logger.debug(f"Built array with dimensions {array_dimensions(array)}.")
    return array


def array_to_list(array: npt.NDArray[Any]) -> list[Any]:
    """
    Convert an MDA to a NestedList of Python scalars.

    Inverse of :func:`list_to_array` for rectangular input.
    """
    if len(array) == 0:
        return []
    if not is_container(array[0]):
        return array.tolist()
    return [array_to_list(element) for element in array]


def _build(dims: list[int], fill: Any, dtype: Any) -> npt.NDArray[Any]:
    if len(dims) == 1:
        return np.full(dims[0], fill, dtype=dtype)

    node = np.empty(dims[0], dtype=NODE_DTYPE)
    for i in range(dims[0]):
        # A fresh child per slot, siblings must not alias each other
        node[i] = _build(dims[1:], fill, dtype)
    return node


def make_array(
    dimensions: Sequence[int],
    fill: Any = 0.0,
    dtype: Optional[Any] = None
) -> npt.NDArray[Any]:
    """
    Create a rectangular MDA with every element set to ``fill``.

    Args:
        dimensions: Extent of each axis, outermost first.
        fill: Initial value of every element.
        dtype: Element type of the leaves. Defaults to ``object``, which keeps
            every scalar exactly as given.

    Raises:
        ValueError: If ``dimensions`` is empty or contains a negative extent.

    Returns:
        The new MDA.
    """
    dims = [int(dim) for dim in dimensions]
    if not dims:
        raise ValueError("At least one dimension is required.")
    if any(dim < 0 for dim in dims):
        raise ValueError(f"Dimensions must be non-negative, got {dims}.")

    leaf_dtype = DEFAULT_DTYPE if dtype is None else dtype
    logger.debug(f"Creating array with dimensions {dims} filled with {fill!r}.")
    return _build(dims, fill, leaf_dtype)


def to_ndarray(array: npt.NDArray[Any], dtype: Optional[Any] = None) -> np.ndarray:
    """
    Copy an MDA into a dense N-dimensional ndarray.

    Args:
        array: A rectangular MDA.
        dtype: Element type of the result. Inferred from the values if omitted.

    Returns:
        An ndarray whose shape equals ``array_dimensions(array)``.
    """
    return np.array(array_to_list(array), dtype=dtype)


def from_ndarray(dense: np.ndarray) -> npt.NDArray[Any]:
    """
    Split a dense ndarray into an MDA, keeping its dtype for the leaves.

    An MDA records extents only down to its first empty level, so a
    zero-length axis drops every axis inside it: ``np.zeros((0, 3))`` gives
    dimensions ``[0]``, and ``to_ndarray`` of the result has shape ``(0,)``.

    Raises:
        ValueError: If ``dense`` is zero-dimensional.
    """
    dense = np.asarray(dense)
    if dense.ndim == 0:
        raise ValueError("Cannot build an array from a 0-dimensional value.")
    return list_to_array(dense.tolist(), dtype=dense.dtype)
