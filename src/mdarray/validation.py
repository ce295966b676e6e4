"""
Shape validation for MDAs and NestedLists.

The accessors in :mod:`mdarray.array` assume rectangular input and never call
into this module. Use these checks at the boundary where untrusted tables
enter a program.
"""
from __future__ import annotations

import logging
from typing import Any

from mdarray.array import is_sequence
from mdarray.errors import MalformedArrayError

logger = logging.getLogger(__name__)


def _shape_of(obj: Any, path: tuple[int, ...]) -> tuple[int, ...]:
    if len(obj) == 0:
        return (0,)

    nested = [is_sequence(element) for element in obj]
    if not nested[0]:
        if any(nested):
            position = nested.index(True)
            raise MalformedArrayError("Mixed scalar and sequence elements", path + (position,))
        return (len(obj),)

    if not all(nested):
        position = nested.index(False)
        raise MalformedArrayError("Mixed scalar and sequence elements", path + (position,))

    expected = _shape_of(obj[0], path + (0,))
    for i in range(1, len(obj)):
        shape = _shape_of(obj[i], path + (i,))
        if shape != expected:
            raise MalformedArrayError(
                f"Jagged siblings: expected dimensions {list(expected)}, got {list(shape)}",
                path + (i,)
            )
    return (len(obj),) + expected


def validate_shape(obj: Any) -> tuple[int, ...]:
    """
    Check that an MDA or NestedList is rectangular.

    Every level is inspected, not only element 0.

    Args:
        obj: An MDA or a NestedList.

    Raises:
        MalformedArrayError: If ``obj`` is a scalar, has jagged siblings, or
            mixes scalars and sequences on one level.

    Returns:
        The dimensions of ``obj``, outermost first.
    """
    if not is_sequence(obj):
        raise MalformedArrayError(f"Expected a sequence, got {type(obj).__name__}")
    shape = _shape_of(obj, ())
    logger.debug(f"Validated shape {list(shape)}.")
    return shape


def is_rectangular(obj: Any) -> bool:
    """Return True if ``obj`` passes :func:`validate_shape`."""
    try:
        validate_shape(obj)
    except MalformedArrayError as e:
        logger.debug(f"Not rectangular: {e}")
        return False
    return True
