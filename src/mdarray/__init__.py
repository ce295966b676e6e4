"""
mdarray
=======
Nested, rectangular multi-dimensional arrays for small dense numeric tables,
such as the conditional probability tables of small graphical models.

The package holds pure data structures; it has NO I/O and does not configure
logging on import. Call :func:`mdarray.logging_config.setup_logging` from an
application to see the debug output.
"""
import logging

from mdarray.array import (
    array_dimensions,
    array_depth,
    array_ref,
    array_set,
    array_to_list,
    from_ndarray,
    iter_indices,
    list_to_array,
    make_array,
    to_ndarray,
)
from mdarray.config import PACKAGE_LOGGER, PACKAGE_VERSION
from mdarray.errors import InvalidIndexDepthError, MalformedArrayError, MDArrayError
from mdarray.validation import is_rectangular, validate_shape

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

__version__ = PACKAGE_VERSION

__all__ = [
    "array_dimensions",
    "array_depth",
    "array_ref",
    "array_set",
    "array_to_list",
    "from_ndarray",
    "iter_indices",
    "list_to_array",
    "make_array",
    "to_ndarray",
    "is_rectangular",
    "validate_shape",
    "MDArrayError",
    "InvalidIndexDepthError",
    "MalformedArrayError",
]
