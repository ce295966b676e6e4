"""
Exception hierarchy for multi-dimensional array operations.

Out-of-range indices are not translated: the ``IndexError`` raised by the
underlying numpy container reaches the caller unchanged.
"""
from __future__ import annotations

from typing import Sequence


class MDArrayError(Exception):
    """Base class for all errors raised by this package."""


class InvalidIndexDepthError(MDArrayError, IndexError):
    """
    Raised when an index sequence does not fit the depth of an array.

    Attributes:
        indices: The index sequence that was passed in.
        depth_reached: Number of indices consumed before a scalar was hit.
    """

    def __init__(self, indices: Sequence[int], depth_reached: int) -> None:
        self.indices = tuple(indices)
        self.depth_reached = depth_reached
        if not self.indices:
            message = "At least one index is required to write an element."
        else:
            message = (f"Index sequence {list(self.indices)} is deeper than the array: "
                       f"a scalar was reached after {depth_reached} index(es).")
        super().__init__(message)


class MalformedArrayError(MDArrayError, ValueError):
    """
    Raised by shape validation when a structure is not rectangular.

    Attributes:
        path: Indices leading to the level where the mismatch was found.
    """

    def __init__(self, message: str, path: Sequence[int] = ()) -> None:
        self.path = tuple(path)
        super().__init__(f"{message} (at path {list(self.path)})")
