"""
Configuration & Global Constants
================================
This module serves as the central registry for package-wide constants.

Why is this file needed?
------------------------
1. Consistency: The element type of leaf containers and the type of node
   containers are decided in one place instead of being repeated in every
   conversion function.
2. Introspection: It resolves the installed package version, so log output
   and callers can report which release built an array.

Exports:
    DEFAULT_DTYPE: dtype of leaf containers when none is given. Leaves hold the
        scalars themselves, so Fractions, big ints and complex values survive.
    NODE_DTYPE: numpy dtype used for containers holding sub-arrays.
    PACKAGE_LOGGER (str): Name of the package-level logger.
    PACKAGE_VERSION (str): Installed version of the package.
"""
from importlib.metadata import version, PackageNotFoundError


def get_package_version(distribution: str = "mdarray") -> str:
    """
    Get the installed version of the distribution, works for editable installs
    and for a plain source checkout.
    """
    try:
        return version(distribution)
    except PackageNotFoundError:
        # Source checkout without installation
        return "0.0.0-dev"


# Global Constants
DEFAULT_DTYPE = object
NODE_DTYPE = object
PACKAGE_LOGGER: str = "mdarray"
PACKAGE_VERSION: str = get_package_version()
