"""
Configuration & Constants
=========================
This module serves as the central registry for the global constants used by
the arithmetic engine.

Exports:
    ANGLE_ZERO_REFERENCE (float): Offset subtracted from ``atan2`` so that an
        angle of 0 points "up" instead of "right".
    DEFAULT_REL_TOL (float): Relative tolerance used by ``is_close``.
    DEFAULT_ABS_TOL (float): Absolute tolerance used by ``is_close``.
    LOGGER_NAME (str): Root logger namespace of the package.
"""
from math import pi


# Global Constants
ANGLE_ZERO_REFERENCE: float = pi / 2
DEFAULT_REL_TOL: float = 1e-9
DEFAULT_ABS_TOL: float = 1e-12
LOGGER_NAME: str = "vectorarithmetic"
