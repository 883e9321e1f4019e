"""
Vector Arithmetic
=================
2D vector arithmetic for any two-component value: points, sizes and
displacement vectors share one generic engine.

    >>> from vectorarithmetic import Point, Vector
    >>> Point(1, 2) + Vector(3, 4)
    Point(x=4.0, y=6.0)
"""
from importlib.metadata import version, PackageNotFoundError

from vectorarithmetic.logging_config import install_null_handler, setup_logging
from vectorarithmetic.model import *  # noqa: F401,F403
from vectorarithmetic.model import __all__ as _model_all

try:
    __version__ = version("vectorarithmetic")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

install_null_handler()

__all__ = ["setup_logging", "__version__", *_model_all]
