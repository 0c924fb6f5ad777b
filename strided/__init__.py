"""
strided - A minimal row-major N-dimensional array.

This package provides a StridedArray object: a flat float32 buffer addressed
through a shape tuple, with bounds-checked multi-index access, reshaping,
flat-range slicing and sub-array extraction.
"""

import logging
import sys

# --- Check Dependencies ---
try:
    import numpy
except ImportError as e:
    print("Error: NumPy is required for strided but could not be imported.", file=sys.stderr)
    print("Please install NumPy: pip install numpy", file=sys.stderr)
    raise e from None

from . import config
from .array import DTYPE, StridedArray, fill, from_data, ones, tensor, zeros
from .errors import (
    ArrayError,
    CapacityMismatch,
    DimensionMismatch,
    IndexOutOfBounds,
    InvalidRange,
    InvalidShape,
    ShapeMismatch,
    UseScalarAccessInstead,
)
from .shape import strides_for_shape

# --- Logging ---
# Library code only emits records; applications decide where they go.
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
if config.DEBUG:
    _logger.setLevel(logging.DEBUG)

# --- Version Information ---
try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("strided")
except PackageNotFoundError:
    # Running from a source checkout; should match setup.py
    __version__ = "0.1.0"

# --- Clean up namespace ---
del sys
del numpy
del logging

__all__ = [
    # Core
    "StridedArray",
    "DTYPE",
    "__version__",
    # Creation Ops
    "zeros",
    "ones",
    "fill",
    "from_data",
    "tensor",
    # Shape math
    "strides_for_shape",
    # Errors
    "ArrayError",
    "InvalidShape",
    "ShapeMismatch",
    "CapacityMismatch",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "UseScalarAccessInstead",
    "InvalidRange",
    # Submodules
    "config",
]
