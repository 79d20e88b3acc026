"""
numtensor - small integer tensors of rank 1 to 5 in pure Python.

This package provides a Tensor object backed by nested lists, row-major
reshaping of flat buffers, rank-aware indexing, elementwise arithmetic with
scalar broadcasting and NumPy-style printing.
"""

import logging

# --- Import Core Components ---

# Tensor class and elementwise operations
from .tensor import Tensor, add, add_scalar, multiply, multiply_scalar, subtract

# Tensor creation functions
from .creation import arange, full, ones, rand, randint, tensor, zeros

# Errors
from .errors import (
    IndexOutOfBounds,
    IrregularShape,
    RankMismatch,
    ShapeMismatch,
    TensorError,
    UnsupportedRank,
)

# --- Expose Submodules (`utils`) ---
from . import utils

# --- Logging ---
# Library code only emits debug records; applications decide where they go.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# --- Version Information ---
# Try to get version from package metadata if installed
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("numtensor")
except PackageNotFoundError:
    # Not installed; should match version in setup.py
    __version__ = "0.1.0"

# --- Clean up namespace ---
del logging

# --- Define what `from numtensor import *` imports ---
__all__ = [
    # Core
    "Tensor",
    "__version__",
    # Operations
    "add",
    "subtract",
    "multiply",
    "add_scalar",
    "multiply_scalar",
    # Creation Ops
    "tensor",
    "full",
    "zeros",
    "ones",
    "arange",
    "randint",
    "rand",
    # Errors
    "TensorError",
    "ShapeMismatch",
    "UnsupportedRank",
    "RankMismatch",
    "IndexOutOfBounds",
    "IrregularShape",
    # Submodules
    "utils",
]
