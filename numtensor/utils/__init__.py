"""
numtensor Utilities Submodule (`numtensor.utils`)

Provides the reshape engine on plain nested lists and NumPy interop helpers.
"""

import numpy as np

from .._shape import flatten, infer_shape, product, reshape
from ..tensor import Tensor


def from_numpy(array):
    """Build a Tensor from an integer NumPy array of rank 1 to 5."""
    if not np.issubdtype(array.dtype, np.integer):
        raise TypeError(f"expected an integer array, got dtype {array.dtype}")
    return Tensor(array)


def to_numpy(tensor):
    return tensor.numpy()


# --- Define __all__ ---
__all__ = [
    "reshape",
    "flatten",
    "infer_shape",
    "product",
    "from_numpy",
    "to_numpy",
]
