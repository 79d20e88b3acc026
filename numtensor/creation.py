"""
Tensor creation functions.

Shapes may be passed as separate integers (``zeros(2, 3)``) or as one tuple
(``zeros((2, 3))``). Random tensors are drawn with NumPy's ``Generator`` so a
``seed`` gives reproducible data.
"""

import logging

import numpy as np

from . import _shape
from .errors import ShapeMismatch
from .tensor import Tensor

logger = logging.getLogger(__name__)


def tensor(data, shape=None):
    """Build a Tensor from nested data, or from flat data and a ``shape``."""
    return Tensor(data, shape=shape)


def full(shape, fill_value):
    """Tensor of ``shape`` with every element set to ``fill_value``."""
    shape = _shape.validate_shape(shape)
    fill_value = _shape.as_int(fill_value)
    logger.debug("full(%s, %d)", shape, fill_value)
    return Tensor([fill_value] * _shape.product(shape), shape=shape)


def zeros(*shape):
    return full(_shape.shape_from_args(shape), 0)


def ones(*shape):
    return full(_shape.shape_from_args(shape), 1)


def arange(start, stop=None, step=1):
    """Rank-1 tensor of the integers in ``[start, stop)``.

    With a single argument the range is ``[0, start)``, as in NumPy.

    Raises:
        ShapeMismatch: The range is empty.
    """
    if stop is None:
        start, stop = 0, start
    values = list(range(_shape.as_int(start), _shape.as_int(stop), _shape.as_int(step)))
    if not values:
        raise ShapeMismatch(
            f"arange({start}, {stop}, {step}) is empty; zero-sized tensors are not supported"
        )
    return Tensor(values)


def randint(low, high=None, size=None, *, seed=None):
    """Random integers drawn uniformly from ``[low, high)``.

    Call as ``randint(high, size)`` for the range ``[0, high)`` or as
    ``randint(low, high, size)``.

    Args:
        low (int): Lowest value (inclusive), or the exclusive upper bound
            when ``size`` is omitted.
        high (int): Exclusive upper bound, or the size in the two-argument form.
        size (tuple of int): Shape of the result.
        seed (int, optional): Seed for ``numpy.random.default_rng``.

    Raises:
        ValueError: ``low >= high``.
        TypeError: No size was given.
    """
    if size is None:
        if high is None:
            raise TypeError("randint() requires a size")
        low, high, size = 0, low, high
    low, high = _shape.as_int(low), _shape.as_int(high)
    if low >= high:
        raise ValueError(f"randint() requires low < high, got low={low}, high={high}")
    shape = _shape.validate_shape(size)
    rng = np.random.default_rng(seed)
    values = rng.integers(low, high, size=_shape.product(shape))
    logger.debug("randint(%d, %d, %s) with seed=%s", low, high, shape, seed)
    return Tensor(values.tolist(), shape=shape)


def rand(*shape, seed=None):
    """Random bits (0 or 1) of the given shape; storage is integer only."""
    return randint(0, 2, _shape.shape_from_args(shape), seed=seed)


__all__ = [
    "tensor",
    "full",
    "zeros",
    "ones",
    "arange",
    "randint",
    "rand",
]
