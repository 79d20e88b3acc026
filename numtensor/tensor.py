"""
Defines the Tensor object for numtensor.

A Tensor stores integers in nested lists of depth 1 to 5. The rank is fixed
when the tensor is built and every traversal (indexing, elementwise
operators, rendering) walks exactly that many levels.
"""

import logging
import numbers
import operator
from typing import Any, Callable, List, Tuple

import numpy as np

from . import _shape
from .errors import IndexOutOfBounds, RankMismatch, ShapeMismatch, UnsupportedRank

logger = logging.getLogger(__name__)

# Width of "array(" plus the opening bracket of the outer list.
_ROW_INDENT = " " * len("array([")


def _map_leaves(fn: Callable[[int], int], data: List[Any], depth: int) -> List[Any]:
    if depth == 1:
        return [fn(value) for value in data]
    return [_map_leaves(fn, item, depth - 1) for item in data]


def _zip_leaves(
    op: Callable[[int, int], int], lhs: List[Any], rhs: List[Any], depth: int
) -> List[Any]:
    if depth == 1:
        return [op(a, b) for a, b in zip(lhs, rhs)]
    return [_zip_leaves(op, a, b, depth - 1) for a, b in zip(lhs, rhs)]


def _format_row(row: List[int]) -> str:
    return "[" + ", ".join(str(value) for value in row) + "]"


class Tensor:
    """
    Integer tensor of rank 1 to 5.

    Args:
        data (array_like): Nested lists/tuples (rank taken from the nesting
            depth), a NumPy integer array, or, when ``shape`` is given, a flat
            sequence to reshape in C order.
        shape (tuple of int, optional): Target shape for flat ``data``.

    Raises:
        UnsupportedRank: The rank is outside 1-5.
        ShapeMismatch: ``shape`` does not hold exactly ``len(data)`` elements,
            or a dimension is empty.
        IrregularShape: Nested ``data`` is jagged.
        TypeError: An element is not an integer.

    Example:
        >>> Tensor([1, 2, 3, 4, 5, 6], shape=(2, 3))
        array([[1, 2, 3],
               [4, 5, 6]])
    """

    __slots__ = ("_data", "_shape", "_rank")

    # NumPy scalars on the left defer to __radd__ / __rmul__.
    __array_ufunc__ = None

    def __init__(self, data, shape=None):
        if isinstance(data, Tensor):
            data = data._data
        elif isinstance(data, np.ndarray):
            data = data.tolist() if shape is None else data.ravel().tolist()

        if shape is None:
            self._shape = _shape.infer_shape(data)
            self._data = _shape.copy_nested(data, len(self._shape))
        else:
            self._shape = _shape.validate_shape(shape)
            self._data = _shape.reshape(_shape.flatten(data), self._shape)
        self._rank = len(self._shape)
        logger.debug("created rank-%d tensor with shape %s", self._rank, self._shape)

    @classmethod
    def _wrap(cls, data: List[Any], shape: Tuple[int, ...]) -> "Tensor":
        # Trusted path for results whose shape is already known.
        tensor = cls.__new__(cls)
        tensor._data = data
        tensor._shape = shape
        tensor._rank = len(shape)
        return tensor

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def ndim(self) -> int:
        """Alias of ``rank``, as in NumPy."""
        return self._rank

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def size(self) -> int:
        """Total number of elements."""
        return _shape.product(self._shape)

    def __len__(self):
        return self._shape[0]

    def __iter__(self):
        if self._rank == 1:
            return iter(list(self._data))
        inner_shape = self._shape[1:]
        return (
            Tensor._wrap(_shape.copy_nested(item, self._rank - 1), inner_shape)
            for item in self._data
        )

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------

    def _locate(self, indices: Tuple[Any, ...]) -> Tuple[List[Any], int]:
        if len(indices) != self._rank:
            raise RankMismatch(
                f"rank-{self._rank} tensor indexed with {len(indices)} indices"
            )
        for depth, index in enumerate(indices):
            if not isinstance(index, numbers.Integral) or isinstance(index, bool):
                raise TypeError(
                    f"tensor indices must be integers, got {type(index).__name__}"
                )
            if not 0 <= index < self._shape[depth]:
                raise IndexOutOfBounds(
                    f"index {index} is out of bounds for dimension {depth} "
                    f"with size {self._shape[depth]}"
                )
        parent = self._data
        for index in indices[:-1]:
            parent = parent[int(index)]
        return parent, int(indices[-1])

    def get(self, *indices) -> int:
        """Return the element at ``indices`` (one per dimension)."""
        parent, last = self._locate(indices)
        return parent[last]

    def set(self, *args) -> None:
        """Overwrite one element in place: ``t.set(i, j, value)``."""
        if not args:
            raise TypeError("set() requires indices and a value")
        *indices, value = args
        parent, last = self._locate(tuple(indices))
        value = _shape.as_int(value)
        parent[last] = value

    def __getitem__(self, key):
        if not isinstance(key, tuple):
            key = (key,)
        return self.get(*key)

    def __setitem__(self, key, value):
        if not isinstance(key, tuple):
            key = (key,)
        self.set(*key, value)

    # ------------------------------------------------------------------
    # Elementwise operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if isinstance(other, Tensor):
            return add(self, other)
        if isinstance(other, numbers.Integral):
            return add_scalar(self, other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, numbers.Integral):
            return add_scalar(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Tensor):
            return subtract(self, other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Tensor):
            return multiply(self, other)
        if isinstance(other, numbers.Integral):
            return multiply_scalar(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Integral):
            return multiply_scalar(self, other)
        return NotImplemented

    def __neg__(self):
        return multiply_scalar(self, -1)

    def __eq__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return self._shape == other._shape and self._data == other._data

    __hash__ = None

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def flatten(self) -> "Tensor":
        """Return a new rank-1 tensor holding every element in C order."""
        flat = _shape.flatten(self._data)
        return Tensor._wrap(flat, (len(flat),))

    def reshape(self, *shape) -> "Tensor":
        """Return a new tensor with the same elements laid out in ``shape``."""
        return Tensor(_shape.flatten(self._data), shape=_shape.shape_from_args(shape))

    def copy(self) -> "Tensor":
        return Tensor._wrap(_shape.copy_nested(self._data, self._rank), self._shape)

    def tolist(self) -> List[Any]:
        """Return a deep copy of the nested data."""
        return _shape.copy_nested(self._data, self._rank)

    def numpy(self) -> np.ndarray:
        """Convert to an ``int64`` NumPy array."""
        return np.array(self._data, dtype=np.int64)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Render as ``array(...)`` for ranks 1 to 3.

        Rows of a rank-2 tensor go on separate lines aligned under the first
        row; rank-3 tensors print their 2-D slices separated by a blank line.

        Raises:
            UnsupportedRank: For rank 4 and rank 5 tensors.
        """
        if self._rank == 1:
            body = _format_row(self._data)
        elif self._rank == 2:
            body = "[" + (",\n" + _ROW_INDENT).join(
                _format_row(row) for row in self._data
            ) + "]"
        elif self._rank == 3:
            slices = [
                "[" + (",\n" + _ROW_INDENT + " ").join(
                    _format_row(row) for row in matrix
                ) + "]"
                for matrix in self._data
            ]
            body = "[" + (",\n\n" + _ROW_INDENT).join(slices) + "]"
        else:
            raise UnsupportedRank(
                f"printing is only supported up to rank 3, got rank {self._rank}"
            )
        return f"array({body})"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        if self._rank <= 3:
            return self.to_string()
        return f"<numtensor.Tensor rank={self._rank} shape={list(self._shape)}>"


# ----------------------------------------------------------------------
# Elementwise operations
# ----------------------------------------------------------------------


def _check_same_shape(lhs: Tensor, rhs: Tensor) -> None:
    if not isinstance(lhs, Tensor) or not isinstance(rhs, Tensor):
        raise TypeError("both operands must be Tensors")
    if lhs.shape != rhs.shape:
        raise ShapeMismatch(
            f"operands could not be combined with shapes {lhs.shape} and {rhs.shape}"
        )


def add(lhs: Tensor, rhs: Tensor) -> Tensor:
    """Elementwise sum of two tensors of identical shape."""
    _check_same_shape(lhs, rhs)
    return Tensor._wrap(
        _zip_leaves(operator.add, lhs._data, rhs._data, lhs.rank), lhs.shape
    )


def multiply(lhs: Tensor, rhs: Tensor) -> Tensor:
    """Elementwise product of two tensors of identical shape."""
    _check_same_shape(lhs, rhs)
    return Tensor._wrap(
        _zip_leaves(operator.mul, lhs._data, rhs._data, lhs.rank), lhs.shape
    )


def subtract(lhs: Tensor, rhs: Tensor) -> Tensor:
    """``lhs + rhs * -1``."""
    _check_same_shape(lhs, rhs)
    return add(lhs, multiply_scalar(rhs, -1))


def add_scalar(lhs: Tensor, k: int) -> Tensor:
    """Add ``k`` to every element."""
    k = _shape.as_int(k)
    return Tensor._wrap(_map_leaves(lambda value: value + k, lhs._data, lhs.rank), lhs.shape)


def multiply_scalar(lhs: Tensor, k: int) -> Tensor:
    """Multiply every element by ``k``."""
    k = _shape.as_int(k)
    return Tensor._wrap(_map_leaves(lambda value: value * k, lhs._data, lhs.rank), lhs.shape)


__all__ = [
    "Tensor",
    "add",
    "subtract",
    "multiply",
    "add_scalar",
    "multiply_scalar",
]
