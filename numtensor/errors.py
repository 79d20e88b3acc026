"""
Exceptions raised by numtensor.

Every error is raised at the call that caused it (construction, indexing or
an operator) and is never caught inside the library.
"""


class TensorError(Exception):
    """Base class for numtensor errors."""

    pass


class ShapeMismatch(TensorError, ValueError):
    """A shape disagrees with the data or with the other operand."""

    pass


class UnsupportedRank(TensorError, ValueError):
    """Rank outside 1-5, or outside 1-3 when rendering."""

    pass


class RankMismatch(TensorError, IndexError):
    """Number of indices differs from the tensor's rank."""

    pass


class IndexOutOfBounds(TensorError, IndexError):
    """A coordinate falls outside its dimension's extent."""

    pass


class IrregularShape(TensorError, ValueError):
    """Nested data whose sub-sequences are not all the same length."""

    pass


__all__ = [
    "TensorError",
    "ShapeMismatch",
    "UnsupportedRank",
    "RankMismatch",
    "IndexOutOfBounds",
    "IrregularShape",
]
