"""
Shape bookkeeping for numtensor: row-major reshape of a flat buffer into
nested lists, the inverse flatten, and shape inference for nested literals.

Everything here is pure and works on plain Python lists.
"""

import logging
import numbers
from typing import Any, List, Sequence, Tuple

from .errors import IrregularShape, ShapeMismatch, UnsupportedRank

logger = logging.getLogger(__name__)

MIN_RANK = 1
MAX_RANK = 5

Shape = Tuple[int, ...]


def _is_branch(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def as_int(value: Any) -> int:
    """Coerce an integral scalar (int, bool, NumPy integer) to ``int``."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"tensor elements must be integers, got {type(value).__name__}")


def product(shape: Sequence[int]) -> int:
    total = 1
    for extent in shape:
        total *= extent
    return total


def check_rank(rank: int) -> int:
    if not MIN_RANK <= rank <= MAX_RANK:
        raise UnsupportedRank(
            f"rank must be between {MIN_RANK} and {MAX_RANK}, got {rank}"
        )
    return rank


def validate_shape(shape: Any) -> Shape:
    """Normalise ``shape`` to a tuple of ints and check rank and extents.

    A bare integer is accepted as the shape of a rank-1 tensor.
    """
    if isinstance(shape, numbers.Integral):
        shape = (shape,)
    if not _is_branch(shape):
        raise TypeError(f"shape must be a tuple of ints, got {type(shape).__name__}")
    extents = []
    for extent in shape:
        if not isinstance(extent, numbers.Integral) or isinstance(extent, bool):
            raise TypeError(f"shape entries must be integers, got {shape!r}")
        extents.append(int(extent))
    check_rank(len(extents))
    if any(extent < 1 for extent in extents):
        raise ShapeMismatch(f"shape entries must be positive, got {tuple(extents)}")
    return tuple(extents)


def shape_from_args(args: Tuple[Any, ...]) -> Any:
    """Accept both ``f(2, 3)`` and ``f((2, 3))`` call styles."""
    if len(args) == 1 and _is_branch(args[0]):
        return args[0]
    return args


def _chunked(values: List[Any], size: int) -> List[List[Any]]:
    return [values[start:start + size] for start in range(0, len(values), size)]


def reshape(flat: Sequence[Any], shape: Any) -> List[Any]:
    """Group a flat sequence into ``len(shape)`` levels of nested lists (C order).

    The innermost lists hold ``shape[-1]`` scalars; each enclosing level groups
    the previous one by the next extent outwards, until the outermost list has
    ``shape[0]`` entries.

    Args:
        flat: Ordered scalars; copied, never modified.
        shape: One positive extent per dimension, 1 to 5 of them.

    Raises:
        UnsupportedRank: ``len(shape)`` is outside 1-5.
        ShapeMismatch: ``product(shape) != len(flat)`` or an extent is < 1.
    """
    shape = validate_shape(shape)
    values = [as_int(value) for value in flat]
    expected = product(shape)
    if expected != len(values):
        raise ShapeMismatch(
            f"cannot reshape {len(values)} elements into shape {shape} "
            f"({expected} elements)"
        )
    nested = values
    for extent in reversed(shape[1:]):
        nested = _chunked(nested, extent)
    logger.debug("reshaped %d elements into shape %s", len(values), shape)
    return nested


def flatten(data: Any) -> List[Any]:
    """Concatenate every leaf of ``data`` depth first, left to right."""
    if not _is_branch(data):
        return [data]
    flat = []
    for item in data:
        if _is_branch(item):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat


def _check_rectangular(data: Any, shape: Shape, depth: int) -> None:
    if depth == len(shape):
        if _is_branch(data):
            raise IrregularShape(
                f"expected a scalar at depth {depth}, found a sequence"
            )
        return
    if not _is_branch(data):
        raise IrregularShape(f"expected a sequence at depth {depth}, found a scalar")
    if len(data) != shape[depth]:
        raise IrregularShape(
            f"dimension {depth} has length {len(data)}, expected {shape[depth]}"
        )
    for item in data:
        _check_rectangular(item, shape, depth + 1)


def infer_shape(data: Any, validate: bool = True) -> Shape:
    """Measure the shape of nested data along its first branch.

    With ``validate`` set, every branch is then checked against that shape and
    ``IrregularShape`` is raised on the first jagged dimension.
    """
    extents = []
    level = data
    while _is_branch(level):
        if len(level) == 0:
            raise ShapeMismatch(
                f"zero-sized dimension at depth {len(extents)} is not supported"
            )
        extents.append(len(level))
        if len(extents) > MAX_RANK:
            raise UnsupportedRank(
                f"nesting deeper than {MAX_RANK} levels is not supported"
            )
        level = level[0]
    check_rank(len(extents))
    shape = tuple(extents)
    if validate:
        _check_rectangular(data, shape, 0)
    return shape


def copy_nested(data: Any, rank: int) -> Any:
    """Deep-copy ``rank`` levels of nested sequences into lists of ints."""
    if rank == 0:
        return as_int(data)
    return [copy_nested(item, rank - 1) for item in data]


__all__ = [
    "MIN_RANK",
    "MAX_RANK",
    "as_int",
    "product",
    "check_rank",
    "validate_shape",
    "shape_from_args",
    "reshape",
    "flatten",
    "infer_shape",
    "copy_nested",
]
