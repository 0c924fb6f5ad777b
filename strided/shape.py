"""
Shape and stride arithmetic for row-major arrays.

Strides are never stored on an array: every accessor calls into this module
with the array's current shape, so a reshape can never leave stale strides
behind.
"""

from __future__ import annotations

import functools
import itertools
import numbers
import operator
from typing import Iterable, Sequence, Tuple

from .errors import DimensionMismatch, IndexOutOfBounds, InvalidShape, ShapeMismatch

Shape = Tuple[int, ...]


def prod(shape: Iterable[int]) -> int:
    return functools.reduce(operator.mul, shape, 1)


def _as_int(value, what: str, container) -> int:
    # bool is an Integral but never a meaningful extent or index
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{what} entries must be integers, got {value!r} in {container!r}")
    return int(value)


def normalize_shape(shape) -> Shape:
    """Return ``shape`` as a tuple of positive Python ints.

    A bare integer is treated as a 1-D shape. Zero and negative extents are
    rejected with ``InvalidShape``; an empty shape describes a rank-0 array
    holding a single element.
    """
    if isinstance(shape, numbers.Integral) and not isinstance(shape, bool):
        shape = (shape,)
    shape = tuple(_as_int(s, "shape", shape) for s in shape)
    for dim, extent in enumerate(shape):
        if extent <= 0:
            raise InvalidShape(shape, f"dimension {dim} has extent {extent}, expected >= 1")
    return shape


@functools.lru_cache(maxsize=1024)
def _strides(shape: Shape) -> Shape:
    # shape must already be a normalized tuple
    if not shape:
        return ()
    return tuple(itertools.accumulate(reversed(shape[1:]), operator.mul, initial=1))[::-1]


def strides_for_shape(shape) -> Shape:
    """Row-major strides: the last stride is 1, each outer stride is the
    product of every extent to its right."""
    return _strides(normalize_shape(shape))


def check_index(shape: Shape, index: Sequence[int]) -> Tuple[int, ...]:
    index = tuple(_as_int(i, "index", index) for i in index)
    if len(index) != len(shape):
        raise DimensionMismatch(len(index), len(shape))
    for dim, (i, bound) in enumerate(zip(index, shape)):
        # negative indices are not wrapped around
        if i < 0 or i >= bound:
            raise IndexOutOfBounds(dim, i, bound)
    return index


def flat_index(shape: Shape, index: Sequence[int]) -> int:
    """Map a full multi-index to its offset in the flat buffer.

    Raises ``DimensionMismatch`` when ``len(index)`` differs from the rank and
    ``IndexOutOfBounds`` when a component is outside ``[0, shape[d])``.
    """
    index = check_index(shape, index)
    return sum(i * st for i, st in zip(index, _strides(shape)))


def prefix_offset(shape: Shape, prefix: Sequence[int]) -> int:
    """Offset of the first element addressed by a leading partial index."""
    prefix = tuple(_as_int(i, "index", prefix) for i in prefix)
    strides = _strides(shape)
    for dim, (i, bound) in enumerate(zip(prefix, shape)):
        if i < 0 or i >= bound:
            raise IndexOutOfBounds(dim, i, bound)
    return sum(i * st for i, st in zip(prefix, strides))


def unravel_index(shape: Shape, offset: int) -> Shape:
    capacity = prod(shape)
    if offset < 0 or offset >= capacity:
        raise IndexOutOfBounds(None, offset, capacity, f"Flat offset {offset} out of bounds for capacity {capacity}")
    index = []
    for st in _strides(shape):
        i, offset = divmod(offset, st)
        index.append(i)
    return tuple(index)


def infer_shape(nested) -> Shape:
    """Shape of a nested sequence of scalars; ragged input raises ``ShapeMismatch``."""
    if not hasattr(nested, "__len__") or not hasattr(nested, "__getitem__") or isinstance(nested, str):
        return ()
    subs = [infer_shape(x) for x in nested]
    if any(s != subs[0] for s in subs):
        ragged = next(s for s in subs if s != subs[0])
        raise ShapeMismatch(prod(ragged), prod(subs[0]))
    return (len(subs),) + (subs[0] if subs else ())


def flatten(nested) -> list:
    if hasattr(nested, "__len__") and hasattr(nested, "__getitem__") and not isinstance(nested, str):
        flattened = []
        for x in nested:
            flattened.extend(flatten(x))
        return flattened
    return [nested]


__all__ = [
    "Shape",
    "prod",
    "normalize_shape",
    "strides_for_shape",
    "check_index",
    "flat_index",
    "prefix_offset",
    "unravel_index",
    "infer_shape",
    "flatten",
]
