"""
Defines the StridedArray object for strided.

A StridedArray is a single flat float32 buffer addressed through a shape
tuple in row-major order. Strides are derived from the current shape on every
access (see ``strided.shape``) and are never stored.

Every operation validates its arguments before touching the buffer, so a
failed call leaves the array exactly as it was.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from . import config
from .errors import (
    CapacityMismatch,
    IndexOutOfBounds,
    InvalidRange,
    ShapeMismatch,
    UseScalarAccessInstead,
)
from .shape import (
    Shape,
    flat_index,
    flatten,
    infer_shape,
    normalize_shape,
    prefix_offset,
    prod,
    strides_for_shape,
    unravel_index,
)

logger = logging.getLogger(__name__)

DTYPE = np.float32


def _shape_arg(shape) -> Shape:
    # zeros(2, 3) and zeros((2, 3)) are both accepted
    if len(shape) == 1 and not isinstance(shape[0], (int, np.integer)):
        shape = shape[0]
    return normalize_shape(shape)


class StridedArray:
    """
    Row-major N-dimensional array of float32 values.

    Args:
        values (sequence of float): Flat element data, copied into a private buffer.
        shape (sequence of int, optional): Extents, outermost first. Defaults to
            ``(len(values),)``. Its product must equal ``len(values)``.

    Raises:
        ShapeMismatch: ``shape`` does not hold exactly ``len(values)`` elements.
        InvalidShape: ``shape`` has a zero or negative extent.
    """

    __slots__ = ("_data", "_shape")
    __hash__ = None

    def __init__(self, values, shape: Optional[Sequence[int]] = None):
        data = np.array(values, dtype=DTYPE).ravel()
        capacity = data.size
        shape = normalize_shape((capacity,) if shape is None else shape)
        shape_product = prod(shape)
        if shape_product != capacity:
            raise ShapeMismatch(shape_product, capacity)
        self._data = data
        self._shape = shape
        logger.debug("created array shape=%s capacity=%d", shape, capacity)

    @classmethod
    def _wrap(cls, data: np.ndarray, shape: Shape) -> StridedArray:
        # Caller guarantees data is an owned 1-D float32 buffer of prod(shape) elements
        array = cls.__new__(cls)
        array._data = data
        array._shape = shape
        logger.debug("created array shape=%s capacity=%d", shape, data.size)
        return array

    # --- Constructors ---

    @classmethod
    def full(cls, shape, value: float) -> StridedArray:
        shape = normalize_shape(shape)
        return cls._wrap(np.full(prod(shape), value, dtype=DTYPE), shape)

    @classmethod
    def zeros(cls, shape) -> StridedArray:
        return cls.full(shape, 0.0)

    @classmethod
    def ones(cls, shape) -> StridedArray:
        return cls.full(shape, 1.0)

    @classmethod
    def from_data(cls, values, shape: Optional[Sequence[int]] = None) -> StridedArray:
        return cls(values, shape)

    @classmethod
    def from_nested(cls, nested) -> StridedArray:
        """Build an array from nested sequences (or a numpy array), inferring its shape."""
        if isinstance(nested, np.ndarray):
            return cls._wrap(np.array(nested, dtype=DTYPE).ravel(), normalize_shape(nested.shape))
        shape = normalize_shape(infer_shape(nested))
        return cls(flatten(nested), shape)

    # --- Properties ---

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def strides(self) -> Shape:
        return strides_for_shape(self._shape)

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def capacity(self) -> int:
        return self._data.size

    size = capacity

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the flat buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    # --- Scalar access ---

    def get(self, index: Sequence[int]) -> float:
        return float(self._data[flat_index(self._shape, index)])

    def set(self, index: Sequence[int], value: float) -> None:
        offset = flat_index(self._shape, index)
        self._data[offset] = float(value)

    @staticmethod
    def _key(key) -> Tuple[int, ...]:
        if isinstance(key, (int, np.integer)):
            return (key,)
        if isinstance(key, (tuple, list)):
            return tuple(key)
        raise TypeError(f"StridedArray indices must be an int or a tuple of ints, not {type(key).__name__}")

    def __getitem__(self, key) -> float:
        return self.get(self._key(key))

    def __setitem__(self, key, value: float) -> None:
        self.set(self._key(key), value)

    # --- Slicing and extraction ---

    def slice(self, start_index: Sequence[int], end_index: Sequence[int]) -> np.ndarray:
        """
        Read-only view of the flat buffer between two multi-indices.

        The range is ``[flat(start_index), flat(end_index))`` over the flat
        row-major buffer, not a rectangular sub-volume. It reads as expected
        along the outermost dimension or within a single innermost row; a
        range crossing any other dimension boundary picks up every element in
        between in storage order.

        Raises:
            DimensionMismatch, IndexOutOfBounds: either index is invalid.
            InvalidRange: ``start_index`` lies after ``end_index``.
        """
        start = flat_index(self._shape, start_index)
        end = flat_index(self._shape, end_index)
        if start > end:
            raise InvalidRange(start, end)
        view = self._data[start:end]
        view.flags.writeable = False
        return view

    def subarray(self, prefix_index: Sequence[int]) -> StridedArray:
        """
        Copy out the sub-array addressed by a leading partial index.

        ``subarray([i])`` on a ``(2, 2, 2)`` array returns the ``(2, 2)``
        block at ``i``. The result owns its data.

        Raises:
            UseScalarAccessInstead: the prefix addresses a single element.
            IndexOutOfBounds: the prefix is longer than the rank, or one of
                its components is out of range.
        """
        prefix = tuple(prefix_index)
        rank = self.ndim
        if len(prefix) == rank:
            raise UseScalarAccessInstead(prefix)
        if len(prefix) > rank:
            raise IndexOutOfBounds(
                None, len(prefix), rank,
                f"Requested index {prefix} has {len(prefix)} dimensions, array only has {rank}",
            )
        offset = prefix_offset(self._shape, prefix)
        shape = self._shape[len(prefix):]
        capacity = prod(shape)
        logger.debug("subarray %s of shape=%s at offset %d", prefix, self._shape, offset)
        return self._wrap(self._data[offset:offset + capacity].copy(), shape)

    # --- Reshape / view ---

    def _checked_shape(self, new_shape) -> Shape:
        new_shape = normalize_shape(new_shape)
        shape_product = prod(new_shape)
        if shape_product != self.capacity:
            raise CapacityMismatch(new_shape, shape_product, self.capacity)
        return new_shape

    def reshape(self, new_shape) -> None:
        """Reinterpret the buffer under ``new_shape`` in place."""
        new_shape = self._checked_shape(new_shape)
        logger.debug("reshape %s -> %s", self._shape, new_shape)
        self._shape = new_shape

    def view(self, new_shape) -> StridedArray:
        """Copy of this array under ``new_shape``; the original is untouched."""
        new_shape = self._checked_shape(new_shape)
        logger.debug("view %s as %s", self._shape, new_shape)
        return self._wrap(self._data.copy(), new_shape)

    def copy(self) -> StridedArray:
        return self._wrap(self._data.copy(), self._shape)

    # --- Conversion and iteration ---

    def numpy(self) -> np.ndarray:
        return self._data.reshape(self._shape).copy()

    def tolist(self):
        return self.numpy().tolist()

    def indices(self) -> Iterator[Shape]:
        """Every valid multi-index, in row-major order."""
        for offset in range(self.capacity):
            yield unravel_index(self._shape, offset)

    def __len__(self) -> int:
        if not self._shape:
            raise TypeError("len() of a rank-0 array")
        return self._shape[0]

    def __iter__(self):
        if not self._shape:
            raise TypeError("iteration over a rank-0 array")
        return self._iter_outer()

    def _iter_outer(self):
        if self.ndim == 1:
            for value in self._data:
                yield float(value)
        else:
            for i in range(self._shape[0]):
                yield self.subarray((i,))

    def __eq__(self, other):
        if not isinstance(other, StridedArray):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data)) and self._shape == other._shape

    def __repr__(self):
        threshold = max(int(config.PRINT_THRESHOLD), 0)
        values = ", ".join(f"{v:g}" for v in self._data[:threshold])
        if self.capacity > threshold:
            values += ", ..." if values else "..."
        return f"StridedArray(shape={self._shape}, data=[{values}])"


# --- Creation functions ---

def zeros(*shape) -> StridedArray:
    return StridedArray.zeros(_shape_arg(shape))


def ones(*shape) -> StridedArray:
    return StridedArray.ones(_shape_arg(shape))


def fill(shape, value: float) -> StridedArray:
    return StridedArray.full(shape, value)


def from_data(values, shape: Optional[Sequence[int]] = None) -> StridedArray:
    return StridedArray.from_data(values, shape)


def tensor(data) -> StridedArray:
    return StridedArray.from_nested(data)


__all__ = [
    "DTYPE",
    "StridedArray",
    "zeros",
    "ones",
    "fill",
    "from_data",
    "tensor",
]
