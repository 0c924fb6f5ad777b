"""
Error types raised by the strided array core.

Every failure is detected at the offending call and raised to the caller.
All errors share the ``ArrayError`` base, and each one also derives from the
builtin exception it refines so ``except ValueError`` / ``except IndexError``
keep working.
"""


class ArrayError(Exception):
    """Base class for every error raised by ``strided``."""


class InvalidShape(ArrayError, ValueError):
    """A shape entry is not a positive integer."""

    def __init__(self, shape, reason):
        self.shape = shape
        super().__init__(f"Invalid shape {shape!r}: {reason}")


class ShapeMismatch(ArrayError, ValueError):
    """Supplied data length does not equal the product of the supplied shape."""

    def __init__(self, shape_product, capacity):
        self.shape_product = shape_product
        self.capacity = capacity
        super().__init__(
            "The given input array and shape does not match in capacity: "
            f"{shape_product} != {capacity}"
        )


class CapacityMismatch(ArrayError, ValueError):
    """A reshape/view target has a different element count than the array."""

    def __init__(self, new_shape, shape_product, capacity):
        self.new_shape = new_shape
        self.shape_product = shape_product
        self.capacity = capacity
        super().__init__(
            f"Cannot reshape array of capacity {capacity} into shape {new_shape}: "
            f"{shape_product} != {capacity}"
        )


class DimensionMismatch(ArrayError, IndexError):
    """A multi-index has a different length than the array's rank."""

    def __init__(self, given, rank):
        self.given = given
        self.rank = rank
        super().__init__(
            f"Number of indices does not match the shape dimensions: {given} != {rank}"
        )


class IndexOutOfBounds(ArrayError, IndexError):
    """An index component is past its dimension, or a prefix is longer than the rank.

    ``dim`` is the offending dimension, or ``None`` when the index as a whole
    is out of range (a prefix longer than the rank, or a flat offset past the
    capacity). ``index`` and ``bound`` then hold the given length or offset and
    its limit.
    """

    def __init__(self, dim, index, bound, message=None):
        self.dim = dim
        self.index = index
        self.bound = bound
        if message is None:
            message = f"Index out of bounds for dimension {dim}: {index} >= {bound}"
        super().__init__(message)


class UseScalarAccessInstead(ArrayError, ValueError):
    """A sub-array prefix addresses a single element; ``get`` should be used."""

    def __init__(self, index):
        self.index = index
        super().__init__(
            f"Index {index} addresses a single element, use get() for scalar access"
        )


class InvalidRange(ArrayError, ValueError):
    """A range slice starts after it ends."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(
            f"The start index is greater than the end index: {start} > {end}"
        )


__all__ = [
    "ArrayError",
    "InvalidShape",
    "ShapeMismatch",
    "CapacityMismatch",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "UseScalarAccessInstead",
    "InvalidRange",
]
