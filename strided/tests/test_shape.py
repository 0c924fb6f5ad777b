"""
Tests for strided.shape stride and index arithmetic.
"""

import itertools
import unittest

import numpy as np

from strided import shape as S
from strided.errors import DimensionMismatch, IndexOutOfBounds, InvalidShape, ShapeMismatch


class TestStrides(unittest.TestCase):

    def test_strides_for_shape(self):
        self.assertEqual(S.strides_for_shape((2, 3)), (3, 1))
        self.assertEqual(S.strides_for_shape((2, 3, 5)), (15, 5, 1))
        self.assertEqual(S.strides_for_shape((2,)), (1,))
        self.assertEqual(S.strides_for_shape(()), ())

    def test_strides_for_shape_accepts_any_sequence(self):
        self.assertEqual(S.strides_for_shape([2, 3]), (3, 1))
        self.assertEqual(S.strides_for_shape(np.array([2, 3, 5])), (15, 5, 1))
        self.assertEqual(S.strides_for_shape(4), (1,))
        with self.assertRaises(InvalidShape):
            S.strides_for_shape([2, 0])

    def test_stride_cache_is_bounded(self):
        S.strides_for_shape((7, 3))
        self.assertEqual(S._strides.cache_info().maxsize, 1024)

    def test_strides_match_numpy(self):
        for shape in [(4,), (3, 2), (2, 3, 4), (1, 5, 1, 2)]:
            itemsize = np.dtype(np.float32).itemsize
            expected = tuple(s // itemsize for s in np.zeros(shape, dtype=np.float32).strides)
            self.assertEqual(S.strides_for_shape(shape), expected)

    def test_prod(self):
        self.assertEqual(S.prod((2, 3, 5)), 30)
        self.assertEqual(S.prod(()), 1)


class TestNormalizeShape(unittest.TestCase):

    def test_accepts_int_and_sequences(self):
        self.assertEqual(S.normalize_shape(4), (4,))
        self.assertEqual(S.normalize_shape([2, 3]), (2, 3))
        self.assertEqual(S.normalize_shape((np.int64(2), 3)), (2, 3))
        self.assertEqual(S.normalize_shape(()), ())

    def test_rejects_zero_and_negative_extents(self):
        with self.assertRaises(InvalidShape):
            S.normalize_shape((2, 0))
        with self.assertRaises(InvalidShape) as ctx:
            S.normalize_shape((-1,))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            S.normalize_shape((2.0, 3))
        with self.assertRaises(TypeError):
            S.normalize_shape((True, 3))


class TestFlatIndex(unittest.TestCase):

    def test_flat_index_2d(self):
        shape = (2, 3)
        expected = {(0, 0): 0, (0, 1): 1, (0, 2): 2, (1, 0): 3, (1, 1): 4, (1, 2): 5}
        for index, offset in expected.items():
            self.assertEqual(S.flat_index(shape, index), offset)

    def test_flat_index_matches_ravel_multi_index(self):
        shape = (2, 3, 4)
        for index in itertools.product(*(range(n) for n in shape)):
            self.assertEqual(S.flat_index(shape, index), np.ravel_multi_index(index, shape))

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch) as ctx:
            S.flat_index((2, 3), (1,))
        self.assertEqual(ctx.exception.given, 1)
        self.assertEqual(ctx.exception.rank, 2)

    def test_index_out_of_bounds(self):
        with self.assertRaises(IndexOutOfBounds) as ctx:
            S.flat_index((2, 3), (1, 3))
        self.assertEqual((ctx.exception.dim, ctx.exception.index, ctx.exception.bound), (1, 3, 3))
        with self.assertRaises(IndexOutOfBounds):
            S.flat_index((2, 3), (2, 0))

    def test_negative_index_rejected(self):
        with self.assertRaises(IndexOutOfBounds):
            S.flat_index((2, 3), (-1, 0))

    def test_unravel_index_inverts_flat_index(self):
        shape = (3, 2, 2)
        for offset in range(S.prod(shape)):
            self.assertEqual(S.flat_index(shape, S.unravel_index(shape, offset)), offset)
        with self.assertRaises(IndexOutOfBounds):
            S.unravel_index(shape, 12)

    def test_prefix_offset(self):
        self.assertEqual(S.prefix_offset((2, 2, 2), (1,)), 4)
        self.assertEqual(S.prefix_offset((2, 2, 2), (1, 1)), 6)
        self.assertEqual(S.prefix_offset((2, 2, 2), ()), 0)
        with self.assertRaises(IndexOutOfBounds):
            S.prefix_offset((2, 2, 2), (0, 2))


class TestNested(unittest.TestCase):

    def test_infer_shape(self):
        self.assertEqual(S.infer_shape([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]), (2, 3))
        self.assertEqual(S.infer_shape([1.0]), (1,))
        self.assertEqual(S.infer_shape(7.0), ())

    def test_infer_shape_ragged(self):
        with self.assertRaises(ShapeMismatch):
            S.infer_shape([[1.0, 2.0], [3.0]])

    def test_flatten(self):
        self.assertEqual(S.flatten([[1, 2], [3, 4]]), [1, 2, 3, 4])
        self.assertEqual(S.flatten(5), [5])


if __name__ == '__main__':
    unittest.main()
