import unittest

import numpy as np

from src.ndarr.domain._errors import (
    AxisOutOfRangeError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from src.ndarr.infrastructure.ndarray._ndarray import NdArray
from src.ndarr.infrastructure.shape._shape import Shape


class TestNdArrayStructural(unittest.TestCase):
    def setUp(self) -> None:
        self.x_np = np.arange(24, dtype=np.float32).reshape(2, 3, 4)
        self.x = NdArray.from_numpy(self.x_np)

    def test_reshape_keeps_row_major_order(self) -> None:
        y = self.x.reshape(Shape.of(4, 6))
        self.assertEqual(y.shape.dims, (4, 6))
        np.testing.assert_array_equal(y.to_numpy(), self.x_np.reshape(4, 6))

    def test_reshape_is_a_copy(self) -> None:
        y = self.x.reshape((24,))
        y.set(-1.0, 0)
        self.assertEqual(self.x.get(0, 0, 0), 0.0)

    def test_reshape_size_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.x.reshape((5, 5))

    def test_index_select(self) -> None:
        y = self.x.index_select(1, [2, 0, 2])
        self.assertEqual(y.shape.dims, (2, 3, 4))
        np.testing.assert_array_equal(y.to_numpy(), self.x_np[:, [2, 0, 2], :])

        z = self.x.index_select(2, [3])
        self.assertEqual(z.shape.dims, (2, 3, 1))
        np.testing.assert_array_equal(z.to_numpy(), self.x_np[:, :, [3]])

    def test_index_select_errors(self) -> None:
        with self.assertRaises(AxisOutOfRangeError):
            self.x.index_select(3, [0])
        with self.assertRaises(IndexOutOfBoundsError):
            self.x.index_select(0, [0, 2])

    def test_index_select_rejects_fractional_indices(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            self.x.index_select(1, [1.7])
        with self.assertRaises(InvalidArgumentError):
            self.x.index_select(1, ["1"])
        idx = self.x.arg_max(2).to_numpy()[0, :, 0]
        y = self.x.index_select(2, idx)
        np.testing.assert_array_equal(y.to_numpy(), self.x_np[:, :, [3, 3, 3]])
        y = self.x.index_select(0, [np.int64(1), 0.0])
        np.testing.assert_array_equal(y.to_numpy(), self.x_np[[1, 0]])

    def test_slice_range(self) -> None:
        y = self.x.slice_range(2, 1, 3)
        self.assertEqual(y.shape.dims, (2, 3, 2))
        np.testing.assert_array_equal(y.to_numpy(), self.x_np[:, :, 1:3])

        empty = self.x.slice_range(0, 1, 1)
        self.assertEqual(empty.shape.dims, (0, 3, 4))

    def test_slice_range_errors(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            self.x.slice_range(1, 2, 1)
        with self.assertRaises(InvalidArgumentError):
            self.x.slice_range(1, 0, 4)
        with self.assertRaises(AxisOutOfRangeError):
            self.x.slice_range(5, 0, 1)

    def test_repeat_tiles(self) -> None:
        m = NdArray.of([[1, 2], [3, 4]])
        y = m.repeat(2, 3)
        self.assertEqual(y.shape.dims, (4, 6))
        np.testing.assert_array_equal(
            y.to_numpy(), np.tile(np.array([[1, 2], [3, 4]]), (2, 3))
        )

    def test_repeat_errors(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([[1, 2]]).repeat(2)
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([[1, 2]]).repeat(1, -1)

    def test_flatten(self) -> None:
        y = self.x.flatten()
        self.assertEqual(y.shape.dims, (1, 24))
        np.testing.assert_array_equal(y.get_array(), self.x_np.reshape(-1))

    def test_transpose(self) -> None:
        m = NdArray.of([[1, 2, 3], [4, 5, 6]])
        np.testing.assert_array_equal(m.transpose().to_numpy(), m.to_numpy().T)

        y = self.x.transpose(2, 0, 1)
        self.assertEqual(y.shape.dims, (4, 2, 3))
        np.testing.assert_array_equal(y.to_numpy(), self.x_np.transpose(2, 0, 1))

    def test_transpose_errors(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            self.x.transpose()
        with self.assertRaises(InvalidArgumentError):
            self.x.transpose(0, 0, 1)
        with self.assertRaises(InvalidArgumentError):
            self.x.transpose(0, 1)

    def test_broadcast_to_and_sum_to(self) -> None:
        v = NdArray.of([[1], [2]])
        b = v.broadcast_to((3, 2, 4))
        self.assertEqual(b.shape.dims, (3, 2, 4))
        np.testing.assert_array_equal(
            b.to_numpy(), np.broadcast_to(np.array([[1], [2]]), (3, 2, 4))
        )

        s = b.sum_to((2, 1))
        self.assertEqual(s.shape.dims, (2, 1))
        np.testing.assert_array_equal(s.to_numpy(), np.array([[12], [24]]))

    def test_broadcast_to_errors(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            NdArray.of([1, 2, 3]).broadcast_to((2, 4))
        with self.assertRaises(ShapeMismatchError):
            NdArray.zeros((2, 3)).broadcast_to((3,))
        with self.assertRaises(ShapeMismatchError):
            NdArray.zeros((2, 3)).sum_to((4,))

    def test_squeeze(self) -> None:
        y = NdArray.zeros((2, 1, 3)).squeeze(1)
        self.assertEqual(y.shape.dims, (2, 3))
        with self.assertRaises(InvalidArgumentError):
            NdArray.zeros((2, 3)).squeeze(0)
        with self.assertRaises(AxisOutOfRangeError):
            NdArray.zeros((2, 3)).squeeze(2)

    def test_structural_ops_do_not_mutate_input(self) -> None:
        before = self.x.to_numpy()
        self.x.index_select(0, [1])
        self.x.slice_range(1, 0, 2)
        self.x.repeat(1, 2, 1)
        self.x.transpose(1, 0, 2)
        np.testing.assert_array_equal(self.x.to_numpy(), before)


if __name__ == "__main__":
    unittest.main()
