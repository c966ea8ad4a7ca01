import unittest

import numpy as np

from src.ndarr.domain._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from src.ndarr.infrastructure.ndarray._ndarray import NdArray


class TestGetItem(unittest.TestCase):
    def setUp(self) -> None:
        self.m_np = np.arange(12, dtype=np.float32).reshape(3, 4)
        self.m = NdArray.from_numpy(self.m_np)

    def test_point_mode_pairs_indices(self) -> None:
        out = self.m.get_item([0, 2, 2], [3, 1, 1])
        self.assertEqual(out.shape.dims, (1, 3))
        self.assertEqual(out.to_list(), [[3.0, 9.0, 9.0]])

    def test_grid_mode_with_none(self) -> None:
        rows = self.m.get_item([2, 0], None)
        np.testing.assert_array_equal(rows.to_numpy(), self.m_np[[2, 0], :])
        cols = self.m.get_item(None, [1, 1, 3])
        np.testing.assert_array_equal(cols.to_numpy(), self.m_np[:, [1, 1, 3]])
        whole = self.m.get_item()
        np.testing.assert_array_equal(whole.to_numpy(), self.m_np)

    def test_batched_input_keeps_leading_axes(self) -> None:
        x_np = np.arange(24, dtype=np.float32).reshape(2, 3, 4)
        x = NdArray.from_numpy(x_np)
        out = x.get_item([0, 1], [3, 2])
        self.assertEqual(out.shape.dims, (2, 1, 2))
        np.testing.assert_array_equal(
            out.to_numpy()[:, 0, :], x_np[:, [0, 1], [3, 2]]
        )
        grid = x.get_item(None, [0])
        np.testing.assert_array_equal(grid.to_numpy(), x_np[:, :, [0]])

    def test_errors(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([1, 2, 3]).get_item([0], [0])
        with self.assertRaises(InvalidArgumentError):
            self.m.get_item([0, 1], [0])
        with self.assertRaises(InvalidArgumentError):
            self.m.get_item([0.5], None)
        with self.assertRaises(IndexOutOfBoundsError) as cm:
            self.m.get_item(None, [4])
        self.assertEqual(cm.exception.dim, 1)
        with self.assertRaises(IndexOutOfBoundsError):
            self.m.get_item([-1], [0])

    def test_does_not_alias_receiver(self) -> None:
        out = self.m.get_item(None, None)
        out.set(100.0, 0, 0)
        self.assertEqual(self.m.get(0, 0), 0.0)


class TestAddAt(unittest.TestCase):
    def test_point_mode_accumulates_repeats(self) -> None:
        a = NdArray.of([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        out = a.add_at([0, 2, 0], [1, 1, 1], NdArray.of([[10, 20, 30]]))
        self.assertEqual(
            out.to_list(), [[1.0, 42.0, 3.0], [4.0, 5.0, 6.0], [7.0, 28.0, 9.0]]
        )
        self.assertEqual(a.get(0, 1), 2.0)

    def test_grid_mode(self) -> None:
        a = NdArray.zeros((3, 2))
        out = a.add_at([2, 0], None, NdArray.of([[1, 2], [3, 4]]))
        self.assertEqual(out.to_list(), [[3.0, 4.0], [0.0, 0.0], [1.0, 2.0]])

    def test_single_value_is_added_everywhere(self) -> None:
        out = NdArray.zeros((2, 2)).add_at(None, [1], NdArray.scalar(5))
        self.assertEqual(out.to_list(), [[0.0, 5.0], [0.0, 5.0]])

    def test_embedding_gradient_matches_numpy(self) -> None:
        rng = np.random.default_rng(5)
        table = NdArray.zeros((6, 4))
        ids = [4, 1, 4, 0, 4]
        grad_np = rng.standard_normal((len(ids), 4)).astype(np.float32)
        out = table.add_at(ids, None, NdArray.from_numpy(grad_np))
        expected = np.zeros((6, 4), dtype=np.float32)
        np.add.at(expected, ids, grad_np)
        np.testing.assert_allclose(out.to_numpy(), expected, rtol=1e-6, atol=1e-6)

    def test_adjoint_of_get_item(self) -> None:
        rng = np.random.default_rng(9)
        x_np = rng.standard_normal((2, 3, 4)).astype(np.float64)
        g_np = rng.standard_normal((2, 1, 3)).astype(np.float64)
        x = NdArray.from_numpy(x_np, dtype=np.float64)
        rows, cols = [0, 2, 0], [1, 3, 1]
        lhs = float((x.get_item(rows, cols).to_numpy() * g_np).sum())
        scattered = NdArray.zeros((2, 3, 4), dtype=np.float64).add_at(
            rows, cols, NdArray.from_numpy(g_np, dtype=np.float64)
        )
        rhs = float((scattered.to_numpy() * x_np).sum())
        self.assertAlmostEqual(lhs, rhs, places=10)

    def test_errors(self) -> None:
        a = NdArray.zeros((2, 2))
        with self.assertRaises(ShapeMismatchError):
            a.add_at([0, 1], [0, 1], NdArray.of([1, 2, 3]))
        with self.assertRaises(InvalidArgumentError):
            a.add_at([0], [0], NdArray.zeros((0,)))
        with self.assertRaises(IndexOutOfBoundsError):
            a.add_at([2], [0], NdArray.scalar(1))
        with self.assertRaises(InvalidArgumentError):
            NdArray.zeros((3,)).add_at([0], [0], NdArray.scalar(1))


class TestSubNdArray(unittest.TestCase):
    def setUp(self) -> None:
        self.m_np = np.arange(20, dtype=np.float32).reshape(4, 5)
        self.m = NdArray.from_numpy(self.m_np)

    def test_block(self) -> None:
        out = self.m.sub_ndarray(1, 3, 2, 5)
        self.assertEqual(out.shape.dims, (2, 3))
        np.testing.assert_array_equal(out.to_numpy(), self.m_np[1:3, 2:5])

    def test_bounds_are_clamped(self) -> None:
        out = self.m.sub_ndarray(-2, 10, 3, 99)
        np.testing.assert_array_equal(out.to_numpy(), self.m_np[:, 3:])
        empty = self.m.sub_ndarray(3, 1, 0, 5)
        self.assertEqual(empty.shape.dims, (0, 5))

    def test_batched_and_rank_check(self) -> None:
        x_np = np.arange(24, dtype=np.float32).reshape(2, 3, 4)
        out = NdArray.from_numpy(x_np).sub_ndarray(0, 2, 1, 3)
        np.testing.assert_array_equal(out.to_numpy(), x_np[:, 0:2, 1:3])
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([1, 2]).sub_ndarray(0, 1, 0, 1)


class TestValueEquality(unittest.TestCase):
    def test_equal_by_shape_and_values(self) -> None:
        a = NdArray.of([[1, 2], [3, 4]])
        self.assertEqual(a, a.copy())
        self.assertEqual(a, NdArray.of([[1, 2], [3, 4]], dtype=np.float64))
        self.assertNotEqual(a, a.reshape((4,)))
        self.assertNotEqual(a, NdArray.of([[1, 2], [3, 5]]))
        self.assertNotEqual(a, [[1, 2], [3, 4]])

    def test_hash_consistent_with_equality(self) -> None:
        a = NdArray.of([0.0, float("nan"), 2.5])
        b = NdArray.of([-0.0, float("nan"), 2.5], dtype=np.float64)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b, a.copy()}), 1)

    def test_eq_method_still_gives_mask(self) -> None:
        a = NdArray.of([1, 2])
        self.assertEqual(a.eq(NdArray.of([1, 3])).to_list(), [1.0, 0.0])


if __name__ == "__main__":
    unittest.main()
