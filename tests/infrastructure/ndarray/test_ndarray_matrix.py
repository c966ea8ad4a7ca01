import unittest

import numpy as np

from src.ndarr.domain._errors import (
    AxisOutOfRangeError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from src.ndarr.infrastructure.ndarray._ndarray import NdArray


class TestNdArrayDot(unittest.TestCase):
    def test_matrix_product(self) -> None:
        rng = np.random.default_rng(5)
        a_np = rng.standard_normal((3, 4)).astype(np.float32)
        b_np = rng.standard_normal((4, 2)).astype(np.float32)
        out = NdArray.from_numpy(a_np).dot(NdArray.from_numpy(b_np))
        self.assertEqual(out.shape.dims, (3, 2))
        np.testing.assert_allclose(out.to_numpy(), a_np @ b_np, rtol=1e-5, atol=1e-6)

    def test_identity(self) -> None:
        m = NdArray.of([[1, 2], [3, 4]])
        self.assertEqual(m.dot(NdArray.eye((2, 2))).to_list(), [[1.0, 2.0], [3.0, 4.0]])

    def test_batched_product(self) -> None:
        rng = np.random.default_rng(6)
        a_np = rng.standard_normal((2, 3, 4)).astype(np.float32)
        b_np = rng.standard_normal((2, 4, 5)).astype(np.float32)
        out = NdArray.from_numpy(a_np).dot(NdArray.from_numpy(b_np))
        self.assertEqual(out.shape.dims, (2, 3, 5))
        np.testing.assert_allclose(out.to_numpy(), np.matmul(a_np, b_np), rtol=1e-5, atol=1e-6)

    def test_dot_errors(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            NdArray.zeros((2, 3)).dot(NdArray.zeros((2, 3)))
        with self.assertRaises(ShapeMismatchError):
            NdArray.zeros((2, 2, 3)).dot(NdArray.zeros((3, 3, 1)))
        with self.assertRaises(InvalidArgumentError):
            NdArray.zeros((3,)).dot(NdArray.zeros((3, 1)))


class TestNdArraySoftmax(unittest.TestCase):
    def _ref(self, x: np.ndarray, axis: int) -> np.ndarray:
        e = np.exp(x - x.max(axis=axis, keepdims=True))
        return e / e.sum(axis=axis, keepdims=True)

    def test_default_axis_is_last(self) -> None:
        x_np = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0]], dtype=np.float32)
        out = NdArray.from_numpy(x_np).softmax()
        np.testing.assert_allclose(out.to_numpy(), self._ref(x_np, 1), rtol=1e-6)
        np.testing.assert_allclose(out.to_numpy().sum(axis=1), [1.0, 1.0], rtol=1e-6)

    def test_explicit_axis_and_vector(self) -> None:
        x_np = np.arange(6, dtype=np.float32).reshape(2, 3)
        out = NdArray.from_numpy(x_np).softmax(0)
        np.testing.assert_allclose(out.to_numpy(), self._ref(x_np, 0), rtol=1e-6)

        v = NdArray.of([1.0, 1.0, 1.0, 1.0]).softmax()
        np.testing.assert_allclose(v.to_numpy(), np.full(4, 0.25), rtol=1e-6)

    def test_large_values_are_stable(self) -> None:
        out = NdArray.of([1000.0, 1000.0]).softmax()
        np.testing.assert_allclose(out.to_numpy(), [0.5, 0.5], rtol=1e-6)

    def test_invalid_axis(self) -> None:
        with self.assertRaises(AxisOutOfRangeError):
            NdArray.zeros((2, 2)).softmax(2)


if __name__ == "__main__":
    unittest.main()
