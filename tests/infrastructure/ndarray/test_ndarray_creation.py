import unittest

import numpy as np

from src.ndarr.domain._errors import (
    IndexArityError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
)
from src.ndarr.domain._ndarray import INdArray
from src.ndarr.infrastructure.ndarray._ndarray import NdArray
from src.ndarr.infrastructure.shape._shape import Shape


class TestNdArrayCreation(unittest.TestCase):
    def test_of_nested_infers_shape(self) -> None:
        a = NdArray.of([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(a.shape, Shape.of(2, 3))
        self.assertEqual(a.dtype, np.float32)
        np.testing.assert_array_equal(
            a.to_numpy(), np.array([[1, 2, 3], [4, 5, 6]], dtype=np.float32)
        )
        self.assertIsInstance(a, INdArray)

    def test_of_rejects_ragged_nesting(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([[1, 2], [3]])

    def test_of_rejects_non_numeric(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([["a", "b"]])
        with self.assertRaises(InvalidArgumentError):
            NdArray.of(None)

    def test_of_flat_buffer_with_shape(self) -> None:
        a = NdArray.of([1, 2, 3, 4, 5, 6], Shape.of(2, 3))
        self.assertEqual(a.shape.dims, (2, 3))
        self.assertEqual(a.get(1, 0), 4.0)

    def test_of_flat_buffer_length_mismatch(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([1, 2, 3], (2, 2))

    def test_of_number_is_scalar(self) -> None:
        s = NdArray.of(3.5)
        self.assertTrue(s.shape.is_scalar())
        self.assertEqual(s.get(), 3.5)
        self.assertEqual(s.item(), 3.5)

    def test_of_does_not_alias_input(self) -> None:
        src = np.array([1.0, 2.0], dtype=np.float32)
        a = NdArray.of(src)
        src[0] = 100.0
        self.assertEqual(a.get(0), 1.0)

    def test_zeros_ones_full_like(self) -> None:
        np.testing.assert_array_equal(NdArray.zeros((2, 2)).to_numpy(), np.zeros((2, 2)))
        np.testing.assert_array_equal(NdArray.ones((3,)).to_numpy(), np.ones(3))
        f = NdArray.full((2, 3), 7)
        np.testing.assert_array_equal(f.to_numpy(), np.full((2, 3), 7.0))
        filled = f.like(-1.0)
        self.assertEqual(filled.shape, f.shape)
        np.testing.assert_array_equal(filled.to_numpy(), np.full((2, 3), -1.0))

    def test_constructor_allocates_zeros(self) -> None:
        a = NdArray(Shape.of(2, 3))
        self.assertEqual(a.size(), 6)
        np.testing.assert_array_equal(a.get_array(), np.zeros(6))

    def test_eye(self) -> None:
        np.testing.assert_array_equal(NdArray.eye((2, 3)).to_numpy(), np.eye(2, 3))
        with self.assertRaises(InvalidArgumentError):
            NdArray.eye((3,))

    def test_linspace(self) -> None:
        np.testing.assert_allclose(
            NdArray.linspace(0, 1, 5).to_numpy(), np.linspace(0, 1, 5), rtol=1e-6
        )
        np.testing.assert_array_equal(NdArray.linspace(2, 9, 1).to_numpy(), [2.0])
        with self.assertRaises(InvalidArgumentError):
            NdArray.linspace(0, 1, 0)

    def test_random_factories_are_seedable(self) -> None:
        a = NdArray.rand_normal((3, 4), seed=7)
        b = NdArray.rand_normal((3, 4), seed=7)
        np.testing.assert_array_equal(a.to_numpy(), b.to_numpy())

        u = NdArray.rand_uniform(-1.0, 2.0, (100,), seed=3).to_numpy()
        self.assertTrue(np.all(u >= -1.0))
        self.assertTrue(np.all(u < 2.0))
        with self.assertRaises(InvalidArgumentError):
            NdArray.rand_uniform(2.0, 1.0, (2,))

    def test_explicit_dtype(self) -> None:
        a = NdArray.of([1, 2], dtype=np.float64)
        self.assertEqual(a.dtype, np.float64)
        self.assertEqual(a.add(a).dtype, np.float64)

    def test_non_floating_dtype_rejected(self) -> None:
        for dt in (np.int32, np.int64, np.bool_, "int8"):
            with self.assertRaises(InvalidArgumentError):
                NdArray.of([[1, 2]], dtype=dt)
        with self.assertRaises(InvalidArgumentError):
            NdArray.zeros((2,), dtype=np.int32)
        with self.assertRaises(InvalidArgumentError):
            NdArray.from_numpy(np.arange(3), dtype=np.int64)
        with self.assertRaises(InvalidArgumentError):
            NdArray.full((2,), 1, dtype="not-a-dtype")

    def test_integer_numpy_input_becomes_float(self) -> None:
        a = NdArray.from_numpy(np.array([[1, 2]], dtype=np.int32))
        self.assertEqual(a.dtype, np.float32)
        self.assertEqual(a.mean(1).to_list(), [1.5])
        self.assertEqual(a.div_num(2).to_list(), [[0.5, 1.0]])

    def test_from_numpy(self) -> None:
        x = np.arange(6, dtype=np.float64).reshape(3, 2)
        a = NdArray.from_numpy(x)
        self.assertEqual(a.shape.dims, (3, 2))
        np.testing.assert_array_equal(a.to_numpy(), x.astype(np.float32))


class TestNdArrayAccess(unittest.TestCase):
    def test_get_set(self) -> None:
        a = NdArray.zeros((2, 3))
        a.set(5.0, 1, 2)
        self.assertEqual(a.get(1, 2), 5.0)
        self.assertEqual(a.get_array()[5], 5.0)

    def test_get_errors_propagate(self) -> None:
        a = NdArray.zeros((2, 3))
        with self.assertRaises(IndexArityError):
            a.get(1)
        with self.assertRaises(IndexOutOfBoundsError):
            a.get(2, 0)
        with self.assertRaises(IndexOutOfBoundsError):
            a.set(1.0, 0, 3)

    def test_conversions_return_copies(self) -> None:
        a = NdArray.of([[1, 2], [3, 4]])
        a.to_numpy()[0, 0] = 99
        a.get_array()[1] = 99
        self.assertEqual(a.get(0, 0), 1.0)
        self.assertEqual(a.get(0, 1), 2.0)

    def test_to_list_and_get_matrix(self) -> None:
        a = NdArray.of([[1, 2], [3, 4]])
        self.assertEqual(a.to_list(), [[1.0, 2.0], [3.0, 4.0]])
        self.assertEqual(a.get_matrix(), [[1.0, 2.0], [3.0, 4.0]])
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([1, 2]).get_matrix()

    def test_item_requires_single_element(self) -> None:
        self.assertEqual(NdArray.of([[4]]).item(), 4.0)
        with self.assertRaises(InvalidArgumentError):
            NdArray.of([1, 2]).item()

    def test_copy_is_independent(self) -> None:
        a = NdArray.of([1, 2, 3])
        b = a.copy()
        b.set(10.0, 0)
        self.assertEqual(a.get(0), 1.0)
        self.assertEqual(b.shape, a.shape)

    def test_len_and_repr(self) -> None:
        a = NdArray.of([[1, 2], [3, 4], [5, 6]])
        self.assertEqual(len(a), 3)
        self.assertIn("shape=(3, 2)", repr(a))
        with self.assertRaises(TypeError):
            len(NdArray.scalar(1.0))


if __name__ == "__main__":
    unittest.main()
