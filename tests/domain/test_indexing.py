import unittest
from math import prod

from src.ndarr.domain._errors import (
    AxisOutOfRangeError,
    IndexArityError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    ShapeMismatchError,
)
from src.ndarr.domain.utils import (
    broadcast_shapes,
    compute_strides,
    flat_to_multi_index,
    split_at_axis,
    to_index_list,
    validate_axis,
    validate_multi_index,
)


class TestIndexHelpers(unittest.TestCase):
    def test_compute_strides_row_major(self) -> None:
        self.assertEqual(compute_strides((2, 3, 4)), (12, 4, 1))
        self.assertEqual(compute_strides((5,)), (1,))
        self.assertEqual(compute_strides(()), ())

    def test_validate_axis(self) -> None:
        self.assertEqual(validate_axis(0, 2), 0)
        self.assertEqual(validate_axis(1, 2), 1)
        with self.assertRaises(AxisOutOfRangeError):
            validate_axis(2, 2)
        with self.assertRaises(AxisOutOfRangeError):
            validate_axis(-1, 2)

    def test_validate_multi_index(self) -> None:
        validate_multi_index((2, 3), (1, 2))
        with self.assertRaises(IndexArityError):
            validate_multi_index((2, 3), (1,))
        with self.assertRaises(IndexOutOfBoundsError):
            validate_multi_index((2, 3), (2, 0))
        with self.assertRaises(IndexOutOfBoundsError):
            validate_multi_index((2, 3), (0, -1))

    def test_flat_to_multi_index_roundtrips_every_offset(self) -> None:
        dims = (2, 3, 4)
        strides = compute_strides(dims)
        for flat in range(prod(dims)):
            idx = flat_to_multi_index(flat, dims)
            self.assertEqual(sum(i * s for i, s in zip(idx, strides)), flat)

    def test_flat_to_multi_index_rejects_out_of_range(self) -> None:
        with self.assertRaises(IndexOutOfBoundsError):
            flat_to_multi_index(6, (2, 3))

    def test_to_index_list(self) -> None:
        self.assertEqual(to_index_list([0, 2.0, True]), [0, 2, 1])
        with self.assertRaises(InvalidArgumentError):
            to_index_list([1.5])
        with self.assertRaises(InvalidArgumentError):
            to_index_list([float("nan")])
        with self.assertRaises(InvalidArgumentError):
            to_index_list([None])

    def test_split_at_axis(self) -> None:
        self.assertEqual(split_at_axis((2, 3, 4), 0), (1, 2, 12))
        self.assertEqual(split_at_axis((2, 3, 4), 1), (2, 3, 4))
        self.assertEqual(split_at_axis((2, 3, 4), 2), (6, 4, 1))

    def test_broadcast_shapes(self) -> None:
        self.assertEqual(broadcast_shapes("add", (2, 3), (3,)), (2, 3))
        self.assertEqual(broadcast_shapes("add", (2, 1), (1, 3)), (2, 3))
        self.assertEqual(broadcast_shapes("add", (), (4, 5)), (4, 5))
        self.assertEqual(broadcast_shapes("add", (3, 1, 5), (4, 1)), (3, 4, 5))

    def test_broadcast_shapes_mismatch_names_both(self) -> None:
        with self.assertRaises(ShapeMismatchError) as cm:
            broadcast_shapes("mul", (2, 3), (4,))
        self.assertEqual(cm.exception.shape_a, (2, 3))
        self.assertEqual(cm.exception.shape_b, (4,))
        self.assertIn("mul", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
