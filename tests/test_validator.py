"""Tests for validate() and line_sums()."""
import unittest

import numpy as np

from magic_squares import generate, line_sums, validate

LO_SHU = [8, 1, 6, 3, 5, 7, 4, 9, 2]
# rows and columns hit 15, diagonals do not
SEMI_MAGIC = [1, 6, 8, 5, 7, 3, 9, 2, 4]


class TestValidate(unittest.TestCase):

    def test_lo_shu_is_magic(self):
        self.assertTrue(validate(3, LO_SHU))

    def test_order_one(self):
        self.assertTrue(validate(1, [1]))
        self.assertFalse(validate(1, [2]))

    def test_length_mismatch_is_false(self):
        self.assertFalse(validate(3, LO_SHU[:-1]))
        self.assertFalse(validate(4, LO_SHU))
        self.assertFalse(validate(0, []))

    def test_repeated_values_rejected(self):
        """All fives sum correctly everywhere but are not a permutation."""
        self.assertFalse(validate(3, [5] * 9))

    def test_out_of_range_values_rejected(self):
        self.assertFalse(validate(3, [0, 1, 6, 3, 5, 7, 4, 9, 10]))
        self.assertFalse(validate(3, [-8, 1, 6, 3, 5, 7, 4, 9, 2]))

    def test_semi_magic_rejected(self):
        self.assertFalse(validate(3, SEMI_MAGIC))

    def test_row_failure(self):
        self.assertFalse(validate(3, [1, 2, 3, 4, 5, 6, 7, 8, 9]))

    def test_non_integer_cells_rejected(self):
        self.assertFalse(validate(3, [float(v) for v in LO_SHU]))
        self.assertFalse(validate(3, [str(v) for v in LO_SHU]))

    def test_nested_rows_accepted(self):
        self.assertTrue(validate(3, [[8, 1, 6], [3, 5, 7], [4, 9, 2]]))

    def test_ragged_rows_rejected(self):
        self.assertFalse(validate(3, [[8, 1, 6], [3, 5], [7, 4, 9, 2]]))

    def test_numpy_input(self):
        self.assertTrue(validate(3, np.array(LO_SHU, dtype=np.uint32)))

    def test_pure_predicate(self):
        cells = list(LO_SHU)
        arr = np.array(SEMI_MAGIC)
        for _ in range(2):
            self.assertTrue(validate(3, cells))
            self.assertFalse(validate(3, arr))
        self.assertEqual(cells, LO_SHU)
        self.assertEqual(arr.tolist(), SEMI_MAGIC)

    def test_order_1000_without_overflow(self):
        square = generate(1000, seed=11)
        self.assertEqual(square.magic_constant, 500_000_500)
        self.assertTrue(validate(1000, square.cells))


class TestLineSums(unittest.TestCase):

    def test_magic_square_has_no_deviations(self):
        summary = line_sums(3, LO_SHU)
        self.assertEqual(summary.magic_constant, 15)
        self.assertEqual(summary.row_sums, [15, 15, 15])
        self.assertEqual(summary.column_sums, [15, 15, 15])
        self.assertEqual(summary.diagonal_sums, [15, 15])
        self.assertTrue(summary.is_magic)
        self.assertEqual(summary.deviations, {})

    def test_semi_magic_reports_diagonals(self):
        summary = line_sums(3, SEMI_MAGIC)
        self.assertFalse(summary.is_magic)
        self.assertEqual(summary.deviations, {"main diagonal": -3, "anti-diagonal": 9})

    def test_natural_order_reports_rows_and_columns(self):
        off = line_sums(3, list(range(1, 10))).deviations
        self.assertEqual(off["row 0"], -9)
        self.assertEqual(off["row 2"], 9)
        self.assertNotIn("row 1", off)
        self.assertEqual(off["column 0"], -3)
        self.assertNotIn("main diagonal", off)

    def test_bad_shape_raises(self):
        with self.assertRaises(ValueError):
            line_sums(3, [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
