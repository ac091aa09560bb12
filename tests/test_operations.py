import unittest
import numpy as np
import polyaffine
from polyaffine import DimensionMismatchError
from polyaffine.operations import m, t as apply


class TestComposition(unittest.TestCase):
    def setUp(self):
        self.T = polyaffine.translate(1.0, 2.0, 3.0)
        self.S = polyaffine.scale(2.0, 2.0, 2.0)
        self.p = [1.0, 2.0, 3.0]

    def test_identity_law(self):
        for n, p in ((1, [7.5]), (2, [1.0, -2.0]), (3, [4.0, 5.0, 6.0])):
            out = polyaffine.transform(polyaffine.identity(n), p)
            np.testing.assert_array_equal(out, p)

    def test_right_operand_is_applied_first(self):
        # T·S scales first, then translates
        out = polyaffine.transform(polyaffine.multiply(self.T, self.S), self.p)
        np.testing.assert_allclose(out, [3.0, 6.0, 9.0])

        # S·T translates first, then scales
        out = polyaffine.transform(polyaffine.multiply(self.S, self.T), self.p)
        np.testing.assert_allclose(out, [4.0, 8.0, 12.0])

    def test_not_commutative(self):
        ts = polyaffine.multiply(self.T, self.S)
        st = polyaffine.multiply(self.S, self.T)
        self.assertFalse(
            np.allclose(polyaffine.transform(ts, self.p), polyaffine.transform(st, self.p)))

    def test_scale_then_translate_example(self):
        t_translate = polyaffine.translate(3.0, 4.0, 5.0)
        t_scale = polyaffine.scale(2.0, 2.0, 2.0)
        np.testing.assert_allclose(
            polyaffine.transform(polyaffine.multiply(t_translate, t_scale), self.p),
            [5.0, 8.0, 11.0])
        np.testing.assert_allclose(
            polyaffine.transform(polyaffine.multiply(t_scale, t_translate), self.p),
            [8.0, 12.0, 16.0])

    def test_associative(self):
        a = polyaffine.multiply(polyaffine.rotate_x(17.0), polyaffine.translate(1.0, -2.0, 0.5))
        b = polyaffine.multiply(polyaffine.scale(0.5, 3.0, 2.0), polyaffine.shear(3, xy=0.3))
        c = polyaffine.multiply(polyaffine.rotate_z(-40.0), polyaffine.translate(4.0, 0.0, -1.0))
        left = polyaffine.multiply(polyaffine.multiply(a, b), c)
        right = polyaffine.multiply(a, polyaffine.multiply(b, c))
        self.assertTrue(left.isclose(right, atol=1e-9))

    def test_multiply_does_not_mutate_operands(self):
        before_t = self.T.matrix.copy()
        before_s = self.S.matrix.copy()
        polyaffine.multiply(self.T, self.S)
        np.testing.assert_array_equal(self.T.matrix, before_t)
        np.testing.assert_array_equal(self.S.matrix, before_s)

    def test_multiply_size_mismatch(self):
        with self.assertRaises(DimensionMismatchError):
            polyaffine.multiply(self.T, polyaffine.translate(1.0, 2.0))

    def test_transform_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatchError):
            polyaffine.transform(self.T, [1.0, 2.0])
        with self.assertRaises(DimensionMismatchError):
            polyaffine.transform(polyaffine.translate(1.0), [1.0, 2.0, 3.0])
        # also usable as a ValueError
        with self.assertRaises(ValueError):
            polyaffine.transform(self.T, [1.0, 2.0, 3.0, 4.0])

    def test_transform_returns_same_dimension(self):
        out = polyaffine.transform(polyaffine.translate(1.0, 1.0), (2, 3))
        self.assertEqual(out.shape, (2,))
        np.testing.assert_allclose(out, [3.0, 4.0])

    def test_compose_folds_left_to_right(self):
        r = polyaffine.rotate_z(90.0)
        composed = polyaffine.compose(self.T, self.S, r)
        expected = polyaffine.multiply(polyaffine.multiply(self.T, self.S), r)
        self.assertTrue(composed.isclose(expected))
        with self.assertRaises(ValueError):
            polyaffine.compose()
        with self.assertRaises(polyaffine.AffineError):
            polyaffine.compose()

    def test_transform_points_matches_single(self):
        t = polyaffine.compose(self.T, self.S, polyaffine.rotate_y(30.0))
        points = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [-4.0, 5.0, 0.5]])
        batch = polyaffine.transform_points(t, points)
        for row, p in zip(batch, points):
            np.testing.assert_allclose(row, polyaffine.transform(t, p), atol=1e-12)
        with self.assertRaises(DimensionMismatchError):
            polyaffine.transform_points(t, [[1.0, 2.0]])

    def test_aliases(self):
        self.assertTrue(m(self.T, self.S) == polyaffine.multiply(self.T, self.S))
        np.testing.assert_array_equal(apply(self.T, self.p), polyaffine.transform(self.T, self.p))


if __name__ == "__main__":
    unittest.main()
