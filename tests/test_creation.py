import logging
import unittest
import numpy as np
import polyaffine
from polyaffine import (
    DimensionMismatchError,
    MissingParameterError,
    RotateZ,
    Scale,
    SpecificationError,
    TransformChain,
    Translate,
    UnknownOperationKindError,
)


class TestCreate(unittest.TestCase):
    def test_translate_scale_rotate(self):
        # rotate first, then scale, then translate
        t = polyaffine.create([
            Translate(3, x=1, y=2, z=3),
            Scale(3, x=2, y=2, z=2),
            RotateZ(90.0, "degrees"),
        ])
        np.testing.assert_allclose(
            polyaffine.transform(t, [4, 5, 6]), [-9.0, 10.0, 15.0], atol=1e-5)

    def test_same_result_from_mappings(self):
        t = polyaffine.create([
            {"type": "translate", "dimensions": 3, "x": 1, "y": 2, "z": 3},
            {"type": "scale", "dimensions": 3, "x": 2, "y": 2, "z": 2},
            {"type": "rotate_z", "angle": 90.0, "units": "degrees"},
        ])
        np.testing.assert_allclose(
            polyaffine.transform(t, [4, 5, 6]), [-9.0, 10.0, 15.0], atol=1e-5)

    def test_equals_nested_multiply(self):
        specs = [Translate(2, x=1.0), polyaffine.RotateXY(30.0), Scale(2, x=3.0, y=0.5)]
        a, b, c = (polyaffine.build_matrix(s) for s in specs)
        expected = polyaffine.multiply(a, polyaffine.multiply(b, c))
        self.assertTrue(polyaffine.create(specs).isclose(expected, atol=1e-12))

    def test_single_spec(self):
        t = polyaffine.create(Scale(1, x=4.0))
        np.testing.assert_array_equal(t.matrix, [[4.0, 0.0], [0.0, 1.0]])
        t = polyaffine.create({"type": "translate", "dimensions": 2, "x": 1.0})
        np.testing.assert_array_equal(t.translation, [1.0, 0.0])

    def test_dimensions_from_first_spec(self):
        for n in (1, 2, 3):
            self.assertEqual(polyaffine.create([Translate(n, x=1.0)]).dimensions, n)

    def test_defaulted_axes(self):
        t = polyaffine.create([Translate(3, x=1.0), Scale(3, y=2.0)])
        np.testing.assert_allclose(
            polyaffine.transform(t, [1.0, 1.0, 1.0]), [2.0, 2.0, 1.0])

    def test_shear_spec(self):
        t = polyaffine.create(polyaffine.Shear(2, yx=1.0))
        np.testing.assert_allclose(polyaffine.transform(t, [2.0, 1.0]), [2.0, 3.0])

    def test_mixed_dimensions_raise(self):
        with self.assertRaises(DimensionMismatchError):
            polyaffine.create([Translate(2, x=1.0), RotateZ(10.0)])

    def test_empty_raises(self):
        with self.assertRaises(SpecificationError):
            polyaffine.create([])

    def test_unknown_kind(self):
        with self.assertRaises(UnknownOperationKindError):
            polyaffine.create([{"type": "reflect", "dimensions": 2}])
        with self.assertRaises(UnknownOperationKindError):
            polyaffine.create([object()])

    def test_missing_parameter(self):
        with self.assertRaises(MissingParameterError):
            polyaffine.create({"type": "rotate_x", "units": "radians"})

    def test_debug_logging(self):
        with self.assertLogs("polyaffine.creation", level=logging.DEBUG) as logs:
            polyaffine.create([Translate(1, x=1.0), Scale(1, x=2.0)])
        self.assertTrue(any("translate" in line for line in logs.output))


class TestTransformChain(unittest.TestCase):
    def test_pipeline(self):
        point = (TransformChain.identity(3)
                 .translate(1, 2, 3)
                 .scale(2, 2, 2)
                 .rotate_z(90.0, "degrees")
                 .transform([4, 5, 6]))
        np.testing.assert_allclose(point, [-9.0, 10.0, 15.0], atol=1e-5)

    def test_chain_is_immutable(self):
        base = TransformChain(2).translate(1.0, 1.0)
        extended = base.rotate_xy(90.0)
        self.assertEqual(len(base), 1)
        self.assertEqual(len(extended), 2)
        self.assertIsNot(base, extended)

    def test_generate_matches_create(self):
        chain = TransformChain(3).translate(1.0).scale(2.0, 2.0, 2.0).rotate_z(45.0)
        self.assertTrue(chain.generate().isclose(polyaffine.create(list(chain.specs))))

    def test_empty_chain_is_identity(self):
        self.assertTrue(TransformChain(2).generate() == polyaffine.identity(2))

    def test_append_mapping(self):
        chain = TransformChain(1).append({"type": "scale", "dimensions": 1, "x": 3.0})
        self.assertEqual(chain.generate().map(2.0), 6.0)

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatchError):
            TransformChain(2).rotate_x(10.0)
        with self.assertRaises(SpecificationError):
            TransformChain(1).translate(1.0, 2.0)

    def test_rotations_and_shear(self):
        chain = TransformChain(3).rotate_x(90.0).rotate_y(0.0).shear(xy=1.0)
        np.testing.assert_allclose(chain.transform([0.0, 1.0, 0.0]), [1.0, 0.0, 1.0], atol=1e-9)


if __name__ == "__main__":
    unittest.main()
