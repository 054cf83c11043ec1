import unittest

from core.coordinate_mapper import CoordinateMapper
from domain.models import GridCoordinate


class TestCoordinateMapper(unittest.TestCase):
    def setUp(self):
        self.mapper = CoordinateMapper(34, 22, 0.18, 0.14)

    def test_inset_corners(self):
        self.assertEqual(self.mapper.to_grid(0.18, 0.14), GridCoordinate(0, 0))
        self.assertEqual(self.mapper.to_grid(0.82, 0.86), GridCoordinate(33, 21))

    def test_centre(self):
        # floor(0.5 * 33) = 16, floor(0.5 * 21) = 10
        self.assertEqual(self.mapper.to_grid(0.5, 0.5), (16, 10))

    def test_outside_points_clamp_to_edges(self):
        self.assertEqual(self.mapper.to_grid(-0.2, 1.4), self.mapper.to_grid(0.0, 1.0))
        self.assertEqual(self.mapper.to_grid(-0.2, 1.4), (0, 21))
        self.assertEqual(self.mapper.to_grid(5.0, -3.0), (33, 0))

    def test_output_always_in_range(self):
        steps = [i / 40 - 0.25 for i in range(61)]
        for px in steps:
            for py in steps:
                gx, gy = self.mapper.to_grid(px, py)
                self.assertTrue(0 <= gx < 34 and 0 <= gy < 22, (px, py))

    def test_relative_is_not_clamped(self):
        rel_x, rel_y = self.mapper.to_relative(0.0, 1.0)
        self.assertLess(rel_x, 0.0)
        self.assertGreater(rel_y, 1.0)

    def test_invalid_configuration(self):
        with self.assertRaises(ValueError):
            CoordinateMapper(0, 22, 0.18, 0.14)
        with self.assertRaises(ValueError):
            CoordinateMapper(34, 22, 0.5, 0.14)
        with self.assertRaises(ValueError):
            CoordinateMapper(34, 22, 0.18, 0.0)


if __name__ == '__main__':
    unittest.main()
