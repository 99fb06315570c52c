"""
Tests for the scene model and settings.
"""

import unittest

from pydantic import ValidationError

from curvedrawer.geometry import catmull_rom_spline
from curvedrawer.scene import Curve, Scene
from curvedrawer.settings import Settings


class TestScene(unittest.TestCase):

    def setUp(self):
        self.scene = Scene()

    def test_points_have_stable_distinct_ids(self):
        a = self.scene.add_point(0, 0)
        b = self.scene.add_point(0, 0)
        self.assertNotEqual(a.id, b.id)
        self.assertIsNot(a, b)
        self.assertIs(self.scene.get_point(a.id), a)
        self.assertEqual(self.scene.points, (a, b))

    def test_points_are_immutable(self):
        point = self.scene.add_point(1, 2)
        with self.assertRaises(AttributeError):
            point.x = 5

    def test_shared_point_referents(self):
        a = self.scene.add_point(0, 0)
        b = self.scene.add_point(10, 0)
        c = self.scene.add_point(10, 10)
        self.scene.add_line(a, b, "#000", 1)
        self.scene.add_line(b, c, "#000", 1)
        self.scene.add_curve([a, b, c], "#000", 1, 0.5)
        self.assertEqual(self.scene.referents(a.id), 2)
        self.assertEqual(self.scene.referents(b.id), 3)
        self.assertEqual(self.scene.referents(c.id), 2)
        self.assertEqual(self.scene.dangling_references(), [])

    def test_line_endpoints_resolve_through_arena(self):
        a = self.scene.add_point(0, 0)
        b = self.scene.add_point(10, 0)
        line = self.scene.add_line(a, b, "#123456", 3)
        self.assertEqual(self.scene.line_endpoints(line), (a, b))
        self.assertEqual(line.width, 3.0)

    def test_foreign_points_are_rejected(self):
        other = Scene()
        stranger = other.add_point(0, 0)
        mine = self.scene.add_point(5, 5)
        with self.assertRaises(ValueError):
            self.scene.add_line(mine, stranger, "#000", 1)
        with self.assertRaises(ValueError):
            self.scene.add_curve([mine, stranger], "#000", 1, 0.5)
        self.assertEqual(self.scene.lines, ())
        self.assertEqual(self.scene.curves, ())

    def test_curve_points_are_derived(self):
        pts = [self.scene.add_point(0, 0), self.scene.add_point(20, 30), self.scene.add_point(40, 0)]
        curve = self.scene.add_curve(pts, "#000", 2, 0.25)
        expected = catmull_rom_spline([p.xy for p in pts], 0.25, 20)
        self.assertEqual(list(curve.curve_points), expected)
        self.assertEqual(self.scene.control_points(curve), tuple(pts))
        with self.assertRaises(AttributeError):
            curve.curve_points = ()

    def test_short_curve_rejected(self):
        a = self.scene.add_point(0, 0)
        with self.assertRaises(ValueError):
            self.scene.add_curve([a], "#000", 1, 0.5)

    def test_curve_build_snapshot(self):
        pts = [self.scene.add_point(0, 0), self.scene.add_point(10, 0)]
        curve = Curve.build("C9999", pts, "#fff", 1, 0.5)
        self.assertEqual(curve.control_ids, (pts[0].id, pts[1].id))
        self.assertEqual(curve.curve_points, ((0.0, 0.0), (10.0, 0.0)))

    def test_unknown_shape_type(self):
        with self.assertRaises(ValueError):
            self.scene.add_shape("hexagon", [(0, 0)], "#000", 1)

    def test_clear_empties_everything(self):
        a = self.scene.add_point(0, 0)
        b = self.scene.add_point(1, 1)
        self.scene.add_line(a, b, "#000", 1)
        self.scene.add_shape("rectangle", [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)], "#000", 1)
        self.assertEqual(len(self.scene), 4)
        self.scene.clear()
        self.assertTrue(self.scene.is_empty)
        self.assertFalse(self.scene.has_point(a.id))


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        settings = Settings()
        self.assertEqual(settings.stroke_width, 2.0)
        self.assertEqual(settings.stroke_color, "#6366f1")
        self.assertEqual(settings.snap_distance, 20.0)
        self.assertEqual(settings.curve_tension, 0.5)
        self.assertFalse(settings.show_influence_radius)

    def test_assignment_is_validated(self):
        settings = Settings()
        with self.assertRaises(ValidationError):
            settings.stroke_width = 0
        with self.assertRaises(ValidationError):
            settings.snap_distance = -1
        settings.snap_distance = 0
        self.assertEqual(settings.snap_distance, 0.0)

    def test_tension_is_free(self):
        settings = Settings(curve_tension=-2.5)
        self.assertEqual(settings.curve_tension, -2.5)


if __name__ == "__main__":
    unittest.main()
