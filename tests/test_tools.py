"""
Tests for the drawing tools.
"""

import unittest

from curvedrawer.scene import Scene
from curvedrawer.settings import Settings
from curvedrawer.shape_tools import CircleTool, RectangleTool, StarTool, TriangleTool
from curvedrawer.tools import InterpolatedCurveTool, StraightLineTool, ToolContext


def make_ctx(**settings):
    return ToolContext(scene=Scene(), settings=Settings(**settings))


class TestStraightLineTool(unittest.TestCase):

    def setUp(self):
        self.ctx = make_ctx(snap_distance=20)
        self.tool = StraightLineTool(self.ctx)

    def test_line_without_snapping(self):
        self.tool.on_pointer_down((10, 10))
        self.tool.on_pointer_up((100, 10))
        scene = self.ctx.scene
        self.assertEqual(len(scene.points), 2)
        self.assertEqual(len(scene.lines), 1)
        start, end = scene.line_endpoints(scene.lines[0])
        self.assertEqual(start.xy, (10.0, 10.0))
        self.assertEqual(end.xy, (100.0, 10.0))
        self.assertTrue(self.tool.is_idle)

    def test_line_snaps_to_existing_end_point(self):
        existing = self.ctx.scene.add_point(100, 10)
        self.tool.on_pointer_down((10, 10))
        self.tool.on_pointer_up((103, 12))
        scene = self.ctx.scene
        self.assertEqual(len(scene.points), 2)
        _start, end = scene.line_endpoints(scene.lines[0])
        self.assertIs(end, existing)

    def test_start_point_added_on_press(self):
        self.tool.on_pointer_down((10, 10))
        self.assertEqual(len(self.ctx.scene.points), 1)
        self.assertEqual(self.ctx.scene.lines, ())

    def test_move_only_updates_preview(self):
        target = self.ctx.scene.add_point(50, 50)
        self.tool.on_pointer_down((0, 0))
        self.tool.on_pointer_move((55, 48))
        self.assertEqual(self.tool.preview_end, target.xy)
        self.tool.on_pointer_move((200, 200))
        self.assertEqual(self.tool.preview_end, (200.0, 200.0))
        self.assertEqual(len(self.ctx.scene.points), 2)
        self.assertEqual(self.ctx.scene.lines, ())

    def test_end_never_snaps_back_to_start(self):
        self.tool.on_pointer_down((0, 0))
        self.tool.on_pointer_up((5, 0))
        start, end = self.ctx.scene.line_endpoints(self.ctx.scene.lines[0])
        self.assertIsNot(start, end)

    def test_events_while_idle_are_ignored(self):
        self.tool.on_pointer_move((10, 10))
        self.tool.on_pointer_up((10, 10))
        self.assertTrue(self.ctx.scene.is_empty)

    def test_lines_share_points(self):
        self.tool.on_pointer_down((0, 0))
        self.tool.on_pointer_up((100, 0))
        self.tool.on_pointer_down((101, 1))
        self.tool.on_pointer_up((100, 100))
        scene = self.ctx.scene
        self.assertEqual(len(scene.points), 3)
        _a, shared = scene.line_endpoints(scene.lines[0])
        start, _b = scene.line_endpoints(scene.lines[1])
        self.assertIs(shared, start)
        self.assertEqual(scene.referents(shared.id), 2)


class TestInterpolatedCurveTool(unittest.TestCase):

    def setUp(self):
        self.ctx = make_ctx(snap_distance=10, curve_tension=0.5)
        self.tool = InterpolatedCurveTool(self.ctx)

    def _click(self, pos):
        self.tool.on_pointer_down(pos)
        self.tool.on_pointer_up(pos)

    def test_control_points_build_curve(self):
        for pos in ((0, 0), (50, 0), (100, 0)):
            self._click(pos)
        self.assertEqual(len(self.tool.control_points), 3)
        self.assertEqual(len(self.tool.curve_points), 41)
        self.assertTrue(all(y == 0 for _x, y in self.tool.curve_points))
        self.assertEqual(len(self.ctx.scene.points), 3)
        self.assertEqual(self.ctx.scene.curves, ())

    def test_click_on_existing_point_reuses_it(self):
        existing = self.ctx.scene.add_point(200, 200)
        self._click((0, 0))
        self._click((203, 198))
        self.assertIs(self.tool.control_points[1], existing)
        self.assertEqual(len(self.ctx.scene.points), 2)

    def test_drag_from_curve_inserts_control_point(self):
        for pos in ((0, 0), (100, 0), (200, 0)):
            self._click(pos)
        self.tool.on_pointer_down((50, 3))
        self.assertTrue(self.tool.is_inserting)
        self.assertEqual(len(self.tool.control_points), 3)
        self.tool.on_pointer_move((55, 40))
        self.assertEqual(self.tool.insert_pos, (55.0, 40.0))
        self.assertEqual(len(self.ctx.scene.points), 3)
        self.tool.on_pointer_up((60, 60))
        self.assertFalse(self.tool.is_inserting)
        xs = [p.xy for p in self.tool.control_points]
        self.assertEqual(xs, [(0.0, 0.0), (60.0, 60.0), (100.0, 0.0), (200.0, 0.0)])
        self.assertEqual(len(self.tool.curve_points), 3 * 20 + 1)

    def test_insert_release_snaps_to_existing_point(self):
        existing = self.ctx.scene.add_point(60, 60)
        for pos in ((0, 0), (100, 0), (200, 0)):
            self._click(pos)
        self.tool.on_pointer_down((50, 3))
        index = self.tool.insert_hit.insert_index
        self.tool.on_pointer_up((62, 58))
        self.assertIs(self.tool.control_points[index], existing)
        self.assertEqual(len(self.tool.control_points), 4)
        self.assertEqual(len(self.ctx.scene.points), 4)

    def test_finish_persists_snapshot(self):
        self._click((0, 0))
        self._click((40, 40))
        preview = self.tool.curve_points
        curve = self.tool.finish()
        self.assertIsNotNone(curve)
        self.assertEqual(self.ctx.scene.curves, (curve,))
        self.assertEqual(curve.curve_points, preview)
        self.assertEqual(curve.color, self.ctx.settings.stroke_color)
        self.assertEqual(curve.tension, 0.5)
        self.assertTrue(self.tool.is_idle)
        self.assertEqual(self.tool.curve_points, ())

    def test_finish_discards_single_point(self):
        self._click((0, 0))
        self.assertIsNone(self.tool.finish())
        self.assertEqual(self.ctx.scene.curves, ())
        self.assertEqual(self.tool.control_points, ())

    def test_reset_does_not_persist(self):
        self._click((0, 0))
        self._click((40, 40))
        self.tool.reset()
        self.assertEqual(self.ctx.scene.curves, ())
        self.assertTrue(self.tool.is_idle)

    def test_update_curve_uses_new_tension(self):
        for pos in ((0, 0), (50, 50), (100, 0)):
            self._click(pos)
        before = self.tool.curve_points
        self.ctx.settings.curve_tension = 1.0
        self.tool.update_curve()
        self.assertNotEqual(self.tool.curve_points, before)
        self.assertEqual(self.tool.curve_points[-1], (100.0, 0.0))


class TestCircleAndStarTools(unittest.TestCase):

    def setUp(self):
        self.ctx = make_ctx()

    def test_sub_threshold_circle_discarded(self):
        tool = CircleTool(self.ctx)
        tool.on_pointer_down((0, 0))
        tool.on_pointer_up((0, 3))
        self.assertEqual(self.ctx.scene.shapes, ())
        self.assertTrue(tool.is_idle)

    def test_exact_threshold_discarded(self):
        tool = CircleTool(self.ctx)
        tool.on_pointer_down((0, 0))
        tool.on_pointer_up((5, 0))
        self.assertEqual(self.ctx.scene.shapes, ())

    def test_circle_created(self):
        tool = CircleTool(self.ctx)
        tool.on_pointer_down((10, 10))
        tool.on_pointer_move((20, 10))
        self.assertEqual(tool.radius, 10.0)
        tool.on_pointer_up((10, 40))
        shape = self.ctx.scene.shapes[0]
        self.assertEqual(shape.type, "circle")
        self.assertEqual(shape.center, (10.0, 10.0))
        self.assertEqual(shape.radius, 30.0)
        self.assertEqual(len(shape.points), 65)
        self.assertEqual(shape.points[0], shape.points[-1])

    def test_star_created(self):
        tool = StarTool(self.ctx)
        tool.on_pointer_down((0, 0))
        tool.on_pointer_up((0, 50))
        shape = self.ctx.scene.shapes[0]
        self.assertEqual(shape.type, "star")
        self.assertEqual(shape.radius, 50.0)
        self.assertEqual(len(shape.points), 11)
        self.assertAlmostEqual(shape.points[1][0] ** 2 + shape.points[1][1] ** 2, 20.0 ** 2)

    def test_shapes_do_not_add_points(self):
        tool = StarTool(self.ctx)
        tool.on_pointer_down((0, 0))
        tool.on_pointer_up((0, 50))
        self.assertEqual(self.ctx.scene.points, ())


class TestRectangleTool(unittest.TestCase):

    def test_rectangle_created(self):
        ctx = make_ctx()
        tool = RectangleTool(ctx)
        tool.on_pointer_down((0, 0))
        tool.on_pointer_move((5, 5))
        tool.on_pointer_up((20, 10))
        shape = ctx.scene.shapes[0]
        self.assertEqual(shape.type, "rectangle")
        self.assertEqual(shape.points, ((0, 0), (20, 0), (20, 10), (0, 10), (0, 0)))
        self.assertIsNone(shape.radius)

    def test_zero_area_rectangle_kept(self):
        ctx = make_ctx()
        tool = RectangleTool(ctx)
        tool.on_pointer_down((3, 3))
        tool.on_pointer_up((3, 3))
        self.assertEqual(len(ctx.scene.shapes), 1)


class TestTriangleTool(unittest.TestCase):

    def test_three_clicks_make_a_triangle(self):
        ctx = make_ctx()
        tool = TriangleTool(ctx)
        for pos in ((0, 0), (10, 0), (5, 10)):
            tool.on_pointer_down(pos)
            tool.on_pointer_up(pos)
        self.assertEqual(len(ctx.scene.shapes), 1)
        shape = ctx.scene.shapes[0]
        self.assertEqual(shape.type, "triangle")
        self.assertEqual(shape.points, ((0, 0), (10, 0), (5, 10), (0, 0)))
        self.assertEqual(tool.vertices, [])

    def test_two_clicks_persist_nothing(self):
        ctx = make_ctx()
        tool = TriangleTool(ctx)
        tool.on_pointer_down((0, 0))
        tool.on_pointer_move((4, 4))
        tool.on_pointer_down((10, 0))
        self.assertEqual(ctx.scene.shapes, ())
        self.assertEqual(tool.vertices, [(0.0, 0.0), (10.0, 0.0)])


if __name__ == "__main__":
    unittest.main()
