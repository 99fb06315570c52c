"""Shape stamping tools: circle, rectangle, triangle and star."""
from __future__ import annotations

import logging
from typing import List, Optional

from .geometry import (
    Vec,
    as_vec,
    distance,
    get_circle_points,
    get_rectangle_points,
    get_star_points,
    get_triangle_points,
)
from .surface import PointState, RenderSurface
from .tools import ToolBase, ToolContext

logger = logging.getLogger(__name__)

MIN_RADIUS = 5.0
STAR_POINTS = 5
STAR_INNER_RATIO = 0.4


class _RadialTool(ToolBase):
    """Drag from the center outwards; releases under ``MIN_RADIUS`` are dropped."""

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self._center: Optional[Vec] = None
        self._radius = 0.0

    @property
    def is_idle(self) -> bool:
        return self._center is None

    @property
    def center(self) -> Optional[Vec]:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def outline(self, center: Vec, radius: float) -> List[Vec]:
        raise NotImplementedError

    def on_pointer_down(self, pos: Vec) -> None:
        self._center = as_vec(pos)
        self._radius = 0.0

    def on_pointer_move(self, pos: Vec) -> None:
        if self._center is None:
            return
        self._radius = distance(self._center, pos)

    def on_pointer_up(self, pos: Vec) -> None:
        if self._center is None:
            return
        self._radius = distance(self._center, pos)
        if self._radius > MIN_RADIUS:
            settings = self.ctx.settings
            self.ctx.scene.add_shape(
                self.name,
                self.outline(self._center, self._radius),
                settings.stroke_color,
                settings.stroke_width,
                center=self._center,
                radius=self._radius,
            )
        else:
            logger.debug("Discarded %s with radius %.2f", self.name, self._radius)
        self.reset()

    def reset(self) -> None:
        self._center = None
        self._radius = 0.0

    def render_preview(self, surface: RenderSurface) -> None:
        if self._center is None or self._radius == 0:
            return
        settings = self.ctx.settings
        surface.draw_shape(
            self.outline(self._center, self._radius),
            color=settings.stroke_color,
            width=settings.stroke_width,
            fill=True,
        )


class CircleTool(_RadialTool):
    name = "circle"

    def outline(self, center: Vec, radius: float) -> List[Vec]:
        return get_circle_points(center, radius)


class StarTool(_RadialTool):
    """Five-pointed star; the inner radius follows the dragged outer radius."""

    name = "star"

    def outline(self, center: Vec, radius: float) -> List[Vec]:
        return get_star_points(center, radius, radius * STAR_INNER_RATIO, STAR_POINTS)


class RectangleTool(ToolBase):
    """Drag between opposite corners. Zero-area rectangles are kept."""

    name = "rectangle"

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self._start: Optional[Vec] = None
        self._end: Optional[Vec] = None

    @property
    def is_idle(self) -> bool:
        return self._start is None

    def on_pointer_down(self, pos: Vec) -> None:
        self._start = as_vec(pos)
        self._end = as_vec(pos)

    def on_pointer_move(self, pos: Vec) -> None:
        if self._start is None:
            return
        self._end = as_vec(pos)

    def on_pointer_up(self, pos: Vec) -> None:
        if self._start is None:
            return
        settings = self.ctx.settings
        self.ctx.scene.add_shape(
            self.name,
            get_rectangle_points(self._start, pos),
            settings.stroke_color,
            settings.stroke_width,
        )
        self.reset()

    def reset(self) -> None:
        self._start = None
        self._end = None

    def render_preview(self, surface: RenderSurface) -> None:
        if self._start is None or self._end is None:
            return
        settings = self.ctx.settings
        surface.draw_shape(
            get_rectangle_points(self._start, self._end),
            color=settings.stroke_color,
            width=settings.stroke_width,
            fill=True,
        )


class TriangleTool(ToolBase):
    """Three clicks place the three vertices."""

    name = "triangle"

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self._vertices: List[Vec] = []
        self._cursor: Optional[Vec] = None

    @property
    def is_idle(self) -> bool:
        return not self._vertices

    @property
    def vertices(self) -> List[Vec]:
        return list(self._vertices)

    def on_pointer_down(self, pos: Vec) -> None:
        self._vertices.append(as_vec(pos))
        if len(self._vertices) == 3:
            settings = self.ctx.settings
            self.ctx.scene.add_shape(
                self.name,
                get_triangle_points(*self._vertices),
                settings.stroke_color,
                settings.stroke_width,
            )
            self.reset()

    def on_pointer_move(self, pos: Vec) -> None:
        self._cursor = as_vec(pos)

    def on_pointer_up(self, pos: Vec) -> None:
        return None

    def reset(self) -> None:
        self._vertices = []
        self._cursor = None

    def render_preview(self, surface: RenderSurface) -> None:
        settings = self.ctx.settings
        for vertex in self._vertices:
            surface.draw_point(vertex, size=settings.point_size, color=settings.stroke_color, state=PointState.ACTIVE)

        if not self._vertices or self._cursor is None:
            return
        preview = self._vertices + [self._cursor]
        if len(preview) == 2:
            surface.draw_line(
                preview[0],
                preview[1],
                color=settings.stroke_color,
                width=settings.stroke_width,
                dashed=True,
            )
        elif len(preview) == 3:
            surface.draw_shape(
                get_triangle_points(*preview),
                color=settings.stroke_color,
                width=settings.stroke_width,
                fill=True,
            )
