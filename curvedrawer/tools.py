"""Pointer-driven tools for the CurveDrawer canvas.

Every tool receives canvas-space ``(x, y)`` positions from the controller and
writes finished entities into the shared scene. Transient drawing state stays
inside the tool until the gesture completes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .geometry import (
    DEFAULT_SEGMENTS_PER_SPAN,
    CurveHit,
    Vec,
    as_vec,
    catmull_rom_spline,
    find_closest_point_on_curve,
    find_nearest_point,
)
from .scene import Curve, Point, Scene
from .settings import Settings
from .surface import PointState, RenderSurface

logger = logging.getLogger(__name__)


@dataclass
class ToolContext:
    """Scene and settings shared by reference between the controller and its tools."""

    scene: Scene
    settings: Settings


class ToolBase:
    """Common interface every tool implements."""

    name = "base"

    def __init__(self, ctx: ToolContext):
        self.ctx = ctx

    @property
    def is_idle(self) -> bool:
        return True

    def on_pointer_down(self, pos: Vec) -> None:
        pass

    def on_pointer_move(self, pos: Vec) -> None:
        pass

    def on_pointer_up(self, pos: Vec) -> None:
        pass

    def render_preview(self, surface: RenderSurface) -> None:
        pass

    def reset(self) -> None:
        pass

    def snap_or_create(self, pos: Vec, exclude: Optional[Point] = None) -> Point:
        """Return the scene point under ``pos`` or add a new one there."""
        candidates = self.ctx.scene.points
        if exclude is not None:
            candidates = tuple(p for p in candidates if p is not exclude)
        existing = find_nearest_point(pos, candidates, self.ctx.settings.snap_distance)
        if existing is not None:
            return existing
        x, y = as_vec(pos)
        return self.ctx.scene.add_point(x, y)


class StraightLineTool(ToolBase):
    """Press on the start point, release on the end point."""

    name = "straightLine"

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self._start: Optional[Point] = None
        self._preview_end: Optional[Vec] = None

    @property
    def is_idle(self) -> bool:
        return self._start is None

    @property
    def start_point(self) -> Optional[Point]:
        return self._start

    @property
    def preview_end(self) -> Optional[Vec]:
        return self._preview_end

    def on_pointer_down(self, pos: Vec) -> None:
        self._start = self.snap_or_create(pos)
        self._preview_end = as_vec(pos)

    def on_pointer_move(self, pos: Vec) -> None:
        if self._start is None:
            return
        candidates = [p for p in self.ctx.scene.points if p is not self._start]
        snap = find_nearest_point(pos, candidates, self.ctx.settings.snap_distance)
        self._preview_end = snap.xy if snap is not None else as_vec(pos)

    def on_pointer_up(self, pos: Vec) -> None:
        if self._start is None:
            return
        settings = self.ctx.settings
        end = self.snap_or_create(pos, exclude=self._start)
        self.ctx.scene.add_line(self._start, end, settings.stroke_color, settings.stroke_width)
        self.reset()

    def reset(self) -> None:
        self._start = None
        self._preview_end = None

    def render_preview(self, surface: RenderSurface) -> None:
        if self._start is None or self._preview_end is None:
            return
        settings = self.ctx.settings
        surface.draw_preview(
            self._start.xy,
            self._preview_end,
            color=settings.stroke_color,
            width=settings.stroke_width,
        )


class OpenCurve:
    """Control points of a curve still being drawn, plus their sampled curve.

    ``curve_points`` is read-only; it is rebuilt whenever the control points
    or the tension change.
    """

    def __init__(self) -> None:
        self._control_points: List[Point] = []
        self._curve_points: Tuple[Vec, ...] = ()

    def __len__(self) -> int:
        return len(self._control_points)

    @property
    def control_points(self) -> Tuple[Point, ...]:
        return tuple(self._control_points)

    @property
    def curve_points(self) -> Tuple[Vec, ...]:
        return self._curve_points

    def append(self, point: Point, tension: float) -> None:
        self._control_points.append(point)
        self._recompute(tension)

    def insert(self, index: int, point: Point, tension: float) -> None:
        self._control_points.insert(index, point)
        self._recompute(tension)

    def retension(self, tension: float) -> None:
        self._recompute(tension)

    def clear(self) -> None:
        self._control_points.clear()
        self._curve_points = ()

    def _recompute(self, tension: float) -> None:
        coords = [p.xy for p in self._control_points]
        self._curve_points = tuple(catmull_rom_spline(coords, tension, DEFAULT_SEGMENTS_PER_SPAN))


class InterpolatedCurveTool(ToolBase):
    """Click control points; click near the curve and drag to insert one."""

    name = "interpolatedCurve"

    def __init__(self, ctx: ToolContext):
        super().__init__(ctx)
        self._curve = OpenCurve()
        self._insert_hit: Optional[CurveHit] = None
        self._insert_pos: Optional[Vec] = None

    @property
    def is_idle(self) -> bool:
        return len(self._curve) == 0 and self._insert_hit is None

    @property
    def is_inserting(self) -> bool:
        return self._insert_hit is not None

    @property
    def control_points(self) -> Tuple[Point, ...]:
        return self._curve.control_points

    @property
    def curve_points(self) -> Tuple[Vec, ...]:
        return self._curve.curve_points

    @property
    def insert_hit(self) -> Optional[CurveHit]:
        return self._insert_hit

    @property
    def insert_pos(self) -> Optional[Vec]:
        return self._insert_pos

    def on_pointer_down(self, pos: Vec) -> None:
        settings = self.ctx.settings
        if len(self._curve) >= 2:
            hit = find_closest_point_on_curve(pos, self._curve.curve_points, self._curve.control_points)
            if hit is not None and hit.distance < settings.snap_distance:
                self._insert_hit = hit
                self._insert_pos = as_vec(pos)
                return
        point = self.snap_or_create(pos)
        self._curve.append(point, settings.curve_tension)

    def on_pointer_move(self, pos: Vec) -> None:
        if self._insert_hit is not None:
            self._insert_pos = as_vec(pos)

    def on_pointer_up(self, pos: Vec) -> None:
        if self._insert_hit is None:
            return
        point = self.snap_or_create(pos)
        index = self._insert_hit.insert_index
        self._curve.insert(index, point, self.ctx.settings.curve_tension)
        logger.debug("Inserted control point %s at slot %d", point.id, index)
        self._insert_hit = None
        self._insert_pos = None

    def update_curve(self) -> None:
        """Resample the open curve with the current tension."""
        self._curve.retension(self.ctx.settings.curve_tension)

    def finish(self) -> Optional[Curve]:
        """Persist the open curve if it has at least two control points, then clear it."""
        curve: Optional[Curve] = None
        if len(self._curve) >= 2:
            settings = self.ctx.settings
            curve = self.ctx.scene.add_curve(
                self._curve.control_points,
                settings.stroke_color,
                settings.stroke_width,
                settings.curve_tension,
            )
        elif len(self._curve):
            logger.debug("Discarded curve with a single control point")
        self.reset()
        return curve

    def reset(self) -> None:
        self._curve.clear()
        self._insert_hit = None
        self._insert_pos = None

    def render_preview(self, surface: RenderSurface) -> None:
        settings = self.ctx.settings
        if settings.show_influence_radius:
            for point in self._curve.control_points:
                surface.draw_influence_radius(point.xy, settings.curve_radius)

        if len(self._curve.curve_points) >= 2:
            surface.draw_curve(self._curve.curve_points, color=settings.stroke_color, width=settings.stroke_width)

        if self._insert_hit is not None and self._insert_pos is not None:
            surface.draw_line(
                self._insert_hit.point,
                self._insert_pos,
                color=settings.stroke_color,
                width=settings.stroke_width,
                dashed=True,
            )
            surface.draw_point(
                self._insert_pos,
                size=settings.point_size,
                color=settings.stroke_color,
                state=PointState.ACTIVE,
            )
