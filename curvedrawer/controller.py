"""Interaction controller: routes pointer events to the active tool and paints frames."""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .geometry import Vec, as_vec, find_nearest_point, polyline_length
from .scene import Point, Scene
from .settings import Settings
from .shape_tools import CircleTool, RectangleTool, StarTool, TriangleTool
from .surface import PointState, RenderSurface
from .tools import InterpolatedCurveTool, StraightLineTool, ToolBase, ToolContext

logger = logging.getLogger(__name__)

CONTROL_POINT_SCALE = 0.8


class InteractionController:
    """Owns the tool registry, hover state and the per-frame render pass.

    Exactly one tool is active. Switching tools finishes an open curve and
    resets the outgoing tool, so no other tool's half-drawn state survives.
    """

    def __init__(self, scene: Optional[Scene] = None, settings: Optional[Settings] = None):
        self.scene = scene if scene is not None else Scene()
        self.settings = settings if settings is not None else Settings()
        self._ctx = ToolContext(scene=self.scene, settings=self.settings)
        self._tools: Dict[str, ToolBase] = {
            tool.name: tool
            for tool in (
                StraightLineTool(self._ctx),
                InterpolatedCurveTool(self._ctx),
                CircleTool(self._ctx),
                RectangleTool(self._ctx),
                TriangleTool(self._ctx),
                StarTool(self._ctx),
            )
        }
        self._tool_name = StraightLineTool.name
        self.pointer_position: Vec = (0.0, 0.0)
        self.hovered_point: Optional[Point] = None

    # ------------------------------------------------------------------
    # Tools
    def available_tools(self) -> Tuple[str, ...]:
        return tuple(self._tools)

    @property
    def tool_name(self) -> str:
        return self._tool_name

    @property
    def active_tool(self) -> ToolBase:
        return self._tools[self._tool_name]

    def tool(self, name: str) -> ToolBase:
        try:
            return self._tools[name]
        except KeyError as exc:
            raise ValueError(f"Unknown tool '{name}'") from exc

    def switch_tool(self, name: str) -> None:
        """Activate ``name``; re-selecting the active tool finishes and resets it."""
        target = self.tool(name)
        current = self.active_tool
        if isinstance(current, InterpolatedCurveTool) and current.control_points:
            current.finish()
        current.reset()
        if name == self._tool_name:
            return
        self._tool_name = target.name
        logger.debug("Switched tool to %s", name)

    def finish_curve(self) -> None:
        """Explicit finish action for the curve tool (Enter in the Qt shell)."""
        tool = self.active_tool
        if isinstance(tool, InterpolatedCurveTool):
            tool.finish()

    # ------------------------------------------------------------------
    # Pointer events
    def pointer_down(self, pos: Vec) -> None:
        self.pointer_position = as_vec(pos)
        self.active_tool.on_pointer_down(self.pointer_position)

    def pointer_move(self, pos: Vec) -> None:
        self.pointer_position = as_vec(pos)
        self.hovered_point = find_nearest_point(
            self.pointer_position, self.scene.points, self.settings.snap_distance
        )
        self.active_tool.on_pointer_move(self.pointer_position)

    def pointer_up(self, pos: Vec) -> None:
        self.pointer_position = as_vec(pos)
        self.active_tool.on_pointer_up(self.pointer_position)

    # ------------------------------------------------------------------
    # Scene and settings
    def clear_scene(self) -> None:
        self.scene.clear()
        self.hovered_point = None
        self.active_tool.reset()
        logger.info("Canvas cleared")

    def update_settings(self, **changes) -> None:
        """Apply setting changes all at once; a tension change resamples the open curve.

        Every value is validated before any is assigned, so a rejected update
        leaves the settings untouched.
        """
        for key in changes:
            if key not in Settings.model_fields:
                raise ValueError(f"Unknown setting '{key}'")
        validated = Settings.model_validate({**self.settings.model_dump(), **changes})
        for key in changes:
            setattr(self.settings, key, getattr(validated, key))
        tool = self.active_tool
        if "curve_tension" in changes and isinstance(tool, InterpolatedCurveTool):
            tool.update_curve()

    def status_text(self) -> str:
        x, y = self.pointer_position
        text = f"X: {round(x)}, Y: {round(y)}"
        tool = self.active_tool
        if isinstance(tool, InterpolatedCurveTool) and len(tool.curve_points) >= 2:
            text += f" | Curve length: {round(polyline_length(tool.curve_points))}"
        return text

    # ------------------------------------------------------------------
    # Rendering
    def render(self, surface: RenderSurface) -> None:
        """Paint one frame: lines, curves, shapes, tool preview, then points."""
        settings = self.settings
        surface.clear()

        for line in self.scene.lines:
            start, end = self.scene.line_endpoints(line)
            surface.draw_line(start.xy, end.xy, color=line.color, width=line.width)

        for curve in self.scene.curves:
            surface.draw_curve(curve.curve_points, color=curve.color, width=curve.width)
            for point in self.scene.control_points(curve):
                surface.draw_point(
                    point.xy,
                    size=settings.point_size * CONTROL_POINT_SCALE,
                    color=curve.color,
                    state=PointState.NORMAL,
                )

        for shape in self.scene.shapes:
            surface.draw_shape(shape.points, color=shape.color, width=shape.width, fill=True)

        self.active_tool.render_preview(surface)

        hovered = self.hovered_point
        for point in self.scene.points:
            if point is hovered:
                continue
            surface.draw_point(point.xy, size=settings.point_size, color=settings.stroke_color, state=PointState.NORMAL)
        # hover goes on top of every other point
        if hovered is not None and self.scene.has_point(hovered.id):
            surface.draw_point(hovered.xy, size=settings.point_size, color=settings.stroke_color, state=PointState.HOVER)
