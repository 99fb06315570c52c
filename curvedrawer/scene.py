"""Scene model: a point arena plus the lines, curves and shapes built on it.

Points are shared. Lines and curves store point ids and resolve them through
the arena, so one point can be the endpoint of several lines and a control
point of several curves at the same time.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Optional, Sequence, Tuple

from .geometry import DEFAULT_SEGMENTS_PER_SPAN, Vec, catmull_rom_spline

logger = logging.getLogger(__name__)

ShapeType = Literal["circle", "rectangle", "triangle", "star"]
SHAPE_TYPES: Tuple[str, ...] = ("circle", "rectangle", "triangle", "star")


@dataclass(frozen=True, eq=False)
class Point:
    """A placed point. Compared by identity, never by coordinates."""

    id: str
    x: float
    y: float

    @property
    def xy(self) -> Vec:
        return (self.x, self.y)


@dataclass(frozen=True)
class Line:
    id: str
    start_id: str
    end_id: str
    color: str
    width: float


@dataclass(frozen=True)
class Curve:
    """Persisted interpolated curve.

    ``curve_points`` is derived from the control point coordinates; use
    :meth:`build` instead of filling it in by hand.
    """

    id: str
    control_ids: Tuple[str, ...]
    curve_points: Tuple[Vec, ...]
    color: str
    width: float
    tension: float

    @classmethod
    def build(
        cls,
        curve_id: str,
        control_points: Sequence[Point],
        color: str,
        width: float,
        tension: float,
    ) -> "Curve":
        samples = catmull_rom_spline([p.xy for p in control_points], tension, DEFAULT_SEGMENTS_PER_SPAN)
        return cls(
            id=curve_id,
            control_ids=tuple(p.id for p in control_points),
            curve_points=tuple(samples),
            color=color,
            width=float(width),
            tension=float(tension),
        )


@dataclass(frozen=True)
class Shape:
    """Stamped shape stored as a closed polygon."""

    id: str
    type: ShapeType
    points: Tuple[Vec, ...]
    color: str
    width: float
    center: Optional[Vec] = None
    radius: Optional[float] = None


class Scene:
    """Mutable collections of points, lines, curves and shapes."""

    def __init__(self) -> None:
        self._points: Dict[str, Point] = {}
        self._lines: List[Line] = []
        self._curves: List[Curve] = []
        self._shapes: List[Shape] = []
        self._counters = {kind: itertools.count(1) for kind in "PLCS"}

    def _next_id(self, kind: str) -> str:
        return f"{kind}{next(self._counters[kind]):04d}"

    # ------------------------------------------------------------------
    # Read access
    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points.values())

    @property
    def lines(self) -> Tuple[Line, ...]:
        return tuple(self._lines)

    @property
    def curves(self) -> Tuple[Curve, ...]:
        return tuple(self._curves)

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return len(self._points) + len(self._lines) + len(self._curves) + len(self._shapes)

    def has_point(self, point_id: str) -> bool:
        return point_id in self._points

    def get_point(self, point_id: str) -> Point:
        return self._points[point_id]

    def line_endpoints(self, line: Line) -> Tuple[Point, Point]:
        return self._points[line.start_id], self._points[line.end_id]

    def control_points(self, curve: Curve) -> Tuple[Point, ...]:
        return tuple(self._points[pid] for pid in curve.control_ids)

    def referents(self, point_id: str) -> int:
        """Count line endpoints and curve control slots that use ``point_id``."""
        count = 0
        for line in self._lines:
            count += (line.start_id == point_id) + (line.end_id == point_id)
        for curve in self._curves:
            count += curve.control_ids.count(point_id)
        return count

    def dangling_references(self) -> List[str]:
        """Return ids referenced by lines or curves that are missing from the arena."""
        missing: List[str] = []
        for pid in self._referenced_ids():
            if pid not in self._points and pid not in missing:
                missing.append(pid)
        return missing

    def _referenced_ids(self) -> Iterable[str]:
        for line in self._lines:
            yield line.start_id
            yield line.end_id
        for curve in self._curves:
            yield from curve.control_ids

    # ------------------------------------------------------------------
    # Mutation
    def add_point(self, x: float, y: float) -> Point:
        point = Point(id=self._next_id("P"), x=float(x), y=float(y))
        self._points[point.id] = point
        logger.debug("Added point %s at (%.2f, %.2f)", point.id, point.x, point.y)
        return point

    def _require(self, points: Iterable[Point]) -> None:
        for point in points:
            if self._points.get(point.id) is not point:
                raise ValueError(f"Point '{point.id}' is not part of this scene")

    def add_line(self, start: Point, end: Point, color: str, width: float) -> Line:
        self._require((start, end))
        line = Line(id=self._next_id("L"), start_id=start.id, end_id=end.id, color=color, width=float(width))
        self._lines.append(line)
        logger.debug("Added line %s: %s -> %s", line.id, start.id, end.id)
        return line

    def add_curve(self, control_points: Sequence[Point], color: str, width: float, tension: float) -> Curve:
        if len(control_points) < 2:
            raise ValueError("A curve needs at least two control points")
        self._require(control_points)
        curve = Curve.build(self._next_id("C"), control_points, color, width, tension)
        self._curves.append(curve)
        logger.debug("Added curve %s with %d control points", curve.id, len(curve.control_ids))
        return curve

    def add_shape(
        self,
        shape_type: ShapeType,
        points: Sequence[Vec],
        color: str,
        width: float,
        center: Optional[Vec] = None,
        radius: Optional[float] = None,
    ) -> Shape:
        if shape_type not in SHAPE_TYPES:
            raise ValueError(f"Unknown shape type '{shape_type}'")
        shape = Shape(
            id=self._next_id("S"),
            type=shape_type,
            points=tuple((float(x), float(y)) for x, y in points),
            color=color,
            width=float(width),
            center=None if center is None else (float(center[0]), float(center[1])),
            radius=None if radius is None else float(radius),
        )
        self._shapes.append(shape)
        logger.debug("Added %s shape %s", shape.type, shape.id)
        return shape

    def clear(self) -> None:
        self._points.clear()
        self._lines.clear()
        self._curves.clear()
        self._shapes.clear()
        logger.debug("Scene cleared")
