"""Geometry helpers for the CurveDrawer canvas.

Everything here is pure: distances, nearest-point lookups, Catmull-Rom curve
sampling and the outline generators used by the shape tools. Points may be
passed as ``(x, y)`` sequences or as objects exposing ``x``/``y`` attributes
(scene points); results are always plain ``(x, y)`` tuples except for
``find_nearest_point`` which hands back the matching input element.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

Vec = Tuple[float, float]
T = TypeVar("T")

DEFAULT_SEGMENTS_PER_SPAN = 20


def as_vec(p) -> Vec:
    """Return ``p`` as a float ``(x, y)`` tuple."""
    if hasattr(p, "x") and hasattr(p, "y"):
        return float(p.x), float(p.y)
    return float(p[0]), float(p[1])


def distance(a, b) -> float:
    """Return the Euclidean distance between two points."""
    ax, ay = as_vec(a)
    bx, by = as_vec(b)
    return math.hypot(bx - ax, by - ay)


def find_nearest_point(pos, points: Iterable[T], max_distance: float) -> Optional[T]:
    """Return the point closest to ``pos`` that lies strictly within ``max_distance``.

    Ties keep the first candidate in iteration order. ``None`` means nothing
    qualified.
    """
    nearest: Optional[T] = None
    best = float(max_distance)
    for point in points:
        dist = distance(pos, point)
        if dist < best:
            best = dist
            nearest = point
    return nearest


def catmull_rom_spline(
    control_points: Sequence,
    tension: float = 0.5,
    segments_per_span: int = DEFAULT_SEGMENTS_PER_SPAN,
) -> List[Vec]:
    """Sample a Catmull-Rom curve passing through every control point.

    Fewer than three control points are returned unchanged. The flanking
    points of the first and last span are clamped to the sequence ends, and
    the final control point closes the sequence exactly once.
    """
    pts = [as_vec(p) for p in control_points]
    if len(pts) < 3:
        return pts

    s = float(tension)
    steps = max(0, int(segments_per_span))
    t = np.arange(steps, dtype=float) / steps if steps else np.zeros(0)
    t2 = t * t
    t3 = t2 * t
    q1 = -s * t3 + 2.0 * s * t2 - s * t
    q2 = (2.0 - s) * t3 + (s - 3.0) * t2 + 1.0
    q3 = (s - 2.0) * t3 + (3.0 - 2.0 * s) * t2 + s * t
    q4 = s * t3 - s * t2

    arr = np.asarray(pts, dtype=float)
    last = len(pts) - 1
    out: List[Vec] = []
    for i in range(last):
        p0 = arr[max(0, i - 1)]
        p1 = arr[i]
        p2 = arr[i + 1]
        p3 = arr[min(last, i + 2)]
        span = (
            q1[:, None] * p0
            + q2[:, None] * p1
            + q3[:, None] * p2
            + q4[:, None] * p3
        )
        out.extend((float(x), float(y)) for x, y in span)
    out.append(pts[-1])
    return out


@dataclass(frozen=True)
class CurveHit:
    """Closest sampled curve point and where a new control point would go."""

    point: Vec
    insert_index: int
    distance: float


def find_closest_point_on_curve(pos, curve_points: Sequence, control_points: Sequence) -> Optional[CurveHit]:
    """Locate the curve sample nearest ``pos`` and map it to an insertion slot.

    The mapping assumes every span holds the same number of samples, so the
    returned ``insert_index`` can be off by one near span boundaries.
    """
    best_index = -1
    best_dist = math.inf
    for index, sample in enumerate(curve_points):
        dist = distance(pos, sample)
        if dist < best_dist:
            best_dist = dist
            best_index = index
    if best_index < 0:
        return None

    point = as_vec(curve_points[best_index])
    if len(control_points) < 2:
        return CurveHit(point=point, insert_index=0, distance=best_dist)

    per_span = max(1, len(curve_points) // (len(control_points) - 1))
    insert_index = min(best_index // per_span + 1, len(control_points))
    return CurveHit(point=point, insert_index=insert_index, distance=best_dist)


# ---------------------------------------------------------------------------
# Shape outlines


def get_circle_points(center, radius: float, segments: int = 64) -> List[Vec]:
    """Sample a closed circle outline with ``segments + 1`` points."""
    cx, cy = as_vec(center)
    segments = max(1, int(segments))
    r = float(radius)
    points: List[Vec] = []
    for i in range(segments):
        angle = (i / segments) * math.pi * 2.0
        points.append((cx + math.cos(angle) * r, cy + math.sin(angle) * r))
    # the closing sample is the first one, so the outline closes exactly
    points.append(points[0])
    return points


def get_rectangle_points(start, end) -> List[Vec]:
    """Axis-aligned rectangle from two opposite corners, closed."""
    sx, sy = as_vec(start)
    ex, ey = as_vec(end)
    return [(sx, sy), (ex, sy), (ex, ey), (sx, ey), (sx, sy)]


def get_triangle_points(p1, p2, p3) -> List[Vec]:
    a = as_vec(p1)
    return [a, as_vec(p2), as_vec(p3), a]


def get_star_points(center, outer_radius: float, inner_radius: float, points: int = 5) -> List[Vec]:
    """Star outline alternating outer/inner radius, first tip pointing up."""
    cx, cy = as_vec(center)
    points = max(1, int(points))
    step = math.pi / points
    result: List[Vec] = []
    for i in range(points * 2):
        angle = i * step - math.pi / 2.0
        radius = float(outer_radius) if i % 2 == 0 else float(inner_radius)
        result.append((cx + math.cos(angle) * radius, cy + math.sin(angle) * radius))
    result.append(result[0])
    return result


def polyline_length(points: Sequence) -> float:
    """Return the cumulative length of a polyline."""
    if len(points) < 2:
        return 0.0
    arr = np.asarray([as_vec(p) for p in points], dtype=float)
    delta = np.diff(arr, axis=0)
    return float(np.sum(np.hypot(delta[:, 0], delta[:, 1])))


__all__ = [
    "CurveHit",
    "as_vec",
    "DEFAULT_SEGMENTS_PER_SPAN",
    "Vec",
    "catmull_rom_spline",
    "distance",
    "find_closest_point_on_curve",
    "find_nearest_point",
    "get_circle_points",
    "get_rectangle_points",
    "get_star_points",
    "get_triangle_points",
    "polyline_length",
]
