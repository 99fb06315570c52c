"""CurveDrawer: points, lines, Catmull-Rom curves and stamped shapes on a 2D canvas."""
from __future__ import annotations

from .controller import InteractionController
from .geometry import CurveHit, catmull_rom_spline, find_closest_point_on_curve, find_nearest_point
from .scene import Curve, Line, Point, Scene, Shape
from .settings import Settings
from .surface import PointState, RenderSurface

__version__ = "0.1.0"

__all__ = [
    "Curve",
    "CurveHit",
    "InteractionController",
    "Line",
    "Point",
    "PointState",
    "RenderSurface",
    "Scene",
    "Settings",
    "Shape",
    "catmull_rom_spline",
    "find_closest_point_on_curve",
    "find_nearest_point",
]
