"""Render surface contract consumed by the controller and the tools.

The core never paints pixels itself. Each frame it calls the primitives below
on whatever surface the host provides; ``qt_surface.QPainterSurface`` is the
implementation used by the Qt shell.
"""
from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence

from .geometry import Vec


class PointState(str, Enum):
    NORMAL = "normal"
    HOVER = "hover"
    ACTIVE = "active"


class RenderSurface(Protocol):
    def draw_point(self, point: Vec, *, size: float, color: str, state: PointState = PointState.NORMAL) -> None: ...

    def draw_line(self, a: Vec, b: Vec, *, color: str, width: float, dashed: bool = False) -> None: ...

    def draw_curve(self, points: Sequence[Vec], *, color: str, width: float) -> None: ...

    def draw_shape(self, points: Sequence[Vec], *, color: str, width: float, fill: bool = False) -> None: ...

    def draw_influence_radius(self, point: Vec, radius: float) -> None: ...

    def draw_preview(self, a: Vec, b: Vec, *, color: str, width: float) -> None: ...

    def clear(self) -> None: ...

    def resize(self) -> None: ...
