"""Drawing settings shared by the tools, the controller and the settings dock."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """User-adjustable drawing configuration.

    Assignments are validated, so the settings dock can write straight into a
    live instance and bad values surface as ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(validate_assignment=True)

    stroke_width: float = Field(2.0, gt=0.0, description="Stroke width for new lines, curves and shapes.")
    stroke_color: str = Field("#6366f1", min_length=1, description="Stroke color for new entities.")
    point_size: float = Field(6.0, gt=0.0, description="Radius used when drawing scene points.")
    snap_distance: float = Field(20.0, ge=0.0, description="Radius for every nearest-point query.")
    curve_radius: float = Field(50.0, ge=0.0, description="Influence radius drawn around curve control points.")
    curve_tension: float = Field(0.5, description="Tension passed to the Catmull-Rom sampler.")
    show_influence_radius: bool = Field(False, description="Draw influence circles for open curve control points.")
