"""Spectator model."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from seatbowl.models.geometry import Point2D, Vector2D


class Spectator(BaseModel):
    """One spectator per row, placed behind the riser nose of that row."""
    model_config = ConfigDict(frozen=True)

    tier_index: int = Field(description="Index of the spectator's tier within the section")
    row_index: int = Field(description="Index of the spectator's row within the tier")
    eye: Point2D = Field(description="Seated eye position")
    eye_standing: Point2D = Field(description="Standing eye position")
    pof: Point2D = Field(description="Point of focus the spectator looks at")
    sightline: Vector2D = Field(description="Seated eye to point of focus")
    sightline_standing: Vector2D = Field(description="Standing eye to point of focus")
    has_sightline: bool = Field(
        default=True,
        description="True if the view over the row in front meets the target C-value",
    )
    c_value: Optional[float] = Field(
        default=None,
        description="Measured clearance over the row in front (None for the front row)",
    )
    in_vomitory: bool = False
    on_super_riser: bool = False

    @property
    def key(self) -> tuple[int, int]:
        """(tier_index, row_index), unique within a section."""
        return (self.tier_index, self.row_index)

    def position(self, standing: bool = False) -> Point2D:
        return self.eye_standing if standing else self.eye

    def sightline_for(self, standing: bool = False) -> Vector2D:
        return self.sightline_standing if standing else self.sightline
