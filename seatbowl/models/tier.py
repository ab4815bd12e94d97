"""Seating tier configuration and synthesized geometry."""
import math
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from seatbowl.config import (
    DEFAULT_C_VALUE,
    DEFAULT_EYE_H,
    DEFAULT_EYE_V,
    DEFAULT_ROW_COUNT,
    DEFAULT_ROW_WIDTH,
    DEFAULT_STANDING_EYE_H,
    DEFAULT_STANDING_EYE_V,
    DEFAULT_START_H,
    DEFAULT_START_V,
)
from seatbowl.errors import InvalidConfiguration
from seatbowl.models.geometry import Point2D
from seatbowl.models.spectator import Spectator
from seatbowl.utils.units import Unit


class ReferencePointType(str, Enum):
    """Where a tier measures its start offset from."""
    BY_POF = "by_pof"
    BY_END_OF_PREV_TIER = "by_end_of_prev_tier"


class RoundingPolicy(str, Enum):
    """How solved riser heights are snapped to the rounding increment."""
    UP = "up"
    NEAREST = "nearest"
    DOWN = "down"


class SightlineBasis(str, Enum):
    """Which eye position the riser solve clears."""
    SEATED = "seated"
    STANDING = "standing"


# Length fields whose metre defaults are scaled by the tier unit
SCALED_DEFAULTS = (
    "start_h",
    "start_v",
    "c_value",
    "eye_h",
    "eye_v",
    "standing_eye_h",
    "standing_eye_v",
)


class Vomitory(BaseModel):
    """Opening through the tier, counted in rows."""
    start_row: int = Field(ge=0, description="First row taken by the vomitory")
    height_rows: int = Field(ge=1, description="Height of the vomitory in rows")

    @property
    def rows(self) -> range:
        return range(self.start_row, self.start_row + self.height_rows)


class SuperRiser(BaseModel):
    """Raised step inserted at a row, e.g. for wheelchair positions."""
    row: int = Field(ge=0, description="Row the super riser is inserted at")
    curb: float = Field(default=0.0, description="Curb distance before the super riser")
    eye_h: float = Field(default=DEFAULT_EYE_H, description="Eye offset from the super riser nose")
    eye_v: float = Field(default=DEFAULT_STANDING_EYE_V, description="Eye height above the super riser floor")


class Tier(BaseModel):
    """A seating deck with one riser profile and one eye-offset configuration.

    Configuration fields are set by the caller. The boundary points and
    spectators are written by row synthesis only; treat the configuration as
    fixed once a tier has been synthesized, or synthesize it again.
    """
    ref_pt_type: ReferencePointType = ReferencePointType.BY_POF
    unit: float = Field(default=Unit.METRE, description="Model units per metre")
    start_h: float = Field(default=DEFAULT_START_H, description="Horizontal offset of the tier start from its reference point")
    start_v: float = Field(default=DEFAULT_START_V, description="Vertical offset of the tier start from its reference point")
    c_value: float = Field(default=DEFAULT_C_VALUE, description="Target C-value for every row")
    eye_h: float = Field(default=DEFAULT_EYE_H, description="Seated eye offset behind the riser nose")
    eye_v: float = Field(default=DEFAULT_EYE_V, description="Seated eye height above the floor")
    standing_eye_h: float = Field(default=DEFAULT_STANDING_EYE_H)
    standing_eye_v: float = Field(default=DEFAULT_STANDING_EYE_V)
    row_count: int = Field(default=DEFAULT_ROW_COUNT, description="Number of rows, not counting super risers")
    row_widths: list[float] = Field(default_factory=list, description="Tread depth of each row")
    fascia_h: float = Field(default=0.0, description="Fascia height below the first row (0 for none)")
    vomitory: Optional[Vomitory] = None
    super_riser: Optional[SuperRiser] = None
    round_to: Optional[float] = Field(default=None, description="Riser height increment")
    rounding: RoundingPolicy = RoundingPolicy.UP
    sightline_basis: SightlineBasis = SightlineBasis.SEATED

    # Assigned by the owning section
    index: int = 0
    pof: Point2D = Field(default_factory=Point2D)

    _ref_pt: Optional[Point2D] = PrivateAttr(default=None)
    _points: Optional[tuple[Point2D, ...]] = PrivateAttr(default=None)
    _spectators: Optional[tuple[Spectator, ...]] = PrivateAttr(default=None)

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Union[str, float]) -> float:
        if isinstance(value, str):
            return float(Unit.from_name(value))
        return value

    @model_validator(mode="after")
    def _apply_unit_defaults(self) -> "Tier":
        # Defaults are in metres; scale the ones the caller left out
        unit = float(self.unit)
        if unit != 1.0:
            for name in SCALED_DEFAULTS:
                if name not in self.model_fields_set:
                    setattr(self, name, getattr(self, name) * unit)
        if not self.row_widths and self.row_count > 0:
            self.row_widths = [DEFAULT_ROW_WIDTH * unit] * self.row_count
        return self

    @classmethod
    def default(
        cls,
        unit: float = Unit.METRE,
        row_count: int = DEFAULT_ROW_COUNT,
        **overrides,
    ) -> "Tier":
        """Build a complete tier with the standard dimensions in the given unit.

        Any field can be overridden by keyword.
        """
        unit = float(unit)
        values = {
            "unit": unit,
            "start_h": DEFAULT_START_H * unit,
            "start_v": DEFAULT_START_V * unit,
            "c_value": DEFAULT_C_VALUE * unit,
            "eye_h": DEFAULT_EYE_H * unit,
            "eye_v": DEFAULT_EYE_V * unit,
            "standing_eye_h": DEFAULT_STANDING_EYE_H * unit,
            "standing_eye_v": DEFAULT_STANDING_EYE_V * unit,
            "row_count": row_count,
            "row_widths": [DEFAULT_ROW_WIDTH * unit] * row_count,
            "fascia_h": 1.0 * unit,
            "round_to": 0.001 * unit,
        }
        values.update(overrides)
        return cls(**values)

    @property
    def point_count(self) -> int:
        """Number of boundary points synthesis will emit."""
        fascia = 1 if self.fascia_h != 0.0 else 0
        return fascia + 2 * self.row_count

    @property
    def is_synthesized(self) -> bool:
        return self._points is not None

    @property
    def reference_point(self) -> Optional[Point2D]:
        """Resolved reference point, available after synthesis."""
        return self._ref_pt

    @property
    def vomitory_rows(self) -> range:
        if self.vomitory is None:
            return range(0)
        return self.vomitory.rows

    def eye_offsets(self, standing: bool = False) -> tuple[float, float]:
        """(eye_h, eye_v) for seated or standing spectators."""
        if standing:
            return (self.standing_eye_h, self.standing_eye_v)
        return (self.eye_h, self.eye_v)

    def validate_for_synthesis(self) -> None:
        """Raise InvalidConfiguration if this tier cannot be synthesized."""
        for name in ("unit", "fascia_h", *SCALED_DEFAULTS):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidConfiguration(
                    f"{name} must be a finite number, got {value}", tier_index=self.index
                )
        if self.round_to is not None and not math.isfinite(self.round_to):
            raise InvalidConfiguration(
                f"round_to must be a finite number, got {self.round_to}", tier_index=self.index
            )
        if self.row_count <= 0:
            raise InvalidConfiguration(
                f"Row count must be positive, got {self.row_count}", tier_index=self.index
            )
        if len(self.row_widths) < self.row_count:
            raise InvalidConfiguration(
                f"{len(self.row_widths)} row widths given for {self.row_count} rows",
                tier_index=self.index,
            )
        for row, width in enumerate(self.row_widths[:self.row_count]):
            if not math.isfinite(width) or width <= 0:
                raise InvalidConfiguration(
                    f"Row width must be a positive finite number, got {width}",
                    tier_index=self.index,
                    row_index=row,
                )
        if self.round_to is not None and self.round_to <= 0:
            raise InvalidConfiguration(
                f"Rounding increment must be positive, got {self.round_to}",
                tier_index=self.index,
            )
        if self.vomitory is not None and self.vomitory.rows.stop > self.row_count:
            raise InvalidConfiguration(
                f"Vomitory rows {self.vomitory.start_row}-{self.vomitory.rows.stop - 1} "
                f"extend past the last row",
                tier_index=self.index,
            )
        if self.super_riser is not None and self.super_riser.row >= self.row_count:
            raise InvalidConfiguration(
                f"Super riser row {self.super_riser.row} is outside the tier",
                tier_index=self.index,
            )

    def boundary_points(self) -> tuple[Point2D, ...]:
        """Riser profile points, front to back."""
        if self._points is None:
            raise InvalidConfiguration("Tier has not been synthesized", tier_index=self.index)
        return self._points

    def spectators(self) -> tuple[Spectator, ...]:
        """One spectator per row, front to back."""
        if self._spectators is None:
            raise InvalidConfiguration("Tier has not been synthesized", tier_index=self.index)
        return self._spectators

    def riser_heights(self) -> list[float]:
        """Height of each riser behind rows 0..row_count-2."""
        points = self.boundary_points()
        start = 1 if self.fascia_h != 0.0 else 0
        # Risers are the (B, C) pairs after point A
        pairs = points[start + 1:-1]
        return [top.v - bottom.v for bottom, top in zip(pairs[0::2], pairs[1::2])]

    def set_geometry(
        self,
        ref_pt: Point2D,
        points: list[Point2D],
        spectators: list[Spectator],
    ) -> None:
        """Store synthesized geometry. Called by row synthesis."""
        self._ref_pt = ref_pt
        self._points = tuple(points)
        self._spectators = tuple(spectators)

    def clear_geometry(self) -> None:
        self._ref_pt = None
        self._points = None
        self._spectators = None
