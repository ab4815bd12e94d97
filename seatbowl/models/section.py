"""Section: an ordered stack of tiers sharing one point of focus."""
import logging
from typing import Iterator, Optional

from pydantic import BaseModel

from seatbowl.errors import InvalidConfiguration
from seatbowl.models.geometry import Point2D, Vector2D
from seatbowl.models.spectator import Spectator
from seatbowl.models.tier import ReferencePointType, Tier
from seatbowl.services.row_synthesis import synthesize_tier

logger = logging.getLogger(__name__)


class ConfigurationAdjustment(BaseModel):
    """A configuration value the section overrode during construction."""
    tier_index: int
    field: str
    original: str
    applied: str
    reason: str


class Section:
    """
    An ordered collection of tiers in one section plane.

    The section works on copies of the tiers it is given, so the caller's
    tier objects are never modified. All geometry is synthesized once, at
    construction. Tiers are synthesized front to back because a tier can
    start at the end of the tier before it.
    """

    def __init__(self, tiers: list[Tier], pof: Optional[Point2D] = None, name: str = ""):
        if not tiers:
            raise InvalidConfiguration("A section needs at least one tier")

        self.name = name
        self.pof = pof or Point2D()
        self.adjustments: list[ConfigurationAdjustment] = []

        copies = [tier.model_copy(deep=True) for tier in tiers]
        for i, tier in enumerate(copies):
            tier.index = i
            tier.pof = self.pof
            tier.clear_geometry()

        # The first tier has nothing in front of it to start from
        first = copies[0]
        if first.ref_pt_type is not ReferencePointType.BY_POF:
            adjustment = ConfigurationAdjustment(
                tier_index=0,
                field="ref_pt_type",
                original=first.ref_pt_type.value,
                applied=ReferencePointType.BY_POF.value,
                reason="the first tier always starts from the point of focus",
            )
            logger.warning(
                "Tier 0: reference point changed from %s to %s (%s)",
                adjustment.original, adjustment.applied, adjustment.reason,
            )
            self.adjustments.append(adjustment)
            first.ref_pt_type = ReferencePointType.BY_POF

        self.tiers: tuple[Tier, ...] = tuple(copies)
        self._synthesize()

    def _synthesize(self) -> None:
        # Report configuration errors before any tier emits geometry
        for tier in self.tiers:
            tier.validate_for_synthesis()

        previous = None
        for tier in self.tiers:
            synthesize_tier(tier, previous)
            previous = tier
        logger.info(
            "Section %s: %d tiers, %d spectators",
            self.name or "<unnamed>", len(self.tiers), sum(t.row_count for t in self.tiers),
        )

    def resynthesize(self) -> None:
        """Synthesize every tier again, e.g. after editing tier configuration."""
        for tier in self.tiers:
            tier.clear_geometry()
        try:
            self._synthesize()
        except Exception:
            for tier in self.tiers:
                tier.clear_geometry()
            raise

    @property
    def last_point(self) -> Point2D:
        """Final boundary point of the rearmost tier."""
        return self.tiers[-1].boundary_points()[-1]

    def all_boundary_points(self) -> tuple[tuple[Point2D, ...], ...]:
        """Boundary points of each tier, in tier order. Tiers may differ in length."""
        return tuple(tier.boundary_points() for tier in self.tiers)

    def all_spectator_positions(self, standing: bool = False) -> tuple[tuple[Point2D, ...], ...]:
        """Seated (or standing) eye positions of each tier, front row first."""
        return tuple(
            tuple(s.position(standing) for s in tier.spectators())
            for tier in self.tiers
        )

    def all_sightlines(self, standing: bool = False) -> tuple[tuple[Vector2D, ...], ...]:
        """Seated (or standing) sightline vectors of each tier, front row first."""
        return tuple(
            tuple(s.sightline_for(standing) for s in tier.spectators())
            for tier in self.tiers
        )

    def spectators(self) -> Iterator[Spectator]:
        """Every spectator in the section, front tier first."""
        for tier in self.tiers:
            yield from tier.spectators()

    def spectator(self, tier_index: int, row_index: int) -> Spectator:
        """Find a spectator by tier and row."""
        if not 0 <= tier_index < len(self.tiers):
            raise IndexError(f"No tier {tier_index} in section")
        spectators = self.tiers[tier_index].spectators()
        if not 0 <= row_index < len(spectators):
            raise IndexError(f"No row {row_index} in tier {tier_index}")
        return spectators[row_index]

    def summary(self) -> dict:
        """Per-tier figures for display."""
        tiers = []
        for tier in self.tiers:
            points = tier.boundary_points()
            spectators = tier.spectators()
            measured = [s.c_value for s in spectators if s.c_value is not None]
            tiers.append({
                "index": tier.index,
                "rows": tier.row_count,
                "reference_point": tier.reference_point.as_tuple(),
                "start": points[0].as_tuple(),
                "end": points[-1].as_tuple(),
                "rake_height": points[-1].v - points[0].v,
                "target_c_value": tier.c_value,
                "min_c_value": min(measured) if measured else None,
                "obstructed_rows": [s.row_index for s in spectators if not s.has_sightline],
            })
        return {
            "name": self.name,
            "pof": self.pof.as_tuple(),
            "tiers": tiers,
            "adjustments": [a.model_dump() for a in self.adjustments],
        }
