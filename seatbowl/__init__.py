"""Seating bowl section synthesis."""
from .errors import DegenerateGeometry, InvalidConfiguration, SeatbowlError, SequencingViolation
from .models import Point2D, ReferencePointType, RoundingPolicy, SightlineBasis, Spectator, Tier, Vector2D
from .models.section import ConfigurationAdjustment, Section

__all__ = [
    "Section",
    "ConfigurationAdjustment",
    "Tier",
    "Spectator",
    "Point2D",
    "Vector2D",
    "ReferencePointType",
    "RoundingPolicy",
    "SightlineBasis",
    "SeatbowlError",
    "InvalidConfiguration",
    "DegenerateGeometry",
    "SequencingViolation",
]
