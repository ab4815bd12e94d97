from .geometry import Point2D, Vector2D
from .spectator import Spectator
from .tier import ReferencePointType, RoundingPolicy, SightlineBasis, SuperRiser, Tier, Vomitory

__all__ = [
    "Point2D",
    "Vector2D",
    "Spectator",
    "Tier",
    "ReferencePointType",
    "RoundingPolicy",
    "SightlineBasis",
    "Vomitory",
    "SuperRiser",
]
