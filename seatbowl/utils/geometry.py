"""Geometry utilities for sightline checks."""
from seatbowl.config import GEOMETRY_TOLERANCE
from seatbowl.errors import DegenerateGeometry
from seatbowl.models.geometry import Point2D


def is_near_zero(value: float, scale: float = 1.0) -> bool:
    """
    True if value is negligible next to the lengths it was computed from.

    The tolerance grows with scale, so the same test works in metres and
    in millimetres.
    """
    return abs(value) < GEOMETRY_TOLERANCE * max(1.0, abs(scale))


def sightline_height_at(h: float, eye: Point2D, target: Point2D) -> float:
    """
    Height of the line from eye to target at horizontal offset h.

    Args:
        h: Horizontal offset to evaluate at
        eye: Spectator eye position
        target: Point the spectator looks at (usually the P.O.F.)

    Returns:
        Vertical coordinate of the sightline at h
    """
    run = eye.h - target.h
    if is_near_zero(run, max(abs(eye.h), abs(target.h))):
        raise DegenerateGeometry("Sightline is vertical; eye is above the target")
    t = (h - target.h) / run
    return target.v + t * (eye.v - target.v)


def clearance(rear_eye: Point2D, front_eye: Point2D, target: Point2D) -> float:
    """
    Measured C-value between two spectators looking at the same target.

    This is the vertical distance from the front spectator's eye up to the
    rear spectator's sightline, measured where that sightline passes over
    the front spectator.

    Returns:
        Clearance in model units (negative when the view is obstructed)
    """
    return sightline_height_at(front_eye.h, rear_eye, target) - front_eye.v


def profile_bounds(points: list[Point2D]) -> tuple[float, float, float, float]:
    """
    Bounding box of a set of points.

    Returns:
        Tuple of (min_h, min_v, max_h, max_v)
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    hs = [p.h for p in points]
    vs = [p.v for p in points]
    return (min(hs), min(vs), max(hs), max(vs))
