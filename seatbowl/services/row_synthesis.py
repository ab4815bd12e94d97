"""Row synthesis: solve riser heights and place spectators, row by row."""
import logging
import math
from typing import Optional

from seatbowl.config import C_VALUE_TOLERANCE
from seatbowl.errors import DegenerateGeometry, SequencingViolation
from seatbowl.models.geometry import Point2D, Vector2D
from seatbowl.models.spectator import Spectator
from seatbowl.models.tier import ReferencePointType, RoundingPolicy, SightlineBasis, Tier
from seatbowl.utils.geometry import clearance, is_near_zero

logger = logging.getLogger(__name__)


def riser_height_from_c_value(
    pt_b: Point2D,
    c_value: float,
    eye_h: float,
    eye_v: float,
    next_width: float,
    pof: Optional[Point2D] = None,
) -> float:
    """
    Minimum riser height behind a row that gives the next row its C-value.

    Uses triangle proportionality between the point of focus, the eye of the
    spectator at pt_b and the eye of the spectator one row back. The rear
    spectator's sightline must pass c_value above the front spectator's eye.

    Args:
        pt_b: Rear riser bottom point of the current row
        c_value: Target clearance
        eye_h: Eye offset behind the riser nose
        eye_v: Eye height above the floor
        next_width: Tread depth of the next row back
        pof: Point of focus (origin if not given)

    Returns:
        Height the riser must rise above pt_b
    """
    pof = pof or Point2D()
    b_h = pt_b.h - pof.h
    b_v = pt_b.v - pof.v

    h = b_v + eye_v
    d = (b_h - eye_h) + next_width
    run = d - next_width
    if is_near_zero(run, max(abs(d), abs(b_h))):
        raise DegenerateGeometry(
            "Eye is horizontally level with the point of focus; riser height is unbounded"
        )

    r = ((c_value + h) / run) * d
    n = r - eye_v - b_v
    if not math.isfinite(n):
        raise DegenerateGeometry(f"Riser height is not finite ({n})")
    return n


def round_riser_height(
    height: float,
    increment: Optional[float],
    policy: RoundingPolicy = RoundingPolicy.UP,
) -> float:
    """
    Snap a riser height to a buildable increment.

    Rounding up keeps the C-value guarantee. Rounding down can leave a row
    below its target and is logged as a warning.
    """
    if not increment:
        return height

    steps = height / increment
    # Absorb float noise so exact multiples stay put
    nearest = round(steps)
    if math.isclose(steps, nearest, rel_tol=0.0, abs_tol=1e-9):
        return nearest * increment

    if policy is RoundingPolicy.UP:
        return math.ceil(steps) * increment
    if policy is RoundingPolicy.DOWN:
        logger.warning(
            "Rounding riser %.4f down to %.4f; row may fall below its C-value",
            height, math.floor(steps) * increment,
        )
        return math.floor(steps) * increment
    return nearest * increment


def make_spectator(
    tier: Tier,
    pt_b: Point2D,
    row: int,
    front: Optional[Spectator] = None,
) -> Spectator:
    """
    Place the spectator for a row.

    The eye sits above and behind the riser nose at pt_b, so it does not
    depend on the height of the riser behind the row.

    Args:
        tier: Tier being synthesized
        pt_b: Rear riser bottom point of the row (point D for the last row)
        row: Row index
        front: Spectator of the row in front, used to measure the C-value
    """
    eye = Point2D(h=pt_b.h - tier.eye_h, v=pt_b.v + tier.eye_v)
    eye_standing = Point2D(h=pt_b.h - tier.standing_eye_h, v=pt_b.v + tier.standing_eye_v)

    if front is None:
        c_value = None
        has_sightline = True
    else:
        standing = tier.sightline_basis is SightlineBasis.STANDING
        try:
            c_value = clearance(
                eye_standing if standing else eye,
                front.position(standing),
                tier.pof,
            )
        except DegenerateGeometry:
            # Eye straight above the P.O.F.: no clearance to measure
            logger.warning(
                "Tier %d row %d: eye is above the point of focus, C-value not measured",
                tier.index, row,
            )
            c_value = None
            has_sightline = False
        else:
            has_sightline = c_value >= tier.c_value - C_VALUE_TOLERANCE

    return Spectator(
        tier_index=tier.index,
        row_index=row,
        eye=eye,
        eye_standing=eye_standing,
        pof=tier.pof,
        sightline=Vector2D.between(eye, tier.pof),
        sightline_standing=Vector2D.between(eye_standing, tier.pof),
        has_sightline=has_sightline,
        c_value=c_value,
        in_vomitory=row in tier.vomitory_rows,
        on_super_riser=tier.super_riser is not None and tier.super_riser.row == row,
    )


def resolve_reference_point(tier: Tier, previous: Optional[Tier] = None) -> Point2D:
    """Reference point for a tier: the P.O.F. or the end of the previous tier."""
    if tier.ref_pt_type is ReferencePointType.BY_END_OF_PREV_TIER:
        if previous is None or not previous.is_synthesized:
            raise SequencingViolation(
                "Tier starts at the end of the previous tier, but no synthesized previous tier was given",
                tier_index=tier.index,
            )
        return previous.boundary_points()[-1]
    return tier.pof


def synthesize_tier(tier: Tier, previous: Optional[Tier] = None) -> Tier:
    """
    Compute the boundary points and spectators of a tier.

    Emits the optional fascia point, point A at the tier start, then a riser
    bottom (B) and riser top (C) for every row but the last, and finally
    point D at the back of the last row. Geometry is only stored on the tier
    once every row has been solved.

    Args:
        tier: Tier to synthesize, with index and P.O.F. already assigned
        previous: The tier in front, required for BY_END_OF_PREV_TIER tiers

    Returns:
        The same tier, with geometry set
    """
    tier.validate_for_synthesis()
    ref = resolve_reference_point(tier, previous)
    widths = tier.row_widths
    standing = tier.sightline_basis is SightlineBasis.STANDING
    eye_h, eye_v = tier.eye_offsets(standing)

    points: list[Point2D] = []
    spectators: list[Optional[Spectator]] = [None] * tier.row_count

    start = Point2D(h=ref.h + tier.start_h, v=ref.v + tier.start_v)
    if tier.fascia_h != 0.0:
        points.append(start.translate(dv=-tier.fascia_h))

    # Point A
    prev_pt = start
    points.append(prev_pt)

    front = None
    row = 0
    try:
        for row in range(tier.row_count - 1):
            # Point B: rear riser bottom
            pt_b = Point2D(h=prev_pt.h + widths[row], v=prev_pt.v)
            points.append(pt_b)

            front = make_spectator(tier, pt_b, row, front)
            spectators[row] = front

            solved = riser_height_from_c_value(
                pt_b, tier.c_value, eye_h, eye_v, widths[row + 1], tier.pof
            )
            riser = round_riser_height(solved, tier.round_to, tier.rounding)
            logger.debug(
                "Tier %d row %d: riser %.4f (solved %.4f)", tier.index, row, riser, solved
            )

            # Point C: rear riser top
            prev_pt = Point2D(h=pt_b.h, v=pt_b.v + riser)
            points.append(prev_pt)

        # Point D: back of the last row, no riser above it
        row = tier.row_count - 1
        pt_d = Point2D(h=prev_pt.h + widths[row], v=prev_pt.v)
        points.append(pt_d)
        spectators[row] = make_spectator(tier, pt_d, row, front)
    except DegenerateGeometry as e:
        raise DegenerateGeometry(e.message, tier_index=tier.index, row_index=row) from e

    if len(points) != tier.point_count:
        raise RuntimeError(
            f"Tier {tier.index}: emitted {len(points)} points, expected {tier.point_count}"
        )

    tier.set_geometry(ref, points, spectators)

    obstructed = sum(1 for s in spectators if not s.has_sightline)
    logger.info(
        "Tier %d: %d rows, rake %.3f -> %.3f%s",
        tier.index, tier.row_count, start.v, pt_d.v,
        f", {obstructed} rows below C-value" if obstructed else "",
    )
    return tier
