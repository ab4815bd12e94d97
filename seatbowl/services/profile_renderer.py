"""Draw a section profile with its sightlines."""
from PIL import Image, ImageDraw

from seatbowl.config import DEFAULT_RENDER_HEIGHT, DEFAULT_RENDER_WIDTH, RENDER_MARGIN
from seatbowl.models.geometry import Point2D
from seatbowl.models.section import Section
from seatbowl.utils.geometry import profile_bounds

TIER_COLORS = [
    (31, 119, 180, 255),   # Blue
    (255, 127, 14, 255),   # Orange
    (44, 160, 44, 255),    # Green
    (214, 39, 40, 255),    # Red
    (148, 103, 189, 255),  # Purple
]
SIGHTLINE_COLOR = (120, 120, 120, 90)
OBSTRUCTED_COLOR = (214, 39, 40, 200)
POF_COLOR = (0, 0, 0, 255)


class ProfileTransform:
    """Maps section coordinates to image pixels, V pointing up."""

    def __init__(self, points: list[Point2D], width: int, height: int, margin: int = RENDER_MARGIN):
        min_h, min_v, max_h, max_v = profile_bounds(points)
        span_h = max(max_h - min_h, 1e-9)
        span_v = max(max_v - min_v, 1e-9)

        # Same scale on both axes so rakes are not distorted
        self.scale = min((width - 2 * margin) / span_h, (height - 2 * margin) / span_v)
        self.min_h = min_h
        self.min_v = min_v
        self.margin = margin
        self.height = height

    def __call__(self, point: Point2D) -> tuple[int, int]:
        x = self.margin + (point.h - self.min_h) * self.scale
        y = self.height - self.margin - (point.v - self.min_v) * self.scale
        return (int(round(x)), int(round(y)))


def render_profile(
    section: Section,
    width: int = DEFAULT_RENDER_WIDTH,
    height: int = DEFAULT_RENDER_HEIGHT,
    show_sightlines: bool = True,
    standing: bool = False,
) -> Image.Image:
    """
    Render the riser profile of every tier in a section.

    Args:
        section: Synthesized section
        width: Image width in pixels
        height: Image height in pixels
        show_sightlines: Draw each spectator's line of sight to the P.O.F.
        standing: Use standing eye positions instead of seated

    Returns:
        RGBA image of the section
    """
    image = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    draw = ImageDraw.Draw(image, "RGBA")

    all_points = [section.pof]
    for tier in section.tiers:
        all_points.extend(tier.boundary_points())
        all_points.extend(s.position(standing) for s in tier.spectators())
    to_px = ProfileTransform(all_points, width, height)

    pof_px = to_px(section.pof)

    for tier in section.tiers:
        color = TIER_COLORS[tier.index % len(TIER_COLORS)]
        profile = [to_px(p) for p in tier.boundary_points()]
        draw.line(profile, fill=color, width=2)

        for spectator in tier.spectators():
            eye_px = to_px(spectator.position(standing))
            if show_sightlines:
                line_color = SIGHTLINE_COLOR if spectator.has_sightline else OBSTRUCTED_COLOR
                draw.line([eye_px, pof_px], fill=line_color, width=1)
            draw.ellipse(
                [eye_px[0] - 2, eye_px[1] - 2, eye_px[0] + 2, eye_px[1] + 2],
                fill=color,
            )

        # Tier label at the back of the tier
        label_px = profile[-1]
        draw.text((label_px[0] + 4, label_px[1] - 12), f"T{tier.index}", fill=color)

    draw.ellipse([pof_px[0] - 4, pof_px[1] - 4, pof_px[0] + 4, pof_px[1] + 4], fill=POF_COLOR)
    draw.text((pof_px[0] + 6, pof_px[1] - 14), "P.O.F.", fill=POF_COLOR)

    return image
