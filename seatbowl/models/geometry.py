"""2D section-plane primitives.

H is the horizontal offset and V the vertical offset, both measured in the
section plane of the point of focus.
"""
import math

from pydantic import BaseModel, ConfigDict, computed_field

from seatbowl.errors import DegenerateGeometry


class Point2D(BaseModel):
    """Point in the section plane."""
    model_config = ConfigDict(frozen=True)

    h: float = 0.0
    v: float = 0.0

    def __add__(self, other: "Vector2D") -> "Point2D":
        if isinstance(other, Vector2D):
            return Point2D(h=self.h + other.h, v=self.v + other.v)
        return NotImplemented

    def __sub__(self, other: "Point2D") -> "Vector2D":
        if isinstance(other, Point2D):
            return Vector2D(h=self.h - other.h, v=self.v - other.v)
        return NotImplemented

    def translate(self, dh: float = 0.0, dv: float = 0.0) -> "Point2D":
        """Return a copy offset by (dh, dv)."""
        return Point2D(h=self.h + dh, v=self.v + dv)

    def distance_to(self, other: "Point2D") -> float:
        return math.hypot(other.h - self.h, other.v - self.v)

    def as_tuple(self) -> tuple[float, float]:
        return (self.h, self.v)


class Vector2D(BaseModel):
    """Direction and magnitude in the section plane.

    The length is always derived from the components, so it cannot drift
    out of step with them.
    """
    model_config = ConfigDict(frozen=True)

    h: float
    v: float

    @classmethod
    def between(cls, start: Point2D, end: Point2D) -> "Vector2D":
        """Vector from start to end."""
        return cls(h=end.h - start.h, v=end.v - start.v)

    @computed_field
    @property
    def length(self) -> float:
        return math.hypot(self.h, self.v)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if isinstance(other, Vector2D):
            return Vector2D(h=self.h + other.h, v=self.v + other.v)
        return NotImplemented

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(h=self.h * scalar, v=self.v * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2D":
        return Vector2D(h=-self.h, v=-self.v)

    def normalize(self) -> "Vector2D":
        length = self.length
        if length == 0.0:
            raise DegenerateGeometry("Cannot normalize a zero-length vector")
        return Vector2D(h=self.h / length, v=self.v / length)

    def dot(self, other: "Vector2D") -> float:
        return self.h * other.h + self.v * other.v

    def cross(self, other: "Vector2D") -> float:
        """Z component of the 3D cross product."""
        return self.h * other.v - self.v * other.h

    def is_parallel_to(self, other: "Vector2D", tolerance: float = 1e-9) -> bool:
        """True if both vectors lie on the same line through the origin."""
        scale = self.length * other.length
        if scale == 0.0:
            return True
        return abs(self.cross(other)) <= tolerance * scale

    def slope(self) -> float:
        """Rise over run (dv / dh)."""
        if self.h == 0.0:
            raise DegenerateGeometry("Vertical vector has no finite slope")
        return self.v / self.h

    def angle(self) -> float:
        """Angle from the +H axis, in radians."""
        return math.atan2(self.v, self.h)
