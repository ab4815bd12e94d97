"""Unit scale coefficients, expressed as model units per metre."""
from enum import Enum


class Unit(float, Enum):
    """Model unit space of a tier."""
    MILLIMETRE = 1000.0
    CENTIMETRE = 100.0
    METRE = 1.0
    INCH = 39.3701
    FOOT = 3.28084
    YARD = 1.09361

    @classmethod
    def from_name(cls, name: str) -> "Unit":
        """Look up a unit by short or long name ("mm", "m", "ft", "feet"...)."""
        key = name.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown unit: {name}")


_ALIASES = {
    "mm": Unit.MILLIMETRE,
    "millimetre": Unit.MILLIMETRE,
    "millimeter": Unit.MILLIMETRE,
    "cm": Unit.CENTIMETRE,
    "centimetre": Unit.CENTIMETRE,
    "centimeter": Unit.CENTIMETRE,
    "m": Unit.METRE,
    "metre": Unit.METRE,
    "meter": Unit.METRE,
    "in": Unit.INCH,
    "inch": Unit.INCH,
    "ft": Unit.FOOT,
    "foot": Unit.FOOT,
    "feet": Unit.FOOT,
    "yd": Unit.YARD,
    "yard": Unit.YARD,
}
