"""Errors raised while configuring or synthesizing a section."""
from typing import Optional


class SeatbowlError(Exception):
    """Base error. Carries the tier and row that caused it, when known."""

    def __init__(
        self,
        message: str,
        tier_index: Optional[int] = None,
        row_index: Optional[int] = None,
    ):
        self.message = message
        self.tier_index = tier_index
        self.row_index = row_index
        super().__init__(self._format())

    def _format(self) -> str:
        location = []
        if self.tier_index is not None:
            location.append(f"tier {self.tier_index}")
        if self.row_index is not None:
            location.append(f"row {self.row_index}")
        if location:
            return f"{self.message} ({', '.join(location)})"
        return self.message


class InvalidConfiguration(SeatbowlError, ValueError):
    """A tier or section configuration cannot be synthesized."""


class DegenerateGeometry(SeatbowlError, ArithmeticError):
    """A geometric solve has no finite answer."""


class SequencingViolation(SeatbowlError):
    """A tier refers to a previous tier that has not been synthesized."""
