"""Shared fixtures."""
from pathlib import Path

import pytest

from seatbowl.models.tier import ReferencePointType, Tier

DATA_DIR = Path(__file__).parent.parent / "data" / "sections"


@pytest.fixture
def three_row_tier():
    """Single 3-row tier with round numbers, no fascia, no rounding."""
    return Tier(
        start_h=5.0,
        start_v=1.0,
        row_count=3,
        row_widths=[0.8, 0.8, 0.8],
        eye_h=0.8,
        eye_v=1.2,
        c_value=0.1,
        fascia_h=0.0,
    )


@pytest.fixture
def upper_tier():
    """Tier that starts from the back of the tier in front."""
    return Tier(
        ref_pt_type=ReferencePointType.BY_END_OF_PREV_TIER,
        start_h=1.5,
        start_v=3.0,
        row_count=6,
        row_widths=[0.9] * 6,
        c_value=0.09,
        fascia_h=1.2,
    )


@pytest.fixture
def sections_dir():
    return DATA_DIR
