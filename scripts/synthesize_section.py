#!/usr/bin/env python3
"""Synthesize a section and print its rows."""
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from seatbowl.errors import SeatbowlError
from seatbowl.logging_config import setup_logging
from seatbowl.services.section_loader import load_section


def synthesize(section_id: str = "lower_bowl", standing: bool = False):
    """Print the riser and sightline figures of every row."""
    print(f"Synthesizing section: {section_id}")

    try:
        section = load_section(section_id)
    except (FileNotFoundError, SeatbowlError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    for adjustment in section.adjustments:
        print(f"Note: tier {adjustment.tier_index} {adjustment.field} -> {adjustment.applied}")

    for tier in section.tiers:
        ref = tier.reference_point
        print(f"\nTier {tier.index}: {tier.row_count} rows, reference ({ref.h:.3f}, {ref.v:.3f})")
        print("-" * 60)
        print(f"{'row':>4} {'eye H':>9} {'eye V':>9} {'riser':>8} {'C':>8}")

        risers = tier.riser_heights() + [None]
        for spectator, riser in zip(tier.spectators(), risers):
            eye = spectator.position(standing)
            riser_text = "" if riser is None else f"{riser:.3f}"
            c_text = "" if spectator.c_value is None else f"{spectator.c_value:.4f}"
            flag = "" if spectator.has_sightline else "  obstructed"
            print(f"{spectator.row_index:>4} {eye.h:>9.3f} {eye.v:>9.3f} {riser_text:>8} {c_text:>8}{flag}")

    end = section.last_point
    print(f"\nSection ends at ({end.h:.3f}, {end.v:.3f})")


if __name__ == "__main__":
    setup_logging()
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    section = args[0] if args else "lower_bowl"
    synthesize(section, standing="--standing" in sys.argv)
