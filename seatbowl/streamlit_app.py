"""Streamlit app for exploring section profiles."""
import io
import sys
from pathlib import Path

import streamlit as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from seatbowl.config import SECTIONS_DIR
from seatbowl.errors import SeatbowlError
from seatbowl.logging_config import setup_logging
from seatbowl.models.section import Section
from seatbowl.models.tier import RoundingPolicy, Tier
from seatbowl.services.profile_renderer import render_profile
from seatbowl.services.section_loader import available_sections, load_section_config


def tier_controls(tier: Tier, index: int) -> Tier:
    """Sidebar widgets for the main numbers of one tier."""
    with st.expander(f"Tier {index}", expanded=index == 0):
        c_value = st.number_input(
            "C-value", min_value=0.0, value=float(tier.c_value), step=0.005,
            format="%.3f", key=f"c_{index}",
        )
        row_count = st.number_input(
            "Rows", min_value=1, value=int(tier.row_count), step=1, key=f"rows_{index}",
        )
        row_width = st.number_input(
            "Row width", min_value=0.1, value=float(tier.row_widths[0]), step=0.05,
            key=f"rw_{index}",
        )
        rounding = st.selectbox(
            "Riser rounding",
            options=[p.value for p in RoundingPolicy],
            index=[p.value for p in RoundingPolicy].index(tier.rounding.value),
            key=f"round_{index}",
            help="Rounding down can leave rows below their C-value",
        )

    updated = tier.model_copy(deep=True)
    updated.c_value = c_value
    updated.rounding = RoundingPolicy(rounding)
    if row_count != tier.row_count or row_width != tier.row_widths[0]:
        updated.row_count = int(row_count)
        updated.row_widths = [row_width] * int(row_count)
        if updated.vomitory is not None and updated.vomitory.rows.stop > updated.row_count:
            updated.vomitory = None
        if updated.super_riser is not None and updated.super_riser.row >= updated.row_count:
            updated.super_riser = None
    return updated


def main():
    setup_logging()

    st.set_page_config(
        page_title="Section Sightlines",
        page_icon="🏟️",
        layout="wide",
    )

    st.title("Section Sightlines")
    st.markdown("Riser profile and C-values for each row of a seating section.")

    with st.sidebar:
        st.header("Settings")

        sections = available_sections()
        if not sections:
            st.warning("No sections configured yet.")
            st.markdown(f"Add a YAML file to `{SECTIONS_DIR}`.")
            return

        section_id = st.selectbox(
            "Select Section",
            options=sections,
            format_func=lambda x: x.replace("_", " ").title(),
        )
        config = load_section_config(section_id)

        st.divider()
        standing = st.checkbox("Standing spectators", value=False)
        show_sightlines = st.checkbox("Show sightlines", value=True)

        st.divider()
        st.subheader("Tiers")
        tiers = [tier_controls(tier, i) for i, tier in enumerate(config.tiers)]

    try:
        section = Section(tiers, pof=config.pof, name=config.name or config.id)
    except SeatbowlError as e:
        st.error(f"Could not synthesize section: {e}")
        return

    for adjustment in section.adjustments:
        st.info(f"Tier {adjustment.tier_index}: {adjustment.field} set to {adjustment.applied} ({adjustment.reason})")

    image = render_profile(section, show_sightlines=show_sightlines, standing=standing)
    st.image(image, use_container_width=True)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    st.download_button(
        "Download profile (PNG)",
        buffer.getvalue(),
        file_name=f"{section_id}.png",
        mime="image/png",
    )

    for tier in section.tiers:
        st.subheader(f"Tier {tier.index}")
        risers = tier.riser_heights() + [None]
        rows = []
        for spectator, riser in zip(tier.spectators(), risers):
            eye = spectator.position(standing)
            rows.append({
                "row": spectator.row_index,
                "eye H": round(eye.h, 3),
                "eye V": round(eye.v, 3),
                "riser": None if riser is None else round(riser, 3),
                "C-value": None if spectator.c_value is None else round(spectator.c_value, 4),
                "clear": spectator.has_sightline,
                "vomitory": spectator.in_vomitory,
            })
        st.dataframe(rows, use_container_width=True)


if __name__ == "__main__":
    main()
