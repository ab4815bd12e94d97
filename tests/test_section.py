"""Tests for section construction and aggregate queries."""
import logging

import pytest

from seatbowl.errors import DegenerateGeometry, InvalidConfiguration
from seatbowl.models.geometry import Point2D, Vector2D
from seatbowl.models.section import Section
from seatbowl.models.tier import ReferencePointType, Tier


@pytest.fixture
def two_tier_section(three_row_tier, upper_tier):
    return Section([three_row_tier, upper_tier], name="test")


class TestConstruction:

    def test_empty_tier_list(self):
        with pytest.raises(InvalidConfiguration):
            Section([])

    def test_indices_assigned_in_order(self, two_tier_section):
        assert [t.index for t in two_tier_section.tiers] == [0, 1]

    def test_pof_propagated(self, three_row_tier, upper_tier):
        pof = Point2D(h=-2.0, v=0.5)
        section = Section([three_row_tier, upper_tier], pof=pof)
        assert all(t.pof == pof for t in section.tiers)
        assert all(s.pof == pof for s in section.spectators())

    def test_default_pof_is_origin(self, two_tier_section):
        assert two_tier_section.pof == Point2D(h=0.0, v=0.0)

    def test_caller_tiers_not_modified(self, three_row_tier, upper_tier):
        Section([upper_tier, three_row_tier])
        assert upper_tier.ref_pt_type is ReferencePointType.BY_END_OF_PREV_TIER
        assert not upper_tier.is_synthesized
        assert not three_row_tier.is_synthesized
        assert three_row_tier.index == 0

    def test_first_tier_forced_to_pof(self, upper_tier, three_row_tier, caplog):
        with caplog.at_level(logging.WARNING, logger="seatbowl"):
            section = Section([upper_tier, three_row_tier])
        assert section.tiers[0].ref_pt_type is ReferencePointType.BY_POF
        assert section.tiers[0].reference_point == section.pof
        assert len(section.adjustments) == 1
        adjustment = section.adjustments[0]
        assert adjustment.tier_index == 0
        assert adjustment.field == "ref_pt_type"
        assert adjustment.applied == ReferencePointType.BY_POF.value
        assert "reference point changed" in caplog.text

    def test_no_adjustment_when_first_tier_by_pof(self, two_tier_section):
        assert two_tier_section.adjustments == []

    def test_second_tier_starts_at_end_of_first(self, two_tier_section):
        front, upper = two_tier_section.tiers
        assert upper.reference_point == front.boundary_points()[-1]
        # fascia point hangs below the tier start
        start = upper.boundary_points()[1]
        assert start.h == pytest.approx(upper.reference_point.h + 1.5)
        assert start.v == pytest.approx(upper.reference_point.v + 3.0)

    def test_failure_exposes_no_section(self, three_row_tier):
        bad = Tier(row_count=3, start_h=0.0, row_widths=[0.8] * 3, eye_h=0.8, fascia_h=0.0)
        with pytest.raises(DegenerateGeometry) as exc:
            Section([three_row_tier, bad])
        assert exc.value.tier_index == 1

    def test_short_row_widths_reports_tier(self, three_row_tier):
        bad = Tier(row_count=4, row_widths=[0.8, 0.8])
        with pytest.raises(InvalidConfiguration) as exc:
            Section([three_row_tier, bad])
        assert exc.value.tier_index == 1


    def test_non_finite_tier_rejected(self, three_row_tier):
        bad = Tier(row_count=3, row_widths=[0.8] * 3, fascia_h=0.0, c_value=float("nan"))
        with pytest.raises(InvalidConfiguration) as exc:
            Section([three_row_tier, bad])
        assert exc.value.tier_index == 1

    def test_infinite_row_width_rejected(self):
        with pytest.raises(InvalidConfiguration) as exc:
            Section([Tier(row_count=3, row_widths=[0.8, float("inf"), 0.8])])
        assert exc.value.row_index == 1

    def test_configuration_checked_before_any_tier_is_built(self, three_row_tier, caplog):
        bad = Tier(row_count=4, row_widths=[0.8, 0.8])
        with caplog.at_level(logging.DEBUG, logger="seatbowl"):
            with pytest.raises(InvalidConfiguration):
                Section([three_row_tier, bad])
        assert not [r for r in caplog.records if r.name == "seatbowl.services.row_synthesis"]


class TestQueries:

    def test_all_boundary_points_is_jagged(self, two_tier_section):
        points = two_tier_section.all_boundary_points()
        assert len(points) == 2
        assert len(points[0]) == 6
        assert len(points[1]) == 13

    def test_spectator_positions(self, two_tier_section):
        seated = two_tier_section.all_spectator_positions()
        standing = two_tier_section.all_spectator_positions(standing=True)
        assert [len(t) for t in seated] == [3, 6]
        for tier_seated, tier_standing in zip(seated, standing):
            for s, st in zip(tier_seated, tier_standing):
                assert st.v > s.v

    def test_sightlines(self, two_tier_section):
        sightlines = two_tier_section.all_sightlines()
        standing = two_tier_section.all_sightlines(standing=True)
        assert [len(t) for t in sightlines] == [3, 6]
        assert all(isinstance(v, Vector2D) for tier in standing for v in tier)

    def test_sightline_lengths_match_eye_distance(self, two_tier_section):
        for spectator in two_tier_section.spectators():
            assert spectator.sightline.length == pytest.approx(
                spectator.eye.distance_to(two_tier_section.pof)
            )
            assert spectator.sightline_standing.length == pytest.approx(
                spectator.eye_standing.distance_to(two_tier_section.pof)
            )

    def test_spectator_lookup(self, two_tier_section):
        s = two_tier_section.spectator(1, 4)
        assert s.key == (1, 4)
        with pytest.raises(IndexError):
            two_tier_section.spectator(2, 0)
        with pytest.raises(IndexError):
            two_tier_section.spectator(0, 3)

    def test_spectator_keys_unique(self, two_tier_section):
        keys = [s.key for s in two_tier_section.spectators()]
        assert len(keys) == len(set(keys)) == 9

    def test_last_point(self, two_tier_section):
        assert two_tier_section.last_point == two_tier_section.tiers[1].boundary_points()[-1]

    def test_summary(self, two_tier_section):
        summary = two_tier_section.summary()
        assert summary["name"] == "test"
        assert summary["pof"] == (0.0, 0.0)
        assert [t["rows"] for t in summary["tiers"]] == [3, 6]
        assert summary["tiers"][0]["min_c_value"] == pytest.approx(0.1)
        assert summary["tiers"][1]["obstructed_rows"] == []
        assert summary["adjustments"] == []


class TestResynthesis:

    def test_resynthesize_is_idempotent(self, two_tier_section):
        before_points = two_tier_section.all_boundary_points()
        before_spectators = list(two_tier_section.spectators())
        two_tier_section.resynthesize()
        assert two_tier_section.all_boundary_points() == before_points
        assert list(two_tier_section.spectators()) == before_spectators

    def test_separate_sections_match(self, three_row_tier, upper_tier):
        a = Section([three_row_tier, upper_tier])
        b = Section([three_row_tier, upper_tier])
        assert a.all_boundary_points() == b.all_boundary_points()

    def test_resynthesize_picks_up_edits(self, two_tier_section):
        old_end = two_tier_section.last_point
        two_tier_section.tiers[0].c_value = 0.15
        two_tier_section.resynthesize()
        assert two_tier_section.last_point.v > old_end.v
