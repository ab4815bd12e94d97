"""Tests for tier configuration."""
import pytest

from seatbowl.errors import InvalidConfiguration
from seatbowl.models.tier import (
    ReferencePointType,
    RoundingPolicy,
    SightlineBasis,
    SuperRiser,
    Tier,
    Vomitory,
)
from seatbowl.utils.units import Unit


class TestTierDefaults:

    def test_row_widths_filled_for_row_count(self):
        tier = Tier(row_count=5)
        assert tier.row_widths == [0.8] * 5

    def test_explicit_row_widths_kept(self):
        tier = Tier(row_count=2, row_widths=[0.9, 1.0])
        assert tier.row_widths == [0.9, 1.0]

    def test_enum_defaults(self):
        tier = Tier()
        assert tier.ref_pt_type is ReferencePointType.BY_POF
        assert tier.rounding is RoundingPolicy.UP
        assert tier.sightline_basis is SightlineBasis.SEATED

    def test_unit_from_name(self):
        assert Tier(unit="ft").unit == pytest.approx(3.28084)

    def test_default_factory_scales_by_unit(self):
        tier = Tier.default(unit=Unit.MILLIMETRE, row_count=4)
        assert tier.start_h == pytest.approx(5000.0)
        assert tier.eye_v == pytest.approx(1200.0)
        assert tier.row_widths == pytest.approx([800.0] * 4)
        assert tier.round_to == pytest.approx(1.0)
        tier.validate_for_synthesis()

    def test_default_factory_overrides(self):
        tier = Tier.default(row_count=3, c_value=0.12, fascia_h=0.0)
        assert tier.c_value == 0.12
        assert tier.fascia_h == 0.0


class TestPointCount:

    def test_without_fascia(self, three_row_tier):
        assert three_row_tier.point_count == 6

    def test_with_fascia(self):
        assert Tier.default(row_count=4).point_count == 9

    def test_single_row(self):
        assert Tier(row_count=1, fascia_h=0.0).point_count == 2


class TestValidation:

    def test_valid_tier(self, three_row_tier):
        three_row_tier.validate_for_synthesis()

    def test_non_positive_row_count(self):
        with pytest.raises(InvalidConfiguration):
            Tier(row_count=0).validate_for_synthesis()

    def test_short_row_widths(self):
        tier = Tier(row_count=3, row_widths=[0.8, 0.8])
        tier.index = 2
        with pytest.raises(InvalidConfiguration) as exc:
            tier.validate_for_synthesis()
        assert exc.value.tier_index == 2
        assert "tier 2" in str(exc.value)

    def test_longer_row_widths_allowed(self):
        Tier(row_count=2, row_widths=[0.8, 0.8, 0.8]).validate_for_synthesis()

    def test_non_positive_row_width(self):
        with pytest.raises(InvalidConfiguration) as exc:
            Tier(row_count=3, row_widths=[0.8, 0.0, 0.8]).validate_for_synthesis()
        assert exc.value.row_index == 1

    def test_bad_rounding_increment(self):
        with pytest.raises(InvalidConfiguration):
            Tier(row_count=3, round_to=-0.01).validate_for_synthesis()

    def test_vomitory_past_last_row(self):
        tier = Tier(row_count=5, vomitory=Vomitory(start_row=3, height_rows=5))
        with pytest.raises(InvalidConfiguration):
            tier.validate_for_synthesis()

    def test_super_riser_outside_tier(self):
        tier = Tier(row_count=5, super_riser=SuperRiser(row=5))
        with pytest.raises(InvalidConfiguration):
            tier.validate_for_synthesis()


class TestBookkeeping:

    def test_vomitory_rows(self):
        tier = Tier(row_count=10, vomitory=Vomitory(start_row=2, height_rows=3))
        assert list(tier.vomitory_rows) == [2, 3, 4]
        assert list(Tier().vomitory_rows) == []

    def test_eye_offsets(self):
        tier = Tier(eye_h=0.7, eye_v=1.1, standing_eye_h=0.6, standing_eye_v=2.4)
        assert tier.eye_offsets() == (0.7, 1.1)
        assert tier.eye_offsets(standing=True) == (0.6, 2.4)

    def test_geometry_unavailable_before_synthesis(self, three_row_tier):
        assert not three_row_tier.is_synthesized
        assert three_row_tier.reference_point is None
        with pytest.raises(InvalidConfiguration):
            three_row_tier.boundary_points()
        with pytest.raises(InvalidConfiguration):
            three_row_tier.spectators()


class TestUnitDefaults:

    def test_omitted_lengths_scaled_by_unit(self):
        tier = Tier(unit="mm", row_count=3)
        assert tier.start_h == pytest.approx(5000.0)
        assert tier.start_v == pytest.approx(1000.0)
        assert tier.c_value == pytest.approx(100.0)
        assert tier.eye_h == pytest.approx(800.0)
        assert tier.eye_v == pytest.approx(1200.0)
        assert tier.standing_eye_v == pytest.approx(2500.0)
        assert tier.row_widths == pytest.approx([800.0] * 3)

    def test_given_lengths_kept(self):
        tier = Tier(unit="mm", row_count=3, eye_v=1100.0, c_value=90.0)
        assert tier.eye_v == 1100.0
        assert tier.c_value == 90.0
        assert tier.eye_h == pytest.approx(800.0)

    def test_metre_defaults_unchanged(self):
        tier = Tier(row_count=3)
        assert tier.eye_v == 1.2
        assert tier.start_h == 5.0


class TestNonFiniteValues:

    @pytest.mark.parametrize("name", ["c_value", "start_h", "start_v", "eye_h", "eye_v", "fascia_h"])
    def test_nan_field_rejected(self, name):
        tier = Tier(row_count=3, **{name: float("nan")})
        with pytest.raises(InvalidConfiguration) as exc:
            tier.validate_for_synthesis()
        assert name in str(exc.value)
        assert exc.value.tier_index == 0

    def test_infinite_row_width_rejected(self):
        tier = Tier(row_count=3, row_widths=[0.8, float("inf"), 0.8])
        with pytest.raises(InvalidConfiguration) as exc:
            tier.validate_for_synthesis()
        assert exc.value.row_index == 1

    def test_infinite_rounding_increment_rejected(self):
        with pytest.raises(InvalidConfiguration):
            Tier(row_count=3, round_to=float("inf")).validate_for_synthesis()
