"""Unit tests for the canonical data models."""

from decimal import Decimal

import pytest

from slcsp_app.data.models import PlanRecord, RatingAreaKey, TargetZip, ZipRecord


class TestRatingAreaKey:
    """Test suite for the composite rating area key."""

    def test_equal_keys_hash_equal(self) -> None:
        """Test that keys with the same fields are interchangeable in dicts."""
        index = {RatingAreaKey("GA", "7"): "found"}
        assert index[RatingAreaKey("GA", "7")] == "found"

    def test_concatenation_collision_is_distinct(self) -> None:
        """Test that keys whose concatenations match stay distinct."""
        a = RatingAreaKey("G", "A7")
        b = RatingAreaKey("GA", "7")

        assert str(a) == str(b) == "GA7"
        assert a != b
        assert len({a, b}) == 2

    def test_str_is_legacy_concatenation(self) -> None:
        """Test display form of the key."""
        assert str(RatingAreaKey("MO", "3")) == "MO3"

    def test_frozen(self) -> None:
        """Test that keys cannot be mutated."""
        key = RatingAreaKey("GA", "7")
        with pytest.raises(AttributeError):
            key.state = "AL"  # type: ignore[misc]


class TestRecords:
    """Test suite for plan, ZIP and target records."""

    def test_plan_rating_area(self) -> None:
        """Test that a plan exposes its rating area key."""
        plan = PlanRecord("p1", "GA", "Silver", Decimal("298.62"), "7")
        assert plan.rating_area == RatingAreaKey("GA", "7")

    def test_zip_rating_area(self) -> None:
        """Test that a ZIP row exposes its rating area key."""
        record = ZipRecord("30313", "GA", "13121", "Fulton", "7")
        assert record.rating_area == RatingAreaKey("GA", "7")

    def test_target_defaults(self) -> None:
        """Test target ZIP defaults."""
        target = TargetZip("30313")
        assert target.zip_code == "30313"
        assert target.line_number == 0
