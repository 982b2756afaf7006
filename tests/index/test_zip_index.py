"""Tests for the ZIP -> rating areas index."""

from slcsp_app.data.models import RatingAreaKey, ZipRecord
from slcsp_app.index import ZipIndex


def _zip(zip_code: str, state: str, area: str, county: str = "00000") -> ZipRecord:
    return ZipRecord(zip_code, state, county, "County", area)


class TestZipIndex:
    """Test suite for ZipIndex."""

    def test_single_area(self) -> None:
        """Test a ZIP in one rating area."""
        index = ZipIndex.build([_zip("30313", "GA", "7")])

        assert index.lookup("30313") == {RatingAreaKey("GA", "7")}

    def test_duplicate_rows_collapse(self) -> None:
        """Test that repeated rows for the same area give one entry."""
        index = ZipIndex.build([
            _zip("54923", "WI", "1", county="55047"),
            _zip("54923", "WI", "1", county="55139"),
        ])

        assert index.lookup("54923") == {RatingAreaKey("WI", "1")}

    def test_multiple_areas_kept(self) -> None:
        """Test that a ZIP spanning two rating areas keeps both."""
        index = ZipIndex.build([
            _zip("31210", "GA", "8"),
            _zip("31210", "GA", "7"),
        ])

        assert index.lookup("31210") == {RatingAreaKey("GA", "7"), RatingAreaKey("GA", "8")}

    def test_unknown_zip_is_empty(self) -> None:
        """Test that an unknown ZIP returns an empty set, not an error."""
        index = ZipIndex.build([_zip("30313", "GA", "7")])

        assert index.lookup("99999") == frozenset()
        assert "99999" not in index
        assert "30313" in index

    def test_len_counts_zip_codes(self) -> None:
        """Test that the index size is the number of distinct ZIPs."""
        index = ZipIndex.build([
            _zip("31210", "GA", "8"),
            _zip("31210", "GA", "7"),
            _zip("30313", "GA", "7"),
        ])

        assert len(index) == 2
