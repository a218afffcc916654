"""
Tests for the static grid tables.
"""

import pytest

from geocoord.core.grids import tables


class TestLetterTables:
    """Tests for the letter alphabets."""

    def test_zone_letters_exclude_i_and_o(self) -> None:
        """Test latitude bands skip I and O."""
        assert "I" not in tables.GRID_ZONE_LETTERS
        assert "O" not in tables.GRID_ZONE_LETTERS
        assert len(tables.GRID_ZONE_LETTERS) == 20

    def test_column_letters(self) -> None:
        """Test the column alphabet has 24 letters without I and O."""
        assert len(tables.GRID_COLUMN_LETTERS) == 24
        assert "I" not in tables.GRID_COLUMN_LETTERS
        assert "O" not in tables.GRID_COLUMN_LETTERS

    def test_row_letters(self) -> None:
        """Test the row alphabet runs A-V without I and O."""
        assert tables.GRID_ROW_LETTERS == "ABCDEFGHJKLMNPQRSTUV"


class TestGridZoneLimits:
    """Tests for the latitude band limits."""

    def test_every_band_has_limits(self) -> None:
        """Test each band letter has an entry."""
        assert set(tables.GRID_ZONE_LIMITS) == set(tables.GRID_ZONE_LETTERS)

    def test_bands_are_contiguous(self) -> None:
        """Test each band starts where the previous one ends."""
        letters = tables.GRID_ZONE_LETTERS
        for lower, upper in zip(letters, letters[1:]):
            assert tables.GRID_ZONE_LIMITS[lower].max_lat == tables.GRID_ZONE_LIMITS[upper].min_lat

    def test_band_x_is_twelve_degrees(self) -> None:
        """Test band X spans 72 to 84."""
        limits = tables.GRID_ZONE_LIMITS["X"]
        assert (limits.min_lat, limits.max_lat) == (72, 84)

    def test_northing_span_shorter_than_row_cycle(self) -> None:
        """Test a band never spans a full row-letter cycle."""
        for limits in tables.GRID_ZONE_LIMITS.values():
            span = limits.max_northing - limits.min_northing
            assert 0 < span < tables.GRID_ROW_CYCLE_METERS

    def test_tables_are_read_only(self) -> None:
        """Test the mappings cannot be modified."""
        with pytest.raises(TypeError):
            tables.GRID_ZONE_LIMITS["Y"] = tables.GRID_ZONE_LIMITS["X"]  # type: ignore[index]
        with pytest.raises(TypeError):
            tables.ZONE_LETTER_EXCEPTIONS[31] = ("X",)  # type: ignore[index]


class TestEllipsoid:
    """Tests for the WGS84 ellipsoid constants."""

    def test_wgs84_eccentricity(self) -> None:
        """Test derived eccentricities match published WGS84 values."""
        assert tables.WGS84.e2 == pytest.approx(0.00669437999014, rel=1e-10)
        assert tables.WGS84.ep2 == pytest.approx(0.00673949674228, rel=1e-10)

    def test_utm_constants(self) -> None:
        """Test UTM scale factor and false origins."""
        assert tables.UTM_K0 == 0.9996
        assert tables.UTM_FALSE_EASTING == 500_000
        assert tables.UTM_FALSE_NORTHING == 10_000_000
