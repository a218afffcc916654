"""
Tests for the UTM parser.
"""

import pytest

from geocoord.core.errors import EmptyInputError, ParseError
from geocoord.core.parsers.utm import lex_utm, parse_utm
from geocoord.models.options import ParseOptions
from geocoord.models.tokens import Precision, TokensUTM


class TestLexUtm:
    """Tests for slicing UTM text into fragments."""

    def test_full_coordinate(self) -> None:
        """Test zone, letter, easting and northing are extracted."""
        fragments = lex_utm("31U 448251 5411932")
        assert fragments.zone_number == 31
        assert fragments.zone_letter == "U"
        assert (fragments.easting, fragments.northing) == ("448251", "5411932")

    def test_zone_only(self) -> None:
        """Test a grid zone designator without meters."""
        fragments = lex_utm("18T")
        assert (fragments.zone_number, fragments.zone_letter) == (18, "T")
        assert (fragments.easting, fragments.northing) == ("", "")

    def test_unrecognized_shape(self) -> None:
        """Test unmatched input yields empty fragments."""
        fragments = lex_utm("EASTING 1 2")
        assert fragments.zone_number is None


class TestParseUtm:
    """Tests for parse_utm."""

    def test_northern_hemisphere(self) -> None:
        """Test a northern coordinate."""
        assert parse_utm("31U 448251 5411932") == TokensUTM(
            31, "U", "N", 448_251, 5_411_932, Precision(6, 7)
        )

    def test_southern_hemisphere(self) -> None:
        """Test bands C-M are southern."""
        tokens = parse_utm("56H 334876 6251936")
        assert tokens.hemisphere == "S"
        assert tokens.epsg == 32756

    def test_whitespace_and_case(self) -> None:
        """Test extra whitespace and lowercase letters."""
        assert parse_utm("  33u   456789\t5678901 ") == TokensUTM(
            33, "U", "N", 456_789, 5_678_901, Precision(6, 7)
        )
        assert parse_utm("33 U 456789 5678901").zone_letter == "U"

    def test_short_values_keep_digit_counts(self) -> None:
        """Test precision records the digits as typed."""
        tokens = parse_utm("04Q 12345 1234")
        assert tokens.zone_number == 4
        assert tokens.precision == Precision(5, 4)

    def test_zone_designator_only(self) -> None:
        """Test a designator alone parses with zero meters."""
        assert parse_utm("18T") == TokensUTM(18, "T", "N", 0, 0, Precision(0, 0))

    @pytest.mark.parametrize(
        "text, message",
        [
            ("U 448251 5411932", "No zone number found"),
            ("61U 448251 5411932", "Invalid zone number (61)"),
            ("31I 448251 5411932", 'Invalid zone letter "I"'),
            ("32X 448251 5411932", 'Invalid zone letter "X" for zone "32"'),
            ("31U 44A251 5411932", "Invalid (non-numeric) characters in easting"),
            ("31U 448251 54119B2", "Invalid (non-numeric) characters in northing"),
            ("31U 4482510 5411932", "Invalid easting precision - greater than 6 digits"),
            ("31U 448251 54119320", "Invalid northing precision - greater than 7 digits"),
        ],
    )
    def test_invalid_coordinates(self, text: str, message: str) -> None:
        """Test each validator reports its own message."""
        result = parse_utm(text)
        assert isinstance(result, ParseError)
        assert message in result.message
        assert result.raw == text

    def test_empty_input(self) -> None:
        """Test blank input."""
        assert isinstance(parse_utm(""), EmptyInputError)
        assert isinstance(parse_utm(" \n"), EmptyInputError)


class TestSkipValidation:
    """Tests for format-only checks."""

    def test_well_formed(self) -> None:
        """Test valid shapes return True."""
        assert parse_utm("31U 448251 5411932", skip_validation=True) is True
        assert parse_utm("18T", skip_validation=True) is True
        assert parse_utm("31U 448251 5411932", ParseOptions(skip_validation=True)) is True

    def test_malformed(self) -> None:
        """Test malformed shapes return False."""
        assert parse_utm("31U 448251", skip_validation=True) is False
        assert parse_utm("31U 4482510 5411932", skip_validation=True) is False
        assert parse_utm("31I 448251 5411932", skip_validation=True) is False
        assert parse_utm("", skip_validation=True) is False
