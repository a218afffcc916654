"""
Tests for the WGS84 latitude/longitude parser.
"""

import pytest

from geocoord.core.errors import EmptyInputError, ParseError
from geocoord.core.parsers.wgs import (
    Angle,
    assemble_angle,
    assign_axes,
    build_mask,
    find_separator_index,
    is_valid_part,
    parse_wgs,
    sanitize,
    split_parts,
)
from geocoord.models.options import CoordinateOrder, ParseOptions
from geocoord.models.tokens import TokensWGS


def assert_point(result, lat: float, lon: float) -> None:
    assert isinstance(result, TokensWGS), result
    assert result.lat == pytest.approx(lat, abs=1e-6)
    assert result.lon == pytest.approx(lon, abs=1e-6)


class TestSanitize:
    """Tests for normalizing raw text into tokens."""

    def test_pair_separator(self) -> None:
        """Test comma, semicolon and slash become the separator token."""
        assert sanitize("40.7489, -73.968") == ["40.7489", "|", "-73.968"]
        assert sanitize("40.7489;-73.968") == ["40.7489", "|", "-73.968"]
        assert sanitize("40.7489 / -73.968") == ["40.7489", "|", "-73.968"]

    def test_symbols_attach_to_numbers(self) -> None:
        """Test symbols are joined to their number and split from the next."""
        assert sanitize("40 ° 44 ' 56.04 \" N") == ["40°", "44'", '56.04"', "N"]
        assert sanitize("40°44'56.04\"N") == ["40°", "44'", '56.04"', "N"]

    def test_cardinals_are_split(self) -> None:
        """Test prefix and suffix letters become separate tokens."""
        assert sanitize("n40.7489 w73.968") == ["N", "40.7489", "W", "73.968"]
        assert sanitize("40.7489N 73.968W") == ["40.7489", "N", "73.968", "W"]
        assert sanitize("40°N73°W") == ["40°", "N", "73°", "W"]

    def test_cardinal_between_digits_stays_attached(self) -> None:
        """Test a letter inside a number, as in an exponent, is not split out."""
        assert sanitize("1E5 3") == ["1E5", "3"]
        assert sanitize("2S7, 4") == ["2S7", "|", "4"]

    def test_character_variants(self) -> None:
        """Test unicode minus, primes and degree look-alikes."""
        assert sanitize("40º 44′ 56″ N, −73˚ 58’ 4.8” W") == [
            "40°", "44'", '56"', "N", "|", "-73°", "58'", '4.8"', "W",
        ]

    def test_double_apostrophe_is_seconds(self) -> None:
        """Test two apostrophes are read as a seconds symbol."""
        assert sanitize("40° 44' 56.04''") == ["40°", "44'", '56.04"']

    def test_decimal_comma(self) -> None:
        """Test commas are decimal marks when they cannot be separators."""
        assert sanitize("45,6 78,9") == ["45.6", "78.9"]
        assert sanitize("45,6, 78,9") == ["45", "|", "6", "|", "78", "|", "9"]
        assert sanitize("45,78") == ["45", "|", "78"]

    def test_compact_tokens(self) -> None:
        """Test DDMMSSH / DDDMMSSH tokens are expanded."""
        assert sanitize("123015N 0451530E") == [
            "12°", "30'", '15"', "N", "|", "045°", "15'", '30"', "E",
        ]
        assert sanitize("4530N 07315W") == ["45°", "30'", "N", "|", "073°", "15'", "W"]


class TestMask:
    """Tests for the token shape mask and the part catalog."""

    def test_build_mask(self) -> None:
        """Test token kinds."""
        assert build_mask(["40°", "44'", '56"', "N", "|", "7", "X1"]) == "DMSH|nx"

    @pytest.mark.parametrize(
        "mask",
        ["n", "nn", "nnn", "D", "DM", "DMS", "DS", "M", "Dn", "Dnn", "DMn", "Mn", "Hn", "nH", "HDMS"],
    )
    def test_valid_parts(self, mask: str) -> None:
        """Test shapes accepted for one angle."""
        assert is_valid_part(mask)

    @pytest.mark.parametrize("mask", ["", "H", "HnH", "nnnn", "MD", "nD", "SD", "DMSn", "nM"])
    def test_invalid_parts(self, mask: str) -> None:
        """Test shapes rejected for one angle."""
        assert not is_valid_part(mask)

    def test_find_separator_index(self) -> None:
        """Test where the first angle ends without a separator."""
        assert find_separator_index("nn") == 1
        assert find_separator_index("nnnnnn") == 3
        assert find_separator_index("nnnHnnnH") == 4
        assert find_separator_index("HnHn") == 2
        assert find_separator_index("DMSHDMSH") == 4
        assert find_separator_index("DnDn") == 2
        assert find_separator_index("n") is None
        assert find_separator_index("H") is None

    def test_suffix_cardinal_rebalanced(self) -> None:
        """Test a letter too early to end the first angle is not trusted."""
        assert find_separator_index("nHnnn") == 3

    def test_split_parts(self) -> None:
        """Test tokens split into two angles."""
        assert split_parts(["40", "|", "-73"]) == (["40"], ["-73"])
        assert split_parts(["N", "40", "W", "73"]) == (["N", "40"], ["W", "73"])
        assert split_parts(["40", "|", "73", "|", "1"]) is None
        assert split_parts(["40", "HELLO"]) is None
        assert split_parts(["40"]) is None


class TestAssembleAngle:
    """Tests for turning one angle's tokens into decimal degrees."""

    def test_decimal_degrees(self) -> None:
        """Test a bare signed number."""
        assert assemble_angle(["-73.968"]) == Angle(value=-73.968, axis=None)

    def test_degrees_minutes_seconds(self) -> None:
        """Test symbols and a cardinal letter."""
        angle = assemble_angle(["42°", "21'", '36.36"', "N"])
        assert angle.value == pytest.approx(42.3601)
        assert angle.axis == "lat"

    def test_bare_components(self) -> None:
        """Test bare numbers fill degrees, minutes, seconds in order."""
        angle = assemble_angle(["71", "7", "15", "W"])
        assert angle.value == pytest.approx(-(71 + 7 / 60 + 15 / 3600))
        assert angle.axis == "lon"

    def test_negative_with_south_stays_negative(self) -> None:
        """Test a minus sign and S agree."""
        assert assemble_angle(["-33.5", "S"]).value == -33.5

    @pytest.mark.parametrize(
        "tokens, message",
        [
            (["40", "60"], r"Minutes value too high \(60\)"),
            (["40", "-5"], r"Minutes value too low \(-5\)"),
            (["40", "30", "60.5"], r"Seconds value too high \(60.5\)"),
            (["40", "30", "-1"], r"Seconds value too low \(-1\)"),
            (["-40", "N"], "negative value with North direction"),
            (["-73", "E"], "negative value with East direction"),
        ],
    )
    def test_invalid_components(self, tokens, message: str) -> None:
        """Test range and consistency checks."""
        with pytest.raises(ValueError, match=message):
            assemble_angle(tokens)


class TestAssignAxes:
    """Tests for deciding latitude and longitude."""

    def test_default_latitude_first(self) -> None:
        """Test unlabelled pairs read latitude first."""
        assert assign_axes(Angle(10), Angle(20), None) == TokensWGS(lat=10, lon=20)

    def test_lonlat_order(self) -> None:
        """Test the order option swaps unlabelled pairs."""
        assert assign_axes(Angle(10), Angle(20), CoordinateOrder.LONLAT) == TokensWGS(
            lat=20, lon=10
        )

    def test_cardinals_win_without_order(self) -> None:
        """Test labelled pairs are placed by their letters."""
        assert assign_axes(Angle(100, "lon"), Angle(45, "lat"), None) == TokensWGS(
            lat=45, lon=100
        )
        assert assign_axes(Angle(100), Angle(45, "lat"), None) == TokensWGS(lat=45, lon=100)

    def test_same_axis(self) -> None:
        """Test two latitudes are rejected."""
        with pytest.raises(ValueError, match="Both parts assigned to the same axis"):
            assign_axes(Angle(10, "lat"), Angle(20, "lat"), None)

    def test_order_contradiction(self) -> None:
        """Test letters that disagree with an explicit order."""
        with pytest.raises(ValueError, match="contradict specified order"):
            assign_axes(Angle(10, "lat"), Angle(20, "lon"), CoordinateOrder.LONLAT)

    def test_out_of_range(self) -> None:
        """Test latitude and longitude limits."""
        with pytest.raises(ValueError, match=r"Latitude value out of range \(91\)"):
            assign_axes(Angle(91), Angle(0), None)
        with pytest.raises(ValueError, match=r"Longitude value out of range \(-181\)"):
            assign_axes(Angle(0), Angle(-181), None)


class TestParseWgs:
    """Tests for parse_wgs."""

    @pytest.mark.parametrize(
        "text, lat, lon",
        [
            ("40.7489, -73.968", 40.7489, -73.968),
            ("40.7489 -73.968", 40.7489, -73.968),
            ("40.7489;-73.968", 40.7489, -73.968),
            ("40.7489/-73.968", 40.7489, -73.968),
            ("40.7489, −73.968", 40.7489, -73.968),
            ("N40.7489 W73.968", 40.7489, -73.968),
            ("40.7489N 73.968W", 40.7489, -73.968),
            ("W73.968 N40.7489", 40.7489, -73.968),
            ("40° 44.934' N, 73° 58.08' W", 40.7489, -73.968),
            ("40° 44' 56.04\" N 73° 58' 4.8\" W", 40.7489, -73.968),
            ("40°44'56.04\"N 73°58'4.8\"W", 40.7489, -73.968),
            ("42 25 35 N 71 7 15 E", 42 + 25 / 60 + 35 / 3600, 71 + 7 / 60 + 15 / 3600),
            ("40° 30 N 70° 15 W", 40.5, -70.25),
            ("N40 73W", 40, -73),
            ("40°N73°W", 40, -73),
            ("45,6 78,9", 45.6, 78.9),
            ("123015N 0451530E", 12 + 30 / 60 + 15 / 3600, 45 + 15 / 60 + 30 / 3600),
            ("-90, 0", -90, 0),
            ("0, 180", 0, 180),
        ],
    )
    def test_accepted_forms(self, text: str, lat: float, lon: float) -> None:
        """Test the supported input forms."""
        assert_point(parse_wgs(text), lat, lon)

    def test_lonlat_order(self) -> None:
        """Test an explicit longitude-first order."""
        assert_point(parse_wgs("-73.968, 40.7489", order="lonlat"), 40.7489, -73.968)
        assert_point(
            parse_wgs("-73.968, 40.7489", ParseOptions(order=CoordinateOrder.LONLAT)),
            40.7489,
            -73.968,
        )

    def test_labelled_pair_matching_order(self) -> None:
        """Test letters that agree with the order."""
        assert_point(parse_wgs("W73.968 N40.7489", order="lonlat"), 40.7489, -73.968)

    @pytest.mark.parametrize(
        "text, kwargs, message",
        [
            ("hello", {}, "Input is not in a valid WGS format"),
            ("40.7489", {}, "Input is not in a valid WGS format"),
            ("1, 2, 3", {}, "Input is not in a valid WGS format"),
            ("1e5 3", {}, "Input is not in a valid WGS format"),
            ("91, 0", {}, "Latitude value out of range (91)"),
            ("0, 181", {}, "Longitude value out of range (181)"),
            ("40 61 0, 70 0 0", {}, "Minutes value too high (61)"),
            ("40 30 60, 70 0 0", {}, "Seconds value too high (60)"),
            ("-40.7489N, 73.968W", {}, "negative value with North direction"),
            ("N40 N50", {}, "Both parts assigned to the same axis"),
            ("N40 E50", {"order": "lonlat"}, "Coordinate parts contradict specified order"),
        ],
    )
    def test_rejected_input(self, text: str, kwargs, message: str) -> None:
        """Test errors are returned with their message and the raw input."""
        result = parse_wgs(text, **kwargs)
        assert isinstance(result, ParseError)
        assert message in result.message
        assert result.raw == text

    def test_empty_input(self) -> None:
        """Test blank input."""
        assert isinstance(parse_wgs(""), EmptyInputError)
        assert parse_wgs("  ", skip_validation=True) is False

    def test_skip_validation(self) -> None:
        """Test format-only checks ignore ranges."""
        assert parse_wgs("40.7489, -73.968", skip_validation=True) is True
        assert parse_wgs("91, 0", skip_validation=True) is True
        assert parse_wgs("hello", skip_validation=True) is False
