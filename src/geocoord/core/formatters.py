"""
String rendering of MGRS, UTM and WGS84 tokens.
"""

import math
from typing import Optional, Tuple, Union

from geocoord.models.options import (
    AngleFormat,
    CoordinateOrder,
    FormatOptions,
    resolve_format_options,
)
from geocoord.models.tokens import TokensMGRS, TokensUTM, TokensWGS

DEGREE_PLACES = 8
MINUTE_PLACES = 4
SECOND_PLACES = 4


def _pad(value: int, width: int) -> str:
    if width <= 0:
        return ""
    return str(value).zfill(width)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_string_from_mgrs(tokens: TokensMGRS) -> str:
    """
    Render MGRS tokens in compact form.

    Returns:
        e.g. ``"31UEQ4825111932"``; digits are zero-padded to the precision
    """
    return (
        f"{tokens.zone_number:02d}{tokens.zone_letter}{tokens.grid_col}{tokens.grid_row}"
        f"{_pad(tokens.easting, tokens.precision)}{_pad(tokens.northing, tokens.precision)}"
    )


def to_string_from_utm(tokens: TokensUTM) -> str:
    """
    Render UTM tokens.

    Returns:
        e.g. ``"31U 448251 5411932"``; meters are rounded and zero-padded to
        the precision metadata, and only the grid zone designator is printed
        when the coordinate carries no easting/northing digits
    """
    zone = f"{tokens.zone_number:02d}{tokens.zone_letter}"
    if tokens.precision.easting == 0 and tokens.precision.northing == 0:
        return zone

    easting = str(_round_half_up(tokens.easting)).zfill(tokens.precision.easting)
    northing = str(_round_half_up(tokens.northing)).zfill(tokens.precision.northing)
    return f"{zone} {easting} {northing}"


def format_decimal(value: float, places: int) -> str:
    """Round to ``places`` decimals and strip trailing zeros."""
    rounded = round(value, places)
    if rounded == 0:
        return "0"
    return f"{rounded:.{places}f}".rstrip("0").rstrip(".")


def _split_minutes(magnitude: float) -> Tuple[int, float]:
    degrees = int(magnitude)
    minutes = round((magnitude - degrees) * 60, MINUTE_PLACES)
    if minutes >= 60:
        degrees, minutes = degrees + 1, minutes - 60
    return degrees, minutes


def _split_seconds(magnitude: float) -> Tuple[int, int, float]:
    degrees = int(magnitude)
    total_minutes = (magnitude - degrees) * 60
    minutes = int(total_minutes)
    seconds = round((total_minutes - minutes) * 60, SECOND_PLACES)
    if seconds >= 60:
        minutes, seconds = minutes + 1, seconds - 60
    if minutes >= 60:
        degrees, minutes = degrees + 1, minutes - 60
    return degrees, minutes, seconds


def format_angle(value: float, axis: str, angle_format: AngleFormat, compass: bool) -> str:
    """
    Render one angle.

    A negative value that rounds to zero in the chosen format renders unsigned
    (and as N/E with compass letters).

    Args:
        value: Signed decimal degrees
        axis: "lat" or "lon", selects the compass letters
        angle_format: dd, ddm or dms
        compass: Replace the sign with a trailing N/S or E/W

    Returns:
        e.g. ``-73.968°``, ``40° 44.934'`` or ``40° 44' 56.04"N``
    """
    magnitude = abs(value)

    if angle_format == AngleFormat.DDM:
        degrees, minutes = _split_minutes(magnitude)
        is_zero = degrees == 0 and minutes == 0
        body = f"{degrees}° {format_decimal(minutes, MINUTE_PLACES)}'"
    elif angle_format == AngleFormat.DMS:
        degrees, minutes, seconds = _split_seconds(magnitude)
        is_zero = degrees == 0 and minutes == 0 and seconds == 0
        body = f"{degrees}° {minutes}' {format_decimal(seconds, SECOND_PLACES)}\""
    else:
        is_zero = round(magnitude, DEGREE_PLACES) == 0
        body = f"{format_decimal(magnitude, DEGREE_PLACES)}°"

    negative = value < 0 and not is_zero
    if not compass:
        return f"-{body}" if negative else body
    if axis == "lat":
        return f"{body}{'S' if negative else 'N'}"
    return f"{body}{'W' if negative else 'E'}"


def to_string_from_wgs(
    tokens: TokensWGS,
    options: Optional[FormatOptions] = None,
    *,
    format: Optional[Union[AngleFormat, str]] = None,
    compass: Optional[bool] = None,
    order: Optional[Union[CoordinateOrder, str]] = None,
) -> str:
    """
    Render WGS84 tokens.

    Args:
        tokens: Latitude/longitude in degrees
        options: Format options
        format: Angle format override (dd, ddm, dms)
        compass: Compass letter override
        order: Axis order override

    Returns:
        Two angles joined by ``", "``, e.g. ``"40.7489°, -73.968°"``
    """
    opts = resolve_format_options(options, format=format, compass=compass, order=order)

    lat = format_angle(tokens.lat, "lat", opts.format, opts.compass)
    lon = format_angle(tokens.lon, "lon", opts.format, opts.compass)
    if opts.order == CoordinateOrder.LONLAT:
        return f"{lon}, {lat}"
    return f"{lat}, {lon}"
