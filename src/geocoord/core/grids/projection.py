"""
Transverse Mercator projection between WGS84 and UTM.

Closed-form series (Snyder, "Map Projections: A Working Manual", USGS PP 1395,
pp. 57-64): no iteration, accurate to a few centimetres inside a
6 degree zone between 80S and 84N.
"""

import math
from typing import Optional

from geocoord.core.grids.tables import (
    GRID_ZONE_LETTERS,
    UTM_FALSE_EASTING,
    UTM_FALSE_NORTHING,
    UTM_K0,
    WGS84,
)
from geocoord.models.tokens import Precision, TokensUTM, TokensWGS

_A = WGS84.a
_E2 = WGS84.e2
_E4 = _E2 * _E2
_E6 = _E4 * _E2
_EP2 = WGS84.ep2
_E1 = WGS84.e1

# Meridional arc series coefficients
_M0 = 1 - _E2 / 4 - 3 * _E4 / 64 - 5 * _E6 / 256
_M2 = 3 * _E2 / 8 + 3 * _E4 / 32 + 45 * _E6 / 1024
_M4 = 15 * _E4 / 256 + 45 * _E6 / 1024
_M6 = 35 * _E6 / 3072

# Footpoint latitude series coefficients
_P2 = 3 * _E1 / 2 - 27 * _E1**3 / 32
_P4 = 21 * _E1**2 / 16 - 55 * _E1**4 / 32
_P6 = 151 * _E1**3 / 96
_P8 = 1097 * _E1**4 / 512


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    return ((lon + 180) % 360 + 360) % 360 - 180


def zone_number_for_longitude(lon: float) -> int:
    """UTM zone (1-60) containing a longitude; no Norway/Svalbard overrides."""
    return math.floor((normalize_longitude(lon) + 180) / 6) + 1


def central_meridian(zone_number: int) -> float:
    """Central meridian of a zone, in radians."""
    return math.radians(-183 + 6 * zone_number)


def zone_letter_for_latitude(lat: float) -> str:
    """
    Latitude band letter for a latitude.

    Args:
        lat: Latitude in degrees

    Returns:
        Band letter; latitudes at or beyond the UTM limits clamp to X / C
    """
    if lat >= 84:
        return "X"
    if lat <= -80:
        return "C"
    return GRID_ZONE_LETTERS[min(math.floor((lat + 80) / 8), len(GRID_ZONE_LETTERS) - 1)]


def compute_precision(value: float) -> int:
    """Number of digits in the integer part of a meter value."""
    return len(str(int(abs(value))))


def meridional_arc(phi: float) -> float:
    """Distance along the meridian from the equator to latitude ``phi`` (radians)."""
    return _A * (
        _M0 * phi
        - _M2 * math.sin(2 * phi)
        + _M4 * math.sin(4 * phi)
        - _M6 * math.sin(6 * phi)
    )


def footpoint_latitude(m: float) -> float:
    """Latitude (radians) whose meridional arc equals ``m``."""
    mu = m / (_A * _M0)
    return (
        mu
        + _P2 * math.sin(2 * mu)
        + _P4 * math.sin(4 * mu)
        + _P6 * math.sin(6 * mu)
        + _P8 * math.sin(8 * mu)
    )


def prime_vertical_radius(sin_phi: float) -> float:
    return _A / math.sqrt(1 - _E2 * sin_phi * sin_phi)


def to_utm_from_wgs(
    tokens: TokensWGS, precision_override: Optional[Precision] = None
) -> TokensUTM:
    """
    Project a WGS84 point to UTM.

    The zone is derived from the normalized longitude only. Points outside
    the UTM latitude range produce numbers but are not meaningful.

    Args:
        tokens: Latitude/longitude in degrees
        precision_override: Precision metadata for the result; by default
            the digit counts of the computed easting/northing

    Returns:
        UTM tokens
    """
    lat = tokens.lat
    zone_number = zone_number_for_longitude(tokens.lon)
    lon0 = central_meridian(zone_number)

    phi = math.radians(lat)
    lam = math.radians(normalize_longitude(tokens.lon))
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    tan_phi = math.tan(phi)

    n = prime_vertical_radius(sin_phi)
    t = tan_phi * tan_phi
    c = _EP2 * cos_phi * cos_phi
    a = cos_phi * (lam - lon0)
    m = meridional_arc(phi)

    easting = (
        UTM_K0
        * n
        * (
            a
            + (1 - t + c) * a**3 / 6
            + (5 - 18 * t + t * t + 72 * c - 58 * _EP2) * a**5 / 120
        )
        + UTM_FALSE_EASTING
    )
    northing = UTM_K0 * (
        m
        + n
        * tan_phi
        * (
            a * a / 2
            + (5 - t + 9 * c + 4 * c * c) * a**4 / 24
            + (61 - 58 * t + t * t + 600 * c - 330 * _EP2) * a**6 / 720
        )
    )
    if lat < 0:
        northing += UTM_FALSE_NORTHING

    return TokensUTM(
        zone_number=zone_number,
        zone_letter=zone_letter_for_latitude(lat),
        hemisphere="N" if lat >= 0 else "S",
        easting=easting,
        northing=northing,
        precision=precision_override
        or Precision(compute_precision(easting), compute_precision(northing)),
    )


def to_wgs_from_utm(tokens: TokensUTM) -> TokensWGS:
    """
    Unproject UTM tokens to WGS84.

    Args:
        tokens: UTM coordinate; the hemisphere decides whether the false
            northing is removed

    Returns:
        Latitude/longitude in degrees
    """
    x = tokens.easting - UTM_FALSE_EASTING
    y = tokens.northing if tokens.hemisphere == "N" else tokens.northing - UTM_FALSE_NORTHING

    phi1 = footpoint_latitude(y / UTM_K0)
    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)

    n1 = prime_vertical_radius(sin_phi1)
    r1 = _A * (1 - _E2) / (1 - _E2 * sin_phi1 * sin_phi1) ** 1.5
    t1 = tan_phi1 * tan_phi1
    c1 = _EP2 * cos_phi1 * cos_phi1
    d = x / (n1 * UTM_K0)

    lat = phi1 - (n1 * tan_phi1 / r1) * (
        d * d / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 * c1 - 9 * _EP2) * d**4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 * t1 - 252 * _EP2 - 3 * c1 * c1) * d**6 / 720
    )
    lon = central_meridian(tokens.zone_number) + (
        d
        - (1 + 2 * t1 + c1) * d**3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 * c1 + 8 * _EP2 + 24 * t1 * t1) * d**5 / 120
    ) / cos_phi1

    return TokensWGS(lat=math.degrees(lat), lon=math.degrees(lon))
