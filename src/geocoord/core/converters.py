"""
Conversions between MGRS, UTM and WGS84 tokens.

MGRS and WGS84 are connected through UTM. None of these functions validate
their input: tokens are expected to come from a successful parse or from
another conversion.
"""

from typing import Optional

from geocoord.core.grids.grid_mapper import to_mgrs_from_utm, to_utm_from_mgrs
from geocoord.core.grids.projection import to_utm_from_wgs, to_wgs_from_utm
from geocoord.models.tokens import TokensMGRS, TokensWGS


def to_wgs_from_mgrs(tokens: TokensMGRS) -> TokensWGS:
    """
    Convert MGRS tokens to WGS84.

    Args:
        tokens: MGRS coordinate

    Returns:
        Latitude/longitude of the south-west corner of the MGRS square
    """
    return to_wgs_from_utm(to_utm_from_mgrs(tokens))


def to_mgrs_from_wgs(tokens: TokensWGS, precision: Optional[int] = None) -> TokensMGRS:
    """
    Convert WGS84 tokens to MGRS.

    Args:
        tokens: Latitude/longitude in degrees
        precision: Digits per axis (0-5); defaults to the configured
            ``default_mgrs_precision``

    Returns:
        MGRS square containing the point, truncated to ``precision``
    """
    return to_mgrs_from_utm(to_utm_from_wgs(tokens), precision)


__all__ = [
    "to_mgrs_from_utm",
    "to_mgrs_from_wgs",
    "to_utm_from_mgrs",
    "to_utm_from_wgs",
    "to_wgs_from_mgrs",
    "to_wgs_from_utm",
]
