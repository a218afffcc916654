"""
Free-text parsers for MGRS, UTM and WGS84 coordinates.
"""

from geocoord.core.parsers.mgrs import parse_mgrs
from geocoord.core.parsers.utm import parse_utm
from geocoord.core.parsers.wgs import parse_wgs

__all__ = ["parse_mgrs", "parse_utm", "parse_wgs"]
