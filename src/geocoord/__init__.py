"""
geocoord - parsing, conversion and formatting of MGRS, UTM and WGS84 coordinates.

Parsers return tokens or an error value and never raise for bad input;
converters chain through UTM; formatters render tokens back to text.
"""

from geocoord.core.converters import (
    to_mgrs_from_utm,
    to_mgrs_from_wgs,
    to_utm_from_mgrs,
    to_utm_from_wgs,
    to_wgs_from_mgrs,
    to_wgs_from_utm,
)
from geocoord.core.coordinate import (
    Coordinate,
    CoordinateMGRS,
    CoordinateUTM,
    CoordinateWGS,
    create_coordinate,
)
from geocoord.core.errors import (
    ConfigurationError,
    EmptyInputError,
    GeocoordException,
    ParseError,
    ProjectionError,
)
from geocoord.core.formatters import (
    to_string_from_mgrs,
    to_string_from_utm,
    to_string_from_wgs,
)
from geocoord.core.grids.accuracy import (
    projection_error_meters,
    validate_projection_accuracy,
)
from geocoord.core.logging_config import LogContext, setup_logging
from geocoord.core.parsers import parse_mgrs, parse_utm, parse_wgs
from geocoord.models.options import (
    AngleFormat,
    CoordinateOrder,
    CoordinateSystem,
    FormatOptions,
    ParseOptions,
)
from geocoord.models.tokens import Precision, TokensMGRS, TokensUTM, TokensWGS

__version__ = "0.1.0"

__all__ = [
    "AngleFormat",
    "ConfigurationError",
    "Coordinate",
    "CoordinateMGRS",
    "CoordinateOrder",
    "CoordinateSystem",
    "CoordinateUTM",
    "CoordinateWGS",
    "EmptyInputError",
    "FormatOptions",
    "GeocoordException",
    "LogContext",
    "ParseError",
    "ParseOptions",
    "Precision",
    "ProjectionError",
    "TokensMGRS",
    "TokensUTM",
    "TokensWGS",
    "create_coordinate",
    "parse_mgrs",
    "parse_utm",
    "parse_wgs",
    "projection_error_meters",
    "setup_logging",
    "to_mgrs_from_utm",
    "to_mgrs_from_wgs",
    "to_string_from_mgrs",
    "to_string_from_utm",
    "to_string_from_wgs",
    "to_utm_from_mgrs",
    "to_utm_from_wgs",
    "to_wgs_from_mgrs",
    "to_wgs_from_utm",
    "validate_projection_accuracy",
]
