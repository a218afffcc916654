"""
Option models shared by parsers, formatters and the coordinate facade.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from geocoord.core.config import settings


class CoordinateOrder(str, Enum):
    """Axis order of a WGS84 pair."""

    LATLON = "latlon"  # Latitude first
    LONLAT = "lonlat"  # Longitude first (e.g., GeoJSON)


class AngleFormat(str, Enum):
    """Rendering of a WGS84 angle."""

    DD = "dd"  # Decimal degrees
    DDM = "ddm"  # Degrees, decimal minutes
    DMS = "dms"  # Degrees, minutes, decimal seconds


class CoordinateSystem(str, Enum):
    """Systems accepted by ``create_coordinate``."""

    MGRS = "mgrs"
    UTM = "utm"
    WGS = "wgs"
    LATLON = "latlon"
    LONLAT = "lonlat"


class ParseOptions(BaseModel):
    """
    Options accepted by the parsers.

    Attributes:
        skip_validation: Only report whether the input is well formed
        order: Expected axis order of a WGS84 pair; None reads latitude
            first without rejecting explicitly labelled pairs
    """

    model_config = ConfigDict(frozen=True)

    skip_validation: bool = False
    order: Optional[CoordinateOrder] = None


class FormatOptions(BaseModel):
    """
    Options accepted by the WGS84 formatter.

    Attributes:
        format: Angle rendering
        compass: Use N/S/E/W suffixes instead of signs
        order: Axis order of the output pair
    """

    model_config = ConfigDict(frozen=True)

    format: AngleFormat = Field(default_factory=lambda: AngleFormat(settings.default_format))
    compass: bool = Field(default_factory=lambda: settings.default_compass)
    order: CoordinateOrder = Field(
        default_factory=lambda: CoordinateOrder(settings.default_order)
    )


# One instance per combination; parsers resolve options on every keystroke
_SHARED_PARSE_OPTIONS = {
    (skip, order): ParseOptions(skip_validation=skip, order=order)
    for skip in (False, True)
    for order in (None, *CoordinateOrder)
}
_ORDER_VALUES = {order.value: order for order in CoordinateOrder}

DEFAULT_PARSE_OPTIONS = _SHARED_PARSE_OPTIONS[(False, None)]


def resolve_parse_options(
    options: Optional[ParseOptions] = None,
    skip_validation: Optional[bool] = None,
    order: Optional[str] = None,
) -> ParseOptions:
    """
    Merge keyword overrides into parse options.

    Args:
        options: Base options, defaults when None
        skip_validation: Override for ``skip_validation``
        order: Override for ``order``

    Returns:
        ParseOptions; ``options`` itself when nothing is overridden, otherwise
        a shared instance
    """
    base = options or DEFAULT_PARSE_OPTIONS
    if skip_validation is None and order is None:
        return base

    skip = base.skip_validation if skip_validation is None else bool(skip_validation)
    if order is None:
        order = base.order
    elif not isinstance(order, CoordinateOrder):
        order = _ORDER_VALUES.get(order, order)

    shared = _SHARED_PARSE_OPTIONS.get((skip, order))
    if shared is not None:
        return shared
    # Unknown order strings fail validation here
    return ParseOptions(skip_validation=skip, order=order)


def resolve_format_options(
    options: Optional[FormatOptions] = None,
    format: Optional[str] = None,
    compass: Optional[bool] = None,
    order: Optional[str] = None,
) -> FormatOptions:
    """Merge keyword overrides into format options."""
    overrides = {
        key: value
        for key, value in (("format", format), ("compass", compass), ("order", order))
        if value is not None
    }
    if options is None:
        return FormatOptions(**overrides)
    if not overrides:
        return options
    return FormatOptions(**{**options.model_dump(), **overrides})
