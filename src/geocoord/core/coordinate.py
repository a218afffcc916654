"""
Coordinate facade.

``create_coordinate`` parses text in one of the supported systems and returns
an immutable handle that can render itself and convert to the other systems.
Unlike the parsers, the facade raises: a handle never exists without valid
tokens.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from geocoord.core.converters import (
    to_mgrs_from_utm,
    to_mgrs_from_wgs,
    to_utm_from_mgrs,
    to_utm_from_wgs,
    to_wgs_from_mgrs,
    to_wgs_from_utm,
)
from geocoord.core.errors import ParseError
from geocoord.core.formatters import (
    to_string_from_mgrs,
    to_string_from_utm,
    to_string_from_wgs,
)
from geocoord.core.grids.accuracy import projection_error_meters
from geocoord.core.parsers.mgrs import parse_mgrs
from geocoord.core.parsers.utm import parse_utm
from geocoord.core.parsers.wgs import parse_wgs
from geocoord.models.options import (
    CoordinateOrder,
    CoordinateSystem,
    FormatOptions,
    ParseOptions,
    resolve_parse_options,
)
from geocoord.models.tokens import Tokens, TokensMGRS, TokensUTM, TokensWGS
from geocoord.utils.logging import log_function_call

logger = logging.getLogger(__name__)

OrderLike = Union[CoordinateOrder, str]


class Coordinate(ABC):
    """
    Base class of the coordinate handles.

    Token fields are readable directly on the handle, e.g.
    ``coordinate.zone_number`` or ``coordinate.lat``.
    """

    tokens: Tokens
    token_type: type = object

    @classmethod
    def from_tokens(cls, tokens: Tokens) -> "Coordinate":
        """
        Build a handle from already validated tokens.

        Raises:
            TypeError: If the tokens belong to another coordinate system
        """
        if not isinstance(tokens, cls.token_type):
            raise TypeError(
                f"{cls.__name__} expects {cls.token_type.__name__}, "
                f"got {type(tokens).__name__}"
            )
        return cls(tokens)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name == "tokens":
            raise AttributeError(name)
        return getattr(self.tokens, name)

    @abstractmethod
    def to_string(self) -> str:
        """Render the coordinate in its own system."""
        pass

    @abstractmethod
    def to_mgrs(self, precision: Optional[int] = None) -> "CoordinateMGRS":
        """Convert to MGRS at ``precision`` digits per axis."""
        pass

    @abstractmethod
    def to_utm(self) -> "CoordinateUTM":
        """Convert to UTM."""
        pass

    @abstractmethod
    def to_wgs(self, order: Optional[OrderLike] = None) -> "CoordinateWGS":
        """Convert to WGS84, optionally fixing the axis order for rendering."""
        pass

    def projection_error(self) -> float:
        """
        Deviation in meters between the series projection and PROJ at this point.

        Raises:
            ProjectionError: If pyproj cannot transform the point
        """
        return float(projection_error_meters([self.to_wgs().tokens])[0])

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class CoordinateMGRS(Coordinate):
    """An MGRS coordinate handle."""

    tokens: TokensMGRS
    token_type = TokensMGRS

    def to_string(self) -> str:
        return to_string_from_mgrs(self.tokens)

    def to_mgrs(self, precision: Optional[int] = None) -> "CoordinateMGRS":
        """
        Re-express at another precision.

        Args:
            precision: Digits per axis; None keeps the current precision
        """
        if precision is None or precision == self.tokens.precision:
            return self
        return CoordinateMGRS(to_mgrs_from_utm(to_utm_from_mgrs(self.tokens), precision))

    def to_utm(self) -> "CoordinateUTM":
        return CoordinateUTM(to_utm_from_mgrs(self.tokens))

    def to_wgs(self, order: Optional[OrderLike] = None) -> "CoordinateWGS":
        return CoordinateWGS(to_wgs_from_mgrs(self.tokens), _order_or_none(order))


@dataclass(frozen=True)
class CoordinateUTM(Coordinate):
    """A UTM coordinate handle."""

    tokens: TokensUTM
    token_type = TokensUTM

    def to_string(self) -> str:
        return to_string_from_utm(self.tokens)

    def to_mgrs(self, precision: Optional[int] = None) -> "CoordinateMGRS":
        return CoordinateMGRS(to_mgrs_from_utm(self.tokens, precision))

    def to_utm(self) -> "CoordinateUTM":
        return self

    def to_wgs(self, order: Optional[OrderLike] = None) -> "CoordinateWGS":
        return CoordinateWGS(to_wgs_from_utm(self.tokens), _order_or_none(order))


@dataclass(frozen=True)
class CoordinateWGS(Coordinate):
    """
    A WGS84 coordinate handle.

    Attributes:
        tokens: Latitude/longitude
        order: Axis order used by ``to_string`` when none is given; None
            uses the configured default
    """

    tokens: TokensWGS
    order: Optional[CoordinateOrder] = None
    token_type = TokensWGS

    def to_string(
        self,
        options: Optional[FormatOptions] = None,
        *,
        format: Optional[str] = None,
        compass: Optional[bool] = None,
        order: Optional[OrderLike] = None,
    ) -> str:
        """
        Render the coordinate.

        Args:
            options: Format options
            format: Angle format override (dd, ddm, dms)
            compass: Compass letter override
            order: Axis order override; defaults to the handle's order
        """
        if order is None and options is None:
            order = self.order
        return to_string_from_wgs(
            self.tokens, options, format=format, compass=compass, order=order
        )

    def to_mgrs(self, precision: Optional[int] = None) -> "CoordinateMGRS":
        return CoordinateMGRS(to_mgrs_from_wgs(self.tokens, precision))

    def to_utm(self) -> "CoordinateUTM":
        return CoordinateUTM(to_utm_from_wgs(self.tokens))

    def to_wgs(self, order: Optional[OrderLike] = None) -> "CoordinateWGS":
        order = _order_or_none(order)
        if order is None or order == self.order:
            return self
        return CoordinateWGS(self.tokens, order)


def _order_or_none(order: Optional[OrderLike]) -> Optional[CoordinateOrder]:
    return CoordinateOrder(order) if order is not None else None


_PARSERS: Dict[CoordinateSystem, Callable[..., Any]] = {
    CoordinateSystem.MGRS: parse_mgrs,
    CoordinateSystem.UTM: parse_utm,
    CoordinateSystem.WGS: parse_wgs,
    CoordinateSystem.LATLON: parse_wgs,
    CoordinateSystem.LONLAT: parse_wgs,
}

_HANDLES: Dict[type, Callable[..., Coordinate]] = {
    TokensMGRS: CoordinateMGRS,
    TokensUTM: CoordinateUTM,
}


@log_function_call(log_result=False)
def create_coordinate(
    system: Union[CoordinateSystem, str],
    text: str,
    options: Optional[ParseOptions] = None,
    *,
    order: Optional[OrderLike] = None,
    skip_validation: Optional[bool] = None,
) -> Coordinate:
    """
    Parse ``text`` in ``system`` and return a coordinate handle.

    Args:
        system: mgrs, utm, wgs, or the WGS84 aliases latlon / lonlat that
            fix the axis order
        text: Coordinate text
        options: Parse options; ``skip_validation`` is ignored
        order: Axis order for wgs input
        skip_validation: Ignored, handles always hold validated tokens

    Returns:
        CoordinateMGRS, CoordinateUTM or CoordinateWGS

    Raises:
        ValueError: If ``system`` is unknown, or an order is passed together
            with the latlon / lonlat aliases
        ParseError: If ``text`` cannot be parsed (EmptyInputError for blank input)
    """
    system = CoordinateSystem(system)

    if system in (CoordinateSystem.LATLON, CoordinateSystem.LONLAT):
        if order is not None or (options is not None and options.order is not None):
            raise ValueError(
                f'"{system.value}" fixes the coordinate order; do not pass an order'
            )
        order = system.value

    if skip_validation:
        logger.debug("skip_validation is ignored by create_coordinate")

    opts = resolve_parse_options(options, skip_validation=False, order=order)
    result = _PARSERS[system](text, opts)
    if isinstance(result, ParseError):
        raise result

    if isinstance(result, TokensWGS):
        return CoordinateWGS(result, opts.order)
    return _HANDLES[type(result)](result)
