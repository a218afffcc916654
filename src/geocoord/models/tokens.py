"""
Token records for the three supported coordinate systems.

Tokens are the validated, structured form of a coordinate. They are frozen
dataclasses: created by parsers and conversions, compared by value, never
mutated or shared.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Precision:
    """
    Digit counts of the easting/northing as they appeared in the input.

    Metadata only; never used for arithmetic.
    """

    easting: int
    northing: int


@dataclass(frozen=True)
class TokensMGRS:
    """
    A Military Grid Reference System coordinate.

    Attributes:
        zone_number: UTM zone number (1-60)
        zone_letter: Latitude band letter (C-X, excluding I and O)
        grid_col: 100 km square column letter
        grid_row: 100 km square row letter
        easting: Easting inside the square, in units of 10**(5 - precision) m
        northing: Northing inside the square, same units as easting
        precision: Digits per axis (0-5)
    """

    zone_number: int
    zone_letter: str
    grid_col: str
    grid_row: str
    easting: int
    northing: int
    precision: int

    @property
    def grid_zone_designator(self) -> str:
        """Zone number and band letter, e.g. ``31U``."""
        return f"{self.zone_number:02d}{self.zone_letter}"


@dataclass(frozen=True)
class TokensUTM:
    """
    A Universal Transverse Mercator coordinate.

    Attributes:
        zone_number: UTM zone number (1-60)
        zone_letter: Latitude band letter
        hemisphere: "N" or "S"
        easting: Easting in meters, false easting included
        northing: Northing in meters, false northing included in the south
        precision: Digit counts of easting and northing
    """

    zone_number: int
    zone_letter: str
    hemisphere: str
    easting: float
    northing: float
    precision: Precision

    @property
    def is_northern(self) -> bool:
        return self.hemisphere == "N"

    @property
    def epsg(self) -> int:
        """
        EPSG code of the WGS84 / UTM zone this coordinate lives in.

        Returns:
            326zz for the northern hemisphere, 327zz for the southern
        """
        base = 32600 if self.is_northern else 32700
        return base + self.zone_number


@dataclass(frozen=True)
class TokensWGS:
    """A WGS84 geographic coordinate in decimal degrees."""

    lat: float
    lon: float


Tokens = Union[TokensMGRS, TokensUTM, TokensWGS]
