"""
Static grid and ellipsoid tables.

Everything here is built once at import time and exposed read-only
(tuples, strings and ``MappingProxyType``).
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

# Latitude bands, south to north, 8 degrees each (X spans 12)
GRID_ZONE_LETTERS = "CDEFGHJKLMNPQRSTUVWX"

# 100 km square letters, I and O excluded
GRID_COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
GRID_ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"

GRID_COLUMN_SET_SIZE = 8
GRID_COLUMN_CYCLE = 6
GRID_SQUARE_SIZE_METERS = 100_000
GRID_ROW_CYCLE_METERS = 2_000_000

MIN_ZONE_NUMBER = 1
MAX_ZONE_NUMBER = 60
DEFAULT_MGRS_PRECISION = 5
MAX_MGRS_PRECISION = 5
MAX_UTM_EASTING_DIGITS = 6
MAX_UTM_NORTHING_DIGITS = 7


@dataclass(frozen=True)
class ZoneLimits:
    """Latitude and northing extent of one latitude band."""

    min_lat: float
    max_lat: float
    min_northing: int
    max_northing: int


# Minimum northings from NGA.SIG.0012 table 2-2; maximum northings are the
# band's extreme northing inside a 6 degree zone, rounded up to 100 km
GRID_ZONE_LIMITS: Mapping[str, ZoneLimits] = MappingProxyType(
    {
        "C": ZoneLimits(-80, -72, 1_100_000, 2_100_000),
        "D": ZoneLimits(-72, -64, 2_000_000, 3_000_000),
        "E": ZoneLimits(-64, -56, 2_800_000, 3_800_000),
        "F": ZoneLimits(-56, -48, 3_700_000, 4_700_000),
        "G": ZoneLimits(-48, -40, 4_600_000, 5_600_000),
        "H": ZoneLimits(-40, -32, 5_500_000, 6_500_000),
        "J": ZoneLimits(-32, -24, 6_400_000, 7_400_000),
        "K": ZoneLimits(-24, -16, 7_300_000, 8_300_000),
        "L": ZoneLimits(-16, -8, 8_200_000, 9_200_000),
        "M": ZoneLimits(-8, 0, 9_100_000, 10_000_000),
        "N": ZoneLimits(0, 8, 0, 900_000),
        "P": ZoneLimits(8, 16, 800_000, 1_800_000),
        "Q": ZoneLimits(16, 24, 1_700_000, 2_700_000),
        "R": ZoneLimits(24, 32, 2_600_000, 3_600_000),
        "S": ZoneLimits(32, 40, 3_500_000, 4_500_000),
        "T": ZoneLimits(40, 48, 4_400_000, 5_400_000),
        "U": ZoneLimits(48, 56, 5_300_000, 6_300_000),
        "V": ZoneLimits(56, 64, 6_200_000, 7_200_000),
        "W": ZoneLimits(64, 72, 7_000_000, 8_000_000),
        "X": ZoneLimits(72, 84, 7_900_000, 9_400_000),
    }
)

# Band letters that do not exist in a given zone (Svalbard gap)
ZONE_LETTER_EXCEPTIONS: Mapping[int, Tuple[str, ...]] = MappingProxyType(
    {
        32: ("X",),
        34: ("X",),
        36: ("X",),
    }
)


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid parameters.

    Attributes:
        a: Semi-major axis in meters
        f: Flattening
        e2: First eccentricity squared
        ep2: Second eccentricity squared
    """

    a: float
    f: float

    @property
    def e2(self) -> float:
        return self.f * (2 - self.f)

    @property
    def ep2(self) -> float:
        return self.e2 / (1 - self.e2)

    @property
    def e1(self) -> float:
        """Footpoint series parameter (1 - sqrt(1 - e2)) / (1 + sqrt(1 - e2))."""
        root = math.sqrt(1 - self.e2)
        return (1 - root) / (1 + root)


WGS84 = Ellipsoid(a=6_378_137.0, f=1 / 298.257223563)

UTM_K0 = 0.9996
UTM_FALSE_EASTING = 500_000
UTM_FALSE_NORTHING = 10_000_000
