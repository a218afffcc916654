"""
Mapping between full UTM easting/northing and MGRS 100 km grid squares.

Column letters cycle through the 24-letter alphabet in windows of eight,
shifting by one window per zone (period 6). Row letters cycle through 20
letters every 2,000,000 m, offset by five letters depending on hemisphere
and zone parity.
"""

import math
from typing import Optional, Tuple

from geocoord.core.config import settings
from geocoord.core.grids.projection import compute_precision
from geocoord.core.grids.tables import (
    DEFAULT_MGRS_PRECISION,
    GRID_COLUMN_CYCLE,
    GRID_COLUMN_LETTERS,
    GRID_COLUMN_SET_SIZE,
    GRID_ROW_CYCLE_METERS,
    GRID_ROW_LETTERS,
    GRID_SQUARE_SIZE_METERS,
    GRID_ZONE_LIMITS,
    ZoneLimits,
)
from geocoord.models.tokens import Precision, TokensMGRS, TokensUTM


def grid_row_offset(hemisphere: str, zone_number: int) -> int:
    """
    Row-letter offset for a hemisphere and zone parity.

    Args:
        hemisphere: "N" or "S"
        zone_number: UTM zone number

    Returns:
        0 or 5: northern odd and southern even zones start at A, the others
        start at F
    """
    is_odd = zone_number % 2 == 1
    if hemisphere == "N":
        return 0 if is_odd else 5
    return 5 if is_odd else 0


def column_set_index(zone_number: int) -> int:
    """Index of the first column letter of a zone's window."""
    return ((zone_number - 1) % GRID_COLUMN_CYCLE) * GRID_COLUMN_SET_SIZE


def column_window(zone_number: int) -> str:
    """
    The eight column letters legal in a zone.

    Args:
        zone_number: UTM zone number

    Returns:
        String of eight letters, wrapping around the column alphabet
    """
    start = column_set_index(zone_number)
    doubled = GRID_COLUMN_LETTERS * 2
    return doubled[start:start + GRID_COLUMN_SET_SIZE]


def easting_to_grid_column(easting: float, zone_number: int) -> str:
    col_index = math.floor(easting / GRID_SQUARE_SIZE_METERS) % GRID_COLUMN_SET_SIZE
    letter_index = (column_set_index(zone_number) + col_index) % len(GRID_COLUMN_LETTERS)
    return GRID_COLUMN_LETTERS[letter_index]


def northing_to_grid_row(northing: float, zone_number: int, hemisphere: str) -> str:
    row_index = math.floor(northing / GRID_SQUARE_SIZE_METERS) % len(GRID_ROW_LETTERS)
    letter_index = (row_index + grid_row_offset(hemisphere, zone_number)) % len(
        GRID_ROW_LETTERS
    )
    return GRID_ROW_LETTERS[letter_index]


def grid_column_to_easting(col: str, zone_number: int) -> int:
    """100 km easting offset of a column letter within its zone."""
    alphabet_size = len(GRID_COLUMN_LETTERS)
    col_index = GRID_COLUMN_LETTERS.index(col)
    set_position = (col_index - column_set_index(zone_number) + alphabet_size) % alphabet_size
    return set_position * GRID_SQUARE_SIZE_METERS


def hemisphere_for_zone_letter(zone_letter: str) -> str:
    return "N" if zone_letter >= "N" else "S"


def _row_candidates(
    row: str, zone_number: int, zone_letter: str
) -> Tuple[ZoneLimits, int, int]:
    limits = GRID_ZONE_LIMITS[zone_letter]
    alphabet_size = len(GRID_ROW_LETTERS)
    offset = grid_row_offset(hemisphere_for_zone_letter(zone_letter), zone_number)
    adjusted = (GRID_ROW_LETTERS.index(row) - offset + alphabet_size) % alphabet_size

    base_cycle = limits.min_northing // GRID_ROW_CYCLE_METERS
    base = base_cycle * GRID_ROW_CYCLE_METERS + adjusted * GRID_SQUARE_SIZE_METERS
    return limits, base, base + GRID_ROW_CYCLE_METERS


def resolve_row_northing(row: str, zone_number: int, zone_letter: str) -> Optional[int]:
    """
    Northing of the 100 km row inside the latitude band, if any.

    Args:
        row: Row letter
        zone_number: UTM zone number
        zone_letter: Latitude band letter

    Returns:
        Northing of the square's southern edge, or None when neither the
        base 2,000,000 m cycle nor the next one falls inside the band
    """
    limits, base, following = _row_candidates(row, zone_number, zone_letter)
    for northing in (base, following):
        if limits.min_northing <= northing <= limits.max_northing:
            return northing
    return None


def grid_row_to_northing(row: str, zone_number: int, zone_letter: str) -> int:
    """
    Northing of the 100 km row, falling back to the base cycle.

    The fallback is only reached for tokens that never went through the
    validator chain.
    """
    northing = resolve_row_northing(row, zone_number, zone_letter)
    if northing is None:
        return _row_candidates(row, zone_number, zone_letter)[1]
    return northing


def to_mgrs_from_utm(tokens: TokensUTM, precision: Optional[int] = None) -> TokensMGRS:
    """
    Convert UTM tokens to MGRS tokens.

    The sub-square easting/northing are truncated, never rounded, so the
    resulting square always contains the original point.

    Args:
        tokens: UTM coordinate
        precision: Digits per axis (0-5); defaults to the configured
            ``default_mgrs_precision``

    Returns:
        MGRS tokens in the same zone and band
    """
    if precision is None:
        precision = settings.default_mgrs_precision
    scale = 10 ** (DEFAULT_MGRS_PRECISION - precision)

    return TokensMGRS(
        zone_number=tokens.zone_number,
        zone_letter=tokens.zone_letter,
        grid_col=easting_to_grid_column(tokens.easting, tokens.zone_number),
        grid_row=northing_to_grid_row(tokens.northing, tokens.zone_number, tokens.hemisphere),
        easting=math.floor((tokens.easting % GRID_SQUARE_SIZE_METERS) / scale),
        northing=math.floor((tokens.northing % GRID_SQUARE_SIZE_METERS) / scale),
        precision=precision,
    )


def to_utm_from_mgrs(
    tokens: TokensMGRS, precision_override: Optional[Precision] = None
) -> TokensUTM:
    """
    Convert MGRS tokens to UTM tokens.

    No validation is performed; tokens are expected to come from a
    successful ``parse_mgrs``.

    Args:
        tokens: MGRS coordinate
        precision_override: Precision metadata for the result; by default
            the digit counts of the computed easting/northing

    Returns:
        UTM tokens at the south-west corner of the MGRS square
    """
    hemisphere = hemisphere_for_zone_letter(tokens.zone_letter)
    scale = 10 ** (DEFAULT_MGRS_PRECISION - tokens.precision)

    easting = grid_column_to_easting(tokens.grid_col, tokens.zone_number) + tokens.easting * scale
    northing = (
        grid_row_to_northing(tokens.grid_row, tokens.zone_number, tokens.zone_letter)
        + tokens.northing * scale
    )

    return TokensUTM(
        zone_number=tokens.zone_number,
        zone_letter=tokens.zone_letter,
        hemisphere=hemisphere,
        easting=easting,
        northing=northing,
        precision=precision_override
        or Precision(compute_precision(easting), compute_precision(northing)),
    )
