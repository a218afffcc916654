"""
Validator chains for MGRS and UTM fragments.

Each validator takes the raw fragments lexed from the input and returns an
error message, or an empty string when it has nothing to report.
``run_validators`` folds a chain left to right and stops at the first
message. Chains order missing-field checks before range checks before
checks that depend on the zone context.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from geocoord.core.grids.grid_mapper import column_window, resolve_row_northing
from geocoord.core.grids.tables import (
    GRID_COLUMN_LETTERS,
    GRID_ROW_LETTERS,
    GRID_ZONE_LETTERS,
    GRID_ZONE_LIMITS,
    MAX_MGRS_PRECISION,
    MAX_UTM_EASTING_DIGITS,
    MAX_UTM_NORTHING_DIGITS,
    MAX_ZONE_NUMBER,
    MIN_ZONE_NUMBER,
    ZONE_LETTER_EXCEPTIONS,
)


@dataclass(frozen=True)
class LexerFragments:
    """Raw pieces of an MGRS or UTM string before validation."""

    zone_number: Optional[int] = None
    zone_letter: str = ""
    grid_col: str = ""
    grid_row: str = ""
    easting: str = ""
    northing: str = ""


Validator = Callable[[LexerFragments], str]


def run_validators(validators: Sequence[Validator], fragments: LexerFragments) -> str:
    """
    Run a validator chain and return the first error message.

    Args:
        validators: Validators to apply, in order
        fragments: Lexed input

    Returns:
        First non-empty message, or "" when every validator passes
    """
    for check in validators:
        error = check(fragments)
        if error:
            return error
    return ""


# Zone number


def missing_zone_number(fragments: LexerFragments) -> str:
    if fragments.zone_number is None:
        return "No zone number found"
    return ""


def invalid_zone_number(fragments: LexerFragments) -> str:
    zone = fragments.zone_number
    if zone is not None and not MIN_ZONE_NUMBER <= zone <= MAX_ZONE_NUMBER:
        return (
            f"Invalid zone number ({zone}) - must be between "
            f"{MIN_ZONE_NUMBER} and {MAX_ZONE_NUMBER}"
        )
    return ""


# Zone letter


def missing_zone_letter(fragments: LexerFragments) -> str:
    if not fragments.zone_letter:
        return "No zone letter found"
    return ""


def invalid_zone_letter(fragments: LexerFragments) -> str:
    letter = fragments.zone_letter
    if letter and (len(letter) != 1 or letter not in GRID_ZONE_LETTERS):
        return f'Invalid zone letter "{letter}"'
    return ""


def exceptions_for_zone(fragments: LexerFragments) -> str:
    """Reject band letters that do not exist in the given zone (32X, 34X, 36X)."""
    excluded = ZONE_LETTER_EXCEPTIONS.get(fragments.zone_number, ())
    if fragments.zone_letter in excluded:
        return (
            f'Invalid zone letter "{fragments.zone_letter}" '
            f'for zone "{fragments.zone_number}"'
        )
    return ""


# 100 km square column


def missing_square_column(fragments: LexerFragments) -> str:
    if not fragments.grid_col:
        return "No grid square column found"
    return ""


def invalid_square_column(fragments: LexerFragments) -> str:
    col = fragments.grid_col
    if col and (len(col) != 1 or col not in GRID_COLUMN_LETTERS):
        return f'Invalid grid square column letter "{col}"'
    return ""


def validate_col_for_zone(fragments: LexerFragments) -> str:
    """
    Check the column letter belongs to the zone's 8-letter window.

    The window starts at ``((zone - 1) mod 6) * 8`` in the 24-letter column
    alphabet and wraps around.
    """
    zone = fragments.zone_number
    col = fragments.grid_col
    if zone is None or col not in GRID_COLUMN_LETTERS:
        return ""

    if col not in column_window(zone):
        return f'Invalid grid square column "{col}" for zone {zone}'
    return ""


# 100 km square row


def missing_square_row(fragments: LexerFragments) -> str:
    if not fragments.grid_row:
        return "No grid square row found"
    return ""


def invalid_square_row(fragments: LexerFragments) -> str:
    row = fragments.grid_row
    if row and (len(row) != 1 or row not in GRID_ROW_LETTERS):
        return f'Invalid grid square row letter "{row}"'
    return ""


def validate_row_for_zone(fragments: LexerFragments) -> str:
    """
    Check the row letter resolves to a northing inside the band's limits.

    The row alphabet repeats every 2,000,000 m; the letter is legal when one
    of the two cycles considered by the converter lands in the band.
    """
    zone = fragments.zone_number
    letter = fragments.zone_letter
    row = fragments.grid_row
    if zone is None or letter not in GRID_ZONE_LIMITS or row not in GRID_ROW_LETTERS:
        return ""

    northing = resolve_row_northing(row, zone, letter)
    if northing is None:
        return f'Invalid grid square row "{row}" for zone {zone}{letter}'
    return ""


# Easting / northing digits


def validate_precision_mgrs(fragments: LexerFragments) -> str:
    """Validate the MGRS easting/northing digit pair."""
    easting = fragments.easting
    northing = fragments.northing
    if not easting and not northing:
        return ""
    if not _is_ascii_digits(easting + northing):
        return "Invalid (non-numeric) characters in easting/northing"
    if len(easting) != len(northing):
        return "Invalid easting/northing pair - must be even number of digits"
    if len(easting) > MAX_MGRS_PRECISION:
        return (
            "Invalid easting/northing precision - greater than "
            f"{MAX_MGRS_PRECISION} digits each"
        )
    return ""


def validate_precision_utm(fragments: LexerFragments) -> str:
    """Validate UTM easting/northing meter values."""
    easting = fragments.easting
    northing = fragments.northing
    if easting and not _is_ascii_digits(easting):
        return "Invalid (non-numeric) characters in easting"
    if northing and not _is_ascii_digits(northing):
        return "Invalid (non-numeric) characters in northing"
    if len(easting) > MAX_UTM_EASTING_DIGITS:
        return (
            "Invalid easting precision - greater than "
            f"{MAX_UTM_EASTING_DIGITS} digits"
        )
    if len(northing) > MAX_UTM_NORTHING_DIGITS:
        return (
            "Invalid northing precision - greater than "
            f"{MAX_UTM_NORTHING_DIGITS} digits"
        )
    return ""


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


MGRS_VALIDATORS = (
    missing_zone_number,
    invalid_zone_number,
    missing_zone_letter,
    invalid_zone_letter,
    exceptions_for_zone,
    missing_square_column,
    invalid_square_column,
    missing_square_row,
    invalid_square_row,
    validate_precision_mgrs,
    validate_col_for_zone,
    validate_row_for_zone,
)

UTM_VALIDATORS = (
    missing_zone_number,
    invalid_zone_number,
    missing_zone_letter,
    invalid_zone_letter,
    exceptions_for_zone,
    validate_precision_utm,
)
