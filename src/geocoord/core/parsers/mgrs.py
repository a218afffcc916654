"""
MGRS string parser.

Whitespace is not significant: ``31U EQ 48251 11932`` and ``31UEQ4825111932``
parse to the same tokens.
"""

import logging
import re
from typing import Optional, Union

from geocoord.core.errors import EmptyInputError, ParseError
from geocoord.core.grids.validators import LexerFragments, MGRS_VALIDATORS, run_validators
from geocoord.models.options import ParseOptions, resolve_parse_options
from geocoord.models.tokens import TokensMGRS

logger = logging.getLogger(__name__)

MGRS_PATTERN = re.compile(
    r"(0?[1-9]|[1-5][0-9]|60)"  # zone number 1-60
    r"\s*([C-HJ-NP-X])"  # zone letter, no I/O
    r"\s*([A-HJ-NP-Z])([A-HJ-NP-V])"  # 100 km square column and row
    r"\s*(?:\d{1}\s*\d{1}|\d{2}\s*\d{2}|\d{3}\s*\d{3}|\d{4}\s*\d{4}|\d{5}\s*\d{5})?",
    re.IGNORECASE,
)

_ZONE_NUMBER = re.compile(r"[-+]?\d{1,2}")
_WHITESPACE = re.compile(r"\s+")


def lex_mgrs(clean: str) -> LexerFragments:
    """
    Slice a whitespace-free, uppercased MGRS string into raw fragments.

    Args:
        clean: Normalized input

    Returns:
        Fragments; missing pieces are empty strings
    """
    match = _ZONE_NUMBER.match(clean)
    zone_text = match.group(0) if match else ""
    zone_letter = clean[len(zone_text):len(zone_text) + 1]
    rest = clean[len(zone_text) + len(zone_letter):]
    digits = rest[2:]
    half = len(digits) // 2

    return LexerFragments(
        zone_number=int(zone_text) if zone_text else None,
        zone_letter=zone_letter,
        grid_col=rest[0:1],
        grid_row=rest[1:2],
        easting=digits[:half],
        northing=digits[half:],
    )


def parse_mgrs(
    raw: str,
    options: Optional[ParseOptions] = None,
    *,
    skip_validation: Optional[bool] = None,
) -> Union[TokensMGRS, ParseError, bool]:
    """
    Parse an MGRS coordinate string.

    Args:
        raw: Text such as ``"33UXP1234567890"``
        options: Parse options
        skip_validation: Only check the format and return a bool

    Returns:
        TokensMGRS on success; a ParseError (EmptyInputError for blank
        input) describing the first problem found; a bool when
        ``skip_validation`` is set. Never raises for bad input.

    Example:
        >>> parse_mgrs("33UXP1234567890")
        TokensMGRS(zone_number=33, zone_letter='U', grid_col='X', grid_row='P',
                   easting=12345, northing=67890, precision=5)
    """
    opts = resolve_parse_options(options, skip_validation=skip_validation)

    if not isinstance(raw, str) or not raw.strip():
        return False if opts.skip_validation else EmptyInputError(raw)

    if opts.skip_validation:
        return MGRS_PATTERN.fullmatch(raw.strip()) is not None

    clean = _WHITESPACE.sub("", raw.upper())
    fragments = lex_mgrs(clean)

    error = run_validators(MGRS_VALIDATORS, fragments)
    if error:
        logger.debug(f"MGRS parse failed: {error}")
        return ParseError(error, raw)

    return TokensMGRS(
        zone_number=fragments.zone_number,
        zone_letter=fragments.zone_letter,
        grid_col=fragments.grid_col,
        grid_row=fragments.grid_row,
        easting=int(fragments.easting or 0),
        northing=int(fragments.northing or 0),
        precision=len(fragments.easting),
    )
