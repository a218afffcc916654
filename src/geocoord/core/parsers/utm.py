"""
UTM string parser.

Whitespace separates easting from northing, so it is collapsed but kept.
"""

import logging
import re
from typing import Optional, Union

from geocoord.core.errors import EmptyInputError, ParseError
from geocoord.core.grids.grid_mapper import hemisphere_for_zone_letter
from geocoord.core.grids.validators import LexerFragments, UTM_VALIDATORS, run_validators
from geocoord.models.options import ParseOptions, resolve_parse_options
from geocoord.models.tokens import Precision, TokensUTM

logger = logging.getLogger(__name__)

UTM_PATTERN = re.compile(
    r"(0?[1-9]|[1-5][0-9]|60)"  # zone number 1-60
    r"\s*([C-HJ-NP-X])"  # zone letter, no I/O
    r"(?:\s+(\d{1,6})\s+(\d{1,7}))?",  # easting, northing
    re.IGNORECASE,
)

# Accepts anything in the easting/northing slots so validators can say what is wrong
_UTM_LOOSE = re.compile(r"([-+]?\d{1,2})\s*(.?)(?:\s+(\S+?)\s+(\S+?))?")
_WHITESPACE = re.compile(r"\s+")


def lex_utm(clean: str) -> LexerFragments:
    match = _UTM_LOOSE.fullmatch(clean)
    if not match:
        return LexerFragments()

    zone_text, zone_letter, easting, northing = match.groups(default="")
    return LexerFragments(
        zone_number=int(zone_text),
        zone_letter=zone_letter,
        easting=easting,
        northing=northing,
    )


def parse_utm(
    raw: str,
    options: Optional[ParseOptions] = None,
    *,
    skip_validation: Optional[bool] = None,
) -> Union[TokensUTM, ParseError, bool]:
    """
    Parse a UTM coordinate string.

    Args:
        raw: Text such as ``"33U 456789 5678901"``
        options: Parse options
        skip_validation: Only check the format and return a bool

    Returns:
        TokensUTM on success (precision is the digit count of each value);
        a ParseError (EmptyInputError for blank input) otherwise; a bool
        when ``skip_validation`` is set. Never raises for bad input.
    """
    opts = resolve_parse_options(options, skip_validation=skip_validation)

    if not isinstance(raw, str) or not raw.strip():
        return False if opts.skip_validation else EmptyInputError(raw)

    if opts.skip_validation:
        return UTM_PATTERN.fullmatch(raw.strip()) is not None

    clean = _WHITESPACE.sub(" ", raw.upper()).strip()
    fragments = lex_utm(clean)

    error = run_validators(UTM_VALIDATORS, fragments)
    if error:
        logger.debug(f"UTM parse failed: {error}")
        return ParseError(error, raw)

    return TokensUTM(
        zone_number=fragments.zone_number,
        zone_letter=fragments.zone_letter,
        hemisphere=hemisphere_for_zone_letter(fragments.zone_letter),
        easting=int(fragments.easting or 0),
        northing=int(fragments.northing or 0),
        precision=Precision(len(fragments.easting), len(fragments.northing)),
    )
