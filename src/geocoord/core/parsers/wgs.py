"""
WGS84 latitude/longitude parser.

Accepts the forms people actually type or paste:

- decimal degrees, signed or with a unicode minus, ``40.7489, -73.968``
- a comma as decimal mark when commas are not used as separators, ``45,6 78,9``
- degree/minute/second symbols, ``40° 44' 56.04" N``
- bare degree/minute/second numbers, ``42 25 35 N 71 7 15 E``
- cardinal letters as prefix or suffix, ``N23.45 E102.34``
- explicit pair separators ``,`` ``;`` ``/`` or none at all
- compact DDMM[SS]H / DDDMM[SS]H tokens, ``123015N 0451530E``

Parsing runs in three stages. The text is sanitized into a token list,
the token list is reduced to a shape mask (one character per token) that
must match the catalog of accepted grammars, and the two halves are
assembled into latitude and longitude with range and consistency checks.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from geocoord.core.errors import EmptyInputError, ParseError
from geocoord.models.options import CoordinateOrder, ParseOptions, resolve_parse_options
from geocoord.models.tokens import TokensWGS

logger = logging.getLogger(__name__)

SEPARATOR = "|"

# Mask characters
DEGREES = "D"
MINUTES = "M"
SECONDS = "S"
NUMBER = "n"
CARDINAL = "H"
UNKNOWN = "x"

# Shapes a single angle may take once its cardinal letter is removed
PART_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"D?M?S?",  # explicit symbols, any subset in order
        r"n{1,3}",  # bare degrees [minutes [seconds]]
        r"Dn{1,2}",  # degrees symbol, bare minutes [seconds]
        r"DMn",  # degrees and minutes symbols, bare seconds
        r"Mn",  # minutes symbol, bare seconds
    )
)

_NUMBER = r"[-+]?\d+(?:\.\d+)?"
_TOKEN_KINDS = (
    (re.compile(_NUMBER + "°"), DEGREES),
    (re.compile(_NUMBER + "'"), MINUTES),
    (re.compile(_NUMBER + '"'), SECONDS),
    (re.compile(_NUMBER), NUMBER),
    (re.compile(r"[NSEW]"), CARDINAL),
    (re.compile(re.escape(SEPARATOR)), SEPARATOR),
)

_COMPACT_PART = r"(?:(\d{2})(\d{2})(\d{2})?([NS])|(\d{3})(\d{2})(\d{2})?([EW]))"
_COMPACT = re.compile(rf"{_COMPACT_PART}\s+{_COMPACT_PART}")

_CHARACTER_VARIANTS = str.maketrans(
    {
        "−": "-",  # minus sign
        "–": "-",  # en dash
        "′": "'",  # prime
        "’": "'",  # right single quotation mark
        "″": '"',  # double prime
        "”": '"',  # right double quotation mark
        "º": "°",  # masculine ordinal indicator
        "˚": "°",  # ring above
    }
)

_DECIMAL_COMMA = re.compile(r"(?<![\d.])(\d+),(\d+)(?![\d.,])")
_WHITESPACE = re.compile(r"\s")
_COMMA_NEXT_TO_SPACE = re.compile(r"\s,|,\s")
_PAIR_SEPARATORS = re.compile(r"[,;/]")
_SPACE_BEFORE_SYMBOL = re.compile(r"(\d)\s+([°'\"])")
_AFTER_SYMBOL = re.compile(r"([°'\"])(?=[-+\d])")
# A letter wedged between two digits ("1E5") stays attached and fails to tokenize
_AFTER_CARDINAL = re.compile(r"(?<=[NSEW])(?=[-+])|(?<=[NSEW])(?<!\d[NSEW])(?=\d)")
_BEFORE_CARDINAL = re.compile(r"(?<=\d)(?=[NSEW](?!\d))|(?<=[°'\"])(?=[NSEW])")

_AXIS_FOR_CARDINAL = {"N": "lat", "S": "lat", "E": "lon", "W": "lon"}
_AXIS_LIMITS = {"lat": 90, "lon": 180}
_AXIS_NAMES = {"lat": "Latitude", "lon": "Longitude"}
_DIRECTION_NAMES = {"N": "North", "E": "East"}


@dataclass(frozen=True)
class Angle:
    """One half of a coordinate pair after assembly."""

    value: float
    axis: Optional[str] = None


def _compact_tokens(text: str) -> Optional[List[str]]:
    match = _COMPACT.fullmatch(text)
    if not match:
        return None

    groups = match.groups()
    tokens: List[str] = []
    for part in (groups[0:8], groups[8:16]):
        degrees, minutes, seconds, cardinal = part[0:4] if part[0] else part[4:8]
        tokens.extend([f"{degrees}°", f"{minutes}'"])
        if seconds:
            tokens.append(f'{seconds}"')
        tokens.extend([cardinal, SEPARATOR])
    return tokens[:-1]


def sanitize(raw: str) -> List[str]:
    """
    Normalize raw text into a list of tokens.

    Args:
        raw: User input

    Returns:
        Tokens: numbers with an optional trailing symbol, single cardinal
        letters, and ``SEPARATOR`` where the input had a pair separator
    """
    text = raw.translate(_CHARACTER_VARIANTS).upper().strip()
    text = text.replace("''", '"')

    compact = _compact_tokens(text)
    if compact is not None:
        return compact

    if _WHITESPACE.search(text) and not _COMMA_NEXT_TO_SPACE.search(text):
        text = _DECIMAL_COMMA.sub(r"\1.\2", text)

    text = _PAIR_SEPARATORS.sub(f" {SEPARATOR} ", text)
    text = _SPACE_BEFORE_SYMBOL.sub(r"\1\2", text)
    text = _AFTER_SYMBOL.sub(r"\1 ", text)
    text = _AFTER_CARDINAL.sub(" ", text)
    text = _BEFORE_CARDINAL.sub(" ", text)
    return text.split()


def token_kind(token: str) -> str:
    for pattern, kind in _TOKEN_KINDS:
        if pattern.fullmatch(token):
            return kind
    return UNKNOWN


def build_mask(tokens: List[str]) -> str:
    return "".join(token_kind(token) for token in tokens)


def _is_number(kind: str) -> bool:
    return kind in (DEGREES, MINUTES, SECONDS, NUMBER)


def find_separator_index(mask: str) -> Optional[int]:
    """
    Infer where the first angle ends when the input has no separator.

    Args:
        mask: Shape mask without any ``SEPARATOR``

    Returns:
        Index of the first token of the second angle, or None when the
        input holds fewer than two numbers
    """
    numbers = [i for i, kind in enumerate(mask) if _is_number(kind)]
    if len(numbers) < 2:
        return None

    # An explicit degree symbol starts a new angle
    for position in range(1, len(numbers)):
        if mask[numbers[position]] == DEGREES:
            return _place_cardinals(mask, numbers, position)

    # A suffix letter ends the first angle, rebalanced so it keeps at least
    # as many numbers as the second
    first_cardinal = mask.find(CARDINAL)
    if 0 < first_cardinal < numbers[-1]:
        before = sum(1 for i in numbers if i < first_cardinal)
        position = max(before, math.ceil(len(numbers) / 2))
        if position == before:
            return first_cardinal + 1
        return numbers[position - 1] + 1

    return _place_cardinals(mask, numbers, math.ceil(len(numbers) / 2))


def _place_cardinals(mask: str, numbers: List[int], position: int) -> int:
    """Split before ``numbers[position]``, assigning letters found in between."""
    gap_start = numbers[position - 1] + 1
    gap_end = numbers[position]
    gap = gap_end - gap_start
    if gap == 0:
        return gap_end
    if gap >= 2:
        return gap_start + 1
    first_has_cardinal = CARDINAL in mask[:gap_start]
    return gap_start if first_has_cardinal else gap_end


def is_valid_part(mask: str) -> bool:
    """Whether one half of a pair matches a grammar in the catalog."""
    if not mask or mask.count(CARDINAL) > 1:
        return False
    shape = mask.replace(CARDINAL, "")
    if not shape:
        return False
    return any(pattern.fullmatch(shape) for pattern in PART_PATTERNS)


def split_parts(tokens: List[str]) -> Optional[Tuple[List[str], List[str]]]:
    """
    Split the token list into the two angles of the pair.

    Returns:
        The two token lists, or None when the tokens do not form a pair in
        the accepted grammar
    """
    mask = build_mask(tokens)
    if UNKNOWN in mask:
        return None

    separators = mask.count(SEPARATOR)
    if separators > 1:
        return None
    if separators == 1:
        index = mask.index(SEPARATOR)
        first, second = tokens[:index], tokens[index + 1:]
    else:
        index = find_separator_index(mask)
        if index is None:
            return None
        first, second = tokens[:index], tokens[index:]

    if not (is_valid_part(build_mask(first)) and is_valid_part(build_mask(second))):
        return None
    return first, second


def _format_number(value: float) -> str:
    return f"{value:g}"


def assemble_angle(tokens: List[str]) -> Angle:
    """
    Combine one half of a pair into signed decimal degrees.

    Raises:
        ValueError: With a user-facing message when minutes/seconds are out
            of range or a sign contradicts the cardinal letter
    """
    parts = [0.0, 0.0, 0.0]
    negative = False
    cardinal = None
    slot = 0

    for token in tokens:
        kind = token_kind(token)
        if kind == CARDINAL:
            cardinal = token
            continue
        if kind == DEGREES:
            slot = 0
        elif kind == MINUTES:
            slot = 1
        elif kind == SECONDS:
            slot = 2
        number = token.rstrip("°'\"")
        if slot == 0:
            negative = number.startswith("-")
        parts[slot] = float(number)
        slot += 1

    degrees, minutes, seconds = parts
    if minutes < 0:
        raise ValueError(f"Minutes value too low ({_format_number(minutes)}) - must not be negative")
    if minutes >= 60:
        raise ValueError(f"Minutes value too high ({_format_number(minutes)}) - must be less than 60")
    if seconds < 0:
        raise ValueError(f"Seconds value too low ({_format_number(seconds)}) - must not be negative")
    if seconds >= 60:
        raise ValueError(f"Seconds value too high ({_format_number(seconds)}) - must be less than 60")

    if negative and cardinal in _DIRECTION_NAMES:
        raise ValueError(
            "Conflicting indicators: negative value with "
            f"{_DIRECTION_NAMES[cardinal]} direction"
        )

    magnitude = abs(degrees) + minutes / 60 + seconds / 3600
    if negative or cardinal in ("S", "W"):
        magnitude = -magnitude

    return Angle(value=magnitude, axis=_AXIS_FOR_CARDINAL.get(cardinal))


def assign_axes(
    first: Angle, second: Angle, order: Optional[CoordinateOrder]
) -> TokensWGS:
    """
    Decide which angle is latitude and which is longitude.

    Cardinal letters win; without them the order option decides, latitude
    first by default. An explicit order must agree with the letters.

    Raises:
        ValueError: With a user-facing message on conflicting axes
    """
    if first.axis and first.axis == second.axis:
        raise ValueError("Both parts assigned to the same axis")

    if order is not None and first.axis and second.axis:
        expected = "lat" if order == CoordinateOrder.LATLON else "lon"
        if first.axis != expected:
            raise ValueError("Coordinate parts contradict specified order")

    if first.axis:
        first_axis = first.axis
    elif second.axis:
        first_axis = "lon" if second.axis == "lat" else "lat"
    else:
        first_axis = "lon" if order == CoordinateOrder.LONLAT else "lat"

    values = {first_axis: first.value}
    values["lon" if first_axis == "lat" else "lat"] = second.value

    for axis in ("lat", "lon"):
        if abs(values[axis]) > _AXIS_LIMITS[axis]:
            raise ValueError(
                f"{_AXIS_NAMES[axis]} value out of range ({_format_number(values[axis])}) - "
                f"must be between -{_AXIS_LIMITS[axis]} and {_AXIS_LIMITS[axis]}"
            )

    return TokensWGS(lat=values["lat"], lon=values["lon"])


def parse_wgs(
    raw: str,
    options: Optional[ParseOptions] = None,
    *,
    skip_validation: Optional[bool] = None,
    order: Optional[Union[CoordinateOrder, str]] = None,
) -> Union[TokensWGS, ParseError, bool]:
    """
    Parse a WGS84 latitude/longitude string.

    Args:
        raw: Text such as ``"40.7489, -73.968"`` or ``"40° 44' 56\\" N 73° 58' 5\\" W"``
        options: Parse options
        skip_validation: Only check the format and return a bool
        order: Axis order of unlabelled pairs; when given, labelled pairs
            must agree with it

    Returns:
        TokensWGS on success; a ParseError (EmptyInputError for blank
        input) otherwise; a bool when ``skip_validation`` is set. Never
        raises for bad input.
    """
    opts = resolve_parse_options(options, skip_validation=skip_validation, order=order)

    if not isinstance(raw, str) or not raw.strip():
        return False if opts.skip_validation else EmptyInputError(raw)

    parts = split_parts(sanitize(raw))

    if opts.skip_validation:
        return parts is not None

    if parts is None:
        logger.debug(f"WGS parse failed, unrecognized format: {raw!r}")
        return ParseError("Input is not in a valid WGS format", raw)

    try:
        first, second = (assemble_angle(part) for part in parts)
        return assign_axes(first, second, opts.order)
    except ValueError as e:
        logger.debug(f"WGS parse failed: {e}")
        return ParseError(str(e), raw)
