"""
Token records and option models.
"""

from .options import (
    AngleFormat,
    CoordinateOrder,
    CoordinateSystem,
    FormatOptions,
    ParseOptions,
)
from .tokens import Precision, Tokens, TokensMGRS, TokensUTM, TokensWGS

__all__ = [
    "AngleFormat",
    "CoordinateOrder",
    "CoordinateSystem",
    "FormatOptions",
    "ParseOptions",
    "Precision",
    "Tokens",
    "TokensMGRS",
    "TokensUTM",
    "TokensWGS",
]
