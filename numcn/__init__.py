"""
numcn — Interconversion between Chinese numerals and numbers.

Architecture: Symbol tables → recursive decoders / encoders → conversion facade
Grammar:      万进 grouping (万, 亿, 兆 = 1e12, 京), financial digits, sub-units to 幺 (1e-24)
"""

__version__ = "1.0.0"

from .converter import format_number, parse_numeral
from .decoder import decode_float, decode_int, must_decode_float, must_decode_int
from .encoder import encode_float, encode_int
from .exceptions import (
    MalformedNumeralError,
    NumeralError,
    NumeralRangeError,
    UnrecognizedCharacterError,
)
from .models import Conversion, NumberKind

__all__ = [
    "Conversion",
    "MalformedNumeralError",
    "NumberKind",
    "NumeralError",
    "NumeralRangeError",
    "UnrecognizedCharacterError",
    "decode_float",
    "decode_int",
    "encode_float",
    "encode_int",
    "format_number",
    "must_decode_float",
    "must_decode_int",
    "parse_numeral",
]
