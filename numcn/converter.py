"""
Conversion facade — pick the right decoder/encoder by kind and report
the canonical form.

Flow for parse_numeral():
    text ──decode──► value ──encode──► canonical
The decoders and encoders stay pure; this module is where conversions
are logged.
"""

from __future__ import annotations

import logging

from .decoder import decode_float, decode_int
from .encoder import encode_float, encode_int
from .models import Conversion, NumberKind

logger = logging.getLogger(__name__)

_DECODERS = {
    NumberKind.INTEGER: decode_int,
    NumberKind.FLOAT: decode_float,
}

_ENCODERS = {
    NumberKind.INTEGER: encode_int,
    NumberKind.FLOAT: encode_float,
}


def parse_numeral(text: str, kind: NumberKind = NumberKind.INTEGER) -> Conversion:
    """Decode numeral text and attach its canonical spelling.

    Raises:
        NumeralError: Propagated unchanged from the decoder.
    """
    kind = NumberKind(kind)
    value = _DECODERS[kind](text)
    canonical = _ENCODERS[kind](value)

    logger.debug("Decoded %r as %s %r", text, kind.value, value)
    if canonical != text:
        logger.info("Non-canonical numeral %r (canonical: %r)", text, canonical)

    return Conversion(
        kind=kind,
        text=text,
        value=value,
        canonical=canonical,
        is_canonical=canonical == text,
    )


def format_number(value: int | float, kind: NumberKind | None = None) -> Conversion:
    """Encode a number. The kind follows the Python type when omitted."""
    if kind is None:
        kind = _infer_kind(value)
    kind = NumberKind(kind)

    if kind is NumberKind.FLOAT:
        value = float(value)
    elif isinstance(value, float):
        if not value.is_integer():
            raise TypeError(f"Cannot encode {value!r} as an integer")
        value = int(value)

    text = _ENCODERS[kind](value)
    logger.debug("Encoded %s %r as %r", kind.value, value, text)

    return Conversion(
        kind=kind,
        text=text,
        value=value,
        canonical=text,
        is_canonical=True,
    )


def _infer_kind(value: object) -> NumberKind:
    if isinstance(value, bool):
        raise TypeError("bool is not a number to encode")
    if isinstance(value, int):
        return NumberKind.INTEGER
    if isinstance(value, float):
        return NumberKind.FLOAT
    raise TypeError(f"Cannot encode value of type {type(value).__name__}")
