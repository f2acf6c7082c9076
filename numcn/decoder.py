"""
Decode Chinese numeral text into Python numbers.

Supported patterns:
    "十六"                             → 16
    "一万零一十四"                     → 10014
    "负十七亿零五十三万七千零一十六"   → -1700537016
    "柒仟壹佰肆拾"                     → 7140       (financial digits)
    "廿一"                             → 21         (pre-multiplied digits)
    "三点一四一五九二六"               → 3.1415926  (float only)
    "十又四厘九毫"                     → 10.049     (float only, sub-units)

Algorithm:
    1. Strip a leading 负 and remember the sign.
    2. Try the big units from the largest down. The first one present
       splits the text at its LAST occurrence: the left part is decoded
       recursively and multiplied, the right part is decoded recursively
       and added.
    3. With no big unit left, the text is a single group of at most four
       positions. Scan it right to left, keeping the current unit: a unit
       character sets it, a digit adds digit * unit to the total.

There is no intermediate tree; splitting and accumulation happen in the
same recursive pass.
"""

from __future__ import annotations

from typing import Union

from .exceptions import (
    MalformedNumeralError,
    NumeralError,
    NumeralRangeError,
    UnrecognizedCharacterError,
)
from .tables import BIG_UNITS, DECIMAL_POINT, DIGITS, EXTENDED_UNITS, NEGATIVE_SIGN, UNITS

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Each big unit adds one level of recursion, so input length is capped
MAX_TEXT_LENGTH = 256

Number = Union[int, float]


# ─── Public API ──────────────────────────────────────────────────────


def decode_int(text: str) -> int:
    """Decode numeral text into a signed 64-bit integer.

    Raises:
        UnrecognizedCharacterError: A character is neither a digit nor a unit.
        MalformedNumeralError: Empty or overlong text, misplaced sign, or a
            decimal point.
        NumeralRangeError: The value does not fit in 64 bits.
    """
    negative, body = _strip_sign(text)
    if DECIMAL_POINT in body:
        raise MalformedNumeralError(
            f"Decimal point is not allowed in an integer: {text!r}",
            {"text": text},
        )

    magnitude = _decode_int(body, text)
    value = -magnitude if negative else magnitude

    if not INT64_MIN <= value <= INT64_MAX:
        raise NumeralRangeError(
            f"{text!r} decodes to {value}, outside the signed 64-bit range",
            {"text": text, "value": str(value)},
        )
    return value


def decode_float(text: str) -> float:
    """Decode numeral text into a float.

    Accepts everything decode_int does, plus one decimal point (点) and the
    extended units from 载 (1e44) down to 幺 (1e-24).
    """
    negative, body = _strip_sign(text)
    if body.count(DECIMAL_POINT) > 1:
        raise MalformedNumeralError(
            f"More than one decimal point in {text!r}", {"text": text}
        )

    magnitude = _decode_float(body, text)
    return -magnitude if negative else magnitude


def must_decode_int(text: str) -> int:
    """decode_int for trusted input: any failure is a hard fault."""
    try:
        return decode_int(text)
    except NumeralError as e:
        raise RuntimeError(f"must_decode_int({text!r}) failed: {e}") from e


def must_decode_float(text: str) -> float:
    """decode_float for trusted input: any failure is a hard fault."""
    try:
        return decode_float(text)
    except NumeralError as e:
        raise RuntimeError(f"must_decode_float({text!r}) failed: {e}") from e


# ─── Sign Handling ───────────────────────────────────────────────────


def _strip_sign(text: str) -> tuple[bool, str]:
    """Return (is_negative, unsigned_body) after structural checks."""
    if not isinstance(text, str):
        raise TypeError(f"Numeral text must be str, not {type(text).__name__}")
    if not text:
        raise MalformedNumeralError("Empty text cannot be decoded", {"text": text})
    if len(text) > MAX_TEXT_LENGTH:
        raise MalformedNumeralError(
            f"Numeral text longer than {MAX_TEXT_LENGTH} characters",
            {"length": len(text), "max_length": MAX_TEXT_LENGTH},
        )

    negative = text[0] == NEGATIVE_SIGN
    body = text[1:] if negative else text

    if not body:
        raise MalformedNumeralError(
            f"Sign without a number: {text!r}", {"text": text}
        )
    if NEGATIVE_SIGN in body:
        raise MalformedNumeralError(
            f"Negative sign is only allowed once, at the start: {text!r}",
            {"text": text, "position": body.index(NEGATIVE_SIGN) + int(negative)},
        )
    return negative, body


# ─── Integer Grammar ─────────────────────────────────────────────────


def _decode_int(chars: str, source: str) -> int:
    for char, multiplier in BIG_UNITS:
        idx = chars.rfind(char)
        if idx == -1:
            continue
        left, right = chars[:idx], chars[idx + 1:]
        high = _decode_int(_require(left, char, source), source)
        low = _decode_int(right, source) if right else 0
        return high * multiplier + low
    return _decode_group(chars, source, int)


# ─── Float Grammar ───────────────────────────────────────────────────


def _decode_float(chars: str, source: str) -> float:
    idx = chars.rfind(DECIMAL_POINT)
    if idx != -1:
        integral, fraction = chars[:idx], chars[idx + 1:]
        if not integral or not fraction:
            raise MalformedNumeralError(
                f"Decimal point needs digits on both sides: {source!r}",
                {"text": source},
            )
        return _decode_float(integral, source) + _decode_fraction(fraction, source)

    for char, multiplier in EXTENDED_UNITS:
        idx = chars.rfind(char)
        if idx == -1:
            continue
        left, right = chars[:idx], chars[idx + 1:]
        high = _decode_float(_require(left, char, source), source)
        low = _decode_float(right, source) if right else 0.0
        return high * multiplier + low
    return _decode_group(chars, source, float)


def _decode_fraction(chars: str, source: str) -> float:
    """Digits after the point: the i-th digit is worth digit * 10^-(i+1)."""
    result = 0.0
    place = 0.1
    for char in chars:
        digit = DIGITS.get(char)
        if digit is None:
            raise UnrecognizedCharacterError(char, source)
        result += place * digit
        place /= 10
    return result


# ─── Shared Helpers ──────────────────────────────────────────────────


def _decode_group(chars: str, source: str, numeric: type) -> Number:
    """Decode a run with no big units, e.g. "七千零一" or "十六".

    A unit in the first position adds 10, so "十六" reads as 16.
    """
    total = numeric(0)
    unit = numeric(1)
    for i in range(len(chars) - 1, -1, -1):
        char = chars[i]
        if char in UNITS:
            unit = numeric(UNITS[char])
            if i == 0:
                total += numeric(10)
            continue
        digit = DIGITS.get(char)
        if digit is None:
            raise UnrecognizedCharacterError(char, source)
        total += unit * digit
    return total


def _require(left: str, unit_char: str, source: str) -> str:
    """A big unit must have something to multiply."""
    if not left:
        raise MalformedNumeralError(
            f"{unit_char!r} has no preceding number in {source!r}",
            {"text": source, "unit": unit_char},
        )
    return left
