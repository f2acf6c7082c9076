"""
Encode Python numbers as canonical Chinese numeral text.

The output always uses the standard digit set (零一二…九) and the units
十百千万亿, whatever variants the number was originally written with.

Zero rules:
    - Inside a four-digit group, a skipped position followed by a populated
      one reads 零: 7001 → 七千零一, 7140 → 七千一百四十.
    - Across 万 / 亿, a 零 is inserted when the lower part does not start
      at the highest position of its group: 10014 → 一万零一十四, but
      205000 → 二十万五千.
    - A leading 一十 drops the 一: 16 → 十六, 160000 → 十六万.
"""

from __future__ import annotations

import math

from .decoder import INT64_MAX, INT64_MIN
from .exceptions import MalformedNumeralError, NumeralRangeError
from .tables import (
    CANONICAL_DIGITS,
    DECIMAL_POINT,
    HUNDRED,
    NEGATIVE_SIGN,
    TEN,
    THOUSAND,
    WAN,
    YI,
    ZERO,
)

# The fraction is rounded at the 7th digit; at most 6 digits are written
_FRACTION_SCALE = 10**7
_FRACTION_DIGITS = 6


# ─── Integers ────────────────────────────────────────────────────────


def encode_int(num: int) -> str:
    """Encode a signed 64-bit integer, e.g. -1700537016 → 负十七亿零五十三万七千零一十六."""
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"encode_int expects int, not {type(num).__name__}")
    if not INT64_MIN <= num <= INT64_MAX:
        raise NumeralRangeError(
            f"{num} is outside the signed 64-bit range", {"value": str(num)}
        )

    if num == 0:
        return ZERO
    if num < 0:
        # abs() of INT64_MIN is fine here: Python ints do not overflow
        return NEGATIVE_SIGN + _encode_magnitude(-num)
    return _encode_magnitude(num)


def _encode_magnitude(num: int) -> str:
    """Encode a positive integer and apply the leading 一十 → 十 rule."""
    text = _encode_positive(num)
    if text.startswith(CANONICAL_DIGITS[1] + TEN):
        return text[1:]
    return text


def _encode_positive(num: int) -> str:
    yi, below_yi = divmod(num, 10**8)
    if yi:
        return _join_groups(_encode_positive(yi) + YI, below_yi, 10**7)

    wan, below_wan = divmod(num, 10**4)
    if wan:
        return _join_groups(_encode_positive(wan) + WAN, below_wan, 10**3)

    return _encode_small(num)


def _join_groups(high: str, low: int, threshold: int) -> str:
    """Append the lower part, inserting 零 when it starts below `threshold`."""
    if low == 0:
        return high
    if low < threshold:
        high += ZERO
    return high + _encode_positive(low)


def _encode_small(num: int) -> str:
    """Encode 0 < num < 10000 as a single group."""
    qian, rest = divmod(num, 1000)
    bai, rest = divmod(rest, 100)
    shi, ge = divmod(rest, 10)

    parts: list[str] = []
    if qian:
        parts += [CANONICAL_DIGITS[qian], THOUSAND]

    if bai:
        parts += [CANONICAL_DIGITS[bai], HUNDRED]
    elif qian and (shi or ge):
        parts.append(ZERO)

    if shi:
        parts += [CANONICAL_DIGITS[shi], TEN]
    elif bai and ge:
        parts.append(ZERO)

    if ge:
        parts.append(CANONICAL_DIGITS[ge])

    return "".join(parts)


# ─── Floats ──────────────────────────────────────────────────────────


def encode_float(num: float) -> str:
    """Encode a float, e.g. -10.13579 → 负十点一三五七九.

    Float precision makes the fraction lossy: it is rounded at the 7th
    digit and at most 6 digits are written.
    """
    if isinstance(num, bool) or not isinstance(num, (int, float)):
        raise TypeError(f"encode_float expects float, not {type(num).__name__}")
    num = float(num)
    if not math.isfinite(num):
        raise MalformedNumeralError(
            f"Cannot encode non-finite value {num!r}", {"value": repr(num)}
        )

    if num < 0:
        return NEGATIVE_SIGN + encode_float(-num)

    integral = math.floor(num)
    scaled = _round_half_up((num - integral) * _FRACTION_SCALE)
    if scaled >= _FRACTION_SCALE:
        # 0.99999999 rounds up into the integral part
        integral += 1
        scaled = 0

    text = _encode_magnitude(integral) if integral else ZERO
    fraction = _encode_fraction(scaled)
    if fraction:
        return text + DECIMAL_POINT + fraction
    return text


def _encode_fraction(scaled: int) -> str:
    """Digits after the point from a value scaled by 10^7.

    Digits are written most significant first and stop once the rest of
    the scaled value (7th digit included) is zero, at most 6 of them.
    """
    digits: list[str] = []
    for power in range(_FRACTION_DIGITS, 0, -1):
        if not scaled:
            break
        digit, scaled = divmod(scaled, 10**power)
        digits.append(CANONICAL_DIGITS[digit])
    return "".join(digits)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
