"""
Character tables for Chinese numerals.

These are process-wide constants. Nothing in the package mutates them, so
decoders and encoders on any thread can share them freely.

Symbol classes:
    digits       〇一二…九, the financial (大写) forms 零壹贰…玖, and a handful
                 of irregular characters that already carry a unit (廿 = 20).
    units        十 / 百 / 千 and their variants; scale the preceding digit.
    big units    万, 亿, 兆, 京; split the text into a high and a low part.
    extended     big units for the float grammar, from 载 (1e44) down to
                 幺 (1e-24), including the 又 joiner and the sub-unit markers.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ─── Digits ──────────────────────────────────────────────────────────

DIGITS: Mapping[str, int] = MappingProxyType({
    # Standard
    "〇": 0,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
    # Financial (daxie)
    "零": 0,
    "壹": 1,
    "贰": 2,
    "叁": 3,
    "肆": 4,
    "伍": 5,
    "陆": 6,
    "柒": 7,
    "捌": 8,
    "玖": 9,
    # Variants and pre-multiplied forms
    "貮": 2,
    "两": 2,
    "廿": 20,
    "卄": 20,
    "念": 20,
    "卅": 30,
    "卌": 40,
    "皕": 200,
})

# ─── Units (within a four-digit group) ──────────────────────────────

UNITS: Mapping[str, int] = MappingProxyType({
    "十": 10,
    "拾": 10,
    "什": 10,
    "百": 100,
    "佰": 100,
    "陌": 100,
    "千": 1000,
    "仟": 1000,
    "阡": 1000,
})

# ─── Big Units ───────────────────────────────────────────────────────
# Ordered by descending magnitude: the decoder tries them in this order.
# NOTE: 兆 is fixed at 1e12. Regional usage also has 1e6 and 1e16.

BIG_UNITS: tuple[tuple[str, int], ...] = (
    ("京", 10**16),
    ("兆", 10**12),
    ("亿", 10**8),
    ("億", 10**8),
    ("万", 10**4),
    ("萬", 10**4),
)

EXTENDED_UNITS: tuple[tuple[str, float], ...] = (
    ("载", 1e44),
    ("正", 1e40),
    ("涧", 1e36),
    ("沟", 1e32),
    ("穰", 1e28),
    ("秭", 1e24),
    ("垓", 1e20),
    ("京", 1e16),
    ("兆", 1e12),
    ("亿", 1e8),
    ("億", 1e8),
    ("万", 1e4),
    ("萬", 1e4),
    ("又", 1e0),  # "十又四厘" = 10 and 4 厘
    ("分", 1e-1),
    ("厘", 1e-2),
    ("毫", 1e-3),
    ("丝", 1e-4),
    ("忽", 1e-5),
    ("微", 1e-6),
    ("纤", 1e-7),
    ("沙", 1e-8),
    ("尘", 1e-9),
    ("纳", 1e-9),
    ("埃", 1e-10),
    ("渺", 1e-11),
    ("漠", 1e-12),
    ("皮", 1e-12),
    ("飞", 1e-15),
    ("阿", 1e-18),
    ("仄", 1e-21),
    ("幺", 1e-24),
)

# ─── Signs and Canonical Output ─────────────────────────────────────

NEGATIVE_SIGN = "负"
DECIMAL_POINT = "点"

ZERO = "零"
TEN = "十"
HUNDRED = "百"
THOUSAND = "千"
WAN = "万"
YI = "亿"

# Digit value → canonical character used by the encoders
CANONICAL_DIGITS: tuple[str, ...] = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
