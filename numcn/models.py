"""
Pydantic models for conversion results.

A Conversion always carries both the text it came from (or produced) and
the canonical text the encoder writes for the same value, so callers can
spot non-canonical input such as financial digits.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel


# ─── Number Kinds ───────────────────────────────────────────────────


class NumberKind(str, Enum):
    """Which grammar (and Python type) a conversion uses."""

    INTEGER = "INTEGER"  # signed 64-bit, no decimal point
    FLOAT = "FLOAT"  # decimal point and extended units allowed


# ─── Conversion Result ──────────────────────────────────────────────


class Conversion(BaseModel):
    """One numeral ↔ number conversion."""

    kind: NumberKind
    text: str
    value: Union[int, float]
    canonical: str  # What encode() writes for `value`
    is_canonical: bool
