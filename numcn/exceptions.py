"""
Exception hierarchy for numeral conversion.

Every error carries a machine-readable code so callers (and the HTTP API)
can report failures without parsing messages.
"""

from __future__ import annotations


class NumeralError(ValueError):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class UnrecognizedCharacterError(NumeralError):
    """A character matches none of the tables consulted at that point."""

    def __init__(self, char: str, text: str):
        self.char = char
        super().__init__(
            "UNRECOGNIZED_CHARACTER",
            f"Unrecognized character {char!r} in {text!r}",
            {"char": char, "text": text},
        )


class MalformedNumeralError(NumeralError):
    """Structurally invalid input: empty text, misplaced sign, repeated point."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MALFORMED_NUMERAL", message, details)


class NumeralRangeError(NumeralError):
    """The value does not fit in a signed 64-bit integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)
