"""Parse-and-validate helpers for numeric text fields.

Form inputs arrive as text. Each helper either returns a typed value or
raises ``FieldParseError`` with a user-facing message; the validation engine
collects those messages per field.
"""

import math
import re
from typing import Optional

# Plain ASCII decimal, optional exponent. No digit separators or non-Latin digits.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class FieldParseError(ValueError):
    """Raw text could not be turned into the expected value."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_number(raw: str, label: str) -> float:
    """Parse decimal text into a finite float."""
    text = (raw or "").strip()
    if not _DECIMAL.fullmatch(text):
        raise FieldParseError(f"{label} must be a valid number")
    value = float(text)
    if not math.isfinite(value):
        raise FieldParseError(f"{label} must be a valid number")
    return value


def parse_optional_number(raw: Optional[str], label: str) -> Optional[float]:
    """Blank input means "not supplied", never zero."""
    if is_blank(raw):
        return None
    return parse_number(raw, label)


def parse_positive_int(raw: str, label: str) -> int:
    value = parse_number(raw, label)
    if not value.is_integer() or value <= 0:
        raise FieldParseError(f"{label} must be a positive whole number")
    return int(value)


def parse_bounded(raw: str, label: str, bound: float) -> float:
    """Parse a number whose absolute value may not exceed ``bound``."""
    try:
        value = parse_number(raw, label)
    except FieldParseError:
        value = None
    if value is None or abs(value) > bound:
        raise FieldParseError(
            f"{label} must be a valid number between -{bound:g} and {bound:g}"
        )
    return value


def parse_latitude(raw: str) -> float:
    return parse_bounded(raw, "Latitude", 90)


def parse_longitude(raw: str) -> float:
    return parse_bounded(raw, "Longitude", 180)
