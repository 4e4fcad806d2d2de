"""
Value Coercion
==============

Lenient conversions applied to submitted category data. Malformed values are
never rejected: numbers fall back to 0, flags follow truthiness and text
falls back to an empty string.

Version: 0.1.0
"""

import math
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator


def to_number(value: Any) -> float:
    """Coerce a submitted value to a finite float, or 0.0."""
    if isinstance(value, bool):
        return float(value)

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    elif not isinstance(value, int | float | Decimal):
        return 0.0

    try:
        number = float(value)
    except (OverflowError, ValueError):
        return 0.0

    return number if math.isfinite(number) else 0.0


def to_amount(value: Any) -> float:
    """Coerce a record quantity; negative values count as 0."""
    return max(0.0, to_number(value))


def to_flag(value: Any) -> bool:
    """Coerce a submitted value to a boolean by truthiness."""
    return bool(value)


def to_text(value: Any) -> str:
    """Coerce a submitted value to text; missing values become ''."""
    if value is None:
        return ""
    return str(value)


def matches(value: str, expected: str) -> bool:
    """Exact case-insensitive comparison against a demographic literal."""
    return value.lower() == expected


def is_black(race: str) -> bool:
    return matches(race, "black")


def is_female(gender: str) -> bool:
    return matches(gender, "female")


# Field types for pydantic record models
Amount = Annotated[float, BeforeValidator(to_amount)]
Money = Annotated[float, BeforeValidator(to_number)]
Flag = Annotated[bool, BeforeValidator(to_flag)]
Text = Annotated[str, BeforeValidator(to_text)]
