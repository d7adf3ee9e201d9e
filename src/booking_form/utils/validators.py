"""Coercion helpers for raw values coming from input widgets."""

from decimal import Decimal, InvalidOperation
from typing import Any, Union


def coerce_text(value: Any) -> str:
    """Turn a raw widget value into the string stored on the record."""
    if value is None:
        return ""
    return str(value)


def coerce_quantity(value: Any) -> Union[int, Decimal]:
    """
    Number inputs fall back to 1 when empty, unparsable, infinite or zero,
    and are clamped so they never settle below 1.

    Integral values are stored exactly as ints, however large. Fractional
    values are kept as Decimal so validation can report them.
    """
    if isinstance(value, bool) or value is None:
        return 1
    try:
        if isinstance(value, (int, Decimal)):
            number = Decimal(value)
        else:
            number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return 1
    if not number.is_finite() or number < 1:
        return 1
    if number == number.to_integral_value():
        return int(number)
    return number
