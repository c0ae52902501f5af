"""
Exact decimal helpers.

All arithmetic on the value being spelled goes through `decimal.Decimal` and
Python `int`, never through binary floats. The default decimal context only
keeps 28 significant digits, so every operation that could round runs inside
a local context wide enough for the operand.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from .exceptions import InvalidNumber

Number = Union[int, float, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert caller input to an exact Decimal.

    Floats go through their shortest round-trip repr, so `12.51` becomes
    Decimal("12.51") rather than the binary expansion 12.50999...

    Raises:
        InvalidNumber: for NaN, booleans and text that is not a decimal literal.
    """
    if isinstance(value, bool):
        raise InvalidNumber(f"Booleans are not numbers: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidNumber("Empty text cannot be converted to a number")
        try:
            result = Decimal(text)
        except InvalidOperation:
            raise InvalidNumber(
                f"Not a decimal literal: {value!r}", {"raw_value": value}
            ) from None
    else:
        raise InvalidNumber(f"Unsupported input type: {type(value).__name__}")

    if result.is_nan():
        raise InvalidNumber(f"NaN cannot be spelled: {value!r}")
    return result


def _precision_for(value: Decimal) -> int:
    """Enough significant digits to hold `value` and its parts without rounding."""
    _, digits, exponent = value.as_tuple()
    return max(28, len(digits) + abs(exponent) + 4)


def is_integral(value: Decimal) -> bool:
    return value == value.to_integral_value()


def integer_part(value: Decimal) -> int:
    """Integer part, truncated toward zero."""
    return int(value)


def fractional_part(value: Decimal) -> Decimal:
    """Fractional part with the sign of `value`."""
    with localcontext() as ctx:
        ctx.prec = _precision_for(value)
        return value - integer_part(value)


def fraction_digits(value: Decimal) -> list[int]:
    """Digits after the decimal point, most significant first.

    Produced by repeatedly multiplying the fractional remainder by ten and
    taking the integer digit, until the remainder is exactly zero.
    """
    digits: list[int] = []
    with localcontext() as ctx:
        ctx.prec = _precision_for(value)
        remainder = abs(fractional_part(value))
        while remainder:
            remainder *= 10
            digit = int(remainder)
            remainder -= digit
            digits.append(digit)
    return digits


def minor_units(value: Decimal) -> int:
    """Hundredths of `abs(value)` modulo 100: multiply by 100, then truncate.

    Truncation, not rounding: 1.999 yields 99.
    """
    with localcontext() as ctx:
        ctx.prec = _precision_for(value) + 2
        return int(abs(value) * 100) % 100
