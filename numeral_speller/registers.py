"""
Register composers built on top of the cardinal engine.

    ordinal      "drieënzeventig"    → "drieënzeventigste"
    ordinal_num  73                  → "73e"
    year         1990                → "negentien" + "negentig"
    currency     1.01 (dollar)       → "één dollar en één cent"

Each composer raises its specific NumeralError before doing any work; a
string is only returned when the whole conversion succeeded.
"""

from __future__ import annotations

from decimal import Decimal

from .cardinal import check_magnitude, int_to_cardinal, to_cardinal
from .exact import integer_part, is_integral, minor_units
from .exceptions import (
    FloatingOrdinal,
    FloatingYear,
    InfiniteOrdinal,
    InfiniteYear,
    NegativeOrdinal,
)
from .models import CurrencySpec, LocaleProfile


# ─── Ordinals ───────────────────────────────────────────────────────


def _check_ordinal(value: Decimal) -> None:
    if value.is_infinite():
        raise InfiniteOrdinal(f"Infinity has no ordinal: {value}")
    if value < 0:
        raise NegativeOrdinal(
            f"Negative numbers have no ordinal: {value}", {"value": str(value)}
        )
    if not is_integral(value):
        raise FloatingOrdinal(
            f"Fractional numbers have no ordinal: {value}", {"value": str(value)}
        )


def to_ordinal(value: Decimal, profile: LocaleProfile) -> str:
    """Spell a non-negative integer as an ordinal.

    Only the last whitespace-delimited word of the cardinal changes; in a
    hyphenated last word only the part after the hyphen does.
    """
    _check_ordinal(value)

    *head, last = to_cardinal(value, profile).split()
    prefix, hyphen, rest = last.partition("-")
    if hyphen:
        last = f"{prefix}{hyphen}{profile.ordinal_word(rest)}"
    else:
        last = profile.ordinal_word(last)

    return " ".join([*head, last])


def to_ordinal_num(value: Decimal, profile: LocaleProfile) -> str:
    """Latin digits plus the locale's ordinal suffix: 21 → "21e".

    Has no size limit: the digits are formatted from the Decimal, so a value
    such as 1e5000 never goes through int-to-str conversion.
    """
    _check_ordinal(value)
    digits = format(value.copy_abs().to_integral_value(), "f")
    return f"{digits}{profile.ordinal_num_suffix_for(int(digits[-2:]))}"


# ─── Years ──────────────────────────────────────────────────────────


def to_year(value: Decimal, profile: LocaleProfile) -> str:
    """Spell a calendar year.

    Years are read as two chunks ("negentien" "negentig") unless the century
    part is zero, the year looks like X00X (2001), or it has five or more
    digits; those are read as a plain cardinal. Negative years get the
    locale's BC suffix.
    """
    if value.is_infinite():
        raise InfiniteYear(f"Infinity is not a year: {value}")
    if not is_integral(value):
        raise FloatingYear(
            f"Fractional numbers are not years: {value}", {"value": str(value)}
        )
    check_magnitude(value, profile)

    year = integer_part(value)
    suffix = ""
    if year < 0:
        year = -year
        suffix = f" {profile.bc_suffix}"

    century, remainder = divmod(year, 100)
    if century == 0 or (century % 10 == 0 and remainder < 10) or century >= 100:
        words = int_to_cardinal(year, profile)
    else:
        high = int_to_cardinal(century, profile)
        low = profile.hundred if remainder == 0 else int_to_cardinal(remainder, profile)
        words = f"{high}{low}"

    return f"{words}{suffix}"


# ─── Currency ───────────────────────────────────────────────────────


def to_currency(value: Decimal, profile: LocaleProfile, currency: CurrencySpec) -> str:
    """Spell a monetary amount: "één dollar en één cent".

    Minor units are `trunc(value * 100) % 100`; an amount is never rounded up
    into the next cent.
    """
    if value.is_infinite():
        prefix = f"{profile.negative} " if value < 0 else ""
        return f"{prefix}{profile.infinity} {currency.major}"

    check_magnitude(value, profile)
    if is_integral(value):
        return f"{int_to_cardinal(integer_part(value), profile)} {currency.major}"

    if value < 0:
        amount = to_currency(value.copy_abs(), profile, currency)
        if integer_part(value) == 0 and minor_units(value) == 0:
            # -0.001 spells as zero, not "minus zero"
            return amount
        # Sign goes in front of the whole amount, not on each unit
        return f"{profile.negative} {amount}"

    major = integer_part(value)
    minor = minor_units(value)
    major_words = to_currency(Decimal(major), profile, currency)

    if minor == 0:
        return major_words

    minor_words = f"{int_to_cardinal(minor, profile)} {currency.minor}"
    if major == 0:
        return minor_words
    return f"{major_words} {profile.and_word} {minor_words}"
