"""
Conversion entry point: picks the locale profile and the register composer.

Flow:
    value (int | float | str | Decimal)
      │
      ▼  to_decimal()              ← exact input, NaN rejected
    Decimal
      │
      ▼  register composer         ← cardinal / ordinal / ordinal_num / year / currency
      │        │
      │        ▼  cardinal engine  ← triplets → words → spacing
      ▼
    str (or a NumeralError)

The speller holds nothing but the loaded, immutable locale profiles, so one
instance can serve any number of concurrent callers.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from functools import lru_cache
from typing import Callable, Union

from .cardinal import to_cardinal
from .currency import custom_currency, resolve_currency
from .exact import Number, to_decimal
from .exceptions import UnsupportedLanguage
from .models import (
    ConversionRequest,
    ConversionResult,
    CurrencySpec,
    LocaleProfile,
    Register,
)
from .profiles import load_profiles
from .registers import to_currency, to_ordinal, to_ordinal_num, to_year

logger = logging.getLogger(__name__)

DEFAULT_LANG = "nl"
DEFAULT_CURRENCY = "DOLLAR"

_COMPOSERS: dict[Register, Callable[[Decimal, LocaleProfile], str]] = {
    Register.CARDINAL: to_cardinal,
    Register.ORDINAL: to_ordinal,
    Register.ORDINAL_NUM: to_ordinal_num,
    Register.YEAR: to_year,
}


class NumeralSpeller:
    """Spells numbers in any loaded locale.

    Usage:
        speller = NumeralSpeller()
        speller.spell(1990, register=Register.YEAR)        # "negentiennegentig"
        speller.spell("1.01", register="currency", currency="EUR")

    Configuration falls back to the environment:
        NUMERAL_SPELLER_LOCALE_DIR   extra directory of <code>.json profiles
        NUMERAL_SPELLER_LANG         default locale code (default "nl")
    """

    def __init__(self, locale_dir: str | None = None, default_lang: str | None = None):
        if locale_dir is None:
            locale_dir = os.environ.get("NUMERAL_SPELLER_LOCALE_DIR") or None
        self.profiles = load_profiles(locale_dir)
        self.default_lang = (
            default_lang or os.environ.get("NUMERAL_SPELLER_LANG") or DEFAULT_LANG
        )

    def profile(self, lang: str | None = None) -> LocaleProfile:
        """Return the profile for `lang` (or the default locale).

        Raises:
            UnsupportedLanguage: if no profile is loaded for the code.
        """
        code = (lang or self.default_lang).strip().lower()
        if code not in self.profiles:
            raise UnsupportedLanguage(
                f"No locale profile for language {code!r}",
                {"available": sorted(self.profiles)},
            )
        return self.profiles[code]

    def spell(
        self,
        value: Number,
        lang: str | None = None,
        register: Union[Register, str] = Register.CARDINAL,
        currency: Union[str, CurrencySpec, None] = None,
    ) -> str:
        """Spell `value` in the requested register.

        Args:
            value: int, float, decimal literal string or Decimal.
            lang: locale code; defaults to the speller's default locale.
            register: output form (see Register).
            currency: registry code or explicit CurrencySpec, for the currency
                register only. Defaults to the generic "dollar".

        Raises:
            NumeralError: the specific failure for this input and register.
        """
        number = to_decimal(value)
        profile = self.profile(lang)
        register = Register(register)
        logger.debug("Spelling %s as %s in '%s'", number, register.value, profile.code)

        if register is Register.CURRENCY:
            if not isinstance(currency, CurrencySpec):
                currency = resolve_currency(currency or DEFAULT_CURRENCY, profile)
            return to_currency(number, profile, currency)

        return _COMPOSERS[register](number, profile)

    def run(self, request: ConversionRequest) -> ConversionResult:
        """Execute one ConversionRequest (the HTTP surface's entry point)."""
        profile = self.profile(request.lang)

        currency: Union[str, CurrencySpec, None] = request.currency
        if request.major_unit:
            currency = custom_currency(profile, request.major_unit, request.minor_unit)

        words = self.spell(
            request.value,
            lang=profile.code,
            register=request.output,
            currency=currency,
        )
        return ConversionResult(
            value=str(to_decimal(request.value)),
            lang=profile.code,
            output=request.output,
            words=words,
        )


@lru_cache(maxsize=1)
def default_speller() -> NumeralSpeller:
    """Shared speller for the module-level helper, built on first use."""
    return NumeralSpeller()


def to_words(
    value: Number,
    lang: str | None = None,
    register: Union[Register, str] = Register.CARDINAL,
    currency: Union[str, CurrencySpec, None] = None,
) -> str:
    """Spell `value` with the default speller. See NumeralSpeller.spell."""
    return default_speller().spell(value, lang=lang, register=register, currency=currency)
