"""
Currency registry: ISO-style codes to major/minor unit names.

Names are templates where "{}" marks the plural ending; locales that never
inflect currency names (Dutch, Frisian) render it as empty. A currency
without a specific minor unit falls back to the locale's generic one
("cent{}").
"""

from __future__ import annotations

from typing import Optional

from .exceptions import UnknownCurrency
from .models import CurrencySpec, LocaleProfile

# ─── Registry ───────────────────────────────────────────────────────
# code: (major template, minor template or None for the locale default)

_CURRENCIES: dict[str, tuple[str, Optional[str]]] = {
    "AED": ("UAE dirham{}", "fils"),
    "ARS": ("Argentine peso{}", "centavo{}"),
    "AUD": ("Australian dollar{}", None),
    "BRL": ("real{}", "centavo{}"),
    "CAD": ("Canadian dollar{}", None),
    "CHF": ("Swiss franc{}", "rappen"),
    "CLP": ("Chilean peso{}", "centavo{}"),
    "CNY": ("yuan", "fen"),
    "COP": ("Colombian peso{}", "centavo{}"),
    "CRC": ("colón{}", "céntimo{}"),
    "DINAR": ("dinar{}", "fils"),
    "DOLLAR": ("dollar{}", None),
    "DZD": ("Algerian dinar{}", "santeem{}"),
    "EUR": ("euro{}", None),
    "GBP": ("pound{}", "penny"),
    "HKD": ("Hong Kong dollar{}", None),
    "IDR": ("rupiah{}", "sen"),
    "ILS": ("new shekel{}", "agora"),
    "INR": ("rupee{}", "paisa"),
    "JPY": ("yen", "sen"),
    "KRW": ("won", "jeon"),
    "KWD": ("Kuwaiti dinar{}", "fils"),
    "KZT": ("tenge", "tiyn"),
    "MXN": ("Mexican peso{}", "centavo{}"),
    "MYR": ("ringgit", "sen"),
    "NOK": ("Norwegian krone", "øre"),
    "NZD": ("New Zealand dollar{}", None),
    "PEN": ("sol{}", "céntimo{}"),
    "PESO": ("peso{}", "centavo{}"),
    "PHP": ("Philippine peso{}", "centavo{}"),
    "PLN": ("zloty{}", "grosz"),
    "QAR": ("Qatari riyal{}", "dirham{}"),
    "RIYAL": ("riyal{}", "halala{}"),
    "RUB": ("ruble{}", "kopek{}"),
    "SAR": ("Saudi riyal{}", "halala{}"),
    "SGD": ("Singapore dollar{}", None),
    "THB": ("baht", "satang"),
    "TRY": ("lira{}", "kurus"),
    "TWD": ("Taiwan dollar{}", None),
    "UAH": ("hryvnia{}", "kopiyka"),
    "USD": ("US dollar{}", None),
    "UYU": ("Uruguayan peso{}", "centésimo{}"),
    "VND": ("dong", "xu"),
    "ZAR": ("South African rand{}", None),
}


def currency_codes() -> list[str]:
    return sorted(_CURRENCIES)


def resolve_currency(code: str, profile: LocaleProfile) -> CurrencySpec:
    """Look up a currency code and render its unit names for `profile`.

    Raises:
        UnknownCurrency: if the code is not in the registry.
    """
    key = code.strip().upper()
    if key not in _CURRENCIES:
        raise UnknownCurrency(
            f"Unknown currency code: {code!r}", {"known": currency_codes()}
        )

    major, minor = _CURRENCIES[key]
    return CurrencySpec(
        major=profile.render_unit(major),
        minor=profile.render_unit(minor if minor is not None else profile.minor_unit),
    )


def custom_currency(
    profile: LocaleProfile, major: str, minor: str | None = None
) -> CurrencySpec:
    """Currency with caller-supplied names; the minor unit defaults to the locale's."""
    return CurrencySpec(
        major=profile.render_unit(major),
        minor=profile.render_unit(minor if minor else profile.minor_unit),
    )
