"""
Custom exception hierarchy for numeral spelling.

Each exception type maps to one category of conversion failure. Failures are
purely input-driven: retrying the same call always fails the same way.
"""

from __future__ import annotations


class NumeralError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class CannotConvert(NumeralError):
    """The magnitude exceeds the largest scale word the locale can name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("CANNOT_CONVERT", message, details)


class NegativeOrdinal(NumeralError):
    """Ordinals only exist for non-negative integers."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NEGATIVE_ORDINAL", message, details)


class FloatingOrdinal(NumeralError):
    """An ordinal was requested for a value with a fractional part."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("FLOATING_ORDINAL", message, details)


class InfiniteOrdinal(NumeralError):
    """An ordinal was requested for an infinite value."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INFINITE_ORDINAL", message, details)


class FloatingYear(NumeralError):
    """A year was requested for a value with a fractional part."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("FLOATING_YEAR", message, details)


class InfiniteYear(NumeralError):
    """A year was requested for an infinite value."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INFINITE_YEAR", message, details)


class InvalidNumber(NumeralError):
    """The input could not be turned into an exact decimal (NaN, garbage text)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class UnsupportedLanguage(NumeralError):
    """No locale profile is loaded for the requested language code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LANGUAGE", message, details)


class UnknownCurrency(NumeralError):
    """The currency code is not in the currency registry."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_CURRENCY", message, details)
