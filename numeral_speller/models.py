"""
Pydantic models for locale data and conversion requests.

Locale profiles are loaded from JSON and validated here, so a malformed table
fails loudly at load time instead of producing a wrong spelling later. The
few language-specific predicates the engine needs live on the profile as
methods; everything else about a language is plain data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ─── Registers ──────────────────────────────────────────────────────


class Register(str, Enum):
    """The output form requested by the caller."""

    CARDINAL = "cardinal"  # "twaalf"
    ORDINAL = "ordinal"  # "twaalfde"
    ORDINAL_NUM = "ordinal_num"  # "12e"
    YEAR = "year"  # "negentiennegentig"
    CURRENCY = "currency"  # "twaalf euro en vijftig cent"


# ─── Tokens ─────────────────────────────────────────────────────────


class TokenKind(str, Enum):
    WORD = "word"
    SCALE = "scale"
    NEGATIVE = "negative"
    DECIMAL_MARKER = "decimal_marker"
    DIGIT = "digit"  # one spelled fractional digit
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Token:
    """One unit of the intermediate form between assembly and the final join."""

    kind: TokenKind
    text: str


SEPARATOR = Token(TokenKind.SEPARATOR, " ")


# ─── Locale Profile ─────────────────────────────────────────────────


class OrdinalRule(BaseModel):
    """Suffix applied to an ordinal whose cardinal word ends in `ending`."""

    model_config = ConfigDict(frozen=True)

    ending: str = Field(min_length=1)
    suffix: str


class LocaleProfile(BaseModel):
    """Lexical tables and predicates for one language.

    Every locale has the same shape: 9 unit words (1-9), 10 teen words
    (10-19), 9 tens words (10, 20, ..., 90) and an ordered table of scale
    words starting at 10^3. The length of the scale table bounds the largest
    number the locale can spell.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=2)
    name: str

    units: tuple[str, ...] = Field(min_length=9, max_length=9)
    teens: tuple[str, ...] = Field(min_length=10, max_length=10)
    tens: tuple[str, ...] = Field(min_length=9, max_length=9)
    scales: tuple[str, ...] = Field(min_length=1)

    hundred: str
    zero: str
    decimal_marker: str
    negative: str
    infinity: str
    negative_infinity: str

    # Conjunction between units and tens ("vijfenveertig") and between the
    # hundreds and the rest of the ones group ("honderdenvijf").
    joiner: str
    joiner_elided: str
    elision_trigger: str = Field(min_length=1, max_length=1)

    and_word: str  # between major and minor currency units
    bc_suffix: str

    ordinals: dict[str, str] = Field(default_factory=dict)
    ordinal_rules: tuple[OrdinalRule, ...] = ()
    ordinal_suffix: str

    # Abbreviated ordinals: last digit -> suffix, skipped for 11-19.
    ordinal_num_suffixes: dict[int, str] = Field(default_factory=dict)
    ordinal_num_suffix: str

    minor_unit: str = "cent{}"
    plural_currency: bool = False

    # ─── Hooks ──────────────────────────────────────────────────────

    @property
    def max_groups(self) -> int:
        """Number of base-1000 groups the scale table can name."""
        return len(self.scales) + 1

    def joiner_after(self, word: str) -> str:
        """Pick the joiner spelling that follows `word`."""
        if word.endswith(self.elision_trigger):
            return self.joiner_elided
        return self.joiner

    def is_glued_scale(self, word: str) -> bool:
        """The smallest scale word attaches to its quantifier without a space."""
        return word == self.scales[0]

    def ordinal_word(self, word: str) -> str:
        """Turn the last word of a cardinal into its ordinal form.

        Table entries match the end of the word, longest first, so a fused
        compound takes the same irregular form as its last part:
        "honderdéén" → "honderdeerste".
        """
        for key in sorted(self.ordinals, key=len, reverse=True):
            if word.endswith(key):
                return word[: len(word) - len(key)] + self.ordinals[key]
        for rule in self.ordinal_rules:
            if word.endswith(rule.ending):
                return f"{word}{rule.suffix}"
        return f"{word}{self.ordinal_suffix}"

    def ordinal_num_suffix_for(self, number: int) -> str:
        tail = number % 100
        if tail // 10 != 1 and tail % 10 in self.ordinal_num_suffixes:
            return self.ordinal_num_suffixes[tail % 10]
        return self.ordinal_num_suffix

    def render_unit(self, template: str) -> str:
        """Fill a currency name template such as "cent{}" for this locale."""
        return template.replace("{}", "s" if self.plural_currency else "")


# ─── Currency ───────────────────────────────────────────────────────


class CurrencySpec(BaseModel):
    """Resolved names of a currency's major and minor units."""

    model_config = ConfigDict(frozen=True)

    major: str = Field(min_length=1)
    minor: str = Field(min_length=1)


# ─── Conversion Request / Result ────────────────────────────────────


class ConversionRequest(BaseModel):
    """A single conversion: what to spell, in which language and register.

    `value` may be a decimal literal string ("12.51", "-inf", "2.8e64") or a
    JSON number; strings keep full precision.
    """

    value: Union[str, int, float]
    lang: Optional[str] = None
    output: Register = Register.CARDINAL
    currency: Optional[str] = None  # registry code, e.g. "EUR"
    major_unit: Optional[str] = None  # explicit names override the registry
    minor_unit: Optional[str] = None


class ConversionResult(BaseModel):
    """The spelled-out value together with the resolved request parameters."""

    value: str
    lang: str
    output: Register
    words: str
