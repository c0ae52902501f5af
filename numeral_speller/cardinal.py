"""
Cardinal spelling engine shared by every locale.

Pipeline:
    Decimal ─► split into base-1000 triplets ─► word assembly ─► spacing ─► str

    38123147081932
      → [932, 81, 147, 123, 38]                        (least significant first)
      → acht|en|dertig biljoen honderd|drieëntwintig miljard ...
      → "achtendertig biljoen honderddrieëntwintig miljard honderdzevenenveertig
         miljoen éénentachtigduizend negenhonderdentweeëndertig"

Nothing in this module is language-specific: the words, the joiner spellings
and the elision predicate all come from the LocaleProfile.
"""

from __future__ import annotations

from decimal import Decimal

from .exact import fraction_digits, integer_part, is_integral
from .exceptions import CannotConvert
from .models import SEPARATOR, LocaleProfile, Token, TokenKind


# ─── Triplet Decomposer ─────────────────────────────────────────────


def split_thousands(number: int) -> list[int]:
    """Split a non-negative integer into base-1000 groups, least significant first.

    >>> split_thousands(1_234_005)
    [5, 234, 1]
    """
    triplets: list[int] = []
    while number:
        number, triplet = divmod(number, 1000)
        triplets.append(triplet)
    return triplets


# ─── Word Assembler ─────────────────────────────────────────────────


def _tens_and_units(tens: int, units: int, profile: LocaleProfile) -> str:
    if tens == 0:
        return profile.units[units - 1]
    if tens == 1:
        return profile.teens[units]

    ten = profile.tens[tens - 1]
    if units == 0:
        return ten
    # Units come first and fuse with the tens word: "vijf" + "en" + "tig"
    unit = profile.units[units - 1]
    return f"{unit}{profile.joiner_after(unit)}{ten}"


def assemble_words(number: int, profile: LocaleProfile) -> list[Token]:
    """Turn a positive integer into word and scale tokens (no separators yet).

    Raises:
        CannotConvert: if a group needs a scale word beyond the profile's table.
    """
    tokens: list[Token] = []
    triplets = split_thousands(number)
    higher_group_seen = False

    for index in reversed(range(len(triplets))):
        triplet = triplets[index]
        hundreds, tens, units = triplet // 100 % 10, triplet // 10 % 10, triplet % 10

        if hundreds > 1:
            tokens.append(Token(TokenKind.WORD, profile.units[hundreds - 1]))
        if hundreds > 0:
            tokens.append(Token(TokenKind.WORD, profile.hundred))

        if tens or units:
            # "negenhonderd|en|tweeëndertig" in the ones group after a higher group
            if (
                index == 0
                and higher_group_seen
                and tokens[-1].kind is not TokenKind.SCALE
            ):
                joiner = profile.joiner_after(tokens[-1].text)
                tokens.append(Token(TokenKind.WORD, joiner))
            tokens.append(Token(TokenKind.WORD, _tens_and_units(tens, units, profile)))

        if index > 0 and triplet:
            if index > len(profile.scales):
                raise CannotConvert(
                    f"Number needs {len(triplets)} digit groups; "
                    f"locale '{profile.code}' names at most {profile.max_groups}",
                    {"groups": len(triplets), "max_groups": profile.max_groups},
                )
            tokens.append(Token(TokenKind.SCALE, profile.scales[index - 1]))

        if triplet:
            higher_group_seen = True

    return tokens


# ─── Spacing Pass ───────────────────────────────────────────────────


def _needs_separator(previous: Token, token: Token, profile: LocaleProfile) -> bool:
    if previous.kind in (TokenKind.NEGATIVE, TokenKind.SCALE):
        return True
    if token.kind in (TokenKind.DECIMAL_MARKER, TokenKind.DIGIT):
        return True
    return token.kind is TokenKind.SCALE and not profile.is_glued_scale(token.text)


def space_tokens(tokens: list[Token], profile: LocaleProfile) -> tuple[Token, ...]:
    """Interleave separators between tokens in one left-to-right pass.

    A gap receives at most one separator, whatever the reasons for it, and
    tokens are never reordered.
    """
    spaced: list[Token] = []
    previous: Token | None = None
    for token in tokens:
        if previous is not None and _needs_separator(previous, token, profile):
            spaced.append(SEPARATOR)
        spaced.append(token)
        previous = token
    return tuple(spaced)


def render(tokens: list[Token], profile: LocaleProfile) -> str:
    return "".join(token.text for token in space_tokens(tokens, profile))


# ─── Cardinal Composer ──────────────────────────────────────────────


def check_magnitude(value: Decimal, profile: LocaleProfile) -> None:
    """Reject a finite value whose integer part the scale table cannot name.

    Reads the Decimal exponent only, so an input like "1e300000" fails
    without its integer part ever being built.

    Raises:
        CannotConvert: if the integer part has more than `max_groups * 3` digits.
    """
    max_digits = profile.max_groups * 3
    if value and value.adjusted() >= max_digits:
        digits = value.adjusted() + 1
        raise CannotConvert(
            f"Integer part has {digits} digits; "
            f"locale '{profile.code}' spells at most {max_digits}",
            {"digits": digits, "max_digits": max_digits},
        )


def _integer_tokens(number: int, profile: LocaleProfile) -> list[Token]:
    if number == 0:
        return [Token(TokenKind.WORD, profile.zero)]
    if number < 0:
        return [Token(TokenKind.NEGATIVE, profile.negative)] + assemble_words(
            -number, profile
        )
    return assemble_words(number, profile)


def int_to_cardinal(number: int, profile: LocaleProfile) -> str:
    """Spell an integer of any size the scale table allows."""
    return render(_integer_tokens(number, profile), profile)


def _float_to_cardinal(value: Decimal, profile: LocaleProfile) -> str:
    tokens: list[Token] = []
    if value < 0:
        tokens.append(Token(TokenKind.NEGATIVE, profile.negative))
    tokens.extend(_integer_tokens(abs(integer_part(value)), profile))
    tokens.append(Token(TokenKind.DECIMAL_MARKER, profile.decimal_marker))
    for digit in fraction_digits(value):
        word = profile.units[digit - 1] if digit else profile.zero
        tokens.append(Token(TokenKind.DIGIT, word))
    return render(tokens, profile)


def to_cardinal(value: Decimal, profile: LocaleProfile) -> str:
    """Spell `value` as a cardinal number: "twaalf komma vijf".

    The sign is kept for values between -1 and 0 ("minus nul komma vijf").
    """
    if value.is_infinite():
        return profile.negative_infinity if value < 0 else profile.infinity
    check_magnitude(value, profile)
    if is_integral(value):
        return int_to_cardinal(integer_part(value), profile)
    return _float_to_cardinal(value, profile)
