#!/usr/bin/env python3
"""
Numeral Speller — Command Line
==============================

Spell one number, or print a demo table of every register.

Usage:
    python main.py                              # Demo table (default language)
    python main.py 1990 --to year               # negentiennegentig
    python main.py 1.01 --to currency -c EUR    # één euro en één cent
    python main.py 21 --lang fy --to ordinal    # ienentweintichste
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from numeral_speller.currency import currency_codes
from numeral_speller.exceptions import NumeralError
from numeral_speller.models import Register
from numeral_speller.pipeline import NumeralSpeller

load_dotenv()


# ─── Demo Values ─────────────────────────────────────────────────────

DEMO_VALUES: list[tuple[str, Register]] = [
    ("0", Register.CARDINAL),
    ("-10", Register.CARDINAL),
    ("12.51", Register.CARDINAL),
    ("38123147081932", Register.CARDINAL),
    ("inf", Register.CARDINAL),
    ("73", Register.ORDINAL),
    ("102", Register.ORDINAL),
    ("21", Register.ORDINAL_NUM),
    ("1990", Register.YEAR),
    ("2001", Register.YEAR),
    ("-44", Register.YEAR),
    ("1.01", Register.CURRENCY),
    ("0.20", Register.CURRENCY),
    ("1e100", Register.CARDINAL),
    ("-1", Register.ORDINAL),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_demo(speller: NumeralSpeller, lang: str | None, currency: str) -> int:
    """Print every demo value in its register. Failures are expected rows.

    Returns:
        Always 0; the demo includes deliberate failures.
    """
    profile = speller.profile(lang)
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMERAL SPELLER  --  {profile.name} ({profile.code}){_RESET}")
    print(f"{'=' * _WIDTH}")

    for raw, register in DEMO_VALUES:
        label = f"{raw:>16}  {_DIM}{register.value:<11}{_RESET}"
        try:
            words = speller.spell(raw, lang=profile.code, register=register, currency=currency)
            print(f"  {label}  {_GREEN}{words}{_RESET}")
        except NumeralError as exc:
            print(f"  {label}  {_RED}[{exc.code}]{_RESET} {exc}")

    print(f"{'=' * _WIDTH}\n")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spell numbers in words.")
    parser.add_argument("value", nargs="?", help="number to spell (omit for a demo)")
    parser.add_argument("-l", "--lang", default=None, help="locale code, e.g. nl or fy")
    parser.add_argument(
        "-t",
        "--to",
        dest="register",
        default=Register.CARDINAL.value,
        choices=[r.value for r in Register],
        help="output register",
    )
    parser.add_argument(
        "-c",
        "--currency",
        default="DOLLAR",
        choices=currency_codes(),
        metavar="CODE",
        help="currency code for --to currency",
    )
    parser.add_argument("--locale-dir", default=None, help="extra profile directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Spell the requested value, or run the demo.

    Returns:
        0 on success, 1 if the value cannot be spelled.
    """
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        speller = NumeralSpeller(locale_dir=args.locale_dir)
        if args.value is None:
            return print_demo(speller, args.lang, args.currency)
        print(
            speller.spell(
                args.value, lang=args.lang, register=args.register, currency=args.currency
            )
        )
    except NumeralError as exc:
        print(f"{_RED}[{exc.code}]{_RESET} {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
