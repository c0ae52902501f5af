"""
Numeral Speller — exact decimal numbers to locale-correct words.

Architecture: Exact decimal → Triplets → Word assembly → Spacing → Register composer
Registers:    cardinal, ordinal, abbreviated ordinal, year, currency
"""

__version__ = "1.0.0"
