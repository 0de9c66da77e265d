"""
roman_numeral — Domain Primitive for Roman Numerals

Bidirectional conversion between standard form Roman numerals (0..3999) and
integers, plus range-checked arithmetic on a value type that keeps both
representations in sync.

================================================================================
QUICK START
================================================================================

Conversion functions:

    from roman_numeral import decimal_to_numeral, numeral_to_decimal

    decimal_to_numeral(1987)          # 'MCMLXXXVII'
    numeral_to_decimal("MCMLXXXVII")  # 1987
    numeral_to_decimal("IIII")        # 4 (additive form is accepted)

Value type:

    from roman_numeral import RomanNumeral

    four = RomanNumeral(4)            # canonical: 'IV'
    assert four == RomanNumeral("IIII")

    nine = four + 5                   # RomanNumeral('IX')
    total = RomanNumeral.sum([RomanNumeral(2), RomanNumeral(3), RomanNumeral(5)])
    rest = RomanNumeral.difference(RomanNumeral(18), [RomanNumeral(2), RomanNumeral(3)])

Every result is range-checked:

    RomanNumeral(3999) + 1            # raises OutOfRangeError

================================================================================
"""

# Conversion layer
from .conversion import (
    MIN_DECIMAL,
    MAX_DECIMAL,
    NUMERAL_VALUES,
    ORDERED_SYMBOLS,
    RomanNumeralError,
    OutOfRangeError,
    InvalidSymbolError,
    decimal_to_numeral,
    numeral_to_decimal,
    symbol_to_decimal,
)

# Value type
from .core import RomanNumeral

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Conversion
    "MIN_DECIMAL",
    "MAX_DECIMAL",
    "NUMERAL_VALUES",
    "ORDERED_SYMBOLS",
    "decimal_to_numeral",
    "numeral_to_decimal",
    "symbol_to_decimal",
    # Errors
    "RomanNumeralError",
    "OutOfRangeError",
    "InvalidSymbolError",
    # Value type
    "RomanNumeral",
]
