"""
conversion.py — Pure conversion between Roman numerals and integers

================================================================================
STANDARD FORM
================================================================================

Standard form Roman numerals cover 1..3999 using seven symbols and six
subtractive pairs:

    I=1  V=5  X=10  L=50  C=100  D=500  M=1000
    IV=4 IX=9 XL=40 XC=90 CD=400 CM=900

Zero has no Roman numeral and is rendered as the empty string.

================================================================================
TWO DIRECTIONS, TWO POLICIES
================================================================================

ENCODE (int -> str): strict.
    Only 0..3999 is accepted. Output is always the canonical subtractive
    form produced by a greedy walk over NUMERAL_VALUES.

DECODE (str -> int): tolerant.
    Any string made of the seven symbols is accepted. Both "IV" and "IIII"
    decode to 4. No grammar or magnitude validation is performed:
    "VX" decodes to 5 and "MMMMM" to 5000.

================================================================================
"""

from __future__ import annotations
from typing import Optional


# ==============================================================================
# TABLES
# ==============================================================================

MIN_DECIMAL: int = 0
MAX_DECIMAL: int = 3999

# Strictly descending: this is the greedy encoding order
NUMERAL_VALUES: tuple[tuple[str, int], ...] = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

# Single symbols in ascending order, used to spot subtractive pairs
ORDERED_SYMBOLS: str = "IVXLCDM"

_SYMBOL_VALUES: dict[str, int] = {
    symbol: value for symbol, value in NUMERAL_VALUES if len(symbol) == 1
}


# ==============================================================================
# ERRORS
# ==============================================================================

class RomanNumeralError(ValueError):
    """Base class for domain errors raised by this package."""


class OutOfRangeError(RomanNumeralError):
    """
    An integer (or an arithmetic result) falls outside MIN_DECIMAL..MAX_DECIMAL.
    """

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"Decimal number {value} is not in the valid range of standard form "
            f"Roman numerals ({MIN_DECIMAL}-{MAX_DECIMAL})"
        )


class InvalidSymbolError(RomanNumeralError):
    """
    A character that is not one of I, V, X, L, C, D, M was found.

    `position` is the index of the character in the decoded string, or None
    when a lone symbol was converted.
    """

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Character {symbol!r}{where} is not a valid standard form Roman numeral"
        )


# ==============================================================================
# CONVERSION FUNCTIONS
# ==============================================================================

def decimal_to_numeral(decimal: int) -> str:
    """
    Convert an integer in 0..3999 to its canonical Roman numeral.

    Raises:
        TypeError: if decimal is not an int (bool is rejected too)
        OutOfRangeError: if decimal < 0 or decimal > 3999

    Examples:
        >>> decimal_to_numeral(944)
        'CMXLIV'
        >>> decimal_to_numeral(0)
        ''
    """
    if not isinstance(decimal, int) or isinstance(decimal, bool):
        raise TypeError(
            f"Expected int, got {type(decimal).__name__}"
        )
    if decimal < MIN_DECIMAL or decimal > MAX_DECIMAL:
        raise OutOfRangeError(decimal)
    if decimal == 0:
        return ""

    parts = []
    remaining = decimal
    for symbol, value in NUMERAL_VALUES:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value

    return "".join(parts)


def symbol_to_decimal(symbol: str) -> int:
    """
    Value of one of the seven single Roman symbols.

    Lowercase letters, digits and multi-character strings are rejected.
    """
    try:
        return _SYMBOL_VALUES[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbolError(symbol) from None


def numeral_to_decimal(numeral: str) -> int:
    """
    Decode a Roman numeral string, accepting additive and subtractive forms.

    Single pass, left to right. Every symbol is added; when a symbol sits one
    or two steps above its predecessor in ORDERED_SYMBOLS (I before V or X,
    X before L or C, ...) the predecessor is taken back twice: once to undo
    its addition and once to subtract it.

    Raises:
        TypeError: if numeral is not a str
        InvalidSymbolError: on the first character outside I, V, X, L, C, D, M

    Examples:
        >>> numeral_to_decimal("MCMLXXXVII")
        1987
        >>> numeral_to_decimal("IIII")
        4
    """
    if not isinstance(numeral, str):
        raise TypeError(
            f"Expected str, got {type(numeral).__name__}"
        )

    total = 0
    previous_value = 0
    previous_index = -1

    for position, symbol in enumerate(numeral):
        try:
            value = symbol_to_decimal(symbol)
        except InvalidSymbolError:
            raise InvalidSymbolError(symbol, position) from None

        index = ORDERED_SYMBOLS.index(symbol)
        total += value

        if previous_index >= 0 and index - previous_index in (1, 2):
            total -= 2 * previous_value

        previous_value = value
        previous_index = index

    return total
