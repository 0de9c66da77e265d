#!/usr/bin/env python3
"""
roman_arithmetic_demo.py — Roman numerals as a value type

================================================================================
THE PROBLEM
================================================================================

A Roman numeral is not just a string. "IV" and "IIII" are different strings
but the same number, and "MMMM" has no place in standard form at all.

Treating numerals as raw strings pushes conversion, validation and range
checks into every caller.

================================================================================
THE FIX
================================================================================

    from roman_numeral import RomanNumeral

    assert RomanNumeral("IV") == RomanNumeral("IIII")
    assert (RomanNumeral(1) + 3).numeral == "IV"

    RomanNumeral(3999) + 1     # OutOfRangeError, never a silent wrong value

================================================================================
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from roman_numeral import (
    RomanNumeral,
    OutOfRangeError,
    InvalidSymbolError,
    decimal_to_numeral,
    numeral_to_decimal,
)


def demonstrate_conversion():
    """Show both conversion directions."""
    print("=" * 60)
    print("CONVERSION")
    print("=" * 60)
    print()

    for decimal in (0, 4, 9, 66, 944, 1987, 3999):
        print(f"  {decimal:4d} -> {decimal_to_numeral(decimal)!r}")
    print()

    for numeral in ("IV", "IIII", "VIIII", "MCMLXXXVII"):
        print(f"  {numeral!r:>14} -> {numeral_to_decimal(numeral)}")
    print()


def demonstrate_equality():
    """Show that equality follows the value, not the spelling."""
    print("=" * 60)
    print("EQUALITY")
    print("=" * 60)
    print()

    subtractive = RomanNumeral("IV")
    additive = RomanNumeral("IIII")
    print(f"  {subtractive!r} == {additive!r}: {subtractive == additive}")
    print(f"  hash: {hash(subtractive)} / {hash(additive)}")
    print(f"  unique values in set: {len({subtractive, additive, RomanNumeral(4)})}")
    print()


def demonstrate_arithmetic():
    """Show arithmetic and the range check on results."""
    print("=" * 60)
    print("ARITHMETIC")
    print("=" * 60)
    print()

    values = [RomanNumeral(n) for n in (2, 3, 5, 8)]
    total = RomanNumeral.sum(values)
    print(f"  sum({[str(v) for v in values]}) = {total} ({total.decimal})")

    rest = RomanNumeral.difference(total, [RomanNumeral(2), RomanNumeral(3), RomanNumeral(8)])
    print(f"  {total} - II - III - VIII = {rest} ({rest.decimal})")

    print(f"  I + 3 = {RomanNumeral(1) + 3}")
    print()

    for label, operation in (
        ("MMMCMXCIX + 1", lambda: RomanNumeral(3999) + 1),
        ("I + (-2)", lambda: RomanNumeral(1).add(-2)),
        ("RomanNumeral('A')", lambda: RomanNumeral("A")),
    ):
        try:
            operation()
        except (OutOfRangeError, InvalidSymbolError) as e:
            print(f"  {label:<20} -> {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    demonstrate_conversion()
    demonstrate_equality()
    demonstrate_arithmetic()
