"""
test_conversion.py — Tests for the conversion functions

Tests cover:
- Greedy encoding of integers 0..3999
- Tolerant decoding of additive and subtractive forms
- Single symbol lookup
- OutOfRangeError / InvalidSymbolError reporting
- Round trip properties (Hypothesis)
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from roman_numeral import (
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


def additive_form(n: int) -> str:
    """Purely additive spelling of n (no subtractive pairs)."""
    parts = []
    for symbol, value in NUMERAL_VALUES:
        if len(symbol) != 1:
            continue
        count, n = divmod(n, value)
        parts.append(symbol * count)
    return "".join(parts)


# ==============================================================================
# Tables
# ==============================================================================

class TestTables:
    """Sanity checks on the lookup tables."""

    def test_numeral_values_strictly_descending(self):
        values = [value for _, value in NUMERAL_VALUES]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)

    def test_ordered_symbols_ascending_by_value(self):
        values = [symbol_to_decimal(s) for s in ORDERED_SYMBOLS]
        assert values == sorted(values)


# ==============================================================================
# Encoding
# ==============================================================================

class TestDecimalToNumeral:
    """Tests for decimal_to_numeral()."""

    @pytest.mark.parametrize("decimal, expected", [
        (1, "I"),
        (3, "III"),
        (4, "IV"),
        (9, "IX"),
        (66, "LXVI"),
        (944, "CMXLIV"),
        (1987, "MCMLXXXVII"),
        (3999, "MMMCMXCIX"),
    ])
    def test_known_values(self, decimal, expected):
        assert decimal_to_numeral(decimal) == expected

    def test_zero_is_empty_string(self):
        assert decimal_to_numeral(0) == ""

    @pytest.mark.parametrize("decimal", [-1, 4000, -3999, 10_000])
    def test_out_of_range_raises(self, decimal):
        with pytest.raises(OutOfRangeError) as exc_info:
            decimal_to_numeral(decimal)
        assert exc_info.value.value == decimal

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError):
            decimal_to_numeral(4000)

    @pytest.mark.parametrize("value", [4.0, "4", None, True])
    def test_non_int_raises_type_error(self, value):
        with pytest.raises(TypeError):
            decimal_to_numeral(value)


# ==============================================================================
# Single symbols
# ==============================================================================

class TestSymbolToDecimal:
    """Tests for symbol_to_decimal()."""

    @pytest.mark.parametrize("symbol, expected", [
        ("I", 1),
        ("V", 5),
        ("X", 10),
        ("L", 50),
        ("C", 100),
        ("D", 500),
        ("M", 1000),
    ])
    def test_seven_symbols(self, symbol, expected):
        assert symbol_to_decimal(symbol) == expected

    @pytest.mark.parametrize("symbol", ["A", "i", "v", "1", "-", " ", "", "IV", "CM"])
    def test_other_characters_rejected(self, symbol):
        with pytest.raises(InvalidSymbolError) as exc_info:
            symbol_to_decimal(symbol)
        assert exc_info.value.symbol == symbol
        assert exc_info.value.position is None


# ==============================================================================
# Decoding
# ==============================================================================

class TestNumeralToDecimal:
    """Tests for numeral_to_decimal()."""

    @pytest.mark.parametrize("numeral, expected", [
        ("I", 1),
        ("III", 3),
        ("IV", 4),
        ("IIII", 4),
        ("VIIII", 9),
        ("MCMLXXXVII", 1987),
        ("MMMCMXCIX", 3999),
    ])
    def test_known_values(self, numeral, expected):
        assert numeral_to_decimal(numeral) == expected

    def test_empty_string_is_zero(self):
        assert numeral_to_decimal("") == 0

    def test_additive_and_subtractive_agree(self):
        assert numeral_to_decimal("IV") == numeral_to_decimal("IIII")
        assert numeral_to_decimal("IX") == numeral_to_decimal("VIIII")
        assert numeral_to_decimal("CM") == numeral_to_decimal("DCCCC")

    def test_malformed_ordering_is_not_rejected(self):
        # V -> X is a one-step increase, so V is taken back twice
        assert numeral_to_decimal("VX") == 5
        # I -> M is six steps, no subtraction applies
        assert numeral_to_decimal("IM") == 1001

    def test_no_magnitude_bound(self):
        assert numeral_to_decimal("MMMMM") == 5000

    def test_invalid_symbol_raises(self):
        with pytest.raises(InvalidSymbolError) as exc_info:
            numeral_to_decimal("A")
        assert exc_info.value.symbol == "A"
        assert exc_info.value.position == 0

    def test_invalid_symbol_reports_position(self):
        with pytest.raises(InvalidSymbolError) as exc_info:
            numeral_to_decimal("MCMX7")
        assert exc_info.value.symbol == "7"
        assert exc_info.value.position == 4
        assert "position 4" in str(exc_info.value)

    def test_lowercase_rejected(self):
        with pytest.raises(InvalidSymbolError):
            numeral_to_decimal("iv")

    def test_invalid_symbol_is_domain_error(self):
        with pytest.raises(RomanNumeralError):
            numeral_to_decimal("XIZ")

    def test_non_str_raises_type_error(self):
        with pytest.raises(TypeError):
            numeral_to_decimal(4)


# ==============================================================================
# Properties (Hypothesis)
# ==============================================================================

class TestConversionProperties:
    """Properties that hold over the whole standard form range."""

    @given(n=st.integers(min_value=1, max_value=MAX_DECIMAL))
    @settings(max_examples=1000)
    def test_round_trip(self, n: int):
        """numeral_to_decimal(decimal_to_numeral(n)) == n"""
        assert numeral_to_decimal(decimal_to_numeral(n)) == n

    @given(n=st.integers(min_value=1, max_value=MAX_DECIMAL))
    @settings(max_examples=500)
    def test_additive_form_decodes_to_same_value(self, n: int):
        assert numeral_to_decimal(additive_form(n)) == n

    @given(n=st.integers(min_value=1, max_value=MAX_DECIMAL))
    @settings(max_examples=500)
    def test_canonical_form_has_no_long_runs(self, n: int):
        """No symbol repeats more than three times in canonical output."""
        numeral = decimal_to_numeral(n)
        for symbol in ORDERED_SYMBOLS:
            assert symbol * 4 not in numeral

    @given(n=st.integers(min_value=MAX_DECIMAL + 1, max_value=1_000_000))
    @settings(max_examples=200)
    def test_above_range_always_raises(self, n: int):
        with pytest.raises(OutOfRangeError):
            decimal_to_numeral(n)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
