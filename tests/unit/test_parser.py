"""Tests for decimal literal parsing."""

import math
from decimal import Decimal

import pytest

from bn.errors import BnError, FormatError
from bn.parser import pack_digits, parse_text, strip_separators
from tests.helpers import INVALID_LITERALS, ZERO_LITERALS


class TestPackDigits:
    """Tests for packing digit strings into limbs."""

    def test_multiple_limbs(self):
        """Limbs are cut from the units end, least-significant first."""
        assert pack_digits("1234567") == [567, 234, 1]

    def test_exact_limb_width(self):
        assert pack_digits("123456") == [456, 123]

    def test_empty_is_zero_limb(self):
        assert pack_digits("") == [0]


class TestStripSeparators:
    """Tests for grouping separator removal."""

    def test_commas_underscores_whitespace(self):
        assert strip_separators("1, 000_000\t.5\n") == "1000000.5"

    def test_plain_literal_unchanged(self):
        assert strip_separators("-1.5e3") == "-1.5e3"


class TestParseText:
    """Tests for parse_text on valid literals."""

    def test_integer_and_fraction(self):
        """123.456 packs into two limbs with one fractional limb."""
        store = parse_text("123.456")
        assert store.sign == 1
        assert store.magnitude == [456, 123]
        assert store.scale == 1

    def test_trailing_zero_limbs_become_negative_scale(self):
        """123000 drops its zero units limb into the scale."""
        store = parse_text("123000")
        assert store.magnitude == [123]
        assert store.scale == -1

    def test_small_fraction(self):
        """0.000456 drops its zero leading fraction limb."""
        store = parse_text("0.000456")
        assert store.magnitude == [456]
        assert store.scale == 2

    def test_fraction_padded_to_limb(self):
        """.5 is 500 thousandths."""
        store = parse_text(".5")
        assert store.magnitude == [500]
        assert store.scale == 1

    def test_trailing_point(self):
        store = parse_text("5.")
        assert store.key() == (1, (5,), 0)

    def test_negative(self):
        assert parse_text("-1").key() == (-1, (1,), 0)

    def test_explicit_plus(self):
        assert parse_text("+42").key() == (1, (42,), 0)

    def test_separators_ignored(self):
        """Grouping separators anywhere in the literal are ignored."""
        assert parse_text("1,234_567 .5").key() == (1, (500, 567, 234, 1), 1)


class TestScientificNotation:
    """Tests for exponent handling."""

    def test_positive_exponent(self):
        """1e10 = 10 * 1000**3."""
        assert parse_text("1e10").key() == (1, (10,), -3)

    def test_negative_exponent(self):
        """1e-10 = 100 * 1000**-4."""
        assert parse_text("1e-10").key() == (1, (100,), 4)

    def test_uppercase_marker(self):
        assert parse_text("2.5E3").key() == parse_text("2500").key()

    def test_exponent_with_fraction(self):
        assert parse_text("1.5e-2").key() == parse_text("0.015").key()

    def test_exponent_shorter_than_fraction(self):
        assert parse_text("123.4567e2").key() == parse_text("12345.67").key()

    def test_bare_exponent_means_one(self):
        """A literal starting with e has an implicit leading 1."""
        assert parse_text("e-3").key() == parse_text("0.001").key()
        assert parse_text("E5").key() == parse_text("100000").key()

    def test_negative_mantissa(self):
        assert parse_text("-2.5E7").key() == (-1, (25,), -2)

    def test_huge_exponent_stays_compact(self):
        """Large exponents become scale, not stored zero limbs."""
        store = parse_text("1e3000")
        assert store.magnitude == [1]
        assert store.scale == -1000


class TestZero:
    """Tests for canonical zero."""

    @pytest.mark.parametrize("literal", ZERO_LITERALS)
    def test_zero_literals_are_canonical(self, literal):
        """Every spelling of zero parses to sign=0, [0], scale=0."""
        assert parse_text(literal).key() == (0, (0,), 0)


class TestNumericInput:
    """Tests for non-string inputs."""

    def test_int(self):
        assert parse_text(123).key() == parse_text("123").key()

    def test_negative_int(self):
        assert parse_text(-7).key() == (-1, (7,), 0)

    def test_int_limbs_and_trailing_zeros(self):
        assert parse_text(-1234567).key() == (-1, (567, 234, 1), 0)
        assert parse_text(5000).key() == (1, (5,), -1)
        assert parse_text(0).key() == (0, (0,), 0)

    def test_int_beyond_str_conversion_limit(self):
        """5000-digit ints are split into limbs without going through str."""
        assert parse_text(10**5000).key() == (1, (100,), -1666)
        assert parse_text(10**5000).key() == parse_text("1e5000").key()
        assert parse_text(-(10**5000) + 1).key() == (-1, (999,) * 1666 + (99,), 0)

    def test_float(self):
        assert parse_text(0.000456).key() == parse_text("0.000456").key()

    def test_float_scientific_repr(self):
        """Floats whose repr uses an exponent still parse."""
        assert parse_text(1e-10).key() == parse_text("1e-10").key()

    def test_decimal(self):
        assert parse_text(Decimal("1.50")).key() == parse_text("1.5").key()

    def test_decimal_exponent(self):
        assert parse_text(Decimal("1E+3")).key() == parse_text("1000").key()


class TestInvalidInput:
    """Tests for FormatError."""

    @pytest.mark.parametrize("literal", INVALID_LITERALS)
    def test_invalid_literals_raise(self, literal):
        with pytest.raises(FormatError):
            parse_text(literal)

    @pytest.mark.parametrize("value", [None, True, math.nan, math.inf, -math.inf, Decimal("NaN"), [1]])
    def test_invalid_values_raise(self, value):
        with pytest.raises(FormatError):
            parse_text(value)

    def test_error_carries_original_text(self):
        """The error keeps the input as given, separators included."""
        with pytest.raises(FormatError) as exc_info:
            parse_text("1,2.3.4")
        assert exc_info.value.text == "1,2.3.4"
        assert "Invalid Bn" in str(exc_info.value)

    def test_error_hierarchy(self):
        """FormatError is both a BnError and a ValueError."""
        with pytest.raises(ValueError):
            parse_text("abc")
        with pytest.raises(BnError):
            parse_text("abc")
