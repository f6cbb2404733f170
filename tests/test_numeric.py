"""Tests for the numeric kernel, number theory helpers and Rational."""

import math
from fractions import Fraction

import pytest

from exactgeom.errors import CoordinateOverflowError, ZeroDivisorError
from exactgeom.numeric import (
    Float,
    Integer,
    NonZero,
    Numeric,
    Rational,
    Sign,
    Signed,
    as_f32,
    as_f64,
    check_signed,
    fits_signed,
    from_int,
    gcd,
    get_abs,
    get_sign,
    get_sqrt,
    is_one,
    is_zero,
    lcm,
    lcm_all,
    nonzero_type,
    one,
    signed_bounds,
    zero,
)


class TestSign:
    """Test the Sign enum."""

    def test_negation_flips_strict_signs(self):
        assert -Sign.NEGATIVE == Sign.POSITIVE
        assert -Sign.POSITIVE == Sign.NEGATIVE

    def test_negation_fixes_neutral(self):
        assert -Sign.NEUTRAL == Sign.NEUTRAL

    @pytest.mark.parametrize("value,expected", [
        (-3, Sign.NEGATIVE),
        (0, Sign.NEUTRAL),
        (7, Sign.POSITIVE),
        (-0.5, Sign.NEGATIVE),
        (0.0, Sign.NEUTRAL),
        (1e-300, Sign.POSITIVE),
    ])
    def test_sign_of(self, value, expected):
        assert Sign.of(value) == expected

    def test_nan_is_neutral(self):
        """NaN compares false both ways."""
        assert Sign.of(float("nan")) == Sign.NEUTRAL


class TestNonZero:
    """Test the non-zero divisor wrapper."""

    def test_wraps_value(self):
        assert NonZero(5).get() == 5
        assert int(NonZero(-3)) == -3
        assert float(NonZero(2)) == 2.0

    def test_zero_raises(self):
        with pytest.raises(ZeroDivisorError):
            NonZero(0)

    def test_zero_division_error_compatible(self):
        """ZeroDivisorError can be caught as the builtin ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            NonZero(0)

    def test_new_is_fallible(self):
        assert NonZero.new(0) is None
        assert NonZero.new(4) == NonZero(4)


class TestProtocols:
    """Test runtime protocol checks for built-in and exact types."""

    def test_int_is_integer(self):
        assert isinstance(3, Integer)
        assert isinstance(3, Numeric)

    def test_float_is_float_not_integer(self):
        assert isinstance(1.5, Float)
        assert isinstance(1.5, Signed)
        assert not isinstance(1.5, Integer)

    def test_rational_is_signed(self):
        assert isinstance(Rational(1, 2), Signed)
        assert not isinstance(Rational(1, 2), Integer)

    def test_integer_divisor_type(self):
        assert nonzero_type(int) is NonZero

    @pytest.mark.parametrize("kind", [float, Rational])
    def test_non_integer_has_no_divisor_type(self, kind):
        with pytest.raises(TypeError):
            nonzero_type(kind)


class TestHelpers:
    """Test the generic numeric helpers."""

    def test_zero_and_one(self):
        assert zero(int) == 0
        assert one(float) == 1.0
        assert zero(Rational) == Rational(0)
        assert one(Rational) == Rational(1)

    def test_is_zero_is_one(self):
        assert is_zero(0)
        assert is_zero(Rational(0, 5))
        assert not is_zero(0.1)
        assert is_one(Rational(3, 3))
        assert not is_one(2)

    def test_from_int_in_range(self):
        assert from_int(int, 42) == 42
        assert from_int(float, -5) == -5.0
        assert from_int(Rational, 2) == Rational(2)

    def test_from_int_truncates_out_of_range(self):
        """Conversion is best effort: out-of-range values wrap, no error."""
        assert from_int(int, 128) == -128
        assert from_int(int, 300) == 44
        assert from_int(int, -129) == 127

    def test_as_f64(self):
        assert as_f64(3) == 3.0
        assert as_f64(Rational(1, 4)) == 0.25

    def test_as_f32_loses_precision(self):
        assert as_f32(0.1) != 0.1
        assert as_f32(0.1) == pytest.approx(0.1, rel=1e-7)
        assert as_f32(0.5) == 0.5

    def test_get_sign_and_abs(self):
        assert get_sign(Rational(-1, 3)) == Sign.NEGATIVE
        assert get_sign(0) == Sign.NEUTRAL
        assert get_abs(-2.5) == 2.5
        assert get_abs(Rational(-1, 3)) == Rational(1, 3)

    def test_sqrt_only_for_floats(self):
        assert get_sqrt(16.0) == 4.0
        with pytest.raises(TypeError):
            get_sqrt(16)
        with pytest.raises(TypeError):
            get_sqrt(Rational(16))


class TestNumberTheory:
    """Test gcd/lcm and fixed-width checks."""

    @pytest.mark.parametrize("a,b,expected", [
        (1, 2, 1),
        (99, 0, 99),
        (0, 99, 99),
        (6, 9, 3),
        (9, 6, 3),
        (-6, 9, 3),
    ])
    def test_gcd(self, a, b, expected):
        assert gcd(a, b) == expected

    def test_gcd_of_many(self):
        assert gcd(12, 18, 30) == 6
        assert gcd(0, 0, 0) == 0

    def test_lcm(self):
        assert lcm(4, 6) == 12
        assert lcm_all([2, 3, 4]) == 12
        assert lcm_all([]) == 1

    def test_signed_bounds(self):
        assert signed_bounds(8) == (-128, 127)
        assert signed_bounds(64) == (-(2**63), 2**63 - 1)

    def test_fits_and_check(self):
        assert fits_signed(127, 8)
        assert not fits_signed(128, 8)
        assert check_signed(-128, 8) == -128
        with pytest.raises(CoordinateOverflowError) as exc_info:
            check_signed(2**63, 64)
        assert exc_info.value.bits == 64
        assert exc_info.value.value == 2**63


class TestRationalConstruction:
    """Test Rational construction and canonical form."""

    @pytest.mark.parametrize("a,b", [
        (1, 2), (2, 4), (-6, 4), (6, -4), (-6, -4), (0, 7), (17, 11), (100, -25),
    ])
    def test_reduced_form(self, a, b):
        """Reduced form has gcd 1, a positive denominator and the right value."""
        r = Rational.new(a, b)
        assert r is not None
        assert gcd(r.numerator, r.denominator) == 1
        assert r.denominator > 0
        assert float(r) == pytest.approx(a / b)

    def test_new_fails_on_zero_denominator(self):
        assert Rational.new(1, 0) is None

    def test_constructor_raises_on_zero_denominator(self):
        with pytest.raises(ZeroDivisorError):
            Rational(1, 0)

    def test_new_nonzero(self):
        r = Rational.new_nonzero(4, NonZero(-6))
        assert (r.numerator, r.denominator) == (-2, 3)

    def test_zero_is_zero_over_one(self):
        r = Rational(0, -9)
        assert (r.numerator, r.denominator) == (0, 1)
        assert r.is_zero()

    def test_coerce(self):
        assert Rational.coerce(3) == Rational(3)
        assert Rational.coerce(Fraction(6, 8)) == Rational(3, 4)
        with pytest.raises(TypeError):
            Rational.coerce(0.5)

    def test_rejects_non_integers(self):
        with pytest.raises(TypeError):
            Rational(1.5, 2)


class TestRationalArithmetic:
    """Test Rational arithmetic, comparison and formatting."""

    def test_add_sub(self):
        assert Rational(1, 2) + Rational(1, 3) == Rational(5, 6)
        assert Rational(1, 2) - Rational(1, 3) == Rational(1, 6)
        assert 1 + Rational(1, 2) == Rational(3, 2)
        assert 1 - Rational(1, 2) == Rational(1, 2)

    def test_mul_div(self):
        assert Rational(2, 3) * Rational(3, 4) == Rational(1, 2)
        assert Rational(2, 3) / Rational(4, 3) == Rational(1, 2)
        assert 2 * Rational(1, 4) == Rational(1, 2)
        assert 1 / Rational(2, 3) == Rational(3, 2)

    def test_division_by_zero_raises(self):
        with pytest.raises(ZeroDivisorError):
            Rational(1, 2) / 0

    def test_remainder_truncates_toward_zero(self):
        assert Rational(7, 2) % 1 == Rational(1, 2)
        assert Rational(-7, 2) % 1 == Rational(-1, 2)
        assert Rational(7, 3) % Rational(1, 2) == Rational(1, 3)

    def test_trunc(self):
        assert Rational(7, 2).trunc() == 3
        assert Rational(-7, 2).trunc() == -3
        assert math.trunc(Rational(5, 1)) == 5

    def test_neg_and_abs(self):
        assert -Rational(1, 2) == Rational(-1, 2)
        assert abs(Rational(-1, 2)) == Rational(1, 2)
        assert Rational(-3, 4).get_sign() == Sign.NEGATIVE

    def test_ordering(self):
        assert Rational(1, 3) < Rational(1, 2)
        assert Rational(-1, 2) < Rational(-1, 3)
        assert Rational(2, 4) <= Rational(1, 2)
        assert Rational(3, 2) > 1
        assert sorted([Rational(3, 4), Rational(-1), Rational(1, 8)]) == [
            Rational(-1), Rational(1, 8), Rational(3, 4)
        ]

    def test_hash_consistent_with_equality(self):
        assert hash(Rational(2, 4)) == hash(Rational(1, 2))
        assert hash(Rational(4, 2)) == hash(2)
        assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1

    def test_float_conversion(self):
        assert Rational(17, 11).as_f64() == 17.0 / 11.0
        assert Rational(1, 3).as_f32() == pytest.approx(1 / 3, rel=1e-7)

    def test_str_and_repr(self):
        assert str(Rational(4, 2)) == "2"
        assert str(Rational(-1, 3)) == "-1/3"
        assert repr(Rational(2, 4)) == "Rational(1, 2)"
