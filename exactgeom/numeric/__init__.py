"""Numeric kernel and exact rational arithmetic."""

from .number_theory import check_signed, fits_signed, gcd, lcm, lcm_all, signed_bounds
from .rational import Rational
from .traits import (
    Float,
    Integer,
    NonZero,
    Numeric,
    Sign,
    Signed,
    as_f32,
    as_f64,
    from_int,
    get_abs,
    get_sign,
    get_sqrt,
    is_one,
    is_zero,
    nonzero_type,
    one,
    zero,
)

__all__ = [
    # Kernel
    "Sign",
    "NonZero",
    "Numeric",
    "Signed",
    "Integer",
    "Float",
    "nonzero_type",
    "zero",
    "one",
    "is_zero",
    "is_one",
    "from_int",
    "as_f64",
    "as_f32",
    "get_sign",
    "get_abs",
    "get_sqrt",
    # Number theory
    "gcd",
    "lcm",
    "lcm_all",
    "signed_bounds",
    "fits_signed",
    "check_signed",
    # Rational
    "Rational",
]
