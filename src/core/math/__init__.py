"""
Core math modules

Точная арифметика произвольной точности: без floating-point на всём пути вычислений.
"""

# Errors
from src.core.math.errors import (
    DuplicateAbscissa,
    ExactArithmeticError,
    InvalidDigit,
    InvalidFormat,
    NonIntegerResult,
)

# BigInteger
from src.core.math.big_integer import (
    INT64_MAX,
    INT64_MIN,
    LIMB_BASE,
    LIMB_DIGITS,
    ONE,
    ZERO,
    BigInteger,
    as_big_integer,
    big_gcd,
)

# ExactRational
from src.core.math.rational import ExactRational

# Radix decoder
from src.core.math.radix import (
    MAX_RADIX,
    MIN_RADIX,
    decode_radix,
    digit_value,
    validate_radix,
)

__all__ = [
    # Errors
    "ExactArithmeticError",
    "InvalidFormat",
    "InvalidDigit",
    "DuplicateAbscissa",
    "NonIntegerResult",
    # BigInteger — Constants
    "LIMB_BASE",
    "LIMB_DIGITS",
    "INT64_MAX",
    "INT64_MIN",
    "ZERO",
    "ONE",
    # BigInteger — Types & functions
    "BigInteger",
    "as_big_integer",
    "big_gcd",
    # ExactRational
    "ExactRational",
    # Radix — Constants
    "MIN_RADIX",
    "MAX_RADIX",
    # Radix — Functions
    "decode_radix",
    "digit_value",
    "validate_radix",
]
