"""
Math modules для digit_sequence

Целочисленные ширины с checked-арифметикой и алгоритмы конверсий цифр.
"""

# Integer Widths
from digit_sequence.math.integer_widths import (
    EXPONENT_MAX,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    NATIVE_POINTER_BITS,
    SIGNED_WIDTHS,
    U8,
    U16,
    U32,
    U64,
    U128,
    UNSIGNED_WIDTHS,
    USIZE,
    IntegerWidth,
    WidthLike,
    get_width,
)

# Digits
from digit_sequence.math.digits import (
    MAX_DIGIT,
    MIN_DIGIT,
    RADIX,
    Digits,
    char_to_digit,
    decompose,
    decompose_signed,
    decompose_unsigned,
    is_digit,
    parse_digits,
    reconstruct,
    render_digits,
    validate_digits,
)

__all__ = [
    # Integer Widths: Constants
    "EXPONENT_MAX",
    "NATIVE_POINTER_BITS",
    # Integer Widths: Types
    "IntegerWidth",
    "WidthLike",
    # Integer Widths: Predefined
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "UNSIGNED_WIDTHS",
    "SIGNED_WIDTHS",
    # Integer Widths: Functions
    "get_width",
    # Digits: Constants
    "RADIX",
    "MIN_DIGIT",
    "MAX_DIGIT",
    # Digits: Types
    "Digits",
    # Digits: Functions
    "is_digit",
    "validate_digits",
    "char_to_digit",
    "parse_digits",
    "render_digits",
    "decompose",
    "decompose_unsigned",
    "decompose_signed",
    "reconstruct",
]
