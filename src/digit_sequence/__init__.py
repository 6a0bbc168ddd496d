"""
digit_sequence — неизменяемая последовательность десятичных цифр.

Конверсии в/из беззнаковых и знаковых целых, строк и числовых контейнеров
с checked-арифметикой фиксированной ширины.
"""

from digit_sequence.errors import (
    DigitSequenceError,
    NegativeNumber,
    NonDigitChar,
    NonDigitNumber,
    Overflow,
)
from digit_sequence.math.integer_widths import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    IntegerWidth,
    get_width,
)
from digit_sequence.domain import DigitSequence

__all__ = [
    # Value type
    "DigitSequence",
    # Errors
    "DigitSequenceError",
    "NonDigitChar",
    "NonDigitNumber",
    "NegativeNumber",
    "Overflow",
    # Widths
    "IntegerWidth",
    "get_width",
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
]
