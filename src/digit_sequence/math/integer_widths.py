"""
Integer Widths — Целочисленные ширины и checked-арифметика

Python int не ограничен по разрядности, поэтому фиксированная ширина
(u8 … u128, usize, i8 … i128, isize) задаётся явно через IntegerWidth.

Каждая ширина предоставляет:
- Диапазон значений (min_value / max_value)
- checked_add / checked_mul / checked_pow: при выходе за диапазон → Overflow
- Проверку принадлежности значения диапазону

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Checked-операции никогда не усекают и не оборачивают результат
2. Показатель степени ограничен EXPONENT_MAX (беззнаковый 32-битный тип)
3. Ширины неизменяемы (frozen dataclass)
"""

import sys
from dataclasses import dataclass
from typing import Final, Union

from digit_sequence.errors import Overflow

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальный показатель степени для checked_pow (u32)
EXPONENT_MAX: Final[int] = 2**32 - 1

# Разрядность нативного указателя платформы (usize / isize)
NATIVE_POINTER_BITS: Final[int] = sys.maxsize.bit_length() + 1


# =============================================================================
# INTEGER WIDTH
# =============================================================================


@dataclass(frozen=True)
class IntegerWidth:
    """
    Целочисленная ширина с checked-арифметикой.

    Attributes:
        name: Имя ширины (например, 'u16')
        bits: Разрядность
        signed: Знаковый ли тип
    """

    name: str
    bits: int
    signed: bool = False

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что значение представимо в ширине."""
        return self.min_value <= value <= self.max_value

    def checked(self, value: int) -> int:
        """
        Возвращает value, если оно помещается в ширину.

        Raises:
            Overflow: Если value вне [min_value, max_value]
        """
        if not self.contains(value):
            raise Overflow()
        return value

    def checked_add(self, a: int, b: int) -> int:
        """Сложение с проверкой переполнения."""
        return self.checked(a + b)

    def checked_mul(self, a: int, b: int) -> int:
        """Умножение с проверкой переполнения."""
        return self.checked(a * b)

    def checked_pow(self, base: int, exponent: int) -> int:
        """
        Возведение в степень с проверкой переполнения.

        Args:
            base: Основание
            exponent: Показатель (0 <= exponent <= EXPONENT_MAX)

        Returns:
            base ** exponent

        Raises:
            Overflow: Если показатель не представим в u32 или результат
                не помещается в ширину

        Examples:
            >>> U8.checked_pow(10, 2)
            100
            >>> U8.checked_pow(10, 3)  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            Overflow: Overflow
        """
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        if exponent > EXPONENT_MAX:
            raise Overflow()

        if abs(base) <= 1:
            return self.checked(base**exponent)

        # |base| >= 2: переполнение наступает не позже чем через bits шагов
        result = 1
        for _ in range(exponent):
            result = self.checked_mul(result, base)
        return result

    def __str__(self) -> str:
        return self.name


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ШИРИНЫ
# =============================================================================

U8: Final[IntegerWidth] = IntegerWidth("u8", 8)
U16: Final[IntegerWidth] = IntegerWidth("u16", 16)
U32: Final[IntegerWidth] = IntegerWidth("u32", 32)
U64: Final[IntegerWidth] = IntegerWidth("u64", 64)
U128: Final[IntegerWidth] = IntegerWidth("u128", 128)
USIZE: Final[IntegerWidth] = IntegerWidth("usize", NATIVE_POINTER_BITS)

I8: Final[IntegerWidth] = IntegerWidth("i8", 8, signed=True)
I16: Final[IntegerWidth] = IntegerWidth("i16", 16, signed=True)
I32: Final[IntegerWidth] = IntegerWidth("i32", 32, signed=True)
I64: Final[IntegerWidth] = IntegerWidth("i64", 64, signed=True)
I128: Final[IntegerWidth] = IntegerWidth("i128", 128, signed=True)
ISIZE: Final[IntegerWidth] = IntegerWidth("isize", NATIVE_POINTER_BITS, signed=True)

UNSIGNED_WIDTHS: Final[tuple[IntegerWidth, ...]] = (U8, U16, U32, U64, U128, USIZE)
SIGNED_WIDTHS: Final[tuple[IntegerWidth, ...]] = (I8, I16, I32, I64, I128, ISIZE)

_WIDTHS_BY_NAME: Final[dict[str, IntegerWidth]] = {
    width.name: width for width in UNSIGNED_WIDTHS + SIGNED_WIDTHS
}

WidthLike = Union[IntegerWidth, str]


def get_width(width: WidthLike) -> IntegerWidth:
    """
    Разрешение ширины по имени или экземпляру.

    Args:
        width: IntegerWidth или имя ('u8', 'i64', 'usize', ...)

    Returns:
        IntegerWidth

    Raises:
        ValueError: Если имя неизвестно
        TypeError: Если передан не str и не IntegerWidth
    """
    if isinstance(width, IntegerWidth):
        return width
    if isinstance(width, str):
        try:
            return _WIDTHS_BY_NAME[width.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown integer width: {width!r} "
                f"(expected one of {sorted(_WIDTHS_BY_NAME)})"
            ) from None
    raise TypeError(f"width must be IntegerWidth or str, got {type(width).__name__}")
