"""
Digits — Конверсии между цифрами, целыми и строками

Модуль содержит все алгоритмы конверсий DigitSequence:
- Валидация упорядоченного источника чисел → кортеж цифр
- Разбор строки → кортеж цифр
- Декомпозиция целого → кортеж цифр (старшая цифра первой)
- Реконструкция целого из цифр с checked-арифметикой заданной ширины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый элемент результата лежит в [0, 9]
2. Порядок и длина источника сохраняются (без обрезки ведущих нулей)
3. Ошибка всегда сообщает ПЕРВЫЙ невалидный элемент (скан слева направо)
4. decompose(0) → (0,), никогда не пустой кортеж
5. Реконструкция переполняется только через Overflow

ФОРМУЛА РЕКОНСТРУКЦИИ:
    value = Σ digit_k × 10^k, k — позиция справа налево
    каждое 10^k, digit_k × 10^k и частичная сумма проверяются на ширину
"""

import logging
import operator
from collections.abc import Mapping, Set
from typing import Final, Iterable

from digit_sequence.errors import NegativeNumber, NonDigitChar, NonDigitNumber, Overflow
from digit_sequence.math.integer_widths import (
    EXPONENT_MAX,
    I128,
    U128,
    WidthLike,
    get_width,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

RADIX: Final[int] = 10

MIN_DIGIT: Final[int] = 0

MAX_DIGIT: Final[int] = RADIX - 1

Digits = tuple[int, ...]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_digit(value: int) -> bool:
    """Проверка, что число является цифрой 0-9."""
    return MIN_DIGIT <= value <= MAX_DIGIT


def validate_digits(source: Iterable[int]) -> Digits:
    """
    Валидация упорядоченного источника чисел.

    Принимает любые упорядоченные контейнеры целых: list, tuple, bytes,
    bytearray, memoryview, array.array, генераторы.

    Args:
        source: Упорядоченный источник целых чисел

    Returns:
        Кортеж цифр в исходном порядке

    Raises:
        NonDigitNumber: На первом элементе вне [0, 9]
        TypeError: Если источник — строка, неупорядоченная коллекция
            или элемент не является целым (bool тоже отвергается)

    Examples:
        >>> validate_digits([0, 3, 0])
        (0, 3, 0)
        >>> validate_digits(b"")
        ()
        >>> validate_digits([9, 3, 18])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NonDigitNumber: Non-digit number: 18
    """
    if isinstance(source, str):
        raise TypeError("Text must be parsed with parse_digits(), not validated as numbers")
    if isinstance(source, (Mapping, Set)):
        raise TypeError(f"Digits source must be ordered, got {type(source).__name__}")

    digits = []
    for element in source:
        # bool является подклассом int, но не цифрой
        if isinstance(element, bool):
            raise TypeError("Digit elements must be integers, got bool")
        try:
            value = operator.index(element)
        except TypeError:
            raise TypeError(
                f"Digit elements must be integers, got {type(element).__name__}"
            ) from None

        if not is_digit(value):
            logger.debug("Rejected non-digit number %d at index %d", value, len(digits))
            raise NonDigitNumber(value)

        digits.append(value)

    return tuple(digits)


# =============================================================================
# РАЗБОР СТРОКИ
# =============================================================================


def char_to_digit(char: str) -> int | None:
    """
    Интерпретация символа как десятичной цифры.

    Принимаются только ASCII '0'–'9': Unicode-цифры других письменностей,
    знаки, пробелы и разделители отвергаются.

    Returns:
        Цифра или None, если символ не является цифрой
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    return None


def parse_digits(text: str) -> Digits:
    """
    Разбор строки в кортеж цифр.

    Без обрезки пробелов и без обработки знака: '-' — обычный не-цифровой символ.

    Args:
        text: Исходная строка

    Returns:
        Кортеж цифр (пустая строка → пустой кортеж)

    Raises:
        NonDigitChar: На первом символе вне '0'–'9'

    Examples:
        >>> parse_digits("034")
        (0, 3, 4)
        >>> parse_digits("")
        ()
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    digits = []
    for char in text:
        digit = char_to_digit(char)
        if digit is None:
            logger.debug("Rejected non-digit char %r at index %d", char, len(digits))
            raise NonDigitChar(char)
        digits.append(digit)

    return tuple(digits)


def render_digits(digits: Iterable[int]) -> str:
    """Конкатенация цифр без разделителей (пустая последовательность → '')."""
    return "".join(chr(ord("0") + digit) for digit in digits)


# =============================================================================
# ДЕКОМПОЗИЦИЯ
# =============================================================================


def decompose(value: int) -> Digits:
    """
    Декомпозиция неотрицательного целого в цифры (старшая первой).

    Алгоритм: value % 10 → цифра, value //= 10, пока value != 0.
    Проверка окончания выполняется ПОСЛЕ извлечения цифры, поэтому
    для 0 возвращается (0,).

    Args:
        value: Неотрицательное целое

    Returns:
        Кортеж цифр без ведущих нулей

    Raises:
        NegativeNumber: Если value < 0

    Examples:
        >>> decompose(985)
        (9, 8, 5)
        >>> decompose(0)
        (0,)
    """
    value = operator.index(value)
    if value < 0:
        logger.debug("Rejected negative number %d", value)
        raise NegativeNumber(value)

    reversed_digits = []
    while True:
        value, digit = divmod(value, RADIX)
        reversed_digits.append(digit)
        if value == 0:
            break

    reversed_digits.reverse()
    return tuple(reversed_digits)


def _require_in_width(value: int, width_like: WidthLike, signed: bool) -> int:
    width = get_width(width_like)
    if width.signed != signed:
        kind = "signed" if signed else "unsigned"
        raise ValueError(f"Expected {kind} width, got {width}")

    value = operator.index(value)
    if not width.contains(value):
        raise ValueError(
            f"Value {value} out of range for {width} "
            f"[{width.min_value}, {width.max_value}]"
        )
    return value


def decompose_unsigned(value: int, width: WidthLike = U128) -> Digits:
    """
    Декомпозиция беззнакового целого заданной ширины.

    Для значения из диапазона ширины всегда успешна.

    Raises:
        ValueError: Если ширина знаковая или value вне её диапазона
    """
    value = _require_in_width(value, width, signed=False)
    return decompose(value)


def decompose_signed(value: int, width: WidthLike = I128) -> Digits:
    """
    Декомпозиция знакового целого заданной ширины.

    Raises:
        NegativeNumber: Если value < 0
        ValueError: Если ширина беззнаковая или value вне её диапазона
    """
    value = _require_in_width(value, width, signed=True)
    return decompose(value)


# =============================================================================
# РЕКОНСТРУКЦИЯ
# =============================================================================


def reconstruct(digits: Iterable[int], width: WidthLike = U128) -> int:
    """
    Реконструкция беззнакового целого из цифр (старшая первой).

    Обход от младшей цифры к старшей; для позиции k:
        1. k должно помещаться в u32, иначе Overflow
        2. power = checked_pow(10, k)
        3. term = checked_mul(digit, power)
        4. acc = checked_add(acc, term)

    Ведущие нули не меняют значение ([0, 3, 0] → 30), но степень десяти
    для их позиции тоже проверяется на ширину.

    Args:
        digits: Валидированные цифры (старшая первой)
        width: Целевая беззнаковая ширина

    Returns:
        Целое значение

    Raises:
        Overflow: Если степень, произведение или сумма не помещаются в ширину
        ValueError: Если ширина знаковая

    Examples:
        >>> reconstruct((0, 3, 0), "u8")
        30
        >>> reconstruct((2, 5, 6), "u8")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        Overflow: Overflow
    """
    width = get_width(width)
    if width.signed:
        raise ValueError(f"Target width must be unsigned, got {width}")

    result = 0
    for position, digit in enumerate(reversed(tuple(digits))):
        if position > EXPONENT_MAX:
            raise Overflow()

        try:
            magnitude = width.checked_pow(RADIX, position)
            term = width.checked_mul(digit, magnitude)
            result = width.checked_add(result, term)
        except Overflow:
            logger.debug("Overflow reconstructing %s at position %d", width, position)
            raise

    return result
