"""
Errors — Закрытая таксономия ошибок конверсий

Все ошибки конверсий наследуют DigitSequenceError:
- NonDigitChar: символ вне '0'–'9' (разбор строки)
- NonDigitNumber: число вне [0, 9] (валидация последовательности)
- NegativeNumber: отрицательное число (декомпозиция знакового целого)
- Overflow: результат или промежуточная величина не помещается в ширину

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая неуспешная операция поднимает ровно одну ошибку из таксономии
2. Частичный результат никогда не возвращается
3. Ошибки сравнимы по типу и payload

ПОРЯДОК:
    Сначала по виду (NonDigitChar < NonDigitNumber < NegativeNumber < Overflow),
    затем по payload внутри вида.
"""

from functools import total_ordering


@total_ordering
class DigitSequenceError(Exception):
    """Базовая ошибка конверсий DigitSequence."""

    _rank = 0

    def _payload(self) -> tuple:
        return ()

    def _sort_key(self) -> tuple:
        return (self._rank, self._payload())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSequenceError):
            return NotImplemented
        return type(self) is type(other) and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DigitSequenceError):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __reduce__(self):
        # copy, deepcopy и pickle пересоздают ошибку из payload
        return (type(self), self._payload())


class NonDigitChar(DigitSequenceError, ValueError):
    """
    Символ не является десятичной цифрой.

    Attributes:
        char: Первый отвергнутый символ (слева направо)
    """

    _rank = 1

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Non-digit char: {char}")

    def _payload(self) -> tuple:
        return (self.char,)

    def __repr__(self) -> str:
        return f"NonDigitChar({self.char!r})"


class NonDigitNumber(DigitSequenceError, ValueError):
    """
    Число не является цифрой 0-9.

    Attributes:
        value: Первое отвергнутое значение (без усечения)
    """

    _rank = 2

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Non-digit number: {value}")

    def _payload(self) -> tuple:
        return (self.value,)

    def __repr__(self) -> str:
        return f"NonDigitNumber({self.value})"


class NegativeNumber(DigitSequenceError, ValueError):
    """
    Отрицательное число не представимо последовательностью цифр.

    Attributes:
        value: Исходное отрицательное значение
    """

    _rank = 3

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Cannot convert negative number: {value}")

    def _payload(self) -> tuple:
        return (self.value,)

    def __repr__(self) -> str:
        return f"NegativeNumber({self.value})"


class Overflow(DigitSequenceError, OverflowError):
    """Результат или промежуточная величина не помещается в целевую ширину."""

    _rank = 4

    def __init__(self):
        super().__init__("Overflow")

    def __repr__(self) -> str:
        return "Overflow()"
