"""
DigitSequence — Неизменяемая последовательность десятичных цифр

Immutable Pydantic модель: упорядоченный кортеж цифр 0-9, старшая первой.
Последовательность НЕ канонизируется: ведущие нули сохраняются,
пустая последовательность — отдельное валидное значение (не равна [0]).

Создание (классметоды):
- empty()            → пустая последовательность
- from_unsigned()    → из беззнакового целого (всегда успешно)
- from_signed()      → из знакового целого (NegativeNumber для < 0)
- from_digits()      → из упорядоченного контейнера чисел (NonDigitNumber)
- from_text()        → из строки (NonDigitChar)
- from_json()        → из JSON-массива, например '[9,7,8,6]'

Сравнение: лексикографическое по цифрам, короче-с-общим-префиксом — меньше.
Сравнимо с DigitSequence, list, tuple, bytes, bytearray, memoryview.
"""

from typing import Any, Iterator

from pydantic import RootModel, ValidationInfo, field_validator

from digit_sequence.contracts.validators import DigitSequenceValidator
from digit_sequence.math.digits import (
    Digits,
    decompose_signed,
    decompose_unsigned,
    parse_digits,
    reconstruct,
    render_digits,
    validate_digits,
)
from digit_sequence.math.integer_widths import I128, U128, WidthLike

# Контейнеры, с которыми DigitSequence сравнивается поэлементно
_COMPARABLE_CONTAINERS = (list, tuple, bytes, bytearray, memoryview)

# Контракт JSON-формата, применяемый при model_validate_json
_WIRE_CONTRACT = DigitSequenceValidator()


def _as_digits(other: Any) -> Digits | None:
    if isinstance(other, DigitSequence):
        return other.root
    if isinstance(other, _COMPARABLE_CONTAINERS):
        return tuple(other)
    return None


# =============================================================================
# DIGIT SEQUENCE MODEL
# =============================================================================


class DigitSequence(RootModel[Digits]):
    """
    Последовательность десятичных цифр.

    Immutable модель (frozen=True): все конверсии создают новый экземпляр.
    Сериализуется как JSON-массив цифр: [9,7,8,6].

    Examples:
        >>> DigitSequence.from_unsigned(985)
        DigitSequence([9, 8, 5])
        >>> str(DigitSequence.from_text("09240"))
        '09240'
        >>> DigitSequence.from_text("90").to_unsigned("u128")
        90
    """

    root: Digits = ()

    model_config = {"frozen": True}  # Immutable

    @field_validator("root", mode="before")
    @classmethod
    def validate_root(cls, v: Any, info: ValidationInfo) -> Digits:
        """
        Каждый элемент должен быть цифрой 0-9.

        JSON-вход сначала проверяется контрактом digit_sequence.json:
        true/false и 1.0 отвергаются так же, как validate_digits их отвергает.
        """
        if info.mode == "json":
            violation = _WIRE_CONTRACT.describe_violation(v)
            if violation is not None:
                raise ValueError(violation)

        try:
            return validate_digits(v)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "DigitSequence":
        """Пустая последовательность (длина 0, не равна [0])."""
        return cls()

    @classmethod
    def from_digits(cls, source) -> "DigitSequence":
        """
        Создание из упорядоченного контейнера чисел.

        Args:
            source: list, tuple, bytes, bytearray, memoryview или любой
                итерируемый источник целых

        Raises:
            NonDigitNumber: На первом элементе вне [0, 9]
        """
        return cls.model_construct(validate_digits(source))

    @classmethod
    def from_text(cls, text: str) -> "DigitSequence":
        """
        Разбор строки из символов '0'–'9'.

        Raises:
            NonDigitChar: На первом символе, не являющемся цифрой
        """
        return cls.model_construct(parse_digits(text))

    @classmethod
    def from_unsigned(cls, value: int, width: WidthLike = U128) -> "DigitSequence":
        """
        Декомпозиция беззнакового целого (0 → [0]).

        Raises:
            ValueError: Если value вне диапазона ширины
        """
        return cls.model_construct(decompose_unsigned(value, width))

    @classmethod
    def from_signed(cls, value: int, width: WidthLike = I128) -> "DigitSequence":
        """
        Декомпозиция знакового целого.

        Raises:
            NegativeNumber: Если value < 0
            ValueError: Если value вне диапазона ширины
        """
        return cls.model_construct(decompose_signed(value, width))

    @classmethod
    def from_json(cls, data: str | bytes) -> "DigitSequence":
        """
        Десериализация из JSON-массива цифр.

        Формат проверяется контрактом contracts/schema/digit_sequence.json.

        Raises:
            pydantic.ValidationError: Если JSON не является массивом цифр 0-9
        """
        return cls.model_validate_json(data)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_unsigned(self, width: WidthLike = U128) -> int:
        """
        Реконструкция беззнакового целого заданной ширины.

        Raises:
            Overflow: Если значение не помещается в ширину
        """
        return reconstruct(self.root, width)

    def to_list(self) -> list[int]:
        return list(self.root)

    def to_json(self) -> str:
        return self.model_dump_json()

    # -------------------------------------------------------------------------
    # Протокол последовательности
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self.root

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        # Новый итератор на каждый вызов: обход повторяем
        return iter(self.root)

    def iter_consuming(self) -> Iterator[int]:
        """
        Однократный итератор по цифрам.

        После исчерпания повторно не выдаёт цифр; для повторного обхода
        используйте iter(sequence).
        """
        yield from self.root

    def __reversed__(self) -> Iterator[int]:
        return reversed(self.root)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self).model_construct(self.root[index])
        return self.root[index]

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        digits = _as_digits(other)
        if digits is None:
            return NotImplemented
        return self.root == digits

    def __hash__(self) -> int:
        """
        Hash кортежа цифр.

        Согласован с равенством для DigitSequence и tuple. Равенство с bytes и
        memoryview поэлементное, но их hash другой: как ключи dict/set
        такие значения не взаимозаменяемы с DigitSequence.
        """
        return hash(self.root)

    def __lt__(self, other: object) -> bool:
        digits = _as_digits(other)
        if digits is None:
            return NotImplemented
        return self.root < digits

    def __le__(self, other: object) -> bool:
        digits = _as_digits(other)
        if digits is None:
            return NotImplemented
        return self.root <= digits

    def __gt__(self, other: object) -> bool:
        digits = _as_digits(other)
        if digits is None:
            return NotImplemented
        return self.root > digits

    def __ge__(self, other: object) -> bool:
        digits = _as_digits(other)
        if digits is None:
            return NotImplemented
        return self.root >= digits

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return render_digits(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.root)})"
