"""
Тесты для таксономии ошибок

Проверяет:
1. Текстовые сообщения ошибок
2. Payload (символ / значение)
3. Иерархию (ValueError / OverflowError)
4. Сравнение ошибок по типу и payload
5. Порядок ошибок и копирование
"""

import copy
import pickle

import pytest

from digit_sequence import (
    DigitSequenceError,
    NegativeNumber,
    NonDigitChar,
    NonDigitNumber,
    Overflow,
)


class TestMessages:
    """Тесты текстового представления ошибок"""

    def test_non_digit_number(self) -> None:
        assert str(NonDigitNumber(90)) == "Non-digit number: 90"

    def test_non_digit_char(self) -> None:
        assert str(NonDigitChar("X")) == "Non-digit char: X"

    def test_negative_number(self) -> None:
        assert str(NegativeNumber(-90)) == "Cannot convert negative number: -90"

    def test_overflow(self) -> None:
        assert str(Overflow()) == "Overflow"

    def test_repr(self) -> None:
        assert repr(NonDigitChar("x")) == "NonDigitChar('x')"
        assert repr(NonDigitNumber(18)) == "NonDigitNumber(18)"
        assert repr(NegativeNumber(-4)) == "NegativeNumber(-4)"
        assert repr(Overflow()) == "Overflow()"


class TestPayload:
    """Тесты payload ошибок"""

    def test_payload_attributes(self) -> None:
        assert NonDigitChar("x").char == "x"
        assert NonDigitNumber(18).value == 18
        assert NegativeNumber(-4).value == -4

    def test_wide_values_are_not_truncated(self) -> None:
        """Payload хранит значение целиком"""
        assert NonDigitNumber(2**100).value == 2**100
        assert NegativeNumber(-(2**127)).value == -(2**127)


class TestHierarchy:
    """Тесты иерархии исключений"""

    @pytest.mark.parametrize(
        "error",
        [NonDigitChar("x"), NonDigitNumber(18), NegativeNumber(-4), Overflow()],
    )
    def test_common_base(self, error: DigitSequenceError) -> None:
        assert isinstance(error, DigitSequenceError)

    def test_value_errors(self) -> None:
        """Ошибки входных данных — ValueError"""
        assert isinstance(NonDigitChar("x"), ValueError)
        assert isinstance(NonDigitNumber(18), ValueError)
        assert isinstance(NegativeNumber(-4), ValueError)

    def test_overflow_is_overflow_error(self) -> None:
        assert isinstance(Overflow(), OverflowError)
        assert not isinstance(Overflow(), ValueError)


class TestEquality:
    """Тесты сравнения ошибок"""

    def test_same_kind_same_payload_equal(self) -> None:
        assert NonDigitNumber(18) == NonDigitNumber(18)
        assert NonDigitChar("x") == NonDigitChar("x")
        assert Overflow() == Overflow()

    def test_different_payload_not_equal(self) -> None:
        assert NonDigitNumber(18) != NonDigitNumber(20)
        assert NegativeNumber(-4) != NegativeNumber(-5)

    def test_different_kind_not_equal(self) -> None:
        """NonDigitNumber(4) и NegativeNumber(4) — разные ошибки"""
        assert NonDigitNumber(4) != NegativeNumber(4)

    def test_hashable(self) -> None:
        errors = {NonDigitNumber(18), NonDigitNumber(18), Overflow(), Overflow()}
        assert len(errors) == 2


class TestOrdering:
    """Тесты порядка ошибок: вид, затем payload"""

    def test_kinds_ordered(self) -> None:
        assert NonDigitChar("x") < NonDigitNumber(0) < NegativeNumber(-1) < Overflow()

    def test_payload_orders_within_kind(self) -> None:
        assert NonDigitNumber(10) < NonDigitNumber(18)
        assert NegativeNumber(-5) < NegativeNumber(-4)
        assert NonDigitChar("a") <= NonDigitChar("a")

    def test_sorted(self) -> None:
        errors = [Overflow(), NonDigitNumber(20), NonDigitChar("-"), NonDigitNumber(18)]

        assert sorted(errors) == [
            NonDigitChar("-"),
            NonDigitNumber(18),
            NonDigitNumber(20),
            Overflow(),
        ]

    def test_not_comparable_with_other_exceptions(self) -> None:
        with pytest.raises(TypeError):
            NonDigitNumber(18) < ValueError("18")  # noqa: B015


class TestCopy:
    """Ошибки копируются и сериализуются pickle с сохранением payload"""

    @pytest.mark.parametrize(
        "error",
        [NonDigitChar("x"), NonDigitNumber(2**100), NegativeNumber(-4), Overflow()],
    )
    def test_copy_and_pickle(self, error: DigitSequenceError) -> None:
        for clone in (copy.copy(error), copy.deepcopy(error), pickle.loads(pickle.dumps(error))):
            assert clone == error
            assert clone is not error
            assert str(clone) == str(error)
