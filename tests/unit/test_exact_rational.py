"""
Тесты для ExactRational — точная рациональная арифметика

Проверяет:
1. Нормализацию знака и сокращение через GCD
2. Сложение/умножение без потери точности
3. Точное сведение к целому (NonIntegerResult вместо усечения)
"""

import pytest

from src.core.math.big_integer import ONE, ZERO, BigInteger
from src.core.math.errors import NonIntegerResult
from src.core.math.rational import ExactRational


def frac(numerator: int, denominator: int = 1) -> ExactRational:
    return ExactRational(BigInteger.from_int(numerator), BigInteger.from_int(denominator))


class TestNormalization:
    """Знак в числителе, несократимая форма"""

    def test_default_is_zero(self) -> None:
        value = ExactRational()
        assert value.numerator == ZERO
        assert value.denominator == ONE

    def test_sign_moves_to_numerator(self) -> None:
        value = frac(3, -4)
        assert value.numerator == BigInteger.from_int(-3)
        assert value.denominator == BigInteger.from_int(4)

        value = frac(-3, -4)
        assert value.numerator == BigInteger.from_int(3)
        assert value.denominator == BigInteger.from_int(4)

    def test_reduced(self) -> None:
        value = frac(4, -6).reduced()
        assert str(value) == "-2/3"

        assert str(frac(10, 5).reduced()) == "2"
        assert str(frac(0, 7).reduced()) == "0"

    def test_reduced_keeps_zero_denominator(self) -> None:
        value = frac(3, 0)
        assert value.reduced() is value

    def test_int_components_coerced(self) -> None:
        value = ExactRational(6, 9)
        assert isinstance(value.numerator, BigInteger)
        assert str(value.reduced()) == "2/3"


class TestArithmetic:
    def test_add_reduces(self) -> None:
        """1/2 + 1/2 = 1"""
        result = frac(1, 2) + frac(1, 2)
        assert result.numerator == ONE
        assert result.denominator == ONE

    def test_add_mixed_signs(self) -> None:
        assert str(frac(1, 3) + frac(-1, 2)) == "-1/6"

    def test_mul_reduces(self) -> None:
        result = frac(2, 3) * frac(9, 4)
        assert str(result) == "3/2"

    def test_sub_and_neg(self) -> None:
        assert str(frac(1, 2) - frac(1, 3)) == "1/6"
        assert str(-frac(1, 2)) == "-1/2"

    def test_int_operands(self) -> None:
        assert frac(1, 2) + 1 == frac(3, 2)
        assert 2 * frac(1, 4) == frac(1, 2)

    def test_telescoping_sum_stays_small(self) -> None:
        """Σ 1/(k(k+1)) = n/(n+1); сокращение на каждом шаге"""
        total = ExactRational()
        for k in range(1, 31):
            total = total + frac(1, k * (k + 1))
            assert total.denominator == BigInteger.from_int(k + 1)
        assert str(total) == "30/31"

    def test_huge_components(self) -> None:
        big = 10**50
        result = frac(big, 3) * frac(3, big)
        assert result == ONE


class TestComparison:
    def test_cross_multiplication_equality(self) -> None:
        assert frac(1, 2) == frac(2, 4)
        assert frac(1, 2) != frac(1, 3)
        assert frac(4, 2) == 2

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(frac(1, 2)) == hash(frac(2, 4))
        assert hash(frac(6, 3)) == hash(BigInteger.from_int(2))


class TestToInteger:
    def test_exact_division(self) -> None:
        assert frac(42, 6).to_integer() == BigInteger.from_int(7)
        assert frac(-42, 6).to_integer() == BigInteger.from_int(-7)
        assert frac(0, 5).to_integer() == ZERO

    def test_non_integer_raises(self) -> None:
        """Ненулевой остаток никогда не усекается"""
        with pytest.raises(NonIntegerResult, match="not an integer"):
            frac(7, 2).to_integer()

    def test_non_integer_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            frac(-1, 3).to_integer()

    def test_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            frac(1, 0).to_integer()

    def test_is_integer(self) -> None:
        assert frac(8, 4).is_integer()
        assert not frac(8, 3).is_integer()
        assert not frac(8, 0).is_integer()
