"""
ExactRational — Exact Rational Arithmetic over BigInteger

Пара numerator/denominator без какого-либо floating-point приближения.

Используется интерполятором как промежуточное значение: термы Лагранжа
суммируются точно, а в конце сумма сводится к целому точным делением.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак хранится в числителе, знаменатель неотрицательный
2. Результат каждого сложения/умножения сокращён через GCD
   (без сокращения числитель и знаменатель растут комбинаторно по термам)
3. to_integer() выполняет настоящее long division: ненулевой остаток →
   NonIntegerResult, результат никогда не усекается
4. Нулевой знаменатель при конструировании НЕ проверяется (ответственность
   вызывающего), но to_integer() на нём падает с ZeroDivisionError
"""

from dataclasses import dataclass
from typing import Union

from src.core.math.big_integer import ONE, ZERO, BigInteger, as_big_integer, big_gcd
from src.core.math.errors import NonIntegerResult

RationalOperand = Union["ExactRational", BigInteger, int]


@dataclass(frozen=True, eq=False)
class ExactRational:
    """
    Точная дробь numerator / denominator.

    Immutable: операции возвращают новый экземпляр в несократимом виде.

    Examples:
        >>> half = ExactRational(BigInteger.from_int(1), BigInteger.from_int(2))
        >>> str(half + half)
        '1'
        >>> str(ExactRational(4, -6).reduced())
        '-2/3'
    """

    numerator: BigInteger = ZERO
    denominator: BigInteger = ONE

    def __post_init__(self) -> None:
        numerator = as_big_integer(self.numerator)
        denominator = as_big_integer(self.denominator)

        if denominator.negative:
            numerator = -numerator
            denominator = -denominator

        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    # -------------------------------------------------------------------------
    # Нормализация
    # -------------------------------------------------------------------------

    def reduced(self) -> "ExactRational":
        """
        Несократимая форма через GCD.

        Дробь с нулевым знаменателем возвращается как есть.
        """
        if self.denominator.is_zero:
            return self

        divisor = big_gcd(self.numerator, self.denominator)
        if divisor == ONE:
            return self

        # divisor > 0 и делит оба: усечённое частное точное
        numerator, _ = self.numerator.truncated_divmod(divisor)
        denominator, _ = self.denominator.truncated_divmod(divisor)
        return ExactRational(numerator, denominator)

    def is_integer(self) -> bool:
        if self.denominator.is_zero:
            return False
        return self.reduced().denominator == ONE

    def to_integer(self) -> BigInteger:
        """
        Точное сведение к целому: numerator / denominator.

        Returns:
            Частное, если деление точное

        Raises:
            NonIntegerResult: если остаток ненулевой
            ZeroDivisionError: если знаменатель равен нулю
        """
        if self.denominator.is_zero:
            raise ZeroDivisionError(f"Rational {self} has zero denominator")

        quotient, remainder = self.numerator.truncated_divmod(self.denominator)

        if not remainder.is_zero:
            raise NonIntegerResult(
                f"Rational {self} is not an integer: "
                f"{self.numerator} = {quotient} * {self.denominator} + {remainder}"
            )

        return quotient

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: RationalOperand) -> "ExactRational":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return ExactRational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        ).reduced()

    __radd__ = __add__

    def __mul__(self, other: RationalOperand) -> "ExactRational":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return ExactRational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        ).reduced()

    __rmul__ = __mul__

    def __neg__(self) -> "ExactRational":
        return ExactRational(-self.numerator, self.denominator)

    def __sub__(self, other: RationalOperand) -> "ExactRational":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        # Перекрёстное умножение: 1/2 == 2/4
        return self.numerator * other.denominator == other.numerator * self.denominator

    def __hash__(self) -> int:
        canonical = self.reduced()
        if canonical.denominator == ONE:
            return hash(canonical.numerator)
        return hash((canonical.numerator, canonical.denominator))

    def __str__(self) -> str:
        if self.denominator == ONE:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"ExactRational('{self.numerator}', '{self.denominator}')"


def _coerce(value: object) -> object:
    if isinstance(value, ExactRational):
        return value
    if isinstance(value, BigInteger) or (isinstance(value, int) and not isinstance(value, bool)):
        return ExactRational(as_big_integer(value))
    return NotImplemented
