"""
BigInteger — Arbitrary-Precision Signed Integer

Знаковое целое произвольной точности на limbs фиксированного radix.

Представление:
- negative: флаг знака
- limbs: кортеж limbs в порядке least-significant-first,
  каждый limb в диапазоне [0, LIMB_BASE)

Операции (все возвращают НОВОЕ значение, side effects отсутствуют):
- сложение / вычитание через сравнение модулей и carry/borrow по limbs
- умножение schoolbook (двойной цикл по парам limbs с переносом)
- деление с остатком (long division по limbs, бинарный поиск цифры частного)
- сравнение, отрицание, десятичная строка, saturating-конверсия в int64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет ведущих (most-significant) нулевых limbs, кроме канонического нуля (0,)
2. Ноль никогда не бывает отрицательным
3. Значение immutable (frozen dataclass)
4. Переполнение невозможно: результат растёт по числу limbs
"""

from dataclasses import dataclass
from typing import Final, Union

from src.core.math.errors import InvalidFormat

# =============================================================================
# LIMB-ПАРАМЕТРЫ
# =============================================================================

# Radix одного limb: произведение двух limbs (< 10^18) помещается в int64 accumulator
LIMB_BASE: Final[int] = 10**9

# Количество десятичных цифр в одном limb (ширина zero-padding в строке)
LIMB_DIGITS: Final[int] = 9

# Границы машинного целого для saturating-конверсии
INT64_MAX: Final[int] = 2**63 - 1
INT64_MIN: Final[int] = -(2**63)

_DECIMAL_DIGITS: Final[frozenset] = frozenset("0123456789")

Limbs = tuple[int, ...]


# =============================================================================
# ОПЕРАЦИИ НАД МОДУЛЯМИ (limbs без знака)
# =============================================================================


def _trim(limbs: list[int]) -> Limbs:
    """Удаление ведущих нулевых limbs с сохранением канонического нуля."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        return (0,)
    return tuple(limbs)


def _is_zero_magnitude(a: Limbs) -> bool:
    return len(a) == 1 and a[0] == 0


def _compare_magnitude(a: Limbs, b: Limbs) -> int:
    """
    Сравнение модулей: сначала по числу limbs, затем limb за limb
    начиная со старшего.

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def _add_magnitude(a: Limbs, b: Limbs) -> Limbs:
    result = []
    carry = 0

    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % LIMB_BASE)
        carry = total // LIMB_BASE

    if carry:
        result.append(carry)

    return _trim(result)


def _sub_magnitude(a: Limbs, b: Limbs) -> Limbs:
    """|a| - |b|, требует |a| >= |b|."""
    result = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]

        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    return _trim(result)


def _mul_magnitude(a: Limbs, b: Limbs) -> Limbs:
    """Schoolbook-умножение: не более len(a) + len(b) limbs."""
    if _is_zero_magnitude(a) or _is_zero_magnitude(b):
        return (0,)

    result = [0] * (len(a) + len(b))

    for i, a_limb in enumerate(a):
        if a_limb == 0:
            continue

        carry = 0
        for j, b_limb in enumerate(b):
            current = result[i + j] + a_limb * b_limb + carry
            result[i + j] = current % LIMB_BASE
            carry = current // LIMB_BASE

        k = i + len(b)
        while carry:
            current = result[k] + carry
            result[k] = current % LIMB_BASE
            carry = current // LIMB_BASE
            k += 1

    return _trim(result)


def _mul_small(a: Limbs, factor: int) -> Limbs:
    """Умножение модуля на один limb (0 <= factor < LIMB_BASE)."""
    if factor == 0 or _is_zero_magnitude(a):
        return (0,)

    result = []
    carry = 0
    for limb in a:
        current = limb * factor + carry
        result.append(current % LIMB_BASE)
        carry = current // LIMB_BASE

    if carry:
        result.append(carry)

    return _trim(result)


def _divmod_small(a: Limbs, divisor: int) -> tuple[Limbs, int]:
    """Деление модуля на один limb (0 < divisor < LIMB_BASE)."""
    quotient = [0] * len(a)
    remainder = 0

    for i in range(len(a) - 1, -1, -1):
        current = remainder * LIMB_BASE + a[i]
        quotient[i] = current // divisor
        remainder = current % divisor

    return _trim(quotient), remainder


def _shift_in(remainder: Limbs, limb: int) -> Limbs:
    """remainder * LIMB_BASE + limb."""
    if _is_zero_magnitude(remainder):
        return (limb,)
    return (limb,) + remainder


def _divmod_magnitude(a: Limbs, b: Limbs) -> tuple[Limbs, Limbs]:
    """
    Long division модулей: (|a| // |b|, |a| % |b|).

    Частное строится limb за limb начиная со старшего. Цифра частного
    ищется бинарным поиском между нижней и верхней оценками по старшим
    limbs остатка и старшему limb делителя.

    Raises:
        ZeroDivisionError: если |b| == 0
    """
    if _is_zero_magnitude(b):
        raise ZeroDivisionError("BigInteger division by zero")

    if _compare_magnitude(a, b) < 0:
        return (0,), a

    if len(b) == 1:
        quotient, remainder = _divmod_small(a, b[0])
        return quotient, (remainder,)

    quotient = [0] * len(a)
    remainder: Limbs = (0,)
    divisor_top = b[-1]

    for i in range(len(a) - 1, -1, -1):
        remainder = _shift_in(remainder, a[i])

        if _compare_magnitude(remainder, b) < 0:
            continue

        # remainder < b * LIMB_BASE, поэтому len(remainder) <= len(b) + 1
        if len(remainder) > len(b):
            leading = remainder[-1] * LIMB_BASE + remainder[-2]
        else:
            leading = remainder[-1]

        # b лежит в [top * B^(m-1), (top + 1) * B^(m-1)), отсюда границы цифры
        low = min(leading // (divisor_top + 1), LIMB_BASE - 1)
        high = min(leading // divisor_top, LIMB_BASE - 1)
        while low < high:
            middle = (low + high + 1) // 2
            if _compare_magnitude(_mul_small(b, middle), remainder) <= 0:
                low = middle
            else:
                high = middle - 1

        quotient[i] = low
        remainder = _sub_magnitude(remainder, _mul_small(b, low))

    return _trim(quotient), remainder


# =============================================================================
# BIG INTEGER
# =============================================================================


@dataclass(frozen=True, eq=False)
class BigInteger:
    """
    Знаковое целое произвольной точности.

    Immutable: все операции возвращают новый экземпляр.
    Конструирование: BigInteger.from_int(), BigInteger.from_string()
    или результат арифметической операции.

    Examples:
        >>> str(BigInteger.from_string("123456789012345678901234567890"))
        '123456789012345678901234567890'
        >>> str(BigInteger.from_int(-7) * BigInteger.from_int(6))
        '-42'
    """

    negative: bool = False
    limbs: Limbs = (0,)

    def __post_init__(self) -> None:
        limbs = tuple(self.limbs)
        if not limbs:
            raise ValueError("limbs cannot be empty")

        for limb in limbs:
            if isinstance(limb, bool) or not isinstance(limb, int):
                raise TypeError(f"limb must be int, got {type(limb).__name__}")
            if limb < 0 or limb >= LIMB_BASE:
                raise ValueError(f"limb must be in [0, {LIMB_BASE}), got {limb}")

        limbs = _trim(list(limbs))
        object.__setattr__(self, "limbs", limbs)
        object.__setattr__(self, "negative", bool(self.negative) and not _is_zero_magnitude(limbs))

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Точное значение из машинного целого.

        Raises:
            TypeError: если value не int (bool не принимается)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInteger.from_int expects int, got {type(value).__name__}")

        negative = value < 0
        magnitude = -value if negative else value

        limbs = []
        while magnitude > 0:
            limbs.append(magnitude % LIMB_BASE)
            magnitude //= LIMB_BASE

        return cls(negative=negative, limbs=tuple(limbs) or (0,))

    @classmethod
    def from_string(cls, text: str) -> "BigInteger":
        """
        Разбор десятичной строки: необязательный '-' и ASCII-цифры.

        Пустая строка трактуется как ноль. Ведущие нули и "-0"
        канонизируются.

        Raises:
            InvalidFormat: пустая последовательность цифр после '-'
                или любой нецифровой символ
            TypeError: если text не str

        Examples:
            >>> str(BigInteger.from_string("-000123"))
            '-123'
            >>> str(BigInteger.from_string("-0"))
            '0'
        """
        if not isinstance(text, str):
            raise TypeError(f"BigInteger.from_string expects str, got {type(text).__name__}")

        if text == "":
            return cls()

        negative = text.startswith("-")
        digits = text[1:] if negative else text

        if not digits:
            raise InvalidFormat(f"No digits after sign in {text!r}")

        for position, character in enumerate(digits):
            if character not in _DECIMAL_DIGITS:
                raise InvalidFormat(
                    f"Invalid character {character!r} at position "
                    f"{position + int(negative)} in {text!r}"
                )

        # Чанки по LIMB_DIGITS цифр справа налево
        limbs = []
        for end in range(len(digits), 0, -LIMB_DIGITS):
            start = max(0, end - LIMB_DIGITS)
            limbs.append(int(digits[start:end]))

        return cls(negative=negative, limbs=tuple(limbs))

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return _is_zero_magnitude(self.limbs)

    @property
    def sign(self) -> int:
        """-1, 0 или +1."""
        if self.is_zero:
            return 0
        return -1 if self.negative else 1

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInteger":
        if self.is_zero:
            return self
        return BigInteger(negative=not self.negative, limbs=self.limbs)

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        if not self.negative:
            return self
        return BigInteger(negative=False, limbs=self.limbs)

    def __add__(self, other: Union["BigInteger", int]) -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if self.negative == other.negative:
            return BigInteger(self.negative, _add_magnitude(self.limbs, other.limbs))

        # Разные знаки: вычитание меньшего модуля из большего
        order = _compare_magnitude(self.limbs, other.limbs)
        if order == 0:
            return ZERO
        if order > 0:
            return BigInteger(self.negative, _sub_magnitude(self.limbs, other.limbs))
        return BigInteger(other.negative, _sub_magnitude(other.limbs, self.limbs))

    __radd__ = __add__

    def __sub__(self, other: Union["BigInteger", int]) -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: int) -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: Union["BigInteger", int]) -> "BigInteger":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return BigInteger(
            self.negative != other.negative,
            _mul_magnitude(self.limbs, other.limbs),
        )

    __rmul__ = __mul__

    def truncated_divmod(self, other: Union["BigInteger", int]) -> tuple["BigInteger", "BigInteger"]:
        """
        Деление с усечением частного к нулю.

        Остаток имеет знак делимого: self == q * other + r, |r| < |other|.

        Raises:
            ZeroDivisionError: если other == 0

        Examples:
            >>> q, r = BigInteger.from_int(-7).truncated_divmod(2)
            >>> (str(q), str(r))
            ('-3', '-1')
        """
        divisor = as_big_integer(other)
        quotient, remainder = _divmod_magnitude(self.limbs, divisor.limbs)
        return (
            BigInteger(self.negative != divisor.negative, quotient),
            BigInteger(self.negative, remainder),
        )

    def __divmod__(self, other: Union["BigInteger", int]) -> tuple["BigInteger", "BigInteger"]:
        """Floor-деление с семантикой Python int: остаток имеет знак делителя."""
        divisor = _coerce(other)
        if divisor is NotImplemented:
            return NotImplemented

        quotient, remainder = self.truncated_divmod(divisor)
        if not remainder.is_zero and remainder.negative != divisor.negative:
            quotient = quotient - ONE
            remainder = remainder + divisor
        return quotient, remainder

    def __floordiv__(self, other: Union["BigInteger", int]) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: Union["BigInteger", int]) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: Union["BigInteger", int]) -> int:
        """
        Трёхзначное сравнение.

        Порядок: знак (отрицательные меньше), затем число limbs, затем
        limbs от старшего к младшему; для двух отрицательных — инверсия.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        other = as_big_integer(other)

        if self.negative != other.negative:
            return -1 if self.negative else 1

        order = _compare_magnitude(self.limbs, other.limbs)
        return -order if self.negative else order

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.negative == other.negative and self.limbs == other.limbs

    def __lt__(self, other: Union["BigInteger", int]) -> bool:
        if _coerce(other) is NotImplemented:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Union["BigInteger", int]) -> bool:
        if _coerce(other) is NotImplemented:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Union["BigInteger", int]) -> bool:
        if _coerce(other) is NotImplemented:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Union["BigInteger", int]) -> bool:
        if _coerce(other) is NotImplemented:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Согласовано с __eq__ для int-операндов
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        result = 0
        for limb in reversed(self.limbs):
            result = result * LIMB_BASE + limb
        return -result if self.negative else result

    def to_machine_int(self) -> int:
        """
        Конверсия в signed int64 с насыщением.

        Значения вне [INT64_MIN, INT64_MAX] НЕ оборачиваются, а
        ограничиваются соответствующей границей (документированная потеря).

        Examples:
            >>> BigInteger.from_int(42).to_machine_int()
            42
            >>> BigInteger.from_string("99999999999999999999").to_machine_int()
            9223372036854775807
        """
        if self > _INT64_MAX_BIG:
            return INT64_MAX
        if self < _INT64_MIN_BIG:
            return INT64_MIN
        return int(self)

    def __str__(self) -> str:
        head = str(self.limbs[-1])
        tail = "".join(f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(self.limbs[:-1]))
        return ("-" if self.negative else "") + head + tail

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"


# =============================================================================
# КОНСТАНТЫ И УТИЛИТЫ
# =============================================================================

ZERO: Final[BigInteger] = BigInteger()
ONE: Final[BigInteger] = BigInteger(negative=False, limbs=(1,))

_INT64_MAX_BIG: Final[BigInteger] = BigInteger.from_int(INT64_MAX)
_INT64_MIN_BIG: Final[BigInteger] = BigInteger.from_int(INT64_MIN)


def _coerce(value: object) -> object:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return NotImplemented


def as_big_integer(value: Union[BigInteger, int]) -> BigInteger:
    """
    Приведение BigInteger | int к BigInteger.

    Raises:
        TypeError: для остальных типов
    """
    result = _coerce(value)
    if result is NotImplemented:
        raise TypeError(f"Expected BigInteger or int, got {type(value).__name__}")
    return result


def big_gcd(a: Union[BigInteger, int], b: Union[BigInteger, int]) -> BigInteger:
    """
    Наибольший общий делитель (алгоритм Евклида), всегда неотрицательный.

    gcd(0, 0) == 0.

    Examples:
        >>> str(big_gcd(252, -105))
        '21'
    """
    a = abs(as_big_integer(a))
    b = abs(as_big_integer(b))

    while not b.is_zero:
        a, b = b, a % b

    return a
