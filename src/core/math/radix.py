"""
Radix Decoder — Base-N String to BigInteger

Декодирование строки цифр в произвольной системе счисления (2..36)
в BigInteger.

Алфавит цифр (регистр букв не важен):
    '0'-'9' → 0-9
    'A'-'Z' / 'a'-'z' → 10-35

Алгоритм: проход справа налево с растущим позиционным множителем
    result = result + multiplier * digit
    multiplier = multiplier * base
Вся арифметика точная: длинные строки в base 36 далеко выходят
за диапазон машинного целого.
"""

from typing import Final, Optional

from src.core.math.big_integer import ONE, ZERO, BigInteger
from src.core.math.errors import InvalidDigit

# =============================================================================
# RADIX-ПАРАМЕТРЫ
# =============================================================================

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36


def validate_radix(base: int) -> None:
    """
    Raises:
        TypeError: если base не int
        ValueError: если base вне [MIN_RADIX, MAX_RADIX]
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be int, got {type(base).__name__}")

    if base < MIN_RADIX or base > MAX_RADIX:
        raise ValueError(f"base must be in [{MIN_RADIX}, {MAX_RADIX}], got {base}")


def digit_value(character: str) -> Optional[int]:
    """
    Значение одного символа-цифры.

    Returns:
        0..35 для ASCII-цифр и латинских букв, None для остальных символов

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("f")
        15
        >>> digit_value("Z")
        35
        >>> digit_value("!") is None
        True
    """
    if "0" <= character <= "9":
        return ord(character) - ord("0")
    if "A" <= character <= "Z":
        return ord(character) - ord("A") + 10
    if "a" <= character <= "z":
        return ord(character) - ord("a") + 10
    return None


def decode_radix(digits: str, base: int) -> BigInteger:
    """
    Декодирование строки цифр в системе счисления base.

    Пустая строка декодируется в ноль.

    Args:
        digits: Строка цифр (без знака и разделителей)
        base: Основание системы счисления [2, 36]

    Returns:
        Точное значение как BigInteger

    Raises:
        InvalidDigit: символ вне алфавита или значение >= base
        ValueError: base вне [2, 36]

    Examples:
        >>> str(decode_radix("FF", 16))
        '255'
        >>> str(decode_radix("1010", 2))
        '10'
        >>> str(decode_radix("Z", 36))
        '35'
    """
    validate_radix(base)

    result = ZERO
    multiplier = ONE
    radix = BigInteger.from_int(base)

    for position in range(len(digits) - 1, -1, -1):
        character = digits[position]
        value = digit_value(character)

        if value is None or value >= base:
            raise InvalidDigit(character, position, base)

        if value:
            result = result + multiplier * BigInteger.from_int(value)
        multiplier = multiplier * radix

    return result
