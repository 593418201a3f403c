"""
Exact Arithmetic Errors — иерархия исключений точной арифметики

Все фатальные ошибки ядра наследуются от ExactArithmeticError и
одновременно от соответствующего builtin-исключения (ValueError /
ArithmeticError), чтобы вызывающий код мог ловить любой из уровней.

Мягкий отказ "недостаточно точек" исключением НЕ является:
он возвращается как статус результата реконструкции.
"""


class ExactArithmeticError(Exception):
    """Базовое исключение точной арифметики и интерполяции."""

    pass


class InvalidFormat(ExactArithmeticError, ValueError):
    """
    Некорректная десятичная строка для BigInteger.

    Возникает при пустой последовательности цифр после знака или
    при любом символе, отличном от ASCII-цифры.
    """

    pass


class InvalidDigit(ExactArithmeticError, ValueError):
    """
    Символ вне диапазона [0, base) при декодировании base-N строки.

    Фатально для декодирования точки: пропуск точки может сделать
    threshold-реконструкцию неверной, поэтому загрузка прерывается целиком.
    """

    def __init__(self, character: str, position: int, base: int):
        self.character = character
        self.position = position
        self.base = base
        super().__init__(
            f"Invalid digit {character!r} at position {position} for base {base}"
        )


class DuplicateAbscissa(ExactArithmeticError, ValueError):
    """Две выбранные точки имеют одинаковый x: знаменатель (x_i - x_j) = 0."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate abscissa x={x}: interpolation points must be distinct")


class NonIntegerResult(ExactArithmeticError, ArithmeticError):
    """
    Ненулевой остаток при финальном точном делении.

    Для корректных входов (целочисленный полином, целые x и y) никогда
    не возникает: сигнализирует о повреждённых данных или дефекте логики.
    Результат НИКОГДА не усекается молча.
    """

    pass
