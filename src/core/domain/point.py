"""
Point — точка (x, y) неизвестного полинома

x — малое машинное целое (абсцисса доли), y — BigInteger (значение доли).
Любые k точек с попарно различными x однозначно задают полином степени k-1.
"""

from dataclasses import dataclass
from typing import Union

from src.core.math.big_integer import BigInteger, as_big_integer


@dataclass(frozen=True)
class Point:
    """Immutable точка интерполяции."""

    x: int
    y: BigInteger

    def __post_init__(self) -> None:
        if isinstance(self.x, bool) or not isinstance(self.x, int):
            raise TypeError(f"x must be int, got {type(self.x).__name__}")
        object.__setattr__(self, "y", as_big_integer(self.y))

    @classmethod
    def of(cls, x: int, y: Union[BigInteger, int, str]) -> "Point":
        """Удобный конструктор: y как BigInteger, int или десятичная строка."""
        if isinstance(y, str):
            return cls(x, BigInteger.from_string(y))
        return cls(x, as_big_integer(y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
