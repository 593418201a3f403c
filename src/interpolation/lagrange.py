"""
Lagrange Interpolation at Zero — Exact Constant Term Recovery

Вычисление f(0) — свободного члена единственного полинома степени k-1,
проходящего через k точек с попарно различными целыми x.

ФОРМУЛА:
    f(0) = Σ_i  y_i * Π_{j≠i} ( -x_j / (x_i - x_j) )

Для каждого терма i:
- numerator   = y_i * Π_{j≠i} (-x_j)        (BigInteger)
- denominator = Π_{j≠i} (x_i - x_j)          (BigInteger)
- терм прибавляется к сумме как ExactRational (сокращение после каждого сложения)
Финал: одно точное деление суммы; остаток обязан быть нулевым.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакого округления/усечения до финального шага
2. Совпадающие x → DuplicateAbscissa до начала вычислений
3. Результат зависит только от мультимножества точек, не от их порядка
4. Сложность: O(k²) умножений BigInteger
"""

from typing import Sequence

from src.core.domain.point import Point
from src.core.math.big_integer import ONE, BigInteger
from src.core.math.errors import DuplicateAbscissa
from src.core.math.rational import ExactRational


def check_distinct_abscissas(points: Sequence[Point]) -> None:
    """
    Raises:
        DuplicateAbscissa: если две точки имеют одинаковый x
    """
    seen: set[int] = set()
    for point in points:
        if point.x in seen:
            raise DuplicateAbscissa(point.x)
        seen.add(point.x)


def lagrange_term_at_zero(points: Sequence[Point], index: int) -> ExactRational:
    """
    Терм i суммы Лагранжа в точке 0: y_i * L_i(0).

    Args:
        points: Точки интерполяции (x попарно различны)
        index: Номер терма i

    Returns:
        y_i * Π_{j≠i} (-x_j) / Π_{j≠i} (x_i - x_j) как ExactRational
    """
    point_i = points[index]
    numerator = ONE
    denominator = ONE

    for j, point_j in enumerate(points):
        if j == index:
            continue
        # (0 - x_j) / (x_i - x_j)
        numerator = numerator * BigInteger.from_int(-point_j.x)
        denominator = denominator * BigInteger.from_int(point_i.x - point_j.x)

    return ExactRational(point_i.y * numerator, denominator)


def lagrange_at_zero(points: Sequence[Point]) -> BigInteger:
    """
    Точное значение f(0) по k точкам.

    Args:
        points: Ровно k точек (отбор выполняет вызывающий код)

    Returns:
        f(0) как BigInteger

    Raises:
        ValueError: если points пуст
        DuplicateAbscissa: если x не попарно различны
        NonIntegerResult: если f(0) не целое (повреждённые данные)

    Examples:
        >>> pts = [Point.of(1, 3), Point.of(2, 5), Point.of(3, 7)]
        >>> str(lagrange_at_zero(pts))
        '1'
    """
    if not points:
        raise ValueError("At least one point is required for interpolation")

    check_distinct_abscissas(points)

    total = ExactRational()
    for index in range(len(points)):
        total = total + lagrange_term_at_zero(points, index)

    return total.to_integer()
