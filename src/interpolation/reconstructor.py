"""Threshold Reconstructor — отбор k точек и восстановление секрета.

Контракт вызова интерполятора:
- точки сортируются по x, берутся первые k (детерминированный и
  воспроизводимый отбор)
- меньше k точек → мягкий отказ: статус INSUFFICIENT_POINTS,
  secret = 0, предупреждение в лог; процесс НЕ прерывается
- фатальные ошибки (DuplicateAbscissa, NonIntegerResult, InvalidDigit)
  пробрасываются вызывающему коду
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from src.core.domain.point import Point
from src.core.domain.share_set import ShareSet
from src.core.math.big_integer import ZERO, BigInteger
from src.interpolation.lagrange import lagrange_at_zero

logger = logging.getLogger(__name__)


class ReconstructionStatus(str, Enum):
    """Статус реконструкции."""
    OK = "OK"
    INSUFFICIENT_POINTS = "INSUFFICIENT_POINTS"


@dataclass(frozen=True)
class ReconstructionConfig:
    """Конфигурация реконструкции и отчёта.

    - preview_digits: сколько ведущих цифр каждого y показывать в отчёте
    - warn_on_count_mismatch: предупреждать, если объявленное n не совпадает
      с фактическим числом долей
    """
    preview_digits: int = 20
    warn_on_count_mismatch: bool = True

    def __post_init__(self) -> None:
        if self.preview_digits < 1:
            raise ValueError(f"preview_digits must be >= 1, got {self.preview_digits}")


@dataclass(frozen=True)
class ReconstructionResult:
    """Результат реконструкции."""

    secret: BigInteger
    status: ReconstructionStatus
    threshold: int
    points_available: int

    # Точки, реально использованные в интерполяции (пусто при отказе)
    points_used: tuple[Point, ...]

    # Для отладки
    details: str

    @property
    def succeeded(self) -> bool:
        return self.status == ReconstructionStatus.OK


def select_points(points: Sequence[Point], k: int) -> tuple[Point, ...]:
    """Первые k точек после сортировки по x."""
    return tuple(sorted(points, key=lambda point: point.x)[:k])


def find_constant_term(
    points: Sequence[Point],
    k: int,
) -> ReconstructionResult:
    """Восстановление f(0) по первым k точкам (в порядке возрастания x).

    Args:
        points: все доступные точки (любой порядок)
        k: порог — степень полинома k-1

    Returns:
        ReconstructionResult; при нехватке точек — secret = 0 и
        статус INSUFFICIENT_POINTS

    Raises:
        ValueError: если k < 1
        DuplicateAbscissa: если среди выбранных точек совпадают x
        NonIntegerResult: если f(0) не целое
    """
    if k < 1:
        raise ValueError(f"threshold k must be >= 1, got {k}")

    available = len(points)

    if available < k:
        details = f"Not enough points: need at least {k}, got {available}"
        logger.warning(details)
        return ReconstructionResult(
            secret=ZERO,
            status=ReconstructionStatus.INSUFFICIENT_POINTS,
            threshold=k,
            points_available=available,
            points_used=(),
            details=details,
        )

    selected = select_points(points, k)
    logger.debug("Interpolating at x=0 using abscissas %s", [point.x for point in selected])

    secret = lagrange_at_zero(selected)

    return ReconstructionResult(
        secret=secret,
        status=ReconstructionStatus.OK,
        threshold=k,
        points_available=available,
        points_used=selected,
        details=f"Constant term recovered from first {k} of {available} points",
    )


def reconstruct_share_set(
    share_set: ShareSet,
    config: Optional[ReconstructionConfig] = None,
) -> tuple[list[Point], ReconstructionResult]:
    """Полный цикл: декодирование долей → отбор → интерполяция.

    Returns:
        (decoded_points, result)

    Raises:
        InvalidDigit: некорректная доля (загрузка прерывается целиком)
        DuplicateAbscissa, NonIntegerResult: см. find_constant_term
    """
    config = config or ReconstructionConfig()

    declared = share_set.keys.n
    present = len(share_set.shares)
    if config.warn_on_count_mismatch and declared != present:
        logger.warning("Declared n=%d but %d shares are present", declared, present)

    points = share_set.decode_points()
    return points, find_constant_term(points, share_set.threshold)
