"""Interpolation — точное восстановление свободного члена полинома.

- Лагранж в точке 0 на ExactRational (без floating-point)
- Threshold-отбор: сортировка по x, первые k точек
- Мягкий отказ при нехватке точек
"""

from .lagrange import (
    check_distinct_abscissas,
    lagrange_at_zero,
    lagrange_term_at_zero,
)
from .reconstructor import (
    ReconstructionConfig,
    ReconstructionResult,
    ReconstructionStatus,
    find_constant_term,
    reconstruct_share_set,
    select_points,
)
from .report import format_report, preview

__all__ = [
    "check_distinct_abscissas",
    "lagrange_at_zero",
    "lagrange_term_at_zero",
    "ReconstructionConfig",
    "ReconstructionResult",
    "ReconstructionStatus",
    "find_constant_term",
    "reconstruct_share_set",
    "select_points",
    "format_report",
    "preview",
]
