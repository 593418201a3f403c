"""Текстовый отчёт о реконструкции."""

from typing import Optional, Sequence

from src.core.domain.point import Point
from src.core.domain.share_set import ShareSet
from src.interpolation.reconstructor import ReconstructionConfig, ReconstructionResult


def preview(value: object, digits: int) -> str:
    """Первые digits символов десятичной записи, '...' если обрезано."""
    text = str(value)
    if len(text) > digits:
        return text[:digits] + "..."
    return text


def format_report(
    share_set: ShareSet,
    points: Sequence[Point],
    result: ReconstructionResult,
    config: Optional[ReconstructionConfig] = None,
) -> str:
    """Отчёт: параметры n/k, декодированные точки, свободный член."""
    config = config or ReconstructionConfig()

    lines = [
        "Parsed data:",
        f"n (number of points): {share_set.keys.n}",
        f"k (minimum required): {share_set.keys.k}",
        f"Polynomial degree: {share_set.degree}",
        "",
        "Points (first few digits shown):",
    ]

    decoded = {point.x: point for point in points}
    for share in share_set.shares:
        point = decoded.get(share.x)
        shown = preview(point.y, config.preview_digits) if point is not None else "?"
        lines.append(
            f"({share.x}, {share.value} base {share.base}) = ({share.x}, {shown})"
        )

    lines.append("")
    if result.succeeded:
        lines.append(
            f"Constant term (secret) using first {result.threshold} points: {result.secret}"
        )
    else:
        lines.append(f"Warning: {result.details}")

    return "\n".join(lines)
