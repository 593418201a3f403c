"""
Тесты для Threshold Reconstructor и текстового отчёта

Проверяет:
1. Отбор первых k точек по возрастанию x
2. Мягкий отказ INSUFFICIENT_POINTS (secret = 0, предупреждение в лог)
3. Полный цикл ShareSet → точки → секрет
4. Формат отчёта
"""

import logging

import pytest

from src.core.domain.point import Point
from src.core.domain.share_set import EncodedShare, ShareKeys, ShareSet
from src.core.math.big_integer import ZERO, BigInteger
from src.core.math.errors import DuplicateAbscissa, InvalidDigit
from src.interpolation.reconstructor import (
    ReconstructionConfig,
    ReconstructionStatus,
    find_constant_term,
    reconstruct_share_set,
    select_points,
)
from src.interpolation.report import format_report, preview


def sample_share_set() -> ShareSet:
    """n=4, k=3; точки (1,4), (2,7), (3,12), (6,39) на f(x) = x² + 3."""
    return ShareSet(
        keys=ShareKeys(n=4, k=3),
        shares=(
            EncodedShare(x=6, base=4, value="213"),
            EncodedShare(x=1, base=10, value="4"),
            EncodedShare(x=3, base=10, value="12"),
            EncodedShare(x=2, base=2, value="111"),
        ),
    )


# =============================================================================
# ОТБОР ТОЧЕК
# =============================================================================


class TestSelectPoints:
    def test_first_k_by_abscissa(self) -> None:
        pts = [Point.of(6, 39), Point.of(2, 7), Point.of(1, 4), Point.of(3, 12)]
        selected = select_points(pts, 3)
        assert [p.x for p in selected] == [1, 2, 3]

    def test_k_larger_than_available(self) -> None:
        pts = [Point.of(2, 7), Point.of(1, 4)]
        assert [p.x for p in select_points(pts, 5)] == [1, 2]


# =============================================================================
# FIND CONSTANT TERM
# =============================================================================


class TestFindConstantTerm:
    def test_ok(self) -> None:
        pts = [Point.of(6, 39), Point.of(3, 12), Point.of(2, 7), Point.of(1, 4)]
        result = find_constant_term(pts, 3)

        assert result.succeeded
        assert result.status == ReconstructionStatus.OK
        assert result.secret == BigInteger.from_int(3)
        assert result.threshold == 3
        assert result.points_available == 4
        assert [p.x for p in result.points_used] == [1, 2, 3]
        assert "first 3 of 4" in result.details

    def test_extra_points_do_not_change_result(self) -> None:
        """Любые k точек одного полинома дают один и тот же f(0)"""
        pts = [Point.of(x, x * x + 3) for x in range(1, 10)]
        for k in (3, 4, 9):
            assert find_constant_term(pts, k).secret == BigInteger.from_int(3)

    def test_insufficient_points(self, caplog: pytest.LogCaptureFixture) -> None:
        """Меньше k точек → secret = 0, статус, предупреждение; без исключения"""
        pts = [Point.of(1, 4), Point.of(2, 7)]

        with caplog.at_level(logging.WARNING, logger="src.interpolation.reconstructor"):
            result = find_constant_term(pts, 3)

        assert not result.succeeded
        assert result.status == ReconstructionStatus.INSUFFICIENT_POINTS
        assert result.secret == ZERO
        assert result.points_used == ()
        assert result.details == "Not enough points: need at least 3, got 2"
        assert "Not enough points" in caplog.text

    def test_threshold_five_with_three_points(self) -> None:
        pts = [Point.of(1, 3), Point.of(2, 5), Point.of(3, 7)]
        result = find_constant_term(pts, 5)
        assert result.status == ReconstructionStatus.INSUFFICIENT_POINTS
        assert result.secret == ZERO
        assert result.points_available == 3

    def test_no_points(self) -> None:
        result = find_constant_term([], 1)
        assert result.status == ReconstructionStatus.INSUFFICIENT_POINTS
        assert result.secret == ZERO

    def test_invalid_threshold(self) -> None:
        with pytest.raises(ValueError, match="threshold k must be >= 1"):
            find_constant_term([Point.of(1, 1)], 0)

    def test_duplicate_in_selection(self) -> None:
        pts = [Point.of(1, 4), Point.of(1, 5), Point.of(2, 7)]
        with pytest.raises(DuplicateAbscissa):
            find_constant_term(pts, 2)

    def test_duplicate_outside_selection_not_used(self) -> None:
        """Дубликат вне первых k точек в интерполяции не участвует"""
        pts = [Point.of(1, 4), Point.of(2, 7), Point.of(3, 12), Point.of(9, 1), Point.of(9, 2)]
        assert find_constant_term(pts, 3).secret == BigInteger.from_int(3)

    def test_status_is_string_enum(self) -> None:
        assert ReconstructionStatus.OK == "OK"


class TestReconstructionConfig:
    def test_defaults(self) -> None:
        config = ReconstructionConfig()
        assert config.preview_digits == 20
        assert config.warn_on_count_mismatch is True

    def test_invalid_preview_digits(self) -> None:
        with pytest.raises(ValueError):
            ReconstructionConfig(preview_digits=0)


# =============================================================================
# ПОЛНЫЙ ЦИКЛ
# =============================================================================


class TestReconstructShareSet:
    def test_sample(self) -> None:
        points, result = reconstruct_share_set(sample_share_set())

        assert [str(p) for p in points] == ["(1, 4)", "(2, 7)", "(3, 12)", "(6, 39)"]
        assert result.secret == BigInteger.from_int(3)
        assert result.succeeded

    def test_count_mismatch_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        share_set = ShareSet(
            keys=ShareKeys(n=5, k=2),
            shares=(EncodedShare(x=1, base=10, value="5"), EncodedShare(x=2, base=10, value="7")),
        )

        with caplog.at_level(logging.WARNING, logger="src.interpolation.reconstructor"):
            _, result = reconstruct_share_set(share_set)

        assert result.secret == BigInteger.from_int(3)
        assert "Declared n=5 but 2 shares are present" in caplog.text

    def test_count_mismatch_warning_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        share_set = ShareSet(
            keys=ShareKeys(n=5, k=1),
            shares=(EncodedShare(x=1, base=10, value="5"),),
        )
        config = ReconstructionConfig(warn_on_count_mismatch=False)

        with caplog.at_level(logging.WARNING, logger="src.interpolation.reconstructor"):
            reconstruct_share_set(share_set, config)

        assert "Declared" not in caplog.text

    def test_invalid_digit_aborts_load(self) -> None:
        share_set = ShareSet(
            keys=ShareKeys(n=2, k=2),
            shares=(EncodedShare(x=1, base=2, value="12"), EncodedShare(x=2, base=10, value="7")),
        )
        with pytest.raises(InvalidDigit):
            reconstruct_share_set(share_set)


# =============================================================================
# ОТЧЁТ
# =============================================================================


class TestReport:
    def test_preview(self) -> None:
        assert preview("12345", 3) == "123..."
        assert preview("123", 3) == "123"
        assert preview(BigInteger.from_int(-42), 10) == "-42"

    def test_sample_report(self) -> None:
        share_set = sample_share_set()
        points, result = reconstruct_share_set(share_set)

        report = format_report(share_set, points, result)

        assert report.splitlines() == [
            "Parsed data:",
            "n (number of points): 4",
            "k (minimum required): 3",
            "Polynomial degree: 2",
            "",
            "Points (first few digits shown):",
            "(1, 4 base 10) = (1, 4)",
            "(2, 111 base 2) = (2, 7)",
            "(3, 12 base 10) = (3, 12)",
            "(6, 213 base 4) = (6, 39)",
            "",
            "Constant term (secret) using first 3 points: 3",
        ]

    def test_report_truncates_long_values(self) -> None:
        share_set = ShareSet(
            keys=ShareKeys(n=1, k=1),
            shares=(EncodedShare(x=1, base=10, value="1234567890"),),
        )
        points, result = reconstruct_share_set(share_set)

        report = format_report(share_set, points, result, ReconstructionConfig(preview_digits=4))

        assert "(1, 1234567890 base 10) = (1, 1234...)" in report

    def test_insufficient_report(self) -> None:
        share_set = ShareSet(
            keys=ShareKeys(n=1, k=2),
            shares=(EncodedShare(x=1, base=10, value="5"),),
        )
        points, result = reconstruct_share_set(share_set)

        report = format_report(share_set, points, result)

        assert report.splitlines()[-1] == "Warning: Not enough points: need at least 2, got 1"
