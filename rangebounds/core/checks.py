"""
Checks — Проверка ожидаемого результата пересечения в обоих порядках вызова

check_overlap(a, b, expected) вычисляет overlaps(a, b) и overlaps(b, a).
Любое расхождение с ожиданием логируется и приводит к OverlapMismatch.
"""

from dataclasses import dataclass
from typing import Any

from loguru import logger

from rangebounds.core.math.predicates import bounds_of, overlaps


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OverlapMismatch(AssertionError):
    """
    Результат пересечения не совпал с ожидаемым.

    Содержит результаты обоих порядков вызова, чтобы отличать ошибку
    ожидания от нарушения симметрии.
    """

    def __init__(self, report: "OverlapReport"):
        self.report = report
        super().__init__(
            f"overlap mismatch for {report.left!r} / {report.right!r}: "
            f"expected {report.expected}, "
            f"forward={report.forward}, reverse={report.reverse}"
        )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OverlapReport:
    """Результат проверки пары диапазонов."""

    left: Any
    right: Any
    expected: bool

    forward: bool  # overlaps(left, right)
    reverse: bool  # overlaps(right, left)

    @property
    def symmetric(self) -> bool:
        return self.forward == self.reverse

    @property
    def passed(self) -> bool:
        return self.forward == self.expected and self.reverse == self.expected


# =============================================================================
# CHECK
# =============================================================================


def evaluate_overlap(a: Any, b: Any, expected: bool) -> OverlapReport:
    """
    Вычисление пересечения в обоих порядках без исключений.

    Args:
        a: Первый диапазон
        b: Второй диапазон
        expected: Ожидаемый результат

    Returns:
        OverlapReport с результатами обоих вызовов
    """
    return OverlapReport(
        left=bounds_of(a),
        right=bounds_of(b),
        expected=expected,
        forward=overlaps(a, b),
        reverse=overlaps(b, a),
    )


def check_overlap(a: Any, b: Any, expected: bool) -> None:
    """
    Проверка ожидаемого результата пересечения.

    Args:
        a: Первый диапазон
        b: Второй диапазон
        expected: Ожидаемый результат overlaps в обоих порядках

    Raises:
        OverlapMismatch: Если хотя бы один порядок вызова дал другой результат
    """
    report = evaluate_overlap(a, b, expected)
    if report.passed:
        return

    if not report.symmetric:
        logger.error(
            "Asymmetric overlap: {} / {} gives forward={} reverse={}",
            report.left,
            report.right,
            report.forward,
            report.reverse,
        )
    else:
        logger.error(
            "Unexpected overlap: {} / {} gives {}, expected {}",
            report.left,
            report.right,
            report.forward,
            expected,
        )
    raise OverlapMismatch(report)
