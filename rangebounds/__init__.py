"""
rangebounds: одномерные диапазоны над упорядоченными значениями.

Тест принадлежности (contains) и тест пересечения (overlaps) по четырём
описаниям границ, без перечисления точек.

Логирование через loguru отключено по умолчанию:
    from loguru import logger
    logger.enable("rangebounds")
"""

from typing import Final

from loguru import logger

# domain загружается раньше math: shapes импортирует predicates
from rangebounds.core.domain import (
    UNBOUNDED,
    Bound,
    BoundKind,
    BoundPair,
    Excluded,
    Included,
    Range,
    RangeBounds,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
    SupportsRangeBounds,
)
from rangebounds.core.math import bounds_of, contains, overlaps
from rangebounds.core.checks import OverlapMismatch, OverlapReport, check_overlap, evaluate_overlap

LOGGER_NAME: Final[str] = "rangebounds"

logger.disable(LOGGER_NAME)

__all__ = [
    "LOGGER_NAME",
    # Bounds
    "Bound",
    "BoundKind",
    "Included",
    "Excluded",
    "UNBOUNDED",
    "SupportsRangeBounds",
    # Shapes
    "RangeBounds",
    "RangeFull",
    "RangeFrom",
    "RangeTo",
    "Range",
    "RangeInclusive",
    "RangeToInclusive",
    "BoundPair",
    # Predicates
    "bounds_of",
    "contains",
    "overlaps",
    # Checks
    "OverlapMismatch",
    "OverlapReport",
    "check_overlap",
    "evaluate_overlap",
]
