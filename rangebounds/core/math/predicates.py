"""
Predicates — Тест принадлежности и тест пересечения диапазонов

Модуль принимает любой диапазон:
- объект с методами start_bound()/end_bound() (SupportsRangeBounds)
- явную пару (Bound, Bound)
- встроенный range с шагом 1 → [start, stop)

ПРАВИЛО ПЕРЕСЕЧЕНИЯ:
    overlaps(A, B) = compatible(start_A, end_B) AND compatible(start_B, end_A)

Два перекрёстных условия покрывают все 3×3×3×3 = 81 комбинацию видов границ.
Перестановка аргументов меняет условия местами, поэтому симметрия
overlaps(A, B) == overlaps(B, A) выполняется по построению.

Инвертированные диапазоны (start > end) не валидируются: результат
определяется только исходами сравнений.
"""

from typing import Any, Final

from loguru import logger

from rangebounds.core.domain.bound import (
    Bound,
    BoundPairTuple,
    Excluded,
    Included,
    SupportsRangeBounds,
)
from rangebounds.core.math.ordering import (
    bounds_compatible,
    satisfies_end,
    satisfies_start,
)

# Встроенный range непрерывен только при шаге 1
BUILTIN_RANGE_STEP: Final[int] = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def bounds_of(value: Any) -> BoundPairTuple:
    """
    Нормализация диапазона в пару (start, end).

    Args:
        value: Диапазон в любой поддерживаемой форме

    Returns:
        Кортеж (start_bound, end_bound)

    Raises:
        ValueError: Если встроенный range имеет шаг, отличный от 1
        TypeError: Если value не является диапазоном
    """
    if isinstance(value, SupportsRangeBounds):
        return value.start_bound(), value.end_bound()

    if isinstance(value, tuple) and len(value) == 2 and all(isinstance(b, Bound) for b in value):
        return value[0], value[1]

    if isinstance(value, range):
        if value.step != BUILTIN_RANGE_STEP:
            raise ValueError(
                f"range with step {value.step} is not contiguous, "
                f"only step {BUILTIN_RANGE_STEP} maps onto bounds"
            )
        logger.debug("Adapting builtin {!r} to [{}, {})", value, value.start, value.stop)
        return Included(value.start), Excluded(value.stop)

    raise TypeError(
        f"{type(value).__name__} is not a range: expected start_bound()/end_bound(), "
        f"a (Bound, Bound) pair or a builtin range"
    )


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def contains(rng: Any, item: Any) -> bool:
    """
    Тест принадлежности точки диапазону.

    Точка может иметь тип, отличный от типа границ, если типы взаимно
    сравнимы. Несравнимое отношение (NaN) даёт False.

    Args:
        rng: Диапазон
        item: Проверяемая точка

    Returns:
        True если item удовлетворяет обеим сторонам

    Examples:
        >>> contains(range(3, 5), 4)
        True
        >>> contains((Included(0.0), Excluded(1.0)), float("nan"))
        False
    """
    start, end = bounds_of(rng)
    return satisfies_start(start, item) and satisfies_end(end, item)


def overlaps(rng: Any, other: Any) -> bool:
    """
    Тест пересечения двух диапазонов без перечисления точек.

    Args:
        rng: Первый диапазон
        other: Второй диапазон (тип элементов должен быть сравним с первым)

    Returns:
        True если существует точка, принадлежащая обоим диапазонам

    Examples:
        >>> overlaps((Excluded(0), Excluded(3)), (Excluded(1), Excluded(3)))
        True
        >>> overlaps((Excluded(0), Excluded(3)), (Excluded(3), Excluded(4)))
        False
    """
    start, end = bounds_of(rng)
    other_start, other_end = bounds_of(other)

    return bounds_compatible(start, other_end) and bounds_compatible(other_start, end)
