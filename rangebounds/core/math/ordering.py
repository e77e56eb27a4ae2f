"""
Ordering — Сравнения конечных точек с учётом вида границы

Примитивы, из которых собираются оба предиката:
- satisfies_start: точка удовлетворяет нижней границе
- satisfies_end: точка удовлетворяет верхней границе
- bounds_compatible: существует точка, удовлетворяющая паре (start, end)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Используются только операторы < и <= самого значения; порядок операндов
   всегда "нижнее значение слева", чтобы разнотипные пары (int/float,
   Decimal/int, ...) сравнивались одинаково во всех ветках
2. Несравнимые значения (NaN) дают False на любой стороне, без особых случаев
3. Unbounded не накладывает ограничений и никогда не сравнивается
4. Никаких побочных эффектов и исключений для NaN
"""

from typing import Any

from rangebounds.core.domain.bound import Bound, BoundKind


# =============================================================================
# СТОРОНЫ ТЕСТА ПРИНАДЛЕЖНОСТИ
# =============================================================================


def satisfies_start(start: Bound, item: Any) -> bool:
    """
    Проверка нижней стороны диапазона.

    Args:
        start: Нижняя граница
        item: Проверяемая точка

    Returns:
        Included(s) → s <= item
        Excluded(s) → s < item
        Unbounded   → True
    """
    if start.kind == BoundKind.INCLUDED:
        return bool(start.value <= item)
    if start.kind == BoundKind.EXCLUDED:
        return bool(start.value < item)
    return True


def satisfies_end(end: Bound, item: Any) -> bool:
    """
    Проверка верхней стороны диапазона.

    Args:
        end: Верхняя граница
        item: Проверяемая точка

    Returns:
        Included(e) → item <= e
        Excluded(e) → item < e
        Unbounded   → True
    """
    if end.kind == BoundKind.INCLUDED:
        return bool(item <= end.value)
    if end.kind == BoundKind.EXCLUDED:
        return bool(item < end.value)
    return True


# =============================================================================
# СОВМЕСТИМОСТЬ ГРАНИЦ
# =============================================================================


def bounds_compatible(start: Bound, end: Bound) -> bool:
    """
    Существует ли точка, удовлетворяющая нижней границе start и верхней end.

    Таблица 3×3 по видам границ:

        start \\ end | Included(e)  | Excluded(e) | Unbounded
        ------------+--------------+-------------+----------
        Included(s) | s <= e       | s < e       | True
        Excluded(s) | s < e        | s < e       | True
        Unbounded   | True         | True        | True

    Включённая конечная точка — конкретная точка, поэтому решение сводится
    к соответствующей стороне теста принадлежности. Для пары Excluded/Excluded
    точки для проверки нет: нужна хотя бы одна точка строго между s и e.

    Args:
        start: Нижняя граница одного диапазона
        end: Верхняя граница (того же или другого) диапазона

    Returns:
        True если пара границ допускает общую точку
    """
    if start.kind == BoundKind.UNBOUNDED or end.kind == BoundKind.UNBOUNDED:
        return True

    if start.kind == BoundKind.INCLUDED:
        return satisfies_end(end, start.value)

    if end.kind == BoundKind.INCLUDED:
        return satisfies_start(start, end.value)

    # Excluded/Excluded
    return bool(start.value < end.value)
