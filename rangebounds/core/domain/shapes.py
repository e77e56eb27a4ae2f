"""
Shapes — Конкретные формы диапазонов

Каждая форма однозначно отображается в пару границ (start, end):

    Форма              start_bound       end_bound
    RangeFull          Unbounded         Unbounded
    RangeFrom(x)       Included(x)       Unbounded
    RangeTo(x)         Unbounded         Excluded(x)
    Range(x, y)        Included(x)       Excluded(y)
    RangeInclusive     Included(x)       Included(y)
    RangeToInclusive   Unbounded         Included(y)
    BoundPair(s, e)    s                 e

Все формы — immutable Pydantic модели. Значения конечных точек хранятся
по ссылке (Any), согласованность start <= end не проверяется.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field

from rangebounds.core.domain.bound import UNBOUNDED, Bound, Excluded, Included
from rangebounds.core.math import predicates


def _require_endpoint(value: Any) -> Any:
    """None не упорядочиваем и зарезервирован за Unbounded."""
    if value is None:
        raise ValueError("endpoint cannot be None, use an unbounded shape instead")
    return value


Endpoint = Annotated[Any, AfterValidator(_require_endpoint)]


# =============================================================================
# БАЗОВЫЙ КЛАСС
# =============================================================================


class RangeBounds(BaseModel, ABC):
    """
    Базовый класс диапазона.

    Наследники реализуют start_bound()/end_bound(); тест принадлежности и
    тест пересечения выводятся из них.
    """

    model_config = {"frozen": True}

    @abstractmethod
    def start_bound(self) -> Bound:
        """Нижняя граница диапазона."""

    @abstractmethod
    def end_bound(self) -> Bound:
        """Верхняя граница диапазона."""

    def contains(self, item: Any) -> bool:
        """
        Принадлежит ли item диапазону.

        Examples:
            >>> Range(3, 5).contains(4)
            True
            >>> Range(0.0, 1.0).contains(float("nan"))
            False
        """
        return predicates.contains(self, item)

    def overlaps(self, other: Any) -> bool:
        """
        Есть ли точка, общая для этого диапазона и other.

        other может быть любой формой диапазона, парой (Bound, Bound)
        или встроенным range.

        Examples:
            >>> Range(3, 5).overlaps(Range(1, 4))
            True
            >>> Range(3, 5).overlaps(RangeTo(3))
            False
        """
        return predicates.overlaps(self, other)

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)


# =============================================================================
# ФОРМЫ
# =============================================================================


class RangeFull(RangeBounds):
    """Диапазон без ограничений: (-∞, +∞)"""

    def start_bound(self) -> Bound:
        return UNBOUNDED

    def end_bound(self) -> Bound:
        return UNBOUNDED


class RangeFrom(RangeBounds):
    """[start, +∞)"""

    start: Endpoint = Field(..., description="Включённая нижняя граница")

    def __init__(self, start: Any, **data: Any) -> None:
        super().__init__(start=start, **data)

    def start_bound(self) -> Bound:
        return Included(self.start)

    def end_bound(self) -> Bound:
        return UNBOUNDED


class RangeTo(RangeBounds):
    """(-∞, end)"""

    end: Endpoint = Field(..., description="Исключённая верхняя граница")

    def __init__(self, end: Any, **data: Any) -> None:
        super().__init__(end=end, **data)

    def start_bound(self) -> Bound:
        return UNBOUNDED

    def end_bound(self) -> Bound:
        return Excluded(self.end)


class Range(RangeBounds):
    """[start, end) — полуоткрытый диапазон"""

    start: Endpoint = Field(..., description="Включённая нижняя граница")
    end: Endpoint = Field(..., description="Исключённая верхняя граница")

    def __init__(self, start: Any, end: Any, **data: Any) -> None:
        super().__init__(start=start, end=end, **data)

    def start_bound(self) -> Bound:
        return Included(self.start)

    def end_bound(self) -> Bound:
        return Excluded(self.end)


class RangeInclusive(RangeBounds):
    """[start, end] — замкнутый диапазон"""

    start: Endpoint = Field(..., description="Включённая нижняя граница")
    end: Endpoint = Field(..., description="Включённая верхняя граница")

    def __init__(self, start: Any, end: Any, **data: Any) -> None:
        super().__init__(start=start, end=end, **data)

    def start_bound(self) -> Bound:
        return Included(self.start)

    def end_bound(self) -> Bound:
        return Included(self.end)


class RangeToInclusive(RangeBounds):
    """(-∞, end]"""

    end: Endpoint = Field(..., description="Включённая верхняя граница")

    def __init__(self, end: Any, **data: Any) -> None:
        super().__init__(end=end, **data)

    def start_bound(self) -> Bound:
        return UNBOUNDED

    def end_bound(self) -> Bound:
        return Included(self.end)


class BoundPair(RangeBounds):
    """
    Диапазон из явной пары границ.

    Единственная форма, в которой доступны все 9 сочетаний видов границ,
    в том числе Excluded на нижней стороне.
    """

    start: Bound = Field(..., description="Нижняя граница")
    end: Bound = Field(..., description="Верхняя граница")

    def __init__(self, start: Bound, end: Bound, **data: Any) -> None:
        super().__init__(start=start, end=end, **data)

    def start_bound(self) -> Bound:
        return self.start

    def end_bound(self) -> Bound:
        return self.end
