"""
Bound — Описание одной стороны диапазона

Три варианта:
- Included(v)  — сторона включает точку v
- Excluded(v)  — сторона доходит до v, не включая её
- Unbounded    — сторона не ограничена

Bound не владеет значением и не изменяет его: значение хранится по ссылке
(поле типа Any, без копирования и приведения типов). Для сравнений
используется только порядок самого значения.

Immutable Pydantic модель.
"""

from enum import Enum
from typing import Any, Protocol, Tuple, runtime_checkable

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class BoundKind(str, Enum):
    """Вид границы"""

    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


# =============================================================================
# BOUND MODEL
# =============================================================================


class Bound(BaseModel):
    """
    Граница одной стороны диапазона.

    Для INCLUDED/EXCLUDED значение обязательно, для UNBOUNDED — отсутствует.
    Значение может быть любого типа, поддерживающего операторы сравнения
    (int, float, Decimal, datetime, str, ...).
    """

    kind: BoundKind = Field(..., description="Вид границы")
    value: Any = Field(default=None, description="Значение конечной точки (по ссылке)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_value_presence(self) -> "Bound":
        """Значение есть тогда и только тогда, когда граница конечна."""
        if self.kind == BoundKind.UNBOUNDED and self.value is not None:
            raise ValueError(f"Unbounded bound cannot carry a value, got {self.value!r}")
        if self.kind != BoundKind.UNBOUNDED and self.value is None:
            raise ValueError(f"{self.kind.value} bound requires an endpoint value")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def included(cls, value: Any) -> "Bound":
        return cls(kind=BoundKind.INCLUDED, value=value)

    @classmethod
    def excluded(cls, value: Any) -> "Bound":
        return cls(kind=BoundKind.EXCLUDED, value=value)

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(kind=BoundKind.UNBOUNDED)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_included(self) -> bool:
        return self.kind == BoundKind.INCLUDED

    @property
    def is_excluded(self) -> bool:
        return self.kind == BoundKind.EXCLUDED

    @property
    def is_unbounded(self) -> bool:
        return self.kind == BoundKind.UNBOUNDED

    def __repr__(self) -> str:
        if self.is_unbounded:
            return "Unbounded"
        return f"{self.kind.value.capitalize()}({self.value!r})"


def Included(value: Any) -> Bound:
    """Граница, включающая точку value."""
    return Bound.included(value)


def Excluded(value: Any) -> Bound:
    """Граница, исключающая точку value."""
    return Bound.excluded(value)


UNBOUNDED: Bound = Bound.unbounded()


# Пара (start, end): нормализованная форма любого диапазона
BoundPairTuple = Tuple[Bound, Bound]


# =============================================================================
# КОНТРАКТ ДИАПАЗОНА
# =============================================================================


@runtime_checkable
class SupportsRangeBounds(Protocol):
    """
    Контракт диапазона: две чистые функции доступа к границам.

    Повторные вызовы на одном и том же значении обязаны возвращать
    одинаковый результат.
    """

    def start_bound(self) -> Bound:
        ...

    def end_bound(self) -> Bound:
        ...
