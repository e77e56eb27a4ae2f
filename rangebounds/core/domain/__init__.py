"""
Domain models и value objects.

Граница стороны диапазона (Bound) и конкретные формы диапазонов.
"""

from rangebounds.core.domain.bound import (
    UNBOUNDED,
    Bound,
    BoundKind,
    BoundPairTuple,
    Excluded,
    Included,
    SupportsRangeBounds,
)
from rangebounds.core.domain.shapes import (
    BoundPair,
    Range,
    RangeBounds,
    RangeFrom,
    RangeFull,
    RangeInclusive,
    RangeTo,
    RangeToInclusive,
)

__all__ = [
    # Bound module
    "Bound",
    "BoundKind",
    "BoundPairTuple",
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
]
