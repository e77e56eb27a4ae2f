"""
Core math modules для rangebounds

Сравнения границ и предикаты над диапазонами.
"""

# Ordering
from rangebounds.core.math.ordering import (
    bounds_compatible,
    satisfies_end,
    satisfies_start,
)

# Predicates
from rangebounds.core.math.predicates import (
    BUILTIN_RANGE_STEP,
    bounds_of,
    contains,
    overlaps,
)

__all__ = [
    # Ordering
    "bounds_compatible",
    "satisfies_end",
    "satisfies_start",
    # Predicates — Constants
    "BUILTIN_RANGE_STEP",
    # Predicates — Functions
    "bounds_of",
    "contains",
    "overlaps",
]
