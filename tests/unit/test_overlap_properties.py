"""
Property-based тесты (Hypothesis) для overlaps и contains

Границы генерируются со значениями-целыми в [0, 10]. Для двух непустых
диапазонов над плотным порядком пересечение эквивалентно существованию
общей точки; такие точки ищутся перебором по полуцелой сетке, которая
содержит точку любого непустого пересечения с целочисленными концами.

Properties:
- Symmetry: overlaps(A, B) == overlaps(B, A)
- Absorption: RangeFull пересекается с любым диапазоном
- Reflexivity: непустой диапазон пересекается сам с собой
- Witness: для непустых A, B overlaps(A, B) == ∃x: x ∈ A ∧ x ∈ B
"""

from typing import Optional

from hypothesis import assume, given
from hypothesis import strategies as st

from rangebounds import UNBOUNDED, Bound, Excluded, Included, RangeFull, contains, overlaps


# =============================================================================
# Strategy Definitions
# =============================================================================

endpoints = st.integers(min_value=0, max_value=10)

bounds = st.one_of(
    st.just(UNBOUNDED),
    endpoints.map(Included),
    endpoints.map(Excluded),
)

ranges = st.tuples(bounds, bounds)

# Полуцелая сетка на [-1, 11] покрывает значения за пределами [0, 10]
GRID = [k / 2 for k in range(-2, 23)]


def _witness(a: tuple, b: Optional[tuple] = None) -> bool:
    """Есть ли точка сетки в A (и в B, если задан)."""
    return any(contains(a, x) and (b is None or contains(b, x)) for x in GRID)


# =============================================================================
# PROPERTIES
# =============================================================================


class TestOverlapPropertiesHypothesis:
    """Свойства теста пересечения на случайных границах"""

    @given(a=ranges, b=ranges)
    def test_symmetry(self, a: tuple, b: tuple) -> None:
        assert overlaps(a, b) == overlaps(b, a)

    @given(a=ranges)
    def test_full_range_absorbs(self, a: tuple) -> None:
        assert overlaps(RangeFull(), a) is True

    @given(a=ranges)
    def test_reflexivity_for_non_empty(self, a: tuple) -> None:
        assume(_witness(a))
        assert overlaps(a, a) is True

    @given(a=ranges, b=ranges)
    def test_matches_witness_search(self, a: tuple, b: tuple) -> None:
        """Для непустых диапазонов overlaps совпадает с перебором"""
        assume(_witness(a) and _witness(b))
        assert overlaps(a, b) == _witness(a, b)

    @given(a=ranges, b=ranges)
    def test_shared_point_implies_overlap(self, a: tuple, b: tuple) -> None:
        """Общая точка всегда означает пересечение, даже без assume"""
        if _witness(a, b):
            assert overlaps(a, b) is True


class TestIncludedEndpointReduction:
    """Включённая конечная точка решается через contains"""

    @given(point=endpoints, other_end=bounds)
    def test_closed_start_against_open_start_range(self, point: int, other_end: Bound) -> None:
        """[p, +∞) ∩ B ≠ ∅  ⇔  p удовлетворяет верхней границе B"""
        a = (Included(point), UNBOUNDED)
        b = (UNBOUNDED, other_end)
        assert overlaps(a, b) == contains(b, point)

    @given(point=endpoints, other_start=bounds)
    def test_closed_end_against_open_end_range(self, point: int, other_start: Bound) -> None:
        """(-∞, p] ∩ B ≠ ∅  ⇔  p удовлетворяет нижней границе B"""
        a = (UNBOUNDED, Included(point))
        b = (other_start, UNBOUNDED)
        assert overlaps(a, b) == contains(b, point)


class TestContainsPropertiesHypothesis:
    """Свойства теста принадлежности"""

    @given(a=ranges, x=st.floats(allow_nan=False, min_value=-5, max_value=15))
    def test_nan_free_contains_is_bool(self, a: tuple, x: float) -> None:
        assert isinstance(contains(a, x), bool)

    @given(a=ranges)
    def test_nan_item_never_contained_by_bounded(self, a: tuple) -> None:
        """NaN не принадлежит диапазону, у которого есть хотя бы одна граница"""
        assume(not (a[0].is_unbounded and a[1].is_unbounded))
        assert contains(a, float("nan")) is False
