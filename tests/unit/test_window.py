"""
Тесты для Interval Windowing

Проверяемые инварианты:
1. unsafe_searchsorted = first(left) .. last(right), без clamp
2. searchsorted — то же в пределах [1, length]
3. relativewindow: vals[k] == idx[k] * step
4. step == 0 → InvalidStep
"""

import math
from fractions import Fraction

import numpy as np
import pytest

from src.core.domain import ClosedInterval, StepRange
from src.core.math.double_double import DoubleDouble, multiply
from src.core.math.numerical_safeguards import InvalidStep
from src.search.getindex import inbounds_getindex
from src.search.window import relativewindow, searchsorted, unsafe_searchsorted

TENTH = DoubleDouble.from_fraction(Fraction(1, 10))
A = StepRange(start=0, step=5, length=10)


# =============================================================================
# UNSAFE SEARCHSORTED
# =============================================================================


class TestUnsafeSearchsorted:
    """Тесты для unsafe_searchsorted"""

    def test_scenario(self) -> None:
        """[7, 22] → индексы 3..5 (значения 10, 15, 20)"""
        idx = unsafe_searchsorted(A, ClosedInterval.of(7, 22))
        assert idx == range(3, 6)
        assert [inbounds_getindex(A, i) for i in idx] == [10, 15, 20]

    def test_endpoints_on_elements(self) -> None:
        assert unsafe_searchsorted(A, ClosedInterval.of(5, 20)) == range(2, 6)

    def test_extrapolation(self) -> None:
        assert unsafe_searchsorted(A, ClosedInterval.of(-12, 3)) == range(-1, 2)
        assert unsafe_searchsorted(A, ClosedInterval.of(50, 60)) == range(11, 14)

    def test_values_inside_interval(self) -> None:
        """Все значения окна лежат в интервале, соседи — снаружи"""
        for left, right in ((7, 22), (-12.5, 3), (0, 45), (44.5, 61), (1.25, 1.75)):
            idx = unsafe_searchsorted(A, ClosedInterval.of(left, right))
            for i in idx:
                assert left <= inbounds_getindex(A, i) <= right
            assert inbounds_getindex(A, idx.start - 1) < left
            assert inbounds_getindex(A, idx.stop) > right

    def test_reversed_interval_is_empty(self) -> None:
        assert len(unsafe_searchsorted(A, ClosedInterval.of(22, 7))) == 0

    def test_interval_between_elements_is_empty(self) -> None:
        assert len(unsafe_searchsorted(A, ClosedInterval.of(11, 14))) == 0

    def test_uint64_bounds_are_exact(self) -> None:
        """Границы uint64 не округляются до float"""
        a = StepRange(start=0, step=1, length=10)
        top = np.uint64(2**64 - 1)
        assert unsafe_searchsorted(a, ClosedInterval.of(top, top)) == range(2**64, 2**64 + 1)
        assert unsafe_searchsorted(a, ClosedInterval.of(np.uint8(3), np.uint8(5))) == range(4, 7)

    def test_zero_step_raises(self) -> None:
        with pytest.raises(InvalidStep):
            unsafe_searchsorted(StepRange(start=0, step=0, length=3), ClosedInterval.of(0, 1))


# =============================================================================
# SEARCHSORTED
# =============================================================================


class TestSearchsorted:
    """Тесты для searchsorted"""

    def test_inside(self) -> None:
        assert searchsorted(A, ClosedInterval.of(7, 22)) == range(3, 6)

    def test_clamped(self) -> None:
        assert searchsorted(A, ClosedInterval.of(-12, 3)) == range(1, 2)
        assert searchsorted(A, ClosedInterval.of(-100, 100)) == range(1, 11)

    def test_outside_is_empty(self) -> None:
        assert len(searchsorted(A, ClosedInterval.of(50, 60))) == 0
        assert len(searchsorted(A, ClosedInterval.of(-60, -50))) == 0

    def test_zero_step_raises(self) -> None:
        with pytest.raises(InvalidStep):
            searchsorted(StepRange(start=0, step=0, length=3), ClosedInterval.of(0, 1))


# =============================================================================
# RELATIVE WINDOW
# =============================================================================


class TestRelativeWindow:
    """Тесты для relativewindow"""

    def test_integer_step(self) -> None:
        """left/right — смещения от нуля, start прогрессии не участвует"""
        a = StepRange(start=3, step=5, length=10)
        idx, vals = relativewindow(a, ClosedInterval.of(-12, 12))
        assert idx == range(-2, 3)
        assert vals == StepRange(start=-10, step=5, length=5)

    def test_round_trip(self) -> None:
        """vals[k] == idx[k] * step"""
        for step in (5, 3, -4):
            a = StepRange(start=0, step=step, length=10)
            for left, right in ((-12, 12), (0, 30), (7, 7.5), (-31, -2)):
                idx, vals = relativewindow(a, ClosedInterval.of(left, right))
                assert len(vals) == len(idx)
                for k, i in enumerate(idx, start=1):
                    assert inbounds_getindex(vals, k) == i * step

    def test_double_double_step(self) -> None:
        """Шаг 1/10 сохраняется: 0.3 .. 0.7 — это шаги 3 .. 7"""
        a = StepRange(start=0, step=TENTH, length=100)
        idx, vals = relativewindow(a, ClosedInterval.of(0.3, 0.7))
        assert idx == range(3, 8)
        assert vals.step == TENTH
        assert isinstance(vals.start, DoubleDouble)
        assert float(vals.start) == 0.3
        for k, i in enumerate(idx, start=1):
            assert math.isclose(inbounds_getindex(vals, k), float(multiply(TENTH, i)), rel_tol=1e-15)

    def test_float_step_loses_boundary(self) -> None:
        """Тот же интервал с float-шагом 0.1 теряет граничные шаги"""
        a = StepRange(start=0.0, step=0.1, length=100)
        idx, _ = relativewindow(a, ClosedInterval.of(0.3, 0.7))
        assert idx == range(2, 7)

    def test_symmetric_negative(self) -> None:
        a = StepRange(start=0, step=TENTH, length=100)
        idx, vals = relativewindow(a, ClosedInterval.of(-0.3, 0.3))
        assert idx == range(-3, 4)
        assert len(vals) == 7

    def test_empty_window(self) -> None:
        idx, vals = relativewindow(A, ClosedInterval.of(12, 3))
        assert len(idx) == 0
        assert len(vals) == 0

    def test_zero_step_raises(self) -> None:
        with pytest.raises(InvalidStep):
            relativewindow(StepRange(start=0, step=0, length=3), ClosedInterval.of(0, 1))
        with pytest.raises(InvalidStep):
            relativewindow(StepRange(start=0.0, step=DoubleDouble(0.0), length=3), ClosedInterval.of(0, 1))
