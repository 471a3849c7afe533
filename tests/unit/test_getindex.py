"""
Тесты для Element Access — inbounds_getindex / getindex

Проверяемые инварианты:
1. inbounds_getindex(a, i) == a0 + (i - 1) * s для любого целого i
2. Под-прогрессия по диапазону индексов: start/step/length по формуле
3. DoubleDouble шаг даёт корректно округлённые элементы
4. getindex проверяет границы
"""

from fractions import Fraction

import pytest

from src.core.domain import StepRange
from src.core.math.double_double import DoubleDouble, multiply
from src.search.getindex import getindex, inbounds_getindex

TENTH = DoubleDouble.from_fraction(Fraction(1, 10))
A = StepRange(start=0, step=5, length=10)


class TestScalarIndex:
    """Тесты для inbounds_getindex с целым индексом"""

    def test_in_bounds(self) -> None:
        assert inbounds_getindex(A, 1) == 0
        assert inbounds_getindex(A, 4) == 15
        assert inbounds_getindex(A, 10) == 45

    def test_out_of_bounds_extrapolates(self) -> None:
        """Индексы вне [1, length] вычисляются по той же формуле"""
        assert inbounds_getindex(A, 0) == -5
        assert inbounds_getindex(A, 11) == 50
        assert inbounds_getindex(A, -3) == -20

    def test_integer_range_stays_integer(self) -> None:
        assert type(inbounds_getindex(A, 7)) is int

    def test_float_range(self) -> None:
        a = StepRange(start=1.5, step=0.5, length=4)
        assert inbounds_getindex(a, 3) == 2.5
        assert inbounds_getindex(a, -1) == 0.5

    def test_formula_on_grid(self) -> None:
        a = StepRange(start=-7, step=3, length=20)
        for i in range(-30, 31):
            assert inbounds_getindex(a, i) == -7 + (i - 1) * 3

    def test_double_double_step(self) -> None:
        """Элементы шага 1/10 — ближайшие float к точным значениям"""
        a = StepRange(start=0, step=TENTH, length=100)
        assert inbounds_getindex(a, 4) == 0.3
        assert inbounds_getindex(a, 8) == 0.7
        assert inbounds_getindex(a, 11) == 1.0
        for i in range(1, 200):
            assert inbounds_getindex(a, i) == float(Fraction(i - 1, 10))

    def test_double_double_start(self) -> None:
        a = StepRange(start=DoubleDouble(1.0, 0.0), step=0.5, length=4)
        assert inbounds_getindex(a, 3) == 2.0


class TestRangeIndex:
    """Тесты для inbounds_getindex с диапазоном индексов"""

    def test_python_range(self) -> None:
        sub = inbounds_getindex(A, range(2, 9, 3))
        assert sub == StepRange(start=5, step=15, length=3)

    def test_integer_step_range(self) -> None:
        idx = StepRange(start=2, step=3, length=3)
        assert inbounds_getindex(A, idx) == StepRange(start=5, step=15, length=3)

    def test_out_of_bounds_indices(self) -> None:
        sub = inbounds_getindex(A, range(-1, 3))
        assert sub == StepRange(start=-10, step=5, length=4)

    def test_empty_index_range(self) -> None:
        sub = inbounds_getindex(A, range(5, 5))
        assert len(sub) == 0

    def test_elements_match_parent(self) -> None:
        """sub[k] == a[idx[k]] для каждого k"""
        for idx in (range(2, 9, 3), range(-4, 15), range(10, 0, -2)):
            sub = inbounds_getindex(A, idx)
            for k, i in enumerate(idx, start=1):
                assert inbounds_getindex(sub, k) == inbounds_getindex(A, i)

    def test_double_double_step(self) -> None:
        a = StepRange(start=0, step=TENTH, length=100)
        sub = inbounds_getindex(a, range(4, 10, 2))
        assert isinstance(sub.start, DoubleDouble)
        assert float(sub.start) == 0.3
        assert sub.step == multiply(TENTH, 2)
        assert sub.length == 3
        assert inbounds_getindex(sub, 3) == 0.7

    def test_non_integer_index_range_rejected(self) -> None:
        with pytest.raises(TypeError, match="integer-valued"):
            inbounds_getindex(A, StepRange(start=1.0, step=0.5, length=3))


class TestGetindex:
    """Тесты для getindex с проверкой границ"""

    def test_in_bounds(self) -> None:
        assert getindex(A, 1) == 0
        assert getindex(A, 10) == 45

    def test_out_of_bounds(self) -> None:
        for i in (0, -1, 11):
            with pytest.raises(IndexError, match="out of bounds"):
                getindex(A, i)

    def test_non_integer_index(self) -> None:
        with pytest.raises(TypeError):
            getindex(A, 1.0)
