"""
Element Access — доступ к элементам прогрессии по формуле

inbounds_getindex вычисляет элемент (или под-прогрессию) напрямую из
start/step/индекса, без проверки границ. Поисковые функции пробуют
индексы вне [1, length] (экстраполяция), поэтому обычный доступ с
проверкой границ им не подходит.

Формулы:
    элемент:        a0 + (i - 1) * s
    под-прогрессия: start = a0 + (first(idx) - 1) * s
                    step  = s * step(idx)
                    length = len(idx)
"""

from numbers import Integral, Real
from typing import Union

from src.core.domain.step_range import StepRange, StepValue
from src.core.math.double_double import DoubleDouble, add, multiply
from src.core.math.numerical_safeguards import is_integer_value

IndexRange = Union[range, StepRange]


def _offset(a: StepRange, n: int) -> StepValue:
    # a0 + n * s в максимальной доступной точности
    if isinstance(a.step, DoubleDouble):
        return add(multiply(a.step, n), a.start)
    if isinstance(a.start, DoubleDouble):
        return add(a.start, n * a.step)
    return a.start + n * a.step


def _index_range_parts(idx: IndexRange) -> tuple[int, int, int]:
    if isinstance(idx, range):
        return idx.start, idx.step, len(idx)
    if not idx.is_integer:
        raise TypeError(f"index range must be integer-valued, got {idx!r}")
    return int(idx.start), int(idx.step), idx.length


def inbounds_getindex(a: StepRange, i: Union[Integral, IndexRange]) -> Union[Real, StepRange]:
    """
    Элемент прогрессии с индексом i (или под-прогрессия по диапазону индексов).

    Границы не проверяются: i может лежать вне [1, length].

    Args:
        a: Прогрессия
        i: 1-based индекс или диапазон индексов (range / целочисленный StepRange)

    Returns:
        Элемент a0 + (i - 1) * s (DoubleDouble схлопывается в float),
        либо новый StepRange для диапазона индексов

    Examples:
        >>> a = StepRange(start=0, step=5, length=10)
        >>> inbounds_getindex(a, 4)
        15
        >>> inbounds_getindex(a, 0)
        -5
        >>> inbounds_getindex(a, range(2, 9, 3))
        StepRange(start=5, step=15, length=3)
    """
    if isinstance(i, (range, StepRange)):
        return _getindex_range(a, i)

    value = _offset(a, int(i) - 1)
    if isinstance(value, DoubleDouble):
        return float(value)
    return value


def _getindex_range(a: StepRange, idx: IndexRange) -> StepRange:
    first, idx_step, length = _index_range_parts(idx)
    return StepRange(
        start=_offset(a, first - 1),
        step=a.step * idx_step,
        length=length,
    )


def getindex(a: StepRange, i: Integral) -> Real:
    """
    Элемент с индексом i с проверкой границ.

    Raises:
        IndexError: Если i вне [1, length]
        TypeError: Если i не целое
    """
    if not is_integer_value(i):
        raise TypeError(f"index must be an integer, got {i!r}")
    if not 1 <= i <= a.length:
        raise IndexError(f"index {i} out of bounds for range of length {a.length}")
    return inbounds_getindex(a, i)
