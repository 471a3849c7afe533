"""
Interval Windowing — отображение интервала координат в окно индексов

- unsafe_searchsorted: индексы прогрессии внутри [left, right], возможно
  вне [1, length] (используется для сдвига осей с экстраполяцией)
- searchsorted: то же с учётом границ
- relativewindow: left/right — смещения относительно нуля, а не
  абсолютные позиции; возвращает (индексы, значения) окна
"""

from src.core.domain.interval import ClosedInterval
from src.core.domain.step_range import StepRange
from src.core.math.nsteps import nsteps
from src.core.math.numerical_safeguards import require_nonzero_step
from src.search.bounded import searchsortedfirst, searchsortedlast
from src.search.unsafe import unsafe_searchsortedfirst, unsafe_searchsortedlast


def unsafe_searchsorted(a: StepRange, interval: ClosedInterval) -> range:
    """
    Индексы прогрессии, попадающие в интервал, без проверки границ.

    Examples:
        >>> a = StepRange(start=0, step=5, length=10)
        >>> unsafe_searchsorted(a, ClosedInterval.of(7, 22))
        range(3, 6)
        >>> unsafe_searchsorted(a, ClosedInterval.of(-12, 3))
        range(-1, 2)
    """
    first = unsafe_searchsortedfirst(a, interval.left)
    last = unsafe_searchsortedlast(a, interval.right)
    return range(first, last + 1)


def searchsorted(a: StepRange, interval: ClosedInterval) -> range:
    """
    Индексы прогрессии, попадающие в интервал, в пределах [1, length].

    Examples:
        >>> a = StepRange(start=0, step=5, length=10)
        >>> searchsorted(a, ClosedInterval.of(-12, 3))
        range(1, 2)
    """
    first = searchsortedfirst(a, interval.left)
    last = searchsortedlast(a, interval.right)
    return range(first, last + 1)


def relativewindow(a: StepRange, interval: ClosedInterval) -> tuple[range, StepRange]:
    """
    Окно интервала относительно нуля для шага прогрессии.

    Алгоритм:
        s    = step(a)  (DoubleDouble сохраняется как есть)
        idx  = nsteps(left, s) .. nsteps(right, s)
        vals = StepRange(start=first(idx) * s, step=s, length=len(idx))

    Returns:
        (idx, vals), где vals[k] == idx[k] * s

    Raises:
        InvalidStep: Если step == 0

    Examples:
        >>> idx, vals = relativewindow(StepRange(start=3, step=5, length=10), ClosedInterval.of(-12, 12))
        >>> idx
        range(-2, 3)
        >>> vals
        StepRange(start=-10, step=5, length=5)
    """
    s = a.step
    require_nonzero_step(s)
    idx = range(nsteps(interval.left, s), nsteps(interval.right, s) + 1)
    vals = StepRange(start=idx.start * s, step=s, length=len(idx))
    return idx, vals
