"""
Bounded Search — поиск с учётом границ [1, length]

1-based аналоги searchsortedfirst/searchsortedlast:
- для StepRange — closed form: частное clamp-ится в [1, length], затем
  поправка на один шаг (first может вернуть length + 1, last — 0)
- для любой другой отсортированной последовательности — bisect

Последовательность должна быть отсортирована по возрастанию; это не
проверяется.
"""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from numbers import Real
from typing import Union

from src.core.domain.step_range import StepRange
from src.core.math.numerical_safeguards import clamp, require_nonzero_step, round_int, widen_signed
from src.search.getindex import inbounds_getindex

Searchable = Union[StepRange, Sequence]


def _clamped_index(a: StepRange, x: Real) -> int:
    q = (widen_signed(x) - a.plain_start) / a.plain_step + 1
    return round_int(clamp(q, 1, a.length))


def searchsortedfirst(seq: Searchable, x: Real) -> int:
    """
    Первый 1-based индекс i с seq[i] >= x; len(seq) + 1 если такого нет.

    Raises:
        InvalidStep: Если seq — StepRange с нулевым шагом

    Examples:
        >>> searchsortedfirst(StepRange(start=0, step=5, length=10), 12)
        4
        >>> searchsortedfirst([1, 2, 2, 3], 2)
        2
    """
    if not isinstance(seq, StepRange):
        return bisect_left(seq, x) + 1

    require_nonzero_step(seq.step)
    if seq.length == 0:
        return 1
    n = _clamped_index(seq, x)
    return n + 1 if inbounds_getindex(seq, n) < x else n


def searchsortedlast(seq: Searchable, x: Real) -> int:
    """
    Последний 1-based индекс i с seq[i] <= x; 0 если такого нет.

    Raises:
        InvalidStep: Если seq — StepRange с нулевым шагом

    Examples:
        >>> searchsortedlast(StepRange(start=0, step=5, length=10), 12)
        3
        >>> searchsortedlast([1, 2, 2, 3], 2)
        3
    """
    if not isinstance(seq, StepRange):
        return bisect_right(seq, x)

    require_nonzero_step(seq.step)
    if seq.length == 0:
        return 0
    n = _clamped_index(seq, x)
    return n - 1 if x < inbounds_getindex(seq, n) else n
