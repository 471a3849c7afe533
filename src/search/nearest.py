"""
Nearest-Value Search — индекс ближайшего элемента

Правило: idx = первый индекс с элементом >= x; шаг назад на idx - 1
делается только при строгом улучшении расстояния. При равенстве
расстояний до двух соседей остаётся верхний индекс (округление вверх).
Для повторяющихся значений это даёт первый из повторов, если x <= них,
и последний, если x больше.
"""

from numbers import Real

from src.core.domain.step_range import StepRange
from src.search.bounded import Searchable, searchsortedfirst
from src.search.getindex import getindex, inbounds_getindex
from src.search.unsafe import unsafe_searchsortedfirst


def _element(seq: Searchable, i: int) -> Real:
    if isinstance(seq, StepRange):
        return getindex(seq, i)
    return seq[i - 1]


def searchsortednearest(seq: Searchable, x: Real) -> int:
    """
    1-based индекс элемента отсортированной последовательности, ближайшего к x.

    Args:
        seq: StepRange или отсортированная по возрастанию последовательность
        x: Запрос

    Returns:
        Индекс в [1, len(seq)] (1 для пустой последовательности)

    Examples:
        >>> a = StepRange(start=0, step=5, length=10)
        >>> searchsortednearest(a, 12)
        3
        >>> searchsortednearest(a, 12.5)
        4
        >>> searchsortednearest([1, 2, 2, 2, 3], 2.4)
        4
    """
    idx = searchsortedfirst(seq, x)
    if idx > 1 and (idx > len(seq) or (_element(seq, idx) - x) > (x - _element(seq, idx - 1))):
        idx -= 1
    return idx


def unsafe_searchsortednearest(a: StepRange, x: Real) -> int:
    """
    Как searchsortednearest, но без проверки границ: индекс может лежать
    вне [1, length], если x вне покрытого прогрессией отрезка.

    Raises:
        InvalidStep: Если step == 0

    Examples:
        >>> a = StepRange(start=0, step=5, length=10)
        >>> unsafe_searchsortednearest(a, 62)
        13
    """
    idx = unsafe_searchsortedfirst(a, x)
    if (inbounds_getindex(a, idx) - x) > (x - inbounds_getindex(a, idx - 1)):
        idx -= 1
    return idx
