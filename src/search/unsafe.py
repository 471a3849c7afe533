"""
Unsafe Range Search — поиск позиции в прогрессии за O(1)

Модуль вычисляет индекс вставки запроса x в арифметическую прогрессию
без перебора и без ограничения результата диапазоном [1, length]
(экстраполяция разрешена):
- unsafe_searchsortedfirst: наименьший индекс n, для которого a[n] >= x
- unsafe_searchsortedlast:  наибольший индекс n, для которого a[n] <= x

Специализации (выбираются явно через element_kind один раз на вызов):
- CONTINUOUS: n = round((x - a0) / s) + 1, затем поправка на один шаг
  сравнением с a[n] (округление может промахнуться на единицу)
- INTEGER: точные тождества через floor division, без округления
      last  =  fld(floor(x) - a0, s) + 1
      first = -fld(floor(-x) + a0, s) + 1
- UNSIGNED_QUERY: то же, но вычитание выполняется в знаковом домене
      first = -fld(a0 - signed(x), s) + 1
      last  =  fld(signed(x) - a0, s) + 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. step == 0 → InvalidStep до любой арифметики
2. INTEGER и CONTINUOUS дают одинаковый результат для возрастающих
   целочисленных прогрессий
3. Результат никогда не clamp-ится

Каждая специализация — публичная точка входа и сама проверяет шаг;
диспетчеры unsafe_searchsortedfirst/last проверку не дублируют.
"""

import logging
from enum import Enum
from numbers import Real
from typing import Callable, Final

from src.core.domain.step_range import StepRange
from src.core.math.numerical_safeguards import (
    floor_int,
    is_unsigned_integer,
    require_nonzero_step,
    round_int,
    widen_signed,
)
from src.search.getindex import inbounds_getindex

logger = logging.getLogger(__name__)


# =============================================================================
# ТИПЫ
# =============================================================================


class ElementKind(str, Enum):
    """Специализация поиска по типу элементов прогрессии и запроса."""

    CONTINUOUS = "continuous"
    INTEGER = "integer"
    UNSIGNED_QUERY = "unsigned_query"


def element_kind(a: StepRange, x: Real) -> ElementKind:
    """
    Выбор специализации поиска.

    Returns:
        INTEGER — start и step целые;
        UNSIGNED_QUERY — целочисленная прогрессия и беззнаковый numpy-запрос;
        CONTINUOUS — во всех остальных случаях (float, DoubleDouble)
    """
    if not a.is_integer:
        return ElementKind.CONTINUOUS
    if is_unsigned_integer(x):
        return ElementKind.UNSIGNED_QUERY
    return ElementKind.INTEGER


# =============================================================================
# CONTINUOUS
# =============================================================================


def _nearest_index(a: StepRange, x: Real) -> int:
    x = widen_signed(x)
    return round_int((x - a.plain_start) / a.plain_step) + 1


def unsafe_searchsortedfirst_continuous(a: StepRange, x: Real) -> int:
    """Наименьший n с a[n] >= x: округление частного и поправка на шаг."""
    require_nonzero_step(a.step)
    n = _nearest_index(a, x)
    return n + 1 if inbounds_getindex(a, n) < x else n


def unsafe_searchsortedlast_continuous(a: StepRange, x: Real) -> int:
    """Наибольший n с a[n] <= x: округление частного и поправка на шаг."""
    require_nonzero_step(a.step)
    n = _nearest_index(a, x)
    return n - 1 if x < inbounds_getindex(a, n) else n


# =============================================================================
# INTEGER
# =============================================================================


def unsafe_searchsortedfirst_integer(a: StepRange, x: Real) -> int:
    require_nonzero_step(a.step)
    a0, s = int(a.start), int(a.step)
    return -((floor_int(-widen_signed(x)) + a0) // s) + 1


def unsafe_searchsortedlast_integer(a: StepRange, x: Real) -> int:
    require_nonzero_step(a.step)
    a0, s = int(a.start), int(a.step)
    return (floor_int(widen_signed(x)) - a0) // s + 1


# =============================================================================
# UNSIGNED QUERY
# =============================================================================


def unsafe_searchsortedfirst_unsigned(a: StepRange, x: Real) -> int:
    """
    Как INTEGER, но x беззнаковый: `a0 - x` вычисляется в Python int,
    поэтому не переполняется и не оборачивается по модулю 2**N.
    """
    require_nonzero_step(a.step)
    a0, s = int(a.start), int(a.step)
    return -((a0 - int(x)) // s) + 1


def unsafe_searchsortedlast_unsigned(a: StepRange, x: Real) -> int:
    require_nonzero_step(a.step)
    a0, s = int(a.start), int(a.step)
    return (int(x) - a0) // s + 1


# =============================================================================
# DISPATCH
# =============================================================================

_SearchFn = Callable[[StepRange, Real], int]

_FIRST: Final[dict[ElementKind, _SearchFn]] = {
    ElementKind.CONTINUOUS: unsafe_searchsortedfirst_continuous,
    ElementKind.INTEGER: unsafe_searchsortedfirst_integer,
    ElementKind.UNSIGNED_QUERY: unsafe_searchsortedfirst_unsigned,
}

_LAST: Final[dict[ElementKind, _SearchFn]] = {
    ElementKind.CONTINUOUS: unsafe_searchsortedlast_continuous,
    ElementKind.INTEGER: unsafe_searchsortedlast_integer,
    ElementKind.UNSIGNED_QUERY: unsafe_searchsortedlast_unsigned,
}


def unsafe_searchsortedfirst(a: StepRange, x: Real) -> int:
    """
    Наименьший индекс n (возможно вне [1, length]), для которого a[n] >= x.

    Raises:
        InvalidStep: Если step == 0

    Examples:
        >>> a = StepRange(start=0, step=5, length=10)
        >>> unsafe_searchsortedfirst(a, 12)
        4
        >>> unsafe_searchsortedfirst(a, 100)
        21
    """
    kind = element_kind(a, x)
    logger.debug("searchsortedfirst: kind=%s x=%r", kind.value, x)
    return _FIRST[kind](a, x)


def unsafe_searchsortedlast(a: StepRange, x: Real) -> int:
    """
    Наибольший индекс n (возможно вне [1, length]), для которого a[n] <= x.

    Raises:
        InvalidStep: Если step == 0

    Examples:
        >>> a = StepRange(start=0, step=5, length=10)
        >>> unsafe_searchsortedlast(a, 12)
        3
        >>> unsafe_searchsortedlast(a, -7)
        -1
    """
    kind = element_kind(a, x)
    logger.debug("searchsortedlast: kind=%s x=%r", kind.value, x)
    return _LAST[kind](a, x)
