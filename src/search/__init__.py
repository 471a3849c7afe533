"""
Closed-form search over arithmetic progressions.

Все индексы 1-based. Функции с префиксом unsafe_ не ограничивают результат
диапазоном [1, length].
"""

from .bounded import searchsortedfirst, searchsortedlast
from .getindex import getindex, inbounds_getindex
from .nearest import searchsortednearest, unsafe_searchsortednearest
from .unsafe import (
    ElementKind,
    element_kind,
    unsafe_searchsortedfirst,
    unsafe_searchsortedfirst_continuous,
    unsafe_searchsortedfirst_integer,
    unsafe_searchsortedfirst_unsigned,
    unsafe_searchsortedlast,
    unsafe_searchsortedlast_continuous,
    unsafe_searchsortedlast_integer,
    unsafe_searchsortedlast_unsigned,
)
from .window import relativewindow, searchsorted, unsafe_searchsorted

__all__ = [
    # Element access
    "getindex",
    "inbounds_getindex",
    # Bounded search
    "searchsortedfirst",
    "searchsortedlast",
    # Unsafe search — dispatch
    "ElementKind",
    "element_kind",
    "unsafe_searchsortedfirst",
    "unsafe_searchsortedlast",
    # Unsafe search — specializations
    "unsafe_searchsortedfirst_continuous",
    "unsafe_searchsortedfirst_integer",
    "unsafe_searchsortedfirst_unsigned",
    "unsafe_searchsortedlast_continuous",
    "unsafe_searchsortedlast_integer",
    "unsafe_searchsortedlast_unsigned",
    # Nearest
    "searchsortednearest",
    "unsafe_searchsortednearest",
    # Windowing
    "relativewindow",
    "searchsorted",
    "unsafe_searchsorted",
]
