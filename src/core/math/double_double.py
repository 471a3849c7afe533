"""
DoubleDouble — Extended-Precision Step Arithmetic

Модуль реализует двухлимбовое (double-double) представление вещественного
числа: значение = hi + lo, где hi несёт старшие биты, lo — поправку.
Используется для шагов прогрессий, которые не представимы точно в float
(например 1/10): при умножении шага на большой индекс ошибка округления
обычного float накапливается, а поправочный лимб её сохраняет.

Строительные блоки (Dekker / Knuth):
- split: обнуление младших SPLIT_BITS бит мантиссы, hi + lo == x точно
- two_sum / quick_two_sum: точная сумма с остатком
- multiply: компенсированное произведение через split(a.hi)
- invert: обратное значение с одной поправкой Ньютона по остатку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DoubleDouble неизменяем, каждая операция создаёт новое значение
2. multiply/invert никогда не перемножают hi-лимбы "наивно"
3. invert: предусловие y.hi != 0 (не проверяется)
"""

import struct
from dataclasses import dataclass
from fractions import Fraction
from numbers import Real
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ binary64
# =============================================================================

# Количество младших бит мантиссы, обнуляемых в split: ceil(53 / 2)
SPLIT_BITS: Final[int] = 27

FLOAT64_BITS: Final[int] = 64

# Маска, сохраняющая знак, экспоненту и старшие 26 бит мантиссы
SPLIT_MASK: Final[int] = ((1 << FLOAT64_BITS) - 1) ^ ((1 << SPLIT_BITS) - 1)


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ НАД float
# =============================================================================


def split(x: float) -> tuple[float, float]:
    """
    Разбиение float на два непересекающихся лимба.

    hi получается обнулением младших SPLIT_BITS бит мантиссы, поэтому
    произведение hi на другое расщеплённое значение вычисляется точно.

    Args:
        x: Исходное значение

    Returns:
        (hi, lo) такие, что hi + lo == x точно

    Examples:
        >>> hi, lo = split(0.1)
        >>> hi + lo == 0.1
        True
    """
    x = float(x)
    (bits,) = struct.unpack("<Q", struct.pack("<d", x))
    (hi,) = struct.unpack("<d", struct.pack("<Q", bits & SPLIT_MASK))
    return hi, x - hi


def two_sum(a: float, b: float) -> tuple[float, float]:
    """Точная сумма: (s, err) такие, что s + err == a + b."""
    s = a + b
    bb = s - a
    err = (a - (s - bb)) + (b - bb)
    return s, err


def quick_two_sum(a: float, b: float) -> tuple[float, float]:
    """Как two_sum, но требует |a| >= |b|."""
    s = a + b
    err = b - (s - a)
    return s, err


def _two_prod_split(hi: float, lo: float, b: float) -> tuple[float, float]:
    # Dekker mul12: (hi, lo) — уже расщеплённое a, результат p + err == a*b
    p = (hi + lo) * b
    bhi, blo = split(b)
    err = ((hi * bhi - p) + hi * blo + lo * bhi) + lo * blo
    return p, err


# =============================================================================
# DOUBLE-DOUBLE
# =============================================================================


@dataclass(frozen=True)
class DoubleDouble:
    """
    Значение hi + lo с расширенной точностью.

    Immutable (frozen=True). Все операции возвращают новый экземпляр.
    """

    hi: float
    lo: float = 0.0

    @classmethod
    def from_float(cls, x: float) -> "DoubleDouble":
        """Построение через split: hi — старшие 26 бит мантиссы, lo — остаток."""
        return cls(*split(x))

    @classmethod
    def from_fraction(cls, value: Union[Fraction, int, str]) -> "DoubleDouble":
        """
        Ближайший float плюс точный остаток округления.

        Examples:
            >>> step = DoubleDouble.from_fraction(Fraction(1, 10))
            >>> step.hi
            0.1
            >>> step.lo != 0.0
            True
        """
        q = Fraction(value)
        hi = float(q)
        lo = float(q - Fraction(hi))
        return cls(hi, lo)

    def __float__(self) -> float:
        return self.hi + self.lo

    def __neg__(self) -> "DoubleDouble":
        return DoubleDouble(-self.hi, -self.lo)

    def __abs__(self) -> "DoubleDouble":
        return -self if self.hi < 0 else self

    def __mul__(self, other: Union[Real, "DoubleDouble"]) -> "DoubleDouble":
        if not isinstance(other, (Real, DoubleDouble)):
            return NotImplemented
        return multiply(self, other)

    __rmul__ = __mul__

    def __add__(self, other: Union[Real, "DoubleDouble"]) -> "DoubleDouble":
        if not isinstance(other, (Real, DoubleDouble)):
            return NotImplemented
        return add(self, other)

    __radd__ = __add__


def _as_double_double(value: Union[Real, DoubleDouble]) -> DoubleDouble:
    if isinstance(value, DoubleDouble):
        return value
    return DoubleDouble(float(value), 0.0)


def add(a: DoubleDouble, b: Union[Real, DoubleDouble]) -> DoubleDouble:
    """
    Сумма двух double-double значений (b может быть обычным числом).

    Старшие и младшие лимбы складываются через two_sum, затем результат
    перенормализуется, чтобы |lo| не превышал половины ulp(hi).
    """
    b = _as_double_double(b)
    s, e = two_sum(a.hi, b.hi)
    t, f = two_sum(a.lo, b.lo)
    e += t
    s, e = quick_two_sum(s, e)
    e += f
    hi, lo = quick_two_sum(s, e)
    return DoubleDouble(hi, lo)


def multiply(a: DoubleDouble, b: Union[Real, DoubleDouble]) -> DoubleDouble:
    """
    Компенсированное произведение a * b.

    Алгоритм:
        c  = split(a.hi) * b.hi          (точное произведение, Dekker)
        cc = (a.hi * b.lo + a.lo * b.hi) + c.lo
        результат = renormalize(c.hi, cc)

    Для обычного числа b: b.lo == 0, перекрёстный член сводится к a.lo * b.

    Args:
        a: Множитель double-double
        b: Обычное число или double-double

    Returns:
        DoubleDouble, hi которого — корректно округлённое произведение,
        lo — остаточная ошибка

    Examples:
        >>> tenth = DoubleDouble.from_fraction(Fraction(1, 10))
        >>> float(multiply(tenth, 3.0))
        0.3
        >>> 0.1 * 3.0
        0.30000000000000004
    """
    b = _as_double_double(b)
    hi, lo = split(a.hi)
    p, err = _two_prod_split(hi, lo, b.hi)
    cc = (a.hi * b.lo + a.lo * b.hi) + err
    return DoubleDouble(*quick_two_sum(p, cc))


def invert(y: Union[DoubleDouble, Real]) -> DoubleDouble:
    """
    1 / y с одной поправкой Ньютона по остатку (Dekker div2).

    Алгоритм:
        c  = 1 / y.hi
        u  = c * y.hi                    (точно: multiply расщепляет c)
        cc = ((1 - u.hi - u.lo) - c * y.lo) / y.hi

    Предусловие: y.hi != 0. Деление на нулевой hi — ответственность
    вызывающего кода.

    Returns:
        DoubleDouble(c, cc)
    """
    y = _as_double_double(y)
    c = 1.0 / y.hi
    # u.hi + u.lo == c * y.hi без округления
    u = multiply(DoubleDouble(c), y.hi)
    cc = (((1.0 - u.hi) - u.lo) - c * y.lo) / y.hi
    return DoubleDouble(c, cc)
