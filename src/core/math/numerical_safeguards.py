"""
Numerical Safeguards — Safe Integer/Step Primitives

Модуль обеспечивает численную корректность всех поисковых операций над
арифметическими прогрессиями:
- Защита от нулевого шага (InvalidStep вместо деления на ноль)
- Округление float → int с явной ошибкой на NaN/Inf
- Расширение numpy-целых (в том числе unsigned) в знаковый домен Python int
- Clamp индексов в допустимый диапазон

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на нулевой шаг никогда не происходит (InvalidStep до вычислений)
2. NaN/Inf никогда не превращаются в индекс молча (ValueError)
3. Вычитание с unsigned-запросом выполняется только в знаковом домене
4. Все операции детерминированы и воспроизводимы
"""

import logging
import math
from numbers import Integral, Real
from typing import Final

import numpy as np

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Сообщение об ошибке для прогрессий с нулевым шагом
ZERO_STEP_MESSAGE: Final[str] = "ranges with a zero step are unsupported"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidStep(ValueError):
    """
    Шаг прогрессии равен нулю.

    Поднимается до любой арифметики, делящей на шаг. Никогда не
    перехватывается внутри библиотеки.
    """

    pass


def require_nonzero_step(step: Real) -> None:
    """
    Проверка шага прогрессии перед делением на него.

    Args:
        step: Шаг (int, float или DoubleDouble — любое значение с float())

    Raises:
        InvalidStep: Если шаг равен нулю
    """
    if float(step) == 0.0:
        logger.debug("Rejected zero step: %r", step)
        raise InvalidStep(ZERO_STEP_MESSAGE)


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_integer_value(value: object) -> bool:
    """
    Является ли значение целым числом (Python int или numpy integer).

    bool исключается: True/False не считаются элементами прогрессии.
    """
    return isinstance(value, Integral) and not isinstance(value, bool)


def is_unsigned_integer(value: object) -> bool:
    """Является ли значение беззнаковым numpy-целым (uint8 ... uint64)."""
    return isinstance(value, np.unsignedinteger)


def widen_signed(value: Real) -> Real:
    """
    Расширение numpy-целого в знаковый Python int.

    Python int не ограничен по разрядности, поэтому вычитание
    `a0 - x` для unsigned x не может переполниться или обернуться.
    Остальные значения возвращаются без изменений.

    Examples:
        >>> widen_signed(np.uint8(3)) - 10
        -7
        >>> widen_signed(2.5)
        2.5
    """
    if isinstance(value, np.integer):
        return int(value)
    return value


# =============================================================================
# ОКРУГЛЕНИЕ В INTEGER
# =============================================================================


def _finite(value: Real, name: str) -> Real:
    # numpy.float64 приводится к float: math.floor/round должны вернуть int
    if isinstance(value, float):
        value = float(value)
        if not is_valid_float(value):
            raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")
    return value


def floor_int(value: Real) -> int:
    """
    floor(value) как Python int.

    Raises:
        ValueError: Если value — NaN/Inf

    Examples:
        >>> floor_int(-12.5)
        -13
        >>> floor_int(np.int64(7))
        7
    """
    if is_integer_value(value):
        return int(value)
    return math.floor(_finite(value, "value"))


def ceil_int(value: Real) -> int:
    """
    ceil(value) как Python int.

    Raises:
        ValueError: Если value — NaN/Inf
    """
    if is_integer_value(value):
        return int(value)
    return math.ceil(_finite(value, "value"))


def round_int(value: Real) -> int:
    """
    Округление к ближайшему целому, ничьи — к чётному (round half to even).

    Raises:
        ValueError: Если value — NaN/Inf

    Examples:
        >>> round_int(2.5)
        2
        >>> round_int(3.5)
        4
    """
    if is_integer_value(value):
        return int(value)
    return round(_finite(value, "value"))


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: Real,
    min_value: Real | None = None,
    max_value: Real | None = None,
) -> Real:
    """
    Ограничение значения в заданном диапазоне.

    Если min_value > max_value (пустой диапазон), побеждает max_value.

    Examples:
        >>> clamp(5, 1, 10)
        5
        >>> clamp(-1, 1, 10)
        1
        >>> clamp(15, 1, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
