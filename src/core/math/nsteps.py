"""
Step Offsets — Signed Step Count from Zero

Модуль вычисляет, сколько целых шагов `step` укладывается в смещение `x`
относительно нуля: n такое, что n * step — ближайшее к x кратное шага со
стороны нуля, знак n совпадает со знаком x.

Для шага DoubleDouble деление x / step на полной точности недоступно,
поэтому частное вычисляется приближённо и затем проверяется: кандидат
ceil(nf) принимается только если |nc * step| <= |x|, иначе берётся
floor(nf). Проверка защищает от округления частного через границу шага.
"""

from numbers import Real
from typing import Union

from src.core.math.double_double import DoubleDouble, multiply
from src.core.math.numerical_safeguards import (
    ceil_int,
    floor_int,
    require_nonzero_step,
)


def _signed(x: Real, offset: int) -> int:
    return -offset if x < 0 else offset


def nsteps(x: Real, step: Union[Real, DoubleDouble]) -> int:
    """
    Количество шагов от нуля до смещения x.

    Args:
        x: Смещение (координата относительно нуля)
        step: Шаг (обычное число или DoubleDouble)

    Returns:
        Знаковое целое: floor(|x / step|) со знаком x, 0 при x == 0

    Raises:
        InvalidStep: Если step == 0

    Examples:
        >>> nsteps(12, 5)
        2
        >>> nsteps(-12, 5)
        -2
        >>> nsteps(0.3, DoubleDouble.from_fraction("1/10"))
        3
    """
    require_nonzero_step(step)

    if isinstance(step, DoubleDouble):
        return _nsteps_double_double(x, step)

    offset = floor_int(abs(x / step))
    return _signed(x, offset)


def _nsteps_double_double(x: Real, step: DoubleDouble) -> int:
    nf = abs(x / float(step))
    nc = ceil_int(nf)
    if abs(float(multiply(step, nc))) <= abs(x):
        offset = nc
    else:
        offset = floor_int(nf)
    return _signed(x, offset)
