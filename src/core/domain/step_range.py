"""
StepRange — Модель арифметической прогрессии

Immutable Pydantic модель прогрессии (start, step, length). Элементы не
хранятся: элемент с 1-based индексом i равен start + (i - 1) * step.
Это единственное представление, на которое опираются все поисковые
операции.

Нулевой шаг допустим при создании модели, но любая операция поиска или
вычисления смещения над такой прогрессией поднимает InvalidStep.
"""

from typing import Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.double_double import DoubleDouble
from src.core.math.numerical_safeguards import is_integer_value, is_valid_float, widen_signed

Scalar = Union[int, float]
StepValue = Union[int, float, DoubleDouble]


def _check_finite(v: StepValue, name: str) -> StepValue:
    limbs = (v.hi, v.lo) if isinstance(v, DoubleDouble) else (v,)
    for limb in limbs:
        if isinstance(limb, float) and not is_valid_float(limb):
            raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {v}")
    return v


class StepRange(BaseModel):
    """
    Арифметическая прогрессия start, start + step, ..., длиной length.

    Immutable модель (frozen=True). start и step могут быть DoubleDouble,
    если шаг не представим точно в float.
    """

    start: StepValue = Field(..., description="Начало прогрессии (элемент с индексом 1)")
    step: StepValue = Field(..., description="Шаг (ненулевой для поиска)")
    length: int = Field(..., ge=0, description="Количество элементов")

    model_config = {"frozen": True}

    @field_validator("start", "step", mode="before")
    @classmethod
    def widen_numpy_integers(cls, v: object) -> object:
        """numpy-целые → Python int, иначе union приводит их к float."""
        return widen_signed(v)

    @field_validator("start", "step")
    @classmethod
    def validate_finite(cls, v: StepValue, info) -> StepValue:
        """NaN/Inf в start/step не имеют смысла для формулы элемента."""
        return _check_finite(v, info.field_name)

    def __len__(self) -> int:
        return self.length

    @property
    def is_integer(self) -> bool:
        """Целочисленная прогрессия: и start, и step — целые."""
        return is_integer_value(self.start) and is_integer_value(self.step)

    @property
    def plain_step(self) -> Scalar:
        """Шаг как обычное число (DoubleDouble схлопывается в float)."""
        if isinstance(self.step, DoubleDouble):
            return float(self.step)
        return self.step

    @property
    def plain_start(self) -> Scalar:
        """Начало как обычное число (DoubleDouble схлопывается в float)."""
        if isinstance(self.start, DoubleDouble):
            return float(self.start)
        return self.start
