"""
ClosedInterval — Замкнутый интервал координат [left, right]

Используется только как пара (left, right) для оконных запросов.
Порядок left <= right не проверяется: обратный интервал даёт пустое окно.

numpy-целые границы (в том числе unsigned) расширяются в Python int:
значение сохраняется точно, а поиск идёт по целочисленной ветке.
"""

from typing import Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import widen_signed


class ClosedInterval(BaseModel):
    """Замкнутый интервал [left, right]. Immutable (frozen=True)."""

    left: Union[int, float] = Field(..., description="Левая граница (включительно)")
    right: Union[int, float] = Field(..., description="Правая граница (включительно)")

    model_config = {"frozen": True}

    @field_validator("left", "right", mode="before")
    @classmethod
    def widen_numpy_integers(cls, v: object) -> object:
        return widen_signed(v)

    @classmethod
    def of(cls, left: Union[int, float], right: Union[int, float]) -> "ClosedInterval":
        """Короткий конструктор: ClosedInterval.of(7, 22)."""
        return cls(left=left, right=right)
