"""
Domain models and value objects.

Contains the immutable arithmetic progression and closed interval models.
"""

from src.core.domain.interval import ClosedInterval
from src.core.domain.step_range import Scalar, StepRange, StepValue

__all__ = [
    "ClosedInterval",
    "Scalar",
    "StepRange",
    "StepValue",
]
