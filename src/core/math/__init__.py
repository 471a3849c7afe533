"""
Core math modules для поиска по прогрессиям

Математические примитивы с гарантией численной корректности.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ZERO_STEP_MESSAGE,
    InvalidStep,
    ceil_int,
    clamp,
    floor_int,
    is_integer_value,
    is_unsigned_integer,
    is_valid_float,
    require_nonzero_step,
    round_int,
    widen_signed,
)

# Double-Double
from src.core.math.double_double import (
    SPLIT_BITS,
    DoubleDouble,
    add,
    invert,
    multiply,
    quick_two_sum,
    split,
    two_sum,
)

# Step offsets
from src.core.math.nsteps import nsteps

__all__ = [
    # Numerical Safeguards — Errors
    "ZERO_STEP_MESSAGE",
    "InvalidStep",
    "require_nonzero_step",
    # Numerical Safeguards — Type checks
    "is_integer_value",
    "is_unsigned_integer",
    "is_valid_float",
    "widen_signed",
    # Numerical Safeguards — Rounding
    "ceil_int",
    "floor_int",
    "round_int",
    "clamp",
    # Double-Double — Constants
    "SPLIT_BITS",
    # Double-Double — Types
    "DoubleDouble",
    # Double-Double — Functions
    "add",
    "invert",
    "multiply",
    "quick_two_sum",
    "split",
    "two_sum",
    # Step offsets
    "nsteps",
]
