"""
Core math modules для Decimal Time

Численные примитивы с гарантией детерминированности.
"""

from src.decimal_time.math.numerical_safeguards import (
    is_in_half_open_range,
    is_valid_float,
    round_half_away_from_zero,
)

__all__ = [
    "is_valid_float",
    "is_in_half_open_range",
    "round_half_away_from_zero",
]
