"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную корректность операций над долей суток:
- NaN/Inf детекция для предотвращения распространения невалидных значений
- Проверка принадлежности полуоткрытому интервалу
- Точное округление round half away from zero (без banker's rounding)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не проходят валидацию
2. Округление детерминировано и не зависит от чётности
"""

import math

# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
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


def is_in_half_open_range(value: float, lower: float, upper: float) -> bool:
    """
    Проверка lower <= value < upper.

    NaN/Inf всегда вне диапазона.

    Examples:
        >>> is_in_half_open_range(0.0, 0.0, 1.0)
        True
        >>> is_in_half_open_range(1.0, 0.0, 1.0)
        False
        >>> is_in_half_open_range(float('nan'), 0.0, 1.0)
        False
    """
    if not is_valid_float(value):
        return False
    return lower <= value < upper


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> int:
    """
    Округление до ближайшего целого, половины от нуля.

    Встроенный round() использует banker's rounding (2.5 → 2), здесь
    2.5 → 3 и -2.5 → -3. Дробная часть value - floor(value) вычисляется
    точно, поэтому граница .5 не искажается добавлением 0.5.

    Args:
        value: Конечное значение

    Returns:
        Округлённое целое

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(2.4999)
        2
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1

    return whole if value >= 0 else -whole
