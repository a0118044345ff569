"""
TimeUnits — Централизованный модуль конверсии единиц времени суток

Единственный допустимый способ преобразований между:
- микросекунды от полуночи (int)
- доля суток decimal_day (безразмерная, [0.0, 1.0))

ЗАПРЕЩЕНО делить/умножать на длину суток в обход этого модуля.
"""

from typing import Final

from src.decimal_time.math.numerical_safeguards import round_half_away_from_zero


# =============================================================================
# КОНСТАНТЫ
# =============================================================================
NANOS_PER_MICRO: Final[int] = 1_000

MICROS_PER_SECOND: Final[int] = 1_000_000

SECONDS_PER_DAY: Final[int] = 86_400

# 86_400 * 1_000_000
MICROS_PER_DAY: Final[int] = SECONDS_PER_DAY * MICROS_PER_SECOND

MICROS_PER_DAY_F: Final[float] = float(MICROS_PER_DAY)

# Допустимые ordinal-дни (366 только для високосного года,
# проверяется при материализации даты)
DAY_OF_YEAR_MIN: Final[int] = 1
DAY_OF_YEAR_MAX: Final[int] = 366


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def micros_since_midnight(seconds_since_midnight: int, nanosecond: int) -> int:
    """
    Микросекунды от полуночи.

    Остаток наносекунд усекается (не округляется) до микросекунд.

    Args:
        seconds_since_midnight: Целые секунды от полуночи
        nanosecond: Доля секунды в наносекундах

    Returns:
        seconds * 1_000_000 + nanosecond // 1_000
    """
    return seconds_since_midnight * MICROS_PER_SECOND + nanosecond // NANOS_PER_MICRO


def micros_to_fraction(total_micros: int) -> float:
    """
    Конверсия: микросекунды от полуночи → доля суток.

    Для total_micros < MICROS_PER_DAY результат всегда в [0.0, 1.0).
    """
    return total_micros / MICROS_PER_DAY_F


def fraction_to_micros(decimal_day: float) -> int:
    """
    Конверсия: доля суток → микросекунды от полуночи.

    Единственный шаг с потерей точности во всём pipeline.
    Округление: round half away from zero.

    Args:
        decimal_day: Доля суток

    Returns:
        Целое число микросекунд (может быть равно MICROS_PER_DAY,
        если decimal_day отстоит от 1.0 менее чем на полмикросекунды)
    """
    return round_half_away_from_zero(decimal_day * MICROS_PER_DAY_F)


def split_micros(total_micros: int) -> tuple[int, int]:
    """
    Разбиение микросекунд на (целые секунды, остаток микросекунд).
    """
    return divmod(total_micros, MICROS_PER_SECOND)
