"""
Conversion — Конверсия timestamp ↔ DecimalTime

Прямая конверсия (timestamp → DecimalTime) без потерь на микросекундной точности.
Обратная конверсия (DecimalTime → timestamp) содержит единственный шаг
с округлением: доля суток → микросекунды (round half away from zero).

ИНВАРИАНТ ROUND-TRIP:
    to_naive_datetime(from_naive_datetime(ts)) == ts
для любого datetime (точность datetime: микросекунды).
"""

import logging
from datetime import datetime, timedelta

from src.decimal_time.calendar import adapter
from src.decimal_time.domain.decimal_time import DecimalTime
from src.decimal_time.domain.units import (
    fraction_to_micros,
    micros_since_midnight,
    micros_to_fraction,
    split_micros,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ПРЯМАЯ КОНВЕРСИЯ
# =============================================================================


def from_naive_datetime(ts: datetime) -> DecimalTime:
    """
    Конверсия local naive timestamp → DecimalTime.

    Для aware timestamp используется настенное время, смещение игнорируется.

    Args:
        ts: Timestamp

    Returns:
        DecimalTime; decimal_day = микросекунды от полуночи / 86_400_000_000
    """
    parts = adapter.decompose(ts)
    total_micros = micros_since_midnight(parts.seconds_since_midnight, parts.nanosecond)

    # Ошибка валидации здесь означает дефект адаптера, а не невалидный ввод
    result = DecimalTime.new(parts.year, parts.ordinal, micros_to_fraction(total_micros))

    logger.debug("Converted %s -> %r (%d us since midnight)", ts, result, total_micros)
    return result


def from_datetime_utc(ts: datetime) -> DecimalTime:
    """
    Конверсия UTC timestamp → DecimalTime.

    Aware timestamp переводится в UTC; naive считается уже UTC.
    """
    return from_naive_datetime(adapter.naive_utc(ts))


# =============================================================================
# ОБРАТНАЯ КОНВЕРСИЯ
# =============================================================================


def to_naive_datetime(dt: DecimalTime) -> datetime:
    """
    Конверсия DecimalTime → local naive timestamp.

    Порядок:
    1. Дата из (year, day_of_year): здесь отклоняется 366-й день невисокосного года
    2. decimal_day → микросекунды (round half away from zero)
    3. Полночь + целые секунды + остаток микросекунд (checked addition)

    Args:
        dt: DecimalTime

    Returns:
        Naive datetime

    Raises:
        InvalidCalendarDate: (year, day_of_year) не является реальной датой
        TimestampOverflow: сложение вышло за диапазон datetime
    """
    base_date = adapter.date_from_ordinal(dt.year, dt.day_of_year)

    total_micros = fraction_to_micros(dt.decimal_day)
    seconds, micros = split_micros(total_micros)

    result = adapter.midnight(base_date)
    result = adapter.checked_add(result, timedelta(seconds=seconds))
    result = adapter.checked_add(result, timedelta(microseconds=micros))

    logger.debug("Converted %r -> %s (%d us since midnight)", dt, result, total_micros)
    return result


def to_datetime_utc(dt: DecimalTime) -> datetime:
    """
    Конверсия DecimalTime → UTC timestamp.

    Результат to_naive_datetime с tzinfo=UTC, без конверсии смещения.
    """
    return adapter.attach_utc(to_naive_datetime(dt))
