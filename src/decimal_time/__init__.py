"""
Decimal Time — год, порядковый день года и доля суток.

Конверсия timestamp ↔ DecimalTime и минимальный форматтер.
"""

from src.decimal_time.domain import (
    DecimalTime,
    DecimalTimeError,
    InvalidCalendarDate,
    InvalidDayOfYear,
    InvalidDecimalFraction,
    TimestampOverflow,
    construct,
    format_decimal_time,
    from_datetime_utc,
    from_naive_datetime,
    to_datetime_utc,
    to_naive_datetime,
)

__all__ = [
    "DecimalTime",
    "construct",
    "from_naive_datetime",
    "from_datetime_utc",
    "to_naive_datetime",
    "to_datetime_utc",
    "format_decimal_time",
    "DecimalTimeError",
    "InvalidDayOfYear",
    "InvalidDecimalFraction",
    "InvalidCalendarDate",
    "TimestampOverflow",
]
