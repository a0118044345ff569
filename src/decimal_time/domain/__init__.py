"""
Domain models and value objects.

Contains the DecimalTime value, unit converters, conversions, formatting and errors.
"""

from src.decimal_time.domain.conversion import (
    from_datetime_utc,
    from_naive_datetime,
    to_datetime_utc,
    to_naive_datetime,
)
from src.decimal_time.domain.decimal_time import DecimalTime, construct
from src.decimal_time.domain.errors import (
    DecimalTimeError,
    InvalidCalendarDate,
    InvalidDayOfYear,
    InvalidDecimalFraction,
    TimestampOverflow,
)
from src.decimal_time.domain.formatting import format_decimal_time, render_fraction
from src.decimal_time.domain.units import (
    DAY_OF_YEAR_MAX,
    DAY_OF_YEAR_MIN,
    MICROS_PER_DAY,
    MICROS_PER_SECOND,
    SECONDS_PER_DAY,
    fraction_to_micros,
    micros_since_midnight,
    micros_to_fraction,
    split_micros,
)

__all__ = [
    # Units module
    "MICROS_PER_SECOND",
    "SECONDS_PER_DAY",
    "MICROS_PER_DAY",
    "DAY_OF_YEAR_MIN",
    "DAY_OF_YEAR_MAX",
    "micros_since_midnight",
    "micros_to_fraction",
    "fraction_to_micros",
    "split_micros",
    # DecimalTime model
    "DecimalTime",
    "construct",
    # Conversions
    "from_naive_datetime",
    "from_datetime_utc",
    "to_naive_datetime",
    "to_datetime_utc",
    # Formatting
    "format_decimal_time",
    "render_fraction",
    # Errors
    "DecimalTimeError",
    "InvalidDayOfYear",
    "InvalidDecimalFraction",
    "InvalidCalendarDate",
    "TimestampOverflow",
]
