"""
Calendar Adapter — Тонкая обёртка над datetime

Календарная арифметика (високосные годы, месяцы) НЕ реализуется здесь,
а делегируется модулю datetime. Адаптер лишь:
- Разбирает timestamp на (year, ordinal, секунды от полуночи, наносекунды)
- Строит дату из (year, ordinal) с явной ошибкой для несуществующей даты
- Складывает timestamp с длительностью с явной ошибкой переполнения
- Конвертирует UTC ↔ local-naive без смещения
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from src.decimal_time.domain.errors import InvalidCalendarDate, TimestampOverflow


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalendarParts:
    """Разложение timestamp на календарные компоненты."""

    year: int
    ordinal: int
    seconds_since_midnight: int
    nanosecond: int


# =============================================================================
# DECOMPOSITION
# =============================================================================


def decompose(ts: datetime) -> CalendarParts:
    """
    Разложение timestamp по настенному времени (tzinfo игнорируется).

    Args:
        ts: Timestamp (naive или aware)

    Returns:
        CalendarParts; nanosecond кратно 1_000, т.к. datetime хранит микросекунды
    """
    return CalendarParts(
        year=ts.year,
        ordinal=ts.timetuple().tm_yday,
        seconds_since_midnight=ts.hour * 3600 + ts.minute * 60 + ts.second,
        nanosecond=ts.microsecond * 1_000,
    )


# =============================================================================
# CONSTRUCTION
# =============================================================================


def date_from_ordinal(year: int, ordinal: int) -> date:
    """
    Дата из (year, ordinal day).

    Raises:
        InvalidCalendarDate: Если день не существует в году (366 в невисокосном)
            или год вне диапазона datetime (1..9999)
    """
    try:
        jan_first = date(year, 1, 1)
    except ValueError as e:
        raise InvalidCalendarDate(year, ordinal) from e

    if ordinal < 1:
        raise InvalidCalendarDate(year, ordinal)

    try:
        result = jan_first + timedelta(days=ordinal - 1)
    except OverflowError as e:
        raise InvalidCalendarDate(year, ordinal) from e

    if result.year != year:
        raise InvalidCalendarDate(year, ordinal)

    return result


def midnight(day: date) -> datetime:
    """Naive timestamp 00:00:00.000000 заданной даты."""
    return datetime.combine(day, time.min)


# =============================================================================
# ARITHMETIC
# =============================================================================


def checked_add(ts: datetime, delta: timedelta) -> datetime:
    """
    Сложение timestamp и длительности.

    Raises:
        TimestampOverflow: Если результат вне диапазона datetime
    """
    try:
        return ts + delta
    except OverflowError as e:
        raise TimestampOverflow(ts, delta) from e


# =============================================================================
# UTC
# =============================================================================


def naive_utc(ts: datetime) -> datetime:
    """
    UTC timestamp → naive представление в UTC.

    Aware timestamp сначала переводится в UTC; naive считается уже UTC.
    """
    if ts.tzinfo is None:
        return ts
    return ts.astimezone(timezone.utc).replace(tzinfo=None)


def attach_utc(ts: datetime) -> datetime:
    """Naive timestamp → UTC timestamp с нулевым смещением (без конверсии)."""
    return ts.replace(tzinfo=timezone.utc)
