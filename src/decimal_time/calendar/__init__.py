"""Calendar/Time capability: делегирование календарной арифметики модулю datetime."""

from .adapter import (
    CalendarParts,
    attach_utc,
    checked_add,
    date_from_ordinal,
    decompose,
    midnight,
    naive_utc,
)

__all__ = [
    "CalendarParts",
    "decompose",
    "date_from_ordinal",
    "midnight",
    "checked_add",
    "naive_utc",
    "attach_utc",
]
