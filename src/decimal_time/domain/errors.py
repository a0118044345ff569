"""
Errors — Иерархия исключений Decimal Time

Две фазы валидации:
- Конструирование DecimalTime (диапазоны day_of_year и decimal_day)
- Обратная конверсия в календарную дату (реализуемость даты, переполнение)

Исключения не наследуют ValueError и поэтому выходят из валидаторов
pydantic как есть, без обёртки в ValidationError.
"""


# =============================================================================
# BASE
# =============================================================================


class DecimalTimeError(Exception):
    """Базовое исключение для всех ошибок Decimal Time."""

    pass


# =============================================================================
# CONSTRUCTION ERRORS
# =============================================================================


class InvalidDayOfYear(DecimalTimeError):
    """
    day_of_year вне диапазона [1, 366].

    Ошибка предусловия: сконструированное значение использовать нельзя.
    """

    def __init__(self, day_of_year: int):
        super().__init__(f"`day_of_year` must be in [1..=366]. Received: {day_of_year}")
        self.day_of_year = day_of_year


class InvalidDecimalFraction(DecimalTimeError):
    """decimal_day вне [0.0, 1.0) или не является конечным числом."""

    def __init__(self, decimal_day: float):
        super().__init__(f"`decimal_day` must be in [0,1). Received: {decimal_day}")
        self.decimal_day = decimal_day


# =============================================================================
# REVERSE CONVERSION ERRORS
# =============================================================================


class InvalidCalendarDate(DecimalTimeError):
    """
    Пара (year, day_of_year) не соответствует реальной дате.

    Например, day_of_year=366 для невисокосного года. Ошибка зависит от
    данных вызывающего кода и может быть обработана им (отклонить запись,
    запросить исправление).
    """

    def __init__(self, year: int, day_of_year: int):
        super().__init__(f"Invalid day_of_year={day_of_year} for year={year}")
        self.year = year
        self.day_of_year = day_of_year


class TimestampOverflow(DecimalTimeError):
    """Сложение длительности вышло за представимый диапазон timestamp."""

    def __init__(self, base: object, delta: object):
        super().__init__(f"Timestamp overflow: {base} + {delta}")
        self.base = base
        self.delta = delta
