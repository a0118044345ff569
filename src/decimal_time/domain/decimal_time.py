"""
DecimalTime — Модель даты/времени в десятичном формате

Immutable Pydantic модель: год + порядковый день года + доля суток.
Полная совместимость с JSON Schema (contracts/schema/decimal_time.json).

Валидация двухфазная:
1. Конструирование: только диапазоны (day_of_year ∈ [1, 366], decimal_day ∈ [0, 1))
2. Материализация в календарную дату: реализуемость (year, day_of_year),
   например day_of_year=366 в невисокосном году
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.decimal_time.domain.errors import InvalidDayOfYear, InvalidDecimalFraction
from src.decimal_time.domain.units import DAY_OF_YEAR_MAX, DAY_OF_YEAR_MIN
from src.decimal_time.math.numerical_safeguards import is_in_half_open_range


# =============================================================================
# DECIMAL TIME MODEL
# =============================================================================


class DecimalTime(BaseModel):
    """
    Дата/время в Decimal Time.

    Immutable модель (frozen=True): равенство структурное, экземпляр хэшируемый.
    - year: полный год (может быть отрицательным, без ограничений)
    - day_of_year: порядковый день года, 1-based
    - decimal_day: доля прошедших суток, 0.0 = полночь, 0.5 = полдень
    """

    year: int = Field(..., strict=True, description="Полный год (например, 2025)")
    day_of_year: int = Field(..., strict=True, description="Порядковый день года [1, 366]")
    decimal_day: float = Field(..., description="Доля суток [0.0, 1.0)")

    model_config = {"frozen": True}

    @field_validator("day_of_year")
    @classmethod
    def validate_day_of_year(cls, v: int) -> int:
        """
        Проверка диапазона дня года.

        Соответствие високосности года НЕ проверяется (см. to_naive_datetime).
        """
        if not DAY_OF_YEAR_MIN <= v <= DAY_OF_YEAR_MAX:
            raise InvalidDayOfYear(v)
        return v

    @field_validator("decimal_day")
    @classmethod
    def validate_decimal_day(cls, v: float) -> float:
        """Проверка 0.0 <= decimal_day < 1.0 (NaN/Inf отклоняются)."""
        if not is_in_half_open_range(v, 0.0, 1.0):
            raise InvalidDecimalFraction(v)
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, year: int, day_of_year: int, decimal_day: float) -> "DecimalTime":
        """
        Позиционный конструктор с валидацией.

        Raises:
            InvalidDayOfYear: day_of_year вне [1, 366]
            InvalidDecimalFraction: decimal_day вне [0.0, 1.0)
        """
        return cls(year=year, day_of_year=day_of_year, decimal_day=decimal_day)

    @classmethod
    def from_naive_datetime(cls, ts: datetime) -> "DecimalTime":
        """Конверсия local naive timestamp → DecimalTime."""
        from src.decimal_time.domain.conversion import from_naive_datetime

        return from_naive_datetime(ts)

    @classmethod
    def from_datetime_utc(cls, ts: datetime) -> "DecimalTime":
        """Конверсия UTC timestamp → DecimalTime."""
        from src.decimal_time.domain.conversion import from_datetime_utc

        return from_datetime_utc(ts)

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "DecimalTime":
        """
        Построение из JSON документа с проверкой по контракту.

        Raises:
            jsonschema.ValidationError: Документ не соответствует схеме
        """
        from src.decimal_time.contracts import validate_decimal_time

        validate_decimal_time(data)
        return cls.model_validate(data)

    # -------------------------------------------------------------------------
    # Обратная конверсия и форматирование
    # -------------------------------------------------------------------------

    def to_naive_datetime(self) -> datetime:
        """
        Конверсия DecimalTime → local naive timestamp.

        Raises:
            InvalidCalendarDate: (year, day_of_year) не является реальной датой
            TimestampOverflow: результат вне диапазона datetime
        """
        from src.decimal_time.domain.conversion import to_naive_datetime

        return to_naive_datetime(self)

    def to_datetime_utc(self) -> datetime:
        """Конверсия DecimalTime → UTC timestamp (tzinfo=UTC, без смещения)."""
        from src.decimal_time.domain.conversion import to_datetime_utc

        return to_datetime_utc(self)

    def format(self, template: str) -> str:
        """
        Форматирование с плейсхолдерами %Y, %d, %f.

        Examples:
            >>> DecimalTime.new(2025, 100, 0.5).format("Year=%Y Day=%d Fraction=%f")
            'Year=2025 Day=100 Fraction=.5'
        """
        from src.decimal_time.domain.formatting import format_decimal_time

        return format_decimal_time(self, template)


def construct(year: int, day_of_year: int, decimal_day: float) -> DecimalTime:
    """Функциональный алиас DecimalTime.new."""
    return DecimalTime.new(year, day_of_year, decimal_day)
