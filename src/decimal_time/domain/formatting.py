"""
Formatting — Минимальный шаблонный форматтер DecimalTime

Плейсхолдеры (литеральная замена всех вхождений, порядок %Y → %d → %f):
- %Y: год (без padding, может быть отрицательным)
- %d: день года (без zero-padding)
- %f: доля суток, из строки удаляются ВСЕ ведущие символы '0' ("0.5" → ".5")

Экранирования нет, неизвестные плейсхолдеры остаются как есть.
"""

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.decimal_time.domain.decimal_time import DecimalTime


def render_fraction(decimal_day: float) -> str:
    """
    Позиционное представление доли суток без ведущих нулей.

    Кратчайшее round-trip представление float (repr) разворачивается
    в позиционную запись без экспоненты и без хвостовых нулей, полночь
    0.0 → "0" → "" (как Display для f64):
    1.1574074074074074e-11 → "0.000000000011574074074074074" → ".000000000011574074074074074".

    Examples:
        >>> render_fraction(0.5)
        '.5'
        >>> render_fraction(0.0)
        ''
    """
    positional = format(Decimal(repr(decimal_day)).normalize(), "f")
    return positional.lstrip("0")


def format_decimal_time(dt: "DecimalTime", template: str) -> str:
    """
    Подстановка плейсхолдеров в шаблон.

    Args:
        dt: DecimalTime
        template: Произвольная строка (в т.ч. пустая)

    Returns:
        Строка с подставленными значениями
    """
    output = template.replace("%Y", str(dt.year))
    output = output.replace("%d", str(dt.day_of_year))

    if "%f" in output:
        output = output.replace("%f", render_fraction(dt.decimal_day))

    return output
