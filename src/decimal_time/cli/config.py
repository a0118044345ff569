"""ClockConfig — параметры отображения текущего момента в CLI."""

from dataclasses import dataclass
from datetime import timedelta, timezone


@dataclass(frozen=True)
class ClockConfig:
    """Конфигурация вывода decimal-time.

    - utc_offset_hours: фиксированное смещение для отображения (CET = +1)
    - template: шаблон форматтера
    - label: префикс строки вывода
    """
    utc_offset_hours: float = 1.0
    template: str = "%Y.%d%f"
    label: str = "Right now in Decimal Time (DT)"

    @property
    def offset(self) -> timezone:
        """Фиксированная зона для смещения utc_offset_hours."""
        return timezone(timedelta(hours=self.utc_offset_hours))
