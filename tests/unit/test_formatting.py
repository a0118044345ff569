"""
Тесты шаблонного форматтера

Поведение %f зафиксировано: из строкового представления доли суток
удаляются ВСЕ ведущие символы '0' ("0.5" → ".5").
"""

import pytest

from src.decimal_time.domain import DecimalTime, format_decimal_time, render_fraction


class TestFormatDecimalTime:
    """Тесты format_decimal_time / DecimalTime.format"""

    def test_all_placeholders(self) -> None:
        """Год, день и доля суток"""
        dec = DecimalTime.new(2025, 100, 0.5)
        assert format_decimal_time(dec, "Year=%Y Day=%d Fraction=%f") == (
            "Year=2025 Day=100 Fraction=.5"
        )

    def test_day_not_zero_padded(self) -> None:
        """%d без zero-padding"""
        dec = DecimalTime.new(2025, 5, 0.5)
        assert dec.format("Date => %Y-%d frac:%f") == "Date => 2025-5 frac:.5"

    def test_cli_template(self) -> None:
        """Шаблон CLI %Y.%d%f"""
        assert DecimalTime.new(2025, 73, 0.5).format("%Y.%d%f") == "2025.73.5"

    def test_midnight_fraction_empty(self) -> None:
        """В полночь %f пуст: 2025.1"""
        assert DecimalTime.new(2025, 1, 0.0).format("%Y.%d%f") == "2025.1"

    def test_longer_fraction(self) -> None:
        """Доля с несколькими знаками"""
        assert DecimalTime.new(2025, 100, 0.123456).format("%f") == ".123456"

    def test_negative_year(self) -> None:
        """Отрицательный год без padding"""
        assert DecimalTime.new(-44, 75, 0.25).format("%Y/%d") == "-44/75"

    def test_every_occurrence_replaced(self) -> None:
        """Замена всех вхождений"""
        assert DecimalTime.new(2025, 7, 0.25).format("%Y%Y %d%d %f%f") == (
            "20252025 77 .25.25"
        )

    def test_unknown_placeholders_untouched(self) -> None:
        """Неизвестные плейсхолдеры остаются как есть"""
        assert DecimalTime.new(2025, 7, 0.25).format("%H:%M %m %Y") == "%H:%M %m 2025"

    @pytest.mark.parametrize("template", ["", "no placeholders", "100%"])
    def test_template_without_placeholders(self, template: str) -> None:
        """Шаблон без плейсхолдеров возвращается без изменений"""
        assert DecimalTime.new(2025, 7, 0.25).format(template) == template

    def test_method_matches_function(self) -> None:
        """DecimalTime.format делегирует в format_decimal_time"""
        dec = DecimalTime.new(2024, 366, 0.999)
        assert dec.format("%Y.%d%f") == format_decimal_time(dec, "%Y.%d%f")


class TestRenderFraction:
    """Тесты render_fraction"""

    def test_half(self) -> None:
        """0.5 → .5"""
        assert render_fraction(0.5) == ".5"

    def test_midnight(self) -> None:
        """0.0 → пустая строка"""
        assert render_fraction(0.0) == ""

    def test_negative_zero(self) -> None:
        """-0.0 сохраняет знак"""
        assert render_fraction(-0.0) == "-0"

    def test_trailing_zeros_dropped(self) -> None:
        """Хвостовые нули не появляются"""
        assert render_fraction(0.25) == ".25"

    def test_small_fraction_positional(self) -> None:
        """Одна микросекунда без экспоненциальной записи"""
        rendered = render_fraction(1 / 86_400_000_000)
        assert "e" not in rendered
        assert rendered.startswith(".00000000001157407407")

    def test_shortest_representation(self) -> None:
        """Кратчайшее round-trip представление"""
        assert render_fraction(0.1) == ".1"
        assert float(render_fraction(0.6310686100694444)) == 0.6310686100694444
