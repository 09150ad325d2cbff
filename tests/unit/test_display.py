"""Unit tests for console display helpers."""

from decimal import Decimal

import pytest

from smartcare_billing.utils.display import ConsoleDisplay, format_currency


class TestFormatCurrency:
    """Test currency formatting."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            ("0", "$0.00"),
            ("50", "$50.00"),
            ("420.0000", "$420.00"),
            ("1234.5", "$1,234.50"),
            ("0.005", "$0.01"),
            ("0.004", "$0.00"),
            ("-5", "-$5.00"),
            ("1000000", "$1,000,000.00"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_currency(Decimal(amount)) == expected

    def test_custom_symbol(self):
        assert format_currency(Decimal("99.9"), "€") == "€99.90"


class TestConsoleDisplay:
    """Test banner and row output."""

    def test_title_is_centered_and_uppercased(self, capsys):
        display = ConsoleDisplay()

        display.title("Patient Admission")

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "=" * 55,
            "PATIENT ADMISSION".rjust((55 + 17) // 2),
            "=" * 55,
        ]

    def test_title_custom_width(self, capsys):
        display = ConsoleDisplay(width=30)

        display.title("Bill")

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "=" * 30
        assert lines[1] == " " * 13 + "BILL"

    def test_show_info_pads_label(self, capsys):
        ConsoleDisplay().show_info("Name", "Asha")

        assert capsys.readouterr().out == "Name                : Asha\n"

    def test_clear_disabled_does_not_call_click(self, monkeypatch):
        calls = []
        monkeypatch.setattr("smartcare_billing.utils.display.click.clear", lambda: calls.append(1))

        ConsoleDisplay(clear_screen=False).clear()

        assert calls == []

    def test_wait_uses_press_any_key_prompt(self, monkeypatch):
        infos = []
        monkeypatch.setattr(
            "smartcare_billing.utils.display.click.pause",
            lambda info=None: infos.append(info),
        )

        ConsoleDisplay().wait()

        assert infos == ["\nPress any key to continue..."]
