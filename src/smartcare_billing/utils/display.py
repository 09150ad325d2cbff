"""Console display helpers for bills and menus.

Provides banner titles, aligned label/value rows, currency formatting and
the "press any key" pause used by the interactive session.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import click

DEFAULT_WIDTH = 55
LABEL_WIDTH = 20
CENTS = Decimal("0.01")


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Format a monetary amount for display.

    Amounts are rounded half-up to two decimal places with thousands
    separators. Negative amounts place the sign before the symbol.

    Args:
        amount: Amount to format
        symbol: Currency symbol prefix

    Returns:
        Formatted string

    Example:
        >>> format_currency(Decimal("1234.5"))
        '$1,234.50'
        >>> format_currency(Decimal("-5"))
        '-$5.00'
    """
    rounded = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


class ConsoleDisplay:
    """Formatted console output.

    Attributes:
        width: Banner width in characters
        currency_symbol: Symbol used by currency()
        clear_screen: Whether clear() actually clears the terminal
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        currency_symbol: str = "$",
        clear_screen: bool = True,
    ) -> None:
        self.width = width
        self.currency_symbol = currency_symbol
        self.clear_screen = clear_screen

    @property
    def rule(self) -> str:
        return "=" * self.width

    def title(self, text: str) -> None:
        """Print an upper-cased title centered between two rules."""
        click.echo(self.rule)
        centered = text.rjust((self.width + len(text)) // 2)
        click.echo(centered.upper())
        click.echo(self.rule)

    def show_info(self, label: str, value: str) -> None:
        click.echo(f"{label.ljust(LABEL_WIDTH)}: {value}")

    def currency(self, amount: Decimal) -> str:
        return format_currency(amount, self.currency_symbol)

    def clear(self) -> None:
        # click.clear is a no-op when stdout is not a terminal
        if self.clear_screen:
            click.clear()

    def wait(self, info: Optional[str] = None) -> None:
        """Block until a key is pressed (skipped when stdin is not a terminal)."""
        click.pause(info=info or "\nPress any key to continue...")
