"""
Rich text formatter for receipts and totals
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .session import LineItem

DEFAULT_CURRENCY = "€"
TOTAL_LABEL = "Total Price: "

CENTS = Decimal("0.01")


def format_amount(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Two fractional digits followed by the currency suffix"""
    rounded = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{rounded}{currency}"


class ReceiptFormatter:
    """
    Formatter for checkout output with rich text features
    """

    def __init__(self, console: Optional[Console] = None, currency: str = DEFAULT_CURRENCY):
        """
        Initialize the formatter
        """
        self.console = console or Console()
        self.currency = currency

    def format_total(self, total: Decimal) -> str:
        """The one-line total, e.g. "Total Price: 81.00€" """
        return f"{TOTAL_LABEL}{format_amount(total, self.currency)}"

    def format_receipt(self, items: List[LineItem], total: Decimal) -> Group:
        """
        Format an itemized receipt
        Returns Rich Group with a line table and a total panel
        """
        if not items:
            return Group(Text("Basket is empty", style="dim"), self._create_total_panel(total))

        table = Table(show_header=True, header_style="bold", title="Receipt")
        table.add_column("Code", style="cyan")
        table.add_column("Item")
        table.add_column("Qty", justify="right")
        table.add_column("Unit", justify="right")
        table.add_column("Gross", justify="right")
        table.add_column("Discount", justify="right", style="green")
        table.add_column("Subtotal", justify="right", style="bold")

        for item in items:
            table.add_row(*self._format_row(item))

        return Group(table, self._create_total_panel(total))

    def _format_row(self, item: LineItem) -> List[str]:
        discount = ""
        if item.discount:
            discount = f"-{format_amount(item.discount, self.currency)}"
            if item.strategy is not None:
                discount += f" ({item.strategy.describe()})"

        return [
            item.product.code,
            item.product.name,
            str(item.quantity),
            format_amount(item.product.price, self.currency),
            format_amount(item.gross, self.currency),
            discount,
            format_amount(item.subtotal, self.currency),
        ]

    def _create_total_panel(self, total: Decimal) -> Panel:
        text = Text()
        text.append(TOTAL_LABEL, style="bold")
        text.append(format_amount(total, self.currency), style="bold yellow")
        return Panel(text, border_style="blue")

    def format_plain_receipt(self, items: List[LineItem], total: Decimal) -> str:
        """
        Format receipt as plain text
        """
        lines = []

        for item in items:
            line = (
                f"{item.product.code:<10} {item.quantity:>3} x "
                f"{format_amount(item.product.price, self.currency):>10} "
                f"{format_amount(item.subtotal, self.currency):>10}"
            )
            if item.discount:
                line += f"  (-{format_amount(item.discount, self.currency)})"
            lines.append(line)

        lines.append(self.format_total(total))
        return "\n".join(lines)
