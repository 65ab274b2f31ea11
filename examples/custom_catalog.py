"""
Example: build a catalog by hand and price a basket
"""

from decimal import Decimal

from rich.console import Console

from checkout import Catalog, Checkout, Product, ReceiptFormatter, create_discount


def build_catalog() -> Catalog:
    """Stationery shop with a 3-for-2 on pens and cheaper notebooks from 5"""
    catalog = Catalog()
    catalog.add_products(
        Product("PEN", "Ballpoint Pen", Decimal("1.20")),
        Product("NOTEBOOK", "A5 Notebook", Decimal("3.50")),
        Product("ERASER", "Eraser", Decimal("0.80")),
    )
    catalog.register_discount("PEN", create_discount("free-units", buy=3))
    catalog.register_discount("NOTEBOOK", create_discount("bulk-price", threshold=5, new_price="3.00"))
    return catalog.freeze()


if __name__ == "__main__":
    checkout = Checkout(build_catalog())
    checkout.scan_all(["PEN", "PEN", "NOTEBOOK", "PEN", "ERASER"] + ["NOTEBOOK"] * 4)

    console = Console()
    formatter = ReceiptFormatter(console=console)
    console.print(formatter.format_receipt(checkout.line_items(), checkout.total()))
