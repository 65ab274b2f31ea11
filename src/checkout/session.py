"""
Checkout session: scans product codes against a catalog and totals them
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .catalog import Catalog, Product
from .discounts import DiscountStrategy

logger = logging.getLogger(__name__)


@dataclass
class LineItem:
    """
    Aggregated line for one product code in a basket

    Attributes:
        product: the scanned product
        quantity: number of units scanned
        gross: quantity * unit price
        discount: amount taken off by the product's discount, 0 if none
        strategy: the discount strategy that was applied, if any
    """
    product: Product
    quantity: int
    gross: Decimal
    discount: Decimal
    strategy: Optional[DiscountStrategy] = None

    @property
    def subtotal(self) -> Decimal:
        return self.gross - self.discount


class Checkout:
    """
    A basket of scanned products priced against a catalog

    The catalog is only read, never modified. A session is not safe for
    concurrent scans; the catalog can be shared between sessions.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._counts: Dict[str, int] = {}

    @property
    def counts(self) -> Mapping[str, int]:
        """Read-only view of code -> scanned units"""
        return MappingProxyType(self._counts)

    def scan(self, code: str) -> None:
        """
        Add one unit of a product to the basket

        Raises UnknownProduct, leaving the basket untouched, when the code
        is not in the catalog.
        """
        self.catalog.get_product(code)
        self._counts[code] = self._counts.get(code, 0) + 1
        logger.debug(f"Scanned {code} ({self._counts[code]} in basket)")

    def scan_all(self, codes: Iterable[str]) -> None:
        """Scan codes in order, stopping at the first unknown one"""
        for code in codes:
            self.scan(code)

    def line_items(self) -> List[LineItem]:
        """One LineItem per distinct scanned code, in first-scanned order"""
        items = []
        for code, quantity in self._counts.items():
            product = self.catalog.get_product(code)
            gross = product.price * quantity
            discount = Decimal(0)
            strategy = self.catalog.lookup_discount(code)
            if strategy is not None:
                discount = strategy.apply(quantity, product.price)
            items.append(LineItem(product, quantity, gross, discount, strategy))
        return items

    def total(self) -> Decimal:
        """
        Total price of the basket after discounts

        Returns an unrounded Decimal; rounding is left to display code.
        """
        total = sum((item.subtotal for item in self.line_items()), Decimal(0))
        logger.debug(f"Total for {len(self)} unit(s): {total}")
        return total

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __repr__(self) -> str:
        return f"Checkout(counts={self._counts!r})"
