"""
Product inventory and per-product discount rules
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .discounts import BulkPriceDiscount, DiscountStrategy, FreeUnitsDiscount, to_money
from .exceptions import (
    CatalogFrozen,
    DuplicateDiscount,
    DuplicateProduct,
    InvalidProduct,
    UnknownProduct,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    """
    A product in the inventory

    Attributes:
        code: case-sensitive product code, the primary key
        name: human readable name
        price: unit price

    Two products are equal when their codes are equal.
    """
    code: str
    name: str = field(compare=False)
    price: Decimal = field(compare=False)

    def __post_init__(self):
        try:
            price = to_money(self.price)
        except InvalidOperation:
            raise InvalidProduct(self.code, f"price is not a number: {self.price!r}") from None
        if not price.is_finite():
            raise InvalidProduct(self.code, f"price must be finite, got {price}")
        if price < 0:
            raise InvalidProduct(self.code, f"price must not be negative, got {price}")
        object.__setattr__(self, "price", price)


class Catalog:
    """
    Registry of products and the discount attached to each product code

    The catalog is append-only. Once frozen it can be shared by any number
    of checkout sessions.
    """

    def __init__(self):
        self._products: Dict[str, Product] = {}
        self._discounts: Dict[str, DiscountStrategy] = {}
        self._frozen = False

    @property
    def products(self) -> Mapping[str, Product]:
        """Read-only view of code -> Product"""
        return MappingProxyType(self._products)

    @property
    def discounts(self) -> Mapping[str, DiscountStrategy]:
        """Read-only view of code -> DiscountStrategy"""
        return MappingProxyType(self._discounts)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Catalog":
        """Disallow further additions and return self"""
        self._frozen = True
        return self

    def add_products(self, *products: Product) -> None:
        """
        Add one or more products in order

        Stops at the first repeated code; products added before it are kept.
        """
        self._check_not_frozen()
        for product in products:
            if product.code in self._products:
                raise DuplicateProduct(product.code)
            self._products[product.code] = product
            logger.debug(f"Added product {product.code} at {product.price}")

    def register_discount(self, code: str, strategy: DiscountStrategy) -> None:
        """
        Attach a discount strategy to a product code

        Args:
            code: product code, must already be in the catalog
            strategy: the discount to apply to that code
        """
        self._check_not_frozen()
        product = self.get_product(code)
        if code in self._discounts:
            raise DuplicateDiscount(code)
        strategy.validate(product)
        self._discounts[code] = strategy
        logger.debug(f"Registered {strategy!r} for {code}")

    def get_product(self, code: str) -> Product:
        try:
            return self._products[code]
        except KeyError:
            raise UnknownProduct(code) from None

    def lookup_price(self, code: str) -> Decimal:
        """Unit price for a code, raises UnknownProduct if absent"""
        return self.get_product(code).price

    def lookup_discount(self, code: str) -> Optional[DiscountStrategy]:
        """Discount for a code, or None when no discount applies"""
        return self._discounts.get(code)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise CatalogFrozen("catalog is frozen")

    def __contains__(self, code: object) -> bool:
        return code in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return f"Catalog(products={len(self._products)}, discounts={len(self._discounts)}, frozen={self._frozen})"


def demo_catalog() -> Catalog:
    """
    Build the sample shop catalog

    VOUCHER is 2-for-1, TSHIRT drops to 19.00 each from 3 units, MUG has
    no discount. The returned catalog is frozen.
    """
    catalog = Catalog()
    catalog.add_products(
        Product("VOUCHER", "Voucher", Decimal("5.00")),
        Product("TSHIRT", "T-Shirt", Decimal("20.00")),
        Product("MUG", "Coffee Mug", Decimal("7.50")),
    )
    catalog.register_discount("VOUCHER", FreeUnitsDiscount(buy=2, free=1))
    catalog.register_discount("TSHIRT", BulkPriceDiscount(threshold=3, new_price=Decimal("19.00")))
    return catalog.freeze()
