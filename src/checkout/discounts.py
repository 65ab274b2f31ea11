"""
Discount strategies applied per product code
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from .exceptions import InvalidDiscountParameters

logger = logging.getLogger(__name__)


def to_money(value: Any) -> Decimal:
    """
    Convert a price-like value to Decimal

    Floats go through str() so that 7.5 becomes Decimal("7.5") rather than
    the binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class DiscountStrategy(ABC):
    """
    Abstract base class for discount strategies

    A strategy computes the discount for the units of a single product code.
    It never sees other codes and keeps no state between calls.
    """

    @abstractmethod
    def apply(self, count: int, price: Decimal) -> Decimal:
        """
        Compute the discount for a number of units

        Args:
            count: number of scanned units (>= 0)
            price: unit price of the product

        Returns the discount amount, between 0 and count * price, unrounded
        """
        pass

    def validate(self, product) -> None:
        """
        Check the strategy parameters against the product it is attached to

        Raises InvalidDiscountParameters carrying the product code. Strategies
        with nothing to check can keep this default.
        """
        pass

    def describe(self) -> str:
        """Short human readable label used on receipts"""
        return repr(self)


def _is_count(value) -> bool:
    """True for a real int, bool excluded"""
    return isinstance(value, int) and not isinstance(value, bool)


class FreeUnitsDiscount(DiscountStrategy):
    """
    "Buy X, get free units" discount

    One unit's price is taken off for every completed group of `buy` units.
    `free` is carried for display and configuration but does not change the
    amount: a 2-for-1 and a 2-for-2 with buy=2 discount the same.
    """

    def __init__(self, buy: int, free: int = 1):
        self.buy = buy
        self.free = free

    def apply(self, count: int, price: Decimal) -> Decimal:
        groups = count // self.buy
        return groups * price

    def validate(self, product) -> None:
        if not _is_count(self.buy) or self.buy < 1:
            raise InvalidDiscountParameters(product.code, f"group size must be a positive integer, got {self.buy!r}")
        if not _is_count(self.free) or self.free < 0:
            raise InvalidDiscountParameters(product.code, f"free units must be a non-negative integer, got {self.free!r}")

    def describe(self) -> str:
        return f"{self.buy}-for-{self.buy - 1}" if self.free == 1 else f"buy {self.buy} get {self.free} free"

    def __eq__(self, other) -> bool:
        if not isinstance(other, FreeUnitsDiscount):
            return NotImplemented
        return (self.buy, self.free) == (other.buy, other.free)

    def __hash__(self) -> int:
        return hash((FreeUnitsDiscount, self.buy, self.free))

    def __repr__(self) -> str:
        return f"FreeUnitsDiscount(buy={self.buy}, free={self.free})"


class BulkPriceDiscount(DiscountStrategy):
    """
    Lower unit price once a quantity threshold is reached

    The reduced price applies to every unit, including the ones scanned
    before the threshold was crossed.
    """

    def __init__(self, threshold: int, new_price):
        self.threshold = threshold
        self.new_price = to_money(new_price)

    def apply(self, count: int, price: Decimal) -> Decimal:
        if count < self.threshold:
            return Decimal(0)
        return (price - self.new_price) * count

    def validate(self, product) -> None:
        if not _is_count(self.threshold) or self.threshold < 1:
            raise InvalidDiscountParameters(product.code, f"threshold must be a positive integer, got {self.threshold!r}")
        if not self.new_price.is_finite():
            raise InvalidDiscountParameters(product.code, f"new price must be finite, got {self.new_price}")
        if self.new_price < 0:
            raise InvalidDiscountParameters(product.code, f"new price must not be negative, got {self.new_price}")
        if self.new_price > product.price:
            raise InvalidDiscountParameters(
                product.code,
                f"new price {self.new_price} exceeds unit price {product.price}"
            )

    def describe(self) -> str:
        return f"{self.new_price:.2f} each from {self.threshold}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, BulkPriceDiscount):
            return NotImplemented
        return (self.threshold, self.new_price) == (other.threshold, other.new_price)

    def __hash__(self) -> int:
        return hash((BulkPriceDiscount, self.threshold, self.new_price))

    def __repr__(self) -> str:
        return f"BulkPriceDiscount(threshold={self.threshold}, new_price={self.new_price})"


def create_discount(kind: str, **params) -> DiscountStrategy:
    """
    Factory function to create a discount strategy by name

    Args:
        kind: "free-units" (buy, free) or "bulk-price" (threshold, new_price)
        params: keyword arguments for the strategy constructor

    Returns the matching DiscountStrategy instance
    """
    logger.debug(f"Creating {kind} discount with {params}")

    if kind == "free-units":
        return FreeUnitsDiscount(**params)
    elif kind == "bulk-price":
        return BulkPriceDiscount(**params)
    else:
        raise ValueError(f"Unknown discount kind: {kind}")
