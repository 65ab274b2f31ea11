__version__ = "0.1.0"

# Package metadata
__description__ = "Supermarket checkout pricing engine with per-product discount rules"

# Public API
from .discounts import DiscountStrategy, FreeUnitsDiscount, BulkPriceDiscount, create_discount
from .catalog import Catalog, Product, demo_catalog
from .session import Checkout, LineItem
from .formatter import ReceiptFormatter, format_amount
from .exceptions import (
    CheckoutError,
    DuplicateProduct,
    UnknownProduct,
    DuplicateDiscount,
    InvalidDiscountParameters,
    InvalidProduct,
    CatalogFrozen
)

__all__ = [
    # Version
    "__version__",

    # Main classes
    "Catalog",
    "Checkout",
    "ReceiptFormatter",

    # Discount strategies
    "DiscountStrategy",
    "FreeUnitsDiscount",
    "BulkPriceDiscount",
    "create_discount",

    # Data classes
    "Product",
    "LineItem",

    # Helpers
    "demo_catalog",
    "format_amount",

    # Exceptions
    "CheckoutError",
    "DuplicateProduct",
    "UnknownProduct",
    "DuplicateDiscount",
    "InvalidDiscountParameters",
    "InvalidProduct",
    "CatalogFrozen"
]
