"""
Custom exceptions
"""


class CheckoutError(Exception):
    """Base exception"""
    pass


class DuplicateProduct(CheckoutError):
    """A product code was added to the catalog twice"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"item {code} already exists")


class UnknownProduct(CheckoutError, KeyError):
    """A product code is not in the catalog"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"item {code} does not exist in inventory")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class DuplicateDiscount(CheckoutError):
    """A second discount was registered for the same product code"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"discount for item {code} already exists")


class InvalidDiscountParameters(CheckoutError):
    """Discount parameters don't make sense for the product"""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"invalid discount for item {code}: {reason}")


class InvalidProduct(CheckoutError):
    """Malformed product descriptor"""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"invalid item {code}: {reason}")


class CatalogFrozen(CheckoutError):
    """Mutation attempted on a frozen catalog"""
    pass
