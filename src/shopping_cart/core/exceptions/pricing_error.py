from __future__ import annotations

from shopping_cart.core.exceptions.cart_error import CartError


class PricingError(CartError):
    """Base class for failures while resolving a product's unit price."""

    def __init__(self, product_name: str, message: str) -> None:
        self.product_name = product_name
        super().__init__(message)
